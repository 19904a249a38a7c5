"""
Tests for the CheckErr failure record.
"""

import dataclasses

import pytest

from valcheck import MISSING, CheckErr, expect


class TestCheckErr:
    def test_defaults(self):
        err = CheckErr(expected=1, received=2)
        assert err.property is None
        assert err.index is None
        assert err.errs == ()
        assert err.reason is None
        assert not err.is_aggregate()

    def test_frozen(self):
        err = CheckErr(expected=1, received=2)
        with pytest.raises(dataclasses.FrozenInstanceError):
            err.property = "a"

    def test_at_returns_copy(self):
        err = CheckErr(expected=1, received=2)
        located = err.at(property="a")
        assert located is not err
        assert located.property == "a"
        assert err.property is None
        assert located.at(index=3) == CheckErr(
            expected=1, received=2, property="a", index=3
        )

    def test_at_preserves_payload(self):
        child = CheckErr(expected=1, received=2)
        err = CheckErr(expected="e", received="r", errs=(child,))
        located = err.at(index=0)
        assert located.expected == "e"
        assert located.received == "r"
        assert located.errs == (child,)

    def test_at_accepts_falsy_locators(self):
        err = CheckErr(expected=1, received=2)
        assert err.at(index=0).index == 0
        assert err.at(property="").property == ""


class TestWalk:
    def test_leaf(self):
        err = CheckErr(expected=1, received=2)
        assert list(err.walk()) == [((), err)]

    def test_paths(self):
        c = expect.properties(
            {
                "name": expect.type_(str),
                "tags": expect.for_of(expect.type_(str)),
            }
        )
        err = c({"name": 1, "tags": ["a", 2, 3]})
        paths = [path for path, _ in err.walk()]
        assert paths == [("name",), ("tags", 1), ("tags", 2)]

    def test_field_inside_iteration(self):
        err = expect.for_of(expect.property_("k", 1))([{"k": 1}, {"k": 2}])
        assert [path for path, _ in err.walk()] == [(1, "k")]

    def test_leaves_are_not_aggregates(self):
        err = expect.for_of(expect.value(0))([1, 2])
        assert all(not leaf.is_aggregate() for _, leaf in err.walk())


class TestMissing:
    def test_falsy(self):
        assert not MISSING

    def test_repr(self):
        assert repr(MISSING) == "MISSING"
