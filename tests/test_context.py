"""
Tests for check_context configuration.
"""

from valcheck import check, check_context, expect, is_strict


class TestCheckContext:
    def test_strict_by_default(self):
        assert is_strict()
        assert not check(1.0, expect.value(1)).is_valid()

    def test_relaxed(self):
        with check_context(strict=False):
            assert not is_strict()
            assert check(1.0, expect.value(1)).is_valid()
            assert check(True, expect.any_(1, 2)).is_valid()
            assert not check(1, expect.not_(True)).is_valid()

        assert is_strict()

    def test_read_at_evaluation_time(self):
        is_one = expect.value(1)
        with check_context(strict=False):
            assert is_one(1.0) is None
        assert is_one(1.0) is not None

    def test_restored_after_exception(self):
        try:
            with check_context(strict=False):
                raise RuntimeError("boom")
        except RuntimeError:
            pass
        assert is_strict()

    def test_type_checks_unaffected(self):
        with check_context(strict=False):
            assert expect.type_(int)(True) is not None
