"""
Tests for pydantic failure reports.
"""

import json

from valcheck import ErrReport, NotIterableError, ResultReport, check, expect


class TestErrReport:
    def test_leaf(self):
        report = ErrReport.from_err(expect.type_(list)({}))
        assert report.expected == "list"
        assert report.received == "dict"
        assert report.errs == []

    def test_nested(self):
        err = expect.properties({"tags": expect.for_of(expect.type_(str))})(
            {"tags": ["a", 1]}
        )
        report = ErrReport.from_err(err)
        tags = report.errs[0]
        assert tags.property == "tags"
        assert tags.errs[0].index == 1
        assert tags.errs[0].received == "int"

    def test_reason(self):
        report = ErrReport.from_err(expect.for_of(expect.value(1))(5))
        assert report.reason == str(NotIterableError())


class TestResultReport:
    def test_valid(self):
        report = check(1, expect.value(1)).report()
        assert report == ResultReport(valid=True, errors=[])

    def test_json(self):
        report = check({"a": 2}, expect.properties({"a": expect.value(1)})).report()
        data = json.loads(report.model_dump_json())
        assert data["valid"] is False
        child = data["errors"][0]["errs"][0]
        assert child["property"] == "a"
        assert child["expected"] == "1"
        assert child["received"] == "2"
