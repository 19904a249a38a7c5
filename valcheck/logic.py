"""
Logical combinators for valcheck.

Both combinators run every sub-check, so the aggregate they return always
holds the full set of failures.
"""

from __future__ import annotations

from typing import Any, Callable

from .core import Check, to_checks
from .lib.helpers import aggregate, run_all
from .types import CheckErr


def and_(*checks: Check | Callable) -> Check:
    """
    Pass when every sub-check passes.

    On failure the aggregate holds only the failing sub-checks' records.

    Usage:
        logic.and_(expect.instanceof(int), expect.not_(0))
        expect.instanceof(int) & expect.not_(0)
    """
    members = to_checks(checks)

    def check(received: Any) -> CheckErr | None:
        errs = [err for err in run_all(members, received) if err is not None]
        return aggregate(members, received, errs)

    return Check(fn=check, name="and_")


def or_(*checks: Check | Callable) -> Check:
    """
    Pass when at least one sub-check passes.

    When all fail the aggregate holds every sub-check's record.

    Usage:
        logic.or_(expect.type_(int), expect.type_(float))
        expect.type_(int) | expect.type_(float)
    """
    members = to_checks(checks)

    def check(received: Any) -> CheckErr | None:
        outcomes = run_all(members, received)
        if any(err is None for err in outcomes):
            return None
        return aggregate(members, received, outcomes)

    return Check(fn=check, name="or_")
