"""
Core classes for valcheck.

Provides the Check wrapper, the Result collector and the check() entrypoint.
"""

from __future__ import annotations

import inspect
import logging
from dataclasses import dataclass
from typing import Any, Callable, Generic, Iterator, Optional, TypeVar

from .errors import (
    ConfigurationError,
    ExpectedOneArgumentError,
    NoChecksError,
    ValidationError,
)
from .report import ResultReport
from .types import CheckErr

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True, slots=True, repr=False)
class Check(Generic[T]):
    """
    Immutable check node.

    Wraps a function from a candidate value to a CheckErr (failure) or None
    (success). Built once, reusable across any number of evaluations.
    """

    fn: Callable[[T], Optional[CheckErr]]
    name: str | None = None

    def __call__(self, value: T) -> Optional[CheckErr]:
        err = self.fn(value)
        if err is not None and not isinstance(err, CheckErr):
            raise ConfigurationError(
                f"Check {self!r} returned {type(err).__name__}, expected CheckErr or None"
            )
        return err

    def __and__(self, other: Check | Callable) -> Check:
        """
        Combine with AND logic: all must pass.

        Usage:
            expect.instanceof(int) & expect.not_(0)
        """
        from .logic import and_

        return and_(self, other)

    def __rand__(self, other: Callable) -> Check:
        from .logic import and_

        return and_(other, self)

    def __or__(self, other: Check | Callable) -> Check:
        """
        Combine with OR logic: at least one must pass.

        Usage:
            expect.type_(str) | expect.value(None)
        """
        from .logic import or_

        return or_(self, other)

    def __ror__(self, other: Callable) -> Check:
        from .logic import or_

        return or_(other, self)

    def __repr__(self) -> str:
        return f"Check({self.name or getattr(self.fn, '__name__', '?')})"


def to_check(c: Any) -> Check:
    """
    Coerce a value to a Check.

    Conversion rules:
        Check -> pass through
        Callable -> Check(fn=callable)

    Classes are rejected rather than wrapped, since calling a class would
    construct an instance instead of inspecting the value.
    """
    if isinstance(c, Check):
        return c

    if isinstance(c, type):
        raise ConfigurationError(
            f"Cannot use class {c.__name__} as a check, use expect.type_({c.__name__})"
        )

    if callable(c):
        _require_one_argument(c)
        return Check(fn=c, name=getattr(c, "__name__", None))

    raise ConfigurationError(f"Cannot use {type(c).__name__} as a check")


def _require_one_argument(fn: Callable) -> None:
    try:
        sig = inspect.signature(fn)
    except (TypeError, ValueError):
        # Some builtins expose no signature
        return

    try:
        sig.bind(object())
    except TypeError:
        logger.debug("Rejecting check %r with signature %s", fn, sig)
        raise ExpectedOneArgumentError() from None


def to_checks(checks: tuple) -> tuple[Check, ...]:
    """Coerce a non-empty sequence of checks."""
    if len(checks) == 0:
        logger.debug("Rejecting empty check list")
        raise NoChecksError()
    return tuple(to_check(c) for c in checks)


class Result:
    """
    Failures collected by one check() call.

    Attributes:
        errors: CheckErr records in the order the checks produced them.
    """

    def __init__(self, errors: Optional[list[CheckErr]] = None):
        self.errors: list[CheckErr] = list(errors) if errors is not None else []

    def is_valid(self) -> bool:
        return len(self.errors) == 0

    def must(self) -> None:
        """Raise ValidationError carrying every failure, if there are any."""
        if self.errors:
            raise ValidationError(self.errors)

    def report(self) -> ResultReport:
        """Build a serialisable report of this result."""
        return ResultReport.from_errors(self.errors)

    def __len__(self) -> int:
        return len(self.errors)

    def __iter__(self) -> Iterator[CheckErr]:
        return iter(self.errors)

    def __repr__(self) -> str:
        return f"Result(errors={self.errors!r})"


def check(value: Any, *checks: Check | Callable) -> Result:
    """
    Apply every check to value and collect the failures.

    Args:
        value: The candidate value to inspect
        *checks: One or more checks, run in the order given

    Returns:
        Result holding one CheckErr per failing check

    Raises:
        NoChecksError: If no checks were supplied

    Note:
        Every check runs, even after an earlier one has failed, so the
        Result always holds the complete set of failures.

    Examples:
        res = check(user, expect.instanceof(dict), expect.properties({
            "name": expect.type_(str),
            "tags": expect.for_of(expect.type_(str)),
        }))
        res.is_valid()   # False if any check failed
        res.must()       # raises ValidationError if any check failed
    """
    coerced = to_checks(checks)

    res = Result()
    for c in coerced:
        err = c(value)
        if err is not None:
            res.errors.append(err)

    logger.debug("Ran %d checks, %d failed", len(coerced), len(res.errors))
    return res
