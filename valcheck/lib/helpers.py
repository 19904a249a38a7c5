"""
Helper functions shared by the leaf factories and the combinators.
"""

from collections.abc import Iterable, Mapping
from typing import Any, Optional

from ..context import is_strict
from ..types import MISSING, CheckErr, CheckFn


def strict_equals(received: Any, expected: Any) -> bool:
    """Compare two values, requiring the same runtime type unless relaxed."""
    if received is expected:
        return True
    if is_strict() and type(received) is not type(expected):
        return False
    return bool(received == expected)


def equals_any(received: Any, candidates: tuple) -> bool:
    """Compare against each candidate individually."""
    for candidate in candidates:
        if strict_equals(received, candidate):
            return True
    return False


def is_iterable(value: Any) -> bool:
    """Report whether value supports the iteration protocol."""
    if isinstance(value, Iterable):
        return True
    # Old-style sequences only define __getitem__
    try:
        iter(value)
    except TypeError:
        return False
    return True


def lookup(value: Any, key: Any) -> Any:
    """
    Fetch a field from a mapping, sequence or object.

    Returns MISSING instead of raising when the field does not exist.
    """
    if value is None:
        return MISSING

    if isinstance(value, Mapping):
        return value.get(key, MISSING)

    if hasattr(value, "__getitem__") and not isinstance(value, type):
        try:
            return value[key]
        except (KeyError, IndexError, TypeError):
            pass

    if isinstance(key, str):
        return getattr(value, key, MISSING)

    return MISSING


def run_all(
    checks: tuple[CheckFn, ...], received: Any
) -> list[Optional[CheckErr]]:
    """Run every check against received, keeping each outcome in order."""
    return [c(received) for c in checks]


def aggregate(
    expected: Any, received: Any, errs: list[CheckErr]
) -> Optional[CheckErr]:
    """Fold child failures into one record, or None when there are none."""
    if not errs:
        return None
    return CheckErr(expected=expected, received=received, errs=tuple(errs))
