"""
valcheck - composable value checks that collect every failure.

Usage:
    from valcheck import check, expect, logic

    is_user = expect.properties({
        "name": expect.type_(str),
        "email": expect.optional(str, None),
        "roles": expect.for_of(expect.any_("admin", "member")),
    })

    result = check(data, expect.instanceof(dict), is_user)
    result.is_valid()
    result.must()
"""

from . import expect, logic
from .context import check_context, is_strict
from .core import Check, Result, check, to_check
from .errors import (
    ConfigurationError,
    ExpectedOneArgumentError,
    ExpectedPropertyKeyError,
    NoChecksError,
    NoOptionsError,
    NotIterableError,
    ValidationError,
)
from .report import ErrReport, ResultReport
from .types import MISSING, CheckErr

__all__ = [
    # Failure record
    "CheckErr",
    "MISSING",
    # Core
    "Check",
    "Result",
    "check",
    "to_check",
    # Factories and combinators
    "expect",
    "logic",
    # Configuration
    "check_context",
    "is_strict",
    # Errors
    "ConfigurationError",
    "ExpectedOneArgumentError",
    "ExpectedPropertyKeyError",
    "NoChecksError",
    "NoOptionsError",
    "NotIterableError",
    "ValidationError",
    # Reports
    "ErrReport",
    "ResultReport",
]
