"""
Exception types for valcheck.

Two tiers: ConfigurationError signals misuse while building checks, and
ValidationError is the aggregate fault raised by Result.must().
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Sequence

if TYPE_CHECKING:
    from .types import CheckErr


class ConfigurationError(ValueError):
    """A factory, combinator or the entrypoint was called incorrectly."""


class NoChecksError(ConfigurationError):
    def __init__(self, message: str = "check called with no checks"):
        super().__init__(message)


class NoOptionsError(ConfigurationError):
    def __init__(self, message: str = "no options were provided"):
        super().__init__(message)


class ExpectedOneArgumentError(ConfigurationError):
    def __init__(self, message: str = "expected function to take one argument"):
        super().__init__(message)


class ExpectedPropertyKeyError(ConfigurationError):
    def __init__(self, message: str = "expected property key"):
        super().__init__(message)


class NotIterableError(TypeError):
    """Carried on a CheckErr when an iteration check receives a non-iterable."""

    def __init__(self, message: str = "value was not iterable"):
        super().__init__(message)


class ValidationError(Exception):
    """
    Every failure collected by one evaluation, raised together.

    Attributes:
        errors: The failure records in the order they were produced.
    """

    def __init__(self, errors: Sequence[CheckErr]):
        self.errors: tuple[CheckErr, ...] = tuple(errors)
        noun = "check" if len(self.errors) == 1 else "checks"
        super().__init__(f"{len(self.errors)} {noun} failed")

    def __reduce__(self):
        return (self.__class__, (self.errors,))
