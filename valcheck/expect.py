"""
Leaf predicate factories for valcheck.

Each factory validates its arguments immediately and returns a Check.
Names that clash with Python keywords or builtins take a trailing
underscore, following the `operator` module (`operator.not_`).

Usage:
    from valcheck import expect

    expect.value(5)
    expect.type_(str) | expect.value(None)
    expect.properties({"id": expect.type_(int), "tags": expect.for_of(expect.type_(str))})
"""

from __future__ import annotations

import logging
from collections.abc import Hashable, Mapping
from typing import Any

from .core import Check, to_check
from .errors import (
    ConfigurationError,
    ExpectedPropertyKeyError,
    NoChecksError,
    NoOptionsError,
    NotIterableError,
)
from .lib.helpers import aggregate, equals_any, is_iterable, lookup, strict_equals
from .types import CheckErr

logger = logging.getLogger(__name__)


def _require_class(ctor: Any, factory: str) -> None:
    if not isinstance(ctor, type):
        logger.debug("%s() given non-class %r", factory, ctor)
        raise ConfigurationError(
            f"{factory}() requires a class, got {type(ctor).__name__}"
        )


def _require_key(key: Any, factory: str) -> None:
    if not isinstance(key, Hashable):
        logger.debug("%s() given unhashable key %r", factory, key)
        raise ExpectedPropertyKeyError(
            f"{factory}() expected property key, got {type(key).__name__}"
        )


def any_(*candidates: Any) -> Check:
    """
    Pass when the value strictly equals one of the candidates.

    Usage:
        expect.any_("active", "inactive", "pending")
    """
    if len(candidates) == 0:
        raise NoOptionsError()

    def check(received: Any) -> CheckErr | None:
        if equals_any(received, candidates):
            return None
        return CheckErr(expected=candidates, received=received)

    return Check(fn=check, name=f"any_{candidates!r}")


def value(expected: Any) -> Check:
    """Pass when the value strictly equals expected."""

    def check(received: Any) -> CheckErr | None:
        if strict_equals(received, expected):
            return None
        return CheckErr(expected=expected, received=received)

    return Check(fn=check, name=f"value({expected!r})")


def not_(*excluded: Any) -> Check:
    """
    Pass when the value strictly equals none of the excluded values.

    Usage:
        expect.not_(None, "")
    """
    if len(excluded) == 0:
        raise NoOptionsError()

    def check(received: Any) -> CheckErr | None:
        if equals_any(received, excluded):
            return CheckErr(expected=excluded, received=received)
        return None

    return Check(fn=check, name=f"not_{excluded!r}")


def type_(ctor: type) -> Check:
    """
    Pass when the value's runtime type is exactly ctor.

    Subclasses do not match: `type_(int)` rejects True. Use `instanceof`
    to accept subclasses. The failure reports the received value's type.
    """
    _require_class(ctor, "type_")

    def check(received: Any) -> CheckErr | None:
        received_type = type(received)
        if received_type is ctor:
            return None
        return CheckErr(expected=ctor, received=received_type)

    return Check(fn=check, name=f"type_({ctor.__name__})")


def optional(ctor: type, *nil_values: Any) -> Check:
    """
    Pass when the value is exactly of type ctor or equals one of nil_values.

    Usage:
        expect.optional(str, None)        # str or None
        expect.optional(int, None, "")    # int, None or ""
    """
    _require_class(ctor, "optional")
    if len(nil_values) == 0:
        logger.debug("optional(%s) given no nil values", ctor.__name__)
        raise NoOptionsError()

    type_check = type_(ctor)

    def check(received: Any) -> CheckErr | None:
        if type_check(received) is None:
            return None
        if equals_any(received, nil_values):
            return None
        return CheckErr(expected=(ctor, *nil_values), received=received)

    return Check(fn=check, name=f"optional({ctor.__name__})")


def instanceof(ctor: type | tuple[type, ...]) -> Check:
    """Pass when isinstance(value, ctor), so subclasses match too."""
    classes = ctor if isinstance(ctor, tuple) else (ctor,)
    if len(classes) == 0:
        raise ConfigurationError("instanceof() requires at least one class")
    for c in classes:
        _require_class(c, "instanceof")

    def check(received: Any) -> CheckErr | None:
        if isinstance(received, ctor):
            return None
        return CheckErr(expected=ctor, received=received)

    names = ", ".join(c.__name__ for c in classes)
    return Check(fn=check, name=f"instanceof({names})")


def property_(key: Any, expected: Any) -> Check:
    """
    Pass when the field at key strictly equals expected.

    Mappings and sequences are indexed; other objects are read by attribute.
    An absent field is received as MISSING.

    Usage:
        expect.property_("kind", "user")
    """
    _require_key(key, "property_")

    def check(received: Any) -> CheckErr | None:
        field = lookup(received, key)
        if strict_equals(field, expected):
            return None
        return CheckErr(expected=expected, received=field, property=key)

    return Check(fn=check, name=f"property_({key!r})")


def properties(expected: Mapping[Any, Any]) -> Check:
    """
    Run one check per field and aggregate the failures.

    Every field is checked. Each failing sub-check's record is attached to
    the aggregate with `property` set to its field key. Absent fields are
    handed to their sub-check as MISSING.

    Usage:
        expect.properties({
            "name": expect.type_(str),
            "age": expect.optional(int, None),
        })
    """
    if not isinstance(expected, Mapping):
        raise ConfigurationError(
            f"properties() requires a mapping, got {type(expected).__name__}"
        )
    if len(expected) == 0:
        raise NoChecksError()

    for key in expected:
        _require_key(key, "properties")

    fields = {key: to_check(c) for key, c in expected.items()}

    def check(received: Any) -> CheckErr | None:
        errs = []
        for key, field_check in fields.items():
            err = field_check(lookup(received, key))
            if err is not None:
                errs.append(err.at(property=key))

        return aggregate(expected, received, errs)

    return Check(fn=check, name="properties")


def for_of(element_check: Any) -> Check:
    """
    Run a check on every element produced by iterating the value.

    Each failing element's record is attached to the aggregate with `index`
    set to its position. A non-iterable value fails with a record whose
    `reason` is a NotIterableError.

    Usage:
        expect.for_of(expect.type_(int))
    """
    inner = to_check(element_check)

    def check(received: Any) -> CheckErr | None:
        if not is_iterable(received):
            return CheckErr(expected=inner, received=received, reason=NotIterableError())

        errs = []
        for i, item in enumerate(received):
            err = inner(item)
            if err is not None:
                errs.append(err.at(index=i))

        return aggregate(inner, received, errs)

    return Check(fn=check, name="for_of")
