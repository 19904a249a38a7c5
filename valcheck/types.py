"""
Type definitions for valcheck.

Provides the CheckErr failure record, the MISSING sentinel and type aliases.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Any, Callable, Iterator, Optional

Locator = str | int
Path = tuple[Locator, ...]


class _Missing(Enum):
    """Sentinel for a field that is absent from the inspected value."""

    MISSING = "MISSING"

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False


MISSING = _Missing.MISSING


@dataclass(frozen=True, slots=True)
class CheckErr:
    """
    Immutable description of one failed expectation.

    Aggregate failures (from structural checks and combinators) hold their
    children in `errs`. Locators are attached by building a new record
    with `at()`, so a record is never changed once created.
    """

    expected: Any
    received: Any
    property: Optional[Any] = None
    index: Optional[int] = None
    errs: tuple[CheckErr, ...] = ()
    reason: Optional[BaseException] = None

    def is_aggregate(self) -> bool:
        return len(self.errs) > 0

    def at(self, *, property: Any = MISSING, index: Any = MISSING) -> CheckErr:
        """Return a copy of this record carrying the given locator."""
        changes: dict[str, Any] = {}
        if property is not MISSING:
            changes["property"] = property
        if index is not MISSING:
            changes["index"] = index
        return replace(self, **changes)

    def walk(self, path: Path = ()) -> Iterator[tuple[Path, CheckErr]]:
        """
        Yield (path, record) for every non-aggregate record in this tree.

        The path collects the property/index locators of each child, from
        the outermost aggregate inward.

        Examples:
            err = expect.properties({"tags": expect.for_of(expect.type_(str))})(
                {"tags": ["a", 1]}
            )
            list(err.walk())  # [(("tags", 1), CheckErr(expected=str, ...))]
        """
        if not self.errs:
            yield path, self
            return

        for child in self.errs:
            yield from child.walk((*path, *_locators(child)))


def _locators(err: CheckErr) -> Path:
    # An element of an iteration check may also carry its own field key
    locators: list[Locator] = []
    if err.index is not None:
        locators.append(err.index)
    if err.property is not None:
        locators.append(err.property)
    return tuple(locators)


# Type aliases
CheckFn = Callable[[Any], Optional[CheckErr]]
