"""
Pydantic report models for valcheck failures.

Converts CheckErr trees into plain, JSON-serialisable structures.
"""

from __future__ import annotations

from typing import Any, List, Optional, Sequence

from pydantic import BaseModel, ConfigDict, Field

from .types import CheckErr


def _describe(value: Any) -> str:
    if isinstance(value, type):
        return value.__name__
    return repr(value)


class ErrReport(BaseModel):
    """Serialisable view of one CheckErr and its children."""

    model_config = ConfigDict(frozen=True)

    expected: str
    received: str
    property: Optional[str] = None
    index: Optional[int] = None
    reason: Optional[str] = None
    errs: List[ErrReport] = Field(default_factory=list)

    @classmethod
    def from_err(cls, err: CheckErr) -> ErrReport:
        return cls(
            expected=_describe(err.expected),
            received=_describe(err.received),
            property=None if err.property is None else str(err.property),
            index=err.index,
            reason=None if err.reason is None else str(err.reason),
            errs=[cls.from_err(child) for child in err.errs],
        )


class ResultReport(BaseModel):
    """Serialisable view of a Result."""

    model_config = ConfigDict(frozen=True)

    valid: bool
    errors: List[ErrReport] = Field(default_factory=list)

    @classmethod
    def from_errors(cls, errors: Sequence[CheckErr]) -> ResultReport:
        return cls(
            valid=len(errors) == 0,
            errors=[ErrReport.from_err(err) for err in errors],
        )
