"""
Context manager for check configuration (e.g., strict equality).
"""

from contextlib import contextmanager
from contextvars import ContextVar

# Context variable for strict equality
_strict_mode: ContextVar[bool] = ContextVar("strict_mode", default=True)


def is_strict() -> bool:
    """Check if strict equality is currently enabled."""
    return _strict_mode.get()


@contextmanager
def check_context(*, strict: bool = True):
    """
    Context manager for check configuration.

    Args:
        strict: If True (default), equality checks require the same runtime
               type as well as equal values, so 1 does not match True or 1.0.
               If False, plain `==` is used.

    Example:
        from valcheck import check, check_context, expect

        is_one = expect.value(1)

        check(1.0, is_one).is_valid()       # False

        with check_context(strict=False):
            check(1.0, is_one).is_valid()   # True
    """
    token = _strict_mode.set(strict)
    try:
        yield
    finally:
        _strict_mode.reset(token)
