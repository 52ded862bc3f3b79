"""
Context manager for validation configuration (e.g., strict mode).
"""

from contextlib import contextmanager
from contextvars import ContextVar

# Default strictness for DictV nodes built with strict=None
_strict_mode: ContextVar[bool] = ContextVar("strict_mode", default=True)


def is_strict() -> bool:
    """Check if strict mode is currently enabled."""
    return _strict_mode.get()


@contextmanager
def validation_context(*, strict: bool = True):
    """
    Context manager for validation configuration.

    Args:
        strict: If True (the default), DictV nodes without an explicit
               `strict` argument reject keys that are not in their schema.
               If False, such keys are silently dropped from the output.

    Example:
        from railcheck import DictV, String, validate, validation_context

        user = DictV({"name": String()})

        validate({"name": "Ada", "extra": 1}, user)   # Err: Unexpected field

        with validation_context(strict=False):
            validate({"name": "Ada", "extra": 1}, user)   # Ok({"name": "Ada"})

    An explicit DictV(..., strict=True/False) always wins over the context.
    """
    token = _strict_mode.set(strict)
    try:
        yield
    finally:
        _strict_mode.reset(token)
