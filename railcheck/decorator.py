"""
The @validator decorator for turning plain functions into validator nodes.
"""

from typing import Any, Callable

from .core import FnV
from .types import Outcome, Path


def validator(func: Callable[[Any, Path], Outcome]) -> FnV:
    """
    Decorator that turns a `(value, path) -> Ok | Err` function into a node.

    The decorated function takes part in composition (`&`, `|`) and can be
    used anywhere a schema expects a validator. Undecorated callables are
    read as one-argument predicates instead.

    Example:
        @validator
        def even(value, path):
            if value % 2:
                return Err([ValidationError(path, "Must be even")])
            return Ok(value)

        schema = DictV({"count": ParseInteger() & even})
    """
    return FnV(func)
