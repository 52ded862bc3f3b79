"""
Pydantic interop for railcheck schemas.

Provides to_pydantic(), which compiles a DictV into a BaseModel subclass.
"""

from __future__ import annotations

from typing import Any
from typing import Optional as TypingOptional
from typing import Union as TypingUnion

from pydantic import create_model

from .core import (
    DefaultV,
    DictV,
    ListV,
    OptionalV,
    Parse,
    Pipe,
    RequiredV,
    V,
    to_validator,
)
from .union import Discriminated, Union, WithCommon


def to_pydantic(name: str, schema: Any) -> type:
    """
    Compile schema to a Pydantic model.

    Args:
        name: Name of the generated model class
        schema: DictV or dict-like shorthand

    Returns:
        A Pydantic BaseModel subclass

    Usage:
        User = to_pydantic("User", {
            "name": Required(str),
            "email": Optional(str),
        })
        user = User(name="Alice")
    """
    validator = to_validator(schema)
    if not isinstance(validator, DictV):
        raise TypeError("Schema must be a dict")

    fields: dict[str, Any] = {}

    for key, v in validator.fields.items():
        if isinstance(v, RequiredV):
            fields[key] = (_type_of(v.inner, f"{name}_{key}"), ...)
        else:
            field_type = _type_of(v, f"{name}_{key}")
            fields[key] = (TypingOptional[field_type], None)

    return create_model(name, **fields)


def _type_of(v: Any, name: str) -> Any:
    """Best-effort Python type for the values a validator produces."""
    match v:
        case None:
            return Any
        case V(type_hint=t) | Parse(type_hint=t):
            return t or Any
        case RequiredV(inner=inner) | OptionalV(inner=inner):
            return _type_of(inner, name)
        case DefaultV(default=default):
            return type(default) if default is not None else Any
        case Pipe(steps=steps):
            for step in reversed(steps):
                hint = _type_of(step, name)
                if hint is not Any:
                    return hint
            return Any
        case DictV():
            return to_pydantic(name, v)
        case ListV(items=items):
            return list[_type_of(items, name)]  # type: ignore[misc]
        case Union(validators=validators):
            return _union_of(
                [_type_of(c, f"{name}_{i}") for i, c in enumerate(validators)]
            )
        case Discriminated(variants=variants):
            return _union_of(
                [_type_of(c, f"{name}_{tag}") for tag, c in variants.items()]
            )
        case WithCommon():
            return dict[str, Any]

    return Any


def _union_of(types: list[Any]) -> Any:
    if not types or Any in types:
        return Any
    if len(types) == 1:
        return types[0]
    return TypingUnion[tuple(types)]
