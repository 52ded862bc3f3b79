"""
Core validator classes for railcheck.

Every node is an immutable dataclass called as `node(value, path)`:

    V        leaf predicate (value passes through unchanged)
    Parse    leaf transformation (value is converted)
    Pipe     sequential composition, stops at the first failure
    DictV    object aggregator, collects errors from every field
    ListV    array aggregator, collects errors from every index
    RequiredV / OptionalV / DefaultV   presence adapters
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from types import MappingProxyType
from typing import Any, Callable, Mapping

from .context import is_strict
from .types import (
    ABSENT,
    CheckFn,
    Err,
    Ok,
    Outcome,
    Path,
    ValidationError,
    ValidationErrors,
    Validator,
    is_missing,
)

logger = logging.getLogger(__name__)

ROOT: Path = ()


class Node:
    """
    Base for all validator nodes.

    Provides operator composition:
        a & b   -> Pipe: run a, then b on a's output
        a | b   -> Union: first of a, b that succeeds
    """

    __slots__ = ()

    def __call__(self, value: Any, path: Path) -> Outcome:
        raise NotImplementedError

    def __and__(self, other: Any) -> Pipe:
        return Pipe((*_steps(self), *_steps(to_validator(other))))

    def __rand__(self, other: Any) -> Pipe:
        """
        Support `str & MinLength(2)` where str comes first.

        Presence checks must lead the chain (`Required() & str`), since the
        type check would reject None before Required sees it.
        """
        return to_validator(other) & self

    def __or__(self, other: Any) -> Node:
        from .union import Union

        return Union((*_alternatives(self), *_alternatives(to_validator(other))))

    def __ror__(self, other: Any) -> Node:
        """Support `str | IsType(int)` where str comes first."""
        return to_validator(other) | self


def _steps(v: Any) -> tuple[Any, ...]:
    return v.steps if isinstance(v, Pipe) else (v,)


def _alternatives(v: Any) -> tuple[Any, ...]:
    from .union import Union

    # Only flatten plain unions; configured ones keep their own semantics
    if isinstance(v, Union) and v.collect_all_errors and v.error_prefix is None:
        return v.validators
    return (v,)


def fail(path: Path, message: str) -> Err[ValidationErrors]:
    """Single-error failure at `path`."""
    return Err([ValidationError(path, message)])


def _collect(errors: ValidationErrors, error: Any, path: Path) -> None:
    """Append a failure's errors, tolerating single-error and bare-message forms."""
    if isinstance(error, list):
        errors.extend(error)
    elif isinstance(error, ValidationError):
        errors.append(error)
    elif isinstance(error, tuple) and len(error) == 2:
        errors.append(ValidationError(*error))
    else:
        errors.append(ValidationError(path, str(error)))


@dataclass(frozen=True, slots=True)
class V(Node):
    """
    Immutable leaf validator.

    Wraps a predicate with an error message and an optional type hint used
    for Pydantic generation. The value passes through unchanged.
    """

    check: CheckFn
    message: str | None = None
    type_hint: type | None = None

    def __call__(self, value: Any, path: Path) -> Outcome:
        """
        Validate a value.

        Returns:
            Ok(value) if the predicate passes
            Err([(path, message)]) if it fails or raises
        """
        try:
            passed = self.check(value)
        except Exception as e:
            return fail(path, f"Validation error: {e}")

        if not passed:
            msg = self.message or f"Validation failed for value: {repr(value)[:50]}"
            return fail(path, msg)

        return Ok(value)

    def with_message(self, msg: str) -> V:
        """Return new validator with custom error message."""
        return replace(self, message=msg)


@dataclass(frozen=True, slots=True)
class Parse(Node):
    """
    Immutable leaf transformer.

    `parse` converts the raw value and signals bad input by raising
    ValueError or TypeError (OverflowError and OSError also count).
    """

    parse: Callable[[Any], Any]
    message: str
    type_hint: Any = None

    def __call__(self, value: Any, path: Path) -> Outcome:
        try:
            return Ok(self.parse(value))
        except (ValueError, TypeError, OverflowError, OSError):
            return fail(path, self.message)

    def with_message(self, msg: str) -> Parse:
        return replace(self, message=msg)


@dataclass(frozen=True, slots=True)
class FnV(Node):
    """Adapter giving a plain `(value, path) -> Ok | Err` function node behavior."""

    fn: Callable[[Any, Path], Outcome]

    def __call__(self, value: Any, path: Path) -> Outcome:
        return self.fn(value, path)


@dataclass(frozen=True, slots=True)
class Pipe(Node):
    """
    Run validators left to right, each on the previous one's output.

    Stops at the first failure and returns it unchanged; later steps are
    not invoked. The path is never extended here.
    """

    steps: tuple[Validator, ...]

    def __post_init__(self) -> None:
        steps = tuple(to_validator(s) for s in self.steps)
        if not steps:
            raise ValueError("Pipe requires at least one validator")
        object.__setattr__(self, "steps", steps)

    def __call__(self, value: Any, path: Path) -> Outcome:
        result: Outcome = Ok(value)
        for step in self.steps:
            result = step(result.value, path)
            if isinstance(result, Err):
                return result
        return result


def compose(*validators: Any) -> Pipe:
    """
    Sequential composition.

    Usage:
        compose(ParseNumber(), Between(0, 100))
        ParseNumber() & Between(0, 100)      # Same thing
    """
    return Pipe(validators)


@dataclass(frozen=True, slots=True)
class DictV(Node):
    """
    Validator for dict structures with nested field validators.

    Every schema field is checked, in schema order, even after another
    field failed. With strict mode on (the default, see validation_context)
    input keys missing from the schema are reported as errors; otherwise
    they are dropped from the output.
    """

    fields: Mapping[str, Validator]
    strict: bool | None = None

    def __post_init__(self) -> None:
        fields = {k: to_validator(v) for k, v in self.fields.items()}
        object.__setattr__(self, "fields", MappingProxyType(fields))

    def __call__(self, value: Any, path: Path) -> Outcome:
        if not isinstance(value, Mapping):
            return fail(path, "Expected an object")

        strict = is_strict() if self.strict is None else self.strict
        errors: ValidationErrors = []

        if strict:
            for key in value:
                if key not in self.fields:
                    errors.append(
                        ValidationError((*path, str(key)), f"Unexpected field: '{key}'")
                    )

        output: dict[str, Any] = {}
        for key, validator in self.fields.items():
            field_path = (*path, key)
            result = validator(value.get(key, ABSENT), field_path)

            if isinstance(result, Err):
                _collect(errors, result.error, field_path)
            elif result.value is not ABSENT:
                output[key] = result.value

        return Err(errors) if errors else Ok(output)

    def extend(self, fields: Mapping[str, Any]) -> DictV:
        """New DictV with extra (or overriding) fields."""
        return DictV(fields={**self.fields, **fields}, strict=self.strict)


@dataclass(frozen=True, slots=True)
class ListV(Node):
    """Validator for list structures with item validation."""

    items: Validator

    def __post_init__(self) -> None:
        object.__setattr__(self, "items", to_validator(self.items))

    def __call__(self, value: Any, path: Path) -> Outcome:
        if not isinstance(value, (list, tuple)):
            return fail(path, "Expected an array")

        errors: ValidationErrors = []
        output: list[Any] = []

        for i, item in enumerate(value):
            item_path = (*path, str(i))
            result = self.items(item, item_path)
            if isinstance(result, Err):
                _collect(errors, result.error, item_path)
            else:
                # A list slot cannot be absent
                output.append(None if result.value is ABSENT else result.value)

        return Err(errors) if errors else Ok(output)


@dataclass(frozen=True, slots=True)
class RequiredV(Node):
    """Reject None/ABSENT, otherwise delegate (if there is anything to delegate to)."""

    inner: Validator | None = None
    message: str = "Field is required"

    def __call__(self, value: Any, path: Path) -> Outcome:
        if is_missing(value):
            return fail(path, self.message)
        if self.inner is None:
            return Ok(value)
        return self.inner(value, path)


@dataclass(frozen=True, slots=True)
class OptionalV(Node):
    """Accept None/ABSENT as ABSENT, otherwise delegate."""

    inner: Validator

    def __call__(self, value: Any, path: Path) -> Outcome:
        if is_missing(value):
            return Ok(ABSENT)
        return self.inner(value, path)


@dataclass(frozen=True, slots=True)
class DefaultV(Node):
    """Replace None/ABSENT with a fixed default."""

    default: Any

    def __call__(self, value: Any, path: Path) -> Outcome:
        return Ok(self.default if is_missing(value) else value)


def to_validator(v: Any) -> Node:
    """
    Coerce a value to a validator.

    Conversion rules:
        Node -> pass through
        type -> V with isinstance check
        dict -> DictV with recursive conversion
        list -> ListV with item validator from list[0]
                (several items -> ListV of their Union)
        Callable -> V(check=callable)

    Plain callables are read as predicates. Use @validator to turn a
    `(value, path)` function into a node.
    """
    if isinstance(v, Node):
        return v

    if isinstance(v, type):

        def type_check(x: Any, t: type = v) -> bool:
            return isinstance(x, t)

        return V(check=type_check, type_hint=v, message=f"Expected {v.__name__}")

    if isinstance(v, dict):
        return DictV(fields=v)

    if isinstance(v, list):
        if len(v) == 0:
            raise ValueError("Empty list cannot be converted to validator")
        if len(v) == 1:
            return ListV(items=v[0])
        from .union import Union

        return ListV(items=Union(tuple(v)))

    if callable(v):
        return V(check=v)

    raise TypeError(f"Cannot convert {type(v).__name__} to validator")


def validate(value: Any, schema: Any) -> Outcome:
    """
    Run a validator against a value at the root path.

    Args:
        value: The untyped input
        schema: A validator node, or shorthand (dict / list / type)
               converted with to_validator

    Returns:
        Ok(validated_value) if validation passes
        Err([ValidationError(path, message), ...]) if it fails

    Usage:
        schema = {
            "name": Required(str),
            "email": Optional(str),
            "age": ParseInteger() & Min(0),
        }
        result = validate({"name": "Alice", "age": "30"}, schema)
    """
    validator = to_validator(schema)
    result = validator(value, ROOT)

    if isinstance(result, Err):
        if not isinstance(result.error, list):
            errors: ValidationErrors = []
            _collect(errors, result.error, ROOT)
            result = Err(errors)
        logger.debug("validation failed with %d error(s)", len(result.error))
    else:
        logger.debug("validation succeeded")

    return result
