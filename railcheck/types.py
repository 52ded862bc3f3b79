"""
Type definitions for railcheck.

Provides a minimal Result type (Ok/Err), the ABSENT sentinel and type aliases.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Generic, NamedTuple, Protocol, TypeVar, Union

T = TypeVar("T")
E = TypeVar("E")
U = TypeVar("U")


class _Absent(Enum):
    """Marker for a value that was not supplied at all (missing dict key)."""

    ABSENT = "ABSENT"

    def __repr__(self) -> str:
        return "ABSENT"

    def __bool__(self) -> bool:
        return False


ABSENT = _Absent.ABSENT


def is_missing(value: Any) -> bool:
    """True for None and ABSENT."""
    return value is None or value is ABSENT


@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    """Success result containing a value."""

    value: T

    def is_ok(self) -> bool:
        return True

    def is_err(self) -> bool:
        return False

    def map(self, fn: Callable[[T], U]) -> Ok[U]:
        return Ok(fn(self.value))

    def and_then(self, fn: Callable[[T], Result[U, Any]]) -> Result[U, Any]:
        return fn(self.value)

    def unwrap(self) -> T:
        return self.value


@dataclass(frozen=True, slots=True)
class Err(Generic[E]):
    """Error result containing an error value."""

    error: E

    def is_ok(self) -> bool:
        return False

    def is_err(self) -> bool:
        return True

    def map(self, fn: Callable[[Any], Any]) -> Err[E]:
        return self

    def and_then(self, fn: Callable[[Any], Any]) -> Err[E]:
        return self

    def unwrap(self) -> Any:
        from .errors import ValidationFailed

        errors = self.error if isinstance(self.error, list) else [self.error]
        raise ValidationFailed(errors)


Result = Union[Ok[T], Err[E]]


def is_ok(result: Ok[Any] | Err[Any]) -> bool:
    return isinstance(result, Ok)


def is_err(result: Ok[Any] | Err[Any]) -> bool:
    return isinstance(result, Err)


def combine(results: list[Ok[Any] | Err[Any]]) -> Ok[list[Any]] | Err[Any]:
    """
    Combine results, stopping at the first failure.

    Returns:
        Ok([values...]) if every result is Ok
        the first Err otherwise
    """
    values = []
    for result in results:
        if isinstance(result, Err):
            return result
        values.append(result.value)
    return Ok(values)


def combine_all(results: list[Ok[Any] | Err[Any]]) -> Ok[list[Any]] | Err[list[Any]]:
    """
    Combine results, collecting every failure.

    List-valued errors are flattened so that combining validator outcomes
    yields one flat list of ValidationError.
    """
    values: list[Any] = []
    errors: list[Any] = []
    for result in results:
        if isinstance(result, Err):
            if isinstance(result.error, list):
                errors.extend(result.error)
            else:
                errors.append(result.error)
        else:
            values.append(result.value)
    return Err(errors) if errors else Ok(values)


# Type aliases
CheckFn = Callable[[Any], bool]
Path = tuple[str, ...]


class ValidationError(NamedTuple):
    """A located validation failure."""

    path: Path
    message: str


ValidationErrors = list[ValidationError]
Outcome = Union[Ok[Any], Err[ValidationErrors]]


class Validator(Protocol):
    """Anything callable as `validator(value, path)` returning an Outcome."""

    def __call__(self, value: Any, path: Path) -> Outcome: ...
