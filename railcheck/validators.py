"""
Built-in validators for railcheck.

Provides factory functions that return validator nodes.
"""

from __future__ import annotations

import math
import re
from datetime import date, datetime
from decimal import Decimal
from typing import Any, Iterable
from urllib.parse import urlsplit

from .core import DefaultV, ListV, OptionalV, Pipe, RequiredV, V, to_validator

_EMAIL_PATTERN = re.compile(r"^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$")


def Required(v: Any = None, message: str = "Field is required") -> RequiredV:
    """
    Mark a field as required (cannot be None or missing).

    Usage:
        Required()                    # Just required, no type check
        Required(str)                 # Required string
        Required(String(), "Name is required")
    """
    inner = None if v is None else to_validator(v)
    return RequiredV(inner=inner, message=message)


def Optional(v: Any) -> OptionalV:
    """
    Allow None or a missing key, validate if present.

    A missing value validates to ABSENT, which DictV leaves out of its output.

    Usage:
        Optional(str)        # None or valid string
    """
    return OptionalV(inner=to_validator(v))


def WithDefault(value: Any) -> DefaultV:
    """
    Substitute a default for None or a missing key.

    Usage:
        WithDefault("user") & OneOf(["admin", "user", "guest"])
    """
    return DefaultV(default=value)


def IsType(t: type, message: str | None = None) -> V:
    """
    Validate that value is an instance of type.

    Usage:
        IsType(str)
        IsType(int) & Between(0, 100)
    """

    def check(x: Any) -> bool:
        return isinstance(x, t)

    return V(
        check=check,
        type_hint=t,
        message=message or f"Expected {t.__name__}",
    )


def Predicate(fn: Any, message: str | None = None) -> V:
    """
    Create validator from arbitrary predicate function.

    Usage:
        Predicate(lambda x: x > 0, "Must be positive")
        Predicate(str.isalpha, "Must be alphabetic")
    """
    return V(check=fn, message=message)


def InRange(lower: int | None = None, upper: int | None = None) -> V:
    """
    Validate length is within range (inclusive).

    Usage:
        InRange(1, 10)      # 1 to 10 items
        InRange(lower=5)    # At least 5
        InRange(upper=20)   # At most 20
    """

    def check(x: Any) -> bool:
        try:
            n = len(x)
        except TypeError:
            return False
        if lower is not None and n < lower:
            return False
        if upper is not None and n > upper:
            return False
        return True

    msg_parts = []
    if lower is not None:
        msg_parts.append(f">= {lower}")
    if upper is not None:
        msg_parts.append(f"<= {upper}")
    msg = f"Length must be {' and '.join(msg_parts)}"

    return V(check=check, message=msg)


def InSet(values: Iterable[Any], message: str | None = None) -> V:
    """
    Validate value is one of the allowed values.

    Usage:
        InSet(["active", "inactive", "pending"])
        InSet([1, 2, 3], "Pick 1, 2 or 3")
    """
    allowed = tuple(values)

    def check(x: Any) -> bool:
        return x in allowed

    return V(
        check=check,
        message=message or f"Value must be one of: {', '.join(map(str, allowed))}",
    )


OneOf = InSet


def Matches(pattern: str | re.Pattern[str], message: str | None = None) -> V:
    """
    Validate a string contains a match for a regex pattern.

    Anchor the pattern (^...$) to match the whole string.

    Usage:
        Matches(r"^[a-z]+$")
        Matches(r"[A-Z]", "Password must contain an uppercase letter")
    """
    compiled = re.compile(pattern)

    def check(x: Any) -> bool:
        return isinstance(x, str) and compiled.search(x) is not None

    return V(
        check=check,
        type_hint=str,
        message=message or f"Must match pattern: {compiled.pattern}",
    )


def Eq(value: Any, message: str | None = None) -> V:
    """Validate exact equality."""

    def check(x: Any) -> bool:
        return x == value

    return V(check=check, message=message or f"Must equal {repr(value)}")


def NotEq(value: Any, message: str | None = None) -> V:
    """Validate inequality."""

    def check(x: Any) -> bool:
        return x != value

    return V(check=check, message=message or f"Must not equal {repr(value)}")


def Gt(value: Any) -> V:
    """Validate greater than."""

    def check(x: Any) -> bool:
        return x > value

    return V(check=check, message=f"Must be > {value}")


def Gte(value: Any) -> V:
    """Validate greater than or equal."""

    def check(x: Any) -> bool:
        return x >= value

    return V(check=check, message=f"Must be >= {value}")


def Lt(value: Any) -> V:
    """Validate less than."""

    def check(x: Any) -> bool:
        return x < value

    return V(check=check, message=f"Must be < {value}")


def Lte(value: Any) -> V:
    """Validate less than or equal."""

    def check(x: Any) -> bool:
        return x <= value

    return V(check=check, message=f"Must be <= {value}")


def Between(
    lower: Any, upper: Any, inclusive: bool = True, message: str | None = None
) -> V:
    """Validate value is between bounds."""
    if inclusive:

        def check(x: Any) -> bool:
            return lower <= x <= upper

        return V(
            check=check,
            message=message or f"Must be between {lower} and {upper}",
        )

    def check_exclusive(x: Any) -> bool:
        return lower < x < upper

    return V(
        check=check_exclusive,
        message=message or f"Must be between {lower} and {upper} (exclusive)",
    )


# Strings


def String(message: str = "Must be a string") -> V:
    return IsType(str, message)


def MinLength(n: int, message: str | None = None) -> V:
    """Validate minimum string length."""

    def check(x: Any) -> bool:
        return len(x) >= n

    return V(check=check, message=message or f"Must be at least {n} characters")


def MaxLength(n: int, message: str | None = None) -> V:
    """Validate maximum string length."""

    def check(x: Any) -> bool:
        return len(x) <= n

    return V(check=check, message=message or f"Must be at most {n} characters")


def ExactLength(n: int, message: str | None = None) -> V:
    def check(x: Any) -> bool:
        return len(x) == n

    return V(check=check, message=message or f"Must be exactly {n} characters")


def Pattern(pattern: str | re.Pattern[str], message: str = "Invalid format") -> V:
    return Matches(pattern, message)


def NonEmpty(message: str = "String must not be empty") -> V:
    """Whitespace-only strings count as empty."""

    def check(x: Any) -> bool:
        return isinstance(x, str) and x.strip() != ""

    return V(check=check, type_hint=str, message=message)


def Email(message: str = "Invalid email format") -> V:
    return Matches(_EMAIL_PATTERN, message)


def Url(message: str = "Invalid URL") -> V:
    """Validate an absolute URL (scheme and host present)."""

    def check(x: Any) -> bool:
        if not isinstance(x, str):
            return False
        parts = urlsplit(x)
        return bool(parts.scheme and parts.netloc)

    return V(check=check, type_hint=str, message=message)


def StringEnum(values: Iterable[str], message: str | None = None) -> Pipe:
    """
    Validate a string drawn from a fixed set.

    Usage:
        StringEnum(["admin", "user", "guest"])
    """
    return Pipe((IsType(str, "Value must be a string"), InSet(values, message)))


# Numbers


def _is_number(x: Any) -> bool:
    return (
        isinstance(x, (int, float))
        and not isinstance(x, bool)
        and not (isinstance(x, float) and math.isnan(x))
    )


def Number(message: str = "Must be a number") -> V:
    """Ints and floats; bool and NaN are rejected."""
    return V(check=_is_number, type_hint=float, message=message)


def Min(value: float, message: str | None = None) -> V:
    def check(x: Any) -> bool:
        return x >= value

    return V(check=check, message=message or f"Must be at least {value}")


def Max(value: float, message: str | None = None) -> V:
    def check(x: Any) -> bool:
        return x <= value

    return V(check=check, message=message or f"Must be at most {value}")


def Integer(message: str = "Must be an integer") -> V:
    def check(x: Any) -> bool:
        return _is_number(x) and float(x).is_integer()

    return V(check=check, type_hint=int, message=message)


def Positive(message: str = "Must be a positive number") -> V:
    return V(check=lambda x: x > 0, message=message)


def Negative(message: str = "Must be a negative number") -> V:
    return V(check=lambda x: x < 0, message=message)


def NonZero(message: str = "Must not be zero") -> V:
    return V(check=lambda x: x != 0, message=message)


def DivisibleBy(divisor: float, message: str | None = None) -> V:
    def check(x: Any) -> bool:
        return x % divisor == 0

    return V(check=check, message=message or f"Must be divisible by {divisor}")


def Precision(max_decimal_places: int, message: str | None = None) -> V:
    """Validate a number has at most `max_decimal_places` digits after the point."""

    def check(x: Any) -> bool:
        exponent = Decimal(repr(x)).as_tuple().exponent
        return isinstance(exponent, int) and -exponent <= max_decimal_places

    return V(
        check=check,
        message=message
        or f"Must have at most {max_decimal_places} decimal places",
    )


# Booleans


def Boolean(message: str = "Must be a boolean") -> V:
    return IsType(bool, message)


def MustBeChecked(message: str = "You must check this field") -> V:
    return V(check=lambda x: x is True, type_hint=bool, message=message)


def IsFalse(message: str = "Value must be false") -> V:
    return V(check=lambda x: x is False, type_hint=bool, message=message)


def BoolEquals(expected: bool, message: str | None = None) -> V:
    return V(
        check=lambda x: x is expected,
        type_hint=bool,
        message=message or f"Value must be {str(expected).lower()}",
    )


def NullableBool(message: str = "Must be a boolean or null") -> V:
    return V(check=lambda x: x is None or isinstance(x, bool), message=message)


# Dates


def _iso(d: date) -> str:
    return d.date().isoformat() if isinstance(d, datetime) else d.isoformat()


def DateRange(lower: date, upper: date, message: str | None = None) -> V:
    """Validate a date/datetime lies within [lower, upper]."""

    def check(x: Any) -> bool:
        return lower <= x <= upper

    return V(
        check=check,
        message=message or f"Must be between {_iso(lower)} and {_iso(upper)}",
    )


def _now_like(x: date) -> date:
    if isinstance(x, datetime):
        return datetime.now(x.tzinfo)
    return date.today()


def PastDate(message: str = "Must be a date in the past") -> V:
    return V(check=lambda x: x < _now_like(x), message=message)


def FutureDate(message: str = "Must be a date in the future") -> V:
    return V(check=lambda x: x > _now_like(x), message=message)


def TodayOrFuture(message: str = "Must be today or a future date") -> V:
    """Calendar-day comparison; the time of day is ignored."""

    def check(x: Any) -> bool:
        day = x.date() if isinstance(x, datetime) else x
        return day >= date.today()

    return V(check=check, message=message)


# Arrays


def MinItems(n: int, message: str | None = None) -> V:
    def check(x: Any) -> bool:
        return len(x) >= n

    return V(check=check, message=message or f"Must have at least {n} items")


def MaxItems(n: int, message: str | None = None) -> V:
    def check(x: Any) -> bool:
        return len(x) <= n

    return V(check=check, message=message or f"Must have at most {n} items")


def SelectionArray(values: Iterable[str], message: str | None = None) -> ListV:
    """
    Validate a list of strings drawn from a fixed set.

    Usage:
        SelectionArray(["red", "green", "blue"])
    """
    return ListV(items=StringEnum(values, message))
