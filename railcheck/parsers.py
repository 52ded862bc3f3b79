"""
Transforming validators: each parses raw input into a richer value.

Parse functions signal bad input by raising ValueError or TypeError; the
Parse node turns that into a single error at the current path.
"""

from __future__ import annotations

import json
import math
import re
from datetime import date, datetime, timezone
from typing import Any
from urllib.parse import SplitResult, urlsplit

from .core import ListV, Parse
from .types import is_missing

_ISO_DATE_PREFIX = re.compile(r"^\d{4}-\d{2}-\d{2}")
_PHONE_PATTERN = re.compile(r"^\+?[0-9\s\-()]{8,20}$")

_TRUE_STRINGS = frozenset({"true", "1", "yes"})
_FALSE_STRINGS = frozenset({"false", "0", "no"})


def _reject(value: Any) -> None:
    raise ValueError(f"cannot parse {type(value).__name__}")


def _to_number(value: Any) -> int | float:
    if isinstance(value, bool):
        _reject(value)
    if isinstance(value, (int, float)):
        if isinstance(value, float) and math.isnan(value):
            _reject(value)
        return value
    if isinstance(value, str):
        text = value.strip()
        # int()/float() accept "1_000"; digit separators are not numbers here
        if "_" in text:
            _reject(value)
        try:
            return int(text)
        except ValueError:
            num = float(text)
        if math.isnan(num):
            _reject(value)
        return num
    _reject(value)


def ParseNumber(message: str = "Must be a valid number") -> Parse:
    """
    Parse input into a number.

    Numbers pass through; numeric strings are converted (integral strings
    to int, others to float). Blank strings, NaN and booleans fail.

    Usage:
        ParseNumber()("25", ())     # Ok(25)
        DictV({"age": Required(ParseNumber("Age must be a valid number"))})
    """
    return Parse(parse=_to_number, message=message, type_hint=float)


def ParseInteger(message: str = "Must be a valid integer") -> Parse:
    """Parse input into an int; integral floats like 3.0 are accepted."""

    def parse(value: Any) -> int:
        num = _to_number(value)
        if isinstance(num, float) and not num.is_integer():
            _reject(value)
        return int(num)

    return Parse(parse=parse, message=message, type_hint=int)


def ParseBool(message: str = "Must be a valid boolean value") -> Parse:
    """
    Parse input into a bool.

    Accepts booleans, 0/1, and the strings true/false, yes/no, 1/0
    (case and surrounding whitespace ignored).
    """

    def parse(value: Any) -> bool:
        if isinstance(value, bool):
            return value
        if isinstance(value, str):
            normalized = value.strip().lower()
            if normalized in _TRUE_STRINGS:
                return True
            if normalized in _FALSE_STRINGS:
                return False
        elif isinstance(value, (int, float)):
            if value == 1:
                return True
            if value == 0:
                return False
        _reject(value)

    return Parse(parse=parse, message=message, type_hint=bool)


def _from_iso(text: str) -> datetime:
    # fromisoformat only learned the "Z" suffix in 3.11
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    return datetime.fromisoformat(text)


def ParseDate(message: str = "Must be a valid date") -> Parse:
    """
    Parse input into a datetime.

    Accepts date/datetime objects (passed through), ISO 8601 strings and
    numeric timestamps in epoch milliseconds (UTC).
    """

    def parse(value: Any) -> date:
        if isinstance(value, date):
            return value
        if isinstance(value, str):
            return _from_iso(value.strip())
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return datetime.fromtimestamp(value / 1000, tz=timezone.utc)
        _reject(value)

    return Parse(parse=parse, message=message, type_hint=datetime)


def ParseISODate(message: str = "Must be a valid ISO date string") -> Parse:
    """
    Parse a YYYY-MM-DD string (optionally followed by a time) strictly.

    Impossible calendar dates such as 2021-02-30 are rejected.
    """

    def parse(value: Any) -> date:
        if not isinstance(value, str) or not _ISO_DATE_PREFIX.match(value):
            _reject(value)
        if len(value) == 10:
            return date.fromisoformat(value)
        return _from_iso(value)

    return Parse(parse=parse, message=message, type_hint=date)


def ParseString(message: str = "Must be convertible to string") -> Parse:
    def parse(value: Any) -> str:
        if is_missing(value):
            _reject(value)
        return value if isinstance(value, str) else str(value)

    return Parse(parse=parse, message=message, type_hint=str)


def ParseJSON(message: str = "Must be valid JSON") -> Parse:
    """Decode JSON strings; dicts and lists are passed through."""

    def parse(value: Any) -> Any:
        if isinstance(value, str):
            return json.loads(value)
        if isinstance(value, (dict, list)):
            return value
        _reject(value)

    return Parse(parse=parse, message=message)


def ParseURL(message: str = "Must be a valid URL") -> Parse:
    """Parse an absolute URL string into a urllib SplitResult."""

    def parse(value: Any) -> SplitResult:
        if not isinstance(value, str):
            _reject(value)
        parts = urlsplit(value)
        if not parts.scheme or not parts.netloc:
            _reject(value)
        return parts

    return Parse(parse=parse, message=message)


def ParsePhoneNumber(
    pattern: str | re.Pattern[str] | None = None,
    message: str = "Invalid phone number format",
) -> Parse:
    """
    Validate a phone number; whitespace is ignored when matching.

    The original string is returned unchanged.

    Usage:
        ParsePhoneNumber()
        ParsePhoneNumber(r"^(\\+44|0)[0-9]{10}$", "Must be a valid UK phone number")
    """
    compiled = _PHONE_PATTERN if pattern is None else re.compile(pattern)

    def parse(value: Any) -> str:
        if not isinstance(value, str):
            _reject(value)
        if not compiled.search(re.sub(r"\s+", "", value)):
            _reject(value)
        return value

    return Parse(parse=parse, message=message, type_hint=str)


def NumberArray(message: str = "Must be a valid number") -> ListV:
    """A list whose items are parsed with ParseNumber."""
    return ListV(items=ParseNumber(message))
