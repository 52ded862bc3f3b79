"""
Render validation errors for display.
"""

from __future__ import annotations

from typing import Iterable

from .types import Path, ValidationError


def format_path(path: Path) -> str:
    """
    Render a path as a dotted string with bracketed indices.

    Examples:
        ("user", "name")      -> "user.name"
        ("a", "2", "b")       -> "a[2].b"
        ("0", "id")           -> "[0].id"
        ()                    -> ""
    """
    rendered = ""
    for raw in path:
        segment = str(raw)
        if segment.isascii() and segment.isdigit():
            rendered += f"[{segment}]"
        elif rendered:
            rendered += f".{segment}"
        else:
            rendered = segment
    return rendered


def format_errors(errors: Iterable[ValidationError]) -> dict[str, str]:
    """
    Convert errors into a flat {rendered_path: message} mapping.

    When several errors render to the same path, the last one wins.
    """
    formatted: dict[str, str] = {}
    for path, message in errors:
        formatted[format_path(path)] = message
    return formatted
