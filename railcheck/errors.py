"""
Exception raised when a caller asks to unwrap a failed validation.
"""

from __future__ import annotations

from typing import Iterable

from .types import ValidationError


class ValidationFailed(ValueError):
    """
    Raised by Err.unwrap().

    Validation itself never raises; this exists for call sites that prefer
    exceptions over inspecting Ok/Err.
    """

    def __init__(self, errors: Iterable[ValidationError]):
        from .formatting import format_path

        self.errors = list(errors)
        lines = [
            f"{format_path(e.path) or '<root>'}: {e.message}" for e in self.errors
        ]
        super().__init__(f"Validation failed: {'; '.join(lines)}")
