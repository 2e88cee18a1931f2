"""Explicit coercions from loosely-typed response values.

Response maps carry whatever the form layer stored: strings for text and
single-choice questions, numbers for numeric questions, string sequences
for multi-choice questions and ``{name, size, type}`` mappings for file
uploads. The helpers below are total: they never raise, and return a
sentinel (``NaN``, ``None``) when a value has the wrong shape.
"""

from __future__ import annotations

import math
from collections.abc import Mapping
from typing import Any

from pydantic import ValidationError as SchemaValidationError

from ..schemas import FileDescriptor

NAN = float("nan")


def is_empty(value: Any) -> bool:
    """Emptiness predicate shared by conditions and required checks.

    Sequences are never empty here: an empty multi-choice selection has to
    be caught by its own length checks, not by this predicate.
    """
    if value is None:
        return True
    if isinstance(value, str):
        return value.strip() == ""
    if isinstance(value, (list, tuple)):
        return False
    if isinstance(value, Mapping):
        return len(value) == 0
    return False


def is_answered(value: Any) -> bool:
    """Progress predicate: set, not the empty string, not an empty selection."""
    if value is None:
        return False
    if isinstance(value, str):
        return value != ""
    if isinstance(value, (list, tuple)):
        return len(value) > 0
    return True


def to_text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        if math.isfinite(value) and value.is_integer():
            return str(int(value))
        return str(value)
    if isinstance(value, (list, tuple)):
        return ",".join(to_text(item) for item in value)
    if isinstance(value, FileDescriptor):
        return value.name
    if isinstance(value, Mapping):
        return to_text(value.get("name"))
    return str(value)


def to_number(value: Any) -> float:
    """Coerce to float; anything non-numeric becomes ``NaN``.

    ``NaN`` compares false against everything, so ordering conditions on a
    blank or non-numeric dependency silently evaluate to ``False``.
    """
    if value is None or isinstance(value, bool):
        return NAN
    if isinstance(value, (int, float)):
        try:
            return float(value)
        except OverflowError:
            return NAN
    if isinstance(value, str):
        text = value.strip()
        if not text or "_" in text:
            return NAN
        try:
            number = float(text)
        except ValueError:
            return NAN
        # Text spellings of infinity or NaN are not numbers.
        return number if math.isfinite(number) else NAN
    return NAN


def is_number(value: float) -> bool:
    return not math.isnan(value)


def as_selection(value: Any) -> list[Any] | None:
    if isinstance(value, (list, tuple)):
        return list(value)
    return None


def as_file(value: Any) -> FileDescriptor | None:
    if isinstance(value, FileDescriptor):
        return value
    if isinstance(value, Mapping):
        try:
            return FileDescriptor.model_validate(dict(value))
        except SchemaValidationError:
            return None
    return None


__all__ = [
    "as_file",
    "as_selection",
    "is_answered",
    "is_empty",
    "is_number",
    "to_number",
    "to_text",
]
