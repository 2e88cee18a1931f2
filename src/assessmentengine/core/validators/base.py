"""Shared configuration and helpers for question-type validators."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any, Protocol, runtime_checkable

import structlog

from ...schemas import Question
from ..results import ErrorType, FieldError

DEFAULT_MESSAGES: dict[str, str] = {
    "required": "This field is required",
    "invalid_text": "Invalid text format",
    "min_length": "Minimum {limit} characters required",
    "max_length": "Maximum {limit} characters allowed",
    "pattern": "Invalid format",
    "invalid_number": "Please enter a valid number",
    "min_value": "Value must be at least {limit}",
    "max_value": "Value must be at most {limit}",
    "select_option": "Please select an option",
    "invalid_option": "Please select a valid option",
    "invalid_selection": "Invalid selection format",
    "invalid_options": "Please select valid options only",
    "min_selections": "Please select at least {limit} option{plural}",
    "max_selections": "Please select at most {limit} option{plural}",
    "invalid_file": "Invalid file format",
    "file_type": "Allowed file types: {allowed}",
    "max_file_size": "File size must be less than {limit}MB",
    "min_file_size": "File size must be at least {limit}MB",
}

logger = structlog.get_logger(__name__)


@runtime_checkable
class TypeValidator(Protocol):
    """Validator contract for one family of question types."""

    question_types: tuple[str, ...]

    def validate(self, question: Question, value: Any) -> list[FieldError]:
        """Return errors for a present, non-empty response value."""


@dataclass
class ValidatorConfig:
    """Message overrides and unit settings for validators."""

    messages: dict[str, str] = field(default_factory=dict)
    bytes_per_megabyte: int = 1024 * 1024


def format_limit(value: Any) -> str:
    if isinstance(value, float) and math.isfinite(value) and value.is_integer():
        return str(int(value))
    return str(value)


class _Placeholders(dict):
    def __missing__(self, key: str) -> str:
        return "{" + key + "}"


class MessageCatalog:
    """Resolve message keys to text, applying configured overrides."""

    def __init__(self, overrides: dict[str, str] | None = None) -> None:
        self._messages = {**DEFAULT_MESSAGES, **(overrides or {})}

    def render(self, key: str, **values: Any) -> str:
        template = self._messages.get(key, key)
        try:
            return template.format_map(_Placeholders(values))
        except (AttributeError, IndexError, KeyError, ValueError):
            logger.warning("validation.bad_message_template", key=key, template=template)
            return template


class BaseTypeValidator:
    """Common plumbing for validators of one question-type family."""

    question_types: tuple[str, ...] = ()

    def __init__(self, *, config: ValidatorConfig | None = None) -> None:
        self._config = config or ValidatorConfig()
        self._messages = MessageCatalog(self._config.messages)

    def validate(self, question: Question, value: Any) -> list[FieldError]:
        raise NotImplementedError

    def _error(self, question: Question, error_type: ErrorType, key: str, **values: Any) -> FieldError:
        return FieldError(
            field=question.id,
            message=self._messages.render(key, **values),
            type=error_type,
        )
