"""Short- and long-text response validation."""

from __future__ import annotations

import re
from functools import lru_cache
from typing import Any

import structlog

from ...schemas import TEXT_TYPES, Question
from ..results import FieldError
from .base import BaseTypeValidator

logger = structlog.get_logger(__name__)


@lru_cache(maxsize=256)
def compile_pattern(pattern: str) -> re.Pattern[str] | None:
    """Compile a rule pattern, or log once and return None when malformed."""
    try:
        return re.compile(pattern)
    except re.error as exc:
        logger.warning("validation.invalid_pattern", pattern=pattern, error=str(exc))
        return None


class TextValidator(BaseTypeValidator):
    question_types = TEXT_TYPES

    def validate(self, question: Question, value: Any) -> list[FieldError]:
        if not isinstance(value, str):
            return [self._error(question, "custom", "invalid_text")]

        rule = question.validation
        if rule is None:
            return []

        errors: list[FieldError] = []
        # Zero lengths mean "no limit".
        if rule.min_length and len(value) < rule.min_length:
            errors.append(self._error(question, "minLength", "min_length", limit=rule.min_length))
        if rule.max_length and len(value) > rule.max_length:
            errors.append(self._error(question, "maxLength", "max_length", limit=rule.max_length))

        if rule.pattern:
            compiled = compile_pattern(rule.pattern)
            if compiled is not None and compiled.search(value) is None:
                errors.append(
                    self._pattern_error(question, rule.pattern_message)
                )
        return errors

    def _pattern_error(self, question: Question, message: str | None) -> FieldError:
        if message:
            return FieldError(field=question.id, message=message, type="pattern")
        return self._error(question, "pattern", "pattern")
