"""Single- and multi-choice response validation."""

from __future__ import annotations

from typing import Any

from ...schemas import Question
from ..coercion import as_selection
from ..results import FieldError
from .base import BaseTypeValidator, format_limit


class SingleChoiceValidator(BaseTypeValidator):
    question_types = ("single-choice",)

    def validate(self, question: Question, value: Any) -> list[FieldError]:
        if not isinstance(value, str):
            return [self._error(question, "custom", "select_option")]
        if value not in (question.options or []):
            return [self._error(question, "custom", "invalid_option")]
        return []


class MultiChoiceValidator(BaseTypeValidator):
    question_types = ("multi-choice",)

    def validate(self, question: Question, value: Any) -> list[FieldError]:
        selection = as_selection(value)
        if selection is None:
            return [self._error(question, "custom", "invalid_selection")]

        errors: list[FieldError] = []
        options = question.options or []
        if any(item not in options for item in selection):
            errors.append(self._error(question, "custom", "invalid_options"))

        rule = question.validation
        if rule is None:
            return errors

        count = len(selection)
        if rule.min is not None and count < rule.min:
            errors.append(self._count_error(question, "min", "min_selections", rule.min))
        if rule.max is not None and count > rule.max:
            errors.append(self._count_error(question, "max", "max_selections", rule.max))
        return errors

    def _count_error(self, question: Question, error_type, key: str, limit: float) -> FieldError:
        return self._error(
            question,
            error_type,
            key,
            limit=format_limit(limit),
            plural="" if limit == 1 else "s",
        )
