"""Numeric response validation."""

from __future__ import annotations

from typing import Any

from ...schemas import Question
from ..coercion import is_number, to_number
from ..results import FieldError
from .base import BaseTypeValidator, format_limit


class NumericValidator(BaseTypeValidator):
    question_types = ("numeric",)

    def validate(self, question: Question, value: Any) -> list[FieldError]:
        number = to_number(value)
        if not is_number(number):
            return [self._error(question, "custom", "invalid_number")]

        rule = question.validation
        if rule is None:
            return []

        errors: list[FieldError] = []
        if rule.min is not None and number < rule.min:
            errors.append(self._error(question, "min", "min_value", limit=format_limit(rule.min)))
        if rule.max is not None and number > rule.max:
            errors.append(self._error(question, "max", "max_value", limit=format_limit(rule.max)))
        return errors
