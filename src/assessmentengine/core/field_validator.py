"""Per-question validation orchestration."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Iterable

import structlog

from ..schemas import Question
from .coercion import as_file, as_selection, is_empty
from .resolver import is_required, is_visible
from .results import FieldError
from .validators import MessageCatalog, TypeValidator, ValidatorConfig, default_validators


class FieldValidator:
    """Validate one question's response.

    Hidden questions produce no errors. A required question whose value is
    missing produces exactly one ``required`` error and nothing else; a
    missing optional value produces none. An empty selection on a required
    multi-choice question is also reported as ``required``. Present values
    are handed to the validator registered for the question's type.
    """

    def __init__(
        self,
        validators: Iterable[TypeValidator] | None = None,
        *,
        config: ValidatorConfig | None = None,
    ) -> None:
        self._config = config or ValidatorConfig()
        self._messages = MessageCatalog(self._config.messages)
        self._registry: dict[str, TypeValidator] = {}
        for validator in validators if validators is not None else default_validators(self._config):
            for question_type in validator.question_types:
                self._registry[question_type] = validator
        self._logger = structlog.get_logger(__name__)

    def validate(
        self,
        question: Question,
        value: Any,
        responses: Mapping[str, Any] | None = None,
    ) -> list[FieldError]:
        responses = responses if responses is not None else {}
        if not is_visible(question, responses):
            return []
        return self.check(question, value, required=is_required(question, responses))

    def check(self, question: Question, value: Any, *, required: bool) -> list[FieldError]:
        """Validate a question already known to be visible."""
        missing = self.is_missing(question, value)
        if required and (missing or self._is_empty_selection(question, value)):
            return [self._required_error(question)]
        if missing:
            return []

        validator = self._registry.get(question.type)
        if validator is None:
            self._logger.debug("validation.no_validator", question_id=question.id, type=question.type)
            return []
        return list(validator.validate(question, value))

    def _required_error(self, question: Question) -> FieldError:
        custom = question.validation.custom_message if question.validation else None
        return FieldError(
            field=question.id,
            message=custom or self._messages.render("required"),
            type="required",
        )

    @staticmethod
    def _is_empty_selection(question: Question, value: Any) -> bool:
        # A selection is never "empty" to is_empty(); required multi-choice
        # questions check its length instead.
        return question.type == "multi-choice" and as_selection(value) == []

    @staticmethod
    def is_missing(question: Question, value: Any) -> bool:
        """Emptiness for required checks; uploads also need a file name."""
        if is_empty(value):
            return True
        if question.type == "file-upload":
            descriptor = as_file(value)
            return descriptor is not None and not descriptor.name
        return False
