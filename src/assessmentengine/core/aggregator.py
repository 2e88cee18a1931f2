"""Assessment-level aggregation of question states and errors."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Iterable

import structlog

from ..schemas import Assessment, Question
from .cache import EvaluationCache, fingerprint
from .coercion import is_answered
from .field_validator import FieldValidator
from .resolver import is_required, is_visible, resolve_state
from .results import AssessmentEvaluation, FieldError, QuestionState, SectionProgress


def visible_questions(questions: Iterable[Question], responses: Mapping[str, Any]) -> list[Question]:
    return [question for question in questions if is_visible(question, responses)]


def required_questions(questions: Iterable[Question], responses: Mapping[str, Any]) -> list[Question]:
    """Visible questions that are also required; hidden ones never count."""
    return [
        question
        for question in questions
        if is_visible(question, responses) and is_required(question, responses)
    ]


class ResponseAggregator:
    """Fold per-question results into the assessment-level view.

    Each question's rule is resolved once and each visible question is
    validated once, so a pass is linear in the number of questions.
    """

    def __init__(
        self,
        *,
        field_validator: FieldValidator | None = None,
        cache: EvaluationCache | None = None,
    ) -> None:
        self._validator = field_validator or FieldValidator()
        self._cache = cache
        self._logger = structlog.get_logger(__name__)

    def evaluate(
        self,
        assessment: Assessment,
        responses: Mapping[str, Any] | None = None,
    ) -> AssessmentEvaluation:
        responses = responses if responses is not None else {}

        key: str | None = None
        if self._cache is not None:
            key = fingerprint(assessment, responses)
            cached = self._cache.get(key)
            if cached is not None:
                self._logger.debug("evaluation.cache_hit", assessment_id=assessment.id)
                return cached

        evaluation = self._compute(assessment, responses)

        if self._cache is not None and key is not None:
            self._cache.put(key, evaluation)

        self._logger.debug(
            "evaluation.completed",
            assessment_id=assessment.id,
            visible=evaluation.total_count,
            answered=evaluation.answered_count,
            error_questions=len(evaluation.errors_by_question),
        )
        return evaluation

    def _compute(self, assessment: Assessment, responses: Mapping[str, Any]) -> AssessmentEvaluation:
        visible: list[str] = []
        required: list[str] = []
        unanswered_required: list[str] = []
        states: dict[str, QuestionState] = {}
        errors_by_question: dict[str, tuple[FieldError, ...]] = {}
        sections: list[SectionProgress] = []
        answered_total = 0

        for section in assessment.sections:
            section_visible = 0
            section_answered = 0
            section_missing = 0

            for question in section.questions:
                state = resolve_state(question, responses)
                states[question.id] = state
                if not state.visible:
                    continue

                value = responses.get(question.id)
                answered = is_answered(value)
                visible.append(question.id)
                section_visible += 1
                if answered:
                    answered_total += 1
                    section_answered += 1
                if state.required:
                    required.append(question.id)
                    if not answered:
                        unanswered_required.append(question.id)
                        section_missing += 1

                errors = self._validator.check(question, value, required=state.required)
                if errors:
                    errors_by_question[question.id] = tuple(errors)

            sections.append(
                SectionProgress(
                    section_id=section.id,
                    visible_count=section_visible,
                    answered_count=section_answered,
                    unanswered_required=section_missing,
                )
            )

        return AssessmentEvaluation(
            assessment_id=assessment.id,
            visible_questions=tuple(visible),
            required_questions=tuple(required),
            question_states=states,
            errors_by_question=errors_by_question,
            answered_count=answered_total,
            total_count=len(visible),
            unanswered_required=tuple(unanswered_required),
            sections=tuple(sections),
        )
