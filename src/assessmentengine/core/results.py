"""Result records produced by an evaluation pass."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import asdict, dataclass, field
from types import MappingProxyType
from typing import Any, Literal

ErrorType = Literal[
    "required",
    "minLength",
    "maxLength",
    "pattern",
    "min",
    "max",
    "fileType",
    "fileSize",
    "custom",
]


@dataclass(frozen=True, slots=True)
class FieldError:
    """A single validation failure for one question."""

    field: str
    message: str
    type: ErrorType


@dataclass(frozen=True, slots=True)
class QuestionState:
    """Derived flags for one question under the current responses."""

    question_id: str
    visible: bool
    required: bool
    disabled: bool


@dataclass(frozen=True, slots=True)
class SectionProgress:
    section_id: str
    visible_count: int
    answered_count: int
    unanswered_required: int

    @property
    def complete(self) -> bool:
        return self.unanswered_required == 0


@dataclass(frozen=True, slots=True)
class AssessmentEvaluation:
    """Assessment-level view consumed by the form layer.

    Mappings are read-only proxies over private copies, so a cached
    evaluation cannot be altered by one of its consumers.
    """

    assessment_id: str
    visible_questions: tuple[str, ...]
    required_questions: tuple[str, ...]
    question_states: Mapping[str, QuestionState]
    errors_by_question: Mapping[str, tuple[FieldError, ...]]
    answered_count: int
    total_count: int
    unanswered_required: tuple[str, ...] = ()
    sections: tuple[SectionProgress, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        object.__setattr__(self, "question_states", MappingProxyType(dict(self.question_states)))
        object.__setattr__(
            self,
            "errors_by_question",
            MappingProxyType({key: tuple(errors) for key, errors in self.errors_by_question.items()}),
        )

    @property
    def progress_percent(self) -> float:
        if self.total_count == 0:
            return 0.0
        return self.answered_count / self.total_count * 100

    @property
    def can_submit(self) -> bool:
        return not self.unanswered_required and not self.errors_by_question

    @property
    def completed_sections(self) -> tuple[str, ...]:
        return tuple(section.section_id for section in self.sections if section.complete)

    def errors_for(self, question_id: str) -> tuple[FieldError, ...]:
        return self.errors_by_question.get(question_id, ())


def serialize_evaluation(evaluation: AssessmentEvaluation) -> dict[str, Any]:
    """Plain-JSON rendering including the derived properties."""
    return {
        "assessment_id": evaluation.assessment_id,
        "visible_questions": list(evaluation.visible_questions),
        "required_questions": list(evaluation.required_questions),
        "question_states": {
            question_id: asdict(state)
            for question_id, state in evaluation.question_states.items()
        },
        "errors_by_question": {
            question_id: [asdict(error) for error in errors]
            for question_id, errors in evaluation.errors_by_question.items()
        },
        "answered_count": evaluation.answered_count,
        "total_count": evaluation.total_count,
        "unanswered_required": list(evaluation.unanswered_required),
        "sections": [
            {**asdict(section), "complete": section.complete}
            for section in evaluation.sections
        ],
        "progress_percent": evaluation.progress_percent,
        "can_submit": evaluation.can_submit,
        "completed_sections": list(evaluation.completed_sections),
    }


__all__ = [
    "AssessmentEvaluation",
    "ErrorType",
    "FieldError",
    "QuestionState",
    "SectionProgress",
    "serialize_evaluation",
]
