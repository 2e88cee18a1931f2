"""Assessment schema: sections of typed questions with rules."""

from __future__ import annotations

from datetime import datetime
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel

QuestionType = Literal[
    "short-text",
    "long-text",
    "numeric",
    "single-choice",
    "multi-choice",
    "file-upload",
]

ConditionType = Literal[
    "equals",
    "not_equals",
    "contains",
    "not_contains",
    "greater_than",
    "less_than",
    "greater_equal",
    "less_equal",
    "is_empty",
    "is_not_empty",
]

RuleAction = Literal["show", "hide", "require", "disable"]

TEXT_TYPES: tuple[str, ...] = ("short-text", "long-text")
CHOICE_TYPES: tuple[str, ...] = ("single-choice", "multi-choice")
UNARY_CONDITIONS: tuple[str, ...] = ("is_empty", "is_not_empty")


def _camel_config(extra: str = "forbid") -> ConfigDict:
    return ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        extra=extra,
    )


class ValidationRule(BaseModel):
    """Optional constraints attached to a question."""

    required: bool | None = None
    min_length: int | None = None
    max_length: int | None = None
    pattern: str | None = None
    pattern_message: str | None = None
    min: float | None = None
    max: float | None = None
    file_types: list[str] | None = None
    min_file_size: float | None = None
    max_file_size: float | None = None
    custom_message: str | None = None

    model_config = _camel_config()


class ConditionalRule(BaseModel):
    """Single dependency-driven predicate controlling a question."""

    depends_on: str
    condition: ConditionType
    value: Any = None
    action: RuleAction

    model_config = _camel_config()


class FileDescriptor(BaseModel):
    """File-like response value for file-upload questions."""

    name: str = ""
    size: float | None = None
    type: str | None = None

    model_config = ConfigDict(extra="allow", frozen=True)

    @property
    def extension(self) -> str:
        # A name without a dot is its own extension.
        return self.name.rsplit(".", 1)[-1].lower()


class Question(BaseModel):
    id: str
    type: QuestionType
    title: str
    description: str | None = None
    required: bool = False
    options: list[str] | None = None
    validation: ValidationRule | None = None
    conditional_logic: ConditionalRule | None = None
    order: int | None = None

    model_config = _camel_config()

    @model_validator(mode="after")
    def _choice_questions_need_options(self) -> "Question":
        if self.type in CHOICE_TYPES and not self.options:
            raise ValueError(
                f"question {self.id!r} of type {self.type!r} must declare options"
            )
        return self


class AssessmentSection(BaseModel):
    id: str
    title: str
    description: str | None = None
    questions: list[Question] = Field(default_factory=list)
    order: int | None = None

    model_config = _camel_config()


class Assessment(BaseModel):
    """Ordered sections of questions attached to a job."""

    id: str
    job_id: str
    title: str
    sections: list[AssessmentSection] = Field(default_factory=list)
    created_at: datetime | None = None
    updated_at: datetime | None = None

    model_config = _camel_config(extra="allow")

    @model_validator(mode="after")
    def _question_ids_unique(self) -> "Assessment":
        seen: set[str] = set()
        duplicates: list[str] = []
        for question in self.questions():
            if question.id in seen:
                duplicates.append(question.id)
            seen.add(question.id)
        if duplicates:
            raise ValueError(f"duplicate question ids: {sorted(set(duplicates))}")
        return self

    def questions(self) -> list[Question]:
        """Flattened question list in section order."""
        return [question for section in self.sections for question in section.questions]

    def question_index(self) -> dict[str, Question]:
        return {question.id: question for question in self.questions()}
