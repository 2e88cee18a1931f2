"""Core conditional-logic and validation engine components."""

from __future__ import annotations

# NOTE: keep imports explicit for export clarity.
from .aggregator import ResponseAggregator, required_questions, visible_questions
from .cache import EvaluationCache, fingerprint
from .coercion import is_answered, is_empty
from .conditions import evaluate_condition
from .field_validator import FieldValidator
from .resolver import is_disabled, is_required, is_visible, resolve_state
from .results import (
    AssessmentEvaluation,
    FieldError,
    QuestionState,
    SectionProgress,
    serialize_evaluation,
)
from .schema_checks import SchemaIssue, check_assessment
from .validators import TypeValidator, ValidatorConfig


__all__ = [
    "AssessmentEvaluation",
    "EvaluationCache",
    "FieldError",
    "FieldValidator",
    "QuestionState",
    "ResponseAggregator",
    "SchemaIssue",
    "SectionProgress",
    "TypeValidator",
    "ValidatorConfig",
    "check_assessment",
    "evaluate_condition",
    "fingerprint",
    "is_answered",
    "is_disabled",
    "is_empty",
    "is_required",
    "is_visible",
    "required_questions",
    "resolve_state",
    "serialize_evaluation",
    "visible_questions",
]
