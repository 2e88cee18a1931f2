"""Pydantic schema definitions for assessments and configuration."""

from __future__ import annotations

from .assessment import (
    CHOICE_TYPES,
    TEXT_TYPES,
    UNARY_CONDITIONS,
    Assessment,
    AssessmentSection,
    ConditionalRule,
    ConditionType,
    FileDescriptor,
    Question,
    QuestionType,
    RuleAction,
    ValidationRule,
)
from .config import AppConfig, load_config

__all__ = [
    "AppConfig",
    "Assessment",
    "AssessmentSection",
    "CHOICE_TYPES",
    "ConditionType",
    "ConditionalRule",
    "FileDescriptor",
    "Question",
    "QuestionType",
    "RuleAction",
    "TEXT_TYPES",
    "UNARY_CONDITIONS",
    "ValidationRule",
    "load_config",
]
