"""Visibility, requirement and disablement of questions.

Each question carries at most one conditional rule, read as a one-hop
lookup of its ``dependsOn`` response. Rules are not chained and dependency
cycles are not detected: a question that depends on a hidden question
still sees that question's stored response.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from ..schemas import ConditionalRule, Question
from .conditions import evaluate_condition
from .results import QuestionState


def rule_fires(rule: ConditionalRule, responses: Mapping[str, Any]) -> bool:
    """Evaluate a rule against the current value of its dependency."""
    return evaluate_condition(rule.condition, responses.get(rule.depends_on), rule.value)


def is_visible(question: Question, responses: Mapping[str, Any]) -> bool:
    rule = question.conditional_logic
    if rule is None:
        return True
    if rule.action == "show":
        return rule_fires(rule, responses)
    if rule.action == "hide":
        return not rule_fires(rule, responses)
    return True


def is_required(question: Question, responses: Mapping[str, Any]) -> bool:
    """Static flag (or ``validation.required``) OR a firing ``require`` rule."""
    required = bool(question.required)
    if question.validation is not None and question.validation.required:
        required = True
    rule = question.conditional_logic
    if rule is not None and rule.action == "require":
        required = required or rule_fires(rule, responses)
    return required


def is_disabled(question: Question, responses: Mapping[str, Any]) -> bool:
    rule = question.conditional_logic
    if rule is not None and rule.action == "disable":
        return rule_fires(rule, responses)
    return False


def resolve_state(question: Question, responses: Mapping[str, Any]) -> QuestionState:
    return QuestionState(
        question_id=question.id,
        visible=is_visible(question, responses),
        required=is_required(question, responses),
        disabled=is_disabled(question, responses),
    )


__all__ = ["is_disabled", "is_required", "is_visible", "resolve_state", "rule_fires"]
