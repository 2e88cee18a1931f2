"""Authoring-level consistency checks for assessment schemas.

These checks only report. Evaluation never consults them, so a schema
with a dependency cycle still evaluates with one-hop rule lookups.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from ..schemas import CHOICE_TYPES, UNARY_CONDITIONS, Assessment, Question
from .validators import compile_pattern

Severity = Literal["error", "warning"]


@dataclass(frozen=True, slots=True)
class SchemaIssue:
    code: str
    severity: Severity
    question_id: str
    message: str


def check_assessment(assessment: Assessment) -> list[SchemaIssue]:
    """Return schema issues in question order, cycles last."""
    index = assessment.question_index()
    issues: list[SchemaIssue] = []
    for question in index.values():
        issues.extend(_check_rule(question, index))
        issues.extend(_check_bounds(question))
    issues.extend(_check_cycles(index))
    return issues


def has_errors(issues: list[SchemaIssue]) -> bool:
    return any(issue.severity == "error" for issue in issues)


def _check_rule(question: Question, index: dict[str, Question]) -> list[SchemaIssue]:
    rule = question.conditional_logic
    if rule is None:
        return []

    issues: list[SchemaIssue] = []
    target = index.get(rule.depends_on)
    if rule.depends_on == question.id:
        issues.append(
            SchemaIssue("self_dependency", "warning", question.id, "rule depends on its own question")
        )
    elif target is None:
        issues.append(
            SchemaIssue(
                "unknown_dependency",
                "error",
                question.id,
                f"rule depends on unknown question {rule.depends_on!r}",
            )
        )

    if rule.condition not in UNARY_CONDITIONS and rule.value is None:
        issues.append(
            SchemaIssue(
                "missing_condition_value",
                "warning",
                question.id,
                f"condition {rule.condition!r} has no value to compare against",
            )
        )
    elif (
        target is not None
        and target.type == "single-choice"
        and rule.condition in ("equals", "not_equals")
        and rule.value not in (target.options or [])
    ):
        issues.append(
            SchemaIssue(
                "unreachable_value",
                "warning",
                question.id,
                f"{rule.value!r} is not an option of {target.id!r}",
            )
        )
    return issues


def _check_bounds(question: Question) -> list[SchemaIssue]:
    rule = question.validation
    if rule is None:
        return []

    issues: list[SchemaIssue] = []
    pairs = (
        ("invalid_length_bounds", rule.min_length, rule.max_length),
        ("invalid_bounds", rule.min, rule.max),
        ("invalid_file_size_bounds", rule.min_file_size, rule.max_file_size),
    )
    for code, low, high in pairs:
        if low is not None and high is not None and low > high:
            issues.append(
                SchemaIssue(code, "error", question.id, f"minimum {low} exceeds maximum {high}")
            )

    if rule.pattern and compile_pattern(rule.pattern) is None:
        issues.append(
            SchemaIssue(
                "invalid_pattern",
                "warning",
                question.id,
                f"pattern {rule.pattern!r} is not a valid regular expression and is ignored",
            )
        )
    if question.type in CHOICE_TYPES and len(set(question.options or [])) != len(question.options or []):
        issues.append(
            SchemaIssue("duplicate_options", "warning", question.id, "options contain duplicates")
        )
    return issues


def _check_cycles(index: dict[str, Question]) -> list[SchemaIssue]:
    # Every question has at most one outgoing edge, so each walk either
    # ends or enters exactly one cycle.
    edges = {
        question_id: question.conditional_logic.depends_on
        for question_id, question in index.items()
        if question.conditional_logic is not None
        and question.conditional_logic.depends_on != question_id
    }
    state: dict[str, int] = {}
    issues: list[SchemaIssue] = []
    for start in index:
        path: list[str] = []
        node: str | None = start
        while node is not None and node in index and state.get(node, 0) == 0:
            state[node] = 1
            path.append(node)
            node = edges.get(node)
        if node is not None and state.get(node) == 1:
            cycle = path[path.index(node):]
            issues.append(
                SchemaIssue(
                    "dependency_cycle",
                    "warning",
                    cycle[0],
                    "conditional rules form a cycle: " + " -> ".join(cycle + [cycle[0]]),
                )
            )
        for visited in path:
            state[visited] = 2
    return issues
