from __future__ import annotations

from typing import Any

from assessmentengine.core import ResponseAggregator, check_assessment
from assessmentengine.core.schema_checks import has_errors
from assessmentengine.schemas import Assessment


def build_assessment(questions: list[dict[str, Any]]) -> Assessment:
    return Assessment.model_validate(
        {
            "id": "A-check",
            "jobId": "JD-check",
            "title": "Checks",
            "sections": [{"id": "s1", "title": "Only", "questions": questions}],
        }
    )


def show_if(depends_on: str, value: Any = "yes", condition: str = "equals") -> dict[str, Any]:
    return {"dependsOn": depends_on, "condition": condition, "value": value, "action": "show"}


def codes(issues) -> list[str]:
    return [issue.code for issue in issues]


def test_clean_assessment_has_no_issues():
    assessment = build_assessment(
        [
            {"id": "q1", "type": "single-choice", "title": "Remote?", "options": ["yes", "no"]},
            {"id": "q2", "type": "short-text", "title": "Where?", "conditionalLogic": show_if("q1")},
        ]
    )

    assert check_assessment(assessment) == []


def test_unknown_dependency_is_an_error():
    assessment = build_assessment(
        [{"id": "q1", "type": "short-text", "title": "A", "conditionalLogic": show_if("missing")}]
    )

    issues = check_assessment(assessment)

    assert codes(issues) == ["unknown_dependency"]
    assert has_errors(issues)


def test_rule_value_problems_are_warnings():
    assessment = build_assessment(
        [
            {"id": "q1", "type": "single-choice", "title": "Remote?", "options": ["yes", "no"]},
            {"id": "q2", "type": "short-text", "title": "B", "conditionalLogic": show_if("q1", "maybe")},
            {"id": "q3", "type": "short-text", "title": "C", "conditionalLogic": show_if("q1", None)},
            {"id": "q4", "type": "short-text", "title": "D", "conditionalLogic": show_if("q4")},
        ]
    )

    issues = check_assessment(assessment)

    assert codes(issues) == ["unreachable_value", "missing_condition_value", "self_dependency"]
    assert not has_errors(issues)


def test_bounds_and_pattern_checks():
    assessment = build_assessment(
        [
            {"id": "q1", "type": "short-text", "title": "A", "validation": {"minLength": 9, "maxLength": 3, "pattern": "(("}},
            {"id": "q2", "type": "numeric", "title": "B", "validation": {"min": 10, "max": 1}},
            {"id": "q3", "type": "file-upload", "title": "C", "validation": {"minFileSize": 5, "maxFileSize": 1}},
            {"id": "q4", "type": "multi-choice", "title": "D", "options": ["A", "A"]},
        ]
    )

    assert codes(check_assessment(assessment)) == [
        "invalid_length_bounds",
        "invalid_pattern",
        "invalid_bounds",
        "invalid_file_size_bounds",
        "duplicate_options",
    ]


def test_cycle_is_reported_but_evaluation_still_runs():
    assessment = build_assessment(
        [
            {"id": "a", "type": "short-text", "title": "A", "conditionalLogic": show_if("b", "x", "is_empty")},
            {"id": "b", "type": "short-text", "title": "B", "conditionalLogic": show_if("a", "x", "is_empty")},
            {"id": "c", "type": "short-text", "title": "C", "conditionalLogic": show_if("a", "x", "is_empty")},
        ]
    )

    issues = check_assessment(assessment)
    evaluation = ResponseAggregator().evaluate(assessment, {})

    assert codes(issues) == ["dependency_cycle"]
    assert issues[0].message.endswith("a -> b -> a")
    assert evaluation.visible_questions == ("a", "b", "c")
