from __future__ import annotations

from typing import Any

import pytest

from assessmentengine.core import (
    EvaluationCache,
    ResponseAggregator,
    required_questions,
    serialize_evaluation,
    visible_questions,
)
from assessmentengine.schemas import Assessment


def build_assessment(sections: list[dict[str, Any]]) -> Assessment:
    return Assessment.model_validate(
        {"id": "A-001", "jobId": "JD-001", "title": "Backend screening", "sections": sections}
    )


def screening_assessment() -> Assessment:
    return build_assessment(
        [
            {
                "id": "s1",
                "title": "Basics",
                "questions": [
                    {"id": "q1", "type": "single-choice", "title": "Remote?", "options": ["yes", "no"], "required": True},
                    {
                        "id": "q2",
                        "type": "short-text",
                        "title": "Timezone",
                        "required": True,
                        "conditionalLogic": {"dependsOn": "q1", "condition": "equals", "value": "yes", "action": "show"},
                    },
                    {"id": "q3", "type": "numeric", "title": "Years", "validation": {"min": 0, "max": 50}},
                ],
            },
            {
                "id": "s2",
                "title": "Skills",
                "questions": [
                    {"id": "q4", "type": "multi-choice", "title": "Languages", "options": ["Python", "Go"]},
                    {
                        "id": "q5",
                        "type": "long-text",
                        "title": "Why Go?",
                        "conditionalLogic": {"dependsOn": "q4", "condition": "contains", "value": "go", "action": "require"},
                    },
                ],
            },
        ]
    )


def test_hidden_question_excluded_from_every_view():
    assessment = screening_assessment()
    aggregator = ResponseAggregator()

    shown = aggregator.evaluate(assessment, {"q1": "yes"})
    hidden = aggregator.evaluate(assessment, {"q1": "no", "q2": ""})

    assert "q2" in shown.visible_questions
    assert "q2" in shown.required_questions
    assert "q2" not in hidden.visible_questions
    assert "q2" not in hidden.required_questions
    assert "q2" not in hidden.errors_by_question
    assert hidden.total_count == 4
    assert hidden.question_states["q2"].visible is False


def test_progress_and_submit_readiness():
    assessment = screening_assessment()
    aggregator = ResponseAggregator()

    evaluation = aggregator.evaluate(assessment, {"q1": "yes", "q3": 4})

    assert evaluation.total_count == 5
    assert evaluation.answered_count == 2
    assert evaluation.progress_percent == pytest.approx(40.0)
    assert evaluation.unanswered_required == ("q2",)
    assert evaluation.can_submit is False
    assert [error.type for error in evaluation.errors_for("q2")] == ["required"]


def test_four_visible_two_answered_is_half_done():
    assessment = build_assessment(
        [
            {
                "id": "s1",
                "title": "Only",
                "questions": [
                    {"id": "a", "type": "short-text", "title": "A"},
                    {"id": "b", "type": "short-text", "title": "B"},
                    {"id": "c", "type": "short-text", "title": "C", "required": True},
                    {"id": "d", "type": "short-text", "title": "D"},
                ],
            }
        ]
    )

    evaluation = ResponseAggregator().evaluate(assessment, {"a": "x", "b": "y"})

    assert evaluation.progress_percent == 50
    assert evaluation.can_submit is False


def test_empty_selection_is_not_answered():
    assessment = screening_assessment()

    evaluation = ResponseAggregator().evaluate(assessment, {"q1": "no", "q4": []})

    assert evaluation.answered_count == 1
    assert "q4" not in evaluation.errors_by_question


def test_rule_driven_requirement_blocks_submit():
    assessment = screening_assessment()
    aggregator = ResponseAggregator()

    blocked = aggregator.evaluate(assessment, {"q1": "no", "q4": ["Go"]})
    ready = aggregator.evaluate(assessment, {"q1": "no", "q4": ["Go"], "q5": "Concurrency"})

    assert "q5" in blocked.required_questions
    assert blocked.can_submit is False
    assert ready.can_submit is True
    assert ready.errors_by_question == {}


def test_validation_errors_block_submit_even_when_answered():
    assessment = screening_assessment()

    evaluation = ResponseAggregator().evaluate(assessment, {"q1": "no", "q3": 70})

    assert evaluation.unanswered_required == ()
    assert [error.type for error in evaluation.errors_for("q3")] == ["max"]
    assert evaluation.can_submit is False


def test_empty_assessment_progress_is_zero():
    evaluation = ResponseAggregator().evaluate(build_assessment([]), {})

    assert evaluation.total_count == 0
    assert evaluation.progress_percent == 0
    assert evaluation.can_submit is True


def test_section_progress_and_completed_sections():
    assessment = screening_assessment()

    evaluation = ResponseAggregator().evaluate(assessment, {"q1": "no"})

    basics, skills = evaluation.sections
    assert (basics.visible_count, basics.answered_count, basics.complete) == (2, 1, True)
    assert (skills.visible_count, skills.answered_count, skills.complete) == (2, 0, True)
    assert evaluation.completed_sections == ("s1", "s2")

    pending = ResponseAggregator().evaluate(assessment, {"q1": "yes"})
    assert pending.completed_sections == ("s2",)


def test_evaluation_is_idempotent_and_does_not_mutate_responses():
    assessment = screening_assessment()
    responses = {"q1": "yes", "q2": "", "q3": "abc", "q4": ["Rust"]}
    snapshot = dict(responses)
    aggregator = ResponseAggregator()

    first = serialize_evaluation(aggregator.evaluate(assessment, responses))
    second = serialize_evaluation(aggregator.evaluate(assessment, responses))

    assert first == second
    assert responses == snapshot


def test_cached_and_uncached_results_match():
    assessment = screening_assessment()
    responses = {"q1": "yes", "q2": "UTC+9"}
    cache = EvaluationCache(max_entries=4)
    cached = ResponseAggregator(cache=cache)

    cold = cached.evaluate(assessment, responses)
    warm = cached.evaluate(assessment, dict(responses))
    fresh = ResponseAggregator().evaluate(assessment, responses)

    assert warm is cold
    assert cache.hits == 1
    assert serialize_evaluation(fresh) == serialize_evaluation(cold)


def test_question_list_helpers():
    assessment = screening_assessment()
    questions = assessment.questions()

    visible = visible_questions(questions, {"q1": "no"})
    required = required_questions(questions, {"q1": "yes"})

    assert [q.id for q in visible] == ["q1", "q3", "q4", "q5"]
    assert [q.id for q in required] == ["q1", "q2"]


def test_required_empty_selection_reports_required_error():
    assessment = build_assessment(
        [
            {
                "id": "s1",
                "title": "Skills",
                "questions": [
                    {"id": "langs", "type": "multi-choice", "title": "Languages", "options": ["Python", "Go"], "required": True},
                ],
            }
        ]
    )

    evaluation = ResponseAggregator().evaluate(assessment, {"langs": []})

    assert [error.type for error in evaluation.errors_for("langs")] == ["required"]
    assert evaluation.unanswered_required == ("langs",)
    assert evaluation.can_submit is False


def test_cached_results_cannot_be_mutated_by_callers():
    assessment = screening_assessment()
    aggregator = ResponseAggregator(cache=EvaluationCache())

    first = aggregator.evaluate(assessment, {})

    with pytest.raises(TypeError):
        first.errors_by_question["q1"] = ()
    with pytest.raises(TypeError):
        del first.question_states["q1"]
    with pytest.raises(AttributeError):
        first.errors_by_question.clear()

    second = aggregator.evaluate(assessment, {})
    assert second is first
    assert [error.type for error in second.errors_for("q1")] == ["required"]
    assert "q1" in second.question_states
