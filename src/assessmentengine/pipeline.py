"""File-based loading, evaluation and output of assessment responses."""

from __future__ import annotations

import json
from dataclasses import asdict
from pathlib import Path
from typing import Any

import pendulum
import structlog
from pydantic import ValidationError

from . import __version__
from .core import ResponseAggregator, SchemaIssue, check_assessment, serialize_evaluation
from .schemas import Assessment


class AssessmentLoadError(ValueError):
    """Raised when an assessment document cannot be parsed or validated."""


class ResponseLoadError(ValueError):
    """Raised when a response document is not a JSON object."""


class AssessmentLoader:
    """Load assessment schema documents."""

    def load(self, path: Path) -> Assessment:
        with path.open("r", encoding="utf-8") as handle:
            try:
                data = json.load(handle)
            except json.JSONDecodeError as exc:
                raise AssessmentLoadError(f"Invalid assessment JSON: {exc}") from exc
        try:
            return Assessment.model_validate(data)
        except ValidationError as exc:
            raise AssessmentLoadError(f"Invalid assessment schema: {exc}") from exc


class ResponseLoader:
    """Load a response map, either bare or wrapped in a response record."""

    def load(self, path: Path) -> tuple[dict[str, Any], dict[str, Any]]:
        """Return ``(responses, record_metadata)``."""
        with path.open("r", encoding="utf-8") as handle:
            try:
                data = json.load(handle)
            except json.JSONDecodeError as exc:
                raise ResponseLoadError(f"Invalid responses JSON: {exc}") from exc
        if not isinstance(data, dict):
            raise ResponseLoadError("Responses must be a JSON object")

        wrapped = data.get("responses")
        if isinstance(wrapped, dict):
            metadata = {k: v for k, v in data.items() if k != "responses"}
            return wrapped, metadata
        return data, {}


class OutputWriter:
    """Persist evaluation payloads."""

    def write(self, path: Path, payload: dict | list[dict]) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(
            json.dumps(payload, ensure_ascii=False, indent=2),
            encoding="utf-8",
        )


class EvaluationPipeline:
    """Load an assessment and responses, evaluate, and write the result."""

    def __init__(
        self,
        *,
        aggregator: ResponseAggregator,
        assessment_loader: AssessmentLoader | None = None,
        response_loader: ResponseLoader | None = None,
        writer: OutputWriter | None = None,
    ) -> None:
        self._aggregator = aggregator
        self._assessments = assessment_loader or AssessmentLoader()
        self._responses = response_loader or ResponseLoader()
        self._writer = writer or OutputWriter()
        self._logger = structlog.get_logger(__name__)

    def run(
        self,
        *,
        assessment_path: Path,
        responses_path: Path,
        output_path: Path | None = None,
    ) -> dict[str, Any]:
        assessment = self._assessments.load(assessment_path)
        responses, record = self._responses.load(responses_path)

        unknown = sorted(set(responses) - set(assessment.question_index()))
        if unknown:
            self._logger.warning("responses.unknown_questions", question_ids=unknown)

        evaluation = self._aggregator.evaluate(assessment, responses)
        result = serialize_evaluation(evaluation)

        self._logger.info(
            "evaluation.result",
            assessment_id=assessment.id,
            candidate_id=record.get("candidateId"),
            progress_percent=evaluation.progress_percent,
            can_submit=evaluation.can_submit,
            error_questions=sorted(evaluation.errors_by_question),
        )

        payload = {
            "metadata": {
                "assessment_id": assessment.id,
                "job_id": assessment.job_id,
                "candidate_id": record.get("candidateId"),
                "unknown_questions": unknown,
                "timestamp": pendulum.now().to_iso8601_string(),
                "app_version": __version__,
            },
            "result": result,
        }
        if output_path is not None:
            self._writer.write(output_path, payload)
        return payload

    def check(self, *, assessment_path: Path) -> list[SchemaIssue]:
        assessment = self._assessments.load(assessment_path)
        issues = check_assessment(assessment)
        for issue in issues:
            self._logger.info("schema.issue", **asdict(issue))
        return issues
