"""Typer CLI entrypoint for the assessment engine."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Optional

import typer
import yaml
from pydantic import ValidationError

from .container import create_container
from .core.schema_checks import has_errors
from .logging import configure_logging
from .pipeline import AssessmentLoadError, ResponseLoadError
from .schemas import load_config

app = typer.Typer(help="Assessment conditional-logic and validation CLI.")


def _load_settings(config: Path | None) -> dict[str, Any]:
    if not config:
        return {}
    with config.open("r", encoding="utf-8") as handle:
        loaded = yaml.safe_load(handle) or {}
    if not isinstance(loaded, dict):
        raise typer.BadParameter("Config file must be a YAML object", param_name="config")
    try:
        return load_config(loaded).to_settings()
    except ValidationError as exc:
        raise typer.BadParameter(str(exc), param_name="config") from exc


@app.command()
def evaluate(
    assessment: Path = typer.Option(..., exists=True, readable=True, dir_okay=False, help="Assessment JSON path."),
    responses: Path = typer.Option(..., exists=True, readable=True, dir_okay=False, help="Responses JSON path."),
    output: Optional[Path] = typer.Option(
        None,
        file_okay=True,
        dir_okay=False,
        resolve_path=True,
        help="Output JSON path; prints to stdout when omitted.",
    ),
    config: Optional[Path] = typer.Option(None, exists=True, readable=True, dir_okay=False, help="YAML config path."),
    log_level: str = typer.Option("WARNING", help="Log level for structured logging."),
) -> None:
    """Evaluate a response map against an assessment."""
    settings = _load_settings(config)
    configure_logging(log_level)

    pipeline = create_container(settings=settings).pipeline()
    try:
        payload = pipeline.run(
            assessment_path=assessment,
            responses_path=responses,
            output_path=output,
        )
    except AssessmentLoadError as exc:
        raise typer.BadParameter(str(exc), param_name="assessment") from exc
    except ResponseLoadError as exc:
        raise typer.BadParameter(str(exc), param_name="responses") from exc

    result = payload["result"]
    if output is None:
        typer.echo(json.dumps(payload, ensure_ascii=False, indent=2))
    else:
        typer.echo(
            f"Answered {result['answered_count']} of {result['total_count']} questions; "
            f"can submit: {result['can_submit']}. Results saved to {output}."
        )


@app.command()
def check(
    assessment: Path = typer.Option(..., exists=True, readable=True, dir_okay=False, help="Assessment JSON path."),
    log_level: str = typer.Option("WARNING", help="Log level for structured logging."),
) -> None:
    """Report schema issues; exits with status 1 when any is an error."""
    configure_logging(log_level)
    pipeline = create_container().pipeline()
    try:
        issues = pipeline.check(assessment_path=assessment)
    except AssessmentLoadError as exc:
        raise typer.BadParameter(str(exc), param_name="assessment") from exc

    for issue in issues:
        typer.echo(f"{issue.severity}: {issue.question_id}: {issue.code}: {issue.message}")
    if not issues:
        typer.echo("No issues found.")
    if has_errors(issues):
        raise typer.Exit(code=1)


def main() -> None:
    app()


if __name__ == "__main__":
    main()
