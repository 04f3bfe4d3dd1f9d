#!/usr/bin/env python3
"""
Resume / Job Description Match CLI

Scores a plain-text resume against a plain-text job description and prints a
report with matched, partial and missing keywords plus improvement suggestions.

Commands:
    analyze    - Score one resume against one job description
    vocabulary - Show the skills and certifications the matcher recognizes

Examples:\n

    analyze_match.py analyze resume.txt job.txt                    # Text report

    analyze_match.py analyze resume.txt job.txt --json             # JSON output

    analyze_match.py analyze resume.txt job.txt --config tuned.yaml

    analyze_match.py analyze resume.txt job.txt --log-dir outs/logs

    analyze_match.py vocabulary --category certifications
"""

import os
from pathlib import Path
from typing import Optional

import typer
from dotenv import load_dotenv
from typing_extensions import Annotated

from resumematch.contexts.intake import InsufficientInputError, prepare_text, validate_inputs
from resumematch.contexts.matching import (
    VOCABULARY,
    ScoringConfigError,
    analyze,
    load_scoring_config,
)
from resumematch.contexts.matching.logger import _log_info, _log_success, setup_matching_logger
from resumematch.contexts.reporting import format_report, result_to_json, score_label

load_dotenv()
SCORING_CONFIG = os.getenv("SCORING_CONFIG")
LOGS_PATH = os.getenv("LOGS_PATH")


app = typer.Typer(
    help="Score resumes against job descriptions by keyword overlap",
    add_completion=False,
    invoke_without_command=True,
)


@app.callback()
def main(ctx: typer.Context):
    """Show help by default when no command is provided."""
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()


def _read_text(path: Path, label: str) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        typer.secho(f"ERROR: Could not read {label} file {path}: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(1)


@app.command("analyze")
def analyze_command(
    resume_file: Annotated[Path, typer.Argument(help="Plain-text resume file")],
    job_file: Annotated[Path, typer.Argument(help="Plain-text job description file")],
    config: Annotated[
        Optional[Path],
        typer.Option(
            "--config",
            "-c",
            help="YAML file overriding scoring settings (default: $SCORING_CONFIG)",
        ),
    ] = None,
    as_json: Annotated[bool, typer.Option("--json", help="Print JSON instead of a text report")] = False,
    validate: Annotated[
        bool,
        typer.Option("--validate/--no-validate", help="Reject inputs of 50 characters or fewer"),
    ] = True,
    log_dir: Annotated[
        Optional[Path],
        typer.Option("--log-dir", help="Write a session log under this directory (default: $LOGS_PATH)"),
    ] = None,
):
    """Score a resume against a job description."""
    config_path = config or (Path(SCORING_CONFIG) if SCORING_CONFIG else None)
    log_root = log_dir or (Path(LOGS_PATH) if LOGS_PATH else None)

    if log_root:
        session = f"analyze_{resume_file.stem}_{job_file.stem}"
        log_file = setup_matching_logger(log_root / session, str(config_path or "defaults"))
        _log_info(f"Log file: {log_file}")

    try:
        scoring_config = load_scoring_config(config_path)
    except (ScoringConfigError, FileNotFoundError) as e:
        typer.secho(f"ERROR: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(1)

    resume_text = prepare_text(_read_text(resume_file, "resume"))
    job_text = prepare_text(_read_text(job_file, "job description"))

    if validate:
        try:
            resume_text, job_text = validate_inputs(resume_text, job_text)
        except InsufficientInputError as e:
            typer.secho(f"ERROR: {e}", fg=typer.colors.RED, err=True)
            raise typer.Exit(1)

    result = analyze(resume_text, job_text, config=scoring_config)
    _log_success(f"{resume_file.name} vs {job_file.name}: {result.score}/100 ({score_label(result.score)})")

    if as_json:
        typer.echo(result_to_json(result))
    else:
        typer.echo(format_report(result))


@app.command("vocabulary")
def vocabulary_command(
    category: Annotated[
        str,
        typer.Option("--category", help="skills or certifications"),
    ] = "skills",
):
    """List the terms the matcher recognizes for a category."""
    terms = {
        "skills": VOCABULARY.skills,
        "certifications": VOCABULARY.certifications,
    }

    if category not in terms:
        typer.secho(
            f"ERROR: Unknown category '{category}' (expected skills or certifications)",
            fg=typer.colors.RED,
            err=True,
        )
        raise typer.Exit(1)

    typer.echo(f"{category.capitalize()} ({len(terms[category])}):")
    for term in sorted(terms[category]):
        typer.echo(f"  {term}")


if __name__ == "__main__":
    app()
