"""
speechcoach.cli - Typer CLI entry point.

Provides subcommands to analyze, score, validate and report on practice
session transcripts.
"""

from __future__ import annotations

import json
from pathlib import Path

import typer
from rich.console import Console
from rich.table import Table

from speechcoach import __version__
from speechcoach.config import CONFIG_FILENAME, CoachConfig, create_default_config, write_config
from speechcoach.exceptions import SpeechCoachError
from speechcoach.logging import configure_logging, logger
from speechcoach.session import Session, load_session

app = typer.Typer(
    name="speechcoach",
    help="Interview and group-discussion practice toolkit.\n\n"
    "Analyzes session transcripts for filler words, grammar slips, speaking "
    "rate and pauses, then scores the session and renders a report.",
    add_completion=False,
)
console = Console()


def find_config_file() -> Path | None:
    """Find speechcoach.yaml in the current directory or its parents."""
    current = Path.cwd()
    while current != current.parent:
        if (current / CONFIG_FILENAME).exists():
            return current / CONFIG_FILENAME
        current = current.parent
    return None


def version_callback(value: bool) -> None:
    if value:
        console.print(f"speechcoach {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        False,
        "--version",
        "-V",
        help="Show version and exit",
        callback=version_callback,
        is_eager=True,
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """SpeechCoach - interview and group-discussion practice toolkit."""
    configure_logging(verbose)


def _load_session_or_exit(
    session_file: Path,
    duration: float | None = None,
    mode: str | None = None,
) -> Session:
    try:
        return load_session(session_file, duration_seconds=duration, mode=mode)
    except SpeechCoachError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)


def _load_config_or_exit(config_path: Path | None, session: Session) -> CoachConfig:
    from speechcoach.config import load_config

    path = config_path or find_config_file()
    try:
        config = load_config(path, profile=None if path else session.profile)
    except SpeechCoachError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)

    if config.profile != session.profile:
        logger.warning("Using profile %r for a %s session", config.profile, session.mode)
    return config


@app.command("init")
def init_config(
    path: str = typer.Argument(".", help="Directory to write speechcoach.yaml into"),
    profile: str = typer.Option(
        "interview",
        "--profile",
        "-p",
        help="Profile: interview or group-discussion",
    ),
    force: bool = typer.Option(False, "--force", "-f", help="Overwrite an existing config"),
) -> None:
    """Write a default speechcoach.yaml."""
    config_path = Path(path) / CONFIG_FILENAME

    if config_path.exists() and not force:
        console.print(f"[red]Error: '{config_path}' already exists[/red]")
        raise typer.Exit(1)

    try:
        write_config(create_default_config(profile), config_path)
    except SpeechCoachError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)

    console.print(f"[green]✓[/green] Wrote {config_path} with profile '{profile}'")
    console.print("\nNext step: [cyan]speechcoach analyze <session_file>[/cyan]")


@app.command("analyze")
def analyze_cmd(
    session_file: Path = typer.Argument(..., help="Session file (.json, .yaml, .txt)"),
    duration: float | None = typer.Option(
        None, "--duration", "-d", help="Session duration in seconds (required for .txt)"
    ),
    as_json: bool = typer.Option(False, "--json", help="Print metrics as JSON"),
) -> None:
    """Show speech metrics and confidence indicators for a session."""
    from speechcoach.analyze import analyze_speech, calculate_confidence_indicators
    from speechcoach.analyze.speech import ordered_grammar_issues

    session = _load_session_or_exit(session_file, duration)
    seconds = session.duration_seconds or 0.0

    metrics = analyze_speech(session.transcripts, seconds)
    assessment = calculate_confidence_indicators(metrics, seconds)

    if as_json:
        payload = {
            "metrics": metrics.model_dump(mode="json"),
            "confidence": assessment.model_dump(mode="json"),
        }
        payload["metrics"]["filler_words"] = sorted(metrics.filler_words)
        payload["metrics"]["grammar_issues"] = ordered_grammar_issues(metrics.grammar_issues)
        typer.echo(json.dumps(payload, indent=2))
        return

    table = Table(title="Speech Metrics")
    table.add_column("Metric", style="cyan")
    table.add_column("Value", style="green")
    table.add_row("Words", str(metrics.word_count))
    table.add_row("Words per minute", str(metrics.average_words_per_minute))
    table.add_row("Sentences", str(metrics.sentence_count))
    table.add_row("Filler words", str(metrics.filler_count))
    table.add_row("Distinct fillers", ", ".join(sorted(metrics.filler_words)) or "-")
    table.add_row("Pauses", str(metrics.pause_count))
    console.print(table)

    if metrics.grammar_issues:
        console.print("\n[yellow]Grammar issues:[/yellow]")
        for issue in ordered_grammar_issues(metrics.grammar_issues):
            console.print(f"  • {issue}")

    console.print(
        f"\nConfidence: [bold]{assessment.confidence_level.value}[/bold]  "
        f"Fear: [bold]{assessment.fear_indicator.value}[/bold]"
    )
    for habit in assessment.nervous_habits:
        console.print(f"  [yellow]•[/yellow] {habit}")


@app.command("evaluate")
def evaluate_cmd(
    session_file: Path = typer.Argument(..., help="Session file (.json, .yaml, .txt)"),
    duration: float | None = typer.Option(None, "--duration", "-d", help="Duration in seconds"),
    mode: str | None = typer.Option(None, "--mode", "-m", help="Session mode: interview or gd"),
    config_path: Path | None = typer.Option(None, "--config", "-c", help="speechcoach.yaml"),
    output: Path | None = typer.Option(None, "--output", "-o", help="Write evaluation JSON here"),
) -> None:
    """Score a session and print or save the evaluation."""
    from speechcoach.analyze.scoring import evaluate_session
    from speechcoach.session import write_evaluation

    session = _load_session_or_exit(session_file, duration, mode)
    config = _load_config_or_exit(config_path, session)

    _, _, evaluation = evaluate_session(session, config)
    data = evaluation.model_dump(mode="json")

    if output is None:
        typer.echo(json.dumps(data, indent=2))
        return

    try:
        write_evaluation(output, data)
    except OSError as e:
        console.print(f"[red]Error writing evaluation: {e}[/red]")
        raise typer.Exit(1)

    console.print(f"[green]✓[/green] Evaluation written: {output}")


@app.command("report")
def report_cmd(
    session_file: Path = typer.Argument(..., help="Session file (.json, .yaml, .txt)"),
    duration: float | None = typer.Option(None, "--duration", "-d", help="Duration in seconds"),
    mode: str | None = typer.Option(None, "--mode", "-m", help="Session mode: interview or gd"),
    config_path: Path | None = typer.Option(None, "--config", "-c", help="speechcoach.yaml"),
    output: Path | None = typer.Option(None, "--output", "-o", help="HTML output path"),
    open_browser: bool = typer.Option(False, "--open", help="Open in browser"),
) -> None:
    """Generate an HTML evaluation report."""
    from speechcoach.reports.evaluation import generate_evaluation_report

    session = _load_session_or_exit(session_file, duration, mode)
    config = _load_config_or_exit(config_path, session)

    if output is None:
        output = session_file.with_suffix(".html")

    try:
        path = generate_evaluation_report(session, config, output, open_browser=open_browser)
    except SpeechCoachError as e:
        console.print(f"[red]Error generating report: {e}[/red]")
        raise typer.Exit(1)

    console.print(f"[green]✓[/green] Report: {path}")
    if not open_browser:
        console.print("[dim]Run with --open to view in browser[/dim]")


@app.command("validate")
def validate_cmd(
    session_file: Path = typer.Argument(..., help="Session file (.json, .yaml, .txt)"),
    duration: float | None = typer.Option(None, "--duration", "-d", help="Duration in seconds"),
) -> None:
    """Check a session file before analysis."""
    from speechcoach.validation import validate_session

    session = _load_session_or_exit(session_file, duration)
    result = validate_session(session)

    console.print(
        f"[cyan]{session_file.name}[/cyan]: {session.utterance_count} response(s), "
        f"{result['duration_formatted']}"
    )
    for error in result["errors"]:
        console.print(f"[red]✗[/red] {error}")
    for warning in result["warnings"]:
        console.print(f"[yellow]Warning: {warning}[/yellow]")

    if not result["valid"]:
        raise typer.Exit(1)

    console.print("[green]✓ Session is valid[/green]")


if __name__ == "__main__":
    app()
