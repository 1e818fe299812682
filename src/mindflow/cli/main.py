"""CLI for mindflow: process / validate / lexicon commands."""

from __future__ import annotations

import asyncio
import sys
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from mindflow.core.config import AppSettings, ObservabilityConfig
from mindflow.core.startup_checks import validate_settings
from mindflow.domains.progress_note import Lexicon, LexiconCategory, ProcessedNote
from mindflow.exceptions import MindflowError
from mindflow.formatters import JSONFormatter
from mindflow.hooks import setup_logging
from mindflow.services import NoteService, create_note_service
from mindflow.validation.models import ValidationReport

app = typer.Typer(name="mindflow", help="Casual counselor narratives to 245G-style progress notes")
console = Console()


def _configure_logging(verbose: bool) -> None:
    if verbose:
        setup_logging(ObservabilityConfig(log_level="DEBUG"))


def _read_input(text: Optional[str], file: Optional[Path]) -> str:
    if text is not None and file is not None:
        raise typer.BadParameter("Pass TEXT or --file, not both")
    if file is not None:
        return file.read_text(encoding="utf-8")
    if text is not None:
        return text
    return sys.stdin.read()


def _print_report(report: ValidationReport) -> None:
    status = "[green]compliant[/green]" if report.is_valid else "[red]non-compliant[/red]"
    console.print(f"\n[bold]Compliance:[/bold] {status} ({report.completeness_percent:.0f}% complete)")
    if not report.issues:
        return

    table = Table(title="Issues")
    table.add_column("Check", style="cyan")
    table.add_column("Severity")
    table.add_column("Section", style="green")
    table.add_column("Message", max_width=70)
    for issue in report.issues:
        style = "red" if issue.severity.value == "error" else "yellow"
        table.add_row(
            issue.check_id,
            f"[{style}]{issue.severity.value}[/{style}]",
            issue.section_key or "-",
            issue.message,
        )
    console.print(table)


def _print_note(note: ProcessedNote) -> None:
    console.print(note.formatted_note, markup=False, highlight=False, soft_wrap=True)
    _print_report(note.compliance)


@app.command()
def process(
    text: Optional[str] = typer.Argument(None, help="Casual narrative (reads stdin when omitted)"),
    file: Optional[Path] = typer.Option(None, "--file", "-f", help="Read the narrative from a file"),
    as_json: bool = typer.Option(False, "--json", help="Emit sections, note and compliance as JSON"),
    completion: bool = typer.Option(False, "--completion", help="Ask the configured LLM first"),
    verbose: bool = typer.Option(False, "--verbose", "-v"),
) -> None:
    """Turn a casual narrative into a five-section progress note."""
    _configure_logging(verbose)
    raw_text = _read_input(text, file)

    settings = AppSettings()
    if completion:
        settings.llm.enabled = True
    try:
        validate_settings(settings)
    except ValueError as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(code=2) from e

    service = create_note_service(settings)
    try:
        result = asyncio.run(service.create_note(raw_text, use_completion=completion))
    except MindflowError as e:
        console.print(f"[red]Note generation failed:[/red] {e}")
        raise typer.Exit(code=1) from e

    if as_json:
        payload = JSONFormatter().format(
            result.note,
            extra={"source": result.source, "completion_error": result.completion_error},
        )
        typer.echo(payload.decode("utf-8"))
        return

    if result.completion_error:
        console.print(f"[yellow]Completion fell back to pipeline:[/yellow] {result.completion_error}")
    _print_note(result.note)


@app.command()
def validate(
    note_file: Path = typer.Argument(
        ...,
        exists=True,
        dir_okay=False,
        readable=True,
        help="Formatted note with the five section headings",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v"),
) -> None:
    """Check an edited note for compliance; exits 1 when errors remain."""
    _configure_logging(verbose)
    note = NoteService().validate_formatted_note(note_file.read_text(encoding="utf-8"))
    _print_note(note)
    if not note.compliance.is_valid:
        raise typer.Exit(code=1)


@app.command()
def lexicon(
    category: Optional[LexiconCategory] = typer.Option(None, "--category", "-c", help="Only this category"),
) -> None:
    """List casual-to-clinical substitutions in application order."""
    table_source = Lexicon()
    entries = table_source.by_category(category) if category else table_source.entries

    table = Table(title=f"Lexicon ({len(entries)} entries)")
    table.add_column("Casual", style="cyan")
    table.add_column("Clinical", style="green")
    table.add_column("Category")
    for entry in entries:
        table.add_row(entry.pattern, entry.replacement, entry.category.value)
    console.print(table)


if __name__ == "__main__":
    app()
