"""check and diff commands."""

from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape

from oxlint_x.cli.options import parse_options
from oxlint_x.config import Settings, get_settings
from oxlint_x.core.diff_engine import generate_differences
from oxlint_x.core.file_io import atomic_write
from oxlint_x.core.locator import SourceLocator
from oxlint_x.core.runner import OxlintExecutionError, OxlintOutputError
from oxlint_x.linter import OxlintLinter
from oxlint_x.logging_setup import setup_logging
from oxlint_x.models.problems import Problem
from oxlint_x.reporting import describe_edit, diagnostic_problems

console = Console()

EXIT_PROBLEMS = 1
EXIT_FAILURE = 2


def _load_settings(settings_file: Path | None, log_level: str | None) -> Settings:
    settings = get_settings(settings_file) if settings_file else get_settings()
    setup_logging(log_level or settings.logging.level, settings.logging.file)
    return settings


def _read_source(path: Path) -> str:
    with open(path, encoding="utf-8", newline="") as f:
        return f.read()


def _print_problem(problem: Problem) -> None:
    color = "red" if problem.severity == "error" else "yellow"
    # Diagnostic messages already end with "(<rule code>)"
    rule = "" if problem.rule_id in problem.message else f"  [dim]{escape(problem.rule_id)}[/dim]"
    console.print(
        f"  [dim]{problem.start.line}:{problem.start.column}[/dim]  "
        f"[{color}]{problem.severity:<7}[/{color}]  {escape(problem.message)}{rule}"
    )


def check(
    paths: list[Path] = typer.Argument(..., help="Files to lint", exists=True, dir_okay=False),
    fix: bool = typer.Option(False, "--fix", help="Write fixed source back to the files"),
    options: str | None = typer.Option(None, "--options", "-o", help="Inline oxlint config as a JSON object"),
    settings_file: Path | None = typer.Option(None, "--settings", help="oxlint-x settings JSON file"),
    log_level: str | None = typer.Option(None, "--log-level", help="Override the configured log level"),
):
    """Lint files and report diagnostics and fixable formatting problems."""
    inline = parse_options(options)
    settings = _load_settings(settings_file, log_level)
    linter = OxlintLinter(settings)

    failures = 0
    remaining = 0

    for path in paths:
        code = _read_source(path)
        try:
            report = linter.check(code, path, inline)
            problems = report.problems
            if fix and report.formatted is not None and report.formatted != code:
                atomic_write(str(path), report.formatted.encode("utf-8"))
                console.print(f"[green]Fixed[/green] {escape(str(path))} ({len(report.differences)} edit(s))")
                # Diagnostics must be located in the text now on disk
                fixed_result = linter.lint(report.formatted, path, inline)
                problems = diagnostic_problems(report.formatted, fixed_result)
        except (OxlintExecutionError, OxlintOutputError) as e:
            console.print(f"[red]{escape(str(path))}: oxlint failed:[/red] {escape(str(e))}")
            failures += 1
            continue

        if problems:
            console.print(f"[bold]{escape(str(path))}[/bold]")
            for problem in problems:
                _print_problem(problem)
            remaining += len(problems)

    if failures:
        raise typer.Exit(code=EXIT_FAILURE)
    if remaining:
        console.print(f"[yellow]{remaining} problem(s)[/yellow]")
        raise typer.Exit(code=EXIT_PROBLEMS)
    console.print("[green]No problems found[/green]")


def diff(
    path: Path = typer.Argument(..., help="File to format", exists=True, dir_okay=False),
    options: str | None = typer.Option(None, "--options", "-o", help="Inline oxlint config as a JSON object"),
    settings_file: Path | None = typer.Option(None, "--settings", help="oxlint-x settings JSON file"),
    log_level: str | None = typer.Option(None, "--log-level", help="Override the configured log level"),
):
    """Show the coalesced edits that oxlint --fix would make."""
    inline = parse_options(options)
    settings = _load_settings(settings_file, log_level)
    linter = OxlintLinter(settings)

    code = _read_source(path)
    try:
        formatted = linter.format(code, path, inline)
    except OxlintExecutionError as e:
        console.print(f"[red]oxlint failed:[/red] {escape(str(e))}")
        raise typer.Exit(code=EXIT_FAILURE)

    edits = generate_differences(code, formatted)
    if not edits:
        console.print("[green]No changes[/green]")
        return

    locator = SourceLocator(code)
    for edit in edits:
        location = locator.location(edit.offset)
        console.print(f"  [dim]{location.line}:{location.column}[/dim]  {escape(describe_edit(edit))}")
    raise typer.Exit(code=EXIT_PROBLEMS)
