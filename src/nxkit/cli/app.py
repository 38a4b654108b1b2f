"""
Command-line interface for nxkit.

`nxkit diff BEFORE AFTER` aligns two text files line by line with the greedy
anchor diff and prints the result with rich.
"""

import logging
import sys
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.panel import Panel

from .. import config
from ..diff import Diff, diff, normalizing_comparer, render_rich, render_stat
from ..trying import Try, attempt
from ..trying import map2 as try_map2
from .args import create_diff_settings
from .settings import DiffSettings

console = Console()
err_console = Console(stderr=True)

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="nxkit",
    help="Functional helpers and a greedy sequence diff.",
    add_completion=False,
    rich_markup_mode="rich",
    pretty_exceptions_show_locals=False,
    context_settings={"help_option_names": ["-h", "--help"]},
)


def _setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format=config.LOG_FORMAT,
        datefmt=config.LOG_DATE_FORMAT,
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


def _read_lines(path: Path, encoding: str) -> Try[list[str]]:
    return attempt(path.read_text, encoding=encoding).map(str.splitlines)


def compare_files(settings: DiffSettings) -> Try[Diff[str]]:
    """Read both files and diff their lines; read errors are captured."""
    comparer = normalizing_comparer(
        ignore_case=settings.ignore_case,
        ignore_whitespace=settings.ignore_whitespace,
    )
    logger.debug("comparing %s with %s", settings.before, settings.after)
    return try_map2(
        _read_lines(settings.before, settings.encoding),
        _read_lines(settings.after, settings.encoding),
        lambda old, new: diff(old, new, comparer),
    )


def _report(result: Diff[str], settings: DiffSettings) -> None:
    if settings.stat:
        console.print(render_stat(result), highlight=False)
        return
    console.print(
        render_rich(result, context=settings.context, changes_only=settings.changes_only),
        end="",
        soft_wrap=True,
    )


@app.command("diff")
def diff_command(
    before: Annotated[Path, typer.Argument(help="The original file.", dir_okay=False)],
    after: Annotated[Path, typer.Argument(help="The changed file.", dir_okay=False)],
    ignore_case: Annotated[
        bool, typer.Option("--ignore-case", "-i", help="Compare lines case-insensitively.")
    ] = False,
    ignore_whitespace: Annotated[
        bool,
        typer.Option("--ignore-whitespace", "-w", help="Collapse whitespace before comparing."),
    ] = False,
    changes_only: Annotated[
        bool, typer.Option("--changes-only", help="Print only added and removed lines.")
    ] = False,
    stat: Annotated[bool, typer.Option("--stat", help="Print only the per-state counts.")] = False,
    context: Annotated[
        int | None,
        typer.Option("--context", "-c", help="Unchanged lines to keep around each change."),
    ] = None,
    encoding: Annotated[
        str, typer.Option("--encoding", help="Text encoding of both files.")
    ] = config.DEFAULT_ENCODING,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Enable debug logging.")] = False,
) -> None:
    """
    Diff two text files line by line.

    Exits with 0 when the files align without changes, 1 when they differ,
    and 2 when either file cannot be read.
    """
    _setup_logging(verbose)
    settings = create_diff_settings(
        before=before,
        after=after,
        encoding=encoding,
        ignore_case=ignore_case,
        ignore_whitespace=ignore_whitespace,
        changes_only=changes_only,
        stat=stat,
        context=context,
    )

    outcome = compare_files(settings)
    if outcome.is_failure():
        message = escape(str(outcome.error))
        err_console.print(f"[bold red]Error:[/bold red] {message}", highlight=False)
        raise typer.Exit(code=config.EXIT_TROUBLE)

    result = outcome.value
    _report(result, settings)
    raise typer.Exit(code=config.EXIT_DIFFERENT if result.has_changes else config.EXIT_IDENTICAL)


@app.command()
def version() -> None:
    """Show version information."""
    console.print(
        Panel(
            f"[bold blue]nxkit[/bold blue]\n\n"
            f"Version: [green]{config.VERSION}[/green]\n"
            f"Python: [yellow]{sys.version.split()[0]}[/yellow]",
            title="About",
            border_style="blue",
        )
    )


def main() -> None:
    """Main CLI entry point."""
    app()
