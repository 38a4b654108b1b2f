"""
Validation of raw CLI input into `DiffSettings`.
"""

import codecs
from pathlib import Path

import typer
from pydantic import ValidationError

from .settings import DiffSettings


def _format_validation_errors(validation_error: ValidationError) -> str:
    """
    Format Pydantic validation errors into user-friendly CLI messages.

    Args:
        validation_error: The Pydantic ValidationError to format.

    Returns:
        A formatted string with bullet points for each error.
    """
    error_lines = []
    for error in validation_error.errors():
        field = " -> ".join(str(loc) for loc in error["loc"])
        error_lines.append(f"  • {field}: {error['msg']}")
    return "\n".join(error_lines)


def _normalize_encoding(encoding: str) -> str:
    """
    Resolve an encoding alias to its canonical codec name.

    Raises:
        typer.BadParameter: If Python knows no codec by that name.
    """
    try:
        return codecs.lookup(encoding.strip()).name
    except LookupError as e:
        raise typer.BadParameter(f"Unknown encoding: {encoding}") from e


def create_diff_settings(
    *,
    before: Path,
    after: Path,
    encoding: str,
    ignore_case: bool,
    ignore_whitespace: bool,
    changes_only: bool,
    stat: bool,
    context: int | None,
) -> DiffSettings:
    """
    Process raw CLI inputs into a validated DiffSettings instance.

    Raises:
        typer.BadParameter: If validation fails, with user-friendly error messages.
    """
    try:
        return DiffSettings(
            before=before,
            after=after,
            encoding=_normalize_encoding(encoding),
            ignore_case=ignore_case,
            ignore_whitespace=ignore_whitespace,
            changes_only=changes_only,
            stat=stat,
            context=context,
        )
    except ValidationError as e:
        error_details = _format_validation_errors(e)
        raise typer.BadParameter(f"Invalid diff settings:\n{error_details}") from e
