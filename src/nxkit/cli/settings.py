from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

from .. import config
from .types import EncodingName, NonNegativeInt


class ImmutableModel(BaseModel):
    """Base class for immutable Pydantic models."""
    model_config = ConfigDict(
        frozen=True,
        validate_default=True,
        extra="forbid",
    )


class DiffSettings(ImmutableModel):
    """
    Options controlling how two files are compared and displayed.
    """
    # Inputs
    before: Path
    after: Path
    encoding: EncodingName = config.DEFAULT_ENCODING

    # Comparison
    ignore_case: bool = False
    ignore_whitespace: bool = False

    # Display
    changes_only: bool = False
    stat: bool = False
    context: NonNegativeInt | None = Field(
        default=None,
        description="Unchanged lines kept around each change; None shows every line.",
    )
