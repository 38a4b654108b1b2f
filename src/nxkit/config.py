"""
Configuration constants for nxkit.
"""

from typing import Final

# --- Package ---
VERSION: Final[str] = "0.1.0"

# --- Diff Rendering ---
ADDED_MARKER: Final[str] = "+ "
REMOVED_MARKER: Final[str] = "- "
UNCHANGED_MARKER: Final[str] = "  "
ELLIPSIS_MARKER: Final[str] = "@@ {count} unchanged @@"

ADDED_STYLE: Final[str] = "green"
REMOVED_STYLE: Final[str] = "red"
UNCHANGED_STYLE: Final[str] = "dim"
ELLIPSIS_STYLE: Final[str] = "cyan"

# --- CLI ---
DEFAULT_ENCODING: Final[str] = "utf-8"
EXIT_IDENTICAL: Final[int] = 0
EXIT_DIFFERENT: Final[int] = 1
EXIT_TROUBLE: Final[int] = 2

# --- Logging ---
LOG_FORMAT: Final[str] = "%(message)s"
LOG_DATE_FORMAT: Final[str] = "[%X]"

__all__ = [
    "ADDED_MARKER",
    "ADDED_STYLE",
    "DEFAULT_ENCODING",
    "ELLIPSIS_MARKER",
    "ELLIPSIS_STYLE",
    "EXIT_DIFFERENT",
    "EXIT_IDENTICAL",
    "EXIT_TROUBLE",
    "LOG_DATE_FORMAT",
    "LOG_FORMAT",
    "REMOVED_MARKER",
    "REMOVED_STYLE",
    "UNCHANGED_MARKER",
    "UNCHANGED_STYLE",
    "VERSION",
]
