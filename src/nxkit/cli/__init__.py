"""
The nxkit command-line interface.
"""

from .app import app, compare_files, main

__all__ = ["app", "compare_files", "main"]
