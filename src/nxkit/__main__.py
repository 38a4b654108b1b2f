"""
Main entry point for the nxkit CLI.

This module serves as the entry point when running the package as a module:
    python -m nxkit

or after installation:
    nxkit
"""

from .cli import main

if __name__ == "__main__":
    main()
