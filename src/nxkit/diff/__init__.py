"""
Ordered-sequence diffing: the engine, its result model and renderers.
"""

from .comparers import normalizing_comparer
from .engine import Comparer, diff, find_anchors
from .models import Diff, DiffItem, DiffState
from .render import render_lines, render_rich, render_stat

__all__ = [
    "Comparer",
    "Diff",
    "DiffItem",
    "DiffState",
    "diff",
    "find_anchors",
    "normalizing_comparer",
    "render_lines",
    "render_rich",
    "render_stat",
]
