"""
Layouts turning an ``Output`` into text.
"""

from __future__ import annotations

from ..config import Layout
from ..output import Output
from . import one_column, two_columns


def render(out: Output) -> str:
    """Render an output with the layout selected by its formatting."""
    if out.fmt.layout is Layout.TWO_COLUMNS:
        return two_columns.render(out)
    return one_column.render(out)


__all__ = ["render", "one_column", "two_columns"]
