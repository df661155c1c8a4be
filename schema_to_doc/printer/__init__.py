"""
Printer - renders annotated example documents from schema trees.

1. A root ``Ctxt`` is built from the schema, formatting and optional value
2. ``Ctxt.print`` walks the schema depth-first, writing into an ``Output``
3. A layout (one or two columns) turns the ``Output`` into text
"""

from __future__ import annotations

import logging
from typing import Any

from ..errors import DocumentError, InvalidTagError, RecursionDepthError, SchemaLoadError
from ..schema.nodes import Type
from .config import (
    ArraysStyle,
    AutoComments,
    CommentsStyle,
    DocComments,
    Formatting,
    Layout,
    ObjectsStyle,
    TwoColumns,
    Visibility,
    requires_custom_formatting,
)
from .context import MAX_DEPTH, NO_VALUE, Ctxt
from .layouts import render
from .output import Line, Output

logger = logging.getLogger(__name__)


def to_output(
    ty: Type,
    fmt: Formatting | None = None,
    *,
    value: Any = NO_VALUE,
    max_depth: int = MAX_DEPTH,
) -> Output:
    """
    Print a schema into the line-based output model.

    Args:
        ty: Root of the schema tree
        fmt: Formatting options (defaults to ``Formatting()``)
        value: Live value to print instead of placeholders
        max_depth: Depth ceiling; exceeding it raises ``RecursionDepthError``

    Returns:
        The finished output, ready for a layout

    Raises:
        RecursionDepthError: If the schema nests deeper than ``max_depth``
        InvalidTagError: If an enum's tag strategy does not fit a payload
    """
    fmt = fmt or Formatting()
    if requires_custom_formatting(ty.metas):
        # Layout and indentation are fixed by the output, so the root's metas apply first
        fmt = fmt.customize(ty.metas.items())
    out = Output(fmt)
    ctx = Ctxt(ty=ty, fmt=fmt, out=out, val=value, vis=fmt.visibility, max_depth=max_depth)

    try:
        ctx.print()
    except RecursionError as e:
        # The interpreter's own limit was hit before our ceiling
        raise RecursionDepthError(None, ty.kind_name()) from e

    logger.debug("Printed %s into %d lines", ty.kind_name(), len(out.lines()))
    return out


def to_doc(
    ty: Type,
    fmt: Formatting | None = None,
    *,
    value: Any = NO_VALUE,
    max_depth: int = MAX_DEPTH,
) -> str:
    """
    Print a schema into a document.

    Args:
        ty: Root of the schema tree
        fmt: Formatting options (defaults to ``Formatting()``)
        value: Live value to print instead of placeholders
        max_depth: Depth ceiling; exceeding it raises ``RecursionDepthError``

    Returns:
        The document text
    """
    return render(to_output(ty, fmt, value=value, max_depth=max_depth))


__all__ = [
    "ArraysStyle",
    "AutoComments",
    "CommentsStyle",
    "Ctxt",
    "DocComments",
    "DocumentError",
    "Formatting",
    "InvalidTagError",
    "Layout",
    "Line",
    "MAX_DEPTH",
    "NO_VALUE",
    "ObjectsStyle",
    "Output",
    "RecursionDepthError",
    "SchemaLoadError",
    "TwoColumns",
    "Visibility",
    "render",
    "to_doc",
    "to_output",
]
