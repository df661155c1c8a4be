"""
Printer for arrays.

An array is printed as a single representative element followed by an
ellipsis, unless a live value provides the actual elements. Examples can
describe either one element (``"foo"``) or the whole array (``"[foo, bar]"``).
"""

from __future__ import annotations

import dataclasses
import logging
from typing import TYPE_CHECKING

from ..schema.nodes import Array, Enum
from .output import Output

if TYPE_CHECKING:
    from .context import Ctxt

logger = logging.getLogger(__name__)


def print_array(ctx: Ctxt, kind: Array) -> None:
    example = ctx.first_example()

    # An example that looks like the whole array is printed as-is; it takes
    # priority over everything we could infer, size hints included
    if example is not None and example.startswith("["):
        ctx.write_value(example)
        return

    if kind.size is not None and ctx.fmt.auto_comments.array_size:
        noun = "element" if kind.size == 1 else "elements"
        ctx.out.write_comment(f"Must contain exactly {kind.size} {noun}")

    inline = ctx.inline or fits_inline(ctx, kind)
    if inline:
        ctx = ctx.with_inline()
    print_elements(ctx, *array_elements(ctx, kind), inline=inline)


def array_elements(ctx: Ctxt, kind: Array) -> tuple[list[Ctxt], bool]:
    """
    Build the contexts of the elements to print.

    Returns:
        The element contexts and whether an ellipsis should follow them
    """
    element = ctx.nested().with_ty(kind.ty)

    if ctx.has_value() and isinstance(ctx.val, list):
        return [element.with_val(val) for val in ctx.val], False

    variants = expand_variants(ctx, element)
    if variants:
        return variants, False

    return [element.with_example(ctx.current_example())], True


def expand_variants(ctx: Ctxt, element: Ctxt) -> list[Ctxt]:
    """Return one element context per visible variant, for arrays of enums."""
    if not ctx.fmt.arrays_style.expand_variants or not isinstance(element.ty.kind, Enum):
        return []

    indices = [
        idx
        for idx, variant in enumerate(element.ty.kind.variants)
        if ctx.vis.allows(variant.serializable, variant.deserializable)
    ]
    if len(indices) < 2:
        return []

    logger.debug("Expanding array element into %d variants", len(indices))
    return [element.with_variant(idx) for idx in indices]


def fits_inline(ctx: Ctxt, kind: Array) -> bool:
    """Check whether the array can be printed on a single line."""
    max_width = ctx.fmt.arrays_style.inline_max_width
    if max_width <= 0:
        return False

    # Trial render into a scratch output; it is discarded either way
    scratch = Output(ctx.fmt)
    trial = dataclasses.replace(ctx, out=scratch, inline=True)
    print_elements(trial, *array_elements(trial, kind), inline=True)

    lines = scratch.lines()
    return len(lines) == 1 and not lines[0].comments and len(lines[0].body) <= max_width


def print_elements(ctx: Ctxt, elements: list[Ctxt], ellipsis: bool, inline: bool = False) -> None:
    """Print bracketed, comma-separated elements (shared by arrays and tuples)."""
    elements = [element for element in elements if not element.is_skipped()]
    out = ctx.out

    if not elements:
        out.write("[]")
        return

    if inline:
        out.write("[ ")
        for idx, element in enumerate(elements):
            if idx > 0:
                out.write(", ")
            element.print()
        if ellipsis:
            out.write(f", {ctx.fmt.ellipsis}")
        out.write(" ]")
        return

    out.line("[")
    out.inc_indent()

    for idx, element in enumerate(elements):
        element.print()
        if ellipsis or idx < len(elements) - 1:
            out.write(",")
        out.ln()

    if ellipsis:
        out.line(ctx.fmt.ellipsis)

    out.dec_indent()
    out.write("]")
