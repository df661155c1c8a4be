"""
Printers for tuples, maps and optional values.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from ..schema.nodes import Map, Optional, Tuple
from .context import NO_VALUE
from .print_array import print_elements
from .print_struct import write_object

if TYPE_CHECKING:
    from .context import Ctxt
    from .print_struct import Entry

logger = logging.getLogger(__name__)


def print_tuple(ctx: Ctxt, kind: Tuple) -> None:
    values = ctx.val if ctx.has_value() and isinstance(ctx.val, list) else []

    elements = []
    for idx, ty in enumerate(kind.fields):
        element = ctx.nested().with_ty(ty)
        elements.append(element.with_val(values[idx] if idx < len(values) else NO_VALUE))

    print_elements(ctx, elements, ellipsis=False)


def map_entries(ctx: Ctxt, kind: Map) -> tuple[list[Entry], bool]:
    """
    Build the key / value contexts of a map's entries.

    Returns:
        The entries and whether an ellipsis should follow them
    """
    key = ctx.nested().with_ty(kind.key).set_is_key()
    value = ctx.nested().with_ty(kind.value)

    if ctx.has_value() and isinstance(ctx.val, dict):
        entries = [(key.with_val(k), value.with_val(v)) for k, v in ctx.val.items()]
        ellipsis = False
    else:
        entries = [(key, value)]
        ellipsis = True

    return [(k, v) for k, v in entries if not k.is_skipped() and not v.is_skipped()], ellipsis


def print_map(ctx: Ctxt, kind: Map) -> None:
    entries, ellipsis = map_entries(ctx, kind)
    write_object(ctx, entries, ellipsis=ellipsis)


def print_optional(ctx: Ctxt, kind: Optional) -> None:
    # Nested optionals (`Optional<Optional<T>>`) get a single hint
    parent_is_optional = ctx.parent is not None and isinstance(ctx.parent.kind, Optional)
    if ctx.fmt.auto_comments.optional and not parent_is_optional:
        ctx.out.write_comment("Optional")

    if ctx.has_value() and ctx.val is None:
        ctx.write_value("null")
        return

    ctx.nested().with_ty(kind.ty).with_example(ctx.current_example()).print()

