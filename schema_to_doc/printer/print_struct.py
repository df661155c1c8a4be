"""
Printer for structs, including flattening and transparent structs.

Fields of a struct are first collected into a flat list of entries (so
that fields spliced in from flattened structs share the parent's braces
and commas) and only then written out.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Union

from ..schema.nodes import Field, Optional, Struct
from .context import NO_VALUE

if TYPE_CHECKING:
    from .context import Ctxt

logger = logging.getLogger(__name__)

# A key (field name or map key context) and a value (context or raw text)
Entry = tuple[Union[str, "Ctxt"], Union["Ctxt", str]]


def print_struct(ctx: Ctxt, kind: Struct) -> None:
    if kind.transparent:
        if len(kind.fields) != 1:
            raise ValueError(f"Transparent struct must have exactly one field, got {len(kind.fields)}")
        ctx.nested().with_ty(kind.fields[0].ty).with_example(ctx.current_example()).print()
        return

    write_object(ctx, collect_entries(ctx, kind))


def collect_entries(ctx: Ctxt, kind: Struct) -> list[Entry]:
    """
    Collect the entries of a struct, splicing in flattened fields.

    Args:
        ctx: Context of the struct itself
        kind: The struct kind of ``ctx.ty``

    Returns:
        Entries in declaration order
    """
    entries: list[Entry] = []

    for field in kind.fields:
        child = ctx.nested().with_ty(field.ty).with_val(_field_value(ctx, field))
        if field.flatten:
            child = child.with_flat()

        if child.is_skipped():
            continue

        if child.flat:
            spliced = flattened_entries(child)
            if spliced is not None:
                entries.extend(spliced)
                continue
            logger.debug("Field %r cannot be flattened, printing it nested", field.name)

        if is_omitted_optional(child):
            logger.debug("Omitting optional field %r", field.name)
            continue

        entries.append((field.name, child))

    return entries


def flattened_entries(ctx: Ctxt) -> list[Entry] | None:
    """Return the entries a flattened node splices into its parent, if it has any."""
    kind = ctx.ty.kind
    if not isinstance(kind, Struct):
        return None

    if kind.transparent:
        # `with_ty` keeps the flag when leaving a transparent struct
        return flattened_entries(ctx.nested().with_ty(kind.fields[0].ty))

    return collect_entries(ctx, kind)


def is_omitted_optional(ctx: Ctxt) -> bool:
    """Check whether an optional field should be left out of its struct.

    Without the optional hint nothing tells the reader the field may be
    absent, so it is only printed when a value or an example asks for it.
    """
    if not isinstance(ctx.ty.kind, Optional) or ctx.has_value():
        return False
    if ctx.effective_fmt().auto_comments.optional:
        return False
    return ctx.current_example() is None


def write_object(ctx: Ctxt, entries: list[Entry], ellipsis: bool = False) -> None:
    """Print entries between braces, separated by commas."""
    out = ctx.out

    if not entries and not ellipsis:
        out.write("{}")
        return

    out.line("{")
    out.inc_indent()

    for idx, (key, value) in enumerate(entries):
        if isinstance(key, str):
            ctx.write_field_key(key)
        else:
            key.print()

        if isinstance(value, str):
            out.write(value)
        else:
            value.print()

        if ellipsis or idx < len(entries) - 1:
            out.write(",")
        out.ln()

    if ellipsis:
        out.line(ctx.fmt.ellipsis)

    out.dec_indent()
    out.write("}")


def _field_value(ctx: Ctxt, field: Field):
    if not ctx.has_value():
        return NO_VALUE
    # Flattened fields live directly in the parent's value
    if field.flatten:
        return ctx.val
    if isinstance(ctx.val, dict):
        return ctx.val.get(field.name, NO_VALUE)
    return NO_VALUE
