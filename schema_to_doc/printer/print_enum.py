"""
Printer for tagged unions.

One representative variant is printed: the one forced by the context
(see array variant expansion), else the one a live value names, else the
first visible variant. How its name is attached to the payload depends on
the enum's tag strategy.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

from ..errors import InvalidTagError
from ..schema.nodes import Enum, Map, Struct, TagAdjacent, TagExternal, TagInternal, TagNone, Variant, is_field_bearing
from .config import DocComments
from .context import NO_VALUE
from .print_collections import map_entries
from .print_struct import Entry, collect_entries, write_object

if TYPE_CHECKING:
    from .context import Ctxt


def print_enum(ctx: Ctxt, kind: Enum) -> None:
    example = ctx.first_example()
    if example is not None and not ctx.has_value():
        ctx.write_value(example)
        return

    selected = select_variant(ctx, kind)
    if selected is None:
        ctx.write_value("null")
        return

    variant, payload_val = selected
    if variant.comment and ctx.fmt.doc_comments is DocComments.VISIBLE:
        ctx.out.write_comment(variant.comment)

    name = json.dumps(variant.name, ensure_ascii=False)
    payload = None
    if variant.payload is not None:
        payload = ctx.nested().with_ty(variant.payload).with_val(payload_val)

    tag = kind.tag
    if isinstance(tag, TagNone):
        if payload is None:
            ctx.write_value("null")
        else:
            payload.print()

    elif isinstance(tag, TagExternal):
        if payload is None:
            ctx.write_value(name)
        else:
            write_object(ctx, [(variant.name, payload)])

    elif isinstance(tag, TagInternal):
        if not is_field_bearing(variant.payload):
            raise InvalidTagError(variant.name, tag.tag, variant.payload.kind_name(), ctx.ty.name)
        entries: list[Entry] = [(tag.tag, name)]
        ellipsis = False
        if payload is not None:
            payload_entries, ellipsis = _payload_entries(payload)
            entries.extend(payload_entries)
        write_object(ctx, entries, ellipsis=ellipsis)

    elif isinstance(tag, TagAdjacent):
        entries = [(tag.tag, name)]
        if payload is not None:
            entries.append((tag.content, payload))
        write_object(ctx, entries)

    else:
        raise TypeError(f"Unknown tag strategy: {tag!r}")


def select_variant(ctx: Ctxt, kind: Enum) -> tuple[Variant, Any] | None:
    """
    Pick the variant to print, along with the value of its payload.

    Returns:
        (variant, payload value), or None when no variant is visible
    """
    if ctx.variant is not None:
        return kind.variants[ctx.variant], NO_VALUE

    visible = [v for v in kind.variants if ctx.vis.allows(v.serializable, v.deserializable)]
    if not visible:
        return None

    if ctx.has_value():
        for variant in visible:
            payload_val = _match_value(kind, variant, ctx.val)
            if payload_val is not None:
                return variant, payload_val[0]

        if isinstance(kind.tag, TagNone):
            return visible[0], ctx.val

    return visible[0], NO_VALUE


def _match_value(kind: Enum, variant: Variant, val: Any) -> tuple[Any] | None:
    """Return ``(payload value,)`` if ``val`` encodes ``variant``, else None."""
    tag = kind.tag
    if isinstance(tag, TagNone):
        if variant.payload is None:
            return (NO_VALUE,) if val is None else None
        return None

    if isinstance(tag, TagExternal):
        if variant.payload is None:
            return (NO_VALUE,) if val == variant.name else None
        if isinstance(val, dict) and len(val) == 1 and variant.name in val:
            return (val[variant.name],)
        return None

    if not isinstance(val, dict) or val.get(tag.tag) != variant.name:
        return None
    if isinstance(tag, TagInternal):
        # The tag is printed on its own, so the payload only sees the other keys
        return ({k: v for k, v in val.items() if k != tag.tag},)
    return (val.get(tag.content, NO_VALUE),)


def _payload_entries(payload: Ctxt) -> tuple[list[Entry], bool]:
    """Entries of an internally tagged payload, printed next to the tag."""
    kind = payload.ty.kind
    if isinstance(kind, Struct) and kind.transparent:
        return _payload_entries(payload.nested().with_ty(kind.fields[0].ty))
    if isinstance(kind, Struct):
        return collect_entries(payload, kind), False
    if isinstance(kind, Map):
        return map_entries(payload, kind)
    raise TypeError(f"Payload of kind {payload.ty.kind_name()} cannot carry fields")
