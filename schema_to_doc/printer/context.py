"""
Rendering context.

A ``Ctxt`` describes where the printer currently is: the schema node being
printed, the live value bound to it (if any), the active formatting and a
handful of flags inherited from the parent node. Contexts are immutable;
every descent derives a new one, so sibling subtrees never observe each
other's state. Only the ``Output`` they write into is shared.
"""

from __future__ import annotations

import dataclasses
import logging
from dataclasses import dataclass
from typing import Any

from ..errors import RecursionDepthError
from ..schema.nodes import (
    Array,
    Bool,
    Enum,
    Example,
    Float,
    Integer,
    Map,
    Optional,
    String,
    Struct,
    Tuple,
    Type,
)
from .config import DocComments, Formatting, Visibility, requires_custom_formatting
from .output import Output

logger = logging.getLogger(__name__)

# The depth counter is treated as a single byte
MAX_DEPTH = 255


class _NoValue:
    """Marker for contexts without a live value (``None`` is a valid value)."""

    def __repr__(self) -> str:
        return "NO_VALUE"


NO_VALUE = _NoValue()


@dataclass(frozen=True)
class Ctxt:
    ty: Type
    fmt: Formatting
    out: Output
    val: Any = NO_VALUE
    vis: Visibility = Visibility.ALL
    is_key: bool = False

    # Node we descended from; when printing `int` of `Optional<int>`, the optional
    parent: Type | None = None

    # Overrides `ty.example`; used to hand examples down through optionals and arrays
    example: Example | None = None

    # When set, a struct's fields are spliced into the struct containing it
    flat: bool = False

    # Incremented by `nested()`; used to detect recursive schemas
    depth: int = 0
    max_depth: int = MAX_DEPTH

    # Index of the enum variant to print instead of the representative one
    variant: int | None = None

    # Set inside a single-line array; nested arrays follow without their own fit check
    inline: bool = False

    def nested(self) -> Ctxt:
        """Derive a context one level deeper, sharing the same output."""
        depth = self.depth + 1
        if depth > self.max_depth:
            raise RecursionDepthError(depth, self.ty.kind_name())
        return dataclasses.replace(self, depth=depth, is_key=False, variant=None)

    def with_ty(self, ty: Type) -> Ctxt:
        """Switch to a child node.

        Fields of a flattened struct are not flattened any further, unless
        the struct we are leaving is transparent: then flattening applies
        to whatever it wraps.
        """
        keep_flat = isinstance(self.ty.kind, Struct) and self.ty.kind.transparent
        return dataclasses.replace(
            self,
            ty=ty,
            parent=self.ty,
            flat=self.flat and keep_flat,
            example=None,
        )

    def with_val(self, val: Any) -> Ctxt:
        return dataclasses.replace(self, val=val)

    def with_fmt(self, fmt: Formatting) -> Ctxt:
        return dataclasses.replace(self, fmt=fmt, vis=fmt.visibility)

    def with_example(self, example: Example | None) -> Ctxt:
        return dataclasses.replace(self, example=example)

    def with_flat(self) -> Ctxt:
        return dataclasses.replace(self, flat=True)

    def with_variant(self, variant: int) -> Ctxt:
        return dataclasses.replace(self, variant=variant)

    def with_inline(self) -> Ctxt:
        return dataclasses.replace(self, inline=True)

    def set_is_key(self) -> Ctxt:
        return dataclasses.replace(self, is_key=True)

    def has_value(self) -> bool:
        return self.val is not NO_VALUE

    def current_example(self) -> Example | None:
        return self.example if self.example is not None else self.ty.example

    def first_example(self) -> str | None:
        example = self.current_example()
        return example.first() if example is not None else None

    def literal_example(self) -> str | None:
        example = self.current_example()
        if example is not None and example.literal:
            return example.first()
        return None

    def is_skipped(self) -> bool:
        """Check whether the visibility filter hides the current node."""
        return not self.vis.allows(self.ty.serializable, self.ty.deserializable)

    def effective_fmt(self) -> Formatting:
        """Formatting in effect for the current node, including its own metas."""
        if requires_custom_formatting(self.ty.metas):
            return self.fmt.customize(self.ty.metas.items())
        return self.fmt

    def write_value(self, text: str) -> None:
        """Write a scalar-like value, or stash it as a key when printing map keys."""
        if self.is_key:
            if not text.startswith('"') and self.fmt.objects_style.surround_keys_with_quotes:
                text = f'"{text}"'
            self.out.write_key(f"{text}: ")
        else:
            self.out.write(text)

    def write_field_key(self, name: str) -> None:
        if self.fmt.objects_style.surround_keys_with_quotes:
            name = f'"{name}"'
        self.out.write_key(f"{name}: ")

    def print_comment(self) -> None:
        if self.ty.comment and self.fmt.doc_comments is DocComments.VISIBLE:
            self.out.write_comment(self.ty.comment)

    def print(self) -> None:
        """Print the current node into the output."""
        if self.is_skipped():
            return

        ctx = self
        if requires_custom_formatting(self.ty.metas):
            logger.debug("Customizing formatting for %s with %s", self.ty.kind_name(), self.ty.metas)
            fmt = self.fmt.customize(self.ty.metas.items())
            if self.parent is not None and fmt.output_options() != self.fmt.output_options():
                logger.debug("Ignoring layout options on %s; they only apply to the root", self.ty.kind_name())
            ctx = self.with_fmt(fmt)

        ctx.print_comment()

        # User-provided literals replace the generated shape entirely
        literal = ctx.literal_example()
        if literal is not None:
            ctx.write_value(literal)
            return

        kind = ctx.ty.kind
        if isinstance(kind, Bool):
            print_scalar.print_bool(ctx)
        elif isinstance(kind, Float):
            print_scalar.print_float(ctx)
        elif isinstance(kind, Integer):
            print_scalar.print_integer(ctx)
        elif isinstance(kind, String):
            print_scalar.print_string(ctx)
        elif isinstance(kind, Array):
            print_array.print_array(ctx, kind)
        elif isinstance(kind, Enum):
            print_enum.print_enum(ctx, kind)
        elif isinstance(kind, Struct):
            print_struct.print_struct(ctx, kind)
        elif isinstance(kind, Tuple):
            print_collections.print_tuple(ctx, kind)
        elif isinstance(kind, Map):
            print_collections.print_map(ctx, kind)
        elif isinstance(kind, Optional):
            print_collections.print_optional(ctx, kind)
        else:
            raise TypeError(f"Unknown type kind: {kind!r}")


# Printers call back into `Ctxt.print`, so they are imported last
from . import print_array, print_collections, print_enum, print_scalar, print_struct  # noqa: E402
