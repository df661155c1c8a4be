"""
Printers for scalar kinds: bool, float, integer and string.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .context import Ctxt


def print_bool(ctx: Ctxt) -> None:
    _print_scalar(ctx, "true")


def print_float(ctx: Ctxt) -> None:
    _print_scalar(ctx, "123.45")


def print_integer(ctx: Ctxt) -> None:
    _print_scalar(ctx, "123")


def print_string(ctx: Ctxt) -> None:
    _print_scalar(ctx, '"string"', quote_example=True)


def _print_scalar(ctx: Ctxt, placeholder: str, quote_example: bool = False) -> None:
    """Print the live value, else the first example, else the placeholder."""
    if ctx.has_value():
        text = json.dumps(ctx.val, ensure_ascii=False)
    elif (example := ctx.first_example()) is not None:
        text = json.dumps(example, ensure_ascii=False) if quote_example else example
    else:
        text = placeholder

    ctx.write_value(text)
