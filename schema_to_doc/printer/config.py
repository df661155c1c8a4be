"""
Formatting configuration for the document printer.

Follows the same structure as the rest of the package configuration:
plain dataclasses with ``from_dict`` / ``to_dict`` helpers. Schema nodes
can override any option for their own subtree through ``fmt.*`` metas,
see ``Formatting.customize``.
"""

from __future__ import annotations

import dataclasses
import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Iterable

logger = logging.getLogger(__name__)

# Meta keys equal to or prefixed by this name customize formatting
FMT_META = "fmt"


class Visibility(str, Enum):
    """Which fields are eligible to be rendered."""

    ALL = "all"  # Fields that are serializable or deserializable
    SERIALIZABLE = "serializable"  # Only fields present in output
    DESERIALIZABLE = "deserializable"  # Only fields accepted as input

    def allows(self, serializable: bool, deserializable: bool) -> bool:
        if self is Visibility.SERIALIZABLE:
            return serializable
        if self is Visibility.DESERIALIZABLE:
            return deserializable
        return serializable or deserializable


class DocComments(str, Enum):
    """Whether comments attached to schema nodes are printed."""

    VISIBLE = "visible"
    HIDDEN = "hidden"


class Layout(str, Enum):
    """How lines and comments are laid out in the final text."""

    ONE_COLUMN = "one_column"  # Comments above the line they describe
    TWO_COLUMNS = "two_columns"  # Comments to the right of the line


@dataclass
class AutoComments:
    """Which automatically inferred hints are printed."""

    # "Must contain exactly N elements" for arrays of known size
    array_size: bool = True

    # "Optional" for optional values
    optional: bool = True

    @staticmethod
    def all() -> AutoComments:
        return AutoComments(array_size=True, optional=True)

    @staticmethod
    def none() -> AutoComments:
        return AutoComments(array_size=False, optional=False)


@dataclass
class CommentsStyle:
    # Printed before every comment
    separator: str = "//"


@dataclass
class ObjectsStyle:
    # Print `"key": value` instead of `key: value`
    surround_keys_with_quotes: bool = True


@dataclass
class ArraysStyle:
    # Print arrays as `[ x, ... ]` when their element fits on a single line
    # of at most this many characters; 0 disables inline arrays
    inline_max_width: int = 0

    # For arrays of enums, print one element per variant
    expand_variants: bool = False


@dataclass
class TwoColumns:
    # Align all comments to the widest line
    align: bool = True

    # Spaces between the widest line (or each line) and its comment
    spacing: int = 1


@dataclass
class Formatting:
    """Options controlling how documents are printed."""

    auto_comments: AutoComments = field(default_factory=AutoComments)
    comments_style: CommentsStyle = field(default_factory=CommentsStyle)
    doc_comments: DocComments = DocComments.VISIBLE
    objects_style: ObjectsStyle = field(default_factory=ObjectsStyle)
    arrays_style: ArraysStyle = field(default_factory=ArraysStyle)
    layout: Layout = Layout.ONE_COLUMN
    two_columns: TwoColumns = field(default_factory=TwoColumns)

    # Marker printed after the representative entries of arrays and maps
    ellipsis: str = "/* ... */"

    # Spaces per indentation level
    indent_size: int = 2

    # Which fields are rendered
    visibility: Visibility = Visibility.ALL

    @staticmethod
    def from_dict(d: dict) -> Formatting:
        """Create formatting options from a (possibly nested) dictionary."""
        fmt = Formatting()
        for k, v in d.items():
            if isinstance(v, dict):
                for sub_k, sub_v in v.items():
                    fmt = fmt.with_option(f"{k}.{sub_k}", sub_v)
            else:
                fmt = fmt.with_option(k, v)
        return fmt

    def to_dict(self) -> dict:
        """Convert formatting options to a dictionary of plain values."""
        result = dataclasses.asdict(self)
        for k, v in result.items():
            if isinstance(v, Enum):
                result[k] = v.value
        return result

    def output_options(self) -> tuple:
        """Options read by the output and layouts; only the root node can customize them."""
        return (self.layout, self.indent_size, self.comments_style, self.two_columns)

    def with_option(self, path: str, value: Any) -> Formatting:
        """
        Return a copy of these options with a single option replaced.

        Args:
            path: Dotted option path, e.g. ``auto_comments.optional``
            value: The new value; strings are coerced to the option's type

        Returns:
            A new Formatting; ``self`` is left untouched

        Raises:
            KeyError: If the path does not name an option
            ValueError: If the value cannot be coerced
        """
        head, _, rest = path.partition(".")
        fields = {f.name: f for f in dataclasses.fields(self)}
        if head not in fields:
            raise KeyError(path)

        current = getattr(self, head)
        if rest:
            if not dataclasses.is_dataclass(current):
                raise KeyError(path)
            sub_fields = {f.name for f in dataclasses.fields(current)}
            if rest not in sub_fields:
                raise KeyError(path)
            new_value = dataclasses.replace(current, **{rest: _coerce(getattr(current, rest), value)})
        else:
            if dataclasses.is_dataclass(current):
                raise KeyError(path)
            new_value = _coerce(current, value)

        return dataclasses.replace(self, **{head: new_value})

    def customize(self, metas: Iterable[tuple[str, str]]) -> Formatting:
        """
        Apply ``fmt`` metas of a schema node on top of these options.

        Both ``fmt.<path> = <value>`` and ``fmt = "<path>=<value>; ..."``
        forms are accepted. Metas outside the ``fmt`` namespace and unknown
        option paths are ignored.

        Args:
            metas: (key, value) pairs of a schema node's metas

        Returns:
            A new Formatting, scoped to the node's subtree
        """
        fmt = self
        for key, value in metas:
            if key == FMT_META:
                pairs = [pair.split("=", 1) for pair in value.split(";") if pair.strip()]
            elif key.startswith(FMT_META + "."):
                pairs = [(key[len(FMT_META) + 1 :], value)]
            else:
                continue

            for pair in pairs:
                if len(pair) != 2:
                    logger.debug("Ignoring malformed formatting meta %r", "=".join(pair))
                    continue
                path, option_value = pair[0].strip(), pair[1].strip()
                try:
                    fmt = fmt.with_option(path, option_value)
                except (KeyError, ValueError):
                    logger.debug("Ignoring unknown formatting option %r", path)

        return fmt


def requires_custom_formatting(metas: dict[str, str]) -> bool:
    """Check whether any meta key belongs to the ``fmt`` namespace."""
    return any(key == FMT_META or key.startswith(FMT_META + ".") for key in metas)


def _coerce(current: Any, value: Any) -> Any:
    """Coerce ``value`` to the type of the option's ``current`` value."""
    if isinstance(current, Enum):
        return type(current)(value)
    if isinstance(current, bool):
        if isinstance(value, bool):
            return value
        if str(value).lower() in ("true", "yes", "1"):
            return True
        if str(value).lower() in ("false", "no", "0"):
            return False
        raise ValueError(f"Expected a boolean, got {value!r}")
    if isinstance(current, int):
        return int(value)
    return str(value)
