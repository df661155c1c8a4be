"""
Schema node definitions.

These nodes describe the shape of a type: its kind, the comment attached
to it, examples and metadata. They are produced once per type by a front
end (see ``loader.py``) and read by the printer on every render.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Example:
    """An example attached to a schema node.

    A *literal* example is written verbatim in place of the whole node,
    while simple and compound examples only replace the placeholder value.
    """

    values: tuple[str, ...] = ()
    literal: bool = False

    @staticmethod
    def simple(value: str) -> Example:
        return Example(values=(value,))

    @staticmethod
    def compound(values: list[str]) -> Example:
        return Example(values=tuple(values))

    @staticmethod
    def literal_text(text: str) -> Example:
        return Example(values=(text,), literal=True)

    def first(self) -> str | None:
        """Return the first candidate, if any."""
        return self.values[0] if self.values else None


@dataclass(frozen=True)
class TagNone:
    """Untagged: the payload is printed without any discriminator."""


@dataclass(frozen=True)
class TagExternal:
    """The variant name wraps the payload (the default)."""


@dataclass(frozen=True)
class TagInternal:
    """A tag field is embedded alongside the payload's own fields."""

    tag: str = "type"


@dataclass(frozen=True)
class TagAdjacent:
    """Tag and payload are sibling fields under fixed names."""

    tag: str = "t"
    content: str = "c"


Tag = TagNone | TagExternal | TagInternal | TagAdjacent


@dataclass
class Bool:
    pass


@dataclass
class Float:
    pass


@dataclass
class Integer:
    pass


@dataclass
class String:
    pass


@dataclass
class Array:
    """A fixed or variable-size array of ``ty``."""

    ty: Type | None = None
    size: int | None = None  # Known size for fixed arrays


@dataclass
class Tuple:
    fields: list[Type] = field(default_factory=list)


@dataclass
class Map:
    key: Type | None = None
    value: Type | None = None


@dataclass
class Optional:
    ty: Type | None = None


@dataclass
class Field:
    """A named field of a struct."""

    name: str = ""
    ty: Type | None = None

    # Splice the fields of ``ty`` into the containing struct
    flatten: bool = False


@dataclass
class Struct:
    """A struct with ordered named fields.

    A transparent struct forwards directly to its single field.
    """

    fields: list[Field] = field(default_factory=list)
    transparent: bool = False


@dataclass
class Variant:
    """A variant of a tagged union; ``payload`` is None for unit variants."""

    name: str = ""
    payload: Type | None = None
    comment: str | None = None
    serializable: bool = True
    deserializable: bool = True


@dataclass
class Enum:
    variants: list[Variant] = field(default_factory=list)
    tag: Tag = field(default_factory=TagExternal)


TypeKind = Bool | Float | Integer | String | Array | Tuple | Map | Optional | Struct | Enum


@dataclass(eq=False)
class Type:
    """A node of the schema tree."""

    kind: TypeKind = field(default_factory=String)

    # Name of the declared type, if any; only used in error messages
    name: str | None = None

    # Human-readable comment, printed above the rendered value
    comment: str | None = None

    # Example overriding the generated placeholder
    example: Example | None = None

    # Free-form annotations; ``fmt`` / ``fmt.*`` keys customize formatting
    metas: dict[str, str] = field(default_factory=dict)

    # Whether the node participates in output / input respectively
    serializable: bool = True
    deserializable: bool = True

    def kind_name(self) -> str:
        return type(self.kind).__name__.lower()


def is_field_bearing(ty: Type | None) -> bool:
    """Check whether a variant payload can carry an embedded tag field.

    Unit payloads, maps and non-transparent structs qualify; transparent
    structs qualify when their single field does.
    """
    if ty is None:
        return True

    kind = ty.kind
    if isinstance(kind, Map):
        return True
    if isinstance(kind, Struct):
        if kind.transparent:
            return len(kind.fields) == 1 and is_field_bearing(kind.fields[0].ty)
        return True
    return False
