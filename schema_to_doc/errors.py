"""
Errors raised while loading schemas or rendering documents.
"""

from __future__ import annotations


class DocumentError(Exception):
    """Base class for all errors raised by schema_to_doc."""

    pass


class RecursionDepthError(DocumentError):
    """Raised when the printer descends deeper than the depth ceiling.

    This usually means the schema is cyclic (a type containing itself
    without an indirection the printer could stop at) or that some
    wrapping recurses unboundedly.
    """

    def __init__(self, depth: int | None, kind_name: str):
        self.depth = depth
        self.kind_name = kind_name
        where = f"at depth {depth} " if depth is not None else ""
        super().__init__(
            f"Seems like the printer got stuck {where}while printing a {kind_name}; "
            "this might indicate a recursive type in your schema"
        )


class InvalidTagError(DocumentError):
    """Raised when a tag strategy cannot be applied to a variant's payload.

    Internal tagging requires every variant payload to carry fields, since
    the tag is printed as one more field next to them.
    """

    def __init__(self, variant: str, tag: str, payload_kind: str, type_name: str | None = None):
        self.variant = variant
        self.tag = tag
        self.payload_kind = payload_kind
        self.type_name = type_name
        owner = f" of {type_name}" if type_name else ""
        super().__init__(
            f"Variant '{variant}'{owner} cannot be internally tagged with '{tag}': "
            f"its payload is a {payload_kind}, not a struct or map"
        )


class SchemaLoadError(DocumentError):
    """Raised when a schema description cannot be turned into a Type tree."""

    def __init__(self, message: str, path: str = "#"):
        self.path = path
        super().__init__(f"{path}: {message}")
