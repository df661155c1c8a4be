"""Schema to Doc

A Python package for generating annotated example documents (JSON with
comments) from type schemas. Supports optional and array-size hints,
flattened and transparent structs, all common enum tagging strategies and
per-node formatting overrides.
"""

__version__ = "1.0.0"

from .errors import DocumentError, InvalidTagError, RecursionDepthError, SchemaLoadError
from .printer import Formatting, Output, Visibility, render, to_doc, to_output
from .schema import Type, load_schema

__all__ = [
    "to_doc",
    "to_output",
    "render",
    "Formatting",
    "Output",
    "Visibility",
    "Type",
    "load_schema",
    "DocumentError",
    "InvalidTagError",
    "RecursionDepthError",
    "SchemaLoadError",
]
