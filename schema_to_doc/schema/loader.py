"""
Schema loader that builds Type trees from JSON-compatible dictionaries.

The printer itself only consumes finished ``Type`` trees; this loader is
the front end used by the command line tool and by the reference tests.
Field and variant renaming (``rename_all``) is resolved here, once, so the
printer never has to deal with casing policies.
"""

from __future__ import annotations

import logging
from typing import Any

from ..errors import InvalidTagError, SchemaLoadError
from ..utils import RENAME_RULES, rename
from .nodes import (
    Array,
    Bool,
    Enum,
    Example,
    Field,
    Float,
    Integer,
    Map,
    Optional,
    String,
    Struct,
    TagAdjacent,
    TagExternal,
    TagInternal,
    TagNone,
    Tuple,
    Type,
    Variant,
    is_field_bearing,
)

logger = logging.getLogger(__name__)


class SchemaLoader:
    """Builds ``Type`` trees from dictionaries."""

    SCALAR_KINDS = {
        "bool": Bool,
        "float": Float,
        "integer": Integer,
        "string": String,
    }

    def load(self, schema: dict[str, Any]) -> Type:
        """
        Load a schema description.

        Args:
            schema: The schema dictionary (usually parsed from JSON)

        Returns:
            The root Type node
        """
        return self._load_type(schema, "#")

    def _load_type(self, schema: Any, path: str) -> Type:
        if isinstance(schema, str):
            # Shorthand: "string" is the same as {"kind": "string"}
            schema = {"kind": schema}

        if not isinstance(schema, dict):
            raise SchemaLoadError(f"expected an object, got {type(schema).__name__}", path)

        kind_name = schema.get("kind")
        if kind_name is None:
            raise SchemaLoadError("missing 'kind'", path)

        if kind_name in self.SCALAR_KINDS:
            kind = self.SCALAR_KINDS[kind_name]()
        elif kind_name == "array":
            kind = Array(
                ty=self._load_type(self._require(schema, "items", path), f"{path}/items"),
                size=schema.get("size"),
            )
        elif kind_name == "tuple":
            items = self._require(schema, "items", path)
            kind = Tuple(fields=[self._load_type(item, f"{path}/items/{i}") for i, item in enumerate(items)])
        elif kind_name == "map":
            kind = Map(
                key=self._load_type(schema.get("key", "string"), f"{path}/key"),
                value=self._load_type(self._require(schema, "value", path), f"{path}/value"),
            )
        elif kind_name == "optional":
            kind = Optional(ty=self._load_type(self._require(schema, "item", path), f"{path}/item"))
        elif kind_name == "struct":
            kind = self._load_struct(schema, path)
        elif kind_name == "enum":
            kind = self._load_enum(schema, path)
        else:
            raise SchemaLoadError(f"unknown kind '{kind_name}'", path)

        return Type(
            kind=kind,
            name=schema.get("name"),
            comment=schema.get("comment"),
            example=self._load_example(schema.get("example"), path),
            metas={str(k): str(v) for k, v in schema.get("metas", {}).items()},
            serializable=schema.get("serializable", True),
            deserializable=schema.get("deserializable", True),
        )

    def _require(self, schema: dict[str, Any], key: str, path: str) -> Any:
        if key not in schema:
            raise SchemaLoadError(f"missing '{key}' for {schema.get('kind', 'field')}", path)
        return schema[key]

    def _load_rule(self, schema: dict[str, Any], path: str) -> str | None:
        rule = schema.get("rename_all")
        if rule is not None and rule not in RENAME_RULES:
            raise SchemaLoadError(f"unknown rename_all rule '{rule}'", path)
        return rule

    def _load_example(self, example: Any, path: str) -> Example | None:
        if example is None:
            return None
        if isinstance(example, dict):
            if "literal" not in example:
                raise SchemaLoadError("example objects must have a 'literal' key", f"{path}/example")
            return Example.literal_text(str(example["literal"]))
        if isinstance(example, list):
            return Example.compound([str(value) for value in example])
        return Example.simple(str(example))

    def _load_struct(self, schema: dict[str, Any], path: str) -> Struct:
        rule = self._load_rule(schema, path)
        fields = []
        for i, field_schema in enumerate(schema.get("fields", [])):
            field_path = f"{path}/fields/{i}"
            if "name" not in field_schema:
                raise SchemaLoadError("missing 'name'", field_path)
            fields.append(
                Field(
                    name=rename(field_schema["name"], rule),
                    ty=self._load_type(self._require(field_schema, "type", field_path), f"{field_path}/type"),
                    flatten=field_schema.get("flatten", False),
                )
            )

        transparent = schema.get("transparent", False)
        if transparent and len(fields) != 1:
            raise SchemaLoadError(f"transparent structs must have exactly one field, got {len(fields)}", path)

        return Struct(fields=fields, transparent=transparent)

    def _load_tag(self, tag: Any, path: str):
        if tag is None or tag == "external":
            return TagExternal()
        if tag == "none":
            return TagNone()
        if isinstance(tag, dict) and "internal" in tag:
            if not isinstance(tag["internal"], str):
                raise SchemaLoadError("internal tag must be a string", f"{path}/tag")
            return TagInternal(tag=tag["internal"])
        if isinstance(tag, dict) and "adjacent" in tag:
            names = tag["adjacent"]
            if not isinstance(names, list) or len(names) != 2 or not all(isinstance(n, str) for n in names):
                raise SchemaLoadError("adjacent tag must be a [tag, content] pair of strings", f"{path}/tag")
            tag_name, content = names
            return TagAdjacent(tag=tag_name, content=content)
        raise SchemaLoadError(f"unknown tag strategy {tag!r}", f"{path}/tag")

    def _load_enum(self, schema: dict[str, Any], path: str) -> Enum:
        rule = self._load_rule(schema, path)
        tag = self._load_tag(schema.get("tag"), path)

        variants = []
        for i, variant_schema in enumerate(schema.get("variants", [])):
            variant_path = f"{path}/variants/{i}"
            if isinstance(variant_schema, str):
                # Shorthand for unit variants
                variant_schema = {"name": variant_schema}
            if "name" not in variant_schema:
                raise SchemaLoadError("missing 'name'", variant_path)

            payload = variant_schema.get("payload")
            variant = Variant(
                name=rename(variant_schema["name"], rule),
                payload=None if payload is None else self._load_type(payload, f"{variant_path}/payload"),
                comment=variant_schema.get("comment"),
                serializable=variant_schema.get("serializable", True),
                deserializable=variant_schema.get("deserializable", True),
            )

            # Internal tags are printed as one more field, so reject what cannot carry one
            if isinstance(tag, TagInternal) and not is_field_bearing(variant.payload):
                raise InvalidTagError(variant.name, tag.tag, variant.payload.kind_name(), schema.get("name"))

            variants.append(variant)

        logger.debug("Loaded enum at %s with %d variants", path, len(variants))
        return Enum(variants=variants, tag=tag)


def load_schema(schema: dict[str, Any]) -> Type:
    """Convenience function to load a schema description."""
    return SchemaLoader().load(schema)
