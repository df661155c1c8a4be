from unittest import TestCase

import pytest

from schema_to_doc import InvalidTagError, to_doc
from schema_to_doc.printer import Formatting
from schema_to_doc.schema import (
    Array,
    Enum,
    Example,
    Field,
    Integer,
    Map,
    String,
    Struct,
    TagAdjacent,
    TagExternal,
    TagInternal,
    TagNone,
    Type,
    Variant,
)


def payload(**fields):
    """Helper to build a struct payload from keyword arguments"""
    return Type(Struct(fields=[Field(name=name, ty=ty) for name, ty in fields.items()]))


def enum(tag, *variants, **kwargs):
    return Type(Enum(variants=list(variants), tag=tag), **kwargs)


class TestTagStrategies(TestCase):
    """Test each tag strategy on struct and unit payloads"""

    def test_adjacent(self):
        ty = enum(TagAdjacent(tag="kind", content="data"), Variant(name="Foo", payload=payload(x=Type(Integer()))))
        expected = '{\n  "kind": "Foo",\n  "data": {\n    "x": 123\n  }\n}'
        self.assertEqual(to_doc(ty), expected)

    def test_adjacent_unit_variant(self):
        ty = enum(TagAdjacent(tag="kind", content="data"), Variant(name="Foo"))
        self.assertEqual(to_doc(ty), '{\n  "kind": "Foo"\n}')

    def test_internal(self):
        ty = enum(TagInternal(tag="type"), Variant(name="Bar", payload=payload(y=Type(String()))))
        self.assertEqual(to_doc(ty), '{\n  "type": "Bar",\n  "y": "string"\n}')

    def test_internal_with_map_payload(self):
        ty = enum(TagInternal(tag="type"), Variant(name="Bag", payload=Type(Map(key=Type(String()), value=Type(Integer())))))
        self.assertEqual(to_doc(ty), '{\n  "type": "Bag",\n  "string": 123,\n  /* ... */\n}')

    def test_internal_on_scalar_payload_is_an_error(self):
        ty = enum(TagInternal(tag="type"), Variant(name="Bar", payload=Type(String())), name="Message")

        with pytest.raises(InvalidTagError) as exc_info:
            to_doc(ty)

        self.assertEqual(exc_info.value.variant, "Bar")
        self.assertEqual(exc_info.value.type_name, "Message")
        self.assertIn("Message", str(exc_info.value))

    def test_external(self):
        ty = enum(TagExternal(), Variant(name="Foo", payload=payload(x=Type(Integer()))))
        self.assertEqual(to_doc(ty), '{\n  "Foo": {\n    "x": 123\n  }\n}')

    def test_external_unit_variant(self):
        ty = enum(TagExternal(), Variant(name="Foo"), Variant(name="Bar"))
        self.assertEqual(to_doc(ty), '"Foo"')

    def test_untagged(self):
        ty = enum(TagNone(), Variant(name="Foo", payload=payload(x=Type(Integer()))))
        self.assertEqual(to_doc(ty), '{\n  "x": 123\n}')

    def test_untagged_unit_variant(self):
        self.assertEqual(to_doc(enum(TagNone(), Variant(name="Foo"))), "null")

    def test_variant_comment(self):
        ty = enum(TagExternal(), Variant(name="Foo", comment="The foo one"))
        self.assertEqual(to_doc(ty), '// The foo one\n"Foo"')


class TestVariantSelection(TestCase):
    """Test which variant ends up being printed"""

    def test_first_visible_variant(self):
        ty = enum(TagExternal(), Variant(name="Hidden", serializable=False, deserializable=False), Variant(name="Shown"))
        self.assertEqual(to_doc(ty), '"Shown"')

    def test_no_visible_variant(self):
        ty = enum(TagExternal(), Variant(name="Hidden", serializable=False, deserializable=False))
        self.assertEqual(to_doc(ty), "null")

    def test_value_selects_external_variant(self):
        ty = enum(TagExternal(), Variant(name="A"), Variant(name="B", payload=Type(Integer())))
        self.assertEqual(to_doc(ty, value={"B": 5}), '{\n  "B": 5\n}')
        self.assertEqual(to_doc(ty, value="A"), '"A"')

    def test_value_selects_internal_variant(self):
        ty = enum(
            TagInternal(tag="type"),
            Variant(name="A", payload=payload(a=Type(Integer()))),
            Variant(name="B", payload=payload(b=Type(String()))),
        )
        self.assertEqual(to_doc(ty, value={"type": "B", "b": "hi"}), '{\n  "type": "B",\n  "b": "hi"\n}')

    def test_value_of_internal_variant_with_map_payload(self):
        """Test that the tag key is not repeated among the map's entries"""
        ty = enum(TagInternal(tag="type"), Variant(name="Bag", payload=Type(Map(key=Type(String()), value=Type(Integer())))))
        self.assertEqual(to_doc(ty, value={"type": "Bag", "a": 1}), '{\n  "type": "Bag",\n  "a": 1\n}')

    def test_value_selects_adjacent_variant(self):
        ty = enum(
            TagAdjacent(tag="t", content="c"),
            Variant(name="A"),
            Variant(name="B", payload=Type(Integer())),
        )
        self.assertEqual(to_doc(ty, value={"t": "B", "c": 7}), '{\n  "t": "B",\n  "c": 7\n}')

    def test_enum_example(self):
        ty = enum(TagExternal(), Variant(name="A"), Variant(name="B"), example=Example.simple('"B"'))
        self.assertEqual(to_doc(ty), '"B"')


class TestVariantExpansion(TestCase):
    """Test arrays printing one element per variant"""

    def setUp(self):
        self.ty = Type(
            Array(
                ty=enum(
                    TagExternal(),
                    Variant(name="A"),
                    Variant(name="B", payload=Type(Integer())),
                )
            )
        )

    def test_disabled_by_default(self):
        self.assertEqual(to_doc(self.ty), '[\n  "A",\n  /* ... */\n]')

    def test_expanded(self):
        fmt = Formatting.from_dict({"arrays_style": {"expand_variants": True}})
        expected = '[\n  "A",\n  {\n    "B": 123\n  }\n]'
        self.assertEqual(to_doc(self.ty, fmt), expected)
