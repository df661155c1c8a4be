from unittest import TestCase

from schema_to_doc.printer import AutoComments, DocComments, Formatting, Layout, Visibility
from schema_to_doc.printer.config import requires_custom_formatting


class TestFormatting(TestCase):
    """Test formatting options and their overrides"""

    def test_defaults(self):
        fmt = Formatting()
        self.assertTrue(fmt.auto_comments.array_size)
        self.assertTrue(fmt.auto_comments.optional)
        self.assertEqual(fmt.comments_style.separator, "//")
        self.assertEqual(fmt.layout, Layout.ONE_COLUMN)
        self.assertEqual(fmt.visibility, Visibility.ALL)
        self.assertEqual(fmt.ellipsis, "/* ... */")

    def test_auto_comments_presets(self):
        self.assertEqual(AutoComments.all(), AutoComments(array_size=True, optional=True))
        self.assertEqual(AutoComments.none(), AutoComments(array_size=False, optional=False))

    def test_from_dict(self):
        fmt = Formatting.from_dict(
            {
                "auto_comments": {"optional": False},
                "comments_style": {"separator": "#"},
                "doc_comments": "hidden",
                "visibility": "serializable",
                "indent_size": 4,
            }
        )
        self.assertFalse(fmt.auto_comments.optional)
        self.assertTrue(fmt.auto_comments.array_size)
        self.assertEqual(fmt.comments_style.separator, "#")
        self.assertEqual(fmt.doc_comments, DocComments.HIDDEN)
        self.assertEqual(fmt.visibility, Visibility.SERIALIZABLE)
        self.assertEqual(fmt.indent_size, 4)

    def test_to_dict_round_trip(self):
        fmt = Formatting.from_dict({"layout": "two_columns", "two_columns": {"spacing": 3}})
        d = fmt.to_dict()
        self.assertEqual(d["layout"], "two_columns")
        self.assertEqual(d["two_columns"], {"align": True, "spacing": 3})
        self.assertEqual(Formatting.from_dict(d), fmt)

    def test_unknown_option(self):
        with self.assertRaises(KeyError):
            Formatting().with_option("auto_comments.nope", True)
        with self.assertRaises(KeyError):
            Formatting().with_option("auto_comments", True)

    def test_invalid_value(self):
        with self.assertRaises(ValueError):
            Formatting().with_option("auto_comments.optional", "maybe")
        with self.assertRaises(ValueError):
            Formatting().with_option("layout", "three_columns")

    def test_customize_does_not_mutate(self):
        fmt = Formatting()
        custom = fmt.customize([("fmt.auto_comments.optional", "false"), ("fmt.comments_style.separator", "#")])

        self.assertFalse(custom.auto_comments.optional)
        self.assertEqual(custom.comments_style.separator, "#")
        self.assertTrue(fmt.auto_comments.optional)
        self.assertEqual(fmt.comments_style.separator, "//")

    def test_customize_bare_fmt_meta(self):
        custom = Formatting().customize([("fmt", "auto_comments.array_size=false; indent_size = 4")])
        self.assertFalse(custom.auto_comments.array_size)
        self.assertEqual(custom.indent_size, 4)

    def test_customize_ignores_unknown_keys(self):
        fmt = Formatting()
        custom = fmt.customize([("fmt.nope", "1"), ("fmt", "garbage"), ("other", "x"), ("fmtx", "y")])
        self.assertEqual(custom, fmt)

    def test_requires_custom_formatting(self):
        self.assertTrue(requires_custom_formatting({"fmt": "x=1"}))
        self.assertTrue(requires_custom_formatting({"fmt.layout": "two_columns"}))
        self.assertFalse(requires_custom_formatting({"fmtx": "1", "doc": "x"}))

    def test_visibility(self):
        self.assertTrue(Visibility.ALL.allows(True, False))
        self.assertTrue(Visibility.ALL.allows(False, True))
        self.assertFalse(Visibility.ALL.allows(False, False))
        self.assertFalse(Visibility.SERIALIZABLE.allows(False, True))
        self.assertFalse(Visibility.DESERIALIZABLE.allows(True, False))
