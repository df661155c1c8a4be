from unittest import TestCase

from schema_to_doc import to_doc
from schema_to_doc.printer import Formatting, Layout, Output, render
from schema_to_doc.printer.layouts import one_column, two_columns
from schema_to_doc.schema import Field, Integer, Optional, String, Struct, Type


class TestOutput(TestCase):
    """Test the line model written by the printer"""

    def setUp(self):
        self.out = Output(Formatting())

    def test_lines_are_started_lazily(self):
        self.out.line("{")
        self.out.inc_indent()
        self.out.write("a")
        self.out.ln()
        self.out.dec_indent()
        self.out.write("}")

        lines = self.out.lines()
        self.assertEqual([(line.id, line.indent, line.body) for line in lines], [(0, 0, "{"), (1, 2, "a"), (2, 0, "}")])

    def test_comments_attach_to_next_line(self):
        self.out.line("first")
        self.out.write_comment("about second")
        self.out.write("second")

        lines = self.out.lines()
        self.assertEqual(lines[0].comments, [])
        self.assertEqual(lines[1].comments, ["about second"])

    def test_multiline_text_and_comments(self):
        self.out.write_comment("one\ntwo")
        self.out.write("a\nb")

        lines = self.out.lines()
        self.assertEqual([line.body for line in lines], ["a", "b"])
        self.assertEqual(lines[0].comments, ["one", "two"])

    def test_key_prefixes_next_write(self):
        self.out.write_key('"k": ')
        self.out.write_comment("c")
        self.out.write("1")

        line = self.out.lines()[0]
        self.assertEqual(line.body, '"k": 1')
        self.assertEqual(line.comments, ["c"])

    def test_dangling_comments_get_a_line(self):
        self.out.write("x")
        self.out.ln()
        self.out.write_comment("trailing")

        lines = self.out.lines()
        self.assertEqual(len(lines), 2)
        self.assertEqual((lines[1].body, lines[1].comments), ("", ["trailing"]))

    def test_indent_never_negative(self):
        self.out.dec_indent()
        self.out.write("x")
        self.assertEqual(self.out.lines()[0].indent, 0)

    def test_indent_size(self):
        out = Output(Formatting(indent_size=4))
        out.inc_indent()
        out.write("x")
        self.assertEqual(out.lines()[0].indent, 4)


class TestLayouts(TestCase):
    """Test rendering lines into text"""

    def setUp(self):
        self.ty = Type(
            Struct(
                fields=[
                    Field(name="f1", ty=Type(Optional(Type(String())))),
                    Field(name="count", ty=Type(Integer(), comment="How many\nof them")),
                ]
            )
        )

    def _output(self, fmt):
        out = Output(fmt)
        out.line("{")
        out.inc_indent()
        out.write_comment("Optional")
        out.line('"f1": "string",')
        out.line('"count": 123')
        out.dec_indent()
        out.write("}")
        return out

    def test_one_column(self):
        text = one_column.render(self._output(Formatting()))
        self.assertEqual(text, '{\n  // Optional\n  "f1": "string",\n  "count": 123\n}')

    def test_one_column_empty_comment_line(self):
        out = Output(Formatting())
        out.write_comment("a\n\nb")
        out.write("x")
        self.assertEqual(one_column.render(out), "// a\n//\n// b\nx")

    def test_one_column_empty_output(self):
        self.assertEqual(one_column.render(Output(Formatting())), "")

    def test_two_columns_aligned(self):
        text = two_columns.render(self._output(Formatting(layout=Layout.TWO_COLUMNS)))
        self.assertEqual(text, '{\n  "f1": "string", // Optional\n  "count": 123\n}')

    def test_two_columns_multiple_comments(self):
        fmt = Formatting(layout=Layout.TWO_COLUMNS)
        expected = "\n".join(
            [
                "{",
                '  "f1": "string", // Optional',
                '  "count": 123    // How many',
                "                  // of them",
                "}",
            ]
        )
        self.assertEqual(to_doc(self.ty, fmt), expected)

    def test_two_columns_unaligned(self):
        fmt = Formatting.from_dict({"layout": "two_columns", "two_columns": {"align": False, "spacing": 2}})
        expected = "\n".join(
            [
                "{",
                '  "f1": "string",  // Optional',
                '  "count": 123  // How many',
                "                // of them",
                "}",
            ]
        )
        self.assertEqual(to_doc(self.ty, fmt), expected)

    def test_render_picks_layout(self):
        self.assertIn("\n  // Optional\n", render(self._output(Formatting())))
        self.assertIn("// Optional", render(self._output(Formatting(layout=Layout.TWO_COLUMNS))).split("\n")[1])
