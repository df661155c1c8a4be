"""
Line-based output model.

The printer writes into an ``Output``; layouts (see ``layouts/``) turn the
finished lines into text. The model itself knows nothing about how
comments end up being placed.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from .config import Formatting


@dataclass
class Line:
    """A single output line."""

    # Insertion order, starting at 0
    id: int = 0
    indent: int = 0
    body: str = ""

    # Comments describing this line, in order
    comments: list[str] = field(default_factory=list)


class Output:
    """Accumulates lines written by the printer.

    Lines are started lazily: ``ln()`` only marks that the next write goes
    to a new line, so the new line takes the indentation in effect when its
    first text is written. Comments always attach to the next line started.
    """

    def __init__(self, fmt: Formatting):
        self.fmt = fmt
        self._lines: list[Line] = []
        self._indent = 0
        self._new_line = True
        self._pending_comments: list[str] = []
        self._pending_key = ""

    def write(self, text: str) -> None:
        """Write text to the current line; newlines in ``text`` start new lines."""
        for idx, part in enumerate(str(text).split("\n")):
            if idx > 0:
                self.ln()
            self._current_line().body += part

    def write_key(self, text: str) -> None:
        """Stash a key (e.g. ``"name": ``) to prefix the next written text."""
        self._pending_key += text

    def line(self, text: str) -> None:
        """Write text, then start a new line."""
        self.write(text)
        self.ln()

    def ln(self) -> None:
        """Make the next write start a new line."""
        self._new_line = True

    def inc_indent(self) -> None:
        self._indent += self.fmt.indent_size

    def dec_indent(self) -> None:
        self._indent = max(0, self._indent - self.fmt.indent_size)

    def write_comment(self, comment: str) -> None:
        """Attach a comment to the next line started; multi-line comments are split."""
        self._pending_comments.extend(comment.split("\n"))

    def lines(self) -> list[Line]:
        """Return the finished lines.

        Comments that never got a line to attach to are kept on an empty
        trailing line.
        """
        if self._pending_comments or self._pending_key:
            self._current_line()
        return self._lines

    def is_empty(self) -> bool:
        return not self._lines and not self._pending_comments and not self._pending_key

    def _current_line(self) -> Line:
        if self._new_line or not self._lines:
            self._lines.append(Line(id=len(self._lines), indent=self._indent))
            self._new_line = False

        line = self._lines[-1]
        if self._pending_comments:
            line.comments.extend(self._pending_comments)
            self._pending_comments = []
        if self._pending_key:
            line.body += self._pending_key
            self._pending_key = ""
        return line
