"""
Two-column layout: comments are printed to the right of the line they
describe.

```
{
  "friend": "string" // Optional
}
```
"""

from __future__ import annotations

from ..output import Output


def render(out: Output) -> str:
    """
    Render an output with comments in a second column.

    Lines with more than one comment continue on extra rows whose first
    column is left blank.

    Args:
        out: The finished output

    Returns:
        The document text
    """
    lines = out.lines()
    separator = out.fmt.comments_style.separator
    align = out.fmt.two_columns.align
    spacing = out.fmt.two_columns.spacing

    lefts = [" " * line.indent + line.body for line in lines]
    widest = max((len(left) for left in lefts), default=0)

    rows = []
    for left, line in zip(lefts, lines):
        if not line.comments:
            rows.append(left)
            continue

        column = (widest if align else len(left)) + spacing
        for idx, comment in enumerate(line.comments):
            text = f"{separator} {comment}" if comment else separator
            start = left if idx == 0 else ""
            rows.append(start.ljust(column) + text)

    return "\n".join(rows)
