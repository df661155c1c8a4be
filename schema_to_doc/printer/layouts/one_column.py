"""
One-column layout: every comment is printed on its own line, right above
the line it describes.

```
{
  // Optional
  "friend": "string"
}
```
"""

from __future__ import annotations

from pathlib import Path

import jinja2

from ..output import Output

_TEMPLATE_DIR = Path(__file__).parent / "templates"

_jinja_env = jinja2.Environment(
    loader=jinja2.FileSystemLoader(str(_TEMPLATE_DIR)),
    lstrip_blocks=True,
    trim_blocks=True,
)


def render(out: Output) -> str:
    """
    Render an output with comments above their lines.

    Args:
        out: The finished output

    Returns:
        The document text
    """
    template = _jinja_env.get_template("one_column.jinja2")
    return template.render(lines=out.lines(), separator=out.fmt.comments_style.separator)
