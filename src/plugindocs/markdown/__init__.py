"""📝 Markdown renderers used while building template contexts.

- schema: attribute/block reference tables
- functions: function signature and argument lists
- plain: Markdown to plain prose
- text: line prefixing and code file inclusion
"""

from .functions import render_arguments, render_signature, render_variadic_argument
from .plain import plain_markdown
from .schema import render_schema
from .text import code_file, prefix_lines

__all__ = [
    "render_schema",
    "render_signature",
    "render_arguments",
    "render_variadic_argument",
    "plain_markdown",
    "code_file",
    "prefix_lines",
]
