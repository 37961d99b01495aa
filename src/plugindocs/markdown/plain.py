"""📝 Plain Markdown - Reduce Markdown to plain prose.

Descriptions go into YAML front matter, where Markdown syntax is noise. The
text is rendered with the ``markdown`` library and the resulting HTML is
flattened back to text: block elements become blank-line separated
paragraphs, list items become lines, and all inline formatting is dropped.
"""

from __future__ import annotations

import html
import re

import markdown

BLOCK_END_PATTERN = re.compile(
    r"</(p|h[1-6]|pre|ul|ol|blockquote|table|div)>\n?", re.IGNORECASE
)
LINE_END_PATTERN = re.compile(r"(</(li|tr)>|<br\s*/?>|<hr\s*/?>)\n?", re.IGNORECASE)
TAG_PATTERN = re.compile(r"<[^>]+>")
BLANK_RUN_PATTERN = re.compile(r"\n{3,}")


def plain_markdown(text: str) -> str:
    """Strip Markdown formatting from ``text``.

    Example:
        plain_markdown("Use **this** [link](https://example.com).")
        # -> "Use this link."
    """
    if not text.strip():
        return ""

    rendered = markdown.markdown(text)
    rendered = BLOCK_END_PATTERN.sub("\n\n", rendered)
    rendered = LINE_END_PATTERN.sub("\n", rendered)
    rendered = TAG_PATTERN.sub("", rendered)
    rendered = html.unescape(rendered)

    lines = [line.rstrip() for line in rendered.split("\n")]
    return BLANK_RUN_PATTERN.sub("\n\n", "\n".join(lines)).strip()
