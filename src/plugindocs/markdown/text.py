"""Small text helpers shared by templates and renderers."""

from __future__ import annotations

from pathlib import Path


def prefix_lines(prefix: str, text: str) -> str:
    """Prefix every line of ``text`` with ``prefix``.

    Used to indent multi-line descriptions under YAML front matter keys.
    """
    return prefix + ("\n" + prefix).join(text.split("\n"))


def code_file(format: str, path: Path | str) -> str:
    """Read a file and wrap its content in a fenced code block.

    Args:
        format: Language tag for the fence (e.g. "terraform", "shell")
        path: File to include

    Returns:
        Fenced code block, or "" when the file is blank

    Raises:
        OSError: If the file cannot be read
    """
    content = Path(path).read_text().strip()

    if not content:
        return ""

    return f"```{format}\n{content}\n```"
