"""🧰 Template Helpers - The fixed set of functions available to templates.

Every helper can be called as a function or used as a filter:

    {{ prefixlines("  ", description) }}
    {{ description | plainmarkdown | trimspace | prefixlines("  ") }}

As a filter the piped value becomes the LAST argument, so
``x | prefixlines("  ")`` is ``prefixlines("  ", x)`` and
``path | codefile("shell")`` is ``codefile("shell", path)``. ``split`` is the
exception: ``name | split("_")`` is ``split(name, "_")``.
"""

from __future__ import annotations

import re
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from ..markdown import code_file, plain_markdown, prefix_lines

TERRAFORM_FORMAT = "terraform"

# Letters, digits, underscores and in-word apostrophes form one word.
TITLE_WORD_PATTERN = re.compile(r"\w+(?:['’]\w+)*")


@dataclass(frozen=True)
class Helper:
    """A named template helper."""

    name: str
    func: Callable[..., Any]
    pipe_first: bool = False

    def as_filter(self) -> Callable[..., Any]:
        """Adapt the helper so the piped value lands in the right slot."""
        if self.pipe_first:
            return self.func

        func = self.func

        def piped(value: Any, *args: Any) -> Any:
            return func(*args, value)

        piped.__name__ = self.name
        return piped


def title(text: str) -> str:
    """Title-case ``text`` without locale rules: "hello WORLD" -> "Hello World"."""
    return TITLE_WORD_PATTERN.sub(lambda m: m.group(0)[:1].upper() + m.group(0)[1:].lower(), text)


def split(text: str, sep: str) -> list[str]:
    return text.split(sep)


def _resolve(provider_dir: Path, path: str) -> Path:
    file_path = Path(path)
    if file_path.is_absolute():
        return file_path
    return provider_dir / file_path


def make_code_file(provider_dir: Path | str) -> Callable[[str, str], str]:
    """Create ``codefile(format, path)`` bound to a provider directory."""
    base = Path(provider_dir)

    def codefile(format: str, path: str) -> str:
        return code_file(format, _resolve(base, path))

    return codefile


def make_terraform_code_file(provider_dir: Path | str) -> Callable[[str], str]:
    """Create ``tffile(path)`` bound to a provider directory.

    Leading comment lines in the file are kept as they are.
    """
    base = Path(provider_dir)

    def tffile(path: str) -> str:
        return code_file(TERRAFORM_FORMAT, _resolve(base, path))

    return tffile


def build_helpers(provider_dir: Path | str) -> dict[str, Helper]:
    """Build the helper registry for templates rooted at ``provider_dir``.

    The set of names is closed; see HELPER_NAMES.
    """
    helpers = [
        Helper("codefile", make_code_file(provider_dir)),
        Helper("lower", str.lower),
        Helper("plainmarkdown", plain_markdown),
        Helper("prefixlines", prefix_lines),
        Helper("split", split, pipe_first=True),
        Helper("tffile", make_terraform_code_file(provider_dir)),
        Helper("title", title),
        Helper("trimspace", str.strip),
        Helper("upper", str.upper),
    ]
    return {helper.name: helper for helper in helpers}


HELPER_NAMES = frozenset(build_helpers(".").keys())
