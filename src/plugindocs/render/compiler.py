"""🧱 Template Compiler - Jinja templates bound to the helper registry.

Templates run in a sandboxed environment that only knows the helpers from
``helpers.build_helpers``:

- undefined names raise instead of rendering as ""
- unknown filters, tests and function calls fail at compile time, even
  inside a branch that never runs
- nothing is auto-escaped (output is Markdown, not HTML)
"""

from __future__ import annotations

from pathlib import Path

from jinja2 import (
    BaseLoader,
    Environment,
    StrictUndefined,
    Template,
    TemplateError,
    TemplateNotFound,
    nodes,
)
from jinja2.sandbox import SandboxedEnvironment

from ..errors import TemplateParseError
from .helpers import Helper, build_helpers

# Names that are callable inside templates without being helpers.
_BUILTIN_CALLABLES = frozenset({"caller", "super", "loop"})


class TextTemplateLoader(BaseLoader):
    """Jinja2 loader that serves a single in-memory template text."""

    def __init__(self, name: str, source: str):
        self.name = name
        self.source = source

    def get_source(self, environment: Environment, template: str):
        if template != self.name:
            raise TemplateNotFound(template)
        return self.source, None, lambda: True


def create_environment(helpers: dict[str, Helper], loader: BaseLoader | None = None) -> Environment:
    """Create a sandboxed environment exposing exactly ``helpers``."""
    env = SandboxedEnvironment(
        loader=loader,
        autoescape=False,
        undefined=StrictUndefined,
        keep_trailing_newline=True,
        cache_size=0,
    )
    env.globals = {name: helper.func for name, helper in helpers.items()}
    env.filters = {name: helper.as_filter() for name, helper in helpers.items()}
    return env


def new_template(provider_dir: Path | str, name: str, text: str) -> Template:
    """Compile ``text`` into a template named ``name``.

    Args:
        provider_dir: Base directory for relative codefile/tffile paths
        name: Template name, used in error messages
        text: Raw template text

    Returns:
        Compiled jinja2 Template

    Raises:
        TemplateParseError: Invalid syntax or an unknown filter, test or function
    """
    helpers = build_helpers(provider_dir)
    env = create_environment(helpers, loader=TextTemplateLoader(name, text))

    try:
        tree = env.parse(text, name=name)
    except TemplateError as e:
        raise TemplateParseError(name, text, str(e)) from e

    unknown_filters = _unknown_filters(tree, env)
    if unknown_filters:
        raise TemplateParseError(name, text, f"filter {unknown_filters[0]!r} not defined")

    unknown_tests = _unknown_tests(tree, env)
    if unknown_tests:
        raise TemplateParseError(name, text, f"test {unknown_tests[0]!r} not defined")

    unknown = _unknown_calls(tree, set(helpers))
    if unknown:
        raise TemplateParseError(name, text, f"function {unknown[0]!r} not defined")

    try:
        return env.get_template(name)
    except TemplateError as e:
        raise TemplateParseError(name, text, str(e)) from e


def _unknown_filters(tree: nodes.Template, env: Environment) -> list[str]:
    """Filter names used anywhere in the template, guarded or not, that are not registered."""
    return [f.name for f in tree.find_all(nodes.Filter) if f.name not in env.filters]


def _unknown_tests(tree: nodes.Template, env: Environment) -> list[str]:
    return [t.name for t in tree.find_all(nodes.Test) if t.name not in env.tests]


def _unknown_calls(tree: nodes.Template, helper_names: set[str]) -> list[str]:
    """Names called in the template that are neither helpers nor local names.

    Local names are macros plus anything bound by set, for, or a macro
    parameter, so ``{% set f = upper %}{{ f(x) }}`` is accepted.
    """
    known = helper_names | _BUILTIN_CALLABLES
    known |= {macro.name for macro in tree.find_all(nodes.Macro)}
    known |= {
        name.name for name in tree.find_all(nodes.Name) if name.ctx in ("store", "param")
    }

    return [
        call.node.name
        for call in tree.find_all(nodes.Call)
        if isinstance(call.node, nodes.Name) and call.node.name not in known
    ]
