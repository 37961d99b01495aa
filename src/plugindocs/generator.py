"""📚 Documentation Renderer - Entry point for rendering one page at a time.

Picks the custom template or the default one, builds the context, renders,
and applies the malformed-metadata policy.

Usage:
    renderer = DocumentationRenderer("path/to/terraform-provider-example")
    page = renderer.render_resource(
        name="example_thing",
        provider_name="terraform-provider-example",
        rendered_provider_name="Example",
        type_name="Resource",
        schema=schemas.resource_schemas["example_thing"],
        example_file="examples/resources/example_thing/resource.tf",
        import_file="examples/resources/example_thing/import.sh",
    )

Which pages to render, and where to write them, is up to the caller.
"""

from __future__ import annotations

import sys
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import TextIO

from rich.console import Console
from rich.markup import escape

from .config import Settings, get_settings
from .errors import MetadataDecodeError
from .render.renderer import DocTemplate, FunctionTemplate, ProviderTemplate, ResourceTemplate
from .schema.models import FunctionSignature, Schema
from .templates import (
    DEFAULT_FUNCTION_TEMPLATE,
    DEFAULT_PROVIDER_TEMPLATE,
    DEFAULT_RESOURCE_TEMPLATE,
)


class DocumentationRenderer:
    """Render provider, resource, function and static pages.

    A ``template`` argument of None selects the default template; an empty
    string renders nothing.
    """

    def __init__(
        self,
        provider_dir: Path | str | None = None,
        settings: Settings | None = None,
        console: Console | None = None,
    ) -> None:
        """Initialize the renderer.

        Args:
            provider_dir: Base directory for codefile/tffile (default: settings)
            settings: Render settings (default: from environment)
            console: Rich console for output (optional)
        """
        self.settings = settings or get_settings()
        self.provider_dir = (
            Path(provider_dir) if provider_dir is not None else self.settings.provider_dir
        )
        self.console = console or Console(stderr=True)

    def render_provider(
        self,
        provider_name: str,
        rendered_provider_name: str,
        schema: Schema,
        example_file: Path | str | None = "",
        template: str | None = None,
    ) -> str:
        tmpl = DEFAULT_PROVIDER_TEMPLATE if template is None else ProviderTemplate(template)
        self._trace(f"provider [cyan]{provider_name}[/cyan]")
        return tmpl.render(
            self.provider_dir, provider_name, rendered_provider_name, example_file, schema
        )

    def render_resource(
        self,
        name: str,
        provider_name: str,
        rendered_provider_name: str,
        type_name: str,
        schema: Schema,
        example_file: Path | str | None = "",
        import_file: Path | str | None = "",
        metadata_file: Path | str | None = "",
        template: str | None = None,
    ) -> str:
        """Render a resource or data source page (``type_name`` labels which)."""
        tmpl = DEFAULT_RESOURCE_TEMPLATE if template is None else ResourceTemplate(template)
        self._trace(f"{type_name.lower()} [cyan]{name}[/cyan]")
        with self._metadata_policy():
            return tmpl.render(
                self.provider_dir,
                name,
                provider_name,
                rendered_provider_name,
                type_name,
                example_file,
                import_file,
                metadata_file,
                schema,
            )

    def render_function(
        self,
        name: str,
        provider_name: str,
        rendered_provider_name: str,
        signature: FunctionSignature,
        type_name: str = "function",
        example_file: Path | str | None = "",
        metadata_file: Path | str | None = "",
        template: str | None = None,
    ) -> str:
        tmpl = DEFAULT_FUNCTION_TEMPLATE if template is None else FunctionTemplate(template)
        self._trace(f"function [cyan]{name}[/cyan]")
        with self._metadata_policy():
            return tmpl.render(
                self.provider_dir,
                name,
                provider_name,
                rendered_provider_name,
                type_name,
                example_file,
                metadata_file,
                signature,
            )

    def render_doc(self, template: str, out: TextIO) -> None:
        """Render a static page (no context) straight to ``out``."""
        self._trace("static page")
        DocTemplate(template).render(self.provider_dir, out)

    @contextmanager
    def _metadata_policy(self) -> Iterator[None]:
        """Abort the process on malformed metadata unless policy is "raise"."""
        try:
            yield
        except MetadataDecodeError as e:
            if self.settings.metadata_error_policy == "raise":
                raise
            self.console.print(f"[red]Error:[/red] malformed metadata file {escape(str(e))}")
            sys.exit(1)

    def _trace(self, what: str) -> None:
        if self.settings.verbose:
            self.console.print(f"[dim]rendering {what}[/dim]")
