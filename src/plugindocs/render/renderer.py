"""🖨️ Renderer - Execute templates against a document context.

Usage:
    text = ResourceTemplate(custom_text).render(
        provider_dir, "example_thing", "terraform-provider-example", "Example",
        "Resource", "examples/thing/resource.tf", "examples/thing/import.sh",
        "", schema,
    )

Empty template text renders nothing and raises nothing, so an empty override
means "skip this document".
"""

from __future__ import annotations

import io
from collections.abc import Mapping
from pathlib import Path
from typing import Any, TextIO

from pydantic import BaseModel

from ..errors import TemplateExecutionError
from ..schema.models import FunctionSignature, Schema
from .compiler import new_template
from .context import build_function_context, build_provider_context, build_resource_context


def render_template(
    provider_dir: Path | str,
    name: str,
    text: str,
    out: TextIO,
    data: BaseModel | Mapping[str, Any] | None,
) -> None:
    """Compile ``text`` and write its output for ``data`` to ``out``.

    Raises:
        TemplateParseError: The text does not compile
        TemplateExecutionError: The template failed while executing
    """
    if not text:
        return

    template = new_template(provider_dir, name, text)

    try:
        for chunk in template.generate(**_template_vars(data)):
            out.write(chunk)
    except Exception as e:
        raise TemplateExecutionError(name, str(e)) from e


def render_string_template(
    provider_dir: Path | str,
    name: str,
    text: str,
    data: BaseModel | Mapping[str, Any] | None,
) -> str:
    """Same as render_template, returning the output as a string."""
    buffer = io.StringIO()
    render_template(provider_dir, name, text, buffer, data)
    return buffer.getvalue()


def _template_vars(data: BaseModel | Mapping[str, Any] | None) -> dict[str, Any]:
    if data is None:
        return {}
    if isinstance(data, BaseModel):
        return data.model_dump()
    return dict(data)


class DocTemplate(str):
    """A static page (guide, overview) rendered without any context."""

    def render(self, provider_dir: Path | str, out: TextIO) -> None:
        render_template(provider_dir, "docTemplate", str(self), out, None)


class ProviderTemplate(str):
    """Template text for a provider index page."""

    def render(
        self,
        provider_dir: Path | str,
        provider_name: str,
        rendered_provider_name: str,
        example_file: Path | str | None,
        schema: Schema,
    ) -> str:
        if not self:
            return ""

        context = build_provider_context(
            provider_name, rendered_provider_name, example_file, schema
        )
        return render_string_template(provider_dir, "providerTemplate", str(self), context)


class ResourceTemplate(str):
    """Template text for a resource or data source page."""

    def render(
        self,
        provider_dir: Path | str,
        name: str,
        provider_name: str,
        rendered_provider_name: str,
        type_name: str,
        example_file: Path | str | None,
        import_file: Path | str | None,
        metadata_file: Path | str | None,
        schema: Schema,
    ) -> str:
        if not self:
            return ""

        context = build_resource_context(
            name,
            provider_name,
            rendered_provider_name,
            type_name,
            example_file,
            import_file,
            metadata_file,
            schema,
        )
        return render_string_template(provider_dir, "resourceTemplate", str(self), context)


class FunctionTemplate(str):
    """Template text for a provider-defined function page."""

    def render(
        self,
        provider_dir: Path | str,
        name: str,
        provider_name: str,
        rendered_provider_name: str,
        type_name: str,
        example_file: Path | str | None,
        metadata_file: Path | str | None,
        signature: FunctionSignature,
    ) -> str:
        if not self:
            return ""

        context = build_function_context(
            name,
            provider_name,
            rendered_provider_name,
            type_name,
            example_file,
            metadata_file,
            signature,
        )
        return render_string_template(provider_dir, "functionTemplate", str(self), context)
