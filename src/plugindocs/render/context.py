"""🧩 Render Contexts - The data each kind of document template sees.

One frozen model per document kind. Inside a template every field is a
top-level name:

    # {{ name }} ({{ type }})
    {% if has_import %}{{ codefile("shell", import_file) }}{% endif %}

``has_*`` flags are computed once, when the context is built: a flag is true
only if its path is non-empty and the file exists at that moment.
"""

from __future__ import annotations

import io
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

from ..errors import RenderStageError, SchemaRenderError
from ..markdown import render_arguments, render_schema, render_signature, render_variadic_argument
from ..markers import ARGUMENT_COMMENT, SCHEMA_COMMENT, SIGNATURE_COMMENT, VARIADIC_COMMENT
from ..schema.models import FunctionSignature, Schema
from .metadata import file_exists, load_metadata

PROVIDER_NAME_PREFIX = "terraform-provider-"


class _Context(BaseModel):
    model_config = ConfigDict(frozen=True)


class ProviderContext(_Context):
    """Data for a provider index page."""

    description: str = ""

    has_example: bool = False
    example_file: str = ""

    provider_name: str
    provider_short_name: str
    schema_markdown: str

    rendered_provider_name: str = ""


class ResourceContext(_Context):
    """Data for a resource or data source page."""

    type: str
    name: str
    description: str = ""

    has_example: bool = False
    example_file: str = ""

    has_import: bool = False
    import_file: str = ""

    provider_name: str
    provider_short_name: str
    schema_markdown: str

    rendered_provider_name: str = ""

    has_metadata: bool = False
    metadata_file: str = ""
    metadata: dict[str, str] = Field(default_factory=dict)


class FunctionContext(_Context):
    """Data for a provider-defined function page."""

    type: str
    name: str
    description: str = ""
    summary: str = ""

    has_example: bool = False
    example_file: str = ""

    provider_name: str
    provider_short_name: str

    function_signature_markdown: str
    function_arguments_markdown: str

    has_variadic: bool = False
    function_variadic_argument_markdown: str

    rendered_provider_name: str = ""

    has_metadata: bool = False
    metadata_file: str = ""
    metadata: dict[str, str] = Field(default_factory=dict)


def provider_short_name(provider_name: str) -> str:
    """Drop the conventional prefix: "terraform-provider-aws" -> "aws"."""
    return provider_name.removeprefix(PROVIDER_NAME_PREFIX)


def build_provider_context(
    provider_name: str,
    rendered_provider_name: str,
    example_file: Path | str | None,
    schema: Schema,
) -> ProviderContext:
    """Build the context for a provider page.

    Raises:
        RenderStageError: The schema cannot be rendered
    """
    return ProviderContext(
        description=schema.block.description,
        has_example=file_exists(example_file),
        example_file=_path_str(example_file),
        provider_name=provider_name,
        provider_short_name=provider_short_name(provider_name),
        schema_markdown=_schema_markdown(schema),
        rendered_provider_name=rendered_provider_name,
    )


def build_resource_context(
    name: str,
    provider_name: str,
    rendered_provider_name: str,
    type_name: str,
    example_file: Path | str | None,
    import_file: Path | str | None,
    metadata_file: Path | str | None,
    schema: Schema,
) -> ResourceContext:
    """Build the context for a resource or data source page.

    Raises:
        RenderStageError: The schema cannot be rendered
        MetadataReadError: The metadata file cannot be read
        MetadataDecodeError: The metadata file is malformed
    """
    schema_markdown = _schema_markdown(schema)
    metadata = load_metadata(metadata_file)

    return ResourceContext(
        type=type_name,
        name=name,
        description=schema.block.description,
        has_example=file_exists(example_file),
        example_file=_path_str(example_file),
        has_import=file_exists(import_file),
        import_file=_path_str(import_file),
        provider_name=provider_name,
        provider_short_name=provider_short_name(provider_name),
        schema_markdown=schema_markdown,
        rendered_provider_name=rendered_provider_name,
        has_metadata=file_exists(metadata_file),
        metadata_file=_path_str(metadata_file),
        metadata=metadata,
    )


def build_function_context(
    name: str,
    provider_name: str,
    rendered_provider_name: str,
    type_name: str,
    example_file: Path | str | None,
    metadata_file: Path | str | None,
    signature: FunctionSignature,
) -> FunctionContext:
    """Build the context for a function page.

    Raises:
        RenderStageError: The signature, arguments or variadic argument
            cannot be rendered
        MetadataReadError: The metadata file cannot be read
        MetadataDecodeError: The metadata file is malformed
    """
    func_sig = _run_stage("function signature", render_signature, name, signature)
    func_args = _run_stage("function arguments", render_arguments, signature)
    func_var_arg = _run_stage("variadic argument", render_variadic_argument, signature)

    metadata = load_metadata(metadata_file)

    return FunctionContext(
        type=type_name,
        name=name,
        description=signature.description,
        summary=signature.summary,
        has_example=file_exists(example_file),
        example_file=_path_str(example_file),
        provider_name=provider_name,
        provider_short_name=provider_short_name(provider_name),
        function_signature_markdown=SIGNATURE_COMMENT + "\n" + func_sig,
        function_arguments_markdown=ARGUMENT_COMMENT + "\n" + func_args,
        has_variadic=signature.variadic_parameter is not None,
        function_variadic_argument_markdown=VARIADIC_COMMENT + "\n" + func_var_arg,
        rendered_provider_name=rendered_provider_name,
        has_metadata=file_exists(metadata_file),
        metadata_file=_path_str(metadata_file),
        metadata=metadata,
    )


def _schema_markdown(schema: Schema) -> str:
    buffer = io.StringIO()
    _run_stage("schema", render_schema, schema, buffer)
    return SCHEMA_COMMENT + "\n" + buffer.getvalue()


def _run_stage(stage: str, renderer, *args):
    try:
        return renderer(*args)
    except SchemaRenderError as e:
        raise RenderStageError(stage, str(e)) from e


def _path_str(path: Path | str | None) -> str:
    return str(path) if path else ""
