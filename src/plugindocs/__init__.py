"""📚 plugindocs - Markdown reference pages for infrastructure plugin schemas.

Quick Start:
    from plugindocs import DocumentationRenderer, load_providers_schema

    schemas = load_providers_schema("schema.json")
    provider = schemas.provider_schemas["registry.terraform.io/acme/example"]

    renderer = DocumentationRenderer("terraform-provider-example")
    page = renderer.render_resource(
        "example_thing",
        "terraform-provider-example",
        "Example",
        "Resource",
        provider.resource_schemas["example_thing"],
        import_file="examples/resources/example_thing/import.sh",
    )

Templates are Jinja, sandboxed, with a fixed set of helpers:
codefile, tffile, lower, upper, title, plainmarkdown, prefixlines, split,
trimspace.
"""

from .config import Settings, get_settings
from .errors import (
    MetadataDecodeError,
    MetadataError,
    MetadataReadError,
    PluginDocsError,
    RenderStageError,
    SchemaRenderError,
    TemplateExecutionError,
    TemplateParseError,
)
from .generator import DocumentationRenderer
from .schema import FunctionSignature, Schema, load_providers_schema

__version__ = "0.1.0"

__all__ = [
    "DocumentationRenderer",
    "Settings",
    "get_settings",
    "FunctionSignature",
    "Schema",
    "load_providers_schema",
    "PluginDocsError",
    "TemplateParseError",
    "TemplateExecutionError",
    "RenderStageError",
    "SchemaRenderError",
    "MetadataError",
    "MetadataReadError",
    "MetadataDecodeError",
    "__version__",
]
