"""🖨️ Template rendering pipeline.

- helpers: the fixed set of functions templates may call
- compiler: sandboxed Jinja compilation
- metadata: optional JSON key/value side files
- context: per-document data records
- renderer: template execution to a stream or string
"""

from .compiler import new_template
from .context import (
    FunctionContext,
    ProviderContext,
    ResourceContext,
    build_function_context,
    build_provider_context,
    build_resource_context,
    provider_short_name,
)
from .helpers import HELPER_NAMES, build_helpers
from .metadata import file_exists, load_metadata
from .renderer import (
    DocTemplate,
    FunctionTemplate,
    ProviderTemplate,
    ResourceTemplate,
    render_string_template,
    render_template,
)

__all__ = [
    "new_template",
    "FunctionContext",
    "ProviderContext",
    "ResourceContext",
    "build_function_context",
    "build_provider_context",
    "build_resource_context",
    "provider_short_name",
    "HELPER_NAMES",
    "build_helpers",
    "file_exists",
    "load_metadata",
    "DocTemplate",
    "FunctionTemplate",
    "ProviderTemplate",
    "ResourceTemplate",
    "render_string_template",
    "render_template",
]
