"""📝 Default Templates - Fallback page layouts for each document kind.

Templates for generating:
- provider index pages
- resource and data source pages
- function pages

Each one starts with YAML front matter (page_title, subcategory,
description). Optional sections (Example Usage, Import, variadic argument)
appear only when their flag in the context is set.
"""

from .function import DEFAULT_FUNCTION_TEMPLATE
from .provider import DEFAULT_PROVIDER_TEMPLATE
from .resource import DEFAULT_RESOURCE_TEMPLATE

__all__ = [
    "DEFAULT_FUNCTION_TEMPLATE",
    "DEFAULT_PROVIDER_TEMPLATE",
    "DEFAULT_RESOURCE_TEMPLATE",
]
