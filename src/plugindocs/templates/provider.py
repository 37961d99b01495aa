"""🏠 Default provider template - Used when a provider has no custom index template."""

from ..markers import FRONTMATTER_COMMENT
from ..render.renderer import ProviderTemplate

DEFAULT_PROVIDER_TEMPLATE = ProviderTemplate(
    """---
"""
    + FRONTMATTER_COMMENT
    + """
page_title: "{{ provider_short_name }} Provider"
subcategory: ""
description: |-
{{ description | plainmarkdown | trimspace | prefixlines("  ") }}
---

# {{ provider_short_name }} Provider

{{ description | trimspace }}

{% if has_example -%}
## Example Usage

{{ tffile(example_file) }}
{%- endif %}

{{ schema_markdown | trimspace }}
"""
)
