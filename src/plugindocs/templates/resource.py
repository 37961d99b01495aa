"""📄 Default resource template - Used when a resource has no custom template."""

from ..markers import FRONTMATTER_COMMENT
from ..render.renderer import ResourceTemplate

DEFAULT_RESOURCE_TEMPLATE = ResourceTemplate(
    """---
"""
    + FRONTMATTER_COMMENT
    + """
page_title: "{{ name }} {{ type }} - {{ provider_name }}"
subcategory: ""
description: |-
{{ description | plainmarkdown | trimspace | prefixlines("  ") }}
---

# {{ name }} ({{ type }})

{{ description | trimspace }}

{% if has_example -%}
## Example Usage

{{ tffile(example_file) }}
{%- endif %}

{{ schema_markdown | trimspace }}
{%- if has_import %}

## Import

Import is supported using the following syntax:

{{ codefile("shell", import_file) }}
{%- endif %}
"""
)
