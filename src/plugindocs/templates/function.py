"""🔧 Default function template - Used when a function has no custom template."""

from ..markers import FRONTMATTER_COMMENT
from ..render.renderer import FunctionTemplate

DEFAULT_FUNCTION_TEMPLATE = FunctionTemplate(
    """---
"""
    + FRONTMATTER_COMMENT
    + """
page_title: "{{ name }} {{ type }} - {{ provider_name }}"
subcategory: ""
description: |-
{{ summary | plainmarkdown | trimspace | prefixlines("  ") }}
---

# {{ type }}: {{ name }}

{{ description | trimspace }}

{% if has_example -%}
## Example Usage

{{ tffile(example_file) }}
{%- endif %}

## Signature

{{ function_signature_markdown }}

## Arguments

{{ function_arguments_markdown }}
{% if has_variadic -%}
{{ function_variadic_argument_markdown }}
{%- endif %}
"""
)
