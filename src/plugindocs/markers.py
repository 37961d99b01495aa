"""🔖 Marker comments identifying generated regions of a document.

These strings are matched byte for byte by tools that diff or regenerate
documentation; do not change them.
"""

SCHEMA_COMMENT = "<!-- schema generated by tfplugindocs -->"
SIGNATURE_COMMENT = "<!-- signature generated by tfplugindocs -->"
ARGUMENT_COMMENT = "<!-- arguments generated by tfplugindocs -->"
VARIADIC_COMMENT = "<!-- variadic argument generated by tfplugindocs -->"

FRONTMATTER_COMMENT = "# generated by https://github.com/hashicorp/terraform-plugin-docs"
