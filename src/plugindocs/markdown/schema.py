"""📖 Schema Markdown - Render a plugin schema as a Markdown reference.

Generates:
- Required / Optional / Read-Only attribute groups (sorted by name)
- One anchored "Nested Schema" section per nested block, nested attribute
  or object-typed attribute, linked from the parent entry
"""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from typing import Any, TextIO

from ..errors import SchemaRenderError
from ..schema.models import (
    Attribute,
    Block,
    BlockType,
    NestedAttributeType,
    Schema,
    object_attribute_types,
    type_label,
)

GROUPS = ("Required", "Optional", "Read-Only")

_NESTING_LABELS = {
    "single": "",
    "group": "",
    "list": " List",
    "set": " Set",
    "map": " Map",
}


@dataclass
class _NestedSection:
    """A nested schema waiting to be written below the main groups."""

    anchor: str
    path: str
    attributes: dict[str, Attribute] = field(default_factory=dict)
    block_types: dict[str, BlockType] = field(default_factory=dict)
    object_types: dict[str, Any] | None = None


def render_schema(schema: Schema, out: TextIO) -> None:
    """Write the Markdown reference for ``schema`` to ``out``.

    Raises:
        SchemaRenderError: If an attribute carries an unknown type
    """
    if schema is None or schema.block is None:
        raise SchemaRenderError("schema has no root block")

    pending: deque[_NestedSection] = deque()

    out.write("## Schema\n\n")
    _write_groups(out, schema.block.attributes, schema.block.block_types, "", pending, top_level=True)

    while pending:
        section = pending.popleft()
        out.write(f'<a id="{section.anchor}"></a>\n')
        out.write(f"### Nested Schema for `{section.path}`\n\n")
        if section.object_types is not None:
            _write_object_attributes(out, section.path, section.object_types, pending)
        else:
            _write_groups(
                out, section.attributes, section.block_types, section.path, pending, top_level=False
            )


def _write_groups(
    out: TextIO,
    attributes: dict[str, Attribute],
    block_types: dict[str, BlockType],
    path: str,
    pending: deque[_NestedSection],
    top_level: bool,
) -> None:
    grouped: dict[str, list[str]] = {group: [] for group in GROUPS}

    names = sorted(set(attributes) | set(block_types))
    for name in names:
        child_path = f"{path}.{name}" if path else name
        if name in attributes:
            attr = attributes[name]
            line = _attribute_line(name, attr, child_path, pending)
            grouped[_attribute_group(attr)].append(line)
        else:
            block_type = block_types[name]
            line = _block_line(name, block_type, child_path, pending)
            grouped[_block_group(block_type)].append(line)

    for group in GROUPS:
        lines = grouped[group]
        if not lines:
            continue
        out.write(f"### {group}\n\n" if top_level else f"{group}:\n\n")
        for line in lines:
            out.write(line + "\n")
        out.write("\n")


def _write_object_attributes(
    out: TextIO, path: str, object_types: dict[str, Any], pending: deque[_NestedSection]
) -> None:
    for name in sorted(object_types):
        type_expr = object_types[name]
        child_path = f"{path}.{name}"
        line = f"- `{name}` ({type_label(type_expr)})"
        nested = object_attribute_types(type_expr)
        if nested is not None:
            anchor = _anchor("nestedobjatt", child_path)
            pending.append(_NestedSection(anchor=anchor, path=child_path, object_types=nested))
            line += _nested_link(anchor)
        out.write(line + "\n")
    out.write("\n")


def _attribute_line(
    name: str, attr: Attribute, path: str, pending: deque[_NestedSection]
) -> str:
    if attr.nested_type is not None:
        label = "Attributes" + _NESTING_LABELS[attr.nested_type.nesting_mode]
        label += _item_limits(attr.nested_type)
    else:
        if attr.type is None:
            raise SchemaRenderError(f"attribute {path!r} has neither type nor nested type")
        label = type_label(attr.type)

    label += _attribute_flags(attr)
    line = f"- `{name}` ({label})"

    description = attr.description.strip()
    if description:
        line += f" {description}"

    if attr.nested_type is not None:
        anchor = _anchor("nestedatt", path)
        pending.append(
            _NestedSection(anchor=anchor, path=path, attributes=attr.nested_type.attributes)
        )
        line += _nested_link(anchor)
    else:
        nested = object_attribute_types(attr.type)
        if nested is not None:
            anchor = _anchor("nestedatt", path)
            pending.append(_NestedSection(anchor=anchor, path=path, object_types=nested))
            line += _nested_link(anchor)

    return line


def _block_line(
    name: str, block_type: BlockType, path: str, pending: deque[_NestedSection]
) -> str:
    label = "Block" + _NESTING_LABELS[block_type.nesting_mode] + _item_limits(block_type)
    if block_type.block.deprecated:
        label += ", Deprecated"

    line = f"- `{name}` ({label})"
    description = block_type.block.description.strip()
    if description:
        line += f" {description}"

    anchor = _anchor("nestedblock", path)
    pending.append(
        _NestedSection(
            anchor=anchor,
            path=path,
            attributes=block_type.block.attributes,
            block_types=block_type.block.block_types,
        )
    )
    return line + _nested_link(anchor)


def _attribute_group(attr: Attribute) -> str:
    if attr.required:
        return "Required"
    if attr.optional:
        return "Optional"
    return "Read-Only"


def _block_group(block_type: BlockType) -> str:
    if block_type.min_items > 0:
        return "Required"
    if _is_read_only(block_type.block):
        return "Read-Only"
    return "Optional"


def _is_read_only(block: Block) -> bool:
    """A block is read-only when nothing under it can be configured."""
    for attr in block.attributes.values():
        if attr.required or attr.optional:
            return False
    return all(_is_read_only(child.block) for child in block.block_types.values())


def _attribute_flags(attr: Attribute) -> str:
    flags = ""
    if attr.sensitive:
        flags += ", Sensitive"
    if attr.write_only:
        flags += ", Write-only"
    if attr.deprecated:
        flags += ", Deprecated"
    return flags


def _item_limits(nested: BlockType | NestedAttributeType) -> str:
    limits = ""
    if nested.min_items > 0:
        limits += f", Min: {nested.min_items}"
    if nested.max_items > 0:
        limits += f", Max: {nested.max_items}"
    return limits


def _anchor(kind: str, path: str) -> str:
    return f"{kind}--" + path.replace(".", "--")


def _nested_link(anchor: str) -> str:
    return f" (see [below for nested schema](#{anchor}))"
