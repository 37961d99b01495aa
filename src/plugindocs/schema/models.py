"""📐 Provider Schema Models - Pydantic models for machine-readable plugin schemas.

Mirrors the JSON emitted by ``terraform providers schema -json``:

    {
      "format_version": "1.0",
      "provider_schemas": {
        "registry.terraform.io/acme/example": {
          "provider": {"version": 0, "block": {...}},
          "resource_schemas": {"example_thing": {...}},
          "data_source_schemas": {},
          "functions": {"parse_id": {...}}
        }
      }
    }

Type expressions stay in their JSON form (``"string"``, ``["list", "string"]``,
``["object", {"a": "string"}]``) and are turned into display names by
``friendly_type_name``.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field

from ..errors import SchemaRenderError

NestingMode = Literal["single", "group", "list", "set", "map"]

_PRIMITIVES = {"string", "number", "bool", "dynamic"}
_COLLECTIONS = {"list", "set", "map"}


class _SchemaModel(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True)


class NestedAttributeType(_SchemaModel):
    """Attributes nested directly inside an attribute (protocol 6 style)."""

    attributes: dict[str, "Attribute"] = Field(default_factory=dict)
    nesting_mode: NestingMode = "single"
    min_items: int = 0
    max_items: int = 0


class Attribute(_SchemaModel):
    """A single configurable or computed attribute."""

    type: Any = None
    nested_type: NestedAttributeType | None = None
    description: str = ""
    description_kind: Literal["plain", "markdown"] = "plain"
    deprecated: bool = False
    required: bool = False
    optional: bool = False
    computed: bool = False
    sensitive: bool = False
    write_only: bool = False


class BlockType(_SchemaModel):
    """A nested block and how many times it may appear."""

    nesting_mode: NestingMode = "single"
    block: "Block" = Field(default_factory=lambda: Block())
    min_items: int = 0
    max_items: int = 0


class Block(_SchemaModel):
    attributes: dict[str, Attribute] = Field(default_factory=dict)
    block_types: dict[str, BlockType] = Field(default_factory=dict)
    description: str = ""
    description_kind: Literal["plain", "markdown"] = "plain"
    deprecated: bool = False


class Schema(_SchemaModel):
    """Root schema of a provider, resource or data source."""

    version: int = 0
    block: Block = Field(default_factory=Block)


class FunctionParameter(_SchemaModel):
    name: str
    type: Any = "dynamic"
    description: str = ""
    description_kind: Literal["plain", "markdown"] = "plain"
    is_nullable: bool = False


class FunctionSignature(_SchemaModel):
    """A provider-defined function: parameters, return type and docs."""

    description: str = ""
    description_kind: Literal["plain", "markdown"] = "plain"
    summary: str = ""
    deprecation_message: str = ""
    return_type: Any = "dynamic"
    parameters: list[FunctionParameter] = Field(default_factory=list)
    variadic_parameter: FunctionParameter | None = None


class ProviderSchema(_SchemaModel):
    provider: Schema = Field(default_factory=Schema)
    resource_schemas: dict[str, Schema] = Field(default_factory=dict)
    data_source_schemas: dict[str, Schema] = Field(default_factory=dict)
    functions: dict[str, FunctionSignature] = Field(default_factory=dict)


class ProvidersSchema(_SchemaModel):
    format_version: str = "1.0"
    provider_schemas: dict[str, ProviderSchema] = Field(default_factory=dict)


NestedAttributeType.model_rebuild()
Attribute.model_rebuild()
BlockType.model_rebuild()


def load_providers_schema(path: Path | str) -> ProvidersSchema:
    """Load the JSON output of ``terraform providers schema -json``.

    Args:
        path: Path to the JSON file

    Returns:
        ProvidersSchema keyed by provider source address
    """
    return ProvidersSchema.model_validate_json(Path(path).read_text())


def friendly_type_name(type_expr: Any) -> str:
    """Describe a JSON type expression in words.

    Examples:
        "string"                  -> "string"
        ["list", "string"]        -> "list of string"
        ["map", ["set", "bool"]]  -> "map of set of bool"
        ["object", {...}]         -> "object"

    Raises:
        SchemaRenderError: If the expression is not a known type
    """
    if isinstance(type_expr, str):
        if type_expr in _PRIMITIVES:
            return type_expr
        raise SchemaRenderError(f"unexpected type {type_expr!r}")

    if isinstance(type_expr, list) and len(type_expr) == 2:
        kind, element = type_expr
        if kind in _COLLECTIONS:
            return f"{kind} of {friendly_type_name(element)}"
        if kind == "object" and isinstance(element, dict):
            return "object"
        if kind == "tuple" and isinstance(element, list):
            return "tuple"

    raise SchemaRenderError(f"unexpected type {type_expr!r}")


def object_attribute_types(type_expr: Any) -> dict[str, Any] | None:
    """Return the attribute types of an object, or of an object collection."""
    if not isinstance(type_expr, list) or len(type_expr) != 2:
        return None
    kind, element = type_expr
    if kind == "object" and isinstance(element, dict):
        return element
    if kind in _COLLECTIONS:
        return object_attribute_types(element)
    return None


def type_label(type_expr: Any) -> str:
    """Capitalized display form, e.g. "List of String"."""
    words = friendly_type_name(type_expr).split(" ")
    return " ".join(word if word == "of" else word.capitalize() for word in words)
