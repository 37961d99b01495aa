"""📐 Plugin schema models and loaders."""

from .models import (
    Attribute,
    Block,
    BlockType,
    FunctionParameter,
    FunctionSignature,
    NestedAttributeType,
    ProviderSchema,
    ProvidersSchema,
    Schema,
    friendly_type_name,
    load_providers_schema,
    type_label,
)

__all__ = [
    "Attribute",
    "Block",
    "BlockType",
    "FunctionParameter",
    "FunctionSignature",
    "NestedAttributeType",
    "ProviderSchema",
    "ProvidersSchema",
    "Schema",
    "friendly_type_name",
    "load_providers_schema",
    "type_label",
]
