"""🧪 Tests for the schema, function and plain-text Markdown renderers."""

import io
import json

import pytest

from plugindocs.errors import SchemaRenderError
from plugindocs.markdown import (
    plain_markdown,
    render_arguments,
    render_schema,
    render_signature,
    render_variadic_argument,
)
from plugindocs.schema import (
    Attribute,
    Block,
    BlockType,
    FunctionParameter,
    FunctionSignature,
    NestedAttributeType,
    Schema,
    friendly_type_name,
    load_providers_schema,
    type_label,
)


def schema_markdown(schema: Schema) -> str:
    out = io.StringIO()
    render_schema(schema, out)
    return out.getvalue()


class TestTypeNames:
    """Tests for friendly_type_name() and type_label()."""

    def test_primitives(self):
        assert friendly_type_name("string") == "string"
        assert friendly_type_name("bool") == "bool"

    def test_collections(self):
        assert friendly_type_name(["list", "string"]) == "list of string"
        assert friendly_type_name(["map", ["set", "number"]]) == "map of set of number"
        assert type_label(["list", "string"]) == "List of String"

    def test_structural(self):
        assert friendly_type_name(["object", {"a": "string"}]) == "object"
        assert friendly_type_name(["tuple", ["string", "bool"]]) == "tuple"

    def test_unknown_type(self):
        with pytest.raises(SchemaRenderError):
            friendly_type_name("nonsense")
        with pytest.raises(SchemaRenderError):
            friendly_type_name(["list"])


class TestRenderSchema:
    """Tests for render_schema()."""

    def test_groups_and_sorting(self, resource_schema):
        assert schema_markdown(resource_schema) == (
            "## Schema\n\n"
            "### Required\n\n"
            "- `name` (String) Name of the thing.\n\n"
            "### Read-Only\n\n"
            "- `id` (String) Identifier.\n\n"
        )

    def test_empty_schema(self):
        assert schema_markdown(Schema()) == "## Schema\n\n"

    def test_optional_computed_is_optional(self):
        schema = Schema(
            block=Block(attributes={"region": Attribute(type="string", optional=True, computed=True)})
        )
        assert "### Optional\n\n- `region` (String)\n" in schema_markdown(schema)

    def test_flags(self):
        schema = Schema(
            block=Block(
                attributes={
                    "token": Attribute(type="string", optional=True, sensitive=True),
                    "legacy": Attribute(type="string", optional=True, deprecated=True),
                }
            )
        )
        result = schema_markdown(schema)

        assert "- `legacy` (String, Deprecated)" in result
        assert "- `token` (String, Sensitive)" in result

    def test_nested_block(self):
        schema = Schema(
            block=Block(
                attributes={"name": Attribute(type="string", required=True)},
                block_types={
                    "timeouts": BlockType(
                        nesting_mode="single",
                        block=Block(attributes={"create": Attribute(type="string", optional=True)}),
                    )
                },
            )
        )

        assert schema_markdown(schema) == (
            "## Schema\n\n"
            "### Required\n\n"
            "- `name` (String)\n\n"
            "### Optional\n\n"
            "- `timeouts` (Block) (see [below for nested schema](#nestedblock--timeouts))\n\n"
            '<a id="nestedblock--timeouts"></a>\n'
            "### Nested Schema for `timeouts`\n\n"
            "Optional:\n\n"
            "- `create` (String)\n\n"
        )

    def test_block_limits_and_required_group(self):
        schema = Schema(
            block=Block(
                block_types={
                    "rule": BlockType(
                        nesting_mode="list",
                        min_items=1,
                        max_items=3,
                        block=Block(attributes={"port": Attribute(type="number", required=True)}),
                    )
                }
            )
        )
        result = schema_markdown(schema)

        assert "### Required\n\n- `rule` (Block List, Min: 1, Max: 3)" in result

    def test_read_only_block(self):
        schema = Schema(
            block=Block(
                block_types={
                    "status": BlockType(
                        nesting_mode="list",
                        block=Block(attributes={"state": Attribute(type="string", computed=True)}),
                    )
                }
            )
        )
        result = schema_markdown(schema)

        assert "### Read-Only\n\n- `status` (Block List)" in result
        assert "Read-Only:\n\n- `state` (String)" in result

    def test_deeply_nested_anchor(self):
        schema = Schema(
            block=Block(
                block_types={
                    "outer": BlockType(
                        block=Block(
                            block_types={
                                "inner": BlockType(
                                    block=Block(
                                        attributes={"x": Attribute(type="string", optional=True)}
                                    )
                                )
                            }
                        )
                    )
                }
            )
        )
        result = schema_markdown(schema)

        assert '<a id="nestedblock--outer--inner"></a>\n### Nested Schema for `outer.inner`' in result

    def test_nested_attributes(self):
        schema = Schema(
            block=Block(
                attributes={
                    "settings": Attribute(
                        optional=True,
                        nested_type=NestedAttributeType(
                            nesting_mode="list",
                            attributes={"key": Attribute(type="string", required=True)},
                        ),
                    )
                }
            )
        )
        result = schema_markdown(schema)

        assert "- `settings` (Attributes List) (see [below for nested schema](#nestedatt--settings))" in result
        assert "### Nested Schema for `settings`\n\nRequired:\n\n- `key` (String)\n" in result

    def test_object_attribute(self):
        schema = Schema(
            block=Block(
                attributes={
                    "endpoint": Attribute(
                        type=["list", ["object", {"port": "number", "host": "string"}]],
                        computed=True,
                    )
                }
            )
        )
        result = schema_markdown(schema)

        assert "- `endpoint` (List of Object) (see [below for nested schema](#nestedatt--endpoint))" in result
        assert "### Nested Schema for `endpoint`\n\n- `host` (String)\n- `port` (Number)\n" in result

    def test_unknown_type_raises(self):
        schema = Schema(block=Block(attributes={"x": Attribute(type="blob", optional=True)}))
        with pytest.raises(SchemaRenderError):
            schema_markdown(schema)


class TestFunctionMarkdown:
    """Tests for the function signature renderers."""

    def test_signature(self, parse_id_signature):
        assert render_signature("parse_id", parse_id_signature) == (
            "```text\nparse_id(id string) string\n```"
        )

    def test_signature_with_variadic(self, join_signature):
        assert render_signature("join", join_signature) == (
            "```text\njoin(sep string, ...parts string) string\n```"
        )

    def test_arguments(self):
        signature = FunctionSignature(
            return_type="bool",
            parameters=[
                FunctionParameter(name="input", type=["list", "string"], description=" Values. "),
                FunctionParameter(name="fallback", type="string", is_nullable=True),
            ],
        )

        assert render_arguments(signature) == (
            "1. `input` (List of String) Values.\n"
            "2. `fallback` (String, Nullable)"
        )

    def test_no_arguments(self):
        assert render_arguments(FunctionSignature(return_type="string")) == ""

    def test_variadic_numbered_after_parameters(self, join_signature):
        assert render_variadic_argument(join_signature) == (
            "2. `parts` (Variadic, String) Extra parts."
        )

    def test_no_variadic(self, parse_id_signature):
        assert render_variadic_argument(parse_id_signature) == ""

    def test_empty_function_name(self, parse_id_signature):
        with pytest.raises(SchemaRenderError):
            render_signature("", parse_id_signature)


class TestPlainMarkdown:
    """Tests for plain_markdown()."""

    def test_inline_formatting(self):
        assert plain_markdown("Use **this** [link](https://example.com).") == "Use this link."

    def test_paragraphs(self):
        assert plain_markdown("One.\n\nTwo.") == "One.\n\nTwo."

    def test_list_items(self):
        assert plain_markdown("- a\n- b") == "a\nb"

    def test_entities(self):
        assert plain_markdown("Tom & Jerry <3") == "Tom & Jerry <3"

    def test_blank(self):
        assert plain_markdown("  \n") == ""


class TestLoadProvidersSchema:
    """Tests for load_providers_schema()."""

    def test_loads_terraform_json(self, tmp_path):
        data = {
            "format_version": "1.0",
            "provider_schemas": {
                "registry.terraform.io/acme/example": {
                    "provider": {"version": 0, "block": {"description": "Example provider"}},
                    "resource_schemas": {
                        "example_thing": {
                            "version": 0,
                            "block": {
                                "attributes": {
                                    "id": {"type": "string", "computed": True, "description_kind": "plain"}
                                },
                                "description_kind": "plain",
                            },
                        }
                    },
                    "functions": {
                        "parse_id": {
                            "summary": "Parse",
                            "return_type": "string",
                            "parameters": [{"name": "id", "type": "string"}],
                        }
                    },
                }
            },
        }
        path = tmp_path / "schema.json"
        path.write_text(json.dumps(data))

        schemas = load_providers_schema(path)
        provider = schemas.provider_schemas["registry.terraform.io/acme/example"]

        assert provider.provider.block.description == "Example provider"
        assert provider.resource_schemas["example_thing"].block.attributes["id"].computed is True
        assert provider.functions["parse_id"].parameters[0].name == "id"
        assert provider.functions["parse_id"].variadic_parameter is None
