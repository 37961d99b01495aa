"""🧪 Pytest configuration and shared fixtures."""

import io

import pytest
from rich.console import Console

from plugindocs.config import Settings, get_settings
from plugindocs.schema import Attribute, Block, FunctionParameter, FunctionSignature, Schema


@pytest.fixture
def resource_schema():
    """A small resource schema with one required and one computed attribute."""
    return Schema(
        block=Block(
            description="Example resource",
            attributes={
                "name": Attribute(type="string", required=True, description="Name of the thing."),
                "id": Attribute(type="string", computed=True, description="Identifier."),
            },
        )
    )


@pytest.fixture
def parse_id_signature():
    """A function signature without a variadic parameter."""
    return FunctionSignature(
        summary="Parse an ID",
        description="Parses an **ID**.",
        return_type="string",
        parameters=[
            FunctionParameter(name="id", type="string", description="The identifier."),
        ],
    )


@pytest.fixture
def join_signature():
    """A function signature with a variadic parameter."""
    return FunctionSignature(
        summary="Join parts",
        description="Joins parts with a separator.",
        return_type="string",
        parameters=[
            FunctionParameter(name="sep", type="string", description="Separator."),
        ],
        variadic_parameter=FunctionParameter(
            name="parts", type="string", description="Extra parts."
        ),
    )


@pytest.fixture
def provider_dir(tmp_path):
    """An empty provider directory."""
    path = tmp_path / "terraform-provider-example"
    path.mkdir()
    return path


@pytest.fixture
def console_output():
    """A rich console writing to a string buffer."""
    buffer = io.StringIO()
    return Console(file=buffer, width=200), buffer


@pytest.fixture
def raise_settings(provider_dir):
    """Settings that surface malformed metadata as an exception."""
    return Settings(metadata_error_policy="raise", provider_dir=provider_dir)


# Environment setup for tests
@pytest.fixture(autouse=True)
def setup_test_env(monkeypatch):
    """Clear PLUGINDOCS_* variables and the cached settings."""
    for var in ("PLUGINDOCS_METADATA_ERROR_POLICY", "PLUGINDOCS_PROVIDER_DIR", "PLUGINDOCS_VERBOSE"):
        monkeypatch.delenv(var, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
