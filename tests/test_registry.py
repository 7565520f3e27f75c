import dataclasses

import pytest

from reddit_mcp.errors import ToolValidationError, UnknownToolError
from reddit_mcp.tools.base import ToolDescriptor, ToolResponse
from reddit_mcp.tools.registry import ToolRegistry, build_registry


class EchoTool:
    descriptor = ToolDescriptor(name="echo", description="Echo params", input_schema={"type": "object"})

    def __init__(self) -> None:
        self.calls = []

    async def handle(self, context, params):
        self.calls.append((context, dict(params)))
        return ToolResponse.text(str(params.get("value")))


def test_build_registry_exposes_both_tools():
    registry = build_registry()

    assert [descriptor.name for descriptor in registry.descriptors()] == ["mcp_reddit_nav", "mcp_reddit_search"]
    assert "mcp_reddit_search" in registry
    assert len(registry) == 2


def test_search_descriptor_schema_declares_bounds():
    schema = build_registry().get("mcp_reddit_search").descriptor.input_schema

    assert schema["type"] == "object"
    assert sorted(schema["required"]) == ["keywords", "pageCount"]
    assert schema["properties"]["keywords"]["type"] == "string"
    page_count = schema["properties"]["pageCount"]
    assert page_count["type"] == "integer"
    assert page_count["minimum"] == 1
    assert page_count["maximum"] == 10


def test_nav_descriptor_requires_placeholder_field():
    schema = build_registry().get("mcp_reddit_nav").descriptor.input_schema

    assert schema["required"] == ["random_string"]
    assert schema["properties"]["random_string"]["type"] == "string"


def test_descriptor_is_immutable():
    descriptor = build_registry().get("mcp_reddit_nav").descriptor

    with pytest.raises(dataclasses.FrozenInstanceError):
        descriptor.name = "renamed"


def test_duplicate_registration_rejected():
    registry = ToolRegistry([EchoTool()])

    with pytest.raises(ValueError):
        registry.register(EchoTool())


def test_unknown_tool_raises():
    with pytest.raises(UnknownToolError):
        ToolRegistry().get("missing")


@pytest.mark.asyncio
async def test_dispatch_forwards_context_and_params():
    tool = EchoTool()
    registry = ToolRegistry([tool])
    context = object()

    response = await registry.dispatch("echo", context, {"value": 7})

    assert response.content[0].text == "7"
    assert tool.calls == [(context, {"value": 7})]


@pytest.mark.asyncio
async def test_dispatch_treats_missing_params_as_empty():
    tool = EchoTool()

    await ToolRegistry([tool]).dispatch("echo", object(), None)

    assert tool.calls[0][1] == {}


@pytest.mark.asyncio
async def test_dispatch_propagates_validation_errors():
    with pytest.raises(ToolValidationError, match="pageCount"):
        await build_registry().dispatch("mcp_reddit_search", object(), {"keywords": "cats", "pageCount": 0})
