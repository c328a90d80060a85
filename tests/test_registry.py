"""Tests for the tool/resource Registry."""

import pytest

from wpmcp.server.registry import (
    DEFAULT_MIME_TYPE,
    Registry,
    RegistryFrozenError,
    ResourceDescriptor,
    ToolDescriptor,
)


def _tool(name, text="ok", description=None):
    return ToolDescriptor(name=name, description=description or f"{name} tool",
                          handler=lambda args: text)


def _resource(uri, text="doc"):
    return ResourceDescriptor(uri=uri, name=uri, provider=lambda: text)


class TestToolDescriptor:
    def test_public_shape_hides_handler(self, echo_tool):
        d = echo_tool.to_dict()
        assert set(d) == {"name", "description", "inputSchema"}
        assert d["name"] == "echo"
        assert d["inputSchema"]["required"] == ["text"]

    def test_default_schema(self):
        tool = _tool("bare")
        assert tool.input_schema == {"type": "object", "properties": {}}

    def test_immutable(self, echo_tool):
        with pytest.raises(AttributeError):
            echo_tool.name = "other"
        with pytest.raises(AttributeError):
            del echo_tool.handler

    def test_schema_is_copied(self):
        schema = {"type": "object", "properties": {}}
        tool = ToolDescriptor("t", "t", lambda a: "", input_schema=schema)
        schema["properties"]["injected"] = {"type": "string"}
        assert "injected" not in tool.input_schema
        tool.to_dict()["inputSchema"]["properties"]["x"] = {}
        assert "x" not in tool.input_schema

    def test_rejects_empty_name(self):
        with pytest.raises(ValueError):
            ToolDescriptor("", "nothing", lambda a: "")

    def test_rejects_non_callable_handler(self):
        with pytest.raises(TypeError):
            ToolDescriptor("t", "t", "not callable")


class TestResourceDescriptor:
    def test_defaults(self):
        r = _resource("res://x")
        assert r.mime_type == DEFAULT_MIME_TYPE == "text/markdown"
        assert "description" not in r.to_dict()

    def test_public_shape(self, hello_resource):
        assert hello_resource.to_dict() == {
            "uri": "res://a",
            "name": "Hello",
            "description": "Says hello",
            "mimeType": "text/markdown",
        }

    def test_immutable(self, hello_resource):
        with pytest.raises(AttributeError):
            hello_resource.uri = "res://b"


class TestRegistry:
    def test_empty(self, registry):
        assert registry.list_tools() == []
        assert registry.list_resources() == []
        assert registry.tool_count == 0
        assert registry.resource_count == 0

    def test_insertion_order(self, registry):
        for name in ("zeta", "alpha", "mid"):
            registry.register_tool(_tool(name))
        assert [t.name for t in registry.list_tools()] == ["zeta", "alpha", "mid"]

    def test_resource_insertion_order(self, registry):
        for uri in ("res://b", "res://a", "res://c"):
            registry.register_resource(_resource(uri))
        assert [r.uri for r in registry.list_resources()] == ["res://b", "res://a", "res://c"]

    def test_reregistration_replaces_in_place(self, registry):
        registry.register_tool(_tool("first", description="v1"))
        registry.register_tool(_tool("second"))
        registry.register_tool(_tool("first", description="v2"))

        tools = registry.list_tools()
        assert [t.name for t in tools] == ["first", "second"]
        assert tools[0].description == "v2"
        assert registry.tool_count == 2

    def test_resource_reregistration_replaces_in_place(self, registry):
        registry.register_resource(_resource("res://a", "old"))
        registry.register_resource(_resource("res://b"))
        registry.register_resource(_resource("res://a", "new"))

        assert [r.uri for r in registry.list_resources()] == ["res://a", "res://b"]
        assert registry.get_resource("res://a").provider() == "new"

    def test_lookup(self, registry, echo_tool, hello_resource):
        registry.register_tool(echo_tool)
        registry.register_resource(hello_resource)
        assert registry.get_tool("echo") is echo_tool
        assert registry.get_resource("res://a") is hello_resource

    def test_lookup_missing(self, registry):
        assert registry.get_tool("nonexistent") is None
        assert registry.get_resource("res://missing") is None

    def test_freeze_rejects_registration(self, registry, echo_tool, hello_resource):
        registry.freeze()
        assert registry.frozen
        with pytest.raises(RegistryFrozenError):
            registry.register_tool(echo_tool)
        with pytest.raises(RegistryFrozenError):
            registry.register_resource(hello_resource)
        assert registry.tool_count == 0

    def test_list_is_a_snapshot(self, registry, echo_tool):
        registry.register_tool(echo_tool)
        listing = registry.list_tools()
        listing.clear()
        assert registry.tool_count == 1

    def test_register_tools_module(self, registry):
        class Module:
            TOOLS = [_tool("a"), _tool("b")]

        registry.register_tools_module(Module)
        assert [t.name for t in registry.list_tools()] == ["a", "b"]

    def test_register_tools_module_without_tools(self, registry):
        class Module:
            TOOLS = None

        with pytest.raises(TypeError):
            registry.register_tools_module(Module)

    def test_independent_instances(self, echo_tool):
        one, two = Registry(), Registry()
        one.register_tool(echo_tool)
        assert two.get_tool("echo") is None
