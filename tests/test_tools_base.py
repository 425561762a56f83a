"""Tests for Tool base class and ToolRegistry."""
import pytest
from bareos_mcp.tools.base import Tool, ToolRegistry


class TestTool:
    def test_tool_func_receives_arguments(self):
        tool = Tool(
            name="echo",
            description="Echo a value",
            input_schema={"type": "object", "properties": {"x": {"type": "string"}}},
            func=lambda **kw: kw.get("x", ""),
        )
        assert tool.func(x="hi") == "hi"

    def test_tool_is_immutable(self):
        import dataclasses
        tool = Tool(name="t", description="", input_schema={}, func=lambda **kw: "")
        with pytest.raises(dataclasses.FrozenInstanceError):
            tool.name = "other"


class TestToolRegistry:
    def test_register_and_get(self):
        registry = ToolRegistry()
        tool = Tool(name="my_tool", description="desc",
                    input_schema={"type": "object", "properties": {}}, func=lambda **kw: "")
        registry.register(tool)
        assert registry.get("my_tool") is tool

    def test_get_unknown_raises(self):
        registry = ToolRegistry()
        with pytest.raises(KeyError):
            registry.get("nonexistent")

    def test_list_tools_keeps_order(self):
        registry = ToolRegistry()
        registry.register(Tool(name="b", description="B", input_schema={}, func=lambda **kw: ""))
        registry.register(Tool(name="a", description="A", input_schema={}, func=lambda **kw: ""))
        assert [t.name for t in registry.list_tools()] == ["b", "a"]

    def test_to_mcp_format(self):
        registry = ToolRegistry()
        registry.register(Tool(
            name="list_pools",
            description="List pools",
            input_schema={"type": "object", "properties": {}},
            func=lambda **kw: "",
        ))
        fmt = registry.to_mcp_format()
        assert fmt == [{
            "name": "list_pools",
            "description": "List pools",
            "inputSchema": {"type": "object", "properties": {}},
        }]
