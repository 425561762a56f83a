"""Static tool table served through ``tools/list`` and ``tools/call``."""
from dataclasses import dataclass
from typing import Callable, Dict, List


@dataclass(frozen=True)
class Tool:
    """Named bconsole query. ``func`` takes the raw call arguments as keywords."""

    name: str
    description: str
    input_schema: dict
    func: Callable[..., str]


class ToolRegistry:
    def __init__(self):
        self._tools: Dict[str, Tool] = {}

    def register(self, tool: Tool) -> None:
        self._tools[tool.name] = tool

    def get(self, name: str) -> Tool:
        """Look up a tool; unknown names raise KeyError."""
        return self._tools[name]

    def list_tools(self) -> List[Tool]:
        return list(self._tools.values())

    def to_mcp_format(self) -> List[dict]:
        """Descriptors in ``tools/list`` wire shape (``inputSchema`` key)."""
        return [
            {
                "name": t.name,
                "description": t.description,
                "inputSchema": t.input_schema,
            }
            for t in self._tools.values()
        ]
