"""JSON-RPC 2.0 server over stdio.

Usage: python3 -m bareos_mcp.backend
An MCP host spawns this as a child process and talks to it via stdin
(JSON lines) / stdout (JSON lines). Requests are handled strictly one at
a time; each response is flushed before the next line is read.
"""
import json
import logging
import sys
from typing import Optional, TextIO

from bareos_mcp.backend.protocol import (
    METHOD_NOT_FOUND,
    TOOL_EXECUTION_FAILED,
    make_error,
    make_result,
    parse_request,
    server_info,
    text_content,
)
from bareos_mcp.bconsole import BconsoleClient, BconsoleError
from bareos_mcp.tools.base import ToolRegistry

logger = logging.getLogger(__name__)


class StdioServer:
    """JSON-RPC server on stdin/stdout."""

    def __init__(self, registry: Optional[ToolRegistry] = None):
        if registry is None:
            from bareos_mcp.config.settings import get_settings
            from bareos_mcp.tools.bareos import build_registry
            registry = build_registry(BconsoleClient.from_settings(get_settings()))
        self.registry = registry

    def handle_message(self, raw: str, output: TextIO):
        """Process a single JSON-RPC line and write the response to output."""
        try:
            msg = parse_request(raw)
        except ValueError as e:
            logger.error("Failed to parse request: %s", e)
            return
        self._emit(output, self.handle_request(msg))

    def handle_request(self, msg: dict) -> dict:
        method = msg.get("method")
        msg_id = msg.get("id")

        if method == "initialize":
            return make_result(msg_id, server_info())
        if method == "tools/list":
            return make_result(msg_id, {"tools": self.registry.to_mcp_format()})
        if method == "tools/call":
            return self._handle_tool_call(msg.get("params"), msg_id)

        name = method if isinstance(method, str) else ""
        return make_error(msg_id, METHOD_NOT_FOUND, f"Method not found: {name}")

    def _handle_tool_call(self, params, msg_id) -> dict:
        if not isinstance(params, dict):
            params = {}
        tool_name = params.get("name")
        if not isinstance(tool_name, str):
            tool_name = ""
        arguments = params.get("arguments")
        if not isinstance(arguments, dict):
            arguments = {}

        logger.info("tools/call %s %s", tool_name, arguments)
        try:
            tool = self.registry.get(tool_name)
        except KeyError:
            return make_error(msg_id, TOOL_EXECUTION_FAILED,
                              f"Tool execution failed: Unknown tool: {tool_name}")
        try:
            text = tool.func(**arguments)
        except BconsoleError as e:
            return make_error(msg_id, TOOL_EXECUTION_FAILED, f"Tool execution failed: {e}")
        return make_result(msg_id, text_content(text))

    def _emit(self, output: TextIO, message: dict):
        output.write(json.dumps(message) + "\n")
        output.flush()

    def run(self, input: Optional[TextIO] = None, output: Optional[TextIO] = None):
        """Main loop: announce, then read line by line, dispatch, write."""
        input = input if input is not None else sys.stdin
        output = output if output is not None else sys.stdout

        logger.info("Bareos MCP server starting")
        self._emit(output, make_result(None, server_info()))
        for line in input:
            line = line.strip()
            if not line:
                continue
            self.handle_message(line, output)
        logger.info("stdin closed, shutting down")
