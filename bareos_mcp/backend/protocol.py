"""JSON-RPC 2.0 envelopes and request parsing for the stdio server."""
import json
from typing import Any

from bareos_mcp import __version__

PROTOCOL_VERSION = "2024-11-05"
SERVER_NAME = "bareos-mcp-server"

# Error codes
METHOD_NOT_FOUND = -32601
TOOL_EXECUTION_FAILED = -32000


def server_info() -> dict:
    """Result payload for ``initialize`` and the startup announcement."""
    return {
        "protocolVersion": PROTOCOL_VERSION,
        "capabilities": {"tools": {}},
        "serverInfo": {"name": SERVER_NAME, "version": __version__},
    }


def make_result(msg_id: Any, result: Any) -> dict:
    return {"jsonrpc": "2.0", "id": msg_id, "result": result}


def make_error(msg_id: Any, code: int, message: str) -> dict:
    return {
        "jsonrpc": "2.0",
        "id": msg_id,
        "error": {"code": code, "message": message},
    }


def text_content(text: str) -> dict:
    """Wrap tool output as a ``tools/call`` result."""
    return {"content": [{"type": "text", "text": text}]}


def _reject_constant(name: str):
    raise ValueError(f"non-standard JSON constant {name}")


def parse_request(raw: str) -> dict:
    """Parse one request line.

    Raises ValueError on malformed JSON, including ``NaN``/``Infinity``
    literals and nesting too deep to decode. Valid JSON that is not an
    object yields an empty request, which routes as an unknown method with
    a null id.
    """
    try:
        msg = json.loads(raw, parse_constant=_reject_constant)
    except (ValueError, RecursionError) as e:
        raise ValueError(f"Invalid JSON: {e}") from e
    if not isinstance(msg, dict):
        return {}
    return msg
