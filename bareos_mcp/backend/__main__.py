"""Entry point: python3 -m bareos_mcp.backend

Starts the JSON-RPC stdio server.
"""
from bareos_mcp.backend.server import StdioServer
from bareos_mcp.config.settings import get_settings

if __name__ == "__main__":
    get_settings().setup_logging()
    server = StdioServer()
    server.run()
