"""bareos-mcp: Bareos console queries over line-delimited JSON-RPC."""

__version__ = "0.1.0"
