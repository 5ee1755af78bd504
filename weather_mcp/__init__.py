"""MCP server exposing current weather, forecast and US alert lookups."""

__version__ = "1.0.0"
