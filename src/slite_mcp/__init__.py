"""MCP server exposing Slite notes over stdio."""

__version__ = "0.1.0"
