"""Manifold Markets MCP server - prediction market tools over stdio."""

__version__ = "0.2.0"
