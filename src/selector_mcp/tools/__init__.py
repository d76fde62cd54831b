"""MCP tool implementations for SelectorMCP."""

from .builder_tools import register_builder_tools

__all__ = ["register_builder_tools"]
