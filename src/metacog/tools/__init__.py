"""Tool registration system for the metacog MCP server.

This module provides the tool registry, schemas and handlers for MCP tools.
"""

from .registry import ToolDefinition, ToolRegistry, build_registry, get_registry
from .schemas import (
    ToolSchema,
    get_tool_schema,
    get_tool_schemas,
    TOOL_SCHEMAS,
)

__all__ = [
    "ToolDefinition",
    "ToolRegistry",
    "build_registry",
    "get_registry",
    "ToolSchema",
    "get_tool_schema",
    "get_tool_schemas",
    "TOOL_SCHEMAS",
]
