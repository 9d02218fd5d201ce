"""Tool registry for the metacog MCP server.

This module implements the registry that binds each tool name to its schema
and formatting handler, and routes invocations to the right handler. The
registry is built once at startup and never mutated afterwards.
"""

import logging
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Callable, Iterable, Mapping

import mcp.types as types

from ..errors import ToolNotFoundError
from . import handlers
from .schemas import TOOL_SCHEMAS, ToolSchema

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ToolDefinition:
    """A registered tool: its schema and the handler that formats its output."""

    name: str
    description: str
    schema: ToolSchema
    handler: Callable[..., str]

    def to_mcp_tool(self) -> types.Tool:
        """Convert to the MCP wire representation.

        Returns:
            ``mcp.types.Tool`` carrying name, description and input schema
        """
        return types.Tool(
            name=self.name,
            description=self.description,
            inputSchema=self.schema.input_schema,
        )


class ToolRegistry:
    """Immutable registry of MCP tools.

    This registry provides:
    - Tool discovery in registration order
    - Argument validation against each tool's schema
    - Routing of invocations to the bound handler
    """

    def __init__(self, definitions: Iterable[ToolDefinition]):
        """Build the registry.

        Args:
            definitions: Tool definitions, in the order they are advertised

        Raises:
            ValueError: If two definitions share a name
        """
        tools: dict[str, ToolDefinition] = {}
        for definition in definitions:
            if definition.name in tools:
                raise ValueError(f"Tool '{definition.name}' already registered")
            tools[definition.name] = definition
            logger.debug(f"Registered tool: {definition.name}")

        self._tools: Mapping[str, ToolDefinition] = MappingProxyType(tools)
        logger.info(f"Tool registry initialized with {len(tools)} tools")

    def get(self, name: str) -> ToolDefinition | None:
        """Get tool definition by name.

        Args:
            name: Tool name

        Returns:
            ToolDefinition if found, None otherwise
        """
        return self._tools.get(name)

    def list_tools(self) -> list[ToolDefinition]:
        """List all registered tool definitions in registration order."""
        return list(self._tools.values())

    def names(self) -> list[str]:
        """List all registered tool names in registration order."""
        return list(self._tools.keys())

    def count(self) -> int:
        """Get total number of registered tools."""
        return len(self._tools)

    def call_tool(self, name: str, arguments: Mapping[str, Any] | None) -> str:
        """Validate arguments and invoke the named tool.

        Args:
            name: Tool name
            arguments: Mapping of field name to value

        Returns:
            The formatted response text

        Raises:
            ToolNotFoundError: If no tool is registered under ``name``
            InvalidArgumentsError: If ``arguments`` violate the tool's schema
        """
        tool = self._tools.get(name)
        if tool is None:
            raise ToolNotFoundError(name)

        validated = tool.schema.validate_arguments(arguments)
        logger.info(f"Calling tool: {name}")
        return tool.handler(**validated)


# Handlers in advertised order; schemas are looked up by the same name.
TOOL_HANDLERS: dict[str, Callable[..., str]] = {
    "feel": handlers.feel,
    "drugs": handlers.drugs,
    "become": handlers.become,
    "name": handlers.name,
    "ritual": handlers.ritual,
    "pray": handlers.pray,
}


def build_registry(
    tool_handlers: Mapping[str, Callable[..., str]] | None = None,
) -> ToolRegistry:
    """Build a registry from handlers and their schemas in ``TOOL_SCHEMAS``.

    Args:
        tool_handlers: Mapping of tool name to handler (default: all tools)

    Returns:
        ToolRegistry instance

    Raises:
        KeyError: If a handler has no schema
    """
    if tool_handlers is None:
        tool_handlers = TOOL_HANDLERS

    definitions = []
    for tool_name, handler in tool_handlers.items():
        if tool_name not in TOOL_SCHEMAS:
            raise KeyError(f"Tool '{tool_name}' has no schema")
        schema = ToolSchema(tool_name, TOOL_SCHEMAS[tool_name])
        definitions.append(
            ToolDefinition(
                name=tool_name,
                description=schema.description,
                schema=schema,
                handler=handler,
            )
        )
    return ToolRegistry(definitions)


# Global registry instance, built on first use
_registry: ToolRegistry | None = None


def get_registry() -> ToolRegistry:
    """Get the global tool registry instance.

    Returns:
        Global ToolRegistry instance
    """
    global _registry
    if _registry is None:
        _registry = build_registry()
    return _registry
