"""MCP Server implementation for metacog.

This module implements the MCP server with stdio transport, lifecycle management,
and capabilities declaration.
"""

import asyncio
import json
import logging
import sys
import threading
import time
from pathlib import Path
from typing import Any, AsyncIterator, BinaryIO, Optional

import mcp.types as types
import yaml
from mcp.server.lowlevel import Server
from mcp.server.stdio import stdio_server

from .constants import (
    DEFAULT_LOG_FORMAT,
    DEFAULT_LOG_LEVEL,
    DEFAULT_TRANSPORT,
    SERVER_DESCRIPTION,
    SERVER_NAME,
    SERVER_VERSION,
    SUPPORTED_TRANSPORTS,
)
from .decorators import log_tool_errors
from .errors import TransportFailureError
from .instructions import INSTRUCTIONS
from .tools.registry import get_registry

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path(__file__).parent.parent.parent / "config" / "server.yaml"


class JSONFormatter(logging.Formatter):
    """Format log records as single-line JSON objects."""

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            "timestamp": time.time(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)
        return json.dumps(log_data)


def unwrap_exception_group(exc: BaseException) -> BaseException:
    """Return the single underlying error of nested task-group exceptions.

    The SDK's transport and session run inside anyio task groups, so a
    failure arrives wrapped in one exception group per group.
    """
    while len(getattr(exc, "exceptions", ())) == 1:
        exc = exc.exceptions[0]
    return exc


def _read_line(
    stream: BinaryIO,
    loop: asyncio.AbstractEventLoop,
    future: "asyncio.Future[bytes]",
) -> None:
    try:
        line = stream.readline()
    except Exception as e:
        outcome = (future.set_exception, e)
    else:
        outcome = (future.set_result, line)

    def settle() -> None:
        if not future.done():
            setter, value = outcome
            setter(value)

    try:
        loop.call_soon_threadsafe(settle)
    except RuntimeError:
        # Loop closed while the read was pending; nobody is waiting.
        pass


async def read_stdin_lines(stream: Optional[BinaryIO] = None) -> AsyncIterator[str]:
    """Yield UTF-8 lines from stdin until end of stream.

    Each read blocks in a daemon thread and is awaited through a future. A
    cancelled read is abandoned and never holds up interpreter exit, even
    while the client keeps its end of the pipe open.

    Args:
        stream: Binary stream to read (default: ``sys.stdin.buffer``)
    """
    loop = asyncio.get_running_loop()
    if stream is None:
        stream = sys.stdin.buffer
    while True:
        future: asyncio.Future[bytes] = loop.create_future()
        threading.Thread(
            target=_read_line,
            args=(stream, loop, future),
            name="metacog-stdin",
            daemon=True,
        ).start()
        line = await future
        if not line:
            return
        yield line.decode("utf-8", errors="replace")


class MetacogServer:
    """MCP Server for metacog.

    This server advertises the metacognitive tools (feel, drugs, become,
    name, ritual, pray) and answers their invocations with formatted text.
    """

    def __init__(self, config: Optional[dict[str, Any]] = None):
        """Initialize MCP Server.

        Args:
            config: Server configuration dictionary. Should contain:
                - name: Server name (default: "metacog")
                - version: Server version (default: "0.6.0")
                - description: Server description
                - instructions: Instructions text advertised to clients
                - transport: Transport configuration
                - logging: Logging configuration
        """
        self.config = config or {}
        self.name = self.config.get("name", SERVER_NAME)
        self.version = self.config.get("version", SERVER_VERSION)
        self.description = self.config.get("description", SERVER_DESCRIPTION)
        self.instructions = self.config.get("instructions", INSTRUCTIONS)

        # Transport configuration
        transport_config = self.config.get("transport") or {}
        self.transport_type = transport_config.get("type", DEFAULT_TRANSPORT)

        # Logging configuration
        logging_config = self.config.get("logging") or {}
        self.log_level = logging_config.get("level", DEFAULT_LOG_LEVEL)
        self.log_format = logging_config.get("format", DEFAULT_LOG_FORMAT)
        self.log_file = logging_config.get("file")

        self._setup_logging()

        self.tool_registry = get_registry()

        self.mcp = Server(
            name=self.name,
            version=self.version,
            instructions=self.instructions,
        )
        self._register_capabilities()

        logger.info(f"Initialized {self.name} MCP Server v{self.version}")
        logger.info(f"Transport: {self.transport_type}")

    def _setup_logging(self) -> None:
        """Setup structured logging for the server."""
        root_logger = logging.getLogger()
        root_logger.setLevel(getattr(logging, str(self.log_level).upper(), logging.INFO))

        # Remove existing handlers
        root_logger.handlers.clear()

        if self.log_format == "json":
            formatter = JSONFormatter()
        else:
            formatter = logging.Formatter(
                "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
            )

        # stdout carries the protocol, so logs always go to stderr
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setFormatter(formatter)
        root_logger.addHandler(console_handler)

        if self.log_file:
            file_handler = logging.FileHandler(self.log_file)
            file_handler.setFormatter(formatter)
            root_logger.addHandler(file_handler)
            logger.info(f"Logging to file: {self.log_file}")

    def _register_capabilities(self) -> None:
        """Register the protocol handlers for tool listing and invocation."""
        logger.info("Registering server capabilities...")
        registry = self.tool_registry

        @self.mcp.list_tools()
        async def list_tools() -> list[types.Tool]:
            return [tool.to_mcp_tool() for tool in registry.list_tools()]

        @self.mcp.call_tool()
        @log_tool_errors
        async def call_tool(
            name: str, arguments: dict[str, Any] | None
        ) -> list[types.TextContent]:
            text = registry.call_tool(name, arguments)
            return [types.TextContent(type="text", text=text)]

        logger.info(f"✓ Registered {registry.count()} tools")

    async def start(self) -> None:
        """Start the MCP server.

        Runs until the client closes the transport. A failing stream or a
        malformed protocol frame ends the session.

        Raises:
            ValueError: If the configured transport type is not supported
            TransportFailureError: If the transport fails while running
        """
        logger.info("Starting MCP server...")
        if self.transport_type not in SUPPORTED_TRANSPORTS:
            raise ValueError(
                f"Unsupported transport type: {self.transport_type}. "
                f"Supported types: {', '.join(SUPPORTED_TRANSPORTS)}"
            )

        try:
            async with stdio_server(stdin=read_stdin_lines()) as (
                read_stream,
                write_stream,
            ):
                logger.info("✓ stdio transport initialized")
                logger.info("Server ready. Waiting for requests...")

                # Tool errors are already error results; anything else
                # reaching the run loop is a transport or framing failure.
                await self.mcp.run(
                    read_stream,
                    write_stream,
                    self.mcp.create_initialization_options(),
                    raise_exceptions=True,
                )
        except Exception as e:
            cause = unwrap_exception_group(e)
            logger.error(f"Server error: {cause}", exc_info=True)
            raise TransportFailureError(str(cause)) from e
        finally:
            await self.stop()

    async def stop(self) -> None:
        """Stop the MCP server gracefully."""
        logger.info("MCP server stopped")

    def get_capabilities(self) -> dict[str, Any]:
        """Get server capabilities declaration.

        Returns:
            Dictionary containing server capabilities information
        """
        return {
            "server": {
                "name": self.name,
                "version": self.version,
                "description": self.description,
            },
            "capabilities": {
                "tools": {
                    "listChanged": False,  # Tools never change at runtime
                },
            },
            "tools": self.tool_registry.names(),
        }


def load_config(config_path: Path = DEFAULT_CONFIG_PATH) -> dict[str, Any]:
    """Load server configuration from a YAML file.

    The ``server`` section is flattened into the top level; ``transport`` and
    ``logging`` sections are kept as-is.

    Args:
        config_path: Path to the YAML config file

    Returns:
        Configuration dictionary, empty if the file is missing or unreadable
    """
    if not config_path.exists():
        return {}
    try:
        with open(config_path, "r") as f:
            config_data = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        logger.warning(f"Failed to load config from {config_path}: {e}")
        logger.info("Using default configuration")
        return {}
    if not isinstance(config_data, dict):
        logger.warning(f"Ignoring config at {config_path}: expected a mapping")
        return {}

    config = dict(config_data.get("server") or {})
    config.update({k: v for k, v in config_data.items() if k != "server"})
    return config


def create_server(config: Optional[dict[str, Any]] = None) -> MetacogServer:
    """Factory function to create an MCP server instance.

    Args:
        config: Server configuration dictionary. If None, will try to load
                from config/server.yaml

    Returns:
        MetacogServer instance
    """
    if config is None:
        config = load_config()
    return MetacogServer(config)
