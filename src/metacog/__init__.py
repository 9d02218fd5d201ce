"""metacog: metacognitive tools for LLMs, served over MCP."""

from .server import MetacogServer, create_server, load_config
from .decorators import log_tool_errors
from .constants import ErrorCode, ErrorMessage, SERVER_NAME, SERVER_VERSION
from .errors import (
    MetacogError,
    ToolNotFoundError,
    InvalidArgumentsError,
    TransportFailureError,
)

__version__ = SERVER_VERSION

__all__ = [
    "MetacogServer",
    "create_server",
    "load_config",
    "log_tool_errors",
    "ErrorCode",
    "ErrorMessage",
    "SERVER_NAME",
    "SERVER_VERSION",
    "MetacogError",
    "ToolNotFoundError",
    "InvalidArgumentsError",
    "TransportFailureError",
]
