"""Constants for the metacog MCP server.

This module defines the server identity, error codes, and error messages used
throughout the server to avoid magic strings.
"""

from enum import Enum

SERVER_NAME = "metacog"
SERVER_VERSION = "0.6.0"
SERVER_DESCRIPTION = "Metacognitive tools for LLMs"

DEFAULT_TRANSPORT = "stdio"
SUPPORTED_TRANSPORTS = ("stdio",)
DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_LOG_FORMAT = "json"


class ErrorCode(str, Enum):
    """Error code identifiers for error categorization."""

    TOOL_NOT_FOUND = "TOOL_NOT_FOUND"
    INVALID_ARGUMENTS = "INVALID_ARGUMENTS"
    TRANSPORT_FAILURE = "TRANSPORT_FAILURE"


class ErrorMessage:
    """Error message templates."""

    TOOL_NOT_FOUND = "Unknown tool: '{tool_name}'"
    INVALID_ARGUMENTS = "Invalid arguments for tool '{tool_name}': field '{field}' {reason}"
    TRANSPORT_FAILURE = "Transport failure: {detail}"

    # Validation reasons
    FIELD_REQUIRED = "is required"
    FIELD_UNKNOWN = "is not a declared field"
    EXPECTED_STRING = "must be a string"
    EXPECTED_STRING_ARRAY = "must be an array of strings"
    EXPECTED_OBJECT = "must be an object mapping field names to values"
