"""Exception types raised by the metacog server."""

from .constants import ErrorCode, ErrorMessage


class MetacogError(Exception):
    """Base class for all metacog errors."""

    code: ErrorCode

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ToolNotFoundError(MetacogError):
    """Raised when an invocation names a tool that is not registered."""

    code = ErrorCode.TOOL_NOT_FOUND

    def __init__(self, tool_name: str):
        super().__init__(ErrorMessage.TOOL_NOT_FOUND.format(tool_name=tool_name))
        self.tool_name = tool_name


class InvalidArgumentsError(MetacogError):
    """Raised when invocation arguments do not match the tool's input schema.

    Attributes:
        tool_name: Name of the invoked tool
        field: The offending field (``"arguments"`` when the whole argument
            object is malformed)
        reason: Short human-readable reason
    """

    code = ErrorCode.INVALID_ARGUMENTS

    def __init__(self, tool_name: str, field: str, reason: str):
        super().__init__(
            ErrorMessage.INVALID_ARGUMENTS.format(
                tool_name=tool_name, field=field, reason=reason
            )
        )
        self.tool_name = tool_name
        self.field = field
        self.reason = reason


class TransportFailureError(MetacogError):
    """Raised when the protocol transport fails. Fatal to the process."""

    code = ErrorCode.TRANSPORT_FAILURE

    def __init__(self, detail: str):
        super().__init__(ErrorMessage.TRANSPORT_FAILURE.format(detail=detail))
        self.detail = detail
