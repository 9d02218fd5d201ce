"""Decorators for MCP protocol handlers.

This module provides decorators for common handler patterns like error logging.
"""

import logging
from functools import wraps
from typing import Awaitable, Callable, TypeVar, ParamSpec

from .errors import MetacogError

logger = logging.getLogger(__name__)

P = ParamSpec("P")
T = TypeVar("T")


def log_tool_errors(func: Callable[P, Awaitable[T]]) -> Callable[P, Awaitable[T]]:
    """Decorator to log errors raised by an async tool-call handler.

    Errors are re-raised unchanged: the MCP SDK turns any exception raised
    from a ``call_tool`` handler into an error result for that call only.
    Caller mistakes (unknown tool, bad arguments) are logged as warnings,
    anything else with a traceback.

    Args:
        func: Async handler function to wrap

    Returns:
        Wrapped function
    """
    @wraps(func)
    async def wrapper(*args: P.args, **kwargs: P.kwargs) -> T:
        try:
            return await func(*args, **kwargs)
        except MetacogError as e:
            logger.warning(
                f"Rejected call in {func.__name__} [{e.code.value}]: {e.message}"
            )
            raise
        except Exception as e:
            logger.error(f"Unexpected error in {func.__name__}: {e}", exc_info=True)
            raise

    return wrapper
