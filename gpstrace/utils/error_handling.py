"""
Error Handling Utilities

This module defines the trace loading error taxonomy and standardized
error handling patterns to prevent silent failures and improve error
diagnosis.

Error kinds raised while loading a GPX trace:
- GPXIOError: file cannot be opened or read
- GPXSyntaxError: document is not well-formed XML
- GPXSchemaError: well-formed document without the expected gpx/trk containers
- EmptyTraceError: no usable track points were found
"""

import logging
from typing import Callable, Optional, Tuple, Type
from functools import wraps
import traceback

logger = logging.getLogger(__name__)


class TraceLoadError(Exception):
    """
    Base class for errors raised while loading a trace.

    Attributes:
        message: Human readable description
        path: Path of the file being loaded, if known
    """
    def __init__(self, message: str, path: Optional[str] = None):
        self.message = message
        self.path = path
        super().__init__(self.message)


class GPXIOError(TraceLoadError):
    """Raised when the GPX file cannot be opened or read."""
    pass


class GPXSyntaxError(TraceLoadError):
    """
    Raised when the GPX document is not well-formed XML.

    Attributes:
        position: (line, column) of the parse failure when the parser reports it
    """
    def __init__(
        self,
        message: str,
        path: Optional[str] = None,
        position: Optional[Tuple[int, int]] = None
    ):
        self.position = position
        super().__init__(message, path)


class GPXSchemaError(TraceLoadError):
    """Raised when a well-formed document lacks the gpx root or trk container."""
    pass


class EmptyTraceError(TraceLoadError):
    """Raised when a load produced no usable track points."""
    pass


def handle_specific_exceptions(
    exceptions: Tuple[Type[Exception], ...],
    error_context: str = "",
    log_level: int = logging.ERROR,
    reraise: bool = True
) -> Callable:
    """
    Decorator for handling specific exceptions with context.

    Args:
        exceptions: Tuple of exception types to catch
        error_context: Context string for error messages
        log_level: Logging level for errors
        reraise: Whether to reraise the exception

    Returns:
        Decorator function
    """
    def decorator(func: Callable) -> Callable:
        @wraps(func)
        def wrapper(*args, **kwargs):
            try:
                return func(*args, **kwargs)
            except exceptions as e:
                context = f"{error_context}: " if error_context else ""
                logger.log(log_level, f"{context}{type(e).__name__}: {e}")
                logger.debug(f"Error details for {func.__name__}: {traceback.format_exc()}")
                if reraise:
                    raise
                return None
        return wrapper
    return decorator
