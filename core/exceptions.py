"""
Custom exception utilities for the application.
"""

import logging
from typing import Any, NoReturn, Type

# Get a logger for this module, although typically the calling module's logger is used.
logger = logging.getLogger(__name__)

# Helper functions for logging and raising exceptions

def log_and_raise_new(
    exception_type: Type[Exception],
    exception_message: str,
    break_chain: bool = False,
    exc_info: bool = False,
    **log_extras: Any,
) -> NoReturn:
    """
    Logs a warning and then raises a specified exception, optionally
    breaking the exception chain (using 'from None' if break_chain is True).

    Used for business-rule refusals, which are expected and so are not logged
    at error level.

    Args:
        exception_type: The type of exception to raise.
        exception_message: The message for the new exception.
        break_chain: If True, raise the new exception using 'from None'.
        exc_info: Whether to include exception info (stack trace) in the log.
        **log_extras: Additional key-value pairs to include in the log record.

    Raises:
        exception_type: Always raises an exception of this type.
    """
    logger.warning(exception_message, exc_info=exc_info, extra=log_extras if log_extras else None)

    if break_chain:
        raise exception_type(exception_message) from None

    raise exception_type(exception_message)


# --- Custom Application Exceptions ---

class ApplicationError(Exception):
    """Base class for application-specific errors."""
    status_code = 400


class UnauthorizedError(ApplicationError):
    """Raised when an operation needs a signed-in user and there is none."""
    status_code = 401


class NotFoundError(ApplicationError):
    """Raised when a requested resource is not found."""
    status_code = 404


class CourseEmptyError(ApplicationError):
    """Raised when a course without units or lessons is selected."""


class HeartsFullError(ApplicationError):
    """Raised when refilling hearts that are already full."""


class InsufficientPointsError(ApplicationError):
    """Raised when a user cannot afford a shop item."""
