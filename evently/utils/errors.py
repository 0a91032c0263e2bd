"""
Shared error handling for the data layer.

Every data-access operation logs a failure once and rethrows. Domain errors
keep their type so that callers can tell "not found" from "forbidden";
anything else is reported as a generic DataAccessError.
"""

import logging
from typing import NoReturn

from evently.exceptions import DataAccessError, EventlyError

logger = logging.getLogger(__name__)

def handle_error(error: BaseException, operation: str) -> NoReturn:
    """
    Log an error raised by a data-access operation and rethrow it.

    Args:
        error: The caught exception
        operation: Name of the failing operation, used in the log line

    Raises:
        EventlyError: The original error when it is already a domain error
        DataAccessError: For every other exception, chained to the original
    """
    if isinstance(error, EventlyError):
        logger.error(f"Error in {operation}: {error}")
        raise error

    logger.error(f"Unexpected error in {operation}: {error}", exc_info=error)
    raise DataAccessError(str(error) or type(error).__name__) from error
