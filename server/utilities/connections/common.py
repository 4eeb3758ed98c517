"""
Common utilities for database connection management.

This module provides functions for managing database connections
such as closing connections safely.
"""

import logging

from utilities.constants.response_messages import ERROR_DATABASE_CLOSE_FAILURE

logger = logging.getLogger(__name__)


def close_connection(connection) -> bool:
    """Close a database connection if it exists.

    Errors raised while closing are logged and not re-raised, since the
    connection is being discarded either way.

    Args:
        connection : object
            The database connection (or gateway) object to be closed.

    Returns:
        bool: True if a close was attempted and succeeded.
    """
    if not connection:
        return False
    try:
        connection.close()
    except Exception as e:
        logger.warning(ERROR_DATABASE_CLOSE_FAILURE.format(error=str(e)))
        return False
    return True
