"""
File helpers for wenvgui.
"""

import logging

logger = logging.getLogger(__name__)


def close_quietly(resource):
    """
    Close a resource, ignoring any error.

    Args:
        resource: Object with a close() method, or None
    """
    if resource is None:
        return

    try:
        resource.close()
    except Exception as e:
        logger.debug(f"Ignoring error while closing {resource!r}: {e}")
