"""
Exceptions raised by the OSRS API clients.
"""

from typing import Optional


class OSRSAPIError(Exception):
    """Base class for every error raised by this package."""


class UpstreamError(OSRSAPIError):
    """An upstream API answered with a non-200 status."""

    def __init__(self, message: str, status: Optional[int] = None):
        super().__init__(message)
        self.status = status


class NotFoundError(OSRSAPIError):
    """The requested resource does not exist upstream."""


class PlayerNotFoundError(NotFoundError):
    """The hiscores have no entry for the requested player."""
