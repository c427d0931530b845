"""
OSRS API Package

A unified package for the gateway's interactions with Old School RuneScape data sources:
- Official OSRS hiscores (player stats)
- RuneScape Wiki Prices API (item mapping + latest Grand Exchange prices)
- OSRS Wiki MediaWiki API (page extracts + search)

It also ships the companion client that front ends use to call the gateway itself.
"""

from .client import OSRSAPIClient, DEFAULT_USER_AGENT
from .errors import OSRSAPIError, UpstreamError, NotFoundError, PlayerNotFoundError
from .hiscores import HiscoresAPI
from .pricing import PricingAPI
from .wiki import WikiAPI
from .gateway import GatewayClient

__version__ = "1.0.0"
__all__ = [
    "OSRSAPIClient",
    "HiscoresAPI",
    "PricingAPI",
    "WikiAPI",
    "GatewayClient",
    "OSRSAPIError",
    "UpstreamError",
    "NotFoundError",
    "PlayerNotFoundError",
    "create_client",
]


# Convenience function to create a fully configured client
def create_client(user_agent: str = DEFAULT_USER_AGENT) -> OSRSAPIClient:
    """
    Create a fully configured OSRS API client with all sub-APIs initialized.

    Args:
        user_agent: User agent string for API requests

    Returns:
        Configured OSRSAPIClient instance
    """
    return OSRSAPIClient(user_agent)
