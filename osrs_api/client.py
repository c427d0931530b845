"""
Main API client that coordinates all OSRS API interactions.
"""

import aiohttp
from typing import Optional
from .hiscores import HiscoresAPI
from .pricing import PricingAPI
from .wiki import WikiAPI


DEFAULT_USER_AGENT = "BobBot OSRS API - @yourdiscord"


class OSRSAPIClient:
    """
    Main client for managing HTTP sessions and providing access to the OSRS wiki, GE prices and hiscores
    """

    def __init__(self, user_agent: str = DEFAULT_USER_AGENT):
        """
        Initialize the OSRS API client.

        Args:
            user_agent: User agent string for API requests
        """
        self.user_agent = user_agent
        self._wiki_session: Optional[aiohttp.ClientSession] = None
        self._prices_session: Optional[aiohttp.ClientSession] = None
        self._hiscores_session: Optional[aiohttp.ClientSession] = None

        # Initialize sub-APIs
        self.wiki = WikiAPI(self)
        self.pricing = PricingAPI(self)
        self.hiscores = HiscoresAPI(self)

    async def get_wiki_session(self) -> aiohttp.ClientSession:
        """Get or create the wiki API session."""
        if self._wiki_session is None or self._wiki_session.closed:
            self._wiki_session = aiohttp.ClientSession(
                headers={'User-Agent': self.user_agent}
            )
        return self._wiki_session

    async def get_prices_session(self) -> aiohttp.ClientSession:
        """Get or create the prices API session."""
        if self._prices_session is None or self._prices_session.closed:
            self._prices_session = aiohttp.ClientSession(
                headers={'User-Agent': self.user_agent}
            )
        return self._prices_session

    async def get_hiscores_session(self) -> aiohttp.ClientSession:
        """Get or create the hiscores session."""
        if self._hiscores_session is None or self._hiscores_session.closed:
            self._hiscores_session = aiohttp.ClientSession(
                headers={'User-Agent': self.user_agent}
            )
        return self._hiscores_session

    async def close(self):
        """Close all HTTP sessions."""
        for sess in (self._wiki_session, self._prices_session, self._hiscores_session):
            if sess and not sess.closed:
                await sess.close()

    async def __aenter__(self):
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit."""
        await self.close()
