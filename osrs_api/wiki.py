"""
Wiki API for the OSRS Wiki's MediaWiki endpoint.

This module handles page extract queries (summaries and quick guides)
and full-text search against the OSRS Wiki.
"""

from typing import Dict, Optional, Any
from urllib.parse import quote

from .errors import UpstreamError


MISSING_PAGE_ID = "-1"


class WikiAPI:
    """
    API client for OSRS Wiki page extracts and search.
    """

    WIKI_API_URL = 'https://oldschool.runescape.wiki/api.php'
    WIKI_PAGE_BASE = 'https://oldschool.runescape.wiki/w/'

    def __init__(self, client):
        """Initialize with reference to main client."""
        self.client = client

    @classmethod
    def page_url(cls, title: str) -> str:
        """Build the public wiki URL for a page title (spaces become underscores)."""
        # Same escaping as JavaScript's encodeURIComponent
        encoded = quote(title, safe="!~*'()")
        return cls.WIKI_PAGE_BASE + encoded.replace('%20', '_')

    async def _api_query(self, params: Dict[str, Any]) -> Dict[str, Any]:
        """
        Execute a query against the OSRS Wiki API.

        Args:
            params: Query parameters, ``format=json`` is added

        Returns:
            Dictionary containing the API response
        """
        session = await self.client.get_wiki_session()

        params = dict(params, format='json')
        async with session.get(self.WIKI_API_URL, params=params) as resp:
            if resp.status != 200:
                raise UpstreamError(f"Wiki API request failed with status {resp.status}", resp.status)
            return await resp.json()

    async def get_page(self, title: str, intro: bool = True, redirects: bool = False) -> Optional[Dict[str, Any]]:
        """
        Fetch the plain-text extract of a single page.

        Args:
            title: Page title
            intro: Only return the lead section
            redirects: Resolve redirects to the canonical page

        Returns:
            The page object (``pageid``, ``title``, ``extract``), or None if the page does not exist
        """
        params = {
            'action': 'query',
            'prop': 'extracts',
            'explaintext': 1,
            'titles': title,
        }
        if intro:
            params['exintro'] = 1
        if redirects:
            params['redirects'] = 1

        body = await self._api_query(params)
        pages = (body.get('query') or {}).get('pages') or {}
        if not pages:
            return None

        page_id = next(iter(pages))
        page = pages[page_id]
        if page_id == MISSING_PAGE_ID or 'missing' in page:
            return None
        return page

    @staticmethod
    def first_line(extract: Optional[str]) -> Optional[str]:
        if not extract:
            return None
        return extract.split('\n')[0]

    async def get_summary(self, title: str) -> Dict[str, Any]:
        """
        Get the lead-section summary of a page.

        Args:
            title: Page title

        Returns:
            ``{"title", "url", "summary", "extract"}``; summary and extract are None for missing pages
        """
        page = await self.get_page(title)
        extract = page.get('extract') if page else None
        return {
            "title": title,
            "url": self.page_url(title),
            "summary": self.first_line(extract),
            "extract": extract,
        }

    async def get_guide(self, title: str) -> Dict[str, Any]:
        """
        Get a quest guide, preferring the ``<title>/Quick guide`` subpage.

        Falls back to the full text of the bare page when no quick guide exists.
        The returned URL points at whichever page was actually used.

        Args:
            title: Page title, e.g. "Dragon Slayer II"

        Returns:
            ``{"title", "url", "guide"}``
        """
        page = await self.get_page(f"{title}/Quick guide", intro=False)
        if page and page.get('extract'):
            return {
                "title": title,
                "url": self.page_url(title) + "/Quick_guide",
                "guide": page['extract'],
            }

        page = await self.get_page(title, intro=False)
        return {
            "title": title,
            "url": self.page_url(title),
            "guide": page.get('extract') if page else None,
        }

    async def search_title(self, query: str) -> Optional[str]:
        """
        Return the title of the best-ranked search hit, or None when nothing matches.
        """
        body = await self._api_query({
            'action': 'query',
            'list': 'search',
            'srsearch': query,
            'srlimit': 1,
        })
        results = (body.get('query') or {}).get('search') or []
        if not results:
            return None
        return results[0].get('title')

    async def search(self, query: str) -> Optional[Dict[str, Any]]:
        """
        Search the wiki and fetch the summary of the top result.

        Args:
            query: Free-text search query

        Returns:
            ``{"title", "url", "summary", "extract"}`` for the resolved page, or None if
            the search had no hits or the hit did not resolve to an existing page
        """
        title = await self.search_title(query)
        if not title:
            return None

        page = await self.get_page(title, redirects=True)
        if not page:
            return None

        resolved = page.get('title', title)
        extract = page.get('extract')
        return {
            "title": resolved,
            "url": self.page_url(resolved),
            "summary": self.first_line(extract),
            "extract": extract,
        }
