"""
Pricing API for RuneScape Wiki Prices API.

This module handles all interactions with the RuneScape Wiki's real-time
Grand Exchange pricing API. The item mapping is fetched fresh on every call.
"""

from typing import Optional, Dict, Any, List

from .errors import UpstreamError


class PricingAPI:
    """
    API client for RuneScape Wiki pricing data.
    """

    PRICES_API_BASE = "https://prices.runescape.wiki/api/v1/osrs"

    def __init__(self, client):
        """Initialize with reference to main client."""
        self.client = client

    async def get_mapping(self) -> List[Dict[str, Any]]:
        """
        Fetch the item mapping data which contains names, IDs, and other metadata.

        Returns:
            List of item mapping entries

        Raises:
            UpstreamError: if the prices API answers with a non-200 status
        """
        endpoint = f"{self.PRICES_API_BASE}/mapping"
        session = await self.client.get_prices_session()

        async with session.get(endpoint) as resp:
            if resp.status != 200:
                raise UpstreamError(f"Item mapping request failed with status {resp.status}", resp.status)
            return await resp.json()

    @staticmethod
    def match_item(mapping: List[Dict[str, Any]], query: str) -> Optional[Dict[str, Any]]:
        """
        Pick the mapping entry for a query: exact name first, then name prefix.

        Both comparisons ignore case. The first entry in mapping order wins.
        """
        query_lower = query.lower()
        for item in mapping:
            if item.get('name', '').lower() == query_lower:
                return item
        for item in mapping:
            if item.get('name', '').lower().startswith(query_lower):
                return item
        return None

    @staticmethod
    def filter_items(mapping: List[Dict[str, Any]], query: str, limit: int) -> List[Dict[str, Any]]:
        """
        Substring filter, shortest names first, truncated to ``limit``.
        """
        query_lower = query.lower()
        matches = [item for item in mapping if query_lower in item.get('name', '').lower()]
        # sorted() is stable, so equal lengths keep mapping order
        matches = sorted(matches, key=lambda item: len(item.get('name', '')))
        return matches[:limit]

    async def find_item(self, query: str) -> Optional[Dict[str, Any]]:
        """
        Find an item mapping entry by name.

        Args:
            query: Item name (or the start of one)

        Returns:
            The matching mapping entry, or None if nothing matches
        """
        mapping = await self.get_mapping()
        return self.match_item(mapping, query)

    async def search_items(self, query: str, limit: int = 10) -> List[Dict[str, Any]]:
        """
        Search the item mapping for names containing a query.

        Args:
            query: Substring to search for
            limit: Maximum number of results

        Returns:
            Matching mapping entries ordered by name length
        """
        mapping = await self.get_mapping()
        return self.filter_items(mapping, query, limit)

    async def get_latest_price_data(self, item_id: int) -> Optional[Dict[str, Any]]:
        """
        Fetch the latest price data from the real-time prices API.

        Args:
            item_id: The item ID to get price data for

        Returns:
            Dictionary with high/low prices and timestamps, or None if upstream has no entry
        """
        endpoint = f"{self.PRICES_API_BASE}/latest"
        params = {'id': item_id}
        session = await self.client.get_prices_session()

        async with session.get(endpoint, params=params) as resp:
            if resp.status != 200:
                raise UpstreamError(f"Latest price request failed with status {resp.status}", resp.status)
            data = await resp.json()

        return (data.get('data') or {}).get(str(item_id))

    async def get_item_quote(self, query: str) -> Optional[Dict[str, Any]]:
        """
        Resolve an item by name and attach its latest prices.

        Args:
            query: Item name to look up

        Returns:
            ``{"id", "name", "prices"}``, or None if no item matches
        """
        item = await self.find_item(query)
        if not item:
            return None

        prices = await self.get_latest_price_data(item['id'])
        return {
            "id": item['id'],
            "name": item['name'],
            "prices": prices,
        }
