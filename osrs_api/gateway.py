"""
Client for the gateway's own REST API.

This is what chat front ends (the Discord bot) use to talk to the gateway,
rather than hitting the wiki, prices and hiscores APIs themselves.
"""

import logging
import os
from typing import Any, Dict, List, Optional
from urllib.parse import quote

import aiohttp

from utils.format import is_valid_osrs_username
from .errors import PlayerNotFoundError, UpstreamError
from .skills import Skill, SkillStat
from .wiki import WikiAPI

logger = logging.getLogger(__name__)


ITEM_ALIASES = {
    "tbow": "twisted bow",
    "shadow": "tumeken's shadow (uncharged)",
    "scythe": "scythe of vitur (uncharged)",
    "fang": "osmumten's fang",
    "bcp": "bandos chestplate",
    "tassets": "bandos tassets",
    "dfs": "dragonfire shield",
    "zcb": "zaryte crossbow",
    "bp": "toxic blowpipe (empty)",
    "blowpipe": "toxic blowpipe (empty)",
    "ags": "armadyl godsword",
    "sgs": "saradomin godsword",
    "bgs": "bandos godsword",
    "zgs": "zamorak godsword",
    "dwh": "dragon warhammer",
    "claws": "dragon claws",
    "bond": "old school bond",
}


class GatewayClient:
    """
    Async client for the OSRS gateway REST API.
    """

    DEFAULT_GATEWAY_URL = "http://127.0.0.1:3000"

    def __init__(self, base_url: Optional[str] = None):
        """
        Args:
            base_url: Root URL of a running gateway, trailing slash optional.
                      Defaults to OSRS_GATEWAY_URL, then a local gateway.
        """
        base_url = base_url or os.getenv("OSRS_GATEWAY_URL", self.DEFAULT_GATEWAY_URL)
        self.base_url = base_url.rstrip("/")
        self._session: Optional[aiohttp.ClientSession] = None

    async def get_session(self) -> aiohttp.ClientSession:
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession()
        return self._session

    def _url(self, route: str, value: str) -> str:
        return f"{self.base_url}{route}{quote(value, safe='')}"

    async def _get_json(self, route: str, value: str, params: Optional[Dict[str, Any]] = None):
        """GET a route; returns ``(status, body)`` where body is None unless the status is 200."""
        session = await self.get_session()
        async with session.get(self._url(route, value), params=params) as resp:
            if resp.status != 200:
                return resp.status, None
            return resp.status, await resp.json()

    async def fetch_player_stats(self, username: str) -> List[SkillStat]:
        """
        Fetch a player's skill levels through the gateway.

        Args:
            username: OSRS display name

        Returns:
            One SkillStat per known skill, in the order the gateway returned them

        Raises:
            ValueError: if the name cannot be an OSRS display name
            PlayerNotFoundError: if the gateway answers 404
            UpstreamError: for any other non-200 status
        """
        if not is_valid_osrs_username(username):
            raise ValueError(f"'{username}' is not a valid OSRS username")

        status, body = await self._get_json("/api/player/", username.strip())
        if status == 404:
            raise PlayerNotFoundError(f"Player '{username}' not found on OSRS hiscores.")
        if status != 200:
            raise UpstreamError(f"OSRS API lookup failed with status {status}", status)

        stats = []
        skills = ((body or {}).get('main') or {}).get('skills') or {}
        for skill_name, skill_data in skills.items():
            skill = Skill.find_by_name(skill_name)
            if skill:
                stats.append(SkillStat(skill, int(skill_data.get('level', 1)), int(skill_data.get('xp', 0))))
        return stats

    async def fetch_item_price(self, item_name: str) -> Optional[Dict[str, Any]]:
        try:
            _, body = await self._get_json("/api/item/", item_name)
            return body
        except aiohttp.ClientError as e:
            logger.error(f"Failed to fetch item price for {item_name}: {e}")
            return None

    async def search_items(self, query: str, limit: int = 10) -> List[Dict[str, Any]]:
        try:
            _, body = await self._get_json("/api/items/search/", query, params={'limit': limit})
            return body if isinstance(body, list) else []
        except aiohttp.ClientError as e:
            logger.error(f"Failed to search items for {query}: {e}")
            return []

    async def lookup_price(self, item_name: str) -> Optional[Dict[str, Any]]:
        """
        Look up an item's price, resolving common aliases ("tbow", "dfs", ...).

        When the direct lookup finds nothing, the top item search hit is used instead.

        Returns:
            ``{"id", "name", "prices"}`` or None
        """
        query = ITEM_ALIASES.get(item_name.lower(), item_name)
        quote_data = await self.fetch_item_price(query)
        if quote_data:
            return quote_data

        results = await self.search_items(query, limit=1)
        if not results:
            return None
        return await self.fetch_item_price(results[0]['name'])

    async def fetch_wiki_summary(self, title: str) -> Optional[Dict[str, Any]]:
        try:
            _, body = await self._get_json("/api/wiki/", title)
            return body
        except aiohttp.ClientError as e:
            logger.error(f"Failed to fetch wiki summary for {title}: {e}")
            return None

    async def get_wiki_url(self, skill: Skill) -> str:
        """Wiki URL for a skill, built locally when the gateway is unavailable."""
        summary = await self.fetch_wiki_summary(skill.display_name)
        if summary and summary.get('url'):
            return summary['url']
        return WikiAPI.page_url(skill.display_name)

    async def get_skill_summary(self, skill: Skill) -> Optional[str]:
        summary = await self.fetch_wiki_summary(skill.display_name)
        text = (summary or {}).get('summary')
        if not text or not text.strip():
            return None
        return text

    async def fetch_quest_info(self, quest_name: str) -> Optional[Dict[str, Any]]:
        try:
            _, body = await self._get_json("/api/quests/", quest_name)
            return body
        except aiohttp.ClientError as e:
            logger.error(f"Failed to fetch quest info for {quest_name}: {e}")
            return None

    async def fetch_slayer_tasks(self, master: str) -> List[Dict[str, Any]]:
        try:
            _, body = await self._get_json("/api/slayer/", master)
            return body if isinstance(body, list) else []
        except aiohttp.ClientError as e:
            logger.error(f"Failed to fetch slayer tasks for {master}: {e}")
            return []

    async def close(self):
        if self._session and not self._session.closed:
            await self._session.close()

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()
