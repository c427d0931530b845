"""
Hiscores API for the official Old School RuneScape hiscores.

Reads the ``index_lite.json`` endpoint and reshapes it into a
``{name, mode, main: {skills, activities}}`` stats object.
"""

import re
from typing import Dict, Any, List

from .errors import PlayerNotFoundError, UpstreamError


def camel_key(name: str) -> str:
    """Turn a hiscores display name into a camelCase key ("Clue Scrolls (all)" -> "clueScrollsAll")."""
    words = re.findall(r"[A-Za-z0-9]+", name.replace("'", ""))
    if not words:
        return ""
    return words[0].lower() + "".join(w[:1].upper() + w[1:].lower() for w in words[1:])


class HiscoresAPI:
    """
    API client for OSRS hiscores player lookups.
    """

    HISCORES_URL = "https://secure.runescape.com/m=hiscore_oldschool/index_lite.json"

    def __init__(self, client):
        """Initialize with reference to main client."""
        self.client = client

    @staticmethod
    def _skills(entries: List[Dict[str, Any]]) -> Dict[str, Dict[str, int]]:
        return {
            camel_key(entry['name']): {
                "rank": entry.get('rank', -1),
                "level": entry.get('level', 1),
                "xp": entry.get('xp', -1),
            }
            for entry in entries
        }

    @staticmethod
    def _activities(entries: List[Dict[str, Any]]) -> Dict[str, Dict[str, int]]:
        return {
            camel_key(entry['name']): {
                "rank": entry.get('rank', -1),
                "score": entry.get('score', -1),
            }
            for entry in entries
        }

    async def get_stats(self, username: str) -> Dict[str, Any]:
        """
        Fetch a player's skills and activity scores from the main hiscores.

        Only the regular (main) table is read, so ``mode`` is always ``"main"``.
        Ironman, hardcore and ultimate ironman hiscores are not included.

        Args:
            username: OSRS display name

        Returns:
            Stats object keyed by camelCase skill and activity names

        Raises:
            PlayerNotFoundError: if the hiscores answer 404
            UpstreamError: for any other non-200 status
        """
        session = await self.client.get_hiscores_session()

        async with session.get(self.HISCORES_URL, params={'player': username}) as resp:
            if resp.status == 404:
                raise PlayerNotFoundError(f"Player '{username}' not found on hiscores (404)")
            if resp.status != 200:
                raise UpstreamError(f"Hiscores lookup failed with status {resp.status}", resp.status)
            body = await resp.json(content_type=None)

        return {
            "name": body.get('name') or username,
            "mode": "main",
            "main": {
                "skills": self._skills(body.get('skills') or []),
                "activities": self._activities(body.get('activities') or []),
            },
        }
