"""Shared test fixtures."""

from typing import Any, Dict, List, Optional

import pytest

from api import create_app
from osrs_api import OSRSAPIClient
from osrs_api.hiscores import HiscoresAPI
from osrs_api.pricing import PricingAPI
from osrs_api.wiki import WikiAPI


ITEM_MAPPING = [
    {"id": 5698, "name": "Dragon dagger(p++)"},
    {"id": 1215, "name": "Dragon dagger"},
    {"id": 1205, "name": "Bronze dagger"},
    {"id": 1203, "name": "Iron dagger"},
    {"id": 1213, "name": "Rune dagger"},
    {"id": 20997, "name": "Twisted bow"},
    {"id": 4151, "name": "Abyssal whip"},
]

LATEST_PRICES = {
    1215: {"high": 17500, "highTime": 1700000100, "low": 17000, "lowTime": 1700000000},
    20997: {"high": 1450000000, "highTime": 1700000200, "low": 1440000000, "lowTime": 1700000150},
}

WIKI_PAGES = {
    "Abyssal whip": "The abyssal whip is a one-handed melee weapon.\nIt requires 70 Attack to wield.",
    "Dragon Slayer II": "Dragon Slayer II is a grandmaster quest.\nIt is the sequel to Dragon Slayer I.",
    "Cook's Assistant": "Cook's Assistant is a novice quest.\nThe cook needs help.",
    "Cook's Assistant/Quick guide": "Bring the cook an egg, a bucket of milk and a pot of flour.",
    "Sins of the Father": "Sins of the Father is a master quest.\nIt continues the Myreque series.",
}

WIKI_SEARCH = {
    "whip": ["Abyssal whip"],
    "ds2": ["DS2"],
    "Sins of the Father": ["Sins of the Father"],
    "ghost page": ["Deleted page"],
}

WIKI_REDIRECTS = {
    "DS2": "Dragon Slayer II",
}

HISCORES = {
    "Zezima": {
        "name": "Zezima",
        "skills": [
            {"id": 0, "name": "Overall", "rank": 1, "level": 2277, "xp": 4600000000},
            {"id": 1, "name": "Attack", "rank": 5, "level": 99, "xp": 200000000},
            {"id": 9, "name": "Woodcutting", "rank": 12, "level": 85, "xp": 3300000},
        ],
        "activities": [
            {"id": 6, "name": "Clue Scrolls (all)", "rank": 100, "score": 500},
            {"id": 40, "name": "K'ril Tsutsaroth", "rank": -1, "score": -1},
        ],
    },
}


class FakeResponse:
    def __init__(self, status: int, payload: Any):
        self.status = status
        self._payload = payload

    async def json(self, content_type: Optional[str] = "application/json"):
        return self._payload

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc, tb):
        return False


class FakeUpstream:
    """Canned answers for the prices, wiki and hiscores APIs."""

    def __init__(self):
        self.mapping: List[Dict[str, Any]] = [dict(item) for item in ITEM_MAPPING]
        self.prices = dict(LATEST_PRICES)
        self.pages = dict(WIKI_PAGES)
        self.search_hits = dict(WIKI_SEARCH)
        self.redirects = dict(WIKI_REDIRECTS)
        self.players = dict(HISCORES)
        self.failing = set()
        self.calls = []

    def _page_payload(self, title: str, params: Dict[str, Any]):
        if params.get("redirects"):
            title = self.redirects.get(title, title)
        if title not in self.pages:
            return {"query": {"pages": {"-1": {"ns": 0, "title": title, "missing": ""}}}}
        page_id = str(1000 + sorted(self.pages).index(title))
        return {"query": {"pages": {page_id: {"pageid": int(page_id), "ns": 0, "title": title, "extract": self.pages[title]}}}}

    def handle(self, url: str, params: Dict[str, Any]):
        if url.startswith(PricingAPI.PRICES_API_BASE):
            if "prices" in self.failing:
                return 503, None
            if url.endswith("/mapping"):
                return 200, self.mapping
            item_id = int(params["id"])
            entry = self.prices.get(item_id)
            return 200, {"data": {str(item_id): entry} if entry else {}}

        if url == WikiAPI.WIKI_API_URL:
            if "wiki" in self.failing:
                return 503, None
            if params.get("list") == "search":
                hits = self.search_hits.get(params["srsearch"], [])
                return 200, {"query": {"search": [{"ns": 0, "title": t} for t in hits]}}
            return 200, self._page_payload(params["titles"], params)

        if url == HiscoresAPI.HISCORES_URL:
            if "hiscores" in self.failing:
                return 503, None
            player = self.players.get(params["player"])
            if player is None:
                return 404, None
            return 200, player

        return 404, None

    def calls_to(self, url: str):
        return [params for called_url, params in self.calls if called_url == url]


class FakeSession:
    """Stands in for aiohttp.ClientSession; routes every GET to a FakeUpstream."""

    def __init__(self, upstream: FakeUpstream):
        self.upstream = upstream
        self.closed = False

    def get(self, url, params=None):
        params = dict(params or {})
        self.upstream.calls.append((url, params))
        status, payload = self.upstream.handle(url, params)
        return FakeResponse(status, payload)

    async def close(self):
        self.closed = True


@pytest.fixture()
def upstream() -> FakeUpstream:
    return FakeUpstream()


@pytest.fixture()
def osrs_client(upstream: FakeUpstream) -> OSRSAPIClient:
    """OSRSAPIClient whose sessions talk to the fake upstream."""
    client = OSRSAPIClient(user_agent="osrs-api tests")
    client._wiki_session = FakeSession(upstream)
    client._prices_session = FakeSession(upstream)
    client._hiscores_session = FakeSession(upstream)
    return client


@pytest.fixture()
def app(osrs_client: OSRSAPIClient):
    return create_app(osrs_client)


@pytest.fixture()
def client(app):
    """Quart test client for the gateway."""
    return app.test_client()
