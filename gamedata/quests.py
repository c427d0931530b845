import copy
import json
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

from utils.format import normalize_name

QUESTS_DIR = Path(__file__).parent / "quests"

# Marks quest records that were built from a wiki page instead of the bundled data
FALLBACK_DIFFICULTY = "Unknown (Wiki Fallback)"


@lru_cache(maxsize=1)
def _quest_files() -> Tuple[Tuple[str, Dict[str, Any]], ...]:
    """ (filename stem, record) pairs in alphabetical filename order. """
    entries = []
    for path in sorted(QUESTS_DIR.glob("*.json")):
        with open(path, "r", encoding="utf-8") as f:
            entries.append((path.stem, json.load(f)))
    return tuple(entries)


def all_quests() -> List[Dict[str, Any]]:
    return [copy.deepcopy(record) for _, record in _quest_files()]


def get_quest_by_name(name: str) -> Optional[Dict[str, Any]]:
    """ Exact, case-insensitive lookup on the quest's display name. """
    wanted = name.lower()
    for _, record in _quest_files():
        if record.get("name", "").lower() == wanted:
            return copy.deepcopy(record)
    return None


def find_quest_by_filename(name: str) -> Optional[Dict[str, Any]]:
    """
        Fuzzy lookup against the bundled filenames.

        Both the query and each filename are reduced to lowercase letters and
        digits; the first file (alphabetically) where either one contains the
        other wins. There is no scoring.
    """
    query = normalize_name(name)
    if not query:
        return None
    for stem, record in _quest_files():
        candidate = normalize_name(stem)
        if query in candidate or candidate in query:
            return copy.deepcopy(record)
    return None


def quest_from_wiki_page(page: Dict[str, Any]) -> Dict[str, Any]:
    """
        Build a partial quest record from a wiki search result
        (``{"title", "url", "summary", "extract"}``).
    """
    return {
        "name": page["title"],
        "url": page.get("url"),
        "description": page.get("summary") or "",
        "difficulty": FALLBACK_DIFFICULTY,
        "length": "Unknown",
        "questPoints": 0,
        "requirements": {
            "skills": [],
            "quests": [],
        },
        "rewards": {
            "experience": [],
            "items": [],
            "unlocks": [],
        },
    }
