"""
Bundled Old School RuneScape reference data.

Quest records live in ``gamedata/quests/*.json`` (one quest per file) and
slayer task lists in ``gamedata/slayer/<master>.json``. Both are static and
ship with the package.
"""

from .quests import (
    FALLBACK_DIFFICULTY,
    get_quest_by_name,
    find_quest_by_filename,
    quest_from_wiki_page,
    all_quests,
)
from .slayer import SLAYER_MASTERS, get_slayer_tasks

__all__ = [
    "FALLBACK_DIFFICULTY",
    "get_quest_by_name",
    "find_quest_by_filename",
    "quest_from_wiki_page",
    "all_quests",
    "SLAYER_MASTERS",
    "get_slayer_tasks",
]
