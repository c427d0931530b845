"""
OSRS skills in hiscore order, plus the experience table.
"""

import math
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional

MAX_LEVEL = 120


class Skill(Enum):
    # (hiscore line index, display name)
    OVERALL = (0, "Overall")
    ATTACK = (1, "Attack")
    DEFENCE = (2, "Defence")
    STRENGTH = (3, "Strength")
    HITPOINTS = (4, "Hitpoints")
    RANGED = (5, "Ranged")
    PRAYER = (6, "Prayer")
    MAGIC = (7, "Magic")
    COOKING = (8, "Cooking")
    WOODCUTTING = (9, "Woodcutting")
    FLETCHING = (10, "Fletching")
    FISHING = (11, "Fishing")
    FIREMAKING = (12, "Firemaking")
    CRAFTING = (13, "Crafting")
    SMITHING = (14, "Smithing")
    MINING = (15, "Mining")
    HERBLORE = (16, "Herblore")
    AGILITY = (17, "Agility")
    THIEVING = (18, "Thieving")
    SLAYER = (19, "Slayer")
    FARMING = (20, "Farming")
    RUNECRAFT = (21, "Runecraft")
    HUNTER = (22, "Hunter")
    CONSTRUCTION = (23, "Construction")
    SAILING = (24, "Sailing")

    @property
    def line_index(self) -> int:
        return self.value[0]

    @property
    def display_name(self) -> str:
        return self.value[1]

    @property
    def is_overall(self) -> bool:
        return self is Skill.OVERALL

    @classmethod
    def ordered(cls) -> List["Skill"]:
        return sorted(cls, key=lambda s: s.line_index)

    @classmethod
    def find_by_name(cls, name: Optional[str]) -> Optional["Skill"]:
        """Find a skill by enum name, display name, or common alias ("wc", "hp", ...)."""
        if not name or not name.strip():
            return None
        search = name.strip().lower()
        search = SKILL_ALIASES.get(search, search)
        if search == "total":
            return cls.OVERALL
        for skill in cls:
            if skill.name.lower() == search or skill.display_name.lower() == search:
                return skill
        return None


SKILL_ALIASES = {
    "wc": "woodcutting",
    "rc": "runecraft",
    "hp": "hitpoints",
    "con": "construction",
    "fm": "firemaking",
    "herb": "herblore",
    "agil": "agility",
    "thiev": "thieving",
    "slay": "slayer",
    "farm": "farming",
    "hunt": "hunter",
    "str": "strength",
    "att": "attack",
    "def": "defence",
    "pray": "prayer",
    "mage": "magic",
    "cook": "cooking",
    "fish": "fishing",
    "fletch": "fletching",
    "smith": "smithing",
    "mine": "mining",
    "craft": "crafting",
}


def _build_xp_table() -> List[int]:
    table = [0] * (MAX_LEVEL + 1)
    points = 0
    for level in range(1, MAX_LEVEL):
        points += math.floor(level + 300.0 * 2.0 ** (level / 7.0))
        table[level + 1] = points // 4
    return table


XP_TABLE = _build_xp_table()


def xp_for_level(level: int) -> int:
    """Total experience needed to reach ``level`` (capped at level 120)."""
    if level < 1:
        return 0
    return XP_TABLE[min(level, MAX_LEVEL)]


def xp_to_next_level(level: int, current_xp: int) -> int:
    """
    Experience remaining until the next level.

    Levels cap at 99, or at 120 once a skill is past 99 (virtual levels).
    Returns 0 at the cap.
    """
    if level < 1:
        return 0
    cap = MAX_LEVEL if level >= 99 else 99
    if level >= cap:
        return 0
    return max(0, XP_TABLE[level + 1] - max(0, current_xp))


@dataclass
class SkillStat:
    """One skill row from a player's stats"""
    skill: Skill
    level: int
    xp: int

    @property
    def xp_to_next_level(self) -> int:
        return xp_to_next_level(self.level, self.xp)
