import copy
import json
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, List, Optional

SLAYER_DIR = Path(__file__).parent / "slayer"

# Lowercase master name -> bundled task file
SLAYER_MASTERS = {
    "duradel": "duradel.json",
    "nieve": "nieve.json",
    "konar": "konar_quo_maten.json",
}


@lru_cache(maxsize=None)
def _load_tasks(filename: str) -> List[Dict[str, Any]]:
    with open(SLAYER_DIR / filename, "r", encoding="utf-8") as f:
        return json.load(f)


def get_slayer_tasks(master: str) -> Optional[List[Dict[str, Any]]]:
    """ Task list for a slayer master (case-insensitive), or None for unknown masters. """
    filename = SLAYER_MASTERS.get(master.lower())
    if not filename:
        return None
    return copy.deepcopy(_load_tasks(filename))
