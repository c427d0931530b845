import re

USERNAME_PATTERN = re.compile(r"^[a-zA-Z0-9\s_-]+$")


def is_valid_osrs_username(username: str) -> bool:
    """ 
        OSRS display names are 1-12 characters of letters, numbers,
        spaces, underscores or hyphens.
    """
    if not username or not username.strip():
        return False
    trimmed = username.strip()
    if len(trimmed) > 12:
        return False
    return bool(USERNAME_PATTERN.match(trimmed))


def normalize_name(name: str) -> str:
    """ Lowercase and drop everything that isn't a letter or digit ("Cook's Assistant" -> "cooksassistant"). """
    return re.sub(r"[^a-z0-9]", "", name.lower())
