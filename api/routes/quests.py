from quart import Blueprint, jsonify

from api.core import get_osrs_client, logger
from gamedata import get_quest_by_name, find_quest_by_filename, quest_from_wiki_page


quests_bp = Blueprint("quests", __name__)


async def resolve_quest(name: str):
    """
    Bundled record by exact name, then by fuzzy filename, then a partial
    record built from the top wiki search hit. None if all three miss.
    """
    quest = get_quest_by_name(name)
    if quest:
        return quest

    quest = find_quest_by_filename(name)
    if quest:
        return quest

    page = await get_osrs_client().wiki.search(name)
    if page:
        return quest_from_wiki_page(page)
    return None


@quests_bp.get("/api/quests/<name>")
async def get_quest(name: str):
    try:
        quest = await resolve_quest(name)
        if not quest:
            return jsonify({"error": "Quest not found"}), 404
        return jsonify(quest), 200
    except Exception as e:
        await logger.log("error", f"Quest lookup failed for {name}: {e}", {"name": name})
        return jsonify({"error": str(e)}), 500
