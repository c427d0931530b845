from quart import Blueprint, jsonify

from api.core import get_osrs_client, logger


wiki_bp = Blueprint("wiki", __name__)


@wiki_bp.get("/api/wiki/<title>")
async def get_wiki(title: str):
    try:
        summary = await get_osrs_client().wiki.get_summary(title)
        return jsonify(summary), 200
    except Exception as e:
        await logger.log("error", f"Wiki summary failed for {title}: {e}", {"title": title})
        return jsonify({"error": str(e)}), 500


@wiki_bp.get("/api/wiki/guide/<title>")
async def get_wiki_guide(title: str):
    try:
        guide = await get_osrs_client().wiki.get_guide(title)
        return jsonify(guide), 200
    except Exception as e:
        await logger.log("error", f"Wiki guide failed for {title}: {e}", {"title": title})
        return jsonify({"error": str(e)}), 500


@wiki_bp.get("/api/wiki/search/<query>")
async def search_wiki(query: str):
    try:
        page = await get_osrs_client().wiki.search(query)
        if not page:
            return jsonify({"error": "No wiki results found"}), 404
        return jsonify(page), 200
    except Exception as e:
        await logger.log("error", f"Wiki search failed for {query}: {e}", {"query": query})
        return jsonify({"error": str(e)}), 500
