import re

from quart import Blueprint, jsonify, request

from api.core import get_osrs_client, logger


items_bp = Blueprint("items", __name__)

DEFAULT_SEARCH_LIMIT = 10

# Leading integer; trailing junk is ignored ("2abc" -> 2)
LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def parse_limit(raw) -> int:
    """Query-string limit; no leading digits or a value below 1 gives the default."""
    match = LEADING_INT.match(raw or "")
    if not match:
        return DEFAULT_SEARCH_LIMIT
    limit = int(match.group(1))
    return limit if limit > 0 else DEFAULT_SEARCH_LIMIT


@items_bp.get("/api/item/<query>")
async def get_item(query: str):
    try:
        quote = await get_osrs_client().pricing.get_item_quote(query)
        if not quote:
            return jsonify({"error": "Item not found"}), 404
        return jsonify(quote), 200
    except Exception as e:
        await logger.log("error", f"Item lookup failed for {query}: {e}", {"query": query})
        return jsonify({"error": str(e)}), 500


@items_bp.get("/api/items/search/<query>")
async def search_items(query: str):
    limit = parse_limit(request.args.get("limit"))
    try:
        results = await get_osrs_client().pricing.search_items(query, limit)
        return jsonify(results), 200
    except Exception as e:
        await logger.log("error", f"Item search failed for {query}: {e}", {"query": query, "limit": limit})
        return jsonify({"error": str(e)}), 500
