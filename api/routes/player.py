from quart import Blueprint, jsonify

from api.core import get_osrs_client, logger
from osrs_api import PlayerNotFoundError


player_bp = Blueprint("player", __name__)


@player_bp.get("/api/player/<username>")
async def get_player(username: str):
    try:
        stats = await get_osrs_client().hiscores.get_stats(username)
        return jsonify(stats), 200
    except Exception as e:
        if isinstance(e, PlayerNotFoundError) or "404" in str(e):
            return jsonify({"error": "Player not found"}), 404
        await logger.log("error", f"Player lookup failed for {username}: {e}", {"username": username})
        return jsonify({"error": str(e)}), 500
