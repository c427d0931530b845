from quart import Blueprint, jsonify

from gamedata import get_slayer_tasks


slayer_bp = Blueprint("slayer", __name__)


@slayer_bp.get("/api/slayer/<master>")
async def get_slayer(master: str):
    tasks = get_slayer_tasks(master)
    if tasks is None:
        return jsonify({"error": "Slayer master not found"}), 404
    return jsonify(tasks), 200
