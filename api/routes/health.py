from datetime import datetime, timezone

from quart import Blueprint, jsonify


health_bp = Blueprint("health", __name__)


@health_bp.get("/health")
async def health_endpoint():
    return jsonify({
        "status": "ok",
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }), 200
