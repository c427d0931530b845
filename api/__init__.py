import logging
from typing import Optional

from quart import Quart, jsonify
from quart_cors import cors

from api.core import CORS_ALLOW_ORIGIN, USER_AGENT
from api.routes.health import health_bp
from api.routes.items import items_bp
from api.routes.player import player_bp
from api.routes.quests import quests_bp
from api.routes.slayer import slayer_bp
from api.routes.wiki import wiki_bp
from osrs_api import OSRSAPIClient, create_client


def create_app(osrs_client: Optional[OSRSAPIClient] = None) -> Quart:
    app = Quart(__name__)

    # Configure logging to suppress HTTP access logs
    logging.getLogger('quart.serving').setLevel(logging.ERROR)
    logging.getLogger('hypercorn.access').setLevel(logging.CRITICAL + 1)
    logging.getLogger('hypercorn.access').disabled = True

    # Upstream client, shared by every request
    app.extensions["osrs_api"] = osrs_client or create_client(USER_AGENT)

    # Error handlers
    @app.errorhandler(404)
    async def _not_found(e):
        return jsonify({"error": "Resource not found"}), 404

    @app.errorhandler(500)
    async def _server_error(e):
        return jsonify({"error": "Internal server error"}), 500

    # Blueprints
    app.register_blueprint(health_bp, url_prefix='/')
    app.register_blueprint(player_bp, url_prefix='/')
    app.register_blueprint(items_bp, url_prefix='/')
    app.register_blueprint(wiki_bp, url_prefix='/')
    app.register_blueprint(quests_bp, url_prefix='/')
    app.register_blueprint(slayer_bp, url_prefix='/')

    return cors(app, allow_origin=CORS_ALLOW_ORIGIN)


__all__ = ["create_app"]
