import os

from dotenv import load_dotenv
from quart import current_app

from osrs_api import OSRSAPIClient, DEFAULT_USER_AGENT
from utils.logger import LoggerClient


# Load environment variables as early as possible
load_dotenv()


API_HOST = os.getenv("API_HOST", "0.0.0.0")
API_PORT = int(os.getenv("API_PORT", 3000))
USER_AGENT = os.getenv("OSRS_USER_AGENT", DEFAULT_USER_AGENT)
CORS_ALLOW_ORIGIN = os.getenv("CORS_ALLOW_ORIGIN", "*")

# Core singletons shared across blueprints
logger = LoggerClient(log_file=os.getenv("LOG_FILE_PATH"))


def get_osrs_client() -> OSRSAPIClient:
    """Return the upstream client attached to the running app."""
    return current_app.extensions["osrs_api"]


__all__ = [
    "API_HOST",
    "API_PORT",
    "USER_AGENT",
    "CORS_ALLOW_ORIGIN",
    "logger",
    "get_osrs_client",
]
