import asyncio
import signal

from api.core import logger


shutdown_event = asyncio.Event()


def _signal_handler(signum, frame):
    logger.log_sync("info", f"Received signal {signum}, initiating graceful shutdown...", {"signal": signum})
    shutdown_event.set()


def setup_signal_handlers():
    """Setup signal handlers for graceful shutdown."""
    signal.signal(signal.SIGTERM, _signal_handler)
    signal.signal(signal.SIGINT, _signal_handler)
    if hasattr(signal, "SIGHUP"):
        signal.signal(signal.SIGHUP, _signal_handler)


def register_app_lifecycle(app):
    """Attach lightweight lifecycle hooks to the Quart app."""

    @app.before_serving
    async def _on_startup():
        print(f"Upstream requests will identify as '{app.extensions['osrs_api'].user_agent}'")

    @app.after_serving
    async def _on_shutdown():
        await app.extensions["osrs_api"].close()
        # Signal the background watcher waiters if any
        shutdown_event.set()


__all__ = [
    "shutdown_event",
    "setup_signal_handlers",
    "register_app_lifecycle",
]
