import asyncio

from api import create_app
from api.core import API_HOST, API_PORT
from api.lifecycle import setup_signal_handlers, register_app_lifecycle, shutdown_event


async def main():
    app = create_app()
    register_app_lifecycle(app)

    print("Starting OSRS API server...")
    setup_signal_handlers()

    try:
        app_task = asyncio.create_task(app.run_task(host=API_HOST, port=API_PORT))
        print(f"OSRS API listening at http://{API_HOST}:{API_PORT}")

        await asyncio.wait(
            [app_task, asyncio.create_task(shutdown_event.wait())],
            return_when=asyncio.FIRST_COMPLETED,
        )

        if shutdown_event.is_set():
            print("Shutdown requested, stopping API server...")
            if not app_task.done():
                app_task.cancel()
                try:
                    await app_task
                except asyncio.CancelledError:
                    pass
        else:
            print("App task completed unexpectedly")
    finally:
        await app.extensions["osrs_api"].close()
        print("API server cleanup completed")


def run():
    asyncio.run(main())


if __name__ == "__main__":
    run()
