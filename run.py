"""Entry point for the booking server.

Launches the FastAPI application with Uvicorn.  It is intended to be
executed from the project root, e.g. under Docker or a process manager
where only a single Python file is specified.

Host, port, document paths and the reset switch are read from the
environment (see ``slot_booking_api/app/core/config.py``).  Booking
rules live in ``config.json``; ``config.example.json`` shows every key.

Usage:
    python run.py
"""
import asyncio

from uvicorn import Config, Server

from slot_booking_api.app.core.config import settings
from slot_booking_api.app.main import app


async def main() -> None:
    """Serve the API until interrupted."""
    config = Config(
        app=app,
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level=settings.log_level.lower(),
    )
    server = Server(config)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass
