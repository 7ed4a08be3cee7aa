"""Entry point for the Jokes API.

Starts the FastAPI application with Uvicorn.  Host and port are read
from the ``HOST`` and ``PORT`` environment variables (or a ``.env``
file); defaults are ``0.0.0.0`` and ``3000``.  The master key for
mutating requests comes from ``MASTER_KEY``.

Usage:
    python run.py
"""
import asyncio

from uvicorn import Config, Server

from jokes_api.app.core.config import settings
from jokes_api.app.main import app


async def main() -> None:
    """Serve the API until interrupted."""
    # log_config=None keeps the handlers installed by setup_logging.
    config = Config(app=app, host=settings.host, port=settings.port, reload=False, log_config=None)
    server = Server(config)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass
