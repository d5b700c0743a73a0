"""Entry point for serving the Blog API.

Host and port are read from the ``HOST`` and ``PORT`` environment
variables (defaults ``0.0.0.0`` and ``3200``).  Uvicorn handles SIGINT
and SIGTERM by finishing in‑flight requests before the process exits, and
logs the address it actually bound on startup.  If the port is already
in use the server fails to start and the process exits with a non‑zero
status.

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from blog_api.app.core.config import settings
from blog_api.app.main import app


async def run_api() -> None:
    """Start the Blog API using Uvicorn."""
    # log_config=None keeps the handlers installed by setup_logging.
    config = Config(
        app=app,
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level="info",
        log_config=None,
    )
    server = Server(config)
    await server.serve()


def main() -> None:
    logging.getLogger(__name__).info("Starting %s on %s:%s", settings.project_name, settings.host, settings.port)
    asyncio.run(run_api())


if __name__ == "__main__":
    try:
        main()
    except KeyboardInterrupt:
        pass
