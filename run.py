"""Entry point for the Ship Registry API.

Starts the FastAPI application under Uvicorn.  Host and port are read
from ``API_HOST`` and ``API_PORT`` (defaults ``0.0.0.0`` and ``8000``);
see ``ship_registry_api.app.core.config`` for the other variables.

Usage:
    python run.py
"""
import asyncio

from uvicorn import Config, Server

from ship_registry_api.app.core.config import settings
from ship_registry_api.app.main import app


async def main() -> None:
    """Serve the API until interrupted."""
    config = Config(
        app=app,
        host=settings.api_host,
        port=settings.api_port,
        reload=False,
        log_level=settings.log_level.lower(),
        # keep the handlers installed by ``setup_logging``
        log_config=None,
    )
    server = Server(config)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass
