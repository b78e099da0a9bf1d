"""Entry point for serving the World Wonders API.

Loads the configuration, validates the bundled dataset and serves the
FastAPI application with Uvicorn.  Intended to be executed from the
project root, for example inside Docker where only a single Python
file is specified.

Host, port, environment and log level are read from environment
variables (``APP_HOST``, ``APP_PORT``, ``APP_ENV``, ``LOG_LEVEL``);
see ``world_wonders_api/app/core/config.py``.

Usage:
    python run.py
"""
import asyncio
import logging
import sys

from uvicorn import Config, Server

from world_wonders_api.app.core.config import settings
from world_wonders_api.app.core.errors import DatasetError
from world_wonders_api.app.core.logging_config import setup_logging


async def serve() -> None:
    """Build the application and serve it until interrupted.

    Uvicorn installs its own SIGINT/SIGTERM handlers and shuts down
    gracefully, finishing in-flight requests first.
    """
    # Imported here so that a broken dataset is reported by ``main``
    from world_wonders_api.app.main import app

    config = Config(
        app=app,
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level=settings.log_level.lower(),
    )
    server = Server(config)
    logging.getLogger(__name__).info(
        "Docs available at http://%s:%d/v0/docs", settings.host, settings.port
    )
    await server.serve()


def main() -> None:
    setup_logging(settings.log_level, settings.log_file or None)
    try:
        settings.validate()
    except ValueError:
        logging.getLogger(__name__).critical("Invalid configuration", exc_info=True)
        sys.exit(1)
    try:
        asyncio.run(serve())
    except DatasetError:
        logging.getLogger(__name__).critical(
            "Refusing to start with an invalid wonder dataset", exc_info=True
        )
        sys.exit(1)


if __name__ == "__main__":
    try:
        main()
    except KeyboardInterrupt:
        pass
