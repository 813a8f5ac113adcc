"""Entry point for serving the tracker API."""

import uvicorn
from loguru import logger

from api.app import create_app
from config import Settings, configure_logging


def run() -> None:
    settings = Settings.from_env()
    configure_logging(settings.log_level)

    logger.info(f"Serving LeetTrack on http://{settings.host}:{settings.port}")
    uvicorn.run(
        create_app(settings),
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    run()
