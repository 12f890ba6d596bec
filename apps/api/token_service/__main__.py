"""Run the token service with uvicorn."""
from __future__ import annotations

import logging

import uvicorn
from dotenv import load_dotenv

from .core.config import settings
from .core.logging import configure_logging

logger = logging.getLogger(__name__)


def main() -> None:
    configure_logging(settings.log_level)
    # Export .env so the AWS SDK sees local development credentials too.
    if not load_dotenv():
        logger.info("No .env file found")
    uvicorn.run("token_service.main:app", host=settings.host, port=settings.port, log_config=None)


if __name__ == "__main__":
    main()
