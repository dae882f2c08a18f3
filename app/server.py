"""
Process entrypoint. Run from project root:

  python -m app.server

Listens on HOST:PORT from settings (default 0.0.0.0:3000).
"""

import logging

import uvicorn

from app.core.config import get_settings
from app.core.logging_config import configure_logging

logger = logging.getLogger(__name__)


def main() -> None:
    settings = get_settings()
    configure_logging(settings.LOG_LEVEL)
    logger.info("Server running on port %s", settings.PORT)
    uvicorn.run(
        "app.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.DEBUG,
        log_level=settings.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    main()
