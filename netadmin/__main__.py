import logging
import sys

import uvicorn

from netadmin.app import create_app
from netadmin.core.config import get_settings
from netadmin.core.logging_config import configure_logging
from netadmin.domain.errors import PersistenceError

logger = logging.getLogger(__name__)


def main() -> int:
    try:
        settings = get_settings()
    except ValueError as exc:
        # settings are unusable, fall back to the default level
        configure_logging()
        logger.error("%s", exc)
        return 1
    configure_logging(settings.log_level)

    try:
        app = create_app(settings)
    except PersistenceError as exc:
        logger.error("failed to create API server: %s", exc)
        return 1

    logger.info("Starting API server at %s:%s", settings.host, settings.port)
    # uvicorn handles SIGINT/SIGTERM and drains in-flight requests before exiting.
    uvicorn.run(
        app,
        host=settings.host,
        port=settings.port,
        timeout_keep_alive=settings.keepalive_timeout_seconds,
        timeout_graceful_shutdown=settings.graceful_shutdown_seconds,
        log_config=None,
    )
    logger.info("API server shutdown complete")
    return 0


if __name__ == "__main__":
    sys.exit(main())
