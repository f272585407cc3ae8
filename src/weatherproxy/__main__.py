"""Weather proxy entrypoint: builds the app and serves it with uvicorn."""

import logging

import uvicorn

from weatherproxy.app import create_app
from weatherproxy.config import Settings
from weatherproxy.logging_setup import configure_logging

logger = logging.getLogger("weatherproxy.server")


def main() -> None:
    settings = Settings()
    configure_logging(settings.log_level)

    app = create_app(settings)
    logger.info("Server is running on %s:%d", settings.host, settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()
