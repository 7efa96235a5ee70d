#!/usr/bin/env python3
"""Process entrypoint: load configuration, then serve the app with uvicorn."""
import logging
import sys

import uvicorn
from pydantic import ValidationError

from currency_converter.core.config import get_settings
from currency_converter.core.logging import init_logging
from currency_converter.main import create_app

logger = logging.getLogger("currency_converter.server")


def main() -> None:
    try:
        settings = get_settings()
    except ValidationError as e:
        init_logging()
        logger.critical("Could not load environment variables. %s", e)
        sys.exit(1)

    app = create_app(settings_override=settings)
    logger.info("listening on http://%s:%d", settings.host, settings.port)
    uvicorn.run(
        app,
        host=settings.host,
        port=settings.port,
        log_level="debug" if settings.debug else "info",
    )


if __name__ == "__main__":
    main()
