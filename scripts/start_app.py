#!/usr/bin/env python3
"""Start the forum API under uvicorn, reporting startup failures to Logfire."""

import sys

import logfire
import uvicorn

from forum.config import Settings
from forum.util.logging import setup_logging
from forum.util.observability import configure_logfire


def main() -> int:
    """Configure logging, then serve the app until interrupted."""
    settings = Settings()

    # Before the app import so startup errors are captured
    configure_logfire(settings)
    setup_logging(settings)

    try:
        logfire.info("Starting forum API", port=settings.port)
        uvicorn.run(
            "forum.interface.api.app:app",
            host="0.0.0.0",
            port=settings.port,
            log_level="debug" if settings.debug else "info",
        )
        return 0
    except Exception as e:
        logfire.error(
            "Application startup failed",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        raise


if __name__ == "__main__":
    sys.exit(main())
