#!/usr/bin/env python3
"""Serve the Specdit API with uvicorn.

Logfire and stdlib logging are configured before the app module is
imported, so failures while building the app are reported too.
"""

import sys

import logfire
import uvicorn

from specdit.config import Settings
from specdit.util.logging import setup_logging
from specdit.util.observability import configure_logfire


def main() -> int:
    settings = Settings()
    configure_logfire(settings)
    setup_logging(settings)

    logfire.info(
        "Starting Specdit API",
        host=settings.api.host,
        port=settings.api.port,
        git_sha=settings.git_sha,
    )
    try:
        uvicorn.run(
            "specdit.interface.api.app:app",
            host=settings.api.host,
            port=settings.api.port,
            log_level="debug" if settings.debug else "info",
        )
    except Exception as e:
        logfire.error(
            "Specdit API failed to start",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        raise
    return 0


if __name__ == "__main__":
    sys.exit(main())
