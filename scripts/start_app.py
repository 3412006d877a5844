#!/usr/bin/env python3
"""Start the FastAPI application with Logfire error tracking for startup errors."""

import sys
import logfire
import uvicorn

from quill.config import Settings, check_settings
from quill.util.error import ConfigurationError
from quill.util.logging import setup_logging
from quill.util.observability import configure_logfire


def main() -> int:
    """Start the application and log any startup errors to Logfire."""
    settings = Settings()

    # Configure Logfire early to catch startup errors
    configure_logfire(settings)
    setup_logging(settings)

    try:
        check_settings(settings)
    except ConfigurationError as e:
        logfire.error("Refusing to start", setting=e.setting, reason=e.reason)
        raise

    try:
        logfire.info("Starting FastAPI application", port=settings.port)

        uvicorn.run(
            "quill.interface.api.app:app",
            host=settings.host,
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
        # Re-raise so the container fails properly
        raise


if __name__ == "__main__":
    sys.exit(main())
