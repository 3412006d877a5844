"""FastAPI application."""

from dishka import AsyncContainer
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from quill.config import Settings
from quill.interface.api.errors import setup_exception_handlers
from quill.interface.api.routes import auth, comments, health, journals, users
from quill.util.di.container import create_container, setup_di
from quill.util.observability import instrument_fastapi


def create_app(container: AsyncContainer | None = None) -> FastAPI:
    """Create FastAPI application.

    Note: Logfire should be configured before calling this function.
    In production, start_app.py handles this.
    In tests, conftest.py configures it.

    Args:
        container: DI container to serve requests from. Defaults to the
            production container; tests pass one with in-memory persistence.
    """
    settings = Settings()

    app_instance = FastAPI(
        title="Quill API",
        description="Backend API for Quill - private journals with threaded comments",
        version="0.1.0",
    )

    # Instrument FastAPI for automatic tracing of HTTP requests
    instrument_fastapi(app_instance)

    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=settings.api.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Authorization", "Content-Type", "Accept", "Origin"],
        max_age=600,  # Cache preflight requests for 10 minutes
    )

    setup_di(app_instance, container or create_container())
    setup_exception_handlers(app_instance)

    # Register routes
    app_instance.include_router(health.router)
    app_instance.include_router(auth.router)
    app_instance.include_router(users.router)
    app_instance.include_router(journals.router)
    app_instance.include_router(comments.router)

    return app_instance


# Create app instance for uvicorn
# Note: Logfire must be configured before this module is imported
# In production: start_app.py handles this
# In tests: configure in conftest.py
app = create_app()
