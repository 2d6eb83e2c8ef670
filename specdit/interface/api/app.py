"""FastAPI application."""

from dishka import AsyncContainer
from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware

from specdit.config import VERSION, Settings
from specdit.interface.api.routes import (
    auth,
    comments,
    health,
    posts,
    subreddits,
    subscriptions,
    votes,
)
from specdit.interface.error import handle_http_exception
from specdit.util.di.container import create_container, setup_di
from specdit.util.observability import instrument_fastapi

API_PREFIX = "/api"


def create_app(container: AsyncContainer | None = None) -> FastAPI:
    """Create FastAPI application.

    Args:
        container: DI container to serve from; the production container
                   is built when omitted

    Note: Logfire should be configured before calling this function.
    In production, start_app.py handles this.
    In tests, configure in conftest.py if needed.
    """
    settings = Settings()

    app_instance = FastAPI(
        title="Specdit API",
        description="Backend API for Specdit - communities, threaded discussion and voting",
        version=VERSION,
    )

    # Instrument FastAPI for automatic tracing of HTTP requests
    instrument_fastapi(app_instance)

    # The auth cookie needs credentialed CORS
    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=settings.api.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS", "PATCH"],
        allow_headers=[
            "Authorization",
            "Content-Type",
            "Accept",
            "Origin",
            "X-Requested-With",
        ],
        max_age=600,  # Cache preflight requests for 10 minutes
    )

    # Setup dependency injection
    # Settings are loaded from environment automatically
    if container is None:
        container = create_container()
    setup_di(app_instance, container)
    app_instance.add_exception_handler(HTTPException, handle_http_exception)

    # Register routes
    app_instance.include_router(health.router)
    app_instance.include_router(auth.router, prefix=API_PREFIX)
    app_instance.include_router(subreddits.router, prefix=API_PREFIX)
    app_instance.include_router(subscriptions.router, prefix=API_PREFIX)
    app_instance.include_router(posts.router, prefix=API_PREFIX)
    app_instance.include_router(comments.router, prefix=API_PREFIX)
    app_instance.include_router(votes.router, prefix=API_PREFIX)

    return app_instance


# Create app instance for uvicorn
# Note: Logfire must be configured before this module is imported
# In production: start_app.py handles this
# In tests: configure in conftest.py
app = create_app()
