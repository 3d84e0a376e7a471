import logging

from fastapi import FastAPI

from isometric.api.routes.isometric import router
from isometric.core.middleware import IsometricRateLimitMiddleware
from isometric.core.observability import init_logging
from isometric.core.observability import init_sentry
from isometric.settings import Settings


def create_app(app_settings: Settings | None = None) -> FastAPI:
    """Build the API application from settings."""

    app_settings = app_settings or Settings()
    init_logging(app_settings)
    init_sentry(app_settings)

    application = FastAPI(title="Isometric contributions")
    application.state.settings = app_settings
    application.add_middleware(
        IsometricRateLimitMiddleware,
        requests_per_window=app_settings.rate_limit_per_minute,
        window_seconds=app_settings.rate_limit_window_seconds,
    )
    application.include_router(router)

    logging.getLogger(__name__).info(
        "Isometric API ready (environment=%s)", app_settings.environment
    )
    return application


app = create_app()
