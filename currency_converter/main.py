import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from .core.config import get_settings, Settings
from .core.logging import init_logging, request_context_middleware
from .core import errors
from .routers import convert, health
from .services.rates.base import RateProvider
from .services.rates.providers import make_rate_provider

logger = logging.getLogger("currency_converter")


@asynccontextmanager
async def lifespan(app: FastAPI):
    yield
    # Release pooled upstream connections
    app.state.rate_provider.close()


def create_app(
    settings_override: Settings | None = None,
    rate_provider: RateProvider | None = None,
) -> FastAPI:
    """Application factory.

    settings_override: pass an already constructed Settings instance for tests
    to isolate environment. Falls back to cached get_settings().
    rate_provider: inject a provider (e.g. one wrapping a mock transport);
    defaults to the upstream-backed provider built from settings.
    """
    settings = settings_override or get_settings()
    init_logging(debug=settings.debug, service=settings.app_name)

    app = FastAPI(
        title=settings.app_name,
        debug=settings.debug,
        version=settings.version,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.rate_provider = rate_provider or make_rate_provider(settings)

    # Middleware (request id / structured logging)
    app.middleware("http")(request_context_middleware)

    # Error handlers
    app.add_exception_handler(StarletteHTTPException, errors.http_error_handler)
    app.add_exception_handler(RequestValidationError, errors.validation_error_handler)
    app.add_exception_handler(Exception, errors.server_error_handler)

    # Routers
    app.include_router(health.router)
    app.include_router(convert.router)

    logger.debug("app created, upstream %s", settings.exchange_api_url)
    return app
