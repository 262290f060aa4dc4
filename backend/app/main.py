"""FastAPI application factory and lifespan for the Weather Dashboard."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .config import settings
from .api.router import api_router
from .services.errors import WeatherServiceError
from .services.openweather import clear_cache

# Configure logging for our app (uvicorn only configures its own loggers)
logging.basicConfig(
    level=logging.INFO,
    format="%(levelname)s:     %(name)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan: report configuration, drop cached payloads on exit."""
    if settings.api_key_configured:
        logger.info("OpenWeather API key configured (%s)", settings.openweather_base_url)
    else:
        logger.warning("OpenWeather API key not set; lookups will fail until "
                       "WEATHER_OPENWEATHER_API_KEY is configured")
    logger.info("Forecast days default to %s when the provider omits an offset",
                settings.display_timezone)

    yield

    clear_cache()
    logger.info("Application shutdown complete")


async def weather_error_handler(request: Request, exc: WeatherServiceError) -> JSONResponse:
    """Map service errors to their status and generic client message."""
    logger.info("%s %s -> %d (%s)", request.method, request.url.path,
                exc.status_code, type(exc).__name__)
    return JSONResponse({"error": exc.public_message}, status_code=exc.status_code)


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse({"error": "Internal server error"}, status_code=500)


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(
        title="Weather Dashboard",
        version="0.1.0",
        lifespan=lifespan,
    )

    # CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["Content-Type"],
    )

    app.add_exception_handler(WeatherServiceError, weather_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)

    # API routes
    app.include_router(api_router)

    return app


# Application instance
app = create_app()

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=settings.host, port=settings.port)
