import logging
from typing import Any

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse

from car_api.api.dependencies import HandlerDep, install_service, lifespan
from car_api.api.middleware import RequestContextMiddleware
from car_api.api.routes import router
from car_api.config import configure_logging, settings
from car_api.dto import HealthCheckResponse
from car_api.errors import CarApiError, to_http_error
from car_api.services import CarService

logger = logging.getLogger(__name__)


async def car_api_error_handler(request: Request, exc: CarApiError) -> JSONResponse:
    """Render a CarApiError with its kind's status code."""
    status_code, body = to_http_error(exc)
    log = logger.error if status_code >= 500 else logger.debug
    log("%s %s -> %d %s", request.method, request.url.path, status_code, exc.message)
    return JSONResponse(status_code=status_code, content=body)


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Last-resort 500 for exceptions that escaped the handler layer."""
    logger.error("Unhandled error on %s %s", request.method, request.url.path, exc_info=exc)
    status_code, body = to_http_error(exc)
    return JSONResponse(status_code=status_code, content=body)


def create_app(car_service: CarService | None = None) -> FastAPI:
    """Build the FastAPI application.

    Args:
        car_service: Pre-built service to serve. If None, the lifespan
            connects to PostgreSQL and Redis using settings.

    Returns:
        Configured FastAPI app
    """
    app = FastAPI(
        title="Car API",
        description="CRUD API for cars backed by PostgreSQL with a Redis list cache",
        version="0.1.0",
        lifespan=lifespan,
    )

    if car_service is not None:
        install_service(app, car_service)

    app.add_middleware(RequestContextMiddleware)
    app.add_middleware(
        CORSMiddleware,  # type: ignore[arg-type]
        allow_origins=settings.cors_origin_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(CarApiError, car_api_error_handler)  # type: ignore[arg-type]
    app.add_exception_handler(Exception, unhandled_error_handler)

    @app.get("/", response_class=PlainTextResponse)
    async def root() -> str:
        """Liveness probe."""
        return "i am alive"

    @app.get(
        "/health",
        response_model=HealthCheckResponse,
        responses={503: {"model": HealthCheckResponse}},
    )
    async def health(handler: HandlerDep) -> Any:
        """Health check endpoint for the database and the cache."""
        result = await handler.health_check()
        if result.status != "healthy":
            return JSONResponse(status_code=503, content=result.model_dump())
        return result

    app.include_router(router)
    return app


configure_logging()
app = create_app()
