"""
Main FastAPI application.

This file wires together all layers:
- Domain: Employee entity, queries and exceptions
- Infrastructure: Upstream employee API client
- Services: Business logic orchestration
- Routers: HTTP endpoints
"""

from contextlib import asynccontextmanager
from typing import Optional

import structlog
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .config import Settings, settings as default_settings
from .error_handlers import register_exception_handlers
from .infrastructure.employee_client import EmployeeClient
from .logging_config import configure_logging
from .metrics import metrics_endpoint
from .middleware import RequestContextMiddleware
from .routers import employee_router, health_router
from .services.employee_service import EmployeeService

logger = structlog.get_logger(__name__)


def create_employee_service(settings: Settings) -> EmployeeService:
    """
    Create and configure the employee service with its upstream client.

    Args:
        settings: Application settings

    Returns:
        Configured EmployeeService instance
    """
    client = EmployeeClient(
        base_url=settings.UPSTREAM_BASE_URL,
        timeout=settings.REQUEST_TIMEOUT,
    )
    return EmployeeService(client=client)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    settings: Settings = app.state.settings

    logger.info(
        "Starting employee API",
        service=settings.SERVICE_NAME,
        upstream=settings.UPSTREAM_BASE_URL,
    )

    service = create_employee_service(settings)
    app.state.employee_service = service
    app.state.employee_client = service.client

    yield

    logger.info("Shutting down employee API")
    await service.client.close()
    logger.info("Employee API shut down complete")


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        settings: Settings override; the module-level settings by default

    Returns:
        Configured FastAPI application
    """
    settings = settings or default_settings
    configure_logging(settings.LOG_LEVEL, settings.LOG_JSON)

    app = FastAPI(
        title=settings.APP_NAME,
        description="REST façade over the upstream mock employee API",
        version=settings.VERSION,
        lifespan=lifespan,
        docs_url="/api/docs" if settings.DEBUG else None,
        redoc_url="/api/redoc" if settings.DEBUG else None,
        openapi_url="/api/openapi.json" if settings.DEBUG else None,
    )
    app.state.settings = settings

    app.add_middleware(RequestContextMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    app.include_router(employee_router.router)
    app.include_router(health_router.router)
    app.add_api_route("/metrics", metrics_endpoint, methods=["GET"], include_in_schema=False)

    @app.get("/", include_in_schema=False)
    async def root():
        """Root endpoint with service information."""
        return {
            "service": settings.APP_NAME,
            "version": settings.VERSION,
            "status": "operational",
            "health": "/api/v1/health",
            "ready": "/api/v1/ready",
        }

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "employee_api.app:app",
        host=default_settings.HOST,
        port=default_settings.PORT,
        log_level=default_settings.LOG_LEVEL.lower(),
    )
