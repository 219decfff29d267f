# =============================================================================
# app/main.py - FastAPI Application Entry Point
# =============================================================================
# This is the main entry point for the demo API.
# It configures the FastAPI application with middleware, routers, and handlers.
#
# Usage:
#   uvicorn app.main:app --reload --port 8080
#   python -m app
#
# The same `app` object is wrapped for AWS Lambda in app/lambda_handler.py.
# =============================================================================

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

from app.config import Settings, get_settings
from app.exceptions import (
    ServiceException,
    service_exception_handler,
    unhandled_exception_handler,
    validation_exception_handler,
)
from app.routers import health, prediction

settings = get_settings()

# Configure logging
logging.basicConfig(
    level=settings.log_level_value,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    Under Uvicorn this runs once per process. Under Mangum with lifespan
    enabled it runs around every Lambda invocation, so the Lambda image
    leaves it off by default (LAMBDA_LIFESPAN).
    """
    app_settings: Settings = app.state.settings
    logger.info(f"Starting {app_settings.APP_NAME} in {app_settings.ENVIRONMENT} mode")

    yield

    logger.info(f"Shutting down {app_settings.APP_NAME}")


def create_app(app_settings: Settings | None = None) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        app_settings: Settings to use (defaults to the cached global settings)

    Returns:
        Configured FastAPI instance
    """
    app_settings = app_settings or get_settings()

    application = FastAPI(
        title=app_settings.APP_NAME,
        description="""
## FastAPI Deployment Demo

A two-endpoint service used to walk through packaging a FastAPI app as a
local container and as an AWS Lambda container image.

### Quick Start

```bash
curl http://localhost:8080/

curl -X POST http://localhost:8080/predict \\
  -H "Content-Type: application/json" \\
  -d '{"feature1": "value"}'
```
""",
        version=app_settings.APP_VERSION,
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
        openapi_tags=[
            {
                "name": "Prediction",
                "description": "Greeting and prediction endpoints",
            },
            {
                "name": "Health",
                "description": "API health and liveness checks",
            },
        ],
    )
    application.state.settings = app_settings

    # -------------------------------------------------------------------------
    # Middleware
    # -------------------------------------------------------------------------

    application.add_middleware(
        CORSMiddleware,
        allow_origins=app_settings.cors_origins_list if app_settings.is_production else ["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # -------------------------------------------------------------------------
    # Exception Handlers
    # -------------------------------------------------------------------------

    application.add_exception_handler(ServiceException, service_exception_handler)
    application.add_exception_handler(RequestValidationError, validation_exception_handler)
    application.add_exception_handler(Exception, unhandled_exception_handler)

    # -------------------------------------------------------------------------
    # Routers
    # -------------------------------------------------------------------------

    application.include_router(
        prediction.router,
        tags=["Prediction"]
    )

    application.include_router(
        health.router,
        tags=["Health"]
    )

    return application


app = create_app(settings)


def run() -> None:
    """Start a local Uvicorn server using the configured host and port."""
    import uvicorn

    logger.info(f"Starting {settings.APP_NAME} on {settings.API_HOST}:{settings.API_PORT}")
    uvicorn.run(
        "app.main:app",
        host=settings.API_HOST,
        port=settings.API_PORT,
        reload=settings.DEBUG and settings.is_development,
        log_level=logging.getLevelName(settings.log_level_value).lower(),
    )


if __name__ == "__main__":
    run()
