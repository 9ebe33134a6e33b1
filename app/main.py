# =============================================================================
# app/main.py - FastAPI Application Entry Point
# =============================================================================
# This is the main entry point for the Property Records API.
# It configures the FastAPI application with middleware, routers, and handlers.
#
# Usage:
#   poetry run uvicorn app.main:app --reload
# =============================================================================

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.config import settings
from app.exceptions import (
    PropertyApiException,
    property_api_exception_handler,
    validation_exception_handler,
)
from app.routers import health, properties

# Configure logging
logging.basicConfig(
    level=logging.DEBUG if settings.DEBUG else logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    The Supabase client is created lazily on first use, so startup only
    logs the effective configuration.
    """
    logger.info(f"Starting Property Records API in {settings.ENVIRONMENT} mode")
    logger.info(f"CORS origins: {settings.cors_origins_list}")
    logger.info(f"Minimum boundary points: {settings.MIN_BOUNDARY_POINTS}")

    yield

    logger.info("Shutting down Property Records API")


# Create FastAPI application
app = FastAPI(
    title="Property Records API",
    description="""
## Real-Estate Property Records

Create, read, replace and delete property records, and compute the area
of a property's boundary polygon.

### Boundary Area

`GET /api/v1/properties/{id}/area` applies the shoelace formula to the
stored boundary, using latitude as x and longitude as y. The result is
rounded to a whole number and is **not** converted to square metres.

### Quick Start

```bash
curl -X POST http://localhost:8000/api/v1/properties \\
  -H "Content-Type: application/json" \\
  -d '{"type": "land", "name": "North Field",
       "location": {"country": "Italy", "city": "Turin", "address": "Via Roma 1"},
       "boundary": [{"lat": 0, "lng": 0}, {"lat": 0, "lng": 4},
                    {"lat": 4, "lng": 4}, {"lat": 4, "lng": 0}]}'

curl http://localhost:8000/api/v1/properties/{id}/area
```
""",
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
    openapi_tags=[
        {
            "name": "Properties",
            "description": "Property CRUD and boundary area",
        },
        {
            "name": "Health",
            "description": "API health and readiness checks",
        },
    ],
)


# =============================================================================
# Middleware
# =============================================================================

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list if settings.is_production else ["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# =============================================================================
# Exception Handlers
# =============================================================================

@app.exception_handler(PropertyApiException)
async def handle_property_api_exception(request: Request, exc: PropertyApiException):
    """Handle custom Property API exceptions."""
    return await property_api_exception_handler(request, exc)


@app.exception_handler(RequestValidationError)
async def handle_validation_exception(request: Request, exc: RequestValidationError):
    """Handle malformed request bodies and parameters."""
    return await validation_exception_handler(request, exc)


@app.exception_handler(Exception)
async def handle_general_exception(request: Request, exc: Exception):
    """Handle unexpected exceptions."""
    logger.exception(f"Unexpected error: {exc}")
    return JSONResponse(
        status_code=500,
        content={
            "detail": "An unexpected error occurred",
            "code": "INTERNAL_ERROR",
        }
    )


# =============================================================================
# Routers
# =============================================================================

app.include_router(
    health.router,
    prefix="/api/v1",
    tags=["Health"]
)

app.include_router(
    properties.router,
    prefix="/api/v1/properties",
    tags=["Properties"]
)


# =============================================================================
# Root Endpoint
# =============================================================================

@app.get("/", tags=["Root"])
async def root():
    """
    Root endpoint - returns API info.
    """
    return {
        "name": "Property Records API",
        "version": "1.0.0",
        "docs": "/docs",
        "health": "/api/v1/health",
    }
