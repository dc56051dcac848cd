# =============================================================================
# app/main.py - FastAPI Application Entry Point
# =============================================================================
# This is the main entry point for the Roman Numeral Converter API.
# It configures the FastAPI application with middleware, routers, and handlers.
#
# Usage:
#   uvicorn app.main:app --reload --port 8080
#   python scripts/start_server.py
# =============================================================================

import logging
import time
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.config import settings
from app.exceptions import (
    RomanNumeralAPIException,
    api_exception_handler,
    conversion_exception_handler,
    http_exception_handler,
    unhandled_exception_handler,
)
from app.routers import health, roman
from core.errors import ConversionError

# Configure logging
logging.basicConfig(
    level=settings.log_level_value,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)

API_VERSION = "1.0.0"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    Logs the effective configuration on startup and a final line on shutdown.
    The converter holds no resources, so there is nothing to open or close.
    """
    logger.info(f"Starting Roman Numeral Converter API in {settings.ENVIRONMENT} mode")
    logger.info(f"Log level: {logging.getLevelName(settings.log_level_value)}")
    if settings.static_path:
        logger.info(f"Serving front-end from {settings.static_path}")

    yield

    logger.info("Shutting down Roman Numeral Converter API")


# Create FastAPI application
app = FastAPI(
    title="Roman Numeral Converter API",
    description="""
## Arabic to Roman Numeral Conversion

Converts whole numbers from 1 to 3999 into canonical Roman numerals.

### Quick Start

```bash
curl "http://localhost:8080/romannumeral?query=42"
# {"input":"42","output":"XLII"}
```

Invalid input returns `400` with a plain-text explanation.
""",
    version=API_VERSION,
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
    openapi_tags=[
        {
            "name": "Roman Numerals",
            "description": "Arabic to Roman numeral conversion",
        },
        {
            "name": "Health",
            "description": "API health checks",
        },
    ],
)


# =============================================================================
# Middleware
# =============================================================================

# CORS middleware - allows cross-origin requests from the front-end
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list if settings.is_production else ["*"],
    allow_credentials=True,
    allow_methods=["GET", "OPTIONS"],
    allow_headers=["*"],
)


@app.middleware("http")
async def log_requests(request: Request, call_next):
    """Log method, path, status and duration of every request."""
    start = time.perf_counter()
    response = await call_next(request)
    duration_ms = (time.perf_counter() - start) * 1000

    target = request.url.path
    if request.url.query:
        target += f"?{request.url.query}"
    logger.info(f"{request.method} {target} {response.status_code} {duration_ms:.1f}ms")

    return response


# =============================================================================
# Exception Handlers
# =============================================================================

app.add_exception_handler(RomanNumeralAPIException, api_exception_handler)
app.add_exception_handler(ConversionError, conversion_exception_handler)
app.add_exception_handler(StarletteHTTPException, http_exception_handler)
app.add_exception_handler(Exception, unhandled_exception_handler)


# =============================================================================
# Routers
# =============================================================================

# Conversion endpoint
app.include_router(
    roman.router,
    tags=["Roman Numerals"]
)

# Health check endpoint
app.include_router(
    health.router,
    tags=["Health"]
)
