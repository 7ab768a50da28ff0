# =============================================================================
# app/main.py - FastAPI Application Entry Point
# =============================================================================
# This is the main entry point for the L P Sanitary website.
# It configures the FastAPI application with middleware, routers, and handlers.
#
# Usage:
#   uvicorn app.main:app --reload
# =============================================================================

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles

from app.config import settings
from app.dependencies import create_http_client, get_catalog_registry
from app.exceptions import LPSanitaryException, lpsanitary_exception_handler
from app.middleware import PREFLIGHT_MAX_AGE, CatalogCORSMiddleware, pdf_headers_middleware
from app.routers import catalogs, debug, health, pages, pdf, setup, viewer
from app.templating import STATIC_DIR

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

    Runs on startup and shutdown:
    - Startup: Open the shared HTTP client, report storage configuration
    - Shutdown: Close the HTTP client
    """
    # Startup
    logger.info(f"Starting {settings.SITE_NAME} in {settings.ENVIRONMENT} mode")
    logger.info(f"CORS origins: {settings.cors_origins_list}")

    status = get_catalog_registry().config_status()
    if status.status == "configured":
        logger.info(f"Catalog storage: {status.message}")
    else:
        logger.warning(f"Catalog storage needs setup ({settings.STORAGE_PROVIDER}): {status.message}")

    app.state.http_client = create_http_client(settings)

    yield

    # Shutdown
    logger.info(f"Shutting down {settings.SITE_NAME}")
    await app.state.http_client.aclose()


# Create FastAPI application
app = FastAPI(
    title="L P Sanitary",
    description="""
## L P Sanitary website and catalog service

Brochure pages for the shop plus delivery of brand catalog PDFs from
Google Drive, Cloudinary, S3, GitHub or the local resources directory.

### Catalog Delivery

| Route | Purpose |
|-------|---------|
| `/catalogs/{filename}/view` | Viewer page with new-tab and download fallbacks |
| `/catalogs/{filename}/download` | PDF attachment, or redirect to storage |
| `/api/cloud-pdf/{filename}` | Proxy of the catalog's storage URL |
| `/api/pdf/{filename}` | PDF from the local resources directory |
| `/resources/{filename}` | Static PDF with forced binary headers |
""",
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
    openapi_tags=[
        {
            "name": "PDF",
            "description": "Catalog PDF bytes, local or proxied from cloud storage",
        },
        {
            "name": "Catalogs",
            "description": "Catalog registry, status, analysis and delivery links",
        },
        {
            "name": "Setup",
            "description": "Storage provider setup helpers",
        },
        {
            "name": "Viewer",
            "description": "Catalog viewer page and downloads",
        },
        {
            "name": "Pages",
            "description": "Website pages and contact form",
        },
        {
            "name": "Debug",
            "description": "Deployment diagnostics",
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

# CORS middleware - allows cross-origin requests
app.add_middleware(
    CatalogCORSMiddleware,
    allow_origins=settings.cors_origins_list if settings.is_production else ["*"],
    allow_credentials=False,
    allow_methods=["GET", "HEAD", "OPTIONS", "POST"],
    allow_headers=["Content-Type", "Accept", "Range"],
    max_age=PREFLIGHT_MAX_AGE,
)

# Binary headers for static PDFs under /resources/
app.middleware("http")(pdf_headers_middleware)


# =============================================================================
# Exception Handlers
# =============================================================================

@app.exception_handler(LPSanitaryException)
async def handle_lpsanitary_exception(request: Request, exc: LPSanitaryException):
    """Handle custom L P Sanitary exceptions."""
    return await lpsanitary_exception_handler(request, exc)


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

# Health check endpoints
app.include_router(
    health.router,
    prefix="/api",
    tags=["Health"]
)

# Catalog PDF endpoints
app.include_router(
    pdf.router,
    prefix="/api",
    tags=["PDF"]
)

# Catalog registry endpoints
app.include_router(
    catalogs.router,
    prefix="/api/catalogs",
    tags=["Catalogs"]
)

# Storage setup helpers
app.include_router(
    setup.router,
    prefix="/api",
    tags=["Setup"]
)

# Diagnostics
app.include_router(
    debug.router,
    prefix="/api",
    tags=["Debug"]
)

# Viewer and download pages
app.include_router(
    viewer.router,
    prefix="/catalogs",
    tags=["Viewer"]
)

# Website pages
app.include_router(
    pages.router,
    tags=["Pages"]
)


# =============================================================================
# Static Files
# =============================================================================

app.mount("/static", StaticFiles(directory=STATIC_DIR, check_dir=False), name="static")
app.mount(
    "/resources",
    StaticFiles(directory=settings.resources_path, check_dir=False),
    name="resources",
)


# =============================================================================
# API Index
# =============================================================================

@app.get("/api", tags=["Root"])
async def api_index():
    """
    API index - returns service info.
    """
    return {
        "name": f"{settings.SITE_NAME} API",
        "version": "1.0.0",
        "docs": "/docs",
        "health": "/api/health",
        "catalogs": "/api/catalogs",
    }
