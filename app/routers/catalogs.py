# =============================================================================
# app/routers/catalogs.py - Catalog Management Endpoints
# =============================================================================
# Endpoints for inspecting and managing the catalog registry:
# - GET  /catalogs                   - All entries plus configuration status
# - GET  /catalogs/status            - Whether the provider mode is usable
# - GET  /catalogs/stats             - Counts for dashboards
# - GET  /catalogs/export            - Snapshot for backups
# - GET  /catalogs/analysis          - Size analysis and hosting advice
# - GET  /catalogs/check             - Probe every catalog URL
# - POST /catalogs                   - Add a catalog hosted at a URL
# - POST /catalogs/drive-files       - Register a Google Drive file id
# - GET  /catalogs/{filename}/links  - Delivery plan for one catalog
# =============================================================================

import logging
from dataclasses import asdict
from typing import Any

from fastapi import APIRouter
from pydantic import BaseModel

from app.dependencies import HttpClientDep, RegistryDep
from app.exceptions import CatalogValidationError
from core.models.catalog import (
    CatalogCreate,
    CatalogEntry,
    CatalogExport,
    CatalogStats,
    ConfigStatus,
    DeliveryPlan,
    DriveFileRegistration,
)
from core.services.pdf_service import check_all_catalogs, delivery_plan, validate_cloud_url
from lib.size_analysis import (
    analyze_all,
    compression_commands,
    format_file_size,
    setup_instructions,
    storage_recommendation,
)

logger = logging.getLogger(__name__)

router = APIRouter()


# =============================================================================
# Response Models
# =============================================================================

class CatalogListResponse(BaseModel):
    """Catalog list with the provider status it was built under."""
    catalogs: list[CatalogEntry]
    config: ConfigStatus


class AnalysisResponse(BaseModel):
    analysis: dict[str, Any]
    recommendation: dict[str, Any]
    setup_steps: list[str]
    compression_commands: list[str]


class CheckResponse(BaseModel):
    """Result of probing every catalog URL."""
    total: int
    successful: int
    all_passed: bool
    failed: list[dict[str, Any]]
    results: list[dict[str, Any]]


class DriveFileResponse(BaseModel):
    filename: str
    file_id: str
    catalog: CatalogEntry | None = None


# =============================================================================
# Read Endpoints
# =============================================================================

@router.get("", response_model=CatalogListResponse)
async def list_catalogs(registry: RegistryDep):
    """List every catalog in registry order."""
    return CatalogListResponse(
        catalogs=registry.entries(),
        config=registry.config_status(),
    )


@router.get("/status", response_model=ConfigStatus)
async def get_config_status(registry: RegistryDep):
    """Report whether the selected storage provider is configured."""
    return registry.config_status()


@router.get("/stats", response_model=CatalogStats)
async def get_catalog_stats(registry: RegistryDep):
    return registry.stats()


@router.get("/export", response_model=CatalogExport)
async def export_catalogs(registry: RegistryDep):
    """Export configuration, catalogs and stats in one document."""
    return registry.export()


@router.get("/analysis", response_model=AnalysisResponse)
async def analyze_catalogs(registry: RegistryDep):
    """
    Size analysis of the catalog set.

    Returns per-file recommendations, the overall hosting strategy, setup
    steps for that strategy and Ghostscript commands for compressible files.
    """
    analysis = analyze_all(registry.entries())
    recommendation = storage_recommendation(analysis)

    return AnalysisResponse(
        analysis=analysis.to_dict(),
        recommendation=recommendation.to_dict(),
        setup_steps=setup_instructions(recommendation),
        compression_commands=compression_commands(analysis.files),
    )


@router.get("/check", response_model=CheckResponse)
async def check_catalogs(registry: RegistryDep, client: HttpClientDep):
    """Probe every catalog URL with a HEAD request."""
    report = await check_all_catalogs(registry, client)
    return CheckResponse(**asdict(report), all_passed=report.all_passed)


# =============================================================================
# Write Endpoints
# =============================================================================

@router.post("", response_model=CatalogEntry, status_code=201)
async def add_catalog(request: CatalogCreate, registry: RegistryDep, client: HttpClientDep):
    """
    Add a catalog hosted at an existing URL.

    The URL is checked with a HEAD request first; the reported
    Content-Length becomes the catalog size.

    Raises:
        CatalogValidationError: 400 if the URL is unreachable or not a PDF
    """
    validation = await validate_cloud_url(request.cloud_url, client)
    if not validation.valid:
        logger.warning(f"Rejected catalog {request.filename}: {validation.error}")
        raise CatalogValidationError(request.cloud_url, validation.error or "Unknown error")

    size = format_file_size(validation.size) if validation.size else "Unknown"
    entry = registry.build_entry(request.name, request.filename, size, request.cloud_url)
    registry.add(entry)

    logger.info(f"Added catalog {entry.name} ({entry.filename}, {entry.size})")
    return entry


@router.post("/drive-files", response_model=DriveFileResponse)
async def register_drive_file(request: DriveFileRegistration, registry: RegistryDep):
    """Map a catalog filename to a Google Drive file id."""
    entry = registry.register_drive_file(request.filename, request.file_id)
    return DriveFileResponse(filename=request.filename, file_id=request.file_id, catalog=entry)


# =============================================================================
# Delivery
# =============================================================================

@router.get("/{filename}/links", response_model=DeliveryPlan)
async def get_catalog_links(filename: str, registry: RegistryDep):
    """
    Every way to open a catalog, in fallback order.

    Raises:
        CatalogNotFoundError: 404 for an unknown filename
    """
    entry = registry.get(filename)
    return delivery_plan(entry, registry)
