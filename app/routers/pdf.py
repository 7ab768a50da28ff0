# =============================================================================
# app/routers/pdf.py - Catalog PDF Endpoints
# =============================================================================
# Serves catalog PDF bytes to the browser:
# - /api/pdf/{filename}: a file from RESOURCES_DIR
# - /api/cloud-pdf/{filename}: proxy of the catalog's cloud storage URL
#   (GET for the bytes, HEAD for an availability probe, OPTIONS for CORS)
#
# Bytes are returned with fixed binary headers so browsers, CDNs and
# corporate proxies neither re-encode nor sniff them.
# =============================================================================

import logging

from fastapi import APIRouter
from fastapi.responses import Response

from app.dependencies import HttpClientDep, RegistryDep, SettingsDep
from app.exceptions import LPSanitaryException, StorageNotConfiguredError
from app.middleware import CORS_PDF_HEADERS, PDF_RESPONSE_HEADERS, PREFLIGHT_MAX_AGE
from core.models.catalog import StorageProvider
from core.services.catalog_service import CatalogRegistry
from core.services.pdf_service import (
    load_catalog_pdf,
    local_pdf_size,
    probe_catalog,
    read_local_pdf,
)

logger = logging.getLogger(__name__)

router = APIRouter()

PDF_MEDIA_TYPE = "application/pdf"


def _require_configured(registry: CatalogRegistry) -> None:
    """
    Raises:
        StorageNotConfiguredError: Provider mode still has placeholder values
    """
    status = registry.config_status()
    if status.status != "configured":
        logger.warning(f"Catalog requested but storage is not configured: {status.message}")
        raise StorageNotConfiguredError(status.message, status.missing, status.provider.value)


# =============================================================================
# Local Files
# =============================================================================

@router.get("/pdf/{filename}")
async def get_local_pdf(filename: str, settings: SettingsDep):
    """
    Serve a PDF from the resources directory.

    Raises:
        InvalidFileTypeError: 400 if the name does not end in .pdf
        PdfNotFoundError: 404 if the file is missing or unreadable
    """
    content = read_local_pdf(filename, settings.resources_path)
    logger.debug(f"Serving local PDF {filename} ({len(content)} bytes)")

    headers = {
        **PDF_RESPONSE_HEADERS,
        "Content-Length": str(len(content)),
        "Content-Disposition": f'inline; filename="{filename}"',
        "Vary": "Accept-Encoding",
    }
    return Response(content=content, media_type=PDF_MEDIA_TYPE, headers=headers)


# =============================================================================
# Cloud Proxy
# =============================================================================

@router.head("/cloud-pdf/{filename}")
async def head_cloud_pdf(filename: str, registry: RegistryDep, client: HttpClientDep):
    """
    Probe a catalog without downloading it.

    Errors are reported by status code only since HEAD responses have no body.
    """
    try:
        _require_configured(registry)
        entry = registry.get(filename)

        if entry.storage == StorageProvider.LOCAL:
            content_length = str(local_pdf_size(entry.filename, registry.settings.resources_path))
            source = "local"
        else:
            content_length = await probe_catalog(
                entry,
                registry.download_url(entry.filename),
                client,
                registry.settings.FETCH_USER_AGENT,
            )
            source = "cloud-storage"
    except LPSanitaryException as e:
        logger.info(f"HEAD {filename} failed: {e.code}")
        return Response(status_code=e.status_code)

    return Response(
        status_code=200,
        headers={
            "Content-Type": PDF_MEDIA_TYPE,
            "Content-Length": content_length,
            "X-PDF-Source": source,
            "X-Catalog-Name": entry.name,
            "Access-Control-Allow-Origin": "*",
        },
    )


@router.get("/cloud-pdf/{filename}")
async def get_cloud_pdf(filename: str, registry: RegistryDep, client: HttpClientDep):
    """
    Relay a catalog PDF from its storage provider.

    Raises:
        StorageNotConfiguredError: 501 when the provider mode needs setup
        CatalogNotFoundError: 404 for an unknown filename
        CloudFetchError: 502 when storage is unreachable or errors
        InvalidPdfError: 422 when storage returns something other than a PDF
    """
    _require_configured(registry)
    entry = registry.get(filename)

    pdf = await load_catalog_pdf(entry, registry, client)

    headers = {
        "Content-Length": str(len(pdf.content)),
        "Content-Disposition": f'inline; filename="{entry.download_name}"',
        "Cache-Control": PDF_RESPONSE_HEADERS["Cache-Control"],
        **CORS_PDF_HEADERS,
        "X-Content-Type-Options": "nosniff",
        "Accept-Ranges": "bytes",
        "X-PDF-Source": pdf.source,
        "X-Catalog-Name": entry.name,
        "X-File-Size": entry.size,
    }
    return Response(content=pdf.content, media_type=PDF_MEDIA_TYPE, headers=headers)


@router.options("/cloud-pdf/{filename}")
async def options_cloud_pdf(filename: str):
    """CORS preflight for the cloud proxy."""
    return Response(
        status_code=200,
        headers={**CORS_PDF_HEADERS, "Access-Control-Max-Age": str(PREFLIGHT_MAX_AGE)},
    )
