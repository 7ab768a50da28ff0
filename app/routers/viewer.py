# =============================================================================
# app/routers/viewer.py - Catalog Viewer and Download
# =============================================================================
# Browser-facing catalog routes:
# - GET /catalogs/{filename}/view      - Page embedding the PDF in a frame,
#                                        with new-tab and download fallbacks
# - GET /catalogs/{filename}/download  - The PDF as an attachment, or a
#                                        redirect to storage if proxying fails
# =============================================================================

import logging

from fastapi import APIRouter, Request
from fastapi.responses import RedirectResponse, Response

from app.dependencies import HttpClientDep, RegistryDep
from app.templating import templates
from core.models.catalog import DeliveryMethod
from core.services.pdf_service import Redirect, deliver_catalog, delivery_plan

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/{filename}/view")
async def view_catalog(filename: str, request: Request, registry: RegistryDep):
    """
    Render the catalog viewer page.

    Raises:
        CatalogNotFoundError: 404 for an unknown filename
    """
    entry = registry.get(filename)
    plan = delivery_plan(entry, registry)

    return templates.TemplateResponse(
        request,
        "viewer.html",
        {
            "catalog": entry,
            "plan": plan,
            "embed_url": plan.url_for(DeliveryMethod.EMBED),
            "new_tab_url": plan.url_for(DeliveryMethod.NEW_TAB),
            "download_url": f"/catalogs/{entry.filename}/download",
        },
    )


@router.get("/{filename}/download")
async def download_catalog(filename: str, registry: RegistryDep, client: HttpClientDep):
    """
    Download a catalog.

    Serves the bytes as an attachment named "<Brand>-Catalog.pdf" when they
    can be read locally or proxied; otherwise redirects (307) to storage.
    """
    entry = registry.get(filename)
    result = await deliver_catalog(entry, registry, client)

    if isinstance(result, Redirect):
        logger.info(f"Redirecting download of {entry.name} to {result.url} ({result.reason})")
        return RedirectResponse(url=result.url, status_code=307)

    return Response(
        content=result.content,
        media_type="application/pdf",
        headers={
            "Content-Disposition": f'attachment; filename="{entry.download_name}"',
            "Content-Length": str(len(result.content)),
            "X-PDF-Source": result.source,
            "X-Content-Type-Options": "nosniff",
        },
    )
