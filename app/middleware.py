# =============================================================================
# app/middleware.py - Response Header Middleware
# =============================================================================
# Static PDFs under /resources/ get forced headers so browsers and proxies
# treat them as opaque binary: no compression, no content sniffing, byte
# ranges allowed, cacheable forever, readable cross-origin.
# =============================================================================

from fastapi import Request
from fastapi.middleware.cors import CORSMiddleware

RESOURCES_PREFIX = "/resources/"
CLOUD_PDF_PREFIX = "/api/cloud-pdf/"

# Preflight cache lifetime for catalog PDFs
PREFLIGHT_MAX_AGE = 86400

# Shared by the static mount and the /api/pdf route
PDF_RESPONSE_HEADERS: dict[str, str] = {
    "Content-Type": "application/pdf",
    "Content-Encoding": "identity",
    "Content-Transfer-Encoding": "binary",
    "X-Content-Type-Options": "nosniff",
    "Accept-Ranges": "bytes",
    "Cache-Control": "public, max-age=31536000, immutable",
    "Access-Control-Allow-Origin": "*",
}

CORS_PDF_HEADERS: dict[str, str] = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET, HEAD, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type, Accept, Range",
}


def is_static_pdf(path: str) -> bool:
    return RESOURCES_PREFIX in path and path.lower().endswith(".pdf")


async def pdf_headers_middleware(request: Request, call_next):
    """Force binary PDF headers on successful /resources/*.pdf responses."""
    response = await call_next(request)

    if is_static_pdf(request.url.path) and response.status_code < 400:
        for key, value in {**PDF_RESPONSE_HEADERS, **CORS_PDF_HEADERS}.items():
            response.headers[key] = value

    return response


class CatalogCORSMiddleware(CORSMiddleware):
    """
    CORSMiddleware that lets the cloud proxy answer its own preflights.

    OPTIONS requests under /api/cloud-pdf/ reach the route, which replies
    with the fixed catalog CORS headers and a one-day Max-Age. Everything
    else goes through the normal CORS handling.
    """

    async def __call__(self, scope, receive, send) -> None:
        if (
            scope["type"] == "http"
            and scope["method"] == "OPTIONS"
            and scope["path"].startswith(CLOUD_PDF_PREFIX)
        ):
            await self.app(scope, receive, send)
            return
        await super().__call__(scope, receive, send)
