# =============================================================================
# core/services/pdf_service.py - Catalog PDF Retrieval
# =============================================================================
# Fetches catalog PDFs from cloud storage or the local resources directory:
# - Proxy fetch with a %PDF signature check
# - HEAD probes and URL validation for new catalogs
# - Concurrent availability check of every catalog
# - The delivery fallback chain: local file -> proxy fetch -> redirect
# - Delivery plans listing every way a browser can open a catalog
#
# All network I/O goes through an injected httpx.AsyncClient so callers
# (routes, CLI, tests) decide timeouts and transports.
# =============================================================================

import asyncio
import logging
from dataclasses import dataclass, field
from pathlib import Path

import httpx

from app.exceptions import (
    CloudFetchError,
    InvalidFileTypeError,
    InvalidPdfError,
    LPSanitaryException,
    PdfNotFoundError,
)
from core.models.catalog import (
    CatalogEntry,
    DeliveryMethod,
    DeliveryOption,
    DeliveryPlan,
    StorageProvider,
)
from core.services.catalog_service import CatalogRegistry

logger = logging.getLogger(__name__)

PDF_SIGNATURE = b"%PDF"
PDF_ACCEPT = "application/pdf,*/*"

# Viewer hints understood by browser PDF viewers
VIEWER_FRAGMENT = "#toolbar=1&navpanes=1&scrollbar=1&page=1&view=FitH"


# =============================================================================
# Result Types
# =============================================================================

@dataclass
class FetchedPdf:
    """PDF bytes plus what upstream said about them."""
    content: bytes
    content_type: str
    content_length: str | None = None
    source: str = "cloud-storage"


@dataclass
class Redirect:
    """Delivery fell through to sending the browser straight to storage."""
    url: str
    reason: str


@dataclass
class UrlValidation:
    valid: bool
    error: str | None = None
    size: int | None = None


@dataclass
class CatalogCheckReport:
    """Outcome of probing every catalog URL."""
    total: int
    successful: int = 0
    failed: list[dict] = field(default_factory=list)
    results: list[dict] = field(default_factory=list)

    @property
    def all_passed(self) -> bool:
        return self.successful == self.total


# =============================================================================
# Helpers
# =============================================================================

def has_pdf_signature(data: bytes) -> bool:
    return data[:4] == PDF_SIGNATURE


def describe_signature(data: bytes) -> str:
    """First four bytes as text, for error messages."""
    return data[:4].decode("latin-1")


def is_absolute_http(url: str) -> bool:
    return url.startswith(("http://", "https://"))


def _request_headers(user_agent: str, accept: bool = True) -> dict[str, str]:
    headers = {"User-Agent": user_agent}
    if accept:
        headers["Accept"] = PDF_ACCEPT
    return headers


# =============================================================================
# Cloud Fetch
# =============================================================================

async def fetch_catalog_pdf(
    entry: CatalogEntry,
    url: str,
    client: httpx.AsyncClient,
    user_agent: str,
) -> FetchedPdf:
    """
    Download a catalog PDF from cloud storage.

    Args:
        entry: Catalog being fetched (for logging and errors)
        url: Raw-bytes URL (the registry's download URL)
        client: Shared HTTP client
        user_agent: User-Agent header sent upstream

    Returns:
        FetchedPdf with the full body

    Raises:
        CloudFetchError: Network failure or non-2xx status
        InvalidPdfError: Body does not start with %PDF
    """
    if not is_absolute_http(url):
        raise CloudFetchError(entry.name, url, "Catalog has no usable storage URL")

    logger.info(f"Fetching {entry.name} from cloud storage: {url}")

    try:
        response = await client.get(
            url,
            headers=_request_headers(user_agent),
            follow_redirects=True,
        )
    except httpx.RequestError as e:
        logger.error(f"Failed to fetch {entry.name} from cloud storage: {e}")
        raise CloudFetchError(entry.name, url, str(e) or type(e).__name__)

    if not response.is_success:
        error = f"Cloud storage responded with {response.status_code}: {response.reason_phrase}"
        logger.error(f"Failed to fetch {entry.name}: {error}")
        raise CloudFetchError(entry.name, url, error)

    content = response.content
    if not has_pdf_signature(content):
        signature = describe_signature(content)
        logger.warning(f"Invalid PDF signature for {entry.name}: {signature!r}")
        raise InvalidPdfError(entry.name, url, signature)

    content_type = response.headers.get("content-type", "application/pdf")
    logger.info(
        f"Fetched {entry.name} from cloud storage "
        f"(Content-Type: {content_type}, Size: {len(content)} bytes)"
    )
    return FetchedPdf(
        content=content,
        content_type=content_type,
        content_length=response.headers.get("content-length"),
    )


async def probe_catalog(
    entry: CatalogEntry,
    url: str,
    client: httpx.AsyncClient,
    user_agent: str,
) -> str:
    """
    Check a catalog is reachable with a HEAD request.

    Returns:
        Upstream Content-Length, or "0" when it is not reported

    Raises:
        CloudFetchError: Network failure or non-2xx status
    """
    if not is_absolute_http(url):
        raise CloudFetchError(entry.name, url, "Catalog has no usable storage URL")

    try:
        response = await client.head(
            url,
            headers=_request_headers(user_agent, accept=False),
            follow_redirects=True,
        )
    except httpx.RequestError as e:
        raise CloudFetchError(entry.name, url, str(e) or type(e).__name__)

    if not response.is_success:
        raise CloudFetchError(
            entry.name, url, f"HTTP {response.status_code}: {response.reason_phrase}"
        )

    return response.headers.get("content-length", "0")


async def validate_cloud_url(url: str, client: httpx.AsyncClient) -> UrlValidation:
    """
    Check that a URL answers a HEAD request with something PDF-like.

    Never raises; problems are reported in the result.
    """
    try:
        response = await client.head(
            url,
            headers={"Accept": PDF_ACCEPT},
            follow_redirects=True,
        )
    except httpx.RequestError as e:
        return UrlValidation(valid=False, error=str(e) or type(e).__name__)

    if not response.is_success:
        return UrlValidation(
            valid=False,
            error=f"HTTP {response.status_code}: {response.reason_phrase}",
        )

    content_type = response.headers.get("content-type")
    if content_type and "pdf" not in content_type:
        return UrlValidation(valid=False, error=f"Invalid content type: {content_type}")

    content_length = response.headers.get("content-length")
    size = int(content_length) if content_length and content_length.isdigit() else None
    return UrlValidation(valid=True, size=size)


async def check_all_catalogs(
    registry: CatalogRegistry,
    client: httpx.AsyncClient,
) -> CatalogCheckReport:
    """Validate every catalog's URL concurrently."""
    entries = registry.entries()
    urls = [registry.download_url(e.filename) for e in entries]

    async def _check(url: str) -> UrlValidation:
        if not is_absolute_http(url):
            return UrlValidation(valid=False, error="Catalog has no usable storage URL")
        return await validate_cloud_url(url, client)

    validations = await asyncio.gather(*(_check(url) for url in urls))

    report = CatalogCheckReport(total=len(entries))
    for entry, url, result in zip(entries, urls, validations):
        report.results.append({
            "name": entry.name,
            "success": result.valid,
            "size": result.size,
            "error": result.error,
        })
        if result.valid:
            report.successful += 1
        else:
            report.failed.append({
                "name": entry.name,
                "url": url,
                "error": result.error or "Unknown error",
            })

    logger.info(f"Checked {report.total} catalogs: {report.successful} reachable")
    return report


# =============================================================================
# Local Files
# =============================================================================

def resolve_local_pdf(filename: str, resources_dir: Path) -> Path:
    """
    Map a requested filename to a file inside resources_dir.

    Raises:
        InvalidFileTypeError: Name does not end in .pdf
        PdfNotFoundError: Not a plain file name, or no such file
    """
    if not filename.lower().endswith(".pdf"):
        raise InvalidFileTypeError(filename)

    if Path(filename).name != filename or filename.startswith("."):
        raise PdfNotFoundError(filename)

    path = resources_dir / filename
    if not path.is_file():
        raise PdfNotFoundError(filename)
    return path


def read_local_pdf(filename: str, resources_dir: Path) -> bytes:
    """Read a PDF from the resources directory."""
    path = resolve_local_pdf(filename, resources_dir)
    try:
        return path.read_bytes()
    except OSError as e:
        logger.error(f"Error serving PDF {filename}: {e}")
        raise PdfNotFoundError(filename)


def local_pdf_size(filename: str, resources_dir: Path) -> int:
    """Size in bytes of a PDF in the resources directory."""
    path = resolve_local_pdf(filename, resources_dir)
    try:
        return path.stat().st_size
    except OSError as e:
        logger.error(f"Error reading size of PDF {filename}: {e}")
        raise PdfNotFoundError(filename)


# =============================================================================
# Delivery
# =============================================================================

async def load_catalog_pdf(
    entry: CatalogEntry,
    registry: CatalogRegistry,
    client: httpx.AsyncClient,
) -> FetchedPdf:
    """Bytes of a catalog from wherever its entry says it lives."""
    if entry.storage == StorageProvider.LOCAL:
        content = read_local_pdf(entry.filename, registry.settings.resources_path)
        return FetchedPdf(
            content=content,
            content_type="application/pdf",
            content_length=str(len(content)),
            source="local",
        )

    return await fetch_catalog_pdf(
        entry,
        registry.download_url(entry.filename),
        client,
        registry.settings.FETCH_USER_AGENT,
    )


async def deliver_catalog(
    entry: CatalogEntry,
    registry: CatalogRegistry,
    client: httpx.AsyncClient,
) -> FetchedPdf | Redirect:
    """
    Get a catalog to the visitor, trying each strategy in turn.

    1. Local copy in RESOURCES_DIR (always used for local entries)
    2. Proxy fetch of the storage download URL
    3. Redirect to the direct download URL when the proxy fails

    Raises:
        LPSanitaryException: When no strategy is possible
    """
    resources_dir = registry.settings.resources_path

    try:
        path = resolve_local_pdf(entry.filename, resources_dir)
    except LPSanitaryException:
        if entry.storage == StorageProvider.LOCAL:
            raise
    else:
        content = read_local_pdf(path.name, resources_dir)
        logger.info(f"Serving {entry.name} from local resources")
        return FetchedPdf(
            content=content,
            content_type="application/pdf",
            content_length=str(len(content)),
            source="local",
        )

    try:
        return await load_catalog_pdf(entry, registry, client)
    except (CloudFetchError, InvalidPdfError) as e:
        direct_url = registry.download_url(entry.filename)
        if not is_absolute_http(direct_url):
            raise
        logger.warning(f"Proxy delivery failed for {entry.name}, redirecting: {e.message}")
        return Redirect(url=direct_url, reason=e.code)


def proxy_path(entry: CatalogEntry) -> str:
    """Path on this server that relays the catalog bytes."""
    if entry.storage == StorageProvider.LOCAL:
        return f"/api/pdf/{entry.filename}"
    return f"/api/cloud-pdf/{entry.filename}"


def delivery_plan(entry: CatalogEntry, registry: CatalogRegistry) -> DeliveryPlan:
    """
    Every way a browser can open the catalog, most convenient first.

    Drive entries embed Drive's own preview page; everything else embeds the
    proxied PDF with viewer hints.
    """
    proxied = proxy_path(entry)
    direct = entry.cloud_url
    if entry.storage == StorageProvider.LOCAL or not is_absolute_http(direct):
        direct = proxied

    if entry.storage == StorageProvider.GDRIVE and is_absolute_http(entry.cloud_url):
        embed = entry.cloud_url
    else:
        embed = f"{proxied}{VIEWER_FRAGMENT}"

    download = registry.download_url(entry.filename)
    if not is_absolute_http(download):
        download = proxied

    new_tab = registry.web_url(entry.filename)
    if not is_absolute_http(new_tab):
        new_tab = proxied

    options = [
        DeliveryOption(method=DeliveryMethod.EMBED, url=embed, label="View here"),
        DeliveryOption(method=DeliveryMethod.PROXY, url=proxied, label="Open PDF"),
        DeliveryOption(method=DeliveryMethod.DIRECT, url=direct, label="Direct link"),
        DeliveryOption(method=DeliveryMethod.DOWNLOAD, url=download, label="Download PDF"),
        DeliveryOption(method=DeliveryMethod.NEW_TAB, url=new_tab, label="Open in New Tab"),
    ]
    return DeliveryPlan(catalog=entry, download_name=entry.download_name, options=options)
