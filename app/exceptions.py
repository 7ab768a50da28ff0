# =============================================================================
# app/exceptions.py - Custom Exception Handlers
# =============================================================================
# Centralized exception handling for the site and catalog API.
# Errors tell HOW to fix, not just WHAT failed.
# =============================================================================

from typing import Any

from fastapi import Request
from fastapi.responses import JSONResponse


class LPSanitaryException(Exception):
    """
    Base exception for the L P Sanitary site.

    All custom exceptions inherit from this class.
    Provides structured error responses with actionable suggestions.
    """

    def __init__(
        self,
        message: str,
        code: str = "LPSANITARY_ERROR",
        status_code: int = 500,
        suggestion: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.status_code = status_code
        self.suggestion = suggestion
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to API response dict."""
        result = {
            "detail": self.message,
            "code": self.code,
        }
        if self.suggestion:
            result["suggestion"] = self.suggestion
        if self.details:
            result["details"] = self.details
        return result


# =============================================================================
# Catalog Exceptions
# =============================================================================

class CatalogNotFoundError(LPSanitaryException):
    """Raised when no catalog entry has the requested filename."""

    def __init__(self, filename: str, available: list[str] | None = None):
        super().__init__(
            message=f"Catalog not found: {filename}",
            code="CATALOG_NOT_FOUND",
            status_code=404,
            suggestion="Use one of the filenames listed in available_catalogs",
            details={"filename": filename, "available_catalogs": available or []}
        )


class StorageNotConfiguredError(LPSanitaryException):
    """Raised when the selected storage provider still has placeholder values."""

    def __init__(self, message: str, missing: list[str] | None = None, provider: str | None = None):
        super().__init__(
            message=f"Cloud storage not configured: {message}",
            code="STORAGE_NOT_CONFIGURED",
            status_code=501,
            suggestion="Set the storage URLs (or GDRIVE_FILE_IDS) for the selected STORAGE_PROVIDER",
            details={
                "status": "needs-setup",
                "provider": provider,
                "missing": missing or [],
            }
        )


class CatalogValidationError(LPSanitaryException):
    """Raised when a new catalog URL does not point at a reachable PDF."""

    def __init__(self, url: str, error: str):
        super().__init__(
            message=f"URL validation failed: {error}",
            code="CATALOG_VALIDATION_FAILED",
            status_code=400,
            suggestion="Check that the URL is public and serves a PDF",
            details={"url": url, "error": error}
        )


# =============================================================================
# PDF Exceptions
# =============================================================================

class CloudFetchError(LPSanitaryException):
    """Raised when cloud storage cannot be reached or answers with an error."""

    def __init__(self, catalog: str, url: str, error: str):
        super().__init__(
            message=f"Cloud storage fetch failed: {error}",
            code="CLOUD_FETCH_FAILED",
            status_code=502,
            suggestion="Please check cloud storage URL and CORS configuration",
            details={"catalog": catalog, "cloud_url": url, "error": error}
        )


class InvalidPdfError(LPSanitaryException):
    """Raised when downloaded bytes do not start with the %PDF signature."""

    def __init__(self, catalog: str, url: str, signature: str):
        super().__init__(
            message=f"File does not appear to be a valid PDF (signature: {signature})",
            code="INVALID_PDF",
            status_code=422,
            suggestion="Make sure the storage URL serves the raw PDF, not a preview page",
            details={"catalog": catalog, "cloud_url": url, "signature": signature}
        )


class InvalidFileTypeError(LPSanitaryException):
    """Raised when a non-PDF file is requested."""

    def __init__(self, filename: str):
        super().__init__(
            message="Only PDF files are allowed",
            code="INVALID_FILE_TYPE",
            status_code=400,
            suggestion="Request a filename ending in .pdf",
            details={"filename": filename}
        )


class PdfNotFoundError(LPSanitaryException):
    """Raised when a local PDF cannot be read."""

    def __init__(self, filename: str):
        super().__init__(
            message="PDF file not found or could not be read",
            code="PDF_NOT_FOUND",
            status_code=404,
            suggestion="Check that the file exists in RESOURCES_DIR",
            details={"filename": filename}
        )


# =============================================================================
# Exception Handlers
# =============================================================================

async def lpsanitary_exception_handler(
    request: Request,
    exc: LPSanitaryException
) -> JSONResponse:
    """
    Convert LPSanitaryException to JSON response.

    Returns structured error with:
    - detail: Human-readable message
    - code: Machine-readable error code
    - suggestion: How to fix (if available)
    - details: Additional context
    """
    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_dict()
    )
