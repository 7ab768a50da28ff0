# =============================================================================
# core/models/catalog.py - Catalog Schemas
# =============================================================================
# These models describe the downloadable PDF brochures and how they are stored:
# - CatalogEntry: One brochure (name, filename, size, cloud URL, storage)
# - StorageProvider / ProviderMode: Where files live and how that is chosen
# - ConfigStatus / CatalogStats / CatalogExport: Configuration reporting
# - DeliveryOption / DeliveryPlan: The ordered ways a visitor can open a PDF
#
# JSON keeps the "cloudUrl" spelling used by the front end.
# =============================================================================

from datetime import datetime
from enum import Enum
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from lib.size_analysis import parse_size_to_mb


# =============================================================================
# Enums
# =============================================================================

class StorageProvider(str, Enum):
    """Where a single catalog file is hosted."""
    CLOUDINARY = "cloudinary"
    S3 = "s3"
    GITHUB = "github"
    GDRIVE = "gdrive"
    LOCAL = "local"


class ProviderMode(str, Enum):
    """
    Rule set used to assign a StorageProvider to each catalog.

    - hybrid: Cloudinary for small files, S3 for large files
    - cloudinary-only / s3-only: everything in one place
    - github-hybrid: Cloudinary for small files, GitHub for large files
    - gdrive-hybrid: everything through the Google Drive viewer
    - local-only: everything from RESOURCES_DIR
    """
    HYBRID = "hybrid"
    CLOUDINARY_ONLY = "cloudinary-only"
    S3_ONLY = "s3-only"
    GITHUB_HYBRID = "github-hybrid"
    GDRIVE_HYBRID = "gdrive-hybrid"
    LOCAL_ONLY = "local-only"


class DeliveryMethod(str, Enum):
    """Ways a browser can reach a catalog PDF."""
    EMBED = "embed"        # Inline frame in the viewer page
    PROXY = "proxy"        # Bytes relayed by this server
    DIRECT = "direct"      # Link straight to the storage URL
    DOWNLOAD = "download"  # Attachment download
    NEW_TAB = "new-tab"    # Open in a separate tab


# =============================================================================
# Catalog Entry
# =============================================================================

class CatalogEntry(BaseModel):
    """
    One downloadable PDF brochure.

    Example:
        {
            "name": "Cera",
            "filename": "cera.pdf",
            "size": "6 MB",
            "cloudUrl": "https://drive.google.com/file/d/1cMH.../preview",
            "warning": false,
            "storage": "gdrive"
        }
    """

    model_config = ConfigDict(populate_by_name=True)

    name: str = Field(..., min_length=1, description="Brand name shown to visitors")
    filename: str = Field(..., min_length=1, description="PDF filename (lookup key)")
    size: str = Field(..., description="Human readable size, e.g. '21 MB'")
    cloud_url: str = Field(
        ...,
        alias="cloudUrl",
        description="URL the catalog is served from"
    )
    warning: bool = Field(default=False, description="True for large downloads")
    storage: StorageProvider | None = Field(default=None, description="Hosting provider")

    @property
    def size_mb(self) -> float:
        return parse_size_to_mb(self.size)

    @property
    def download_name(self) -> str:
        """Filename offered to the browser when saving the catalog."""
        return f"{self.name}-Catalog.pdf"


class CatalogCreate(BaseModel):
    """
    Request body for adding a catalog hosted at an existing URL.

    The URL is validated with a HEAD request before the entry is stored.
    """
    name: str = Field(..., min_length=1, max_length=100)
    filename: str = Field(..., min_length=5, max_length=255, pattern=r"^[^/\\]+\.pdf$")
    cloud_url: str = Field(..., min_length=1, pattern=r"^https?://")


class DriveFileRegistration(BaseModel):
    """Request body mapping a catalog filename to a Google Drive file id."""
    filename: str = Field(..., min_length=1)
    file_id: str = Field(..., min_length=10, pattern=r"^[A-Za-z0-9_-]+$")


# =============================================================================
# Configuration Reporting
# =============================================================================

class ConfigStatus(BaseModel):
    """
    Whether the selected provider mode has real (non-placeholder) values.

    Example (needs setup):
        {
            "status": "needs-setup",
            "message": "Missing: Cloudinary cloud name, S3 bucket",
            "provider": "hybrid",
            "missing": ["Cloudinary cloud name", "S3 bucket"],
            "is_student": false
        }
    """
    status: Literal["configured", "needs-setup"]
    message: str
    provider: ProviderMode
    base_url: str | None = None
    instructions: str | None = None
    missing: list[str] = Field(default_factory=list)
    is_student: bool = False


class CatalogStats(BaseModel):
    """Counts shown on the admin status endpoint."""
    configured: bool
    total_catalogs: int
    large_catalogs: int
    config_status: str


class CatalogExport(BaseModel):
    """Full configuration snapshot for backups."""
    export_date: datetime
    config_status: ConfigStatus
    catalogs: list[CatalogEntry]
    stats: CatalogStats


# =============================================================================
# Delivery
# =============================================================================

class DeliveryOption(BaseModel):
    """One way of opening a catalog, in fallback order."""
    method: DeliveryMethod
    url: str
    label: str


class DeliveryPlan(BaseModel):
    """Ordered delivery options for one catalog."""
    catalog: CatalogEntry
    download_name: str
    options: list[DeliveryOption]

    def url_for(self, method: DeliveryMethod) -> str | None:
        """Return the URL of the first option using `method`."""
        for option in self.options:
            if option.method == method:
                return option.url
        return None
