# =============================================================================
# core/services/catalog_service.py - Catalog Registry
# =============================================================================
# Holds the list of downloadable brochures and decides, per file, which
# storage provider serves it and under which URL.
#
# Provider modes (STORAGE_PROVIDER):
#   hybrid          Cloudinary <= CLOUDINARY_MAX_SIZE_MB, S3 above
#   cloudinary-only Cloudinary for everything
#   s3-only         S3 for everything
#   github-hybrid   Cloudinary <= CLOUDINARY_MAX_SIZE_MB, GitHub above
#   gdrive-hybrid   Google Drive viewer for everything
#   local-only      RESOURCES_DIR for everything
# =============================================================================

import logging
from datetime import datetime, timezone

from app.config import Settings
from app.exceptions import CatalogNotFoundError
from core.models.catalog import (
    CatalogEntry,
    CatalogExport,
    CatalogStats,
    ConfigStatus,
    ProviderMode,
    StorageProvider,
)
from lib import providers
from lib.size_analysis import parse_size_to_mb

logger = logging.getLogger(__name__)

# (brand, filename, size) of the brochures published by the shop
SEED_CATALOGS: list[tuple[str, str, str]] = [
    ("Roff", "Roff-Product-Catalogue.pdf", "2 MB"),
    ("Cera", "cera.pdf", "6 MB"),
    ("Nirali", "Nirali.pdf", "8 MB"),
    ("Karoma", "karoma_product_brochure_01.pdf", "21 MB"),
    ("Steellera", "brochure_steelera_2023-24.pdf", "32 MB"),
    ("Jaquar", "JAQUAR_CATLOUGE.pdf", "60 MB"),
    ("Blues", "Blues_Catalougeupdated.pdf", "76 MB"),
]

STUDENT_MODES = {ProviderMode.GITHUB_HYBRID, ProviderMode.GDRIVE_HYBRID}


class CatalogRegistry:
    """
    In-memory catalog list bound to one Settings instance.

    Entries keep insertion order; filenames are unique.

    Example:
        registry = CatalogRegistry(settings)
        entry = registry.get("cera.pdf")
        registry.download_url("cera.pdf")
    """

    def __init__(
        self,
        settings: Settings,
        seed: list[tuple[str, str, str]] | None = None,
    ):
        self.settings = settings
        self.mode = ProviderMode(settings.STORAGE_PROVIDER)
        self._drive_ids: dict[str, str] = dict(settings.GDRIVE_FILE_IDS)
        self._entries: dict[str, CatalogEntry] = {}
        self._seeded: list[str] = []

        for name, filename, size in SEED_CATALOGS if seed is None else seed:
            self.add(self.build_entry(name, filename, size))
            self._seeded.append(filename)

    # =========================================================================
    # Lookup
    # =========================================================================

    def entries(self) -> list[CatalogEntry]:
        return list(self._entries.values())

    def filenames(self) -> list[str]:
        return list(self._entries.keys())

    def find(self, filename: str) -> CatalogEntry | None:
        return self._entries.get(filename)

    def get(self, filename: str) -> CatalogEntry:
        """
        Look up a catalog by filename.

        Raises:
            CatalogNotFoundError: If no entry has that filename
        """
        entry = self._entries.get(filename)
        if entry is None:
            raise CatalogNotFoundError(filename, self.filenames())
        return entry

    # =========================================================================
    # Provider Selection
    # =========================================================================

    def drive_id(self, filename: str) -> str | None:
        """Configured Drive file id for a filename, ignoring placeholders."""
        file_id = self._drive_ids.get(filename)
        if file_id and not providers.is_placeholder("gdrive", file_id):
            return file_id
        return None

    def _drive_urls(self, file_id: str) -> dict[str, str]:
        return providers.drive_urls(
            self.settings.GDRIVE_VIEWER_BASE_URL,
            self.settings.GDRIVE_DOWNLOAD_BASE_URL,
            file_id,
        )

    def _is_small(self, size_mb: float) -> bool:
        return size_mb <= self.settings.CLOUDINARY_MAX_SIZE_MB

    def storage_url(self, filename: str, size_mb: float) -> str:
        """URL a file of the given size is served from in the current mode."""
        s = self.settings
        cloudinary = providers.join_url(s.CLOUDINARY_BASE_URL, filename)

        if self.mode == ProviderMode.CLOUDINARY_ONLY:
            return cloudinary
        if self.mode == ProviderMode.S3_ONLY:
            return providers.join_url(s.S3_BASE_URL, filename)
        if self.mode == ProviderMode.LOCAL_ONLY:
            return providers.local_url(filename)
        if self.mode == ProviderMode.GITHUB_HYBRID:
            return cloudinary if self._is_small(size_mb) else providers.join_url(s.GITHUB_BASE_URL, filename)
        if self.mode == ProviderMode.GDRIVE_HYBRID:
            file_id = self.drive_id(filename)
            if file_id is None:
                logger.warning(f"Google Drive file ID not configured for {filename}")
                return f"#missing-file-id-for-{filename}"
            return self._drive_urls(file_id)["viewer_url"]

        # hybrid
        return cloudinary if self._is_small(size_mb) else providers.join_url(s.S3_BASE_URL, filename)

    def storage_type(self, size_mb: float) -> StorageProvider:
        """Provider a file of the given size is assigned in the current mode."""
        if self.mode == ProviderMode.GDRIVE_HYBRID:
            return StorageProvider.GDRIVE
        if self.mode == ProviderMode.LOCAL_ONLY:
            return StorageProvider.LOCAL
        if self.mode == ProviderMode.CLOUDINARY_ONLY:
            return StorageProvider.CLOUDINARY
        if self.mode == ProviderMode.S3_ONLY:
            return StorageProvider.S3
        if self.mode == ProviderMode.GITHUB_HYBRID:
            return StorageProvider.CLOUDINARY if self._is_small(size_mb) else StorageProvider.GITHUB
        return StorageProvider.CLOUDINARY if self._is_small(size_mb) else StorageProvider.S3

    def cloud_url(self, filename: str, size_mb: float | None = None) -> str:
        """
        Viewer URL for a filename.

        Without a size, Drive is used when an id is known (gdrive-hybrid),
        local files in local-only mode, otherwise S3.
        """
        if not size_mb:
            if self.mode == ProviderMode.GDRIVE_HYBRID:
                file_id = self.drive_id(filename)
                if file_id:
                    return self._drive_urls(file_id)["viewer_url"]
            if self.mode == ProviderMode.LOCAL_ONLY:
                return providers.local_url(filename)
            return providers.join_url(self.settings.S3_BASE_URL, filename)
        return self.storage_url(filename, size_mb)

    def _served_drive_id(self, filename: str) -> str | None:
        """Drive id to use for a filename, unless its entry lives elsewhere."""
        if self.mode != ProviderMode.GDRIVE_HYBRID:
            return None
        entry = self._entries.get(filename)
        if entry is not None and entry.storage != StorageProvider.GDRIVE:
            return None
        return self.drive_id(filename)

    def download_url(self, filename: str) -> str:
        """URL serving the raw PDF bytes (differs from the viewer URL on Drive)."""
        file_id = self._served_drive_id(filename)
        if file_id:
            return self._drive_urls(file_id)["download_url"]
        entry = self._entries.get(filename)
        if entry is not None:
            return entry.cloud_url
        return self.cloud_url(filename)

    def web_url(self, filename: str) -> str:
        """URL for opening the file in the provider's own web interface."""
        file_id = self._served_drive_id(filename)
        if file_id:
            return self._drive_urls(file_id)["web_url"]
        entry = self._entries.get(filename)
        if entry is not None:
            return entry.cloud_url
        return self.cloud_url(filename)

    # =========================================================================
    # Mutation
    # =========================================================================

    def build_entry(
        self,
        name: str,
        filename: str,
        size: str,
        cloud_url: str | None = None,
    ) -> CatalogEntry:
        """
        Create an entry with storage, URL and size warning filled in.

        If `cloud_url` is given it is kept as-is and the provider is inferred
        from its host.
        """
        size_mb = parse_size_to_mb(size)

        if cloud_url:
            detected = providers.detect_provider(cloud_url)
            storage = StorageProvider(detected) if detected else None
        else:
            cloud_url = self.storage_url(filename, size_mb)
            storage = self.storage_type(size_mb)

        return CatalogEntry(
            name=name,
            filename=filename,
            size=size,
            cloud_url=cloud_url,
            storage=storage,
            warning=size_mb > self.settings.LARGE_FILE_WARNING_MB,
        )

    def add(self, entry: CatalogEntry) -> CatalogEntry:
        """Insert an entry, replacing any entry with the same filename."""
        if entry.filename in self._entries:
            logger.info(f"Replacing catalog entry: {entry.filename}")
        self._entries[entry.filename] = entry
        return entry

    def register_drive_file(self, filename: str, file_id: str) -> CatalogEntry | None:
        """
        Record a Google Drive file id for a filename.

        Drive-hosted entries with that filename are rebuilt so their URL
        points at the new file. Returns the refreshed entry, if any.
        """
        self._drive_ids[filename] = file_id
        logger.info(f"Added Google Drive file ID for {filename}: {file_id}")

        entry = self._entries.get(filename)
        if entry is None or entry.storage != StorageProvider.GDRIVE:
            return entry

        return self.add(self.build_entry(entry.name, entry.filename, entry.size))

    # =========================================================================
    # Configuration Status
    # =========================================================================

    def _provider_flags(self) -> dict[str, bool]:
        s = self.settings
        return {
            "cloudinary": not providers.is_placeholder("cloudinary", s.CLOUDINARY_BASE_URL),
            "s3": not providers.is_placeholder("s3", s.S3_BASE_URL),
            "github": not providers.is_placeholder("github", s.GITHUB_BASE_URL),
            # every seeded catalog needs a real Drive id; runtime additions carry their own URL
            "gdrive": all(self.drive_id(filename) for filename in self._seeded),
            "local": s.resources_path.is_dir(),
        }

    def _missing(self, flags: dict[str, bool]) -> list[str]:
        required = {
            ProviderMode.CLOUDINARY_ONLY: ["cloudinary"],
            ProviderMode.S3_ONLY: ["s3"],
            ProviderMode.GITHUB_HYBRID: ["cloudinary", "github"],
            ProviderMode.GDRIVE_HYBRID: ["gdrive"],
            ProviderMode.HYBRID: ["cloudinary", "s3"],
            ProviderMode.LOCAL_ONLY: ["local"],
        }[self.mode]
        labels = {
            "cloudinary": "Cloudinary cloud name",
            "s3": "S3 bucket",
            "github": "GitHub username",
            "gdrive": "Google Drive file IDs",
            "local": "Local resources directory",
        }
        return [labels[name] for name in required if not flags[name]]

    def is_configured(self) -> bool:
        return not self._missing(self._provider_flags())

    def config_status(self) -> ConfigStatus:
        """Report whether the current mode is usable and what is missing."""
        missing = self._missing(self._provider_flags())
        is_student = self.mode in STUDENT_MODES

        if not missing:
            messages = {
                ProviderMode.GITHUB_HYBRID: "Using student-friendly storage (Cloudinary + GitHub)",
                ProviderMode.GDRIVE_HYBRID: "Using Google Drive (perfect for students - no bank details needed!)",
                ProviderMode.HYBRID: "Using hybrid storage (Cloudinary + S3)",
            }
            base_urls = {
                ProviderMode.GDRIVE_HYBRID: "Google Drive",
                ProviderMode.S3_ONLY: self.settings.S3_BASE_URL,
                ProviderMode.LOCAL_ONLY: str(self.settings.resources_path),
            }
            return ConfigStatus(
                status="configured",
                message=messages.get(self.mode, f"Using {self.mode.value} storage"),
                provider=self.mode,
                base_url=base_urls.get(self.mode, self.settings.CLOUDINARY_BASE_URL),
                is_student=is_student,
            )

        if self.mode == ProviderMode.GDRIVE_HYBRID:
            instructions = "Please update Google Drive file IDs (GDRIVE_FILE_IDS)"
        elif self.mode == ProviderMode.LOCAL_ONLY:
            instructions = "Please create RESOURCES_DIR and copy the catalog PDFs into it"
        else:
            instructions = "Please update the cloud storage settings with your storage details"

        return ConfigStatus(
            status="needs-setup",
            message=f"Missing: {', '.join(missing)}",
            provider=self.mode,
            instructions=instructions,
            missing=missing,
            is_student=is_student,
        )

    def stats(self) -> CatalogStats:
        status = self.config_status()
        return CatalogStats(
            configured=status.status == "configured",
            total_catalogs=len(self._entries),
            large_catalogs=sum(1 for e in self._entries.values() if e.warning),
            config_status=status.message,
        )

    def export(self) -> CatalogExport:
        """Snapshot of configuration and catalogs for backups."""
        return CatalogExport(
            export_date=datetime.now(timezone.utc),
            config_status=self.config_status(),
            catalogs=self.entries(),
            stats=self.stats(),
        )
