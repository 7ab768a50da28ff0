# =============================================================================
# app/config.py - Application Settings
# =============================================================================
# This module loads configuration from environment variables using pydantic-settings.
# It provides a single Settings class with all configuration values.
#
# Usage:
#   from app.config import settings
#   print(settings.STORAGE_PROVIDER)
#
# Environment variables are loaded from:
# 1. System environment variables
# 2. .env file in project root (if exists)
#
# Complex values (GDRIVE_FILE_IDS) are given as JSON, e.g.
#   GDRIVE_FILE_IDS='{"cera.pdf": "1cMH0C-..."}'
# =============================================================================

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


ProviderModeName = Literal[
    "hybrid",
    "cloudinary-only",
    "s3-only",
    "github-hybrid",
    "gdrive-hybrid",
    "local-only",
]


# Drive file ids of the published brochures.
# Taken from sharing links: https://drive.google.com/file/d/FILE_ID/view
DEFAULT_GDRIVE_FILE_IDS: dict[str, str] = {
    "Roff-Product-Catalogue.pdf": "1s6Rv4jPIVIb_cVqxR2tkfWcFCBikNHhR",
    "cera.pdf": "1cMH0C-rAOlo6ULexIyhAgIhh5tjEGtIp",
    "Nirali.pdf": "16nPip-_XEYtOW1fWaAZZXMPZ7nE_i79l",
    "karoma_product_brochure_01.pdf": "1GOnHG1rNzElbP5M-bb8m0rMVAbwj5GgM",
    "brochure_steelera_2023-24.pdf": "1qJBB3YbFacMBpGihDHDDFU6ebN-CYDsu",
    "JAQUAR_CATLOUGE.pdf": "1byNkyNTRiHNGXV_jwBXtfxNniwQ6Y_i7",
    "Blues_Catalougeupdated.pdf": "1qGSxaHy7yXzyFFsB8olylXgiNMxhMUox",
}


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Uses pydantic-settings to:
    - Automatically load from .env file
    - Validate types and constraints
    - Provide sensible defaults for development

    All settings are accessed via the global `settings` instance.
    """

    # -------------------------------------------------------------------------
    # Application Settings
    # -------------------------------------------------------------------------

    ENVIRONMENT: Literal["development", "staging", "production"] = Field(
        default="development",
        description="Current environment"
    )

    DEBUG: bool = Field(
        default=False,
        description="Enable debug mode (verbose logging)"
    )

    API_HOST: str = Field(
        default="0.0.0.0",
        description="Host to bind the web server to"
    )

    API_PORT: int = Field(
        default=8000,
        ge=1,
        le=65535,
        description="Port for the web server"
    )

    # CORS origins (comma-separated string that gets parsed)
    CORS_ORIGINS: str = Field(
        default="*",
        description="Allowed CORS origins (comma-separated)"
    )

    SITE_NAME: str = Field(
        default="L P Sanitary",
        description="Business name shown in page titles"
    )

    # -------------------------------------------------------------------------
    # Catalog Storage
    # -------------------------------------------------------------------------
    # Small files (<= CLOUDINARY_MAX_SIZE_MB) go to Cloudinary in the hybrid
    # modes; large files go to S3 or GitHub. gdrive-hybrid serves everything
    # from Google Drive, local-only from RESOURCES_DIR.

    STORAGE_PROVIDER: ProviderModeName = Field(
        default="gdrive-hybrid",
        description="Provider mode used to assign storage to catalogs"
    )

    CLOUDINARY_BASE_URL: str = Field(
        default="https://res.cloudinary.com/your-cloud-name/raw/upload/catalogs",
        description="Cloudinary raw upload folder holding the catalogs"
    )

    CLOUDINARY_MAX_SIZE_MB: float = Field(
        default=10,
        gt=0,
        description="Largest file (MB) assigned to Cloudinary (free tier limit)"
    )

    S3_BASE_URL: str = Field(
        default="https://your-bucket-name.s3.amazonaws.com/catalogs",
        description="S3 bucket (or CloudFront) folder holding the catalogs"
    )

    GITHUB_BASE_URL: str = Field(
        default="https://github.com/your-username/lpsanitary-catalogs/raw/main",
        description="GitHub raw content root holding large catalogs"
    )

    GDRIVE_VIEWER_BASE_URL: str = Field(
        default="https://drive.google.com/file/d/",
        description="Prefix for Google Drive inline viewer URLs"
    )

    GDRIVE_DOWNLOAD_BASE_URL: str = Field(
        default="https://drive.google.com/uc?export=download&id=",
        description="Prefix for Google Drive direct download URLs"
    )

    GDRIVE_FILE_IDS: dict[str, str] = Field(
        default_factory=lambda: dict(DEFAULT_GDRIVE_FILE_IDS),
        description="Mapping of catalog filename to Google Drive file id"
    )

    RESOURCES_DIR: Path = Field(
        default=Path("public/resources"),
        description="Directory with locally hosted catalog PDFs"
    )

    LARGE_FILE_WARNING_MB: float = Field(
        default=20,
        gt=0,
        description="Catalogs larger than this are flagged with a size warning"
    )

    # -------------------------------------------------------------------------
    # Upstream Fetch Settings
    # -------------------------------------------------------------------------

    FETCH_TIMEOUT_SECONDS: float = Field(
        default=30.0,
        gt=0,
        le=300,
        description="Timeout for requests to cloud storage"
    )

    FETCH_USER_AGENT: str = Field(
        default="Mozilla/5.0 (compatible; LPSanitary-Bot/1.0)",
        description="User-Agent sent to cloud storage"
    )

    # -------------------------------------------------------------------------
    # Pydantic Settings Configuration
    # -------------------------------------------------------------------------

    model_config = SettingsConfigDict(
        # Load from .env file in project root
        env_file=".env",
        env_file_encoding="utf-8",
        # Treat empty variables as unset
        env_ignore_empty=True,
        # Case-sensitive environment variable names
        case_sensitive=True,
    )

    # -------------------------------------------------------------------------
    # Computed Properties
    # -------------------------------------------------------------------------

    @property
    def cors_origins_list(self) -> list[str]:
        """
        Parse CORS_ORIGINS string into a list.

        Example: "http://localhost:3000, https://lpsanitary.in" -> ["http://localhost:3000", "https://lpsanitary.in"]
        """
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",") if origin.strip()]

    @property
    def resources_path(self) -> Path:
        """RESOURCES_DIR resolved against the working directory."""
        return self.RESOURCES_DIR.expanduser().resolve()

    @property
    def is_development(self) -> bool:
        """Check if running in development mode."""
        return self.ENVIRONMENT == "development"

    @property
    def is_production(self) -> bool:
        """Check if running in production mode."""
        return self.ENVIRONMENT == "production"


@lru_cache
def get_settings() -> Settings:
    """
    Get cached Settings instance.

    Using lru_cache ensures we only parse .env and validate once,
    not on every access.

    Returns:
        Settings: The application settings instance
    """
    return Settings()


# Global settings instance for easy importing
# Usage: from app.config import settings
settings = get_settings()
