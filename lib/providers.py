# =============================================================================
# lib/providers.py - Storage Provider URL Helpers
# =============================================================================
# Pure URL templating for the hosts catalog PDFs can live on:
# - Cloudinary raw uploads, AWS S3, GitHub raw content, Google Drive, local
# - Placeholder detection for unconfigured template values
# - Cloudinary cloud-name checks and example URL generation
# - Setup instructions / shell commands for each provider
#
# No network access happens here; see core/services/pdf_service.py for that.
# =============================================================================

from __future__ import annotations

import re
from urllib.parse import urlparse

LOCAL_URL_PREFIX = "/resources"
DRIVE_WEB_URL = "https://drive.google.com/file/d/{file_id}/view"

# Marker left in each provider's template URL until the operator fills it in
PLACEHOLDER_MARKERS: dict[str, str] = {
    "cloudinary": "your-cloud-name",
    "s3": "your-bucket-name",
    "github": "your-username",
}
GENERIC_PLACEHOLDER = "YOUR_"

# Brand -> filename of the brochures published by the shop
SEED_BROCHURES: dict[str, str] = {
    "Roff": "Roff-Product-Catalogue.pdf",
    "Jaquar": "JAQUAR_CATLOUGE.pdf",
    "Blues": "Blues_Catalougeupdated.pdf",
    "Nirali": "Nirali.pdf",
    "Karoma": "karoma_product_brochure_01.pdf",
    "Cera": "cera.pdf",
    "Steellera": "brochure_steelera_2023-24.pdf",
}

_CLOUDINARY_NAME = re.compile(r"res\.cloudinary\.com/([^/]+)/")


# =============================================================================
# URL Builders
# =============================================================================

def join_url(base_url: str, filename: str) -> str:
    """Append a filename to a base URL, tolerating a trailing slash."""
    return f"{base_url.rstrip('/')}/{filename}"


def local_url(filename: str) -> str:
    return join_url(LOCAL_URL_PREFIX, filename)


def drive_urls(viewer_base: str, download_base: str, file_id: str) -> dict[str, str]:
    """
    Build the three Google Drive URLs for a file id.

    Returns:
        {"viewer_url": ..., "download_url": ..., "web_url": ...}
        viewer_url embeds in an iframe, download_url serves the raw bytes,
        web_url opens Drive's own page.
    """
    return {
        "viewer_url": f"{viewer_base}{file_id}/preview",
        "download_url": f"{download_base}{file_id}",
        "web_url": DRIVE_WEB_URL.format(file_id=file_id),
    }


# =============================================================================
# Configuration Checks
# =============================================================================

def _normalize(value: str) -> str:
    return value.lower().replace("_", "-")


def is_placeholder(provider: str, value: str | None) -> bool:
    """
    True when `value` is empty or still holds a template placeholder.

    Both "your-cloud-name" and "YOUR_CLOUD_NAME" spellings are recognised.
    """
    if not value:
        return True
    if GENERIC_PLACEHOLDER in value:
        return True
    marker = PLACEHOLDER_MARKERS.get(provider)
    return bool(marker) and marker in _normalize(value)


def detect_provider(url: str) -> str | None:
    """
    Guess the storage provider from a URL.

    Returns one of "cloudinary", "s3", "github", "gdrive", "local" or None.
    """
    if url.startswith("/"):
        return "local"

    host = (urlparse(url).hostname or "").lower()
    if host.endswith("cloudinary.com"):
        return "cloudinary"
    if host.endswith("amazonaws.com") or host.endswith("cloudfront.net"):
        return "s3"
    if host in ("github.com", "raw.githubusercontent.com"):
        return "github"
    if host in ("drive.google.com", "docs.google.com"):
        return "gdrive"
    return None


# =============================================================================
# Cloudinary Helpers
# =============================================================================

def cloudinary_base_url(cloud_name: str) -> str:
    return f"https://res.cloudinary.com/{cloud_name}/raw/upload/catalogs"


def generate_cloudinary_urls(cloud_name: str) -> dict[str, str]:
    """Example URLs for every published brochure under a cloud name."""
    base_url = cloudinary_base_url(cloud_name)
    return {brand: join_url(base_url, filename) for brand, filename in SEED_BROCHURES.items()}


def validate_cloud_name(cloud_name: str | None) -> tuple[bool, str]:
    """
    Check the format of a Cloudinary cloud name.

    Returns:
        (valid, message)
    """
    if not cloud_name or is_placeholder("cloudinary", cloud_name):
        return False, 'Please replace "your-cloud-name" with your actual Cloudinary cloud name'

    if len(cloud_name) < 3:
        return False, (
            "Cloud name seems too short. Please check your Cloudinary dashboard "
            "for the correct cloud name."
        )

    if " " in cloud_name or "http" in cloud_name:
        return False, 'Cloud name should be just the name, not a full URL. Example: "dk1a2b3c4d"'

    return True, "Cloud name format looks correct"


def extract_cloud_name(url: str) -> str | None:
    """Pull the cloud name out of a res.cloudinary.com URL."""
    match = _CLOUDINARY_NAME.search(url)
    return match.group(1) if match else None


# =============================================================================
# Setup Instructions
# =============================================================================

SETUP_INSTRUCTIONS: dict[str, dict] = {
    "aws": {
        "steps": [
            "1. Create an S3 bucket in AWS",
            "2. Upload your PDF files to the bucket",
            "3. Make the bucket publicly readable or set up CloudFront",
            "4. Set S3_BASE_URL to your S3/CloudFront URL",
            '5. Set STORAGE_PROVIDER to "s3-only" or "hybrid"',
        ],
        "example": "https://my-catalogs.s3.amazonaws.com/catalogs",
    },
    "google": {
        "steps": [
            "1. Upload your PDF files to Google Drive",
            '2. Share each file as "Anyone with the link"',
            "3. Copy the FILE_ID from each sharing link",
            "4. Set GDRIVE_FILE_IDS to a JSON object of filename -> FILE_ID",
            '5. Set STORAGE_PROVIDER to "gdrive-hybrid"',
        ],
        "example": "https://drive.google.com/file/d/FILE_ID/view",
    },
    "cloudinary": {
        "steps": [
            "1. Sign up for Cloudinary account",
            '2. Upload PDFs to a "catalogs" folder',
            "3. Set CLOUDINARY_BASE_URL to your Cloudinary URL",
            '4. Set STORAGE_PROVIDER to "cloudinary-only"',
        ],
        "example": "https://res.cloudinary.com/my-account/raw/upload/catalogs",
    },
}

_SETUP_COMMANDS: dict[str, list[str]] = {
    "aws": [
        "aws s3 mb s3://your-catalogs-bucket",
        'aws s3 cp public/resources/ s3://your-catalogs-bucket/catalogs/ --recursive --include="*.pdf"',
        "aws s3api put-bucket-policy --bucket your-catalogs-bucket --policy file://bucket-policy.json",
    ],
    "google": [
        "gsutil mb gs://your-catalogs-bucket",
        "gsutil cp -r public/resources/*.pdf gs://your-catalogs-bucket/catalogs/",
        "gsutil iam ch allUsers:objectViewer gs://your-catalogs-bucket",
    ],
    "azure": [
        "az storage account create --name yourstorageaccount --resource-group yourgroup",
        "az storage container create --name catalogs --account-name yourstorageaccount",
        'az storage blob upload-batch -d catalogs -s public/resources --pattern "*.pdf"',
    ],
    "cloudinary": [
        "# Use Cloudinary upload widget or API",
        '# Upload PDFs to "catalogs" folder',
        "# Get public URLs for each PDF",
    ],
}


def setup_commands(provider: str) -> list[str]:
    """Shell commands to create storage and upload catalogs; [] if unknown."""
    return list(_SETUP_COMMANDS.get(provider, []))


def setup_providers() -> list[str]:
    """Providers with setup steps or commands."""
    return sorted(set(SETUP_INSTRUCTIONS) | set(_SETUP_COMMANDS))
