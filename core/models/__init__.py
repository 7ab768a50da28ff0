# =============================================================================
# core/models/ - Pydantic Data Models
# =============================================================================
# This package contains Pydantic schemas for data validation:
# - catalog.py: Catalog entries, provider modes, config status, delivery plans
# - contact.py: Contact form enquiry
#
# These models define the "contract" between API and clients.
# =============================================================================

# -----------------------------------------------------------------------------
# Catalog Models - Brochures and their storage
# -----------------------------------------------------------------------------
from .catalog import (
    CatalogCreate,
    CatalogEntry,
    CatalogExport,
    CatalogStats,
    ConfigStatus,
    DeliveryMethod,
    DeliveryOption,
    DeliveryPlan,
    DriveFileRegistration,
    ProviderMode,
    StorageProvider,
)

# -----------------------------------------------------------------------------
# Contact Models - Visitor enquiries
# -----------------------------------------------------------------------------
from .contact import ContactMessage

__all__ = [
    # Catalog
    "CatalogCreate",
    "CatalogEntry",
    "CatalogExport",
    "CatalogStats",
    "ConfigStatus",
    "DeliveryMethod",
    "DeliveryOption",
    "DeliveryPlan",
    "DriveFileRegistration",
    "ProviderMode",
    "StorageProvider",
    # Contact
    "ContactMessage",
]
