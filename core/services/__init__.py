# =============================================================================
# core/services/__init__.py - Service Layer Exports
# =============================================================================

from .catalog_service import CatalogRegistry
from . import pdf_service

__all__ = [
    "CatalogRegistry",
    "pdf_service",
]
