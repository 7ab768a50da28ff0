# =============================================================================
# app/dependencies.py - Shared Dependencies
# =============================================================================
# FastAPI dependency injection for shared resources.
# These are injected into route handlers using Depends().
#
# Tests replace them through app.dependency_overrides.
# =============================================================================

from functools import lru_cache
from typing import Annotated

import httpx
from fastapi import Depends, Request

from app.config import Settings, get_settings
from core.services.catalog_service import CatalogRegistry


@lru_cache
def get_catalog_registry() -> CatalogRegistry:
    """
    Get the process-wide catalog registry.

    Built once from the application settings so runtime additions
    (POST /api/catalogs) persist for the life of the process.
    """
    return CatalogRegistry(get_settings())


def create_http_client(settings: Settings) -> httpx.AsyncClient:
    """HTTP client used for every request to cloud storage."""
    return httpx.AsyncClient(
        timeout=settings.FETCH_TIMEOUT_SECONDS,
        headers={"User-Agent": settings.FETCH_USER_AGENT},
    )


async def get_http_client(request: Request) -> httpx.AsyncClient:
    """
    Get the shared HTTP client.

    The client is opened in the application lifespan and stored on app.state.
    """
    return request.app.state.http_client


# Type aliases for dependency injection
SettingsDep = Annotated[Settings, Depends(get_settings)]
RegistryDep = Annotated[CatalogRegistry, Depends(get_catalog_registry)]
HttpClientDep = Annotated[httpx.AsyncClient, Depends(get_http_client)]
