# =============================================================================
# tests/conftest.py - Pytest Configuration
# =============================================================================
# This module provides pytest fixtures and configuration for all tests.
#
# Key features:
# - Sets up environment variables before any imports
# - Temporary resources directory with sample PDFs
# - Settings / registry factories for each provider mode
# - httpx.MockTransport clients so cloud storage is never contacted
# - A TestClient with dependency overrides
# =============================================================================

import os
import tempfile
from pathlib import Path

# =============================================================================
# Set up test environment BEFORE any imports
# =============================================================================
# This must happen before importing app.config which loads settings immediately

_STATIC_RESOURCES = tempfile.mkdtemp(prefix="lpsanitary-resources-")

os.environ.setdefault("ENVIRONMENT", "development")
os.environ.setdefault("DEBUG", "false")
os.environ.setdefault("RESOURCES_DIR", _STATIC_RESOURCES)
os.environ.setdefault("STORAGE_PROVIDER", "gdrive-hybrid")

import httpx
import pytest
from fastapi.testclient import TestClient

from app.config import Settings, get_settings
from app.dependencies import get_catalog_registry, get_http_client
from core.services.catalog_service import CatalogRegistry

# Smallest byte string that passes the signature check
PDF_BYTES = b"%PDF-1.4\n1 0 obj\n<< /Type /Catalog >>\nendobj\ntrailer\n<<>>\n%%EOF\n"
HTML_BYTES = b"<!DOCTYPE html><html><body>Sign in</body></html>"

CONFIGURED_URLS = {
    "CLOUDINARY_BASE_URL": "https://res.cloudinary.com/lpsanitary/raw/upload/catalogs",
    "S3_BASE_URL": "https://lpsanitary-catalogs.s3.amazonaws.com/catalogs",
    "GITHUB_BASE_URL": "https://github.com/lpsanitary/lpsanitary-catalogs/raw/main",
}


def pdf_response(content: bytes = PDF_BYTES, **kwargs) -> httpx.Response:
    """Upstream response carrying a PDF."""
    headers = {"content-type": "application/pdf", **kwargs.pop("headers", {})}
    return httpx.Response(200, content=content, headers=headers, **kwargs)


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def resources_dir(tmp_path) -> Path:
    """Resources directory holding one valid catalog PDF."""
    directory = tmp_path / "resources"
    directory.mkdir()
    (directory / "cera.pdf").write_bytes(PDF_BYTES)
    return directory


@pytest.fixture
def static_resources() -> Path:
    """
    The resources directory mounted at /resources.

    The static mount is bound at import time, so files for it must go here.
    """
    return Path(_STATIC_RESOURCES)


@pytest.fixture
def make_settings(resources_dir):
    """Factory for Settings with overrides, rooted at the temp resources dir."""
    def _make(**overrides) -> Settings:
        values = {"RESOURCES_DIR": resources_dir, **overrides}
        return Settings(**values)
    return _make


@pytest.fixture
def make_registry(make_settings):
    """Factory for a CatalogRegistry in a given provider mode."""
    def _make(mode: str = "gdrive-hybrid", seed=None, **overrides) -> CatalogRegistry:
        return CatalogRegistry(make_settings(STORAGE_PROVIDER=mode, **overrides), seed=seed)
    return _make


@pytest.fixture
def requests_seen() -> list[httpx.Request]:
    """Requests received by the mock transport, in order."""
    return []


@pytest.fixture
def make_http_client(requests_seen):
    """
    Factory for an AsyncClient answering through a handler.

    The handler receives each httpx.Request and returns an httpx.Response
    (or raises an httpx error to simulate network failures).
    """
    def _make(handler) -> httpx.AsyncClient:
        def _record(request: httpx.Request) -> httpx.Response:
            requests_seen.append(request)
            return handler(request)
        return httpx.AsyncClient(transport=httpx.MockTransport(_record))
    return _make


@pytest.fixture
def api_client(make_registry, make_http_client):
    """
    Factory for a TestClient wired to a registry and a mock upstream.

    Example:
        client = api_client(mode="local-only")
        client = api_client(handler=lambda request: pdf_response())
    """
    from app.main import app

    def _make(mode: str = "gdrive-hybrid", handler=None, registry=None, **overrides) -> TestClient:
        registry = registry or make_registry(mode, **overrides)
        http_client = make_http_client(handler or (lambda request: pdf_response()))

        app.dependency_overrides[get_settings] = lambda: registry.settings
        app.dependency_overrides[get_catalog_registry] = lambda: registry
        app.dependency_overrides[get_http_client] = lambda: http_client
        return TestClient(app)

    yield _make

    app.dependency_overrides.clear()
