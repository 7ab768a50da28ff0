# =============================================================================
# tests/ - Test Suite
# =============================================================================
# This package contains all tests for the L P Sanitary site:
# - test_size_analysis.py: Size parsing, formatting and hosting advice
# - test_providers.py: Provider URL templating and placeholder checks
# - test_catalog_service.py: Catalog registry and provider modes
# - test_pdf_service.py: Cloud fetch, probes, local files and delivery
# - test_pdf_routes.py: /api/pdf and /api/cloud-pdf endpoints
# - test_catalog_routes.py: Catalog registry and setup endpoints
# - test_pages.py: Site pages, contact form, viewer and downloads
# - test_diagnostics.py: Static PDF headers, debug and health endpoints
# - test_cli.py: Operator CLI
#
# Run tests with: pytest
# =============================================================================
