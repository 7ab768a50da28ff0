# =============================================================================
# core/ - Business Logic Package
# =============================================================================
# This package contains the site's business logic:
# - models/: Pydantic schemas for catalogs and contact enquiries
# - services/: Catalog registry and PDF retrieval
# - content.py: Copy rendered on the brochure pages
#
# Routing and templating stay in app/; code here takes its settings and
# HTTP client as arguments so it can be tested in isolation.
# =============================================================================
