# =============================================================================
# app/routers/ - Route Definitions
# =============================================================================
# This package contains FastAPI routers organized by feature:
# - health.py: Health check endpoints
# - pdf.py: Local and cloud-proxied catalog PDFs
# - catalogs.py: Catalog registry inspection and management
# - setup.py: Storage provider setup helpers
# - viewer.py: Catalog viewer page and download
# - pages.py: Brochure site pages and contact form
# - debug.py: Deployment diagnostics
#
# Each router is mounted in main.py with a URL prefix.
# =============================================================================

from . import health
from . import pdf
from . import catalogs
from . import setup
from . import viewer
from . import pages
from . import debug

__all__ = [
    "health",
    "pdf",
    "catalogs",
    "setup",
    "viewer",
    "pages",
    "debug",
]
