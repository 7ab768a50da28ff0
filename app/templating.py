# =============================================================================
# app/templating.py - Jinja2 Template Environment
# =============================================================================
# One Jinja2Templates instance shared by the page and viewer routers.
# Site-wide values (business details, navigation) are registered as globals
# so individual routes only pass what the page itself needs.
# =============================================================================

from pathlib import Path

from fastapi.templating import Jinja2Templates

from app.config import settings
from core import content

TEMPLATES_DIR = Path(__file__).parent / "templates"
STATIC_DIR = Path(__file__).parent / "static"

templates = Jinja2Templates(directory=str(TEMPLATES_DIR))

templates.env.globals.update(
    site_name=settings.SITE_NAME,
    business=content.BUSINESS,
    nav_links=content.NAV_LINKS,
    footer_brands=content.FOOTER_BRANDS,
)
