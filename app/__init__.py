# =============================================================================
# app/ - FastAPI Application Package
# =============================================================================
# This package contains the FastAPI web application:
# - main.py: App entry point, middleware setup, error handlers
# - config.py: Environment variable loading and settings
# - routers/: Page and API endpoint definitions organized by feature
# - templates/ + templating.py: Jinja2 pages
# - middleware.py: Forced headers for static catalog PDFs
#
# The app layer is thin - it handles HTTP concerns and delegates
# business logic to the core/ package.
# =============================================================================
