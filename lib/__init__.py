# =============================================================================
# lib/ - Standalone Utility Modules
# =============================================================================
# This package contains reusable utilities:
# - providers.py: Storage provider URL templating and setup instructions
# - size_analysis.py: Catalog size parsing and hosting recommendations
#
# These modules are self-contained (no network, no app imports) and can be
# tested in isolation.
# =============================================================================

from lib.providers import (
    detect_provider,
    drive_urls,
    generate_cloudinary_urls,
    is_placeholder,
    setup_commands,
    validate_cloud_name,
)
from lib.size_analysis import (
    analyze_all,
    analyze_file,
    format_file_size,
    parse_size_to_mb,
    should_warn_file_size,
    storage_recommendation,
)

__all__ = [
    # Providers
    "detect_provider",
    "drive_urls",
    "generate_cloudinary_urls",
    "is_placeholder",
    "setup_commands",
    "validate_cloud_name",
    # Size analysis
    "analyze_all",
    "analyze_file",
    "format_file_size",
    "parse_size_to_mb",
    "should_warn_file_size",
    "storage_recommendation",
]
