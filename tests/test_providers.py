# =============================================================================
# tests/test_providers.py - Storage Provider Helper Tests
# =============================================================================
# Tests for URL templating, placeholder detection and Cloudinary checks.
#
# Run with: pytest tests/test_providers.py -v
# =============================================================================

import pytest

from lib import providers


class TestUrlBuilders:
    """Tests for join_url, local_url and drive_urls."""

    def test_join_url_handles_trailing_slash(self):
        assert providers.join_url("https://cdn.example.com/catalogs/", "cera.pdf") == (
            "https://cdn.example.com/catalogs/cera.pdf"
        )
        assert providers.join_url("https://cdn.example.com/catalogs", "cera.pdf") == (
            "https://cdn.example.com/catalogs/cera.pdf"
        )

    def test_local_url(self):
        assert providers.local_url("cera.pdf") == "/resources/cera.pdf"

    def test_drive_urls(self):
        urls = providers.drive_urls(
            "https://drive.google.com/file/d/",
            "https://drive.google.com/uc?export=download&id=",
            "abc123XYZ_-",
        )

        assert urls["viewer_url"] == "https://drive.google.com/file/d/abc123XYZ_-/preview"
        assert urls["download_url"] == "https://drive.google.com/uc?export=download&id=abc123XYZ_-"
        assert urls["web_url"] == "https://drive.google.com/file/d/abc123XYZ_-/view"


class TestPlaceholders:
    """Tests for is_placeholder."""

    @pytest.mark.parametrize("provider,value", [
        ("cloudinary", "https://res.cloudinary.com/your-cloud-name/raw/upload/catalogs"),
        ("cloudinary", "https://res.cloudinary.com/YOUR_CLOUD_NAME/raw/upload"),
        ("s3", "https://your-bucket-name.s3.amazonaws.com/catalogs"),
        ("github", "https://github.com/your-username/repo/raw/main"),
        ("gdrive", "YOUR_CERA_FILE_ID"),
        ("gdrive", ""),
        ("s3", None),
    ])
    def test_placeholders_detected(self, provider, value):
        assert providers.is_placeholder(provider, value) is True

    def test_real_values_pass(self):
        assert providers.is_placeholder("cloudinary", "https://res.cloudinary.com/dk1a2b3c/raw/upload") is False
        assert providers.is_placeholder("gdrive", "1cMH0C-rAOlo6ULexIyhAgIhh5tjEGtIp") is False


class TestDetectProvider:

    @pytest.mark.parametrize("url,expected", [
        ("https://res.cloudinary.com/x/raw/upload/catalogs/cera.pdf", "cloudinary"),
        ("https://bucket.s3.amazonaws.com/catalogs/cera.pdf", "s3"),
        ("https://d111111abcdef8.cloudfront.net/cera.pdf", "s3"),
        ("https://github.com/u/r/raw/main/cera.pdf", "github"),
        ("https://raw.githubusercontent.com/u/r/main/cera.pdf", "github"),
        ("https://drive.google.com/file/d/abc/view", "gdrive"),
        ("/resources/cera.pdf", "local"),
        ("https://example.com/cera.pdf", None),
    ])
    def test_detect(self, url, expected):
        assert providers.detect_provider(url) == expected


class TestCloudinary:
    """Tests for cloud name validation and URL generation."""

    def test_valid_cloud_name(self):
        valid, message = providers.validate_cloud_name("dk1a2b3c4d")
        assert valid is True
        assert message == "Cloud name format looks correct"

    @pytest.mark.parametrize("cloud_name", [None, "", "your-cloud-name", "ab", "my cloud", "https://res.cloudinary.com"])
    def test_invalid_cloud_names(self, cloud_name):
        valid, _ = providers.validate_cloud_name(cloud_name)
        assert valid is False

    def test_generated_urls_cover_every_brochure(self):
        urls = providers.generate_cloudinary_urls("lpsanitary")

        assert set(urls) == set(providers.SEED_BROCHURES)
        assert urls["Cera"] == "https://res.cloudinary.com/lpsanitary/raw/upload/catalogs/cera.pdf"

    def test_extract_cloud_name(self):
        assert providers.extract_cloud_name("https://res.cloudinary.com/lpsanitary/raw/upload/x.pdf") == "lpsanitary"
        assert providers.extract_cloud_name("https://example.com/x.pdf") is None


class TestSetup:

    def test_known_provider_commands(self):
        commands = providers.setup_commands("aws")
        assert commands[0] == "aws s3 mb s3://your-catalogs-bucket"

    def test_unknown_provider(self):
        assert providers.setup_commands("dropbox") == []

    def test_setup_providers(self):
        assert providers.setup_providers() == ["aws", "azure", "cloudinary", "google"]
