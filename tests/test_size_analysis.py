# =============================================================================
# tests/test_size_analysis.py - Size Analysis Tests
# =============================================================================
# Tests for size parsing/formatting and the hosting recommendation logic.
#
# Run with: pytest tests/test_size_analysis.py -v
# =============================================================================

import pytest

from lib.size_analysis import (
    analyze_all,
    analyze_file,
    compression_commands,
    estimate_s3_cost,
    format_file_size,
    parse_size_to_mb,
    setup_instructions,
    should_warn_file_size,
    storage_recommendation,
    StorageRecommendation,
)


SHOP_CATALOGS = [
    {"filename": "Roff-Product-Catalogue.pdf", "size": "2 MB"},
    {"filename": "cera.pdf", "size": "6 MB"},
    {"filename": "Nirali.pdf", "size": "8 MB"},
    {"filename": "karoma_product_brochure_01.pdf", "size": "21 MB"},
    {"filename": "brochure_steelera_2023-24.pdf", "size": "32 MB"},
    {"filename": "JAQUAR_CATLOUGE.pdf", "size": "60 MB"},
    {"filename": "Blues_Catalougeupdated.pdf", "size": "76 MB"},
]


# =============================================================================
# Parsing & Formatting
# =============================================================================

class TestParseSize:
    """Tests for parse_size_to_mb."""

    @pytest.mark.parametrize("size,expected", [
        ("21 MB", 21.0),
        ("1.5 GB", 1536.0),
        ("512 KB", 0.5),
        ("7", 7.0),
        ("2.5mb", 2.5),
    ])
    def test_units(self, size, expected):
        assert parse_size_to_mb(size) == expected

    def test_non_numeric_is_zero(self):
        """Sizes like 'Unknown' count as zero."""
        assert parse_size_to_mb("Unknown") == 0
        assert parse_size_to_mb("") == 0


class TestFormatFileSize:
    """Tests for format_file_size."""

    @pytest.mark.parametrize("num_bytes,expected", [
        (0, "0 B"),
        (500, "500 B"),
        (1024, "1 KB"),
        (1536, "1.5 KB"),
        (2 * 1024 * 1024, "2 MB"),
        (int(1.25 * 1024 ** 3), "1.25 GB"),
    ])
    def test_formatting(self, num_bytes, expected):
        assert format_file_size(num_bytes) == expected

    def test_capped_at_gigabytes(self):
        assert format_file_size(2048 * 1024 ** 3) == "2048 GB"


class TestShouldWarn:
    """Tests for should_warn_file_size."""

    def test_large_megabytes_warn(self):
        assert should_warn_file_size("21 MB") is True

    def test_threshold_is_exclusive(self):
        assert should_warn_file_size("20 MB") is False

    def test_gigabytes_always_warn(self):
        assert should_warn_file_size("1 GB") is True

    def test_small_files_do_not_warn(self):
        assert should_warn_file_size("500 KB") is False


# =============================================================================
# Analysis
# =============================================================================

class TestAnalyzeFile:
    """Tests for per-file recommendations."""

    def test_small_file_goes_to_cloudinary(self):
        result = analyze_file("cera.pdf", "6 MB")
        assert result.recommended_storage == "cloudinary"
        assert result.compression_potential is None

    def test_boundary_fits_cloudinary(self):
        assert analyze_file("a.pdf", "10 MB").recommended_storage == "cloudinary"

    def test_medium_file_should_be_compressed(self):
        """Compression estimate is 30-70% of the original, rounded."""
        result = analyze_file("karoma.pdf", "21 MB")
        assert result.recommended_storage == "compress"
        assert result.compression_potential == "Could potentially compress from 21 MB to ~6-15MB"

    def test_huge_file_goes_to_s3(self):
        assert analyze_file("blues.pdf", "76 MB").recommended_storage == "s3"


class TestAnalyzeAll:
    """Tests for the whole-catalog summary."""

    def test_shop_catalogs_summary(self):
        summary = analyze_all(SHOP_CATALOGS).summary

        assert summary.total_files == 7
        assert summary.total_size_mb == 205
        assert summary.cloudinary_eligible == 3
        assert summary.can_compress == 2
        assert summary.needs_s3 == 2

    def test_accepts_objects(self, make_registry):
        """Registry entries are analyzed like mappings."""
        registry = make_registry("gdrive-hybrid")
        analysis = analyze_all(registry.entries())
        assert analysis.summary.total_files == len(registry.entries())

    def test_empty(self):
        summary = analyze_all([]).summary
        assert summary.total_files == 0
        assert summary.total_size_mb == 0

    def test_to_dict(self):
        data = analyze_all(SHOP_CATALOGS[:1]).to_dict()
        assert data["files"][0]["filename"] == "Roff-Product-Catalogue.pdf"
        assert data["summary"]["total_files"] == 1


class TestRecommendation:
    """Tests for storage_recommendation and its follow-up output."""

    def test_all_small_is_cloudinary_only(self):
        analysis = analyze_all(SHOP_CATALOGS[:3])
        recommendation = storage_recommendation(analysis)

        assert recommendation.strategy == "cloudinary-only"
        assert recommendation.cost_estimate == "Free"
        assert recommendation.setup_difficulty == "Easy"

    def test_compressible_majority_is_compress_first(self):
        # two compressible vs two needing S3
        recommendation = storage_recommendation(analyze_all(SHOP_CATALOGS))
        assert recommendation.strategy == "compress-first"

    def test_mixed_is_hybrid(self):
        catalogs = [
            {"filename": "a.pdf", "size": "2 MB"},
            {"filename": "b.pdf", "size": "80 MB"},
        ]
        recommendation = storage_recommendation(analyze_all(catalogs))
        assert recommendation.strategy == "hybrid"

    def test_all_large_is_s3_only(self):
        catalogs = [{"filename": "b.pdf", "size": "80 MB"}]
        assert storage_recommendation(analyze_all(catalogs)).strategy == "s3-only"

    def test_setup_instructions_are_numbered(self):
        steps = setup_instructions(storage_recommendation(analyze_all(SHOP_CATALOGS[:3])))
        assert steps[0] == "1. Sign up for Cloudinary free account"
        assert steps[-1].startswith("5. ")

    def test_unknown_strategy(self):
        recommendation = StorageRecommendation(strategy="tape", reasoning="", cost_estimate="")
        assert setup_instructions(recommendation) == ["Unknown strategy"]

    def test_compression_commands_only_for_compressible(self):
        commands = compression_commands(analyze_all(SHOP_CATALOGS).files)

        assert len(commands) == 2
        assert "karoma_product_brochure_01_compressed.pdf" in commands[0]
        assert commands[0].splitlines()[1].startswith("gs -sDEVICE=pdfwrite")


class TestEstimateCost:

    def test_tiny_totals(self):
        assert estimate_s3_cost(0) == "Under $0.01/month"

    def test_includes_transfer_beyond_first_gigabyte(self):
        # 2 GB stored (0.046) + 1 GB transfer (0.09)
        assert estimate_s3_cost(2048) == "~$0.14/month"
