# =============================================================================
# lib/size_analysis.py - Catalog Size Analysis
# =============================================================================
# Helps decide where catalog PDFs should be hosted based on their size:
# - Parsing and formatting human readable sizes ("21 MB", "1.5 KB")
# - Per-file storage recommendation (Cloudinary / compress / S3)
# - Whole-catalog strategy recommendation with a rough S3 cost estimate
# - Setup steps and Ghostscript compression commands for the operator
#
# Usage:
#   from lib.size_analysis import analyze_all, storage_recommendation
#   analysis = analyze_all([{"filename": "cera.pdf", "size": "6 MB"}])
#   recommendation = storage_recommendation(analysis)
# =============================================================================

from __future__ import annotations

import math
import re
from dataclasses import asdict, dataclass, field
from typing import Any, Iterable, Literal, Mapping

# Cloudinary free tier limit
CLOUDINARY_FREE_LIMIT_MB = 10
# Above this a file is too big to be worth compressing for Cloudinary
COMPRESSIBLE_LIMIT_MB = 50
LARGE_FILE_THRESHOLD_MB = 20

# AWS S3 list prices used for the estimate
S3_STORAGE_PER_GB_MONTH = 0.023
S3_TRANSFER_PER_GB = 0.09

_SIZE_UNITS = ["B", "KB", "MB", "GB"]
_LEADING_NUMBER = re.compile(r"^\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")

RecommendedStorage = Literal["cloudinary", "s3", "compress"]
Strategy = Literal["cloudinary-only", "s3-only", "hybrid", "compress-first"]


# =============================================================================
# Size Parsing & Formatting
# =============================================================================

def _leading_number(text: str) -> float:
    match = _LEADING_NUMBER.match(text)
    return float(match.group(1)) if match else 0.0


def parse_size_to_mb(size: str) -> float:
    """
    Convert a size string to megabytes.

    Units are matched anywhere in the string; anything without GB or KB is
    treated as MB. Strings without a leading number (e.g. "Unknown") are 0.

    Example:
        parse_size_to_mb("21 MB")  # 21.0
        parse_size_to_mb("1.5 GB")  # 1536.0
        parse_size_to_mb("512 KB")  # 0.5
    """
    value = _leading_number(size)
    unit = size.upper()

    if "GB" in unit:
        return value * 1024
    if "KB" in unit:
        return value / 1024
    return value


def format_file_size(num_bytes: int | float) -> str:
    """
    Format a byte count using base-1024 units.

    At most two decimals are kept and trailing zeros are dropped.

    Example:
        format_file_size(0)  # "0 B"
        format_file_size(1536)  # "1.5 KB"
        format_file_size(2 * 1024 * 1024)  # "2 MB"
    """
    if num_bytes <= 0:
        return "0 B"

    index = int(math.floor(math.log(num_bytes) / math.log(1024)))
    index = max(0, min(index, len(_SIZE_UNITS) - 1))
    value = num_bytes / (1024 ** index)

    text = f"{value:.2f}".rstrip("0").rstrip(".")
    return f"{text} {_SIZE_UNITS[index]}"


def should_warn_file_size(size: str) -> bool:
    """True when a size string is above 20 MB or expressed in GB."""
    parts = size.split()
    unit = parts[1].upper() if len(parts) > 1 else ""
    value = _leading_number(size)

    if unit == "MB" and value > LARGE_FILE_THRESHOLD_MB:
        return True
    if unit == "GB":
        return True
    return False


# =============================================================================
# Data Classes
# =============================================================================

@dataclass
class FileAnalysis:
    """Storage recommendation for one catalog file."""
    filename: str
    size: str
    size_mb: float
    recommended_storage: RecommendedStorage
    reason: str
    compression_potential: str | None = None


@dataclass
class AnalysisSummary:
    total_files: int
    total_size_mb: int
    cloudinary_eligible: int
    needs_s3: int
    can_compress: int
    estimated_cost: str


@dataclass
class SizeAnalysis:
    """Per-file analysis plus totals for a set of catalogs."""
    files: list[FileAnalysis]
    summary: AnalysisSummary

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass
class StorageRecommendation:
    """Hosting strategy suggested for the whole catalog set."""
    strategy: Strategy
    reasoning: str
    cost_estimate: str
    pros: list[str] = field(default_factory=list)
    cons: list[str] = field(default_factory=list)
    setup_difficulty: Literal["Easy", "Medium", "Hard"] = "Medium"

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


# =============================================================================
# Analysis
# =============================================================================

def analyze_file(filename: str, size: str) -> FileAnalysis:
    """
    Recommend storage for a single file.

    - <= 10 MB: Cloudinary free tier
    - <= 50 MB: compress first (typically down to 30-70% of the original)
    - larger: S3 or other premium storage
    """
    size_mb = parse_size_to_mb(size)

    if size_mb <= CLOUDINARY_FREE_LIMIT_MB:
        return FileAnalysis(
            filename=filename,
            size=size,
            size_mb=size_mb,
            recommended_storage="cloudinary",
            reason=f"Fits within Cloudinary free tier (≤{CLOUDINARY_FREE_LIMIT_MB}MB)",
        )

    if size_mb <= COMPRESSIBLE_LIMIT_MB:
        low = _round_half_up(size_mb * 0.3)
        high = _round_half_up(size_mb * 0.7)
        return FileAnalysis(
            filename=filename,
            size=size,
            size_mb=size_mb,
            recommended_storage="compress",
            reason="Consider compression to fit Cloudinary free tier",
            compression_potential=f"Could potentially compress from {size} to ~{low}-{high}MB",
        )

    return FileAnalysis(
        filename=filename,
        size=size,
        size_mb=size_mb,
        recommended_storage="s3",
        reason="Too large for compression, use S3 or premium storage",
    )


def analyze_all(catalogs: Iterable[Mapping[str, Any] | Any]) -> SizeAnalysis:
    """
    Analyze every catalog and summarise storage needs.

    Accepts mappings with "filename"/"size" keys or objects with those
    attributes (e.g. CatalogEntry).
    """
    files = [analyze_file(*_filename_and_size(c)) for c in catalogs]

    total_size_mb = sum(f.size_mb for f in files)
    summary = AnalysisSummary(
        total_files=len(files),
        total_size_mb=_round_half_up(total_size_mb),
        cloudinary_eligible=sum(1 for f in files if f.recommended_storage == "cloudinary"),
        needs_s3=sum(1 for f in files if f.recommended_storage == "s3"),
        can_compress=sum(1 for f in files if f.recommended_storage == "compress"),
        estimated_cost=estimate_s3_cost(total_size_mb),
    )
    return SizeAnalysis(files=files, summary=summary)


def estimate_s3_cost(total_size_mb: float) -> str:
    """Monthly S3 storage plus transfer beyond the first free GB."""
    storage_cost = (total_size_mb / 1024) * S3_STORAGE_PER_GB_MONTH
    transfer_cost = max(0.0, (total_size_mb - 1024) / 1024) * S3_TRANSFER_PER_GB
    total = storage_cost + transfer_cost

    if total < 0.01:
        return "Under $0.01/month"
    return f"~${total:.2f}/month"


def storage_recommendation(analysis: SizeAnalysis) -> StorageRecommendation:
    """Pick a hosting strategy from the analysis summary."""
    summary = analysis.summary

    # All files fit in Cloudinary
    if summary.needs_s3 == 0 and summary.can_compress == 0:
        return StorageRecommendation(
            strategy="cloudinary-only",
            reasoning="All files are ≤10MB and fit within Cloudinary free tier",
            cost_estimate="Free",
            pros=["Completely free", "Easy setup", "Global CDN"],
            cons=["Limited to 25GB total storage"],
            setup_difficulty="Easy",
        )

    if summary.can_compress >= summary.needs_s3:
        return StorageRecommendation(
            strategy="compress-first",
            reasoning="Many files could be compressed to fit Cloudinary free tier",
            cost_estimate="Free (after compression)",
            pros=["Potentially free", "Better performance", "Smaller downloads"],
            cons=["Quality loss possible", "Manual work required"],
            setup_difficulty="Medium",
        )

    if summary.cloudinary_eligible > 0 and summary.needs_s3 > 0:
        return StorageRecommendation(
            strategy="hybrid",
            reasoning="Mix of small and large files - use both Cloudinary (free) and S3",
            cost_estimate=summary.estimated_cost,
            pros=["Cost-effective", "No file size limits", "Best performance"],
            cons=["Two services to manage", "More complex setup"],
            setup_difficulty="Medium",
        )

    return StorageRecommendation(
        strategy="s3-only",
        reasoning="Most files are large - use S3 for everything",
        cost_estimate=summary.estimated_cost,
        pros=["Unlimited size", "Single service", "Enterprise-grade"],
        cons=["Costs money", "More complex setup than Cloudinary"],
        setup_difficulty="Medium",
    )


# =============================================================================
# Operator Output
# =============================================================================

def compression_commands(files: Iterable[FileAnalysis]) -> list[str]:
    """Ghostscript commands for every file marked as compressible."""
    commands = []
    for f in files:
        if f.recommended_storage != "compress":
            continue
        output = f.filename.replace(".pdf", "_compressed.pdf", 1)
        commands.append(
            f"# Compress {f.filename} ({f.size} → target: <{CLOUDINARY_FREE_LIMIT_MB}MB)\n"
            f"gs -sDEVICE=pdfwrite -dCompatibilityLevel=1.4 -dPDFSETTINGS=/ebook "
            f"-dNOPAUSE -dQUIET -dBATCH -sOutputFile=\"{output}\" \"{f.filename}\""
        )
    return commands


_SETUP_STEPS: dict[str, list[str]] = {
    "cloudinary-only": [
        "Sign up for Cloudinary free account",
        'Create "catalogs" folder',
        "Upload all PDF files",
        "Update config with your cloud name",
        'Set provider to "cloudinary-only"',
    ],
    "compress-first": [
        "Compress large PDFs using ghostscript or online tools",
        "Target file sizes under 10MB",
        "Sign up for Cloudinary free account",
        "Upload compressed PDFs",
        "Update config with your cloud name",
    ],
    "hybrid": [
        "Sign up for Cloudinary (for small files)",
        "Sign up for AWS free tier (for large files)",
        "Upload small files (≤10MB) to Cloudinary",
        "Upload large files (>10MB) to S3",
        "Update config with both URLs",
        'Set provider to "hybrid"',
    ],
    "s3-only": [
        "Sign up for AWS free tier",
        "Create S3 bucket",
        "Upload all PDF files",
        "Configure public access",
        "Update config with S3 URL",
        'Set provider to "s3-only"',
    ],
}


def setup_instructions(recommendation: StorageRecommendation) -> list[str]:
    """Ordered setup steps for a recommended strategy."""
    steps = _SETUP_STEPS.get(recommendation.strategy)
    if steps is None:
        return ["Unknown strategy"]
    return [f"{i}. {step}" for i, step in enumerate(steps, start=1)]


# =============================================================================
# Helpers
# =============================================================================

def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def _filename_and_size(catalog: Mapping[str, Any] | Any) -> tuple[str, str]:
    if isinstance(catalog, Mapping):
        return catalog["filename"], catalog["size"]
    return catalog.filename, catalog.size
