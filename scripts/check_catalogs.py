#!/usr/bin/env python3
# =============================================================================
# scripts/check_catalogs.py - Catalog Storage Operator CLI
# =============================================================================
# Inspects and verifies catalog storage from the command line.
#
# Usage:
#   python scripts/check_catalogs.py status             # config status + stats
#   python scripts/check_catalogs.py check              # probe every catalog URL
#   python scripts/check_catalogs.py analyze            # size analysis + advice
#   python scripts/check_catalogs.py cloudinary NAME    # validate a cloud name
#   python scripts/check_catalogs.py setup aws          # provider setup commands
#
# Exits with status 1 when a check or validation fails.
# =============================================================================

import argparse
import asyncio
import os
import sys

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from app.config import get_settings
from app.dependencies import create_http_client
from core.services.catalog_service import CatalogRegistry
from core.services.pdf_service import check_all_catalogs
from lib import providers
from lib.size_analysis import (
    analyze_all,
    compression_commands,
    setup_instructions,
    storage_recommendation,
)


def _banner(title: str) -> None:
    print("=" * 60)
    print(title)
    print("=" * 60)


def _registry() -> CatalogRegistry:
    return CatalogRegistry(get_settings())


# =============================================================================
# Commands
# =============================================================================

def cmd_status(args: argparse.Namespace) -> int:
    """Print configuration status and catalog counts."""
    registry = _registry()
    status = registry.config_status()
    stats = registry.stats()

    _banner("Catalog Storage Status")
    print(f"Provider:   {status.provider.value}")
    print(f"Status:     {status.status}")
    print(f"Message:    {status.message}")
    if status.base_url:
        print(f"Base URL:   {status.base_url}")
    if status.instructions:
        print(f"Next step:  {status.instructions}")
    print()
    print(f"Catalogs:        {stats.total_catalogs}")
    print(f"Large catalogs:  {stats.large_catalogs}")
    print()

    for entry in registry.entries():
        flag = "  (large)" if entry.warning else ""
        print(f"  {entry.name:<12} {entry.size:>7}  {entry.cloud_url}{flag}")

    return 0 if status.status == "configured" else 1


async def _run_check(registry: CatalogRegistry):
    async with create_http_client(registry.settings) as client:
        return await check_all_catalogs(registry, client)


def cmd_check(args: argparse.Namespace) -> int:
    """Probe every catalog URL."""
    registry = _registry()

    _banner("Checking Catalog URLs")
    report = asyncio.run(_run_check(registry))

    for result in report.results:
        if result["success"]:
            size = f" ({result['size']} bytes)" if result["size"] else ""
            print(f"  OK    {result['name']}{size}")
        else:
            print(f"  FAIL  {result['name']}: {result['error']}")

    print()
    print(f"{report.successful}/{report.total} catalogs reachable")

    for failure in report.failed:
        print(f"  {failure['name']}: {failure['url']}")

    return 0 if report.all_passed else 1


def cmd_analyze(args: argparse.Namespace) -> int:
    """Print size analysis, hosting recommendation and next steps."""
    analysis = analyze_all(_registry().entries())
    summary = analysis.summary
    recommendation = storage_recommendation(analysis)

    _banner("Catalog Size Analysis")
    for f in analysis.files:
        print(f"  {f.filename:<36} {f.size:>7}  {f.recommended_storage:<10} {f.reason}")
        if f.compression_potential:
            print(f"  {'':<36} {'':>7}  {f.compression_potential}")

    print()
    print(f"Total files:          {summary.total_files}")
    print(f"Total size:           {summary.total_size_mb} MB")
    print(f"Cloudinary eligible:  {summary.cloudinary_eligible}")
    print(f"Need S3:              {summary.needs_s3}")
    print(f"Can compress:         {summary.can_compress}")
    print(f"Estimated S3 cost:    {summary.estimated_cost}")
    print()

    _banner(f"Recommended: {recommendation.strategy}")
    print(recommendation.reasoning)
    print(f"Cost: {recommendation.cost_estimate} ({recommendation.setup_difficulty} setup)")
    print()
    for step in setup_instructions(recommendation):
        print(f"  {step}")

    commands = compression_commands(analysis.files)
    if commands:
        print()
        print("Compression commands:")
        for command in commands:
            print(command)

    return 0


def cmd_cloudinary(args: argparse.Namespace) -> int:
    """Validate a Cloudinary cloud name and print the URLs it would produce."""
    valid, message = providers.validate_cloud_name(args.cloud_name)
    print(message)
    if not valid:
        return 1

    print()
    print(f"CLOUDINARY_BASE_URL={providers.cloudinary_base_url(args.cloud_name)}")
    print()
    for brand, url in providers.generate_cloudinary_urls(args.cloud_name).items():
        print(f"  {brand:<12} {url}")
    return 0


def cmd_setup(args: argparse.Namespace) -> int:
    """Print setup steps and shell commands for a provider."""
    instructions = providers.SETUP_INSTRUCTIONS.get(args.provider, {})
    commands = providers.setup_commands(args.provider)

    if not instructions and not commands:
        print(f"Unknown provider '{args.provider}'. Available: {', '.join(providers.setup_providers())}")
        return 1

    _banner(f"Setup: {args.provider}")
    for step in instructions.get("steps", []):
        print(f"  {step}")
    if instructions.get("example"):
        print(f"\nExample URL: {instructions['example']}")
    if commands:
        print()
        for command in commands:
            print(command)
    return 0


# =============================================================================
# Entry Point
# =============================================================================

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="check_catalogs",
        description="Inspect and verify L P Sanitary catalog storage.",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("status", help="Show storage configuration status").set_defaults(func=cmd_status)
    subparsers.add_parser("check", help="Probe every catalog URL").set_defaults(func=cmd_check)
    subparsers.add_parser("analyze", help="Analyze catalog sizes").set_defaults(func=cmd_analyze)

    cloudinary = subparsers.add_parser("cloudinary", help="Validate a Cloudinary cloud name")
    cloudinary.add_argument("cloud_name")
    cloudinary.set_defaults(func=cmd_cloudinary)

    setup = subparsers.add_parser("setup", help="Show provider setup commands")
    setup.add_argument("provider", help="aws, google, azure or cloudinary")
    setup.set_defaults(func=cmd_setup)

    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
