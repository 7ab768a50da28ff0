# =============================================================================
# app/routers/debug.py - Deployment Diagnostics
# =============================================================================
# Reports where catalog PDFs can be found on the running host. Useful when a
# deployment serves 404s for /resources/*.pdf and the build output layout is
# not obvious.
# =============================================================================

import logging
import os
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from app.dependencies import SettingsDep

logger = logging.getLogger(__name__)

router = APIRouter()

# Places a resources directory ends up in across hosting setups
CANDIDATE_RESOURCE_DIRS = [
    "public/resources",
    ".next/static/resources",
    "resources",
    "/var/task/public/resources",
    "/app/public/resources",
]

# Only the first few PDFs are stat'ed
SIZED_PDF_LIMIT = 3


def inspect_directory(path: Path) -> dict[str, Any]:
    """Existence, file count, PDF list and a few PDF sizes for one directory."""
    info: dict[str, Any] = {"exists": path.is_dir()}
    if not info["exists"]:
        return info

    try:
        files = sorted(p.name for p in path.iterdir())
    except OSError as e:
        info["error"] = str(e)
        return info

    pdfs = [name for name in files if name.lower().endswith(".pdf")]
    info["files"] = len(files)
    info["pdfs"] = pdfs
    info["pdf_sizes"] = [_pdf_size(path / name) for name in pdfs[:SIZED_PDF_LIMIT]]
    return info


def _pdf_size(path: Path) -> dict[str, Any]:
    try:
        return {"name": path.name, "size": path.stat().st_size}
    except OSError as e:
        return {"name": path.name, "error": str(e)}


@router.get("/debug")
async def debug_info(settings: SettingsDep):
    """
    Inspect candidate resource directories.

    Relative candidates are resolved against the working directory.
    """
    cwd = Path.cwd()
    candidates = list(CANDIDATE_RESOURCE_DIRS)
    configured = str(settings.RESOURCES_DIR)
    if configured not in candidates:
        candidates.append(configured)

    paths = {}
    for candidate in candidates:
        path = Path(candidate)
        if not path.is_absolute():
            path = cwd / path
        paths[candidate] = {"path": str(path), **inspect_directory(path)}

    info = {
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "cwd": str(cwd),
        "environment": settings.ENVIRONMENT,
        "platform": os.name,
        "resources_dir": str(settings.resources_path),
        "paths": paths,
    }
    logger.debug(f"Debug info requested: {len(paths)} directories inspected")

    return JSONResponse(content=info, headers={"Cache-Control": "no-cache"})
