# =============================================================================
# app/routers/setup.py - Storage Setup Helpers
# =============================================================================
# Operator help for wiring up a storage provider:
# - GET /setup/{provider}                   - Steps and shell commands
# - GET /setup/cloudinary/{cloud_name}      - Validate a cloud name
# =============================================================================

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel

from lib import providers

router = APIRouter()


class SetupResponse(BaseModel):
    provider: str
    steps: list[str]
    example: str | None = None
    commands: list[str]


class CloudinaryCheckResponse(BaseModel):
    cloud_name: str
    valid: bool
    message: str
    base_url: str | None = None
    urls: dict[str, str] = {}


@router.get("/setup/cloudinary/{cloud_name}", response_model=CloudinaryCheckResponse)
async def check_cloudinary(cloud_name: str):
    """
    Validate a Cloudinary cloud name.

    When valid, also returns the base URL to configure and the URL every
    published brochure would have under it.
    """
    valid, message = providers.validate_cloud_name(cloud_name)
    if not valid:
        return CloudinaryCheckResponse(cloud_name=cloud_name, valid=False, message=message)

    return CloudinaryCheckResponse(
        cloud_name=cloud_name,
        valid=True,
        message=message,
        base_url=providers.cloudinary_base_url(cloud_name),
        urls=providers.generate_cloudinary_urls(cloud_name),
    )


@router.get("/setup/{provider}", response_model=SetupResponse)
async def get_setup(provider: str):
    """
    Setup steps and commands for a provider.

    Raises:
        HTTPException: 404 if the provider is unknown
    """
    instructions = providers.SETUP_INSTRUCTIONS.get(provider, {})
    commands = providers.setup_commands(provider)

    if not instructions and not commands:
        raise HTTPException(
            status_code=404,
            detail=f"Unknown provider '{provider}'. Available: {', '.join(providers.setup_providers())}"
        )

    return SetupResponse(
        provider=provider,
        steps=instructions.get("steps", []),
        example=instructions.get("example"),
        commands=commands,
    )
