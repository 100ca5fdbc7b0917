"""Health check endpoint — no store access, always available."""

from fastapi import APIRouter

from piecetrack.config import get_settings

router = APIRouter(tags=["Health"])


@router.get("/health")
async def health_check() -> dict:
    """Returns the service name, version and environment."""
    settings = get_settings()
    return {
        "status": "healthy",
        "service": settings.app_title,
        "version": settings.app_version,
        "environment": settings.app_env,
    }
