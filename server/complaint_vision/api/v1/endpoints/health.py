"""Health check endpoint."""

from datetime import datetime

from fastapi import APIRouter, Request

router = APIRouter()


@router.get("/health", summary="Health check")
async def health_check(request: Request) -> dict:
    """Reports configuration status without calling the provider."""
    settings = request.app.state.settings
    return {
        "status": "healthy" if settings.is_configured else "misconfigured",
        "timestamp": datetime.now().isoformat(),
        "service": settings.app_name,
        "version": settings.version,
        "model": settings.provider.MODEL_NAME,
    }
