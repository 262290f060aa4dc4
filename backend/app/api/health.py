"""GET /api/health - Liveness and configuration check."""

from fastapi import APIRouter

from ..config import settings
from ..schemas.lookup import HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
def get_health():
    return HealthResponse(api_key_configured=settings.api_key_configured)
