from fastapi import APIRouter

from dependencies.generation import AppSettings
from schemas.api import ApiResponse


router = APIRouter()


@router.get("/health", response_model=ApiResponse[dict[str, str]])
def health_check(settings: AppSettings) -> ApiResponse[dict[str, str]]:
    """Health check endpoint for monitoring and load balancer health checks."""
    return ApiResponse(
        success=True,
        data={
            "status": "healthy",
            "message": f"{settings.APP_NAME} is running",
            "model": settings.GEMINI_MODEL,
        },
        message="Health check successful",
    )
