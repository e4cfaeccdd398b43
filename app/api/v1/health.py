from fastapi import APIRouter

from app.core.config import settings
from app.parsing.parse import SUPPORTED_EXTENSIONS

router = APIRouter()


@router.get("/health", summary="Health Check", description="Check the health status of the resume analyzer.")
async def health_check():
    return {
        "status": "healthy",
        "supported_types": list(SUPPORTED_EXTENSIONS),
        "max_upload_mb": settings.max_upload_mb,
    }
