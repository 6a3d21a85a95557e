from fastapi import APIRouter

from app.matching import get_default_model

router = APIRouter()


@router.get("/health", summary="Health Check", description="Check the health status of the scoring service.")
async def health_check():
    return {"status": "healthy", "modelVersion": get_default_model().version}
