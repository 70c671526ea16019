"""Health check endpoint."""

from pathlib import Path

from fastapi import APIRouter

from distributor.config import settings

router = APIRouter(tags=["health"])


@router.get("/health")
async def health_check():
    """Check API liveness and that the data directory is reachable."""
    data_dir = Path(settings.csv_data_path)
    data_status = "available" if data_dir.is_dir() else "missing"

    return {
        "status": "ok" if data_status == "available" else "degraded",
        "data_dir": data_status,
        "geocoder": settings.geocoder_provider,
        "service": "Client Distributor",
    }
