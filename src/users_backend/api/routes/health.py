"""
Health check API route
"""

from datetime import datetime
from fastapi import APIRouter, HTTPException

from users_backend.config.settings import STORAGE_BACKEND, STORAGE_POSTGRES
from users_backend.database.connection import get_db_pool

router = APIRouter()

@router.get("/")
async def health_check():
    """Health check - verifies database connectivity when backed by Postgres"""
    response = {
        "status": "healthy",
        "timestamp": datetime.utcnow().isoformat(),
        "storage": STORAGE_BACKEND
    }

    if STORAGE_BACKEND != STORAGE_POSTGRES:
        return response

    db_pool = get_db_pool()

    try:
        async with db_pool.acquire() as conn:
            await conn.fetchval("SELECT 1")
    except Exception as e:
        # Only report unhealthy for actual infrastructure issues
        raise HTTPException(status_code=503, detail=f"Health check failed: {str(e)}")

    response["database"] = "connected"
    return response
