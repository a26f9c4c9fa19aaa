import time
from fastapi import APIRouter, Depends

from booking_engine.schemas.health import HealthResponse
from booking_engine.db.session import DatabaseStatus, check_database

router = APIRouter(tags=["monitoring"])

STARTED_AT = time.monotonic()


@router.get("/health", response_model=HealthResponse)
async def health_check(db: DatabaseStatus = Depends(check_database)):
    return HealthResponse(
        db=db.ok,
        db_error=None if db.ok else db.error,
        uptime=time.monotonic() - STARTED_AT,
    )
