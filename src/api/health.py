"""Health and store liveness endpoints."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse
from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from src.database import get_db, store_health
from src.services.errors import DependencyError

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["health"])


@router.get("/health")
async def health_check():
    """Report 503 once the credential store has signalled a fatal pool error."""
    if not store_health.healthy:
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={"status": "unhealthy", "message": "Credential store connection lost"},
        )
    return {"status": "OK", "message": "Investment Tracker API is running"}


@router.get("/db-test")
def db_test(db: Annotated[Session, Depends(get_db)]):
    """Round-trip a trivial query through the pool."""
    try:
        now = db.execute(select(func.current_timestamp())).scalar_one()
    except SQLAlchemyError as e:
        logger.exception("Database query failed")
        raise DependencyError("Database query failed") from e
    return {"time": str(now)}
