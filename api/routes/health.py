"""
Health check endpoint with database status
"""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession
from api.dependencies import get_db
from core.exceptions import DataAccessError
from core.sql_client import SqlClient
from schemas.api import HealthCheckResponse
from datetime import datetime
import logging

logger = logging.getLogger(__name__)
router = APIRouter(tags=["Health"])


@router.get("/health", response_model=HealthCheckResponse)
async def health_check(db: AsyncSession = Depends(get_db)):
    """
    Health check endpoint.

    Returns:
    - Database connectivity status
    """
    db_connected = False
    db_error = None

    try:
        await SqlClient(db).sql("SELECT 1").query().single()
        db_connected = True
    except DataAccessError as e:
        db_error = e.message
        logger.error(f"Database connection failed: {e}")
    except OSError as e:
        db_error = str(e)
        logger.error(f"Database connection failed: {e}")

    return HealthCheckResponse(
        status="healthy" if db_connected else "unhealthy",
        timestamp=datetime.utcnow(),
        database_connected=db_connected,
        database_error=db_error,
    )
