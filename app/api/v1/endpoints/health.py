"""Liveness and readiness checks."""

import logging
import os

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.config import Settings, get_settings
from app.db.session import get_db

logger = logging.getLogger(__name__)
router = APIRouter()


@router.get("")
async def health(settings: Settings = Depends(get_settings)):
    """Liveness. Adds built_at when BACKEND_BUILT_AT is set at deploy time."""
    payload: dict = {"status": "ok", "environment": settings.environment}
    built_at = os.environ.get("BACKEND_BUILT_AT")
    if built_at:
        payload["built_at"] = built_at
    return payload


@router.get("/ready")
async def readiness(db: AsyncSession = Depends(get_db)):
    """Readiness: app + DB connectivity."""
    try:
        await db.execute(text("SELECT 1"))
    except (SQLAlchemyError, OSError) as e:
        logger.exception("Readiness check failed")
        return JSONResponse(
            status_code=500,
            content={"status": "error", "database": str(e)},
        )
    return {"status": "ok", "database": "connected"}
