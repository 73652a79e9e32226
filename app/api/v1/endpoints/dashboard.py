"""Dashboard summary endpoint."""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.security import CurrentUser, get_current_user
from app.db.session import get_db
from app.schemas.dashboard import DashboardRead
from app.services.dashboard import build_dashboard

router = APIRouter()


@router.get("", response_model=DashboardRead)
async def get_dashboard(
    db: AsyncSession = Depends(get_db),
    user: CurrentUser = Depends(get_current_user),
):
    """Totals, this week's completions, this month's goals, active streak and personal best."""
    return await build_dashboard(db, user.id)
