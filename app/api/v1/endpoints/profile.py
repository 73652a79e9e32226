"""Profile endpoints: the caller's profile (created on first read) and the avatar catalogue."""

from __future__ import annotations

import logging
from datetime import datetime, timezone

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.constants import DEFAULT_AVATAR_ID
from app.core.security import CurrentUser, get_current_user
from app.db.session import get_db
from app.models.profile import Profile
from app.schemas.profile import AvatarRead, ProfileRead, ProfileUpdate
from app.services.avatars import is_known_avatar, list_avatars

logger = logging.getLogger(__name__)
router = APIRouter()


async def get_or_create_profile(db: AsyncSession, user: CurrentUser) -> Profile:
    """Fetch the caller's profile; first visit creates one named after the email's local part."""
    result = await db.execute(select(Profile).where(Profile.id == user.id))
    profile = result.scalar_one_or_none()
    if profile:
        return profile
    profile = Profile(
        id=user.id,
        username=(user.email or "").split("@")[0],
        avatar_id=DEFAULT_AVATAR_ID,
        available_equipment=[],
    )
    db.add(profile)
    await db.flush()
    await db.refresh(profile)
    logger.info("Created profile for %s", user.id)
    return profile


@router.get("", response_model=ProfileRead)
async def get_profile(
    db: AsyncSession = Depends(get_db),
    user: CurrentUser = Depends(get_current_user),
):
    return await get_or_create_profile(db, user)


@router.patch("", response_model=ProfileRead)
async def update_profile(
    payload: ProfileUpdate,
    db: AsyncSession = Depends(get_db),
    user: CurrentUser = Depends(get_current_user),
):
    """Partial update. Session is committed by get_db after this returns."""
    data = payload.model_dump(exclude_unset=True)
    if data.get("avatar_id") is not None and not is_known_avatar(data["avatar_id"]):
        raise HTTPException(status_code=400, detail=f"Unknown avatar: {data['avatar_id']}")
    if "fitness_level" in data:
        data["fitness_level"] = data["fitness_level"].value

    profile = await get_or_create_profile(db, user)
    for k, v in data.items():
        setattr(profile, k, v)
    profile.updated_at = datetime.now(timezone.utc)
    await db.flush()
    await db.refresh(profile)
    return profile


@router.get("/avatars", response_model=list[AvatarRead])
async def get_avatars():
    """Selectable avatars (emoji + label)."""
    return list_avatars()
