from fastapi import APIRouter, Depends
from motor.motor_asyncio import AsyncIOMotorDatabase
from typing import List

from quiz_app.auth.permissions import get_current_user, UserContext
from quiz_app.database import get_db
from quiz_app.users.user_schemas import ProfileUpdate, UserProfile, UserSummary
from quiz_app.users import user_service as service

router = APIRouter(prefix="/users", tags=["Users"])

# ==================== OWN PROFILE ====================

@router.get("/profile", response_model=UserProfile)
async def get_my_profile(
    user: UserContext = Depends(get_current_user),
    db: AsyncIOMotorDatabase = Depends(get_db)
):
    return await service.get_profile(db, user.user_id)

@router.put("/profile", response_model=UserProfile)
async def update_my_profile(
    data: ProfileUpdate,
    user: UserContext = Depends(get_current_user),
    db: AsyncIOMotorDatabase = Depends(get_db)
):
    """
    Change username and/or password
    """
    return await service.update_profile(db, user.user_id, data.dict(exclude_none=True))

# ==================== RELATIONS ====================

@router.get("/following", response_model=List[UserSummary])
async def get_my_following(
    user: UserContext = Depends(get_current_user),
    db: AsyncIOMotorDatabase = Depends(get_db)
):
    return await service.get_following(db, user.user_id)

@router.get("/followers", response_model=List[UserSummary])
async def get_my_followers(
    user: UserContext = Depends(get_current_user),
    db: AsyncIOMotorDatabase = Depends(get_db)
):
    return await service.get_followers(db, user.user_id)

# ==================== OTHER PROFILES ====================

@router.get("/{user_id}", response_model=UserProfile)
async def get_user_profile(
    user_id: str,
    user: UserContext = Depends(get_current_user),
    db: AsyncIOMotorDatabase = Depends(get_db)
):
    """
    Another user's profile (password hash is never returned)
    """
    return await service.get_profile(db, user_id)
