from datetime import datetime
from typing import List
import logging
import secrets

from motor.motor_asyncio import AsyncIOMotorDatabase

from quiz_app.auth.auth_utils import hash_password, verify_password
from quiz_app.errors import Conflict, NotFound, Unauthenticated
from quiz_app.users.user_models import Role, User

logger = logging.getLogger("services")

PUBLIC_PROJECTION = {"_id": 0, "password_hash": 0}
SUMMARY_PROJECTION = {"_id": 0, "user_id": 1, "username": 1, "role": 1, "points": 1}


def generate_id(prefix: str) -> str:
    """Generate unique ID with prefix"""
    return f"{prefix}_{secrets.token_hex(8).upper()}"

# ==================== ACCOUNTS ====================

async def register_user(db: AsyncIOMotorDatabase, username: str, password: str, role: Role) -> dict:
    """Create a new account; usernames are unique"""
    existing = await db.users.find_one({"username": username})
    if existing:
        raise Conflict("Username already exists")

    user = User(
        user_id=generate_id("USR"),
        username=username,
        password_hash=hash_password(password),
        role=role,
    )
    # A concurrent registration of the same name trips the unique index (409 via handler)
    await db.users.insert_one(user.dict())

    logger.info("Registered %s %s", user.role, user.user_id, extra={"user": user.user_id})
    return user.dict()


async def authenticate_user(db: AsyncIOMotorDatabase, username: str, password: str) -> dict:
    user = await db.users.find_one({"username": username})
    if not user or not verify_password(password, user["password_hash"]):
        logger.warning("Failed login for username %r", username)
        raise Unauthenticated("Invalid username or password")
    return user

# ==================== PROFILES ====================

async def get_profile(db: AsyncIOMotorDatabase, user_id: str) -> dict:
    """Get a user profile without the password hash"""
    user = await db.users.find_one({"user_id": user_id}, PUBLIC_PROJECTION)
    if not user:
        raise NotFound("User not found")
    return user


async def update_profile(db: AsyncIOMotorDatabase, user_id: str, data: dict) -> dict:
    """
    Update username and/or password.
    Role, points and relations are not writable through the profile.
    """
    update_data = {}

    username = data.get("username")
    if username is not None:
        taken = await db.users.find_one({"username": username, "user_id": {"$ne": user_id}})
        if taken:
            raise Conflict("Username already exists")
        update_data["username"] = username

    if data.get("password") is not None:
        update_data["password_hash"] = hash_password(data["password"])

    if update_data:
        update_data["updated_at"] = datetime.utcnow()
        result = await db.users.update_one({"user_id": user_id}, {"$set": update_data})
        if result.matched_count == 0:
            raise NotFound("User not found")
        logger.info("Profile updated: %s", sorted(update_data), extra={"user": user_id})

    return await get_profile(db, user_id)

# ==================== RELATIONS ====================

async def _list_related_users(db: AsyncIOMotorDatabase, user_id: str, field: str) -> List[dict]:
    user = await db.users.find_one({"user_id": user_id}, {"_id": 0, field: 1})
    if not user:
        raise NotFound("User not found")

    ids = user.get(field, [])
    if not ids:
        return []

    cursor = db.users.find({"user_id": {"$in": ids}}, SUMMARY_PROJECTION).sort("username", 1)
    return await cursor.to_list(length=None)


async def get_following(db: AsyncIOMotorDatabase, user_id: str) -> List[dict]:
    """Users this user follows"""
    return await _list_related_users(db, user_id, "following")


async def get_followers(db: AsyncIOMotorDatabase, user_id: str) -> List[dict]:
    """Users following this user"""
    return await _list_related_users(db, user_id, "followers")
