"""
Follow graph maintenance.

A follow touches two user documents: the actor's `following` and the
target's `followers`. With MONGO_TRANSACTIONS both writes share one
transaction; otherwise a failed second write is compensated by reverting
the first, so the two sets never stay asymmetric.
"""
import logging

from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo.errors import PyMongoError

from quiz_app import config
from quiz_app.errors import InvalidOperation, NotFound
from quiz_app.users.user_models import Role

logger = logging.getLogger("services")

ADD = "$addToSet"
REMOVE = "$pull"
INVERSE = {ADD: REMOVE, REMOVE: ADD}


async def _get_target(db: AsyncIOMotorDatabase, actor_id: str, target_id: str, expected_role: Role) -> dict:
    if actor_id == target_id:
        raise InvalidOperation("You cannot follow yourself")

    target = await db.users.find_one({"user_id": target_id}, {"_id": 0, "user_id": 1, "role": 1})
    if not target or target.get("role") != expected_role.value:
        raise NotFound(f"{expected_role.value.capitalize()} not found")
    return target


async def _apply_in_transaction(db: AsyncIOMotorDatabase, actor_id: str, target_id: str, op: str):
    async with await db.client.start_session() as session:
        async with session.start_transaction():
            first = await db.users.update_one(
                {"user_id": actor_id}, {op: {"following": target_id}}, session=session
            )
            if first.matched_count == 0:
                raise NotFound("User not found")
            await db.users.update_one(
                {"user_id": target_id}, {op: {"followers": actor_id}}, session=session
            )


async def _apply_with_compensation(db: AsyncIOMotorDatabase, actor_id: str, target_id: str, op: str):
    first = await db.users.update_one({"user_id": actor_id}, {op: {"following": target_id}})
    if first.matched_count == 0:
        raise NotFound("User not found")

    try:
        await db.users.update_one({"user_id": target_id}, {op: {"followers": actor_id}})
    except PyMongoError:
        if first.modified_count:
            await db.users.update_one({"user_id": actor_id}, {INVERSE[op]: {"following": target_id}})
            logger.warning(
                "Reverted following change on %s after followers write failed", target_id,
                extra={"user": actor_id}
            )
        raise


async def _apply(db: AsyncIOMotorDatabase, actor_id: str, target_id: str, op: str):
    if config.MONGO_TRANSACTIONS:
        await _apply_in_transaction(db, actor_id, target_id, op)
    else:
        await _apply_with_compensation(db, actor_id, target_id, op)


async def follow(db: AsyncIOMotorDatabase, actor_id: str, target_id: str, expected_role: Role) -> dict:
    """Follow a designer or player; following twice has no further effect"""
    await _get_target(db, actor_id, target_id, expected_role)
    await _apply(db, actor_id, target_id, ADD)

    logger.info("Followed %s %s", expected_role.value, target_id, extra={"user": actor_id})
    return {"message": f"{expected_role.value.capitalize()} followed successfully"}


async def unfollow(db: AsyncIOMotorDatabase, actor_id: str, target_id: str, expected_role: Role) -> dict:
    await _get_target(db, actor_id, target_id, expected_role)
    await _apply(db, actor_id, target_id, REMOVE)

    logger.info("Unfollowed %s %s", expected_role.value, target_id, extra={"user": actor_id})
    return {"message": f"{expected_role.value.capitalize()} unfollowed successfully"}
