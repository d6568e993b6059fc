from typing import List

from motor.motor_asyncio import AsyncIOMotorDatabase

from quiz_app.config import LEADERBOARD_SIZE
from quiz_app.users.user_models import Role


async def get_top_players(db: AsyncIOMotorDatabase, limit: int = LEADERBOARD_SIZE) -> List[dict]:
    """
    Players ranked by points.
    Ties go to the earlier account, then the lower user_id.
    """
    cursor = db.users.find(
        {"role": Role.PLAYER.value},
        {"_id": 0, "user_id": 1, "username": 1, "points": 1}
    ).sort([("points", -1), ("created_at", 1), ("user_id", 1)]).limit(limit)

    results = await cursor.to_list(length=limit)

    for idx, row in enumerate(results):
        row["rank"] = idx + 1

    return results
