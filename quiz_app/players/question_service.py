"""
Question selection for players.
Both queries exclude questions the player has already answered.
"""
from typing import List, Optional
import random

from motor.motor_asyncio import AsyncIOMotorDatabase

from quiz_app.config import PAGE_SIZE, QUESTION_RANDOM_SEED
from quiz_app.designers.designer_service import populate_categories, strip_answer
from quiz_app.errors import NotFound, NoMoreQuestions


# shared across requests: a seed fixes the sequence, not every draw
_rng = random.Random(QUESTION_RANDOM_SEED)


def get_rng() -> random.Random:
    """Random source dependency; seeded when QUESTION_RANDOM_SEED is set"""
    return _rng


async def get_answered_ids(db: AsyncIOMotorDatabase, player_id: str) -> List[str]:
    user = await db.users.find_one({"user_id": player_id}, {"_id": 0, "answered_questions": 1})
    if not user:
        raise NotFound("User not found")
    return [aq["question_id"] for aq in user.get("answered_questions", [])]


async def list_questions(
    db: AsyncIOMotorDatabase,
    player_id: str,
    category: Optional[str] = None,
    difficulty: Optional[int] = None,
    limit: int = PAGE_SIZE
) -> List[dict]:
    """
    Unanswered questions, optionally filtered by category name and difficulty.
    Category names are not unique, so a name matches every category carrying it.
    """
    query = {"question_id": {"$nin": await get_answered_ids(db, player_id)}}

    if category:
        categories = await db.categories.find(
            {"name": category}, {"_id": 0, "category_id": 1}
        ).to_list(length=None)
        if not categories:
            raise NotFound("Category not found")
        query["category_id"] = {"$in": [c["category_id"] for c in categories]}

    if difficulty is not None:
        query["difficulty"] = difficulty

    cursor = db.questions.find(query, {"_id": 0}).sort(
        [("created_at", 1), ("question_id", 1)]
    ).limit(limit)
    questions = await cursor.to_list(length=limit)

    return [strip_answer(q) for q in await populate_categories(db, questions)]


async def get_random_question(db: AsyncIOMotorDatabase, player_id: str, rng: random.Random) -> dict:
    """One unanswered question picked uniformly at random"""
    query = {"question_id": {"$nin": await get_answered_ids(db, player_id)}}

    total = await db.questions.count_documents(query)
    if total == 0:
        raise NoMoreQuestions()

    cursor = db.questions.find(query, {"_id": 0}).sort("question_id", 1).skip(rng.randrange(total)).limit(1)
    picked = await cursor.to_list(length=1)
    if not picked:
        # candidate set shrank between count and fetch
        raise NoMoreQuestions()

    return strip_answer((await populate_categories(db, picked))[0])
