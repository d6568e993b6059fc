from motor.motor_asyncio import AsyncIOMotorDatabase

from quiz_app.auth.permissions import UserContext
from quiz_app.errors import NotFound


async def verify_question_ownership(
    db: AsyncIOMotorDatabase,
    question_id: str,
    designer: UserContext
) -> dict:
    """
    Validates designer owns this question

    Returns:
        dict: Question document

    Raises:
        404: Question not found or owned by someone else
    """
    question = await db.questions.find_one(
        {"question_id": question_id, "creator_id": designer.user_id},
        {"_id": 0}
    )

    if not question:
        raise NotFound("Question not found")

    return question

async def verify_category_ownership(
    db: AsyncIOMotorDatabase,
    category_id: str,
    designer: UserContext
) -> dict:
    """
    Validates designer owns this category

    Raises:
        404: Category not found or owned by someone else
    """
    category = await db.categories.find_one(
        {"category_id": category_id, "creator_id": designer.user_id},
        {"_id": 0}
    )

    if not category:
        raise NotFound("Category not found")

    return category
