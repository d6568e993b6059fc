from datetime import datetime
from typing import List, Optional
import logging

from motor.motor_asyncio import AsyncIOMotorDatabase

from quiz_app.auth.permissions import UserContext
from quiz_app.designers.designer_models import Category, Question
from quiz_app.designers.designer_permissions import verify_category_ownership
from quiz_app.errors import InvalidOperation, NotFound
from quiz_app.users.user_service import generate_id

logger = logging.getLogger("services")

# ==================== HELPERS ====================

async def populate_categories(db: AsyncIOMotorDatabase, questions: List[dict]) -> List[dict]:
    """Replace category_id with {category_id, name} on each question"""
    category_ids = {q["category_id"] for q in questions if q.get("category_id")}

    names = {}
    if category_ids:
        cursor = db.categories.find(
            {"category_id": {"$in": list(category_ids)}},
            {"_id": 0, "category_id": 1, "name": 1}
        )
        for cat in await cursor.to_list(length=None):
            names[cat["category_id"]] = cat["name"]

    for q in questions:
        category_id = q.pop("category_id", None)
        q["category"] = (
            {"category_id": category_id, "name": names[category_id]}
            if category_id in names else None
        )
    return questions


def strip_answer(question: dict) -> dict:
    question.pop("correct_answer", None)
    return question


async def _check_related_exist(db: AsyncIOMotorDatabase, related_ids: List[str], question_id: Optional[str] = None):
    if question_id and question_id in related_ids:
        raise InvalidOperation("A question cannot be related to itself")

    unique_ids = set(related_ids)
    if not unique_ids:
        return
    found = await db.questions.count_documents({"question_id": {"$in": list(unique_ids)}})
    if found != len(unique_ids):
        raise NotFound("Related question not found")


def _check_answer_index(options: List[str], correct_answer: int):
    if not 0 <= correct_answer < len(options):
        raise InvalidOperation("correct_answer must be an index into options")

# ==================== QUESTIONS ====================

async def list_questions(db: AsyncIOMotorDatabase, designer: UserContext) -> List[dict]:
    """All questions created by this designer, newest first, without answers"""
    cursor = db.questions.find({"creator_id": designer.user_id}, {"_id": 0}).sort(
        [("created_at", -1), ("question_id", 1)]
    )
    questions = await cursor.to_list(length=None)
    return [strip_answer(q) for q in await populate_categories(db, questions)]


async def get_question_detail(db: AsyncIOMotorDatabase, question_id: str) -> dict:
    question = await db.questions.find_one({"question_id": question_id}, {"_id": 0})
    if not question:
        raise NotFound("Question not found")
    return (await populate_categories(db, [question]))[0]


async def create_question(db: AsyncIOMotorDatabase, designer: UserContext, data: dict) -> dict:
    """Create a question owned by the designer"""
    _check_answer_index(data["options"], data["correct_answer"])

    if data.get("category_id"):
        await verify_category_ownership(db, data["category_id"], designer)

    related = list(dict.fromkeys(data.get("related_questions") or []))
    await _check_related_exist(db, related)

    question = Question(
        question_id=generate_id("Q"),
        text=data["text"],
        options=data["options"],
        correct_answer=data["correct_answer"],
        category_id=data.get("category_id"),
        difficulty=data["difficulty"],
        creator_id=designer.user_id,
        related_questions=related,
    )
    await db.questions.insert_one(question.dict())

    logger.info("Question %s created", question.question_id, extra={"user": designer.user_id})
    return await get_question_detail(db, question.question_id)


async def update_question(db: AsyncIOMotorDatabase, question: dict, designer: UserContext, data: dict) -> dict:
    """
    Update an owned question.
    The answer index is validated against the options the question will have after the update.
    Only fields present in the request are changed.
    """
    # an explicit null category_id uncategorises the question
    update_data = {k: v for k, v in data.items() if v is not None or k == "category_id"}

    options = update_data.get("options", question["options"])
    correct_answer = update_data.get("correct_answer", question["correct_answer"])
    _check_answer_index(options, correct_answer)

    if update_data.get("category_id"):
        await verify_category_ownership(db, update_data["category_id"], designer)

    if "related_questions" in update_data:
        related = list(dict.fromkeys(update_data["related_questions"]))
        await _check_related_exist(db, related, question["question_id"])
        update_data["related_questions"] = related

    update_data["updated_at"] = datetime.utcnow()
    await db.questions.update_one(
        {"question_id": question["question_id"], "creator_id": designer.user_id},
        {"$set": update_data}
    )

    logger.info("Question %s updated", question["question_id"], extra={"user": designer.user_id})
    return await get_question_detail(db, question["question_id"])


async def delete_question(db: AsyncIOMotorDatabase, question: dict, designer: UserContext):
    """Delete an owned question and drop it from other questions' related lists"""
    question_id = question["question_id"]
    result = await db.questions.delete_one({"question_id": question_id, "creator_id": designer.user_id})
    if result.deleted_count == 0:
        raise NotFound("Question not found")

    await db.questions.update_many(
        {"related_questions": question_id},
        {"$pull": {"related_questions": question_id}}
    )

    logger.info("Question %s deleted", question_id, extra={"user": designer.user_id})

# ==================== RELATED QUESTIONS ====================

async def get_related_questions(db: AsyncIOMotorDatabase, question: dict) -> List[dict]:
    ids = question.get("related_questions", [])
    if not ids:
        return []
    cursor = db.questions.find({"question_id": {"$in": ids}}, {"_id": 0}).sort("question_id", 1)
    related = await cursor.to_list(length=None)
    return [strip_answer(q) for q in await populate_categories(db, related)]


async def add_related_question(db: AsyncIOMotorDatabase, question: dict, related_id: str, designer: UserContext) -> dict:
    await _check_related_exist(db, [related_id], question["question_id"])

    await db.questions.update_one(
        {"question_id": question["question_id"], "creator_id": designer.user_id},
        {
            "$addToSet": {"related_questions": related_id},
            "$set": {"updated_at": datetime.utcnow()}
        }
    )
    return await get_question_detail(db, question["question_id"])


async def remove_related_question(db: AsyncIOMotorDatabase, question: dict, related_id: str, designer: UserContext) -> dict:
    await db.questions.update_one(
        {"question_id": question["question_id"], "creator_id": designer.user_id},
        {
            "$pull": {"related_questions": related_id},
            "$set": {"updated_at": datetime.utcnow()}
        }
    )
    return await get_question_detail(db, question["question_id"])

# ==================== CATEGORIES ====================

async def list_categories(db: AsyncIOMotorDatabase, designer: UserContext) -> List[dict]:
    cursor = db.categories.find({"creator_id": designer.user_id}, {"_id": 0}).sort(
        [("created_at", 1), ("category_id", 1)]
    )
    return await cursor.to_list(length=None)


async def create_category(db: AsyncIOMotorDatabase, designer: UserContext, name: str) -> dict:
    category = Category(
        category_id=generate_id("CAT"),
        name=name,
        creator_id=designer.user_id,
    )
    await db.categories.insert_one(category.dict())

    logger.info("Category %s created", category.category_id, extra={"user": designer.user_id})
    return category.dict()


async def update_category(db: AsyncIOMotorDatabase, category: dict, designer: UserContext, name: str) -> dict:
    await db.categories.update_one(
        {"category_id": category["category_id"], "creator_id": designer.user_id},
        {"$set": {"name": name, "updated_at": datetime.utcnow()}}
    )
    return await verify_category_ownership(db, category["category_id"], designer)


async def delete_category(db: AsyncIOMotorDatabase, category: dict, designer: UserContext):
    """Delete an owned category; questions in it become uncategorised"""
    category_id = category["category_id"]
    result = await db.categories.delete_one({"category_id": category_id, "creator_id": designer.user_id})
    if result.deleted_count == 0:
        raise NotFound("Category not found")

    await db.questions.update_many(
        {"category_id": category_id},
        {"$set": {"category_id": None, "updated_at": datetime.utcnow()}}
    )

    logger.info("Category %s deleted", category_id, extra={"user": designer.user_id})
