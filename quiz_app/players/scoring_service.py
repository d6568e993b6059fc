"""
Answer submission and scoring.

The duplicate check and the write are one conditional update on the player
document, so concurrent submissions for the same question score at most once.
"""
from datetime import datetime
import logging

from motor.motor_asyncio import AsyncIOMotorDatabase

from quiz_app.config import POINTS_PER_DIFFICULTY
from quiz_app.errors import AlreadyAnswered, NotFound
from quiz_app.users.user_models import Role

logger = logging.getLogger("services")


def calculate_points(difficulty: int, is_correct: bool) -> int:
    """
    WRONG ANSWER -> 0 points
    CORRECT      -> 10 x difficulty (10..50)
    """
    if not is_correct:
        return 0
    return POINTS_PER_DIFFICULTY * difficulty


async def submit_answer(db: AsyncIOMotorDatabase, player_id: str, question_id: str, answer: int) -> dict:
    question = await db.questions.find_one(
        {"question_id": question_id},
        {"_id": 0, "question_id": 1, "correct_answer": 1, "difficulty": 1}
    )
    if not question:
        raise NotFound("Question not found")

    is_correct = answer == question["correct_answer"]
    points = calculate_points(question["difficulty"], is_correct)

    result = await db.users.update_one(
        {
            "user_id": player_id,
            "role": Role.PLAYER.value,
            "answered_questions.question_id": {"$ne": question_id}
        },
        {
            "$inc": {"points": points},
            "$push": {"answered_questions": {
                "question_id": question_id,
                "was_correct": is_correct,
                "timestamp": datetime.utcnow()
            }}
        }
    )

    if result.matched_count == 0:
        player = await db.users.find_one({"user_id": player_id, "role": Role.PLAYER.value}, {"_id": 1})
        if not player:
            raise NotFound("Player not found")
        raise AlreadyAnswered()

    logger.info(
        "Answered %s correct=%s points=%d", question_id, is_correct, points,
        extra={"user": player_id}
    )

    return {
        "correct": is_correct,
        "pointsEarned": points,
        "feedback": "Correct answer!" if is_correct else "Wrong answer."
    }
