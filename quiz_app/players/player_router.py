from fastapi import APIRouter, Depends, Query
from motor.motor_asyncio import AsyncIOMotorDatabase
from typing import List, Optional
import random

from quiz_app.auth.permissions import get_current_player, UserContext
from quiz_app.database import get_db
from quiz_app.players.player_schemas import (
    PlayerQuestion, AnswerSubmit, AnswerResult, LeaderboardEntry, FollowResult
)
from quiz_app.players import question_service, scoring_service, follow_service, leaderboard_service
from quiz_app.players.question_service import get_rng
from quiz_app.users.user_models import Role

router = APIRouter(prefix="/player", tags=["Player"])

# ==================== QUESTIONS ====================

@router.get("/questions", response_model=List[PlayerQuestion])
async def get_questions(
    category: Optional[str] = Query(None, description="Category name"),
    difficulty: Optional[int] = Query(None, ge=1, le=5),
    player: UserContext = Depends(get_current_player),
    db: AsyncIOMotorDatabase = Depends(get_db)
):
    """
    Questions the player has not answered yet (max one page)
    """
    return await question_service.list_questions(db, player.user_id, category, difficulty)

@router.get("/questions/random", response_model=PlayerQuestion)
async def get_random_question(
    player: UserContext = Depends(get_current_player),
    db: AsyncIOMotorDatabase = Depends(get_db),
    rng: random.Random = Depends(get_rng)
):
    """
    One random unanswered question (404 when none are left)
    """
    return await question_service.get_random_question(db, player.user_id, rng)

@router.post("/questions/{question_id}/answer", response_model=AnswerResult)
@router.post("/questions/{question_id}/submit", response_model=AnswerResult)
async def submit_answer(
    question_id: str,
    data: AnswerSubmit,
    player: UserContext = Depends(get_current_player),
    db: AsyncIOMotorDatabase = Depends(get_db)
):
    """
    Answer a question once; a second submission is rejected
    """
    return await scoring_service.submit_answer(db, player.user_id, question_id, data.answer)

# ==================== LEADERBOARD ====================

@router.get("/leaderboard", response_model=List[LeaderboardEntry])
async def get_leaderboard(
    player: UserContext = Depends(get_current_player),
    db: AsyncIOMotorDatabase = Depends(get_db)
):
    return await leaderboard_service.get_top_players(db)

# ==================== FOLLOWING ====================

@router.post("/follow/designer/{user_id}", response_model=FollowResult)
async def follow_designer(
    user_id: str,
    player: UserContext = Depends(get_current_player),
    db: AsyncIOMotorDatabase = Depends(get_db)
):
    return await follow_service.follow(db, player.user_id, user_id, Role.DESIGNER)

@router.post("/follow/player/{user_id}", response_model=FollowResult)
async def follow_player(
    user_id: str,
    player: UserContext = Depends(get_current_player),
    db: AsyncIOMotorDatabase = Depends(get_db)
):
    return await follow_service.follow(db, player.user_id, user_id, Role.PLAYER)

@router.post("/unfollow/designer/{user_id}", response_model=FollowResult)
@router.delete("/follow/designer/{user_id}", response_model=FollowResult)
async def unfollow_designer(
    user_id: str,
    player: UserContext = Depends(get_current_player),
    db: AsyncIOMotorDatabase = Depends(get_db)
):
    return await follow_service.unfollow(db, player.user_id, user_id, Role.DESIGNER)

@router.post("/unfollow/player/{user_id}", response_model=FollowResult)
@router.delete("/follow/player/{user_id}", response_model=FollowResult)
async def unfollow_player(
    user_id: str,
    player: UserContext = Depends(get_current_player),
    db: AsyncIOMotorDatabase = Depends(get_db)
):
    return await follow_service.unfollow(db, player.user_id, user_id, Role.PLAYER)
