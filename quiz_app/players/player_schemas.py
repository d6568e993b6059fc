from pydantic import BaseModel, Field
from typing import Optional, List
from datetime import datetime
from quiz_app.designers.designer_schemas import CategoryRef

# ==================== REQUEST SCHEMAS ====================

class AnswerSubmit(BaseModel):
    answer: int  # index of the selected option

# ==================== RESPONSE SCHEMAS ====================

class PlayerQuestion(BaseModel):
    """Question as served to players (no correct answer)"""
    question_id: str
    text: str
    options: List[str]
    category: Optional[CategoryRef] = None
    difficulty: int
    creator_id: str
    related_questions: List[str] = []
    created_at: datetime

class AnswerResult(BaseModel):
    correct: bool
    points_earned: int = Field(..., alias="pointsEarned")
    feedback: str

class LeaderboardEntry(BaseModel):
    rank: int
    user_id: str
    username: str
    points: int

class FollowResult(BaseModel):
    message: str
