from datetime import datetime
from typing import List
from pydantic import BaseModel, Field
from enum import Enum

# ==================== ENUMS ====================

class Role(str, Enum):
    DESIGNER = "designer"
    PLAYER = "player"

# ==================== DATABASE MODELS ====================

class AnsweredQuestion(BaseModel):
    question_id: str  # Q_XXXXXX
    was_correct: bool
    timestamp: datetime = Field(default_factory=datetime.utcnow)

class User(BaseModel):
    """
    Account document in the users collection.
    role never changes after registration; points only move through answer scoring.
    """
    user_id: str  # USR_XXXXXX
    username: str
    password_hash: str
    role: Role
    points: int = 0
    following: List[str] = []  # user ids, set semantics
    followers: List[str] = []  # user ids, set semantics
    answered_questions: List[AnsweredQuestion] = []
    created_at: datetime = Field(default_factory=datetime.utcnow)
    updated_at: datetime = Field(default_factory=datetime.utcnow)

    class Config:
        use_enum_values = True
