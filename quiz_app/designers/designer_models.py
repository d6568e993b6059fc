from datetime import datetime
from typing import Optional, List
from pydantic import BaseModel, Field

# ==================== DATABASE MODELS ====================

class Category(BaseModel):
    category_id: str  # CAT_XXXXXX
    name: str
    creator_id: str  # USR_XXXXXX, owning designer
    created_at: datetime = Field(default_factory=datetime.utcnow)
    updated_at: datetime = Field(default_factory=datetime.utcnow)

class Question(BaseModel):
    question_id: str  # Q_XXXXXX
    text: str
    options: List[str]
    correct_answer: int  # index into options
    category_id: Optional[str] = None
    difficulty: int = Field(..., ge=1, le=5)
    creator_id: str  # USR_XXXXXX, immutable
    related_questions: List[str] = []  # question ids, set semantics
    created_at: datetime = Field(default_factory=datetime.utcnow)
    updated_at: datetime = Field(default_factory=datetime.utcnow)
