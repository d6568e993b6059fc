from pydantic import BaseModel, Field, validator
from typing import Optional, List
from datetime import datetime

# ==================== REQUEST SCHEMAS ====================

class QuestionCreate(BaseModel):
    text: str = Field(..., min_length=1)
    options: List[str] = Field(..., min_length=2)
    correct_answer: int = Field(..., ge=0)
    category_id: Optional[str] = None
    difficulty: int = Field(..., ge=1, le=5)
    related_questions: List[str] = []

    @validator('correct_answer')
    def correct_answer_in_options(cls, v, values):
        options = values.get('options')
        if options is not None and v >= len(options):
            raise ValueError('correct_answer must be an index into options')
        return v

class QuestionUpdate(BaseModel):
    # correct_answer vs options is checked against the merged document
    text: Optional[str] = Field(None, min_length=1)
    options: Optional[List[str]] = Field(None, min_length=2)
    correct_answer: Optional[int] = Field(None, ge=0)
    category_id: Optional[str] = None
    difficulty: Optional[int] = Field(None, ge=1, le=5)
    related_questions: Optional[List[str]] = None

class CategoryCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=100)

class CategoryUpdate(BaseModel):
    name: str = Field(..., min_length=1, max_length=100)

# ==================== RESPONSE SCHEMAS ====================

class CategoryRef(BaseModel):
    category_id: str
    name: str

class CategoryResponse(BaseModel):
    category_id: str
    name: str
    creator_id: str
    created_at: datetime
    updated_at: datetime

class QuestionPublic(BaseModel):
    """Question as shown in listings: the correct answer is never included"""
    question_id: str
    text: str
    options: List[str]
    category: Optional[CategoryRef] = None
    difficulty: int
    creator_id: str
    related_questions: List[str] = []
    created_at: datetime

class QuestionDetail(QuestionPublic):
    correct_answer: int
    updated_at: datetime
