from pydantic import BaseModel, Field, validator
from typing import Optional, List
from datetime import datetime
from quiz_app.auth.auth_utils import check_password_bytes
from quiz_app.users.user_models import Role, AnsweredQuestion

# ==================== REQUEST SCHEMAS ====================

class ProfileUpdate(BaseModel):
    username: Optional[str] = Field(None, min_length=3, max_length=50)
    password: Optional[str] = Field(None, min_length=6)

    @validator('password')
    def password_fits_bcrypt(cls, v):
        return check_password_bytes(v)

# ==================== RESPONSE SCHEMAS ====================

class UserProfile(BaseModel):
    user_id: str
    username: str
    role: Role
    points: int = 0
    following: List[str] = []
    followers: List[str] = []
    answered_questions: List[AnsweredQuestion] = []
    created_at: datetime

class UserSummary(BaseModel):
    user_id: str
    username: str
    role: Role
    points: int = 0
