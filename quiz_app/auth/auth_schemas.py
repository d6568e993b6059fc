from pydantic import BaseModel, Field, validator
from quiz_app.auth.auth_utils import check_password_bytes
from quiz_app.users.user_models import Role

# ==================== REQUEST SCHEMAS ====================

class RegisterRequest(BaseModel):
    username: str = Field(..., min_length=3, max_length=50)
    password: str = Field(..., min_length=6)
    role: Role

    @validator('password')
    def password_fits_bcrypt(cls, v):
        return check_password_bytes(v)

class LoginRequest(BaseModel):
    username: str
    password: str

# ==================== RESPONSE SCHEMAS ====================

class AuthUser(BaseModel):
    id: str
    username: str
    role: Role

class RegisterResponse(BaseModel):
    message: str
    user: AuthUser

class LoginResponse(BaseModel):
    message: str
    token: str
    user: AuthUser
