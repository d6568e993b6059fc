from fastapi import APIRouter, Depends
from motor.motor_asyncio import AsyncIOMotorDatabase

from quiz_app.auth.auth_schemas import (
    RegisterRequest, RegisterResponse,
    LoginRequest, LoginResponse,
)
from quiz_app.auth.auth_utils import create_access_token
from quiz_app.database import get_db
from quiz_app.users import user_service as service

router = APIRouter(prefix="/auth", tags=["Authentication"])


@router.post("/register", response_model=RegisterResponse, status_code=201)
async def register(data: RegisterRequest, db: AsyncIOMotorDatabase = Depends(get_db)):
    """
    Create a designer or player account
    """
    user = await service.register_user(db, data.username, data.password, data.role)
    return {
        "message": "User registered successfully",
        "user": {"id": user["user_id"], "username": user["username"], "role": user["role"]}
    }


@router.post("/login", response_model=LoginResponse)
async def login(data: LoginRequest, db: AsyncIOMotorDatabase = Depends(get_db)):
    """
    Exchange credentials for a 24h bearer token
    """
    user = await service.authenticate_user(db, data.username, data.password)
    token = create_access_token(user["user_id"], user["role"])
    return {
        "message": "Login successful",
        "token": token,
        "user": {"id": user["user_id"], "username": user["username"], "role": user["role"]}
    }
