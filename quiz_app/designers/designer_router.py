from fastapi import APIRouter, Depends
from motor.motor_asyncio import AsyncIOMotorDatabase
from typing import List

from quiz_app.auth.permissions import get_current_designer, UserContext
from quiz_app.database import get_db
from quiz_app.designers.designer_permissions import (
    verify_question_ownership,
    verify_category_ownership,
)
from quiz_app.designers.designer_schemas import (
    QuestionCreate, QuestionUpdate, QuestionPublic, QuestionDetail,
    CategoryCreate, CategoryUpdate, CategoryResponse,
)
from quiz_app.designers import designer_service as service

router = APIRouter(prefix="/designer", tags=["Designer"])

# ==================== QUESTIONS ====================

@router.get("/questions", response_model=List[QuestionPublic])
async def get_my_questions(
    designer: UserContext = Depends(get_current_designer),
    db: AsyncIOMotorDatabase = Depends(get_db)
):
    """
    Get all questions created by this designer
    """
    return await service.list_questions(db, designer)

@router.post("/questions", response_model=QuestionDetail, status_code=201)
async def create_question(
    data: QuestionCreate,
    designer: UserContext = Depends(get_current_designer),
    db: AsyncIOMotorDatabase = Depends(get_db)
):
    return await service.create_question(db, designer, data.dict())

@router.get("/questions/{question_id}", response_model=QuestionDetail)
async def get_question(
    question_id: str,
    designer: UserContext = Depends(get_current_designer),
    db: AsyncIOMotorDatabase = Depends(get_db)
):
    await verify_question_ownership(db, question_id, designer)
    return await service.get_question_detail(db, question_id)

@router.put("/questions/{question_id}", response_model=QuestionDetail)
async def update_question(
    question_id: str,
    data: QuestionUpdate,
    designer: UserContext = Depends(get_current_designer),
    db: AsyncIOMotorDatabase = Depends(get_db)
):
    question = await verify_question_ownership(db, question_id, designer)
    return await service.update_question(db, question, designer, data.dict(exclude_unset=True))

@router.delete("/questions/{question_id}")
async def delete_question(
    question_id: str,
    designer: UserContext = Depends(get_current_designer),
    db: AsyncIOMotorDatabase = Depends(get_db)
):
    question = await verify_question_ownership(db, question_id, designer)
    await service.delete_question(db, question, designer)
    return {"message": "Question deleted"}

# ==================== RELATED QUESTIONS ====================

@router.get("/questions/{question_id}/related", response_model=List[QuestionPublic])
async def get_related_questions(
    question_id: str,
    designer: UserContext = Depends(get_current_designer),
    db: AsyncIOMotorDatabase = Depends(get_db)
):
    question = await verify_question_ownership(db, question_id, designer)
    return await service.get_related_questions(db, question)

@router.post("/questions/{question_id}/related/{related_id}", response_model=QuestionDetail)
async def add_related_question(
    question_id: str,
    related_id: str,
    designer: UserContext = Depends(get_current_designer),
    db: AsyncIOMotorDatabase = Depends(get_db)
):
    """
    Link another existing question as related
    """
    question = await verify_question_ownership(db, question_id, designer)
    return await service.add_related_question(db, question, related_id, designer)

@router.delete("/questions/{question_id}/related/{related_id}", response_model=QuestionDetail)
async def remove_related_question(
    question_id: str,
    related_id: str,
    designer: UserContext = Depends(get_current_designer),
    db: AsyncIOMotorDatabase = Depends(get_db)
):
    question = await verify_question_ownership(db, question_id, designer)
    return await service.remove_related_question(db, question, related_id, designer)

# ==================== CATEGORIES ====================

@router.get("/categories", response_model=List[CategoryResponse])
async def get_my_categories(
    designer: UserContext = Depends(get_current_designer),
    db: AsyncIOMotorDatabase = Depends(get_db)
):
    return await service.list_categories(db, designer)

@router.post("/categories", response_model=CategoryResponse, status_code=201)
async def create_category(
    data: CategoryCreate,
    designer: UserContext = Depends(get_current_designer),
    db: AsyncIOMotorDatabase = Depends(get_db)
):
    return await service.create_category(db, designer, data.name)

@router.put("/categories/{category_id}", response_model=CategoryResponse)
async def update_category(
    category_id: str,
    data: CategoryUpdate,
    designer: UserContext = Depends(get_current_designer),
    db: AsyncIOMotorDatabase = Depends(get_db)
):
    category = await verify_category_ownership(db, category_id, designer)
    return await service.update_category(db, category, designer, data.name)

@router.delete("/categories/{category_id}")
async def delete_category(
    category_id: str,
    designer: UserContext = Depends(get_current_designer),
    db: AsyncIOMotorDatabase = Depends(get_db)
):
    """
    Delete a category; its questions stay, uncategorised
    """
    category = await verify_category_ownership(db, category_id, designer)
    await service.delete_category(db, category, designer)
    return {"message": "Category deleted"}
