"""User routes."""

from fastapi import APIRouter, HTTPException
from typing import List

from app.models.user import User, UserCreate
from app.services import users as user_service

router = APIRouter(tags=["users"])


@router.post("/users", status_code=201, summary="Create a new user")
async def create_user(user: UserCreate):
    """Create a new user"""
    return await user_service.create_user(user.model_dump())


@router.get("/users", response_model=List[User], summary="Get all users")
async def get_users():
    """Get all users"""
    return await user_service.get_all_users()


@router.get(
    "/users/{user_id}",
    response_model=User,
    summary="Get a user by ID",
    responses={404: {"description": "User not found"}},
)
async def get_user(user_id: str):
    """Get a user by ID"""
    user = await user_service.get_user_by_id(user_id)
    if not user:
        raise HTTPException(status_code=404, detail="User not found")
    return user


@router.delete(
    "/users/{user_id}",
    summary="Delete a user by ID",
    responses={404: {"description": "User not found"}},
)
async def delete_user(user_id: str):
    """Delete a user. Subjects referencing it simply stop listing it."""
    result = await user_service.delete_user(user_id)
    if result.deleted_count == 0:
        raise HTTPException(status_code=404, detail="User not found")

    return {"message": "User deleted", "deleted_count": result.deleted_count}
