"""Subject routes."""

from fastapi import APIRouter, HTTPException
from typing import List

from app.models.subject import Subject, SubjectCreate, SubjectUpdate
from app.models.user import User
from app.services import subjects as subject_service

router = APIRouter(tags=["subjects"])

NOT_FOUND = {404: {"description": "Subject not found"}}


@router.post(
    "/subjects",
    status_code=201,
    summary="Create a new subject",
    description="Adds a subject with its name, teacher and enrolled user ids.",
    responses={201: {"description": "Subject created"}},
)
async def create_subject(subject: SubjectCreate):
    """Create a new subject"""
    return await subject_service.create_subject(subject.model_dump())


@router.get(
    "/subjects",
    response_model=List[Subject],
    summary="Get all subjects",
    description="Returns every subject with its alumni expanded to user records.",
)
async def get_subjects():
    """Get all subjects"""
    return await subject_service.get_all_subjects()


@router.get(
    "/subjects/{subject_id}",
    response_model=Subject,
    summary="Get a subject by ID",
    description="Returns the details of one subject.",
    responses=NOT_FOUND,
)
async def get_subject(subject_id: str):
    """Get a subject by ID"""
    subject = await subject_service.get_subject_by_id(subject_id)
    if not subject:
        raise HTTPException(status_code=404, detail="Subject not found")
    return subject


@router.put(
    "/subjects/{subject_id}",
    summary="Update a subject by ID",
    description="Sets only the fields present in the body; the rest are left unchanged.",
    responses={200: {"description": "Subject updated"}, **NOT_FOUND},
)
async def update_subject(subject_id: str, update: SubjectUpdate):
    """Update a subject"""
    update_data = update.model_dump(exclude_unset=True)
    if not update_data:
        raise HTTPException(status_code=400, detail="No fields to update")

    result = await subject_service.update_subject(subject_id, update_data)
    if result.matched_count == 0:
        raise HTTPException(status_code=404, detail="Subject not found")

    return {
        "message": "Subject updated",
        "matched_count": result.matched_count,
        "modified_count": result.modified_count
    }


@router.delete(
    "/subjects/{subject_id}",
    summary="Delete a subject by ID",
    description="Removes one subject from the database.",
    responses={200: {"description": "Subject deleted"}, **NOT_FOUND},
)
async def delete_subject(subject_id: str):
    """Delete a subject"""
    result = await subject_service.delete_subject(subject_id)
    if result.deleted_count == 0:
        raise HTTPException(status_code=404, detail="Subject not found")

    return {"message": "Subject deleted", "deleted_count": result.deleted_count}


@router.get(
    "/subjects/{subject_id}/users",
    response_model=List[User],
    summary="Get the users of a subject",
    description="Returns every user enrolled in the subject, in enrollment order.",
    responses=NOT_FOUND,
)
async def get_subject_users(subject_id: str):
    """Get users enrolled in a subject"""
    if not await subject_service.subject_exists(subject_id):
        raise HTTPException(status_code=404, detail="Subject not found")
    return await subject_service.get_users_by_subject_id(subject_id)
