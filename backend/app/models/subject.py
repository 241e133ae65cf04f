"""Subject-related Pydantic models"""

from pydantic import BaseModel, ConfigDict, field_validator
from typing import Optional, List
from datetime import datetime

from .user import User


class Subject(BaseModel):
    """Subject as returned by reads, with alumni expanded to users."""
    model_config = ConfigDict(extra="ignore")
    subject_id: str
    name: str
    teacher: str
    alumni: List[User] = []
    created_at: Optional[datetime] = None


class SubjectCreate(BaseModel):
    name: str
    teacher: str
    alumni: List[str] = []  # user_id references


class SubjectUpdate(BaseModel):
    """Partial update - only fields present in the request body are set."""
    name: Optional[str] = None
    teacher: Optional[str] = None
    alumni: Optional[List[str]] = None

    @field_validator("name", "teacher", "alumni")
    @classmethod
    def reject_null(cls, value):
        # Omitted fields keep the default and skip this; an explicit null does not
        if value is None:
            raise ValueError("may be omitted but not null")
        return value
