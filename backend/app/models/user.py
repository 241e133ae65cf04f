"""User-related Pydantic models"""

from pydantic import BaseModel, ConfigDict
from typing import Optional
from datetime import datetime


class User(BaseModel):
    model_config = ConfigDict(extra="ignore")
    user_id: str
    name: Optional[str] = None
    age: Optional[int] = None
    email: Optional[str] = None
    created_at: Optional[datetime] = None


class UserCreate(BaseModel):
    name: str
    age: Optional[int] = None
    email: Optional[str] = None
