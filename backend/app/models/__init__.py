"""Pydantic models for the Subjects API"""

from .user import User, UserCreate
from .subject import Subject, SubjectCreate, SubjectUpdate
