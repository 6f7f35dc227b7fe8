"""
Pydantic schemas for user profiles
"""
from pydantic import BaseModel
from typing import Optional
from datetime import datetime


class UserRegister(BaseModel):
    name: str
    email: str
    role: str = "applicant"


class UserResponse(BaseModel):
    id: str
    name: str
    email: str
    role: str
    createdAt: Optional[datetime] = None

    class Config:
        from_attributes = True
