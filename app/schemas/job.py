"""
Pydantic schemas for Job Role API
"""
from pydantic import BaseModel, field_validator
from typing import Optional
from datetime import datetime


class JobRoleBase(BaseModel):
    title: str
    description: Optional[str] = None
    location: str
    experienceRequired: str
    isTechnical: bool = False
    department: Optional[str] = None

    @field_validator('title', 'location', 'experienceRequired')
    @classmethod
    def not_blank(cls, v):
        v = v.strip()
        if not v:
            raise ValueError('must not be blank')
        return v


class JobRoleCreate(JobRoleBase):
    """Schema for creating a new job role"""
    pass


class JobRoleUpdate(BaseModel):
    """Schema for editing a job role; omitted fields are left as they are"""
    title: Optional[str] = None
    description: Optional[str] = None
    location: Optional[str] = None
    experienceRequired: Optional[str] = None
    isTechnical: Optional[bool] = None
    department: Optional[str] = None


class JobRoleResponse(JobRoleBase):
    id: str
    createdAt: Optional[datetime] = None
    updatedAt: Optional[datetime] = None

    class Config:
        from_attributes = True


class JobRoleSummary(BaseModel):
    """Job role fields shown alongside an application"""
    id: str
    title: str
    location: Optional[str] = None
    experienceRequired: Optional[str] = None
    department: Optional[str] = None

    class Config:
        from_attributes = True
