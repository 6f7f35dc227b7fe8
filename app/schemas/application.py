"""
Pydantic schemas for Application API
Applications are always returned together with their comments and logs
"""
from pydantic import BaseModel, Field
from typing import Optional, List
from datetime import datetime

from app.schemas.job import JobRoleSummary


class ApplicationCreate(BaseModel):
    """Submitted by an applicant; status and isTechnical are decided server-side"""
    jobRole: str
    experience: int = Field(..., ge=0)
    skills: List[str] = []
    additionalNotes: Optional[str] = None


class StatusUpdate(BaseModel):
    # Plain str so unknown values reach the engine and get an INVALID_STATUS error
    status: str
    comment: Optional[str] = None


class CommentResponse(BaseModel):
    text: str
    authorRole: str
    timestamp: datetime

    class Config:
        from_attributes = True


class LogEntryResponse(BaseModel):
    action: str
    oldStatus: Optional[str] = None
    newStatus: Optional[str] = None
    byRole: str
    timestamp: datetime
    comment: Optional[str] = None

    class Config:
        from_attributes = True


class ApplicationResponse(BaseModel):
    id: str
    applicantId: str
    applicant_name: Optional[str] = None
    applicant_email: Optional[str] = None
    jobRoleId: str
    jobRole: Optional[JobRoleSummary] = None
    isTechnical: bool
    experience: Optional[int] = None
    skills: List[str] = []
    additionalNotes: Optional[str] = ""
    status: str
    comments: List[CommentResponse] = []
    logs: List[LogEntryResponse] = []
    createdAt: Optional[datetime] = None
    updatedAt: Optional[datetime] = None

    class Config:
        from_attributes = True


class ApplicationMutationResponse(BaseModel):
    message: str
    application: ApplicationResponse
