"""
Pydantic schemas for the bot automation API
"""
from pydantic import BaseModel
from typing import Optional, List
from datetime import datetime


class BotTransitionResult(BaseModel):
    """One application advanced by a bot pass"""
    applicationId: str
    applicantName: Optional[str] = None
    jobRole: str
    jobTitle: Optional[str] = None
    oldStatus: str
    newStatus: str
    comment: str


class BotPassResponse(BaseModel):
    message: str
    processedApplications: int
    results: List[BotTransitionResult]


class BotActivityEntry(BaseModel):
    applicationId: str
    applicantName: Optional[str] = None
    jobRole: str
    jobTitle: Optional[str] = None
    action: str
    oldStatus: Optional[str] = None
    newStatus: Optional[str] = None
    byRole: str
    timestamp: datetime
    comment: Optional[str] = None
