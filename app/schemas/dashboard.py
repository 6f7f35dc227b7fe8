"""
Pydantic schemas for the admin dashboard
"""
from pydantic import BaseModel
from typing import List

from app.schemas.application import ApplicationResponse


class StatusCount(BaseModel):
    status: str
    count: int


class DashboardStats(BaseModel):
    totalApplications: int
    technicalApplications: int
    nonTechnicalApplications: int
    statusCounts: List[StatusCount]
    recentApplications: List[ApplicationResponse]
