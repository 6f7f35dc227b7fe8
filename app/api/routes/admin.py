"""
Admin API Endpoints
Non-technical application review and dashboard statistics
"""
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from typing import List

from app.core.database import get_db
from app.core.security import Actor, Surface, require
from app.schemas.application import ApplicationResponse, ApplicationMutationResponse, StatusUpdate
from app.schemas.dashboard import DashboardStats
from app.services.application_service import application_service
from app.services.reporting import reporting_service

router = APIRouter(prefix="/admin", tags=["Admin"])


@router.get("/non-technical-applications", response_model=List[ApplicationResponse])
def list_non_technical_applications(
    db: Session = Depends(get_db),
    actor: Actor = Depends(require(Surface.LIST_ALL_APPLICATIONS))
):
    """Applications reviewed by hand rather than by the bot"""
    return application_service.list_applications(db, is_technical=False)


@router.patch("/applications/{application_id}/update-status", response_model=ApplicationMutationResponse)
def manual_status_update(
    application_id: str,
    payload: StatusUpdate,
    db: Session = Depends(get_db),
    actor: Actor = Depends(require(Surface.MANUAL_STATUS_UPDATE))
):
    """
    Manually update application status (non-technical only)
    Technical applications are rejected with INVALID_OPERATION
    """
    application = application_service.update_status_manual(
        db, application_id, actor.role, payload.status, payload.comment
    )
    return {"message": "Application status updated successfully", "application": application}


@router.get("/dashboard-stats", response_model=DashboardStats)
def dashboard_stats(
    db: Session = Depends(get_db),
    actor: Actor = Depends(require(Surface.VIEW_DASHBOARD))
):
    return reporting_service.dashboard_stats(db)
