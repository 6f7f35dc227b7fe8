"""
Application API Endpoints
Applicants submit and track applications; admins and the bot update status
"""
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from typing import List

from app.core.database import get_db
from app.core.security import Actor, Surface, require
from app.schemas.application import (
    ApplicationCreate, ApplicationResponse, ApplicationMutationResponse, StatusUpdate
)
from app.services.application_service import application_service

router = APIRouter(prefix="/applications", tags=["Applications"])


# ============== APPLICANT ENDPOINTS ==============

@router.post("", response_model=ApplicationMutationResponse, status_code=status.HTTP_201_CREATED)
def create_application(
    payload: ApplicationCreate,
    db: Session = Depends(get_db),
    actor: Actor = Depends(require(Surface.CREATE_APPLICATION))
):
    """
    Apply for a job role
    The application starts as Applied with a creation entry in its log
    """
    application = application_service.create_application(
        db,
        applicant_id=actor.user_id,
        job_role_id=payload.jobRole,
        experience=payload.experience,
        skills=payload.skills,
        additional_notes=payload.additionalNotes,
        role=actor.role,
    )
    return {"message": "Application created successfully", "application": application}


@router.get("", response_model=List[ApplicationResponse])
def list_my_applications(
    db: Session = Depends(get_db),
    actor: Actor = Depends(require(Surface.LIST_OWN_APPLICATIONS))
):
    """The caller's own applications, newest first"""
    return application_service.list_applications(db, applicant_id=actor.user_id)


# ============== ADMIN / BOT ENDPOINTS ==============

@router.get("/all", response_model=List[ApplicationResponse])
def list_all_applications(
    db: Session = Depends(get_db),
    actor: Actor = Depends(require(Surface.LIST_ALL_APPLICATIONS))
):
    return application_service.list_applications(db)


@router.patch("/{application_id}", response_model=ApplicationMutationResponse)
def update_application_status(
    application_id: str,
    payload: StatusUpdate,
    db: Session = Depends(get_db),
    actor: Actor = Depends(require(Surface.GENERIC_STATUS_UPDATE))
):
    """
    Update application status (admin or bot)
    Admins may set any status; the bot may only take the next pipeline step
    """
    application = application_service.update_status(
        db, application_id, actor.role, payload.status, payload.comment
    )
    return {"message": "Application updated successfully", "application": application}
