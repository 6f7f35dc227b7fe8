"""
Job Role API Endpoints
Admins create and manage job postings; applicants browse the public list
"""
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from typing import List

from app.core.database import get_db
from app.core.security import Actor, Surface, require
from app.schemas.job import JobRoleCreate, JobRoleUpdate, JobRoleResponse
from app.services.job_service import job_role_service

router = APIRouter(prefix="/admin/job-roles", tags=["Job Roles"])


# ============== PUBLIC ENDPOINTS ==============

@router.get("/public", response_model=List[JobRoleResponse])
def list_public_job_roles(db: Session = Depends(get_db)):
    """All job roles, for applicants choosing where to apply"""
    return job_role_service.list_job_roles(db)


# ============== ADMIN ENDPOINTS ==============

@router.post("", response_model=JobRoleResponse, status_code=status.HTTP_201_CREATED)
def create_job_role(
    job_data: JobRoleCreate,
    db: Session = Depends(get_db),
    actor: Actor = Depends(require(Surface.MANAGE_JOB_ROLES))
):
    """Create a new job role"""
    return job_role_service.create_job_role(db, job_data.model_dump())


@router.get("", response_model=List[JobRoleResponse])
def list_job_roles(
    db: Session = Depends(get_db),
    actor: Actor = Depends(require(Surface.MANAGE_JOB_ROLES))
):
    return job_role_service.list_job_roles(db)


@router.get("/{job_role_id}", response_model=JobRoleResponse)
def get_job_role(
    job_role_id: str,
    db: Session = Depends(get_db),
    actor: Actor = Depends(require(Surface.MANAGE_JOB_ROLES))
):
    return job_role_service.get_job_role(db, job_role_id)


@router.put("/{job_role_id}", response_model=JobRoleResponse)
def update_job_role(
    job_role_id: str,
    job_data: JobRoleUpdate,
    db: Session = Depends(get_db),
    actor: Actor = Depends(require(Surface.MANAGE_JOB_ROLES))
):
    """Edit a job role; only the fields sent are changed"""
    return job_role_service.update_job_role(
        db, job_role_id, job_data.model_dump(exclude_unset=True)
    )


@router.delete("/{job_role_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_job_role(
    job_role_id: str,
    db: Session = Depends(get_db),
    actor: Actor = Depends(require(Surface.MANAGE_JOB_ROLES))
):
    """Delete a job role that no application refers to"""
    job_role_service.delete_job_role(db, job_role_id)
    return None
