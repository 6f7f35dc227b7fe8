"""
Job Posting Store
Plain CRUD over job roles
"""
import logging
from typing import List

from sqlalchemy.orm import Session

from app.core.database import commit_or_raise
from app.core.errors import InvalidOperation, NotFound, ValidationError
from app.models.application import Application
from app.models.job import JobRole

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("title", "location", "experienceRequired")
NOT_NULL_FIELDS = ("isTechnical",)


class JobRoleService:

    def list_job_roles(self, db: Session) -> List[JobRole]:
        return db.query(JobRole).order_by(JobRole.createdAt.desc(), JobRole.id).all()

    def get_job_role(self, db: Session, job_role_id: str) -> JobRole:
        job_role = db.get(JobRole, job_role_id)
        if not job_role:
            raise NotFound("Job role not found")
        return job_role

    def create_job_role(self, db: Session, data: dict) -> JobRole:
        self._check_required(data, REQUIRED_FIELDS)
        self._check_not_null(data)
        job_role = JobRole(**data)
        db.add(job_role)
        commit_or_raise(db, "job role")
        db.refresh(job_role)
        logger.info("Job role %s created: %s", job_role.id, job_role.title)
        return job_role

    def update_job_role(self, db: Session, job_role_id: str, data: dict) -> JobRole:
        """Apply a partial update; only the given fields change"""
        job_role = self.get_job_role(db, job_role_id)
        self._check_required(data, [f for f in REQUIRED_FIELDS if f in data])
        self._check_not_null(data)
        for field, value in data.items():
            setattr(job_role, field, value)
        commit_or_raise(db, "job role")
        db.refresh(job_role)
        logger.info("Job role %s updated", job_role.id)
        return job_role

    def delete_job_role(self, db: Session, job_role_id: str) -> None:
        job_role = self.get_job_role(db, job_role_id)
        in_use = db.query(Application.id).filter(Application.jobRoleId == job_role.id).count()
        if in_use:
            raise InvalidOperation(
                f"Job role has {in_use} application(s) and cannot be deleted"
            )
        db.delete(job_role)
        commit_or_raise(db, "job role")
        logger.info("Job role %s deleted", job_role_id)

    def _check_required(self, data: dict, fields) -> None:
        for field in fields:
            value = data.get(field)
            if value is None or (isinstance(value, str) and not value.strip()):
                raise ValidationError(f"Please provide {field}")

    def _check_not_null(self, data: dict) -> None:
        for field in NOT_NULL_FIELDS:
            if field in data and data[field] is None:
                raise ValidationError(f"{field} cannot be empty")


# Singleton instance
job_role_service = JobRoleService()
