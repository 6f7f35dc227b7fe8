"""
Role-Gated Mutation Service
Creates applications and routes status changes through the transition engine
"""
import logging
from typing import List, Optional

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.database import commit_or_raise
from app.core.errors import (
    DuplicateApplication, InvalidOperation, NotFound,
    PersistenceFailure, ValidationError
)
from app.core.security import Role, Surface, authorize_role
from app.models.application import Application, ApplicationStatus
from app.models.job import JobRole
from app.services.status_engine import (
    ACTION_MANUAL_UPDATE, ACTION_STATUS_UPDATED, apply_transition,
    evaluate_transition, parse_status, record_creation
)

logger = logging.getLogger(__name__)


def _clean_skills(skills) -> List[str]:
    if skills is None:
        return []
    if isinstance(skills, str) or not isinstance(skills, (list, tuple)):
        raise ValidationError("Skills must be a list of strings")
    cleaned = []
    for skill in skills:
        if not isinstance(skill, str):
            raise ValidationError("Skills must be a list of strings")
        skill = skill.strip()
        if skill:
            cleaned.append(skill)
    return cleaned


def _clean_experience(experience) -> int:
    if experience is None:
        raise ValidationError("Please provide your experience in years")
    if isinstance(experience, bool) or not isinstance(experience, int):
        raise ValidationError("Experience must be a whole number of years")
    if experience < 0:
        raise ValidationError("Experience cannot be negative")
    return experience


def _clean_comment(comment: Optional[str]) -> Optional[str]:
    if comment is None:
        return None
    comment = comment.strip()
    return comment or None


class ApplicationService:
    """Every write to an Application goes through here"""

    def get_application(self, db: Session, application_id: str) -> Application:
        # populate_existing: always act on what is stored, not on a cached copy
        application = db.get(Application, application_id, populate_existing=True)
        if not application:
            raise NotFound("Application not found")
        return application

    def list_applications(
        self,
        db: Session,
        applicant_id: Optional[str] = None,
        is_technical: Optional[bool] = None,
        status: Optional[str] = None,
    ) -> List[Application]:
        """Applications matching the filter, newest first"""
        query = db.query(Application)
        if applicant_id is not None:
            query = query.filter(Application.applicantId == applicant_id)
        if is_technical is not None:
            query = query.filter(Application.isTechnical == is_technical)
        if status is not None:
            query = query.filter(Application.status == parse_status(status).value)
        return query.order_by(Application.createdAt.desc(), Application.id).all()

    def create_application(
        self,
        db: Session,
        applicant_id: str,
        job_role_id: str,
        experience: int,
        skills: Optional[List[str]] = None,
        additional_notes: Optional[str] = None,
        role: Role = Role.APPLICANT,
    ) -> Application:
        """
        Submit an application. Status is always Applied and the creation is
        logged. isTechnical is taken from the job role, never from the caller.
        """
        role = authorize_role(role, Surface.CREATE_APPLICATION)

        if not applicant_id:
            raise ValidationError("Applicant is required")
        if not job_role_id:
            raise ValidationError("Please provide a job role")
        experience = _clean_experience(experience)
        skills = _clean_skills(skills)
        if additional_notes is not None and not isinstance(additional_notes, str):
            raise ValidationError("Additional notes must be text")
        notes = (additional_notes or "").strip()

        job_role = db.get(JobRole, job_role_id)
        if not job_role:
            raise NotFound("Job role not found")

        if self._find_existing(db, applicant_id, job_role_id):
            raise DuplicateApplication("You have already applied for this job position")

        application = Application(
            applicantId=applicant_id,
            jobRoleId=job_role.id,
            isTechnical=bool(job_role.isTechnical),
            experience=experience,
            skills=skills,
            additionalNotes=notes,
            status=ApplicationStatus.APPLIED.value,
        )
        record_creation(application, role)
        db.add(application)

        try:
            db.commit()
        except IntegrityError as exc:
            db.rollback()
            # Lost a race against another submission for the same pair
            if self._find_existing(db, applicant_id, job_role_id):
                raise DuplicateApplication("You have already applied for this job position", exc)
            raise PersistenceFailure("Failed to save application", exc)
        except SQLAlchemyError as exc:
            db.rollback()
            raise PersistenceFailure("Failed to save application", exc)

        db.refresh(application)
        logger.info(
            "Application %s created by applicant %s for job role %s",
            application.id, applicant_id, job_role.id
        )
        return application

    def update_status_manual(
        self,
        db: Session,
        application_id: str,
        role,
        new_status,
        comment: Optional[str] = None,
    ) -> Application:
        """Admin correction of a non-technical application"""
        role = authorize_role(role, Surface.MANUAL_STATUS_UPDATE)
        application = self.get_application(db, application_id)

        if application.isTechnical:
            raise InvalidOperation("Cannot manually update technical applications")

        return self._transition(
            db, application, role, new_status, comment,
            action=ACTION_MANUAL_UPDATE,
            default_comment_template="Status manually changed from {old} to {new}",
        )

    def update_status(
        self,
        db: Session,
        application_id: str,
        role,
        new_status,
        comment: Optional[str] = None,
    ) -> Application:
        """Status change by admin or bot on any application"""
        role = authorize_role(role, Surface.GENERIC_STATUS_UPDATE)
        application = self.get_application(db, application_id)
        return self._transition(
            db, application, role, new_status, comment,
            action=ACTION_STATUS_UPDATED,
        )

    def _transition(
        self,
        db: Session,
        application: Application,
        role: Role,
        new_status,
        comment: Optional[str],
        action: str,
        default_comment_template: Optional[str] = None,
    ) -> Application:
        target = parse_status(new_status)
        old_status = application.status

        decision = evaluate_transition(old_status, target, role)
        if not decision.allowed:
            logger.warning(
                "Blocked transition %s -> %s on application %s by %s: %s",
                old_status, target.value, application.id, role.value, decision.reason
            )
            raise InvalidOperation(decision.reason)

        default_comment = None
        if default_comment_template:
            default_comment = default_comment_template.format(old=old_status, new=target.value)

        apply_transition(
            application, target, role, action,
            comment=_clean_comment(comment),
            default_comment=default_comment,
        )
        commit_or_raise(db, f"application {application.id}")
        db.refresh(application)

        logger.info(
            "Application %s moved %s -> %s by %s",
            application.id, old_status, target.value, role.value
        )
        return application

    def _find_existing(self, db: Session, applicant_id: str, job_role_id: str) -> Optional[Application]:
        return db.query(Application).filter(
            Application.applicantId == applicant_id,
            Application.jobRoleId == job_role_id
        ).first()


# Singleton instance
application_service = ApplicationService()
