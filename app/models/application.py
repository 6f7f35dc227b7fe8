"""
Application database models

An Application owns two append-only histories, stored in their own tables and
loaded together with the application:
- ApplicationComment: free-text remarks by applicant, admin or bot
- ApplicationLog: the audit trail, one row per status change
Neither table is ever updated or deleted from.
"""
from sqlalchemy import (
    Column, Integer, String, Text, DateTime, Boolean, ForeignKey, JSON,
    UniqueConstraint, CheckConstraint
)
from sqlalchemy.orm import relationship
from datetime import datetime
from app.core.database import Base
from app.models.job import generate_id
from app.models.user import User  # noqa: F401  (target of Application.applicant)
import enum


class ApplicationStatus(str, enum.Enum):
    APPLIED = "Applied"
    REVIEWED = "Reviewed"
    INTERVIEW = "Interview"
    OFFER = "Offer"
    REJECTED = "Rejected"


STATUS_VALUES = tuple(s.value for s in ApplicationStatus)
_status_list = ", ".join(f"'{s}'" for s in STATUS_VALUES)


class Application(Base):
    __tablename__ = "Application"
    __table_args__ = (
        UniqueConstraint("applicantId", "jobRoleId", name="uq_application_applicant_job"),
        CheckConstraint(f"status IN ({_status_list})", name="ck_application_status"),
        CheckConstraint("experience IS NULL OR experience >= 0", name="ck_application_experience"),
    )

    id = Column(String(50), primary_key=True, index=True, default=generate_id)
    applicantId = Column(String(50), nullable=False, index=True)
    jobRoleId = Column(String(50), ForeignKey("JobRole.id"), nullable=False, index=True)
    isTechnical = Column(Boolean, nullable=False, default=False)

    # Nullable so legacy rows without it can still be loaded; creation requires it
    experience = Column(Integer, nullable=True)
    skills = Column(JSON, nullable=False, default=list)
    additionalNotes = Column(Text, nullable=False, default="")

    status = Column(String(20), nullable=False, default=ApplicationStatus.APPLIED.value)
    createdAt = Column(DateTime, default=datetime.utcnow)
    updatedAt = Column(DateTime, default=datetime.utcnow)

    # Optimistic concurrency: every UPDATE checks and bumps this
    version = Column(Integer, nullable=False)
    __mapper_args__ = {"version_id_col": version}

    # Relationships
    jobRole = relationship("JobRole", back_populates="applications", lazy="selectin")
    applicant = relationship(
        "User",
        primaryjoin="foreign(Application.applicantId) == User.id",
        viewonly=True,
        lazy="selectin",
    )
    comments = relationship(
        "ApplicationComment",
        order_by="ApplicationComment.id",
        lazy="selectin",
        back_populates="application",
    )
    logs = relationship(
        "ApplicationLog",
        order_by="ApplicationLog.id",
        lazy="selectin",
        back_populates="application",
    )

    @property
    def applicant_name(self):
        return self.applicant.name if self.applicant else None

    @property
    def applicant_email(self):
        return self.applicant.email if self.applicant else None

    @property
    def job_title(self):
        return self.jobRole.title if self.jobRole else None

    def __repr__(self):
        return f"<Application {self.applicantId} for JobRole #{self.jobRoleId} [{self.status}]>"


class ApplicationComment(Base):
    __tablename__ = "ApplicationComment"

    id = Column(Integer, primary_key=True, autoincrement=True)
    applicationId = Column(String(50), ForeignKey("Application.id"), nullable=False, index=True)
    text = Column(Text, nullable=False)
    authorRole = Column(String(20), nullable=False)
    timestamp = Column(DateTime, nullable=False, default=datetime.utcnow)

    application = relationship("Application", back_populates="comments")


class ApplicationLog(Base):
    __tablename__ = "ApplicationLog"

    id = Column(Integer, primary_key=True, autoincrement=True)
    applicationId = Column(String(50), ForeignKey("Application.id"), nullable=False, index=True)
    action = Column(String(100), nullable=False)
    oldStatus = Column(String(20), nullable=True)
    newStatus = Column(String(20), nullable=True)
    byRole = Column(String(20), nullable=False)
    timestamp = Column(DateTime, nullable=False, default=datetime.utcnow)
    comment = Column(Text, nullable=True)

    application = relationship("Application", back_populates="logs")
