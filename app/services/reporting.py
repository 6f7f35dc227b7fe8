"""
Read-only views over applications for the admin dashboard and the bot panel
"""
from typing import List, Optional

from sqlalchemy import func
from sqlalchemy.orm import Session

from app.core.config import settings
from app.core.security import Role
from app.models.application import Application, ApplicationLog, ApplicationStatus


class ReportingService:

    def dashboard_stats(self, db: Session, recent_limit: Optional[int] = None) -> dict:
        """Totals, counts per status and the most recent applications"""
        if recent_limit is None:
            recent_limit = settings.RECENT_APPLICATIONS_LIMIT

        total = db.query(func.count(Application.id)).scalar()
        technical = db.query(func.count(Application.id)).filter(
            Application.isTechnical == True  # noqa: E712
        ).scalar()

        grouped = dict(
            db.query(Application.status, func.count(Application.id))
            .group_by(Application.status)
            .all()
        )
        status_counts = [
            {"status": status.value, "count": grouped.get(status.value, 0)}
            for status in ApplicationStatus
        ]

        recent = db.query(Application).order_by(
            Application.createdAt.desc(), Application.id
        ).limit(recent_limit).all()

        return {
            "totalApplications": total,
            "technicalApplications": technical,
            "nonTechnicalApplications": total - technical,
            "statusCounts": status_counts,
            "recentApplications": recent,
        }

    def bot_activity(self, db: Session) -> List[dict]:
        """Every bot-authored log entry on technical applications, newest first"""
        rows = db.query(ApplicationLog, Application).join(
            Application, ApplicationLog.applicationId == Application.id
        ).filter(
            Application.isTechnical == True,  # noqa: E712
            ApplicationLog.byRole == Role.BOT.value
        ).order_by(ApplicationLog.timestamp.desc(), ApplicationLog.id.desc()).all()

        return [
            {
                "applicationId": application.id,
                "applicantName": application.applicant_name,
                "jobRole": application.jobRoleId,
                "jobTitle": application.job_title,
                "action": entry.action,
                "oldStatus": entry.oldStatus,
                "newStatus": entry.newStatus,
                "byRole": entry.byRole,
                "timestamp": entry.timestamp,
                "comment": entry.comment,
            }
            for entry, application in rows
        ]


# Singleton instance
reporting_service = ReportingService()
