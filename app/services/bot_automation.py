"""
Bot Automation Driver

One pass moves every technical application that is not yet in a terminal
status exactly one step along the pipeline:

    Applied   -> Reviewed
    Reviewed  -> Interview
    Interview -> Offer (with BOT_OFFER_PROBABILITY) or Rejected

A failure to save one application is logged and the pass moves on. Nothing here
schedules itself; periodic runs are driven from outside (see bot_autorun.py).
"""
import logging
import random
from typing import List, Optional, Tuple

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.config import settings
from app.core.security import Role
from app.models.application import Application, ApplicationStatus
from app.schemas.bot import BotPassResponse, BotTransitionResult
from app.services.status_engine import (
    ACTION_BOT_AUTOMATION, TERMINAL_STATUSES, apply_transition, evaluate_transition
)

logger = logging.getLogger(__name__)

REVIEWED_COMMENT = "Application automatically reviewed by bot system"
INTERVIEW_COMMENT = "Interview scheduled automatically"
OFFER_COMMENT = "Interview passed - Offer extended automatically"
REJECTED_COMMENT = "Interview did not meet requirements"


class BotAutomationDriver:
    """
    Drives technical applications through the pipeline.

    ``rng`` is anything with a ``random()`` method returning a float in [0, 1);
    pass a seeded ``random.Random`` (or a stub) for reproducible outcomes.
    """

    def __init__(self, rng=None, offer_probability: Optional[float] = None):
        self.rng = rng or random.Random()
        self.offer_probability = (
            settings.BOT_OFFER_PROBABILITY if offer_probability is None else offer_probability
        )

    def next_step(self, status: str, rng=None) -> Optional[Tuple[ApplicationStatus, str]]:
        """The bot's move for an application in ``status``, or None to leave it"""
        if status == ApplicationStatus.APPLIED.value:
            return ApplicationStatus.REVIEWED, REVIEWED_COMMENT
        if status == ApplicationStatus.REVIEWED.value:
            return ApplicationStatus.INTERVIEW, INTERVIEW_COMMENT
        if status == ApplicationStatus.INTERVIEW.value:
            # One independent draw per application per pass
            draw = (rng or self.rng).random()
            if draw < self.offer_probability:
                return ApplicationStatus.OFFER, OFFER_COMMENT
            return ApplicationStatus.REJECTED, REJECTED_COMMENT
        return None

    def candidates(self, db: Session) -> List[Application]:
        terminal = [s.value for s in TERMINAL_STATUSES]
        return db.query(Application).filter(
            Application.isTechnical == True,  # noqa: E712
            Application.status.notin_(terminal)
        ).order_by(Application.createdAt, Application.id).all()

    def run_pass(self, db: Session, rng=None) -> BotPassResponse:
        results: List[BotTransitionResult] = []
        candidates = self.candidates(db)
        logger.info("Bot pass started: %d candidate application(s)", len(candidates))

        for application in candidates:
            application_id = application.id

            if application.experience is None:
                logger.warning(
                    "Skipping application %s - missing experience field", application_id
                )
                continue

            old_status = application.status
            step = self.next_step(old_status, rng)
            if step is None:
                continue
            new_status, comment = step

            decision = evaluate_transition(old_status, new_status, Role.BOT)
            if not decision.allowed:
                logger.warning("Skipping application %s - %s", application_id, decision.reason)
                continue

            applicant_name = application.applicant_name
            job_role_id = application.jobRoleId
            job_title = application.job_title

            apply_transition(application, new_status, Role.BOT, ACTION_BOT_AUTOMATION, comment=comment)
            try:
                db.commit()
            except SQLAlchemyError as exc:
                db.rollback()
                logger.error("Failed to save application %s: %s", application_id, exc)
                continue

            logger.info(
                "Bot moved application %s %s -> %s", application_id, old_status, new_status.value
            )
            results.append(BotTransitionResult(
                applicationId=application_id,
                applicantName=applicant_name,
                jobRole=job_role_id,
                jobTitle=job_title,
                oldStatus=old_status,
                newStatus=new_status.value,
                comment=comment,
            ))

        logger.info("Bot pass completed: %d application(s) advanced", len(results))
        return BotPassResponse(
            message="Bot automation completed",
            processedApplications=len(results),
            results=results,
        )


# Singleton instance
bot_driver = BotAutomationDriver()
