"""
Status Transition Engine

Decides whether an application may move from its current status to a requested
one, and builds the audit records for a move that is allowed.

Pipeline:
    Applied -> Reviewed -> Interview -> Offer | Rejected

- Bot moves follow the pipeline one step at a time. Offer and Rejected accept
  nothing further.
- Admin moves are manual corrections and may set any status directly.
- Applicants never change a status.
"""
from dataclasses import dataclass
from datetime import datetime
from typing import Dict, FrozenSet, Optional

from app.core.errors import InvalidStatus
from app.core.security import Role
from app.models.application import (
    Application, ApplicationComment, ApplicationLog, ApplicationStatus
)

TERMINAL_STATUSES: FrozenSet[ApplicationStatus] = frozenset({
    ApplicationStatus.OFFER,
    ApplicationStatus.REJECTED,
})

BOT_TRANSITIONS: Dict[ApplicationStatus, FrozenSet[ApplicationStatus]] = {
    ApplicationStatus.APPLIED: frozenset({ApplicationStatus.REVIEWED}),
    ApplicationStatus.REVIEWED: frozenset({ApplicationStatus.INTERVIEW}),
    ApplicationStatus.INTERVIEW: frozenset({ApplicationStatus.OFFER, ApplicationStatus.REJECTED}),
    ApplicationStatus.OFFER: frozenset(),
    ApplicationStatus.REJECTED: frozenset(),
}

# Log actions
ACTION_CREATED = "Application Created"
ACTION_MANUAL_UPDATE = "Manual Status Update"
ACTION_STATUS_UPDATED = "Status Updated"
ACTION_BOT_AUTOMATION = "Bot Automation"


@dataclass(frozen=True)
class TransitionDecision:
    allowed: bool
    reason: Optional[str] = None

    @classmethod
    def allow(cls) -> "TransitionDecision":
        return cls(allowed=True)

    @classmethod
    def deny(cls, reason: str) -> "TransitionDecision":
        return cls(allowed=False, reason=reason)


def parse_status(value) -> ApplicationStatus:
    """Coerce a raw value into an ApplicationStatus or raise InvalidStatus"""
    if isinstance(value, ApplicationStatus):
        return value
    try:
        return ApplicationStatus(value)
    except ValueError:
        valid = ", ".join(s.value for s in ApplicationStatus)
        raise InvalidStatus(f"Invalid status '{value}'. Must be one of: {valid}")


def evaluate_transition(current, requested, role: Role) -> TransitionDecision:
    """
    Decide whether ``role`` may move an application from ``current`` to ``requested``.

    Raises InvalidStatus when either status is not a known value.
    """
    current = parse_status(current)
    requested = parse_status(requested)

    if role is Role.ADMIN:
        return TransitionDecision.allow()

    if role is Role.BOT:
        if current in TERMINAL_STATUSES:
            return TransitionDecision.deny(f"Application is already in terminal status {current.value}")
        if requested not in BOT_TRANSITIONS[current]:
            return TransitionDecision.deny(
                f"Bot cannot move an application from {current.value} to {requested.value}"
            )
        return TransitionDecision.allow()

    if role is Role.APPLICANT:
        return TransitionDecision.deny("Applicants cannot change application status")

    raise TypeError(f"Unhandled role: {role!r}")


def record_creation(application: Application, role: Role = Role.APPLICANT) -> ApplicationLog:
    """Append the creation log entry to a brand-new application"""
    entry = ApplicationLog(
        action=ACTION_CREATED,
        oldStatus=None,
        newStatus=application.status,
        byRole=role.value,
        timestamp=datetime.utcnow(),
        comment="Application submitted with detailed information",
    )
    application.logs.append(entry)
    return entry


def apply_transition(
    application: Application,
    new_status: ApplicationStatus,
    role: Role,
    action: str,
    comment: Optional[str] = None,
    default_comment: Optional[str] = None,
) -> ApplicationLog:
    """
    Mutate an application in memory: set the status, append one log entry and,
    when comment text was supplied, one comment. Nothing is flushed here; the
    caller commits the whole change in one transaction.
    """
    old_status = application.status
    now = datetime.utcnow()

    application.status = new_status.value
    application.updatedAt = now

    log_comment = comment or default_comment or f"Status changed from {old_status} to {new_status.value}"
    entry = ApplicationLog(
        action=action,
        oldStatus=old_status,
        newStatus=new_status.value,
        byRole=role.value,
        timestamp=now,
        comment=log_comment,
    )
    application.logs.append(entry)

    if comment:
        application.comments.append(ApplicationComment(
            text=comment,
            authorRole=role.value,
            timestamp=now,
        ))

    return entry
