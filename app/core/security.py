"""
Actor identity and role permissions

Authentication happens upstream: the gateway that verifies tokens forwards the
caller as X-User-Id / X-User-Role headers. This module turns those headers into
an Actor and checks the actor's role against the permission table.
"""
import enum
from dataclasses import dataclass
from typing import Dict, FrozenSet, Optional

from fastapi import Depends, Header

from app.core.errors import Forbidden, Unauthorized


class Role(str, enum.Enum):
    APPLICANT = "applicant"
    ADMIN = "admin"
    BOT = "bot"


class Surface(str, enum.Enum):
    """Every operation an actor can invoke through the API"""
    CREATE_APPLICATION = "create_application"
    LIST_OWN_APPLICATIONS = "list_own_applications"
    LIST_ALL_APPLICATIONS = "list_all_applications"
    MANUAL_STATUS_UPDATE = "manual_status_update"  # non-technical only
    GENERIC_STATUS_UPDATE = "generic_status_update"
    MANAGE_JOB_ROLES = "manage_job_roles"
    VIEW_DASHBOARD = "view_dashboard"
    RUN_BOT_PASS = "run_bot_pass"
    VIEW_BOT_ACTIVITY = "view_bot_activity"


SURFACE_PERMISSIONS: Dict[Surface, FrozenSet[Role]] = {
    Surface.CREATE_APPLICATION: frozenset({Role.APPLICANT}),
    Surface.LIST_OWN_APPLICATIONS: frozenset({Role.APPLICANT}),
    Surface.LIST_ALL_APPLICATIONS: frozenset({Role.ADMIN}),
    Surface.MANUAL_STATUS_UPDATE: frozenset({Role.ADMIN}),
    Surface.GENERIC_STATUS_UPDATE: frozenset({Role.ADMIN, Role.BOT}),
    Surface.MANAGE_JOB_ROLES: frozenset({Role.ADMIN}),
    Surface.VIEW_DASHBOARD: frozenset({Role.ADMIN}),
    Surface.RUN_BOT_PASS: frozenset({Role.BOT}),
    Surface.VIEW_BOT_ACTIVITY: frozenset({Role.BOT}),
}

_missing = set(Surface) - set(SURFACE_PERMISSIONS)
if _missing:
    raise RuntimeError(f"No permissions defined for surfaces: {sorted(s.value for s in _missing)}")


@dataclass(frozen=True)
class Actor:
    """An authenticated caller"""
    user_id: str
    role: Role


def parse_role(value) -> Role:
    """Map a raw role value onto the closed Role enum"""
    if isinstance(value, Role):
        return value
    try:
        return Role(str(value).strip().lower())
    except ValueError:
        raise Forbidden(f"Unknown role: {value}")


def authorize_role(role, surface: Surface) -> Role:
    """Raise Forbidden unless the role may use the surface"""
    role = parse_role(role)
    if role not in SURFACE_PERMISSIONS[surface]:
        raise Forbidden(f"Role '{role.value}' may not perform {surface.value}")
    return role


def authorize(actor: Actor, surface: Surface) -> Actor:
    """Raise Forbidden unless the actor's role may use the surface"""
    authorize_role(actor.role, surface)
    return actor


def get_current_actor(
    x_user_id: Optional[str] = Header(None),
    x_user_role: Optional[str] = Header(None),
) -> Actor:
    """Dependency resolving the caller from gateway headers"""
    if not x_user_id or not x_user_role:
        raise Unauthorized("Missing authenticated identity")
    return Actor(user_id=x_user_id, role=parse_role(x_user_role))


def require(surface: Surface):
    """Dependency factory: current actor, checked against a surface"""
    def dependency(actor: Actor = Depends(get_current_actor)) -> Actor:
        return authorize(actor, surface)
    return dependency
