"""
Applicant directory
Profiles shown next to applications; no credentials are stored here
"""
import logging

from sqlalchemy.orm import Session

from app.core.database import commit_or_raise
from app.core.errors import Forbidden, InvalidOperation, ValidationError
from app.core.security import parse_role
from app.models.user import User

logger = logging.getLogger(__name__)


class UserService:

    def register(self, db: Session, name: str, email: str, role="applicant") -> User:
        if not name or not name.strip():
            raise ValidationError("Please provide a name")
        if not email or "@" not in email:
            raise ValidationError("Please provide a valid email")
        try:
            role = parse_role(role)
        except Forbidden:
            raise ValidationError(f"Unknown role: {role}")
        email = email.strip().lower()

        if db.query(User).filter(User.email == email).first():
            raise InvalidOperation("A user with this email already exists")

        user = User(name=name.strip(), email=email, role=role.value)
        db.add(user)
        commit_or_raise(db, "user")
        db.refresh(user)
        logger.info("Registered %s %s", role.value, user.id)
        return user


# Singleton instance
user_service = UserService()
