"""
Applicant directory model
Profiles only; credentials are handled by the upstream auth gateway
"""
from sqlalchemy import Column, String, DateTime
from datetime import datetime
from app.core.database import Base
from app.models.job import generate_id


class User(Base):
    __tablename__ = "User"

    id = Column(String(50), primary_key=True, index=True, default=generate_id)
    name = Column(String(200), nullable=False)
    email = Column(String(200), nullable=False, unique=True)
    role = Column(String(20), nullable=False, default="applicant")
    createdAt = Column(DateTime, default=datetime.utcnow)

    def __repr__(self):
        return f"<User {self.name} ({self.role})>"
