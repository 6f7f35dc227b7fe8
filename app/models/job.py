"""
Job role database model
"""
import uuid
from sqlalchemy import Column, String, Text, DateTime, Boolean
from sqlalchemy.orm import relationship
from datetime import datetime
from app.core.database import Base


def generate_id() -> str:
    return uuid.uuid4().hex


class JobRole(Base):
    __tablename__ = "JobRole"

    id = Column(String(50), primary_key=True, index=True, default=generate_id)
    title = Column(String(200), nullable=False)
    description = Column(Text, nullable=True)
    location = Column(String(200), nullable=False)
    experienceRequired = Column(String(100), nullable=False)  # Free text, e.g. "2-4 years"
    isTechnical = Column(Boolean, nullable=False, default=False)
    department = Column(String(100), nullable=True)
    createdAt = Column(DateTime, default=datetime.utcnow)
    updatedAt = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    applications = relationship("Application", back_populates="jobRole")

    def __repr__(self):
        return f"<JobRole {self.title}>"
