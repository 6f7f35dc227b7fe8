"""
Shared fixtures: an in-memory database per test, factories for job roles,
users and applications, and an API client bound to the test database.
"""
import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.core.database import get_db, init_db
from app.core.security import Role
from app.main import create_app
from app.models.job import JobRole
from app.models.user import User
from app.services.application_service import application_service


class FixedRandom:
    """Random source that always draws the same value"""

    def __init__(self, value: float):
        self.value = value
        self.calls = 0

    def random(self) -> float:
        self.calls += 1
        return self.value


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    init_db(bind=engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    yield session
    session.close()


@pytest.fixture
def make_job_role(db):
    counter = {"n": 0}

    def factory(is_technical=True, **fields):
        counter["n"] += 1
        job_role = JobRole(
            title=fields.pop("title", f"Role {counter['n']}"),
            location=fields.pop("location", "Remote"),
            experienceRequired=fields.pop("experienceRequired", "2+ years"),
            isTechnical=is_technical,
            **fields,
        )
        db.add(job_role)
        db.commit()
        db.refresh(job_role)
        return job_role

    return factory


@pytest.fixture
def make_user(db):
    def factory(name="Ada Lovelace", email=None, role=Role.APPLICANT):
        user = User(
            name=name,
            email=email or f"{name.lower().replace(' ', '.')}@example.com",
            role=role.value,
        )
        db.add(user)
        db.commit()
        db.refresh(user)
        return user

    return factory


@pytest.fixture
def make_application(db):
    def factory(job_role, applicant_id="applicant-1", experience=3, skills=None, notes=None):
        return application_service.create_application(
            db,
            applicant_id=applicant_id,
            job_role_id=job_role.id,
            experience=experience,
            skills=skills if skills is not None else ["Python"],
            additional_notes=notes,
        )

    return factory


@pytest.fixture
def app(session_factory):
    app = create_app()

    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    return app


@pytest.fixture
def client(app):
    # No context manager: the lifespan hook would create tables in the real database
    return TestClient(app)


def headers_for(role: str, user_id: str = None) -> dict:
    return {"X-User-Id": user_id or f"{role}-1", "X-User-Role": role}


@pytest.fixture
def admin_headers():
    return headers_for("admin")


@pytest.fixture
def bot_headers():
    return headers_for("bot")


@pytest.fixture
def applicant_headers():
    return headers_for("applicant", "applicant-1")


@pytest.fixture
def fixed_random():
    return FixedRandom
