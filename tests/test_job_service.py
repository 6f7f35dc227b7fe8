"""
Tests for the job role store.
"""
import pytest

from app.core.errors import InvalidOperation, NotFound, ValidationError
from app.services.job_service import job_role_service


def role_data(**overrides):
    data = {
        "title": "Data Engineer",
        "location": "Lisbon",
        "experienceRequired": "2 years",
        "isTechnical": True,
    }
    data.update(overrides)
    return data


def test_create_and_get(db):
    created = job_role_service.create_job_role(db, role_data(department="Data"))

    fetched = job_role_service.get_job_role(db, created.id)
    assert fetched.title == "Data Engineer"
    assert fetched.department == "Data"
    assert fetched.isTechnical is True
    assert fetched.createdAt is not None


@pytest.mark.parametrize("field", ["title", "location", "experienceRequired"])
def test_required_fields(db, field):
    with pytest.raises(ValidationError):
        job_role_service.create_job_role(db, role_data(**{field: "  "}))


def test_partial_update(db):
    created = job_role_service.create_job_role(db, role_data())

    updated = job_role_service.update_job_role(db, created.id, {"isTechnical": False, "description": "ETL"})

    assert updated.isTechnical is False
    assert updated.description == "ETL"
    assert updated.title == "Data Engineer"


def test_update_cannot_blank_required_field(db):
    created = job_role_service.create_job_role(db, role_data())
    with pytest.raises(ValidationError):
        job_role_service.update_job_role(db, created.id, {"title": None})


def test_update_rejects_null_technical_flag(db):
    created = job_role_service.create_job_role(db, role_data())

    with pytest.raises(ValidationError):
        job_role_service.update_job_role(db, created.id, {"isTechnical": None})

    assert job_role_service.get_job_role(db, created.id).isTechnical is True


def test_update_does_not_change_existing_applications(db, make_application):
    created = job_role_service.create_job_role(db, role_data())
    application = make_application(created)

    job_role_service.update_job_role(db, created.id, {"isTechnical": False})

    db.refresh(application)
    assert application.isTechnical is True


def test_delete(db):
    created = job_role_service.create_job_role(db, role_data())
    job_role_service.delete_job_role(db, created.id)
    with pytest.raises(NotFound):
        job_role_service.get_job_role(db, created.id)


def test_delete_refused_while_referenced(db, make_application):
    created = job_role_service.create_job_role(db, role_data())
    make_application(created)
    with pytest.raises(InvalidOperation):
        job_role_service.delete_job_role(db, created.id)
    assert job_role_service.get_job_role(db, created.id)


def test_listing(db):
    job_role_service.create_job_role(db, role_data(title="A"))
    job_role_service.create_job_role(db, role_data(title="B"))
    assert {j.title for j in job_role_service.list_job_roles(db)} == {"A", "B"}
