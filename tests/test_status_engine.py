"""
Unit tests for the status transition engine (no database involved).
"""
import pytest

from app.core.errors import InvalidStatus, ValidationError
from app.core.security import Role
from app.models.application import Application, ApplicationStatus
from app.services.status_engine import (
    ACTION_BOT_AUTOMATION, ACTION_MANUAL_UPDATE, BOT_TRANSITIONS, TERMINAL_STATUSES,
    apply_transition, evaluate_transition, parse_status, record_creation
)

ALL = list(ApplicationStatus)
BOT_ALLOWED = {
    ("Applied", "Reviewed"),
    ("Reviewed", "Interview"),
    ("Interview", "Offer"),
    ("Interview", "Rejected"),
}


class TestParseStatus:

    def test_accepts_known_values(self):
        assert parse_status("Interview") is ApplicationStatus.INTERVIEW
        assert parse_status(ApplicationStatus.OFFER) is ApplicationStatus.OFFER

    @pytest.mark.parametrize("value", ["applied", "Hired", "", None, 3])
    def test_rejects_unknown_values(self, value):
        with pytest.raises(InvalidStatus):
            parse_status(value)

    def test_invalid_status_is_a_validation_error(self):
        with pytest.raises(ValidationError):
            parse_status("Pending")


class TestEvaluateTransition:

    @pytest.mark.parametrize("current", ALL)
    @pytest.mark.parametrize("requested", ALL)
    def test_bot_only_moves_along_the_pipeline(self, current, requested):
        decision = evaluate_transition(current, requested, Role.BOT)
        assert decision.allowed == ((current.value, requested.value) in BOT_ALLOWED)
        if not decision.allowed:
            assert decision.reason

    @pytest.mark.parametrize("terminal", sorted(TERMINAL_STATUSES))
    def test_terminal_statuses_absorb_bot(self, terminal):
        for requested in ALL:
            assert not evaluate_transition(terminal, requested, Role.BOT).allowed

    @pytest.mark.parametrize("current", ALL)
    @pytest.mark.parametrize("requested", ALL)
    def test_admin_may_set_any_status(self, current, requested):
        assert evaluate_transition(current, requested, Role.ADMIN).allowed

    def test_applicant_never_changes_status(self):
        decision = evaluate_transition("Applied", "Reviewed", Role.APPLICANT)
        assert not decision.allowed

    def test_unknown_requested_status_raises(self):
        with pytest.raises(InvalidStatus):
            evaluate_transition("Applied", "Hired", Role.ADMIN)

    def test_bot_transition_table_covers_every_status(self):
        assert set(BOT_TRANSITIONS) == set(ApplicationStatus)


class TestApplyTransition:

    def _application(self, status="Applied"):
        application = Application(status=status, isTechnical=False)
        record_creation(application)
        return application

    def test_creation_log_entry(self):
        application = self._application()
        assert len(application.logs) == 1
        entry = application.logs[0]
        assert entry.action == "Application Created"
        assert entry.oldStatus is None
        assert entry.newStatus == "Applied"
        assert entry.byRole == "applicant"

    def test_sets_status_and_appends_one_log(self):
        application = self._application()
        entry = apply_transition(application, ApplicationStatus.REVIEWED, Role.ADMIN, ACTION_MANUAL_UPDATE)

        assert application.status == "Reviewed"
        assert application.logs[-1] is entry
        assert len(application.logs) == 2
        assert entry.oldStatus == "Applied"
        assert entry.newStatus == "Reviewed"
        assert entry.byRole == "admin"
        assert entry.timestamp is not None

    def test_comment_only_added_when_given(self):
        application = self._application()
        apply_transition(application, ApplicationStatus.REVIEWED, Role.ADMIN, ACTION_MANUAL_UPDATE)
        assert application.comments == []
        assert application.logs[-1].comment == "Status changed from Applied to Reviewed"

        apply_transition(
            application, ApplicationStatus.INTERVIEW, Role.BOT, ACTION_BOT_AUTOMATION,
            comment="Interview scheduled automatically",
        )
        assert len(application.comments) == 1
        assert application.comments[0].text == "Interview scheduled automatically"
        assert application.comments[0].authorRole == "bot"
        assert application.logs[-1].comment == "Interview scheduled automatically"

    def test_default_comment_override(self):
        application = self._application()
        apply_transition(
            application, ApplicationStatus.OFFER, Role.ADMIN, ACTION_MANUAL_UPDATE,
            default_comment="Status manually changed from Applied to Offer",
        )
        assert application.logs[-1].comment == "Status manually changed from Applied to Offer"
        assert application.comments == []

    def test_history_is_appended_not_rewritten(self):
        application = self._application()
        apply_transition(application, ApplicationStatus.REVIEWED, Role.ADMIN, ACTION_MANUAL_UPDATE)
        before = list(application.logs)
        apply_transition(application, ApplicationStatus.INTERVIEW, Role.ADMIN, ACTION_MANUAL_UPDATE)

        assert application.logs[:len(before)] == before
        assert application.logs[-1].newStatus == application.status == "Interview"
