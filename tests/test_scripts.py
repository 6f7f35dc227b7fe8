"""
Tests for the operational scripts.
"""
import httpx
import pytest

import bot_autorun
from fix_missing_experience import count_missing, fix_missing_experience


def test_fix_missing_experience(db, make_job_role, make_application):
    job = make_job_role()
    broken = [make_application(job, applicant_id=f"U{i}") for i in range(2)]
    healthy = make_application(job, applicant_id="ok", experience=4)
    for application in broken:
        application.experience = None
    db.commit()

    assert count_missing(db) == 2
    assert fix_missing_experience(db) == 2
    assert count_missing(db) == 0

    for application in broken:
        db.refresh(application)
        assert application.experience == 0
    db.refresh(healthy)
    assert healthy.experience == 4

    # Nothing left to do on a second run
    assert fix_missing_experience(db) == 0


def _client(handler):
    return httpx.Client(base_url="http://ats.test", transport=httpx.MockTransport(handler))


def test_run_once_sends_bot_identity():
    seen = {}

    def handler(request):
        seen["path"] = request.url.path
        seen["role"] = request.headers["X-User-Role"]
        return httpx.Response(200, json={"processedApplications": 2, "results": []})

    with _client(handler) as client:
        body = bot_autorun.run_once(client)

    assert body["processedApplications"] == 2
    assert seen == {"path": "/api/bot/trigger", "role": "bot"}


def test_run_once_raises_on_error_status():
    with _client(lambda request: httpx.Response(403, json={"code": "FORBIDDEN"})) as client:
        with pytest.raises(httpx.HTTPStatusError):
            bot_autorun.run_once(client)


def test_run_forever_keeps_going_after_failures():
    responses = iter([
        httpx.Response(500, json={}),
        httpx.Response(200, json={"processedApplications": 1}),
        httpx.Response(200, json={"processedApplications": 0}),
    ])
    sleeps = []

    with _client(lambda request: next(responses)) as client:
        runs = bot_autorun.run_forever(client, interval=30, max_runs=3, sleep=sleeps.append)

    assert runs == 3
    assert sleeps == [30, 30]
