from fastapi.testclient import TestClient
import pytest

from study_planner.main import app


@pytest.fixture
def client():
    return TestClient(app)


@pytest.fixture
def body():
    return {
        "name": "Jo",
        "courses": [{"name": "Math", "priority": 5}, {"name": "History", "priority": 3}],
        "studyHoursPerDay": 3,
        "breakLength": 10,
        "startTime": "09:00",
        "endTime": "17:00",
        "learningStyle": "reading",
        "unavailableTimes": [{"day": "Monday", "start": "09:00", "end": "10:00"}],
        "examDates": [{"subject": "Math", "date": "2099-01-01"}],
    }


def test_schedule(client, body):
    res = client.post("/schedule", json=body)

    assert res.status_code == 200
    data = res.json()
    assert list(data["schedule"]) == [
        "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday",
    ]
    sessions = [s for day in data["schedule"].values() for s in day]
    analytics = data["analytics"]
    assert analytics["totalStudyHours"] == 1.5 * len(sessions)
    assert sum(analytics["subjectDistribution"].values()) == analytics["totalStudyHours"]
    assert analytics["recommendations"]
    assert data["schedule"]["Monday"][0]["time"] == "10:00 - 11:30"


@pytest.mark.parametrize("missing", ["courses", "studyHoursPerDay"])
def test_missing_required_fields(client, body, missing):
    del body[missing]
    res = client.post("/schedule", json=body)

    assert res.status_code == 400
    assert res.json() == {"detail": "Missing required fields"}


def test_zero_study_hours_counts_as_missing(client, body):
    body["studyHoursPerDay"] = 0
    assert client.post("/schedule", json=body).status_code == 400


def test_malformed_time(client, body):
    body["startTime"] = "9am"
    res = client.post("/schedule", json=body)

    assert res.status_code == 400
    assert "9am" in res.json()["detail"]


def test_invalid_day_is_rejected_by_validation(client, body):
    body["unavailableTimes"] = [{"day": "Funday", "start": "09:00", "end": "10:00"}]
    assert client.post("/schedule", json=body).status_code == 422


def test_unexpected_failure_is_500(client, body, monkeypatch):
    def boom(request):
        raise RuntimeError("boom")

    monkeypatch.setattr("study_planner.router.generate_study_plan", boom)
    res = client.post("/schedule", json=body)

    assert res.status_code == 500
    assert res.json() == {"detail": "Failed to generate schedule: boom"}


def test_schedule_html(client, body):
    res = client.post("/schedule-html", json=body)

    assert res.status_code == 200
    assert res.headers["content-type"].startswith("text/html")
    assert "Weekly study plan" in res.text
    assert "Math" in res.text


def test_schedule_html_escapes_course_names(client, body):
    body["courses"] = [{"name": "<script>alert(1)</script>", "priority": 9}]
    body["examDates"] = []
    res = client.post("/schedule-html", json=body)

    assert res.status_code == 200
    assert "<script>" not in res.text
    assert "Your &lt;script&gt;alert(1)&lt;/script&gt; focus is appropriate" in res.text


def test_schedule_ics(client, body):
    res = client.post("/schedule-ics", params={"base_monday": "2026-03-02"}, json=body)

    assert res.status_code == 200
    assert res.headers["content-type"].startswith("text/calendar")
    assert "study_plan_2026-03-02.ics" in res.headers["content-disposition"]
    assert res.text.startswith("BEGIN:VCALENDAR")


def test_schedule_ics_bad_monday(client, body):
    res = client.post("/schedule-ics", params={"base_monday": "tomorrow"}, json=body)
    assert res.status_code == 400


def test_health(client):
    res = client.get("/health")
    assert res.status_code == 200
    assert res.json() == {"status": "healthy"}


def test_docs_describes_endpoints(client):
    res = client.get("/docs")

    assert res.status_code == 200
    paths = [e["path"] for e in res.json()["endpoints"]]
    assert "/schedule" in paths and "/health" in paths
