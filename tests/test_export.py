import pytest

from study_planner.export import generate_ics_from_schedule, schedule_to_frame
from study_planner.models import DAYS, StudySession


@pytest.fixture
def schedule():
    week = {day: [] for day in DAYS}
    week["Monday"] = [StudySession(540, 630, "Math", "Mind Maps")]
    week["Sunday"] = [
        StudySession(540, 630, "Art", "Review"),
        StudySession(900, 990, "General Review", "Weekly Summary"),
    ]
    return week


def test_schedule_to_frame(schedule):
    df = schedule_to_frame(schedule)

    assert list(df.columns) == ["day", "time", "subject", "focus"]
    assert df["day"].tolist() == ["Monday", "Sunday", "Sunday"]
    assert df.iloc[2]["time"] == "15:00 - 16:30"


def test_schedule_to_frame_empty():
    assert schedule_to_frame({day: [] for day in DAYS}).empty


def test_ics_dates_sessions_from_base_monday(schedule):
    ics, filename = generate_ics_from_schedule(schedule, "2026-03-02")
    lines = ics.split("\r\n")

    assert filename == "study_plan_2026-03-02.ics"
    assert lines[0] == "BEGIN:VCALENDAR" and lines[-1] == "END:VCALENDAR"
    assert lines.count("BEGIN:VEVENT") == 3
    assert "DTSTART:20260302T090000" in lines
    assert "DTEND:20260302T103000" in lines
    assert "DTSTART:20260308T150000" in lines
    assert "SUMMARY:[Study] Math" in lines


def test_ics_rejects_bad_base_monday(schedule):
    with pytest.raises(ValueError):
        generate_ics_from_schedule(schedule, "03/02/2026")
