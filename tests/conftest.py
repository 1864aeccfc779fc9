from datetime import date

import pytest

from study_planner.clock import parse_clock
from study_planner.models import Course, PlanRequest


@pytest.fixture
def today():
    return date(2026, 3, 2)  # a Monday


@pytest.fixture
def two_course_request():
    return PlanRequest(
        courses=[Course("A", 5), Course("B", 5)],
        study_hours_per_day=3,
        break_length=10,
        start_time=parse_clock("09:00"),
        end_time=parse_clock("17:00"),
        learning_style="visual",
    )
