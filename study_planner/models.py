"""
models.py

- Domain objects passed between the router, the allocator and the analytics
- Plain dataclasses only; nothing here is shared between requests
"""

from dataclasses import dataclass, field
from datetime import date
from typing import Dict, List

from .clock import format_clock


DAYS = ["Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday"]


# =======================================
# Request side
# =======================================
@dataclass
class Course:
    name: str
    priority: float


@dataclass
class UnavailableRange:
    """
    day   : one of DAYS
    start : minutes since midnight
    end   : minutes since midnight
    """

    day: str
    start: int
    end: int


@dataclass
class ExamDate:
    subject: str
    date: date


@dataclass
class PlanRequest:
    """
    Everything the allocator needs, with clock times already parsed to minutes.
    """

    courses: List[Course]
    study_hours_per_day: float
    break_length: int = 0
    start_time: int = 9 * 60
    end_time: int = 18 * 60
    learning_style: str = ""
    unavailable_times: List[UnavailableRange] = field(default_factory=list)
    exam_dates: List[ExamDate] = field(default_factory=list)
    name: str = ""


# =======================================
# Result side
# =======================================
@dataclass(frozen=True)
class StudySession:
    start: int
    end: int
    subject: str
    focus: str

    @property
    def time_range(self) -> str:
        return f"{format_clock(self.start)} - {format_clock(self.end)}"

    def to_dict(self) -> Dict[str, str]:
        return {"time": self.time_range, "subject": self.subject, "focus": self.focus}


@dataclass
class Analytics:
    total_study_hours: float
    subject_distribution: Dict[str, float]
    recommendations: List[str]

    def to_dict(self) -> Dict:
        return {
            "totalStudyHours": self.total_study_hours,
            "subjectDistribution": dict(self.subject_distribution),
            "recommendations": list(self.recommendations),
        }


@dataclass
class PlanResult:
    schedule: Dict[str, List[StudySession]]
    analytics: Analytics

    def to_dict(self) -> Dict:
        return {
            "schedule": {
                day: [s.to_dict() for s in self.schedule.get(day, [])] for day in DAYS
            },
            "analytics": self.analytics.to_dict(),
        }
