"""
schemas.py

- Pydantic models for API requests
"""

import datetime
from typing import List, Literal, Optional

from pydantic import BaseModel, Field

DayName = Literal["Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday"]


# =======================================
# Pieces of the /schedule request body
# =======================================
class CourseIn(BaseModel):
    name: str
    priority: float = Field(ge=0)


class UnavailableTimeIn(BaseModel):
    day: DayName
    start: str          # "HH:MM"
    end: str            # "HH:MM"


class ExamDateIn(BaseModel):
    subject: str
    date: datetime.date


# =======================================
# /schedule request body
#  - courses / studyHoursPerDay are checked by the router so that a
#    missing value answers 400 instead of a validation error
# =======================================
class ScheduleRequest(BaseModel):
    name: str = ""
    courses: Optional[List[CourseIn]] = None
    studyHoursPerDay: Optional[float] = Field(default=None, ge=0)
    breakLength: int = Field(default=15, ge=0)       # minutes
    startTime: str = "09:00"
    endTime: str = "18:00"
    learningStyle: str = ""                          # visual / auditory / reading / kinesthetic
    unavailableTimes: List[UnavailableTimeIn] = Field(default_factory=list)
    examDates: List[ExamDateIn] = Field(default_factory=list)
