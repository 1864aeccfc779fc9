"""
analytics.py

- Weekly schedule -> total hours, hours per subject, recommendations
"""

from datetime import date
from typing import Dict, List
import random

import pandas as pd

from .clock import days_until
from .models import Analytics, Course, ExamDate, StudySession

SESSION_HOURS = 1.5
REVIEW_BUCKET = "General Review"

STUDY_TECHNIQUES = [
    "Try using spaced repetition for improving retention.",
    "Consider the Pomodoro technique for better focus during study sessions.",
    "Adding active recall through practice tests can improve memory retention.",
    "Review your notes within 24 hours of making them to solidify understanding.",
    "Try teaching the material to someone else to identify knowledge gaps.",
]


# =====================================================
# 1. Hours per subject
# =====================================================
def subject_hours(
    schedule: Dict[str, List[StudySession]],
    courses: List[Course],
) -> Dict[str, float]:
    """
    Every course (and the review bucket) starts at 0 hours; each placed
    session adds 1.5 hours to its subject.
    """
    distribution: Dict[str, float] = {c.name: 0.0 for c in courses}
    distribution[REVIEW_BUCKET] = 0.0

    rows = [
        {"subject": s.subject, "hours": SESSION_HOURS}
        for sessions in schedule.values()
        for s in sessions
    ]
    if not rows:
        return distribution

    df = pd.DataFrame(rows)
    for subject, hours in df.groupby("subject", sort=False)["hours"].sum().items():
        distribution[subject] = float(hours)
    return distribution


# =====================================================
# 2. Recommendations
# =====================================================
def exam_recommendations(
    distribution: Dict[str, float],
    exam_dates: List[ExamDate],
    today: date,
) -> List[str]:
    messages = []
    for exam in exam_dates:
        days_left = days_until(exam.date, today)
        if days_left > 14:
            continue

        hours = distribution.get(exam.subject, 0.0)
        if days_left <= 7:
            if hours < 10:
                messages.append(
                    f"Consider adding more {exam.subject} sessions before the upcoming "
                    f"exam in {days_left} days."
                )
        elif hours < 7:
            messages.append(
                f"Increase study time for {exam.subject} as the exam is approaching "
                f"in {days_left} days."
            )
    return messages


def top_priority_course(courses: List[Course]):
    """First course with the strictly highest priority, or None."""
    best = None
    for course in courses:
        if best is None or course.priority > best.priority:
            best = course
    return best


def summarize_schedule(
    schedule: Dict[str, List[StudySession]],
    courses: List[Course],
    exam_dates: List[ExamDate],
    today: date,
    rng: random.Random,
) -> Analytics:
    """
    Weekly schedule -> Analytics

    - recommendations keep a fixed order: exam advice, priority
      affirmation, then technique tips
    """
    # ---------------------------------------
    # 1) hours
    # ---------------------------------------
    distribution = subject_hours(schedule, courses)
    total = SESSION_HOURS * sum(len(sessions) for sessions in schedule.values())

    # ---------------------------------------
    # 2) exam advice
    # ---------------------------------------
    recommendations = exam_recommendations(distribution, exam_dates, today)

    # ---------------------------------------
    # 3) top-priority course holding over 30% of the week
    # ---------------------------------------
    top = top_priority_course(courses)
    if top is not None and distribution.get(top.name, 0.0) > total * 0.3:
        recommendations.append(
            f"Your {top.name} focus is appropriate given its high priority."
        )

    # ---------------------------------------
    # 4) one technique tip, two when the list is still short
    # ---------------------------------------
    index = rng.randrange(len(STUDY_TECHNIQUES))
    recommendations.append(STUDY_TECHNIQUES[index])
    if len(recommendations) < 3:
        recommendations.append(STUDY_TECHNIQUES[(index + 1) % len(STUDY_TECHNIQUES)])

    return Analytics(
        total_study_hours=total,
        subject_distribution=distribution,
        recommendations=recommendations,
    )
