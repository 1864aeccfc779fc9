"""
service.py

- Business logic module
- Main functions:
  1) rank_courses        : exam-proximity priority boost on working copies
  2) compute_quotas      : how many sessions each course gets this week
  3) allocate_sessions   : spread the sessions over Monday..Sunday
  4) build_plan_request  : plain payload dict -> PlanRequest
  5) generate_study_plan : allocate + analytics in one call
"""

from datetime import date
from typing import Dict, List, Optional, Tuple
import logging
import math
import random

from .analytics import summarize_schedule
from .clock import days_until, parse_clock
from .models import (
    DAYS,
    Course,
    ExamDate,
    PlanRequest,
    PlanResult,
    StudySession,
    UnavailableRange,
)

logger = logging.getLogger(__name__)


# =======================================
# Defaults (session length / slot spacing / review block)
# =======================================
SESSION_LENGTH_MINUTES = 90
SLOT_SPACING_HOURS = 3          # slot s starts at start hour + 3*s

REVIEW_DAY = "Sunday"
REVIEW_START = 15 * 60          # 15:00
REVIEW_END = 16 * 60 + 30       # 16:30
REVIEW_SUBJECT = "General Review"
REVIEW_FOCUS = "Weekly Summary"

FOCUS_AREAS_BY_STYLE: Dict[str, List[str]] = {
    "visual": ["Diagrams & Charts", "Visual Notes", "Mind Maps", "Video Tutorials"],
    "auditory": ["Lecture Recordings", "Discussion Groups", "Verbal Repetition", "Podcasts"],
    "reading": ["Textbook Reading", "Note-Taking", "Written Summaries", "Practice Questions"],
    "kinesthetic": ["Practice Problems", "Lab Work", "Case Studies", "Interactive Simulations"],
}

COMMON_FOCUS_AREAS = [
    "Review",
    "Problem Sets",
    "Exam Prep",
    "Concept Mastery",
    "Reading",
    "Practice Exams",
    "Project Work",
]


def focus_areas_for(learning_style: str) -> List[str]:
    """Style-specific labels first, then the common ones. Unknown styles get only the common set."""
    style = (learning_style or "").strip().lower()
    return FOCUS_AREAS_BY_STYLE.get(style, []) + COMMON_FOCUS_AREAS


# =====================================================
# 1. Priorities and quotas
# =====================================================
def exam_boost(days_left: int) -> int:
    if days_left <= 7:
        return 3
    if days_left <= 14:
        return 2
    if days_left <= 30:
        return 1
    return 0


def rank_courses(
    courses: List[Course],
    exam_dates: List[ExamDate],
    today: date,
) -> List[Course]:
    """
    Return boosted working copies of the courses, highest priority first.

    The caller's Course objects are left untouched. A subject with several
    exams takes its largest boost (an exam already past counts as within
    a week); ties keep input order.
    """
    boosts: Dict[str, int] = {}
    for exam in exam_dates:
        boost = exam_boost(days_until(exam.date, today))
        boosts[exam.subject] = max(boosts.get(exam.subject, 0), boost)

    working = [Course(c.name, c.priority + boosts.get(c.name, 0)) for c in courses]
    return sorted(working, key=lambda c: c.priority, reverse=True)


def max_sessions_per_day(
    study_hours_per_day: float,
    break_length: int,
    start_time: int,
    end_time: int,
) -> int:
    by_budget = math.floor(study_hours_per_day * 60 / SESSION_LENGTH_MINUTES)

    available = end_time - start_time
    block = SESSION_LENGTH_MINUTES + max(break_length, 0)
    by_window = available // block if available > 0 else 0

    return max(0, min(by_budget, by_window))


def compute_quotas(ranked: List[Course], total_sessions: int) -> Dict[str, int]:
    """
    Split total_sessions between the ranked courses in proportion to priority.

    - every course gets at least one session while total_sessions > 0
    - all-zero priorities fall back to an equal share
    - the sum never exceeds total_sessions
    """
    if total_sessions <= 0 or not ranked:
        return {c.name: 0 for c in ranked}

    total_points = sum(c.priority for c in ranked)
    quotas: Dict[str, int] = {}
    for course in ranked:
        if total_points > 0:
            share = math.floor(course.priority * total_sessions / total_points)
        else:
            share = total_sessions // len(ranked)
        quotas[course.name] = max(share, 1)

    allocated = sum(quotas.values())
    if allocated <= total_sessions:
        return quotas

    # ---------------------------
    # (a) scale down proportionally
    # ---------------------------
    scale = total_sessions / allocated
    for name in quotas:
        quotas[name] = max(math.floor(quotas[name] * scale), 1)
    allocated = sum(quotas.values())

    # ---------------------------
    # (b) trim one at a time from the bottom of the ranking
    # ---------------------------
    while allocated > total_sessions:
        victim = next((c for c in reversed(ranked) if quotas[c.name] > 1), None)
        if victim is None:
            # more courses than sessions: the lowest ranked go without
            victim = next(c for c in reversed(ranked) if quotas[c.name] > 0)
        quotas[victim.name] -= 1
        allocated -= 1

    return quotas


# =====================================================
# 2. Weekly placement
# =====================================================
def _overlaps(start: int, end: int, ranges: List[Tuple[int, int]]) -> bool:
    return any(start < r_end and end > r_start for r_start, r_end in ranges)


def _find_start(
    hour: int,
    taken: List[Tuple[int, int]],
    start_time: int,
    end_time: int,
) -> Optional[int]:
    """
    First hour from `hour` up to the day's end hour where a full session fits
    inside the window without touching a taken range.
    """
    for h in range(hour, end_time // 60):
        start = h * 60
        end = start + SESSION_LENGTH_MINUTES
        if start < start_time or end > end_time:
            continue
        if not _overlaps(start, end, taken):
            return start
    return None


def allocate_sessions(
    request: PlanRequest,
    today: date,
    rng: random.Random,
) -> Dict[str, List[StudySession]]:
    """
    Build the weekly schedule {day -> sessions sorted by start}.

    - quotas follow boosted priority
    - each day walks its slots in priority order
    - a slot that clashes with unavailable time (or an earlier session)
      is moved to a later hour; if no hour works, the course gets the
      session back for a later slot
    """
    ranked = rank_courses(request.courses, request.exam_dates, today)
    per_day = max_sessions_per_day(
        request.study_hours_per_day,
        request.break_length,
        request.start_time,
        request.end_time,
    )
    quotas = compute_quotas(ranked, per_day * len(DAYS))
    remaining = dict(quotas)
    focus_areas = focus_areas_for(request.learning_style)

    logger.debug("sessions per day=%d quotas=%s", per_day, quotas)

    unavailable_by_day: Dict[str, List[Tuple[int, int]]] = {}
    for r in request.unavailable_times:
        unavailable_by_day.setdefault(r.day, []).append((r.start, r.end))

    end_hour = request.end_time // 60
    schedule: Dict[str, List[StudySession]] = {}

    for day in DAYS:
        blocked = unavailable_by_day.get(day, [])
        sessions: List[StudySession] = []
        slots = per_day

        # ---------------------------------------
        # (a) Sunday review block
        # ---------------------------------------
        if day == REVIEW_DAY and per_day >= 1 and _review_fits(request, blocked):
            candidates = [c for c in ranked if remaining[c.name] > 0]
            if candidates:
                remaining[rng.choice(candidates).name] -= 1
            sessions.append(
                StudySession(REVIEW_START, REVIEW_END, REVIEW_SUBJECT, REVIEW_FOCUS)
            )
            slots -= 1

        # ---------------------------------------
        # (b) regular slots, 3 hours apart
        # ---------------------------------------
        for slot in range(slots):
            course = next((c for c in ranked if remaining[c.name] > 0), None)
            if course is None:
                continue
            remaining[course.name] -= 1

            hour = request.start_time // 60 + SLOT_SPACING_HOURS * slot
            if hour >= end_hour:
                logger.debug("%s slot %d starts past the day's end, dropped", day, slot)
                continue

            taken = blocked + [(s.start, s.end) for s in sessions]
            start = _find_start(hour, taken, request.start_time, request.end_time)
            if start is None:
                remaining[course.name] += 1
                logger.warning("No free time on %s for a '%s' session", day, course.name)
                continue

            sessions.append(
                StudySession(
                    start,
                    start + SESSION_LENGTH_MINUTES,
                    course.name,
                    rng.choice(focus_areas),
                )
            )

        sessions.sort(key=lambda s: s.start)
        schedule[day] = sessions

    return schedule


def _review_fits(request: PlanRequest, blocked: List[Tuple[int, int]]) -> bool:
    if REVIEW_START < request.start_time or REVIEW_END > request.end_time:
        return False
    return not _overlaps(REVIEW_START, REVIEW_END, blocked)


# =====================================================
# 3. Payload -> PlanRequest
# =====================================================
def build_plan_request(payload: Dict) -> PlanRequest:
    """
    Convert a validated request body (camelCase keys, clock strings) into a
    PlanRequest. Malformed clock strings raise TimeParseError.
    """
    # ---------------------------
    # (a) courses / blocked times / exams
    # ---------------------------
    courses = [Course(str(c["name"]), float(c["priority"])) for c in payload["courses"]]

    unavailable = [
        UnavailableRange(u["day"], parse_clock(u["start"]), parse_clock(u["end"]))
        for u in payload.get("unavailableTimes") or []
    ]

    exams = []
    for e in payload.get("examDates") or []:
        exam_date = e["date"]
        if isinstance(exam_date, str):
            exam_date = date.fromisoformat(exam_date)
        exams.append(ExamDate(str(e["subject"]), exam_date))

    # ---------------------------
    # (b) budget and day window
    # ---------------------------
    return PlanRequest(
        courses=courses,
        study_hours_per_day=float(payload["studyHoursPerDay"]),
        break_length=int(payload.get("breakLength") or 0),
        start_time=parse_clock(payload.get("startTime") or "09:00"),
        end_time=parse_clock(payload.get("endTime") or "18:00"),
        learning_style=payload.get("learningStyle") or "",
        unavailable_times=unavailable,
        exam_dates=exams,
        name=payload.get("name") or "",
    )


# =====================================================
# 4. Full plan
# =====================================================
def generate_study_plan(
    request: PlanRequest,
    today: Optional[date] = None,
    rng: Optional[random.Random] = None,
) -> PlanResult:
    """
    Allocate the week and summarize it.

    today : reference date for exam distances (default: date.today())
    rng   : random source for focus labels, review charge and tips
            (default: a new random.Random per call)
    """
    today = today or date.today()
    rng = rng or random.Random()

    # allocator first; the analytics reuse the same boosted ranking
    schedule = allocate_sessions(request, today, rng)
    ranked = rank_courses(request.courses, request.exam_dates, today)
    analytics = summarize_schedule(schedule, ranked, request.exam_dates, today, rng)

    placed = sum(len(s) for s in schedule.values())
    logger.info(
        "Generated plan for '%s': %d sessions, %.1f hours",
        request.name or "anonymous",
        placed,
        analytics.total_study_hours,
    )
    return PlanResult(schedule=schedule, analytics=analytics)
