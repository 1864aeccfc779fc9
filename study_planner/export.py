"""
export.py

- Schedule -> pandas DataFrame (for HTML tables)
- Schedule -> ICS text (Google Calendar import)
"""

from datetime import datetime, timedelta
from typing import Dict, List, Tuple

import pandas as pd

from .models import DAYS, StudySession


# =====================================================
# 1. Table view
# =====================================================
def schedule_to_frame(schedule: Dict[str, List[StudySession]]) -> pd.DataFrame:
    """One row per session, Monday first, then by start time within a day."""
    rows = [
        [day, s.time_range, s.subject, s.focus]
        for day in DAYS
        for s in schedule.get(day, [])
    ]
    return pd.DataFrame(rows, columns=["day", "time", "subject", "focus"])


# =====================================================
# 2. ICS generation
# =====================================================
def generate_ics_from_schedule(
    schedule: Dict[str, List[StudySession]],
    base_monday: str,
) -> Tuple[str, str]:
    """
    Build ICS text and a download filename from the weekly schedule.

    base_monday : the Monday of the week to place the sessions in (YYYY-MM-DD)
    """
    # 1) parse the reference Monday
    try:
        base_date = datetime.strptime(base_monday, "%Y-%m-%d")
    except ValueError:
        raise ValueError("base_monday must be formatted as YYYY-MM-DD")

    lines = [
        "BEGIN:VCALENDAR",
        "VERSION:2.0",
        "PRODID:-//Study Planner//EN",
    ]

    # 2) one VEVENT per session, Monday = base date + 0
    for offset, day in enumerate(DAYS):
        date = base_date + timedelta(days=offset)
        for i, session in enumerate(schedule.get(day, [])):
            dt_start = date + timedelta(minutes=session.start)
            dt_end = date + timedelta(minutes=session.end)

            dt_start_str = dt_start.strftime("%Y%m%dT%H%M%S")
            dt_end_str = dt_end.strftime("%Y%m%dT%H%M%S")

            lines.append("BEGIN:VEVENT")
            lines.append(f"UID:{offset}-{i}-{dt_start_str}@study-planner")
            lines.append(f"SUMMARY:[Study] {session.subject}")
            lines.append(f"DESCRIPTION:{session.focus}")
            lines.append(f"DTSTART:{dt_start_str}")
            lines.append(f"DTEND:{dt_end_str}")
            lines.append("END:VEVENT")

    lines.append("END:VCALENDAR")

    ics_content = "\r\n".join(lines)
    filename = f"study_plan_{base_monday}.ics"
    return ics_content, filename
