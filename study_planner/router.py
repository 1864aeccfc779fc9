"""
router.py

- FastAPI endpoints
- JSON plan, HTML plan view, ICS download, health and endpoint description
"""

import html
from io import StringIO
import logging

from fastapi import APIRouter, HTTPException
from fastapi.responses import HTMLResponse, StreamingResponse
import pandas as pd

from .clock import TimeParseError
from .export import generate_ics_from_schedule, schedule_to_frame
from .models import PlanResult
from .schemas import ScheduleRequest
from .service import build_plan_request, generate_study_plan

logger = logging.getLogger(__name__)

# =======================================
# Router object
#  - no prefix: endpoints start at "/"
#  - tags=["planner"]: Swagger group name
# =======================================
router = APIRouter(tags=["planner"])


def _run_plan(req: ScheduleRequest) -> PlanResult:
    """
    Shared by every /schedule* endpoint
    - missing courses / studyHoursPerDay -> 400
    - malformed clock strings -> 400
    - anything else the planner raises -> 500
    """
    if req.courses is None or not req.studyHoursPerDay:
        raise HTTPException(status_code=400, detail="Missing required fields")

    try:
        plan_request = build_plan_request(req.model_dump())
        return generate_study_plan(plan_request)
    except TimeParseError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        logger.exception("Error generating schedule")
        raise HTTPException(status_code=500, detail=f"Failed to generate schedule: {e}")


# ====================================================
# 1. Study plan – JSON API
# ====================================================
@router.post("/schedule")
async def create_schedule(req: ScheduleRequest):
    """
    Weekly study timetable plus analytics
    - response: { "schedule": {day: [{time, subject, focus}]}, "analytics": {...} }
    """
    return _run_plan(req).to_dict()


# ====================================================
# 2. Study plan – HTML view
# ====================================================
@router.post("/schedule-html", response_class=HTMLResponse)
async def create_schedule_html(req: ScheduleRequest):
    result = _run_plan(req)

    # (a) timetable
    df = schedule_to_frame(result.schedule)
    if df.empty:
        table_html = "<p>No study sessions could be placed.</p>"
    else:
        table_html = df.to_html(index=False, justify="center")

    # (b) hours per subject + recommendations (user text, escaped)
    analytics = result.analytics
    df_hours = pd.DataFrame(
        list(analytics.subject_distribution.items()), columns=["subject", "hours"]
    )
    hours_html = df_hours.to_html(index=False, justify="center")
    tips_html = "".join(f"<li>{html.escape(r)}</li>" for r in analytics.recommendations)

    page = f"""
    <html>
    <head><meta charset="utf-8"><title>Weekly study plan</title></head>
    <body>
        <h1>Weekly study plan</h1>
        {table_html}
        <h2>Hours per subject (total {analytics.total_study_hours:g})</h2>
        {hours_html}
        <h2>Recommendations</h2>
        <ul>{tips_html}</ul>
    </body>
    </html>
    """
    return HTMLResponse(content=page)


# ====================================================
# 3. Study plan – ICS download (Google Calendar)
# ====================================================
@router.post("/schedule-ics")
async def create_schedule_ics(req: ScheduleRequest, base_monday: str):
    """
    Same body as /schedule; sessions are dated in the week starting base_monday (YYYY-MM-DD)
    """
    result = _run_plan(req)

    try:
        ics_content, filename = generate_ics_from_schedule(result.schedule, base_monday)
    except ValueError:
        raise HTTPException(status_code=400, detail="base_monday must be formatted as YYYY-MM-DD")

    return StreamingResponse(
        StringIO(ics_content),
        media_type="text/calendar",
        headers={"Content-Disposition": f"attachment; filename={filename}"},
    )


# ====================================================
# 4. Health / endpoint description
# ====================================================
@router.get("/health")
async def health():
    return {"status": "healthy"}


@router.get("/docs")
async def api_docs():
    """Static description of the endpoints (interactive Swagger UI lives at /swagger)"""
    body = {
        "name": "string",
        "courses": "array of objects with name and priority",
        "studyHoursPerDay": "number",
        "breakLength": "number (minutes)",
        "startTime": "string (HH:MM)",
        "endTime": "string (HH:MM)",
        "learningStyle": "string (visual, auditory, reading, kinesthetic)",
        "unavailableTimes": "array of objects with day, start, end",
        "examDates": "array of objects with subject and date",
    }
    return {
        "endpoints": [
            {
                "path": "/schedule",
                "method": "POST",
                "description": "Generate an optimized study schedule",
                "requestBody": body,
                "response": {
                    "schedule": "object with days as keys and arrays of study blocks",
                    "analytics": "object with study statistics and recommendations",
                },
            },
            {
                "path": "/schedule-html",
                "method": "POST",
                "description": "Same as /schedule, rendered as HTML tables",
                "requestBody": body,
            },
            {
                "path": "/schedule-ics",
                "method": "POST",
                "description": "Same as /schedule, downloaded as an ICS calendar",
                "query": {"base_monday": "string (YYYY-MM-DD)"},
                "requestBody": body,
            },
            {
                "path": "/health",
                "method": "GET",
                "description": "Check API health status",
                "response": {"status": "string"},
            },
        ]
    }
