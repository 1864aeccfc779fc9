"""
main.py

- FastAPI application
- Router registration (study_planner.router)
- `python -m study_planner.main` serves the app with uvicorn
"""

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import uvicorn

from .config import get_settings
from .router import router as planner_router

settings = get_settings()

logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

# =======================================
# FastAPI app
#  - /docs is a plain JSON description, Swagger UI moves to /swagger
# =======================================
app = FastAPI(
    title="Study Planner API",
    description="Weekly study timetable generation with study-time analytics",
    version="1.0.0",
    docs_url="/swagger",
    redoc_url=None,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)

# =======================================
# Router registration
#  - every endpoint lives in study_planner/router.py
# =======================================
app.include_router(planner_router)


def run():
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    run()
