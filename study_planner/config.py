"""
config.py

- Runtime settings read from environment variables
- A .env file in the working directory is loaded first (values already in the
  environment win)
"""

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv


@dataclass(frozen=True)
class Settings:
    host: str = "0.0.0.0"
    port: int = 3000
    log_level: str = "INFO"


def get_settings() -> Settings:
    load_dotenv(Path.cwd() / ".env")
    return Settings(
        host=os.getenv("HOST", "0.0.0.0"),
        port=int(os.getenv("PORT", "3000")),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
    )
