from __future__ import annotations

import os

from dotenv import find_dotenv, load_dotenv
from pydantic import BaseModel


class Settings(BaseModel):
    # General
    app_name: str = "taskq"
    version: str = "1.0.0"
    debug: bool = False
    log_level: str = "INFO"

    # HTTP batch endpoint
    max_script_lines: int = 10000


def _env(name: str) -> str:
    v = os.getenv(name, "")
    return v.strip().lstrip("\ufeff")  # removes BOM if present


def _flag(name: str) -> bool:
    return _env(name).lower() in ("1", "true", "yes", "on")


def load_settings() -> Settings:
    # .env in the working directory; real environment wins
    load_dotenv(dotenv_path=find_dotenv(usecwd=True), override=False)

    max_lines = _env("TASKQ_MAX_SCRIPT_LINES")
    return Settings(
        app_name=_env("TASKQ_APP_NAME") or "taskq",
        debug=_flag("TASKQ_DEBUG"),
        log_level=(_env("TASKQ_LOG_LEVEL") or "INFO").upper(),
        max_script_lines=int(max_lines) if max_lines else 10000,
    )


settings = load_settings()
