from __future__ import annotations

import os
from dotenv import load_dotenv

# Load env early so modules can rely on it.
load_dotenv()


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not str(raw).strip():
        return default
    try:
        return int(str(raw).strip())
    except ValueError:
        return default


def _env_flag(name: str, default: bool = False) -> bool:
    raw = os.getenv(name)
    if raw is None or not str(raw).strip():
        return default
    return str(raw).strip().lower() in {"1", "true", "yes", "on"}


# Question point bounds
MIN_POINTS = _env_int("QUIZ_MIN_POINTS", 1)
MAX_POINTS = _env_int("QUIZ_MAX_POINTS", 100)
DEFAULT_POINTS = _env_int("QUIZ_DEFAULT_POINTS", 10)

# Quiz defaults
DEFAULT_PASSING_SCORE = _env_int("QUIZ_DEFAULT_PASSING_SCORE", 70)

# Scoring
SCORE_NDIGITS = _env_int("QUIZ_SCORE_NDIGITS", 2)
FILL_BLANK_SUBSTRING_MATCH = _env_flag("QUIZ_FILL_BLANK_SUBSTRING_MATCH", False)
