"""
ReconHub runtime settings.
Read from the environment once at import; app.py flags override them.
"""

import os
from typing import Optional


def _env_flag(name: str) -> bool:
    return str(os.environ.get(name, "")).strip().lower() in ("1", "true", "yes", "on")


def _env_int(name: str, default: Optional[int]) -> Optional[int]:
    raw = str(os.environ.get(name, "")).strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


HOST = os.environ.get("RECONHUB_HOST", "0.0.0.0").strip() or "0.0.0.0"
PORT = _env_int("PORT", 3000)
DEBUG = _env_flag("RECONHUB_DEBUG")
SEED = _env_int("RECONHUB_SEED", None)
LOG_LEVEL = os.environ.get("RECONHUB_LOG_LEVEL", "INFO").strip().upper() or "INFO"
