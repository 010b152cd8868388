import os

from .helpers import BoardSize
from .queens import DEFAULT_INTERVAL_MS


def env_flag(name, default=False):
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


class Config:
    """Application settings, read from the environment at import time."""
    SECRET_KEY = os.environ.get("SECRET_KEY", "nqueen-dev")
    BOARD_SIZE = int(os.environ.get("NQUEEN_BOARD_SIZE", BoardSize.DEFAULT))
    EXCLUDE_SYMMETRY = env_flag("NQUEEN_EXCLUDE_SYMMETRY")
    INTERVAL_MS = int(os.environ.get("NQUEEN_INTERVAL_MS", DEFAULT_INTERVAL_MS))
    PORT = int(os.environ.get("PORT", 8080))
    MAX_SESSIONS = int(os.environ.get("NQUEEN_MAX_SESSIONS", 100))
    # Unset means /all runs until the search is exhausted.
    RUN_ALL_MAX_STEPS = (
        int(os.environ["NQUEEN_RUN_ALL_MAX_STEPS"])
        if os.environ.get("NQUEEN_RUN_ALL_MAX_STEPS") else None
    )
