from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Optional

WORKERS_ENV_VAR = "BRUH_WORKERS"
DEFAULT_BAND_ROWS = 32
DEFAULT_WINDOW_TITLE = "Image preview"


def default_workers() -> Optional[int]:
    """Return the worker count from BRUH_WORKERS, or None for the pool default."""
    raw = os.environ.get(WORKERS_ENV_VAR, "").strip()
    if not raw:
        return None
    try:
        value = int(raw)
    except ValueError as exc:
        raise ValueError(f"{WORKERS_ENV_VAR} must be an integer, got '{raw}'") from exc
    if value < 1:
        raise ValueError(f"{WORKERS_ENV_VAR} must be at least 1, got {value}")
    return value


@dataclass
class RenderSettings:
    workers: Optional[int] = field(default_factory=default_workers)
    band_rows: int = DEFAULT_BAND_ROWS


@dataclass
class ViewerSettings:
    title: str = DEFAULT_WINDOW_TITLE
    resizable: bool = False
