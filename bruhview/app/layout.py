from __future__ import annotations

from typing import Tuple


def fit_size(available_w: float, available_h: float, aspect_ratio: float) -> Tuple[float, float]:
    """Largest size with the given aspect ratio that fits the available area."""
    if available_w / aspect_ratio > available_h:
        return available_h * aspect_ratio, available_h
    return available_w, available_w / aspect_ratio
