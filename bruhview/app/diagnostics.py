from __future__ import annotations

import sys


def viewer_backend_error() -> str:
    """Return why the viewer cannot start, or an empty string."""
    try:
        import tkinter  # noqa: F401
    except Exception as exc:
        return f"tkinter is unavailable ({exc}); install the Tk bindings for your Python"
    try:
        from PIL import ImageTk  # noqa: F401
    except Exception as exc:
        return f"PIL.ImageTk is unavailable ({exc}); reinstall Pillow with Tk support"
    return ""


def emit_startup_warnings(needs_window: bool = True) -> None:
    if not needs_window:
        return
    error = viewer_backend_error()
    if error:
        print(f"Warning: {error}", file=sys.stderr)
