from __future__ import annotations

import os
import sys
import traceback
from typing import Any

_debug_override: bool | None = None


def _parse_bool(v: str) -> bool:
    return v.strip().lower() in ("1", "true", "yes", "on")


def set_debug(enabled: bool | None) -> None:
    """Force debug logging on/off; None falls back to VISION_QUERY_DEBUG."""
    global _debug_override
    _debug_override = enabled


def debug_enabled() -> bool:
    if _debug_override is not None:
        return _debug_override
    return _parse_bool(os.environ.get("VISION_QUERY_DEBUG", ""))


def log(*args: Any) -> None:
    if not debug_enabled():
        return
    print(*args, file=sys.stderr, flush=True)


def log_exc(message: str, exc: BaseException) -> None:
    if not debug_enabled():
        return
    print(message, f"{type(exc).__name__}: {exc}", file=sys.stderr, flush=True)
    traceback.print_exception(type(exc), exc, exc.__traceback__, file=sys.stderr)
