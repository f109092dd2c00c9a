# freecam/utils/error_report.py
from __future__ import annotations

"""
Minimal crash capture:
- write logs/crash_YYYYMMDD_HHMMSS.txt
- log the traceback through the freecam logger
Safe to call from an entrypoint's outermost except block.
"""

import logging
import os
import time
import traceback
from typing import Optional

log = logging.getLogger(__name__)


def _log_dir(base: Optional[str] = None) -> str:
    d = os.path.join(base or os.getcwd(), "logs")
    os.makedirs(d, exist_ok=True)
    return d


def write_crash_report(exc: BaseException, *, base_dir: Optional[str] = None) -> str:
    """Write the traceback of `exc` to a timestamped crash file and return its path."""
    full = "".join(traceback.format_exception(type(exc), exc, exc.__traceback__))
    stamp = time.strftime("%Y%m%d_%H%M%S")
    path = os.path.join(_log_dir(base_dir), f"crash_{stamp}.txt")
    with open(path, "w", encoding="utf-8") as f:
        f.write("Unexpected crash.\n\n")
        f.write(full)
    log.error("Crash report written to %s", path)
    return path
