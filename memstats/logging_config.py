from __future__ import annotations

import sys
from typing import Any, Optional

from loguru import logger

from memstats.config import get_settings


def configure_logging(level: Optional[str] = None, sink: Any = None) -> int:
    """Send memstats log records to ``sink`` (stderr by default) at ``level``.

    ``level`` defaults to ``MEMSTATS_LOG_LEVEL``. Only records from the
    ``memstats`` namespace reach the new sink; other sinks are left alone.
    The package is silent until this is called. Returns the loguru sink id.
    """
    if level is None:
        level = get_settings().log_level
    sink_id = logger.add(
        sink if sink is not None else sys.stderr,
        level=level.upper(),
        filter="memstats",
        format="{message}",
        backtrace=False,
        diagnose=False,
    )
    logger.enable("memstats")
    return sink_id
