"""Loguru setup shared by the lifecycle API and CLI.

Every record carries a ``component`` extra (``api`` or ``cli``) so output
from the server and from one-off snapshot commands can be told apart.
Set ``json_logs`` to emit one serialized JSON object per line instead of
the human format.  With ``log_dir``, each component writes its own daily
log file.
"""

import sys
from pathlib import Path

from loguru import logger

_LOG_FORMAT = "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level:<8} | {extra[component]:<3} | {name}:{line} | {message}"


def log_file_name(component: str) -> str:
    """Name of the log file written by ``component`` under ``log_dir``."""
    return f"election-lifecycle-{component}.log"


def setup_logging(
    log_level: str = "INFO",
    log_dir: str | None = None,
    *,
    component: str = "cli",
    json_logs: bool = False,
) -> None:
    """Replace all Loguru sinks with the lifecycle sinks.

    Args:
        log_level: Minimum log level to emit (case-insensitive).
        log_dir: Optional directory for a per-component log file, rotated
            every 24 hours and kept for 7 days.
        component: Label bound to every record, ``api`` or ``cli``.
        json_logs: Serialize records as JSON on every sink.
    """
    level = log_level.upper()
    logger.remove()
    logger.configure(extra={"component": component})

    sink_options = {"level": level, "serialize": True} if json_logs else {"level": level, "format": _LOG_FORMAT}
    logger.add(sys.stderr, **sink_options)

    if log_dir:
        log_path = Path(log_dir)
        log_path.mkdir(parents=True, exist_ok=True)
        logger.add(
            log_path / log_file_name(component),
            rotation="24h",
            retention="7 days",
            **sink_options,
        )
