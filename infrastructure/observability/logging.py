"""
Logging setup for retag runs.

Every line carries a short run tag and the id of the entry being retagged,
both read from contextvars by a filter attached to each handler. Logs go to
the console and, when a run directory exists, to a rotating file inside it.
"""

import contextvars
import hashlib
import logging
from collections.abc import Iterator
from contextlib import contextmanager
from logging.handlers import RotatingFileHandler
from pathlib import Path

cv_run_tag = contextvars.ContextVar("run_tag", default="-")
cv_entry_id = contextvars.ContextVar("entry_id", default="-")

CONSOLE_FORMAT = "%(asctime)s [%(levelname)s] r=%(run)s e=%(entry)s | %(message)s"
FILE_FORMAT = "%(asctime)s [%(levelname)s] %(name)s | r=%(run)s e=%(entry)s | %(message)s"


def make_run_tag(run_id: str, length: int = 8) -> str:
    """Short, stable tag for a run id (BLAKE2s hex prefix)."""
    return hashlib.blake2s(run_id.encode("utf-8"), digest_size=8).hexdigest()[:length]


class ContextInjectFilter(logging.Filter):
    """Copy the run tag and current entry id onto each record."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.run = cv_run_tag.get() or "-"
        record.entry = cv_entry_id.get() or "-"
        return True


def set_run_context(run_id: str) -> str:
    """Tag all following log lines with the run; returns the short tag."""
    run_tag = make_run_tag(run_id)
    cv_run_tag.set(run_tag)
    return run_tag


@contextmanager
def entry_log_context(entry_id: object) -> Iterator[None]:
    """Attribute log lines inside the block to one entry."""
    token = cv_entry_id.set(str(entry_id))
    try:
        yield
    finally:
        cv_entry_id.reset(token)


def _handler(handler: logging.Handler, level: int, fmt: str, datefmt: str) -> logging.Handler:
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(fmt, datefmt=datefmt))
    handler.addFilter(ContextInjectFilter())
    return handler


def configure_logging(
    *,
    log_file: Path | None = None,
    console_level: int = logging.INFO,
    file_level: int = logging.DEBUG,
    max_bytes: int = 10_000_000,  # 10MB
    backup_count: int = 5,
) -> None:
    """
    Route all logging to the console and, optionally, a rotating run log.

    Args:
        log_file: Run log path; console only when None
        console_level: Minimum level for console output (default: INFO)
        file_level: Minimum level for the run log (default: DEBUG)
        max_bytes: Max log file size before rotation
        backup_count: Number of rotated files to keep
    """
    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(logging.DEBUG)  # handlers enforce levels

    root.addHandler(_handler(logging.StreamHandler(), console_level, CONSOLE_FORMAT, "%H:%M:%S"))

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        rotating = RotatingFileHandler(log_file, maxBytes=max_bytes, backupCount=backup_count, encoding="utf-8")
        root.addHandler(_handler(rotating, file_level, FILE_FORMAT, "%Y-%m-%d %H:%M:%S"))

    # openpyxl warns on every styled workbook pandas reads
    logging.getLogger("openpyxl").setLevel(logging.WARNING)

    logging.getLogger(__name__).info(
        "Logging configured (console=%s, file=%s)",
        logging.getLevelName(console_level),
        log_file if log_file is not None else "None",
    )
