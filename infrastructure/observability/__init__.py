"""
Observability: structured logging and context management.

Provides:
- Contextual logging with run tags and entry IDs
- Log rotation and file management
"""

from infrastructure.observability.logging import (
    configure_logging,
    entry_log_context,
    make_run_tag,
    set_run_context,
)

__all__ = [
    "configure_logging",
    "set_run_context",
    "entry_log_context",
    "make_run_tag",
]
