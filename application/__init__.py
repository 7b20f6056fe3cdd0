"""
Application layer: Use cases and workflow orchestration.

This layer coordinates between domain logic and infrastructure,
implementing the batch retag workflow used by import and enrichment runs.
"""

from application.retagging import RetagStats, resolve_entry_columns, retag_entries, retag_row
from application.serialize import serialize_retagged_entries
from application.summary import log_retag_summary

__all__ = [
    # Main workflow
    "retag_entries",
    "retag_row",
    "RetagStats",
    # Data utilities
    "resolve_entry_columns",
    "serialize_retagged_entries",
    # Reporting
    "log_retag_summary",
]
