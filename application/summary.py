"""Retag run summary logging."""

import logging
from pathlib import Path

import pandas as pd

from application.retagging import RetagStats

logger = logging.getLogger(__name__)


def _log_top_tags(label: str, frequency_df: pd.DataFrame, top_n: int) -> None:
    if frequency_df.empty:
        logger.info("%s: no tags", label)
        return
    top = frequency_df.sort_values("Count", ascending=False, kind="stable").head(top_n)
    logger.info("%s (top %d):", label, len(top))
    for _, row in top.iterrows():
        logger.info("  %-30s %-18s %5d  (%.1f%%)", row["Tag"], row["Group"], row["Count"], row["Share (%)"])


def log_retag_summary(
    stats: RetagStats,
    frequency_before: pd.DataFrame,
    frequency_after: pd.DataFrame,
    entries_path: Path | None,
    changes_path: Path | None,
    top_n: int = 10,
) -> None:
    """Log a human-readable summary of a retag run."""
    logger.info("=" * 60)
    logger.info("RETAG SUMMARY")
    logger.info("=" * 60)
    logger.info("Entries processed:  %d", stats.rows)
    logger.info("Entries changed:    %d", stats.changed)
    logger.info("Normalized:         %d", stats.normalized)
    logger.info("Tags dropped to none: %d", stats.emptied)
    logger.info("Auto-tagged:        %d", stats.auto_tagged)
    logger.info("Skipped (tagged):   %d", stats.skipped)

    _log_top_tags("Tags before", frequency_before, top_n)
    _log_top_tags("Tags after", frequency_after, top_n)

    if entries_path is not None:
        logger.info("Retagged entries: %s", entries_path)
    if changes_path is not None:
        logger.info("Tag changes: %s", changes_path)
    if entries_path is None and changes_path is None:
        logger.info("Dry run: no entry files written.")
