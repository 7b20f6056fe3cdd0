"""Retag result serialization utilities."""

import json
import logging
from pathlib import Path

import numpy as np
import pandas as pd

from application.constants import (
    AUTO_TAGS_COL,
    CHANGED_COL,
    ENTRY_ID_COL,
    TAGS_AFTER_COL,
    TAGS_BEFORE_COL,
)

logger = logging.getLogger(__name__)


def _json_value(value: object) -> object:
    if isinstance(value, (dict, list)):
        return value
    if pd.isna(value):
        return None
    if isinstance(value, np.generic):
        # int64 ids from the index or an Excel column
        return value.item()
    return value


def serialize_retagged_entries(
    df_out: pd.DataFrame,
    entries_path: Path,
    changes_path: Path,
    title_col: str | None = None,
) -> tuple[Path, Path]:
    """
    Write every retagged entry to entries_path as a JSON list, and the changed rows
    (entry_id, tags_before, tags_after) to changes_path as CSV.

    Returns:
        Tuple of (entries_path, changes_path)
    """
    records: list[dict[str, object]] = []
    for _, row in df_out.iterrows():
        record: dict[str, object] = {ENTRY_ID_COL: _json_value(row[ENTRY_ID_COL])}
        if title_col is not None and title_col in df_out.columns:
            record["title"] = _json_value(row[title_col])
        record[TAGS_BEFORE_COL] = _json_value(row[TAGS_BEFORE_COL])
        record[TAGS_AFTER_COL] = _json_value(row[TAGS_AFTER_COL])
        record[AUTO_TAGS_COL] = _json_value(row[AUTO_TAGS_COL])
        record[CHANGED_COL] = bool(row[CHANGED_COL])
        records.append(record)

    entries_path.parent.mkdir(parents=True, exist_ok=True)
    with entries_path.open("w", encoding="utf-8") as f:
        json.dump(records, f, ensure_ascii=False, indent=2, default=str)
    logger.info("Saved %d retagged entries to %s", len(records), entries_path)

    changes_df = df_out.loc[df_out[CHANGED_COL].astype(bool), [ENTRY_ID_COL, TAGS_BEFORE_COL, TAGS_AFTER_COL]]
    changes_df.to_csv(changes_path, index=False)
    logger.info("Saved %d tag changes to %s", len(changes_df), changes_path)

    return entries_path, changes_path
