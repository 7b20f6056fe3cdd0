"""Retag workflow: normalize legacy tags and back-fill inferred tags over an entries table."""

import logging
from dataclasses import asdict, dataclass
from typing import Any

import pandas as pd

from application.constants import (
    AUTO_TAGS_COL,
    CHANGED_COL,
    ENTRY_ID_COL,
    TAGS_AFTER_COL,
    TAGS_BEFORE_COL,
)
from domain.schemas import EntryRecord
from domain.tagging import auto_tag_entry, explain_entry, merge_tags_with_existing
from domain.taxonomy import normalize_tags, split_tags
from infrastructure.config.models import RetagMode, RunConfig
from infrastructure.observability import entry_log_context

logger = logging.getLogger(__name__)

TEXT_FIELDS = ("title", "description", "creator", "metadata")


@dataclass
class RetagStats:
    """Counters for one retag run."""

    rows: int = 0
    changed: int = 0
    normalized: int = 0  # tags rewritten by normalization
    emptied: int = 0  # had tags before, none after
    auto_tagged: int = 0  # gained at least one inferred tag
    skipped: int = 0  # left alone by only_untagged

    def as_dict(self) -> dict[str, int]:
        return asdict(self)


@dataclass
class RowResult:
    tags_after: str | None
    auto_tags: list[str]
    normalized: bool
    skipped: bool


def resolve_entry_columns(cfg: RunConfig, df: pd.DataFrame) -> dict[str, str | None]:
    """
    Resolve configured entry columns against the table.

    The tags column is required. Text and id columns are optional: a configured
    column missing from the table is logged and treated as absent.

    Returns:
        Mapping of field name (id, title, description, creator, metadata, tags) -> column or None

    Raises:
        KeyError: If the configured tags column is not in the table
    """
    tags_col = cfg.columns.tags_col
    if tags_col not in df.columns:
        raise KeyError(f"Configured tags_col='{tags_col}' not found in entries columns: {list(df.columns)}")

    configured = {
        "id": cfg.columns.id_col,
        "title": cfg.columns.title_col,
        "description": cfg.columns.description_col,
        "creator": cfg.columns.creator_col,
        "metadata": cfg.columns.metadata_col,
    }

    resolved: dict[str, str | None] = {"tags": tags_col}
    for field, col in configured.items():
        if col is None or not str(col).strip():
            resolved[field] = None
        elif col not in df.columns:
            logger.warning("Configured %s column '%s' not found in entries table; ignoring it.", field, col)
            resolved[field] = None
        else:
            resolved[field] = col

    if cfg.mode is not RetagMode.NORMALIZE and not any(resolved[f] for f in TEXT_FIELDS):
        logger.warning("No text columns available; auto-tagging will infer nothing.")

    return resolved


def _cell(row: pd.Series, col: str | None) -> Any:
    if col is None:
        return None
    value = row[col]
    if isinstance(value, (dict, list)):
        return value
    if pd.isna(value):
        return None
    return value


def retag_row(cfg: RunConfig, record: EntryRecord) -> RowResult:
    """
    Apply the configured retag mode to a single entry.

    normalize: legacy tags -> canonical tags.
    autotag:   existing tags kept verbatim, inferred tags merged under the cap.
    full:      normalize first, then merge inferred tags onto the result.
    """
    tags = record.tags
    normalized = False

    if cfg.mode in (RetagMode.NORMALIZE, RetagMode.FULL):
        tags = normalize_tags(record.tags)
        normalized = tags != record.tags

    if cfg.mode is RetagMode.NORMALIZE:
        return RowResult(tags_after=tags, auto_tags=[], normalized=normalized, skipped=False)

    if cfg.merge.only_untagged and split_tags(tags):
        return RowResult(tags_after=tags, auto_tags=[], normalized=normalized, skipped=True)

    inferred = auto_tag_entry(record, limit=cfg.merge.auto_tag_limit)
    merged = merge_tags_with_existing(tags, inferred, max_tags=cfg.merge.max_tags)
    gained = [t for t in split_tags(merged) if t not in split_tags(tags)]
    if gained and logger.isEnabledFor(logging.DEBUG):
        logger.debug("Inferred %s (matches: %s)", gained, explain_entry(record))

    return RowResult(tags_after=merged, auto_tags=gained, normalized=normalized, skipped=False)


def retag_entries(cfg: RunConfig, df: pd.DataFrame) -> tuple[pd.DataFrame, RetagStats]:
    """
    Retag every entry in the table.

    Args:
        cfg: RunConfig instance
        df: Entries table

    Returns:
        Tuple of (copy of df with entry_id, tags_before, tags_after, auto_tags and
        tags_changed columns added, RetagStats)
    """
    cols = resolve_entry_columns(cfg, df)
    stats = RetagStats()

    entry_ids: list[object] = []
    before: list[str | None] = []
    after: list[str | None] = []
    auto: list[str | None] = []
    changed: list[bool] = []

    for idx, row in df.iterrows():
        entry_id = _cell(row, cols["id"])
        entry_id = idx if entry_id is None else entry_id
        with entry_log_context(entry_id):
            record = EntryRecord(
                title=_cell(row, cols["title"]),
                description=_cell(row, cols["description"]),
                creator=_cell(row, cols["creator"]),
                metadata=_cell(row, cols["metadata"]),
                tags=_cell(row, cols["tags"]),
            )
            result = retag_row(cfg, record)
            is_changed = result.tags_after != record.tags

            if split_tags(record.tags) and result.tags_after is None:
                stats.emptied += 1
                logger.debug("All tags dropped: %r", record.tags)
            if is_changed:
                logger.debug("Tags %r -> %r", record.tags, result.tags_after)

        stats.rows += 1
        stats.changed += int(is_changed)
        stats.normalized += int(result.normalized)
        stats.auto_tagged += int(bool(result.auto_tags))
        stats.skipped += int(result.skipped)

        entry_ids.append(entry_id)
        before.append(record.tags)
        after.append(result.tags_after)
        auto.append(", ".join(result.auto_tags) if result.auto_tags else None)
        changed.append(is_changed)

    df_out = df.copy()
    # object dtype keeps None as None under pandas' string inference
    df_out[ENTRY_ID_COL] = pd.Series(entry_ids, index=df.index, dtype=object)
    df_out[TAGS_BEFORE_COL] = pd.Series(before, index=df.index, dtype=object)
    df_out[TAGS_AFTER_COL] = pd.Series(after, index=df.index, dtype=object)
    df_out[AUTO_TAGS_COL] = pd.Series(auto, index=df.index, dtype=object)
    df_out[CHANGED_COL] = pd.Series(changed, index=df.index, dtype=bool)

    logger.info(
        "Retagged %d entries (mode=%s): %d changed, %d auto-tagged, %d skipped",
        stats.rows,
        cfg.mode.value,
        stats.changed,
        stats.auto_tagged,
        stats.skipped,
    )
    return df_out, stats
