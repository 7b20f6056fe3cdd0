"""
CLI entrypoint for the archive retag job.

This script performs the following steps:
- loads .env (if present), configs/retag.yaml
- creates a per-run output folder under outputs/
- loads the exported entries table (CSV, Excel or JSON)
- normalizes legacy tags and/or back-fills inferred tags per entry
- writes retagged entries, a change list and tag frequency tables
- logs a human-readable summary of results
"""

import argparse
import json
import logging
from datetime import datetime
from pathlib import Path

from dotenv import load_dotenv

from application import log_retag_summary, retag_entries, serialize_retagged_entries
from application.constants import (
    CHANGES_FILENAME,
    CONFIG_SNAPSHOT_FILENAME,
    FREQUENCY_AFTER_FILENAME,
    FREQUENCY_BEFORE_FILENAME,
    LOG_FILENAME,
    RETAGGED_ENTRIES_FILENAME,
    SUMMARY_FILENAME,
    TAGS_AFTER_COL,
    TAGS_BEFORE_COL,
)
from domain.reporting import compute_tag_frequency_table, compute_tag_frequency_table_and_save
from infrastructure.config import RetagMode, load_run_config
from infrastructure.constants import RETAG_FILE
from infrastructure.io import ensure_exists, read_table
from infrastructure.observability import configure_logging, set_run_context

logger = logging.getLogger(__name__)


def _parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Normalize and auto-tag archive entries")
    p.add_argument(
        "--config",
        type=str,
        default=str(RETAG_FILE),
        help="Path to retag.yaml (default: configs/retag.yaml)",
    )
    p.add_argument(
        "--env",
        type=str,
        default=".env",
        help="Path to .env file (default: .env; skipped if missing)",
    )
    p.add_argument(
        "--mode",
        type=str,
        default=None,
        choices=[m.value for m in RetagMode],
        help="Override the mode set in retag.yaml",
    )
    p.add_argument(
        "--dry-run",
        action="store_true",
        help="Compute changes and frequency tables without writing retagged entries.",
    )
    p.add_argument(
        "--console-level",
        type=str,
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Console log level",
    )
    p.add_argument(
        "--file-level",
        type=str,
        default="DEBUG",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="File log level",
    )
    return p.parse_args()


def main() -> None:
    args = _parse_args()

    env_file = Path(args.env)
    if env_file.exists():
        load_dotenv(env_file, override=True)

    config_path = Path(args.config)
    ensure_exists(config_path, "retag.yaml")

    cfg = load_run_config(config_path)
    updates: dict[str, object] = {}
    if args.mode is not None:
        updates["mode"] = RetagMode(args.mode)
    if args.dry_run:
        updates["dry_run"] = True
    if updates:
        cfg = cfg.model_validate({**cfg.model_dump(), **updates})

    # ---- Per-run output folder ----
    ts = datetime.now().strftime("%Y%m%d_%H%M%S")
    run_id = f"{ts}_{cfg.mode.value}_{cfg.input_file_path.stem}_max{cfg.merge.max_tags}"

    run_dir = cfg.output_root / run_id
    run_dir.mkdir(parents=True, exist_ok=True)

    log_path = run_dir / LOG_FILENAME
    configure_logging(
        log_file=log_path,
        console_level=getattr(logging, args.console_level),
        file_level=getattr(logging, args.file_level),
    )
    run_tag = set_run_context(run_id)

    logger.info("Starting run: run_id=%s (run_tag=%s)", run_id, run_tag)
    logger.info("Run output directory: %s", run_dir)

    (run_dir / CONFIG_SNAPSHOT_FILENAME).write_text(
        json.dumps(cfg.model_dump(mode="json"), ensure_ascii=False, indent=2, default=str),
        encoding="utf-8",
    )

    logger.info("Loading entries from %s...", cfg.input_file_path)
    entries_df = read_table(cfg.input_file_path)
    logger.info("Entries loaded: %d rows, %d columns", entries_df.shape[0], entries_df.shape[1])

    df_out, stats = retag_entries(cfg, entries_df)

    frequency_before = compute_tag_frequency_table(df_out[TAGS_BEFORE_COL])
    frequency_after = compute_tag_frequency_table(df_out[TAGS_AFTER_COL])
    compute_tag_frequency_table_and_save(df_out[TAGS_BEFORE_COL], run_dir, FREQUENCY_BEFORE_FILENAME)
    compute_tag_frequency_table_and_save(df_out[TAGS_AFTER_COL], run_dir, FREQUENCY_AFTER_FILENAME)

    entries_path: Path | None = None
    changes_path: Path | None = None
    if not cfg.dry_run:
        entries_path, changes_path = serialize_retagged_entries(
            df_out,
            entries_path=run_dir / RETAGGED_ENTRIES_FILENAME,
            changes_path=run_dir / CHANGES_FILENAME,
            title_col=cfg.columns.title_col,
        )

    summary_path = run_dir / SUMMARY_FILENAME
    with summary_path.open("w", encoding="utf-8") as f:
        summary = {"run_id": run_id, "run_tag": run_tag, "mode": cfg.mode.value, **stats.as_dict()}
        json.dump(summary, f, ensure_ascii=False, indent=2)

    log_retag_summary(
        stats=stats,
        frequency_before=frequency_before,
        frequency_after=frequency_after,
        entries_path=entries_path,
        changes_path=changes_path,
    )

    logger.info("Detailed log: %s", log_path)


if __name__ == "__main__":
    main()
