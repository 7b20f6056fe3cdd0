import json
import logging
from pathlib import Path

import numpy as np
import pandas as pd
import pytest

from application import resolve_entry_columns, retag_entries
from application.constants import AUTO_TAGS_COL, CHANGED_COL, ENTRY_ID_COL, TAGS_AFTER_COL, TAGS_BEFORE_COL
from application.serialize import serialize_retagged_entries
from infrastructure.config.models import MergeConfig, RetagMode, RunConfig


def _entries() -> pd.DataFrame:
    return pd.DataFrame(
        [
            {
                "id": "1",
                "title": "Mother Jones and the Miners",
                "description": "Mother Jones led a strike of coal miners in West Virginia",
                "creator": None,
                "metadata": None,
                "tags": "Labor History, strike",
            },
            {
                "id": "2",
                "title": "Festival listing",
                "description": None,
                "creator": None,
                "metadata": None,
                "tags": "Film, A: Labor Film Festivals",
            },
            {
                "id": "3",
                "title": "Which Side Are You On?",
                "description": "Written during the Harlan County mine war",
                "creator": "Florence Reece",
                "metadata": None,
                "tags": None,
            },
        ]
    )


def _cfg(mode: RetagMode, **merge: object) -> RunConfig:
    return RunConfig(input_file_path=Path("dataset/entries.csv"), mode=mode, merge=MergeConfig(**merge))


def test_normalize_mode_maps_and_drops() -> None:
    df_out, stats = retag_entries(_cfg(RetagMode.NORMALIZE), _entries())

    assert df_out[TAGS_AFTER_COL].tolist() == ["Strikes & Lockouts", None, None]
    assert df_out[TAGS_BEFORE_COL].tolist() == ["Labor History, strike", "Film, A: Labor Film Festivals", None]
    assert df_out[CHANGED_COL].tolist() == [True, True, False]
    assert stats.rows == 3
    assert stats.changed == 2
    assert stats.emptied == 1
    assert stats.auto_tagged == 0


def test_full_mode_normalizes_then_merges_inferred_tags() -> None:
    df_out, stats = retag_entries(_cfg(RetagMode.FULL), _entries())

    first = df_out.iloc[0]
    assert first[TAGS_AFTER_COL] == "Child Labor, Mining, Organizing, Strikes & Lockouts"
    assert first[AUTO_TAGS_COL] == "Child Labor, Mining, Organizing"

    # Festival tags are dropped and there is no text to infer from
    assert df_out.iloc[1][TAGS_AFTER_COL] is None

    third = df_out.iloc[2]
    assert {"Mining", "Labor Culture & Arts", "Women & Gender"} <= set(third[TAGS_AFTER_COL].split(", "))
    assert stats.auto_tagged == 2


def test_merge_cap_is_respected() -> None:
    df_out, _ = retag_entries(_cfg(RetagMode.FULL, max_tags=2), _entries())

    for value in df_out[TAGS_AFTER_COL]:
        if value is not None:
            assert len(value.split(", ")) <= 2


def test_only_untagged_skips_entries_with_tags() -> None:
    df_out, stats = retag_entries(_cfg(RetagMode.FULL, only_untagged=True), _entries())

    assert df_out.iloc[0][TAGS_AFTER_COL] == "Strikes & Lockouts"
    assert df_out.iloc[0][AUTO_TAGS_COL] is None
    assert df_out.iloc[2][AUTO_TAGS_COL] is not None
    assert stats.skipped == 1


def test_autotag_mode_keeps_existing_tags_verbatim() -> None:
    df = pd.DataFrame([{"id": "9", "title": "Coal country", "tags": "Custom"}])

    df_out, _ = retag_entries(_cfg(RetagMode.AUTOTAG), df)

    assert df_out.iloc[0][TAGS_AFTER_COL] == "Custom, Mining"


def test_missing_optional_columns_are_ignored_and_index_is_the_id() -> None:
    df = pd.DataFrame([{"title": "A sanitation strike", "tags": None}])

    cfg = _cfg(RetagMode.AUTOTAG)
    cols = resolve_entry_columns(cfg, df)
    df_out, _ = retag_entries(cfg, df)

    assert cols["id"] is None
    assert cols["description"] is None
    assert df_out[ENTRY_ID_COL].tolist() == [0]
    assert df_out.iloc[0][TAGS_AFTER_COL] == "Public Sector, Strikes & Lockouts"


def test_missing_tags_column_raises() -> None:
    with pytest.raises(KeyError):
        resolve_entry_columns(_cfg(RetagMode.NORMALIZE), pd.DataFrame([{"title": "x"}]))


def test_serialize_writes_entries_and_changes(tmp_path: Path) -> None:
    df_out, _ = retag_entries(_cfg(RetagMode.NORMALIZE), _entries())

    entries_path, changes_path = serialize_retagged_entries(
        df_out,
        entries_path=tmp_path / "retagged_entries.json",
        changes_path=tmp_path / "tag_changes.csv",
        title_col="title",
    )

    records = pd.read_json(entries_path, orient="records", dtype=False)
    assert len(records) == 3
    assert records.iloc[0]["title"] == "Mother Jones and the Miners"

    changes = pd.read_csv(changes_path, dtype=str)
    assert changes[ENTRY_ID_COL].tolist() == ["1", "2"]


def test_output_columns_keep_none_under_string_inference() -> None:
    df = _entries().astype({"tags": "string"})

    df_out, _ = retag_entries(_cfg(RetagMode.NORMALIZE), df)

    for col in (ENTRY_ID_COL, TAGS_BEFORE_COL, TAGS_AFTER_COL, AUTO_TAGS_COL):
        assert df_out[col].dtype == object
    assert df_out[TAGS_AFTER_COL].tolist() == ["Strikes & Lockouts", None, None]
    assert df_out[CHANGED_COL].dtype == bool


def test_match_explanation_is_skipped_unless_debug_enabled(
    monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture
) -> None:
    def _explain(_entry: object) -> dict[str, list[str]]:
        raise AssertionError("explain_entry called with DEBUG off")

    monkeypatch.setattr("application.retagging.explain_entry", _explain)
    caplog.set_level(logging.INFO, logger="application.retagging")

    df_out, stats = retag_entries(_cfg(RetagMode.FULL), _entries())

    assert stats.auto_tagged == 2
    assert df_out.iloc[0][AUTO_TAGS_COL] == "Child Labor, Mining, Organizing"


def test_serialize_writes_numpy_ids_as_json_numbers(tmp_path: Path) -> None:
    df_out = pd.DataFrame(
        {
            ENTRY_ID_COL: pd.Series([np.int64(0), np.int64(7)], dtype=object),
            TAGS_BEFORE_COL: pd.Series(["strike", None], dtype=object),
            TAGS_AFTER_COL: pd.Series(["Strikes & Lockouts", None], dtype=object),
            AUTO_TAGS_COL: pd.Series([None, None], dtype=object),
            CHANGED_COL: [True, False],
        }
    )

    entries_path, _ = serialize_retagged_entries(
        df_out,
        entries_path=tmp_path / "retagged_entries.json",
        changes_path=tmp_path / "tag_changes.csv",
    )

    records = json.loads(entries_path.read_text(encoding="utf-8"))
    assert [r[ENTRY_ID_COL] for r in records] == [0, 7]
    assert records[1][TAGS_AFTER_COL] is None
    assert records[0][CHANGED_COL] is True
