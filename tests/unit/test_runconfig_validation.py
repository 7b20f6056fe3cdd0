from pathlib import Path

import pytest
from pydantic import ValidationError

from infrastructure.config.models import EntryColumnsConfig, MergeConfig, RetagMode, RunConfig


def test_auto_tag_limit_is_clamped_to_max_tags() -> None:
    cfg = RunConfig(
        input_file_path=Path("dataset/entries.csv"),
        merge=MergeConfig(max_tags=3, auto_tag_limit=5),
    )

    assert cfg.merge.auto_tag_limit == 3


def test_defaults_match_five_tag_cap() -> None:
    cfg = RunConfig(input_file_path=Path("dataset/entries.csv"))

    assert cfg.mode is RetagMode.FULL
    assert cfg.merge.max_tags == 5
    assert cfg.merge.auto_tag_limit == 5
    assert cfg.columns.tags_col == "tags"


def test_autotag_mode_requires_a_text_column() -> None:
    no_text = EntryColumnsConfig(title_col=None, description_col=None, creator_col=None, metadata_col=None)

    with pytest.raises(ValidationError):
        RunConfig(input_file_path=Path("x.csv"), mode=RetagMode.AUTOTAG, columns=no_text)

    cfg = RunConfig(input_file_path=Path("x.csv"), mode=RetagMode.NORMALIZE, columns=no_text)
    assert cfg.mode is RetagMode.NORMALIZE


def test_max_tags_must_be_positive() -> None:
    with pytest.raises(ValidationError):
        MergeConfig(max_tags=0)
