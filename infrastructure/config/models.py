"""Configuration models (Pydantic classes)."""

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, Field, model_validator

from domain.tagging.classifier import AUTO_TAG_LIMIT
from domain.tagging.merge import DEFAULT_MAX_TAGS
from infrastructure.constants import OUTPUT_ROOT


class RetagMode(str, Enum):
    """What the retag job does to each entry."""

    NORMALIZE = "normalize"  # legacy tags -> canonical tags
    AUTOTAG = "autotag"  # infer tags from text, merge onto existing tags
    FULL = "full"  # normalize, then auto-tag and merge


class EntryColumnsConfig(BaseModel):
    """Column name mapping for the exported entries table."""

    id_col: str | None = "id"
    title_col: str | None = "title"
    description_col: str | None = "description"
    creator_col: str | None = "creator"
    metadata_col: str | None = "metadata"
    tags_col: str = "tags"


class MergeConfig(BaseModel):
    """
    Tag cap settings.

    Defaults match the archive's five-tag limit.
    """

    max_tags: int = Field(default=DEFAULT_MAX_TAGS, ge=1)
    auto_tag_limit: int = Field(default=AUTO_TAG_LIMIT, ge=1)
    only_untagged: bool = Field(
        default=False,
        description="If true, auto-tag only entries that carry no tags after normalization.",
    )


class RunConfig(BaseModel):
    """
    Runtime configuration.
    - Loaded from retag.yaml
    - Validated and enriched by configuration loader
    - Consumed by the retag workflow and main entrypoint
    """

    mode: RetagMode = Field(default=RetagMode.FULL, description="Retag mode to run.")
    input_file_path: Path = Field(..., description="Path to the exported entries table (CSV, Excel or JSON).")
    output_root: Path = Field(
        default_factory=lambda: OUTPUT_ROOT,
        description="Root directory for per-run output folders.",
    )

    columns: EntryColumnsConfig = Field(default_factory=EntryColumnsConfig)
    merge: MergeConfig = Field(default_factory=MergeConfig)

    dry_run: bool = Field(
        default=False,
        description="If true, compute and log changes but write only the summary tables.",
    )

    @model_validator(mode="after")
    def _validate(self) -> "RunConfig":
        if not self.columns.tags_col or not str(self.columns.tags_col).strip():
            raise ValueError("columns.tags_col is required in retag.yaml")

        if self.mode is not RetagMode.NORMALIZE:
            text_cols = [
                self.columns.title_col,
                self.columns.description_col,
                self.columns.creator_col,
                self.columns.metadata_col,
            ]
            if not any(c and str(c).strip() for c in text_cols):
                raise ValueError(f"mode={self.mode.value} needs at least one text column (title/description/creator/metadata)")

        if self.merge.auto_tag_limit > self.merge.max_tags:
            # More inferred tags than the merge cap can ever admit
            self.merge.auto_tag_limit = self.merge.max_tags

        return self
