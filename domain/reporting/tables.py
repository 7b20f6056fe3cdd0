"""Tag frequency table generation."""

from pathlib import Path

import pandas as pd

from domain.taxonomy.groups import TAG_GROUPS, group_of, tag_rank
from domain.taxonomy.normalizer import split_tags

OTHER_GROUP = "Other"
FREQUENCY_COLUMNS = ["Group", "Tag", "Count", "Share (%)"]


def compute_tag_frequency_table(tag_series: pd.Series) -> pd.DataFrame:
    """
    Count how many entries carry each tag.

    Columns in the result:
      - Group: taxonomy group of the tag, or "Other" for non-canonical tags
      - Tag: tag string
      - Count: number of entries carrying the tag
      - Share (%): Count / number of entries * 100

    Args:
        tag_series: One comma-separated tag string (or missing value) per entry

    Returns:
        DataFrame ordered by taxonomy position; non-canonical tags last, alphabetically
    """
    total = len(tag_series)
    counts: dict[str, int] = {}
    for raw in tag_series:
        if raw is None or (isinstance(raw, float) and pd.isna(raw)):
            continue
        for tag in set(split_tags(str(raw))):
            counts[tag] = counts.get(tag, 0) + 1

    if not counts:
        return pd.DataFrame(columns=FREQUENCY_COLUMNS)

    rows: list[dict[str, object]] = []
    for tag, count in counts.items():
        rows.append(
            {
                "Group": group_of(tag) or OTHER_GROUP,
                "Tag": tag,
                "Count": count,
                "Share (%)": round(count / total * 100.0, 1) if total > 0 else float("nan"),
            }
        )

    result = pd.DataFrame(rows)

    group_order = pd.CategoricalDtype(categories=[*TAG_GROUPS.keys(), OTHER_GROUP], ordered=True)
    result["Group"] = result["Group"].astype(group_order)
    result["TagOrder"] = result["Tag"].map(tag_rank)

    # Canonical tags follow taxonomy order; unknown tags share one rank and fall back to name
    result = result.sort_values(["Group", "TagOrder", "Tag"]).reset_index(drop=True)
    return result.drop(columns=["TagOrder"])


def compute_tag_frequency_table_and_save(
    tag_series: pd.Series,
    output_dir: Path,
    filename: str,
) -> Path:
    """
    Convenience wrapper: compute the tag frequency table and save it as CSV.

    Returns:
        Path to the saved CSV file
    """
    table_df = compute_tag_frequency_table(tag_series)
    out_path = output_dir / filename
    table_df.to_csv(out_path, index=False)
    return out_path
