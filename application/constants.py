"""Application-level constants."""

# Columns added to the retagged table
ENTRY_ID_COL = "entry_id"
TAGS_BEFORE_COL = "tags_before"
TAGS_AFTER_COL = "tags_after"
AUTO_TAGS_COL = "auto_tags"
CHANGED_COL = "tags_changed"

# Output filenames
RETAGGED_ENTRIES_FILENAME = "retagged_entries.json"
CHANGES_FILENAME = "tag_changes.csv"
FREQUENCY_BEFORE_FILENAME = "tag_frequency_before.csv"
FREQUENCY_AFTER_FILENAME = "tag_frequency_after.csv"
CONFIG_SNAPSHOT_FILENAME = "config.resolved.json"
SUMMARY_FILENAME = "summary.json"
LOG_FILENAME = "run.log"
