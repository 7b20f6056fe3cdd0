"""
Reporting over tagged entries.

Provides:
- Tag frequency tables grouped by taxonomy dimension

Functions are pure (pandas only); *_and_save helpers write outputs to disk.
"""

from domain.reporting.tables import compute_tag_frequency_table, compute_tag_frequency_table_and_save

__all__ = [
    "compute_tag_frequency_table",
    "compute_tag_frequency_table_and_save",
]
