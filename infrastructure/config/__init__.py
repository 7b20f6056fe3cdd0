"""
Configuration management: models, loading, and validation.

Handles:
- RunConfig: Retag job configuration
- Column mapping for exported entry tables
- Tag cap settings
- Environment variable overrides

The loader module performs file I/O; models are pure Pydantic classes.
"""

from infrastructure.config.loader import load_run_config
from infrastructure.config.models import (
    EntryColumnsConfig,
    MergeConfig,
    RetagMode,
    RunConfig,
)

__all__ = [
    "RunConfig",
    "load_run_config",
    "RetagMode",
    "EntryColumnsConfig",
    "MergeConfig",
]
