"""
Infrastructure layer: External dependencies and I/O boundaries.

Contains adapters for:
- Configuration loading (YAML, environment)
- Entry table loading (CSV, Excel, JSON)
- Observability (logging)

This is the only layer that performs I/O operations.
"""

# Most commonly used - exposed at top level for convenience
from infrastructure.config import (
    RetagMode,
    RunConfig,
    load_run_config,
)

__all__ = [
    "load_run_config",
    "RunConfig",
    "RetagMode",
]
