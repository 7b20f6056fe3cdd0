"""Configuration loading from YAML files."""

import os
from pathlib import Path
from typing import Any

import yaml

from infrastructure.config.models import EntryColumnsConfig, MergeConfig, RetagMode, RunConfig
from infrastructure.constants import DATA_DIR, ENV_DATA_DIR, ENV_OUTPUT_ROOT, OUTPUT_ROOT


def _load_yaml(path: Path) -> dict[str, Any]:
    """Load YAML file and return as dict."""
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    with path.open("r", encoding="utf-8") as f:
        data = yaml.safe_load(f)

    if not isinstance(data, dict):
        raise ValueError(f"Expected YAML dict in {path}, got {type(data)}")

    return data


def _section(data: dict[str, Any], key: str, path: Path) -> dict[str, Any]:
    block = data.get(key) or {}
    if not isinstance(block, dict):
        raise ValueError(f"'{key}' must be a mapping in {path}")
    return block


def load_run_config(retag_path: Path) -> RunConfig:
    """
    Load retag.yaml and construct a fully-resolved RunConfig.

    Directory precedence: environment variable (RETAG_DATA_DIR, RETAG_OUTPUT_ROOT,
    typically set through .env), then the YAML value, then the repo default.

    Raises:
        FileNotFoundError: If the YAML file does not exist
        ValueError: If required keys are missing or have invalid values
    """
    exp = _load_yaml(retag_path)

    if "input_file" not in exp or not exp.get("input_file"):
        raise ValueError("retag.yaml missing required key: input_file")

    raw_mode = str(exp.get("mode", RetagMode.FULL.value)).strip().lower()
    try:
        mode = RetagMode(raw_mode)
    except ValueError as e:
        allowed = ", ".join(m.value for m in RetagMode)
        raise ValueError(f"Invalid mode {raw_mode!r} in {retag_path} (expected one of: {allowed})") from e

    data_dir = Path(os.environ.get(ENV_DATA_DIR) or exp.get("data_dir", str(DATA_DIR)))
    output_root = Path(os.environ.get(ENV_OUTPUT_ROOT) or exp.get("output_root", str(OUTPUT_ROOT)))

    columns = EntryColumnsConfig(**_section(exp, "columns", retag_path))
    merge = MergeConfig(**_section(exp, "merge", retag_path))

    return RunConfig(
        mode=mode,
        input_file_path=data_dir / str(exp["input_file"]),
        output_root=output_root,
        columns=columns,
        merge=merge,
        dry_run=bool(exp.get("dry_run", False)),
    )
