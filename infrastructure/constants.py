from pathlib import Path

# Repo-root conventional directories/files (overrideable via retag.yaml or .env)
CONFIG_DIR = Path("configs")
RETAG_FILE = CONFIG_DIR / "retag.yaml"

DATA_DIR = Path("dataset")
OUTPUT_ROOT = Path("outputs")

# Environment variable overrides
ENV_DATA_DIR = "RETAG_DATA_DIR"
ENV_OUTPUT_ROOT = "RETAG_OUTPUT_ROOT"
