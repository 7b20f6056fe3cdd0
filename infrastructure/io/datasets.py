"""Entry table loading utilities."""

from pathlib import Path

import pandas as pd


def read_table(path: Path) -> pd.DataFrame:
    """
    Read an exported entries table based on file extension.

    Supported formats:
    - Excel: .xlsx, .xls
    - CSV: .csv (Wix export)
    - JSON: .json (admin export, a list of entry objects)

    Args:
        path: Path to data file

    Returns:
        pandas DataFrame; metadata objects from JSON exports are left as dicts

    Raises:
        ValueError: If file format is not supported
        FileNotFoundError: If file does not exist
    """
    if not path.exists():
        raise FileNotFoundError(f"Data file not found: {path}")

    suffix = path.suffix.lower()

    if suffix in [".xlsx", ".xls"]:
        return pd.read_excel(path)
    elif suffix == ".csv":
        return pd.read_csv(path, dtype=str, keep_default_na=False, na_values=[""])
    elif suffix == ".json":
        return pd.read_json(path, orient="records", dtype=False)
    else:
        raise ValueError(f"Unsupported file format: {suffix}. Supported formats: .xlsx, .xls, .csv, .json")
