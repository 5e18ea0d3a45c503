"""Convenience helpers for running the Roster Sorter end-to-end."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import pandas as pd

from .pipeline import RosterSorter, RosterSorterConfig, RosterSortResult


def sort_file(
    input_path: str | Path,
    output_path: str | Path,
    config: Optional[RosterSorterConfig] = None,
) -> RosterSortResult | None:
    """Sort the roster in `input_path` and write the annotated results."""

    input_path = Path(input_path)
    output_path = Path(output_path)
    config = config or RosterSorterConfig()

    try:
        dataframe = _load_dataframe(input_path, config.name_column)
    except FileNotFoundError:
        print(f"ERROR: Input file not found at '{input_path}'.")
        return None
    except UnicodeDecodeError:
        print(f"ERROR: Could not decode '{input_path}' as UTF-8. Please re-save the roster with UTF-8 encoding.")
        return None
    except ValueError:
        print(f"ERROR: Unsupported file format for '{input_path}'. Please provide a CSV, Excel or text file.")
        return None

    if config.name_column not in dataframe.columns:
        print(f"ERROR: Column '{config.name_column}' not found in '{input_path}'. Please check --name-column.")
        return None

    sorter = RosterSorter(config)
    try:
        return sorter.sort(dataframe, output_path)
    except ValueError as exc:
        print(f"ERROR: {exc}")
        return None


def _load_dataframe(path: Path, name_column: str) -> pd.DataFrame:
    suffix = path.suffix.lower()
    if suffix == ".csv":
        return pd.read_csv(path, dtype=str, keep_default_na=False)
    if suffix in {".xls", ".xlsx"}:
        return pd.read_excel(path, dtype=str, keep_default_na=False)
    if suffix == ".txt":
        lines = path.read_text(encoding="utf-8-sig").splitlines()
        return pd.DataFrame({name_column: lines})
    raise ValueError("unsupported format")
