"""Core pipeline for the Roster Sorter library."""

from __future__ import annotations

import time
from collections import Counter
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Iterable, List

import pandas as pd

try:
    from tqdm import tqdm

    _TQDM_AVAILABLE = True
except ImportError:  # pragma: no cover - optional dependency
    _TQDM_AVAILABLE = False

from .classifier import Classification, ClassifierConfig, NameClassifier
from .normalization import normalize_roster
from .romanization import Romanizer


@dataclass
class RosterSortStats:
    """Summary metrics for a Roster Sorter run."""

    total_names: int
    dropped_empty: int
    duplicates_removed: int
    by_classification: Dict[str, int]
    transliteration_failures: int
    bucket_count: int
    runtime_seconds: float


@dataclass
class RosterSortResult:
    """Result bundle returned by :class:RosterSorter."""

    dataframe: pd.DataFrame
    letters: List[str]
    groups: Dict[str, List[str]]
    stats: RosterSortStats

    @property
    def names(self) -> List[str]:
        return self.dataframe.iloc[:, 0].tolist()


@dataclass
class RosterSorterConfig:
    """Configuration parameters for :class:RosterSorter."""

    name_column: str = "name"
    deduplicate: bool = False
    use_tqdm: bool | None = None
    verbose: bool = True
    classifier: ClassifierConfig = field(default_factory=ClassifierConfig)


class RosterSorter:
    """Normalize, order and index a class roster."""

    def __init__(self, config: RosterSorterConfig | None = None, romanizer: Romanizer | None = None) -> None:
        self.config = config or RosterSorterConfig()
        self.classifier = NameClassifier(romanizer, self.config.classifier)

    def sort_names(self, names: Iterable[object]) -> RosterSortResult:
        """Convenience wrapper around :meth:sort for a plain list of names."""

        return self.sort(pd.DataFrame({self.config.name_column: list(names)}))

    def sort(
        self,
        dataframe: pd.DataFrame,
        output_path: str | Path | None = None,
    ) -> RosterSortResult:
        """Sort the roster, optionally save it, and return the enriched dataframe."""

        column = self.config.name_column
        if column not in dataframe.columns:
            raise KeyError(f"Column '{column}' not found in dataframe")

        verbose = self.config.verbose
        overall_start_time = time.time()
        if verbose:
            print("--- Roster Sorter Process Started ---")
            print("\n1. Loading and normalizing names...")

        t0 = time.time()
        raw_names = dataframe[column].fillna("").astype(str).tolist()
        non_empty = normalize_roster(raw_names)
        names = normalize_roster(non_empty, deduplicate=self.config.deduplicate)
        dropped_empty = len(raw_names) - len(non_empty)
        duplicates_removed = len(non_empty) - len(names)
        if verbose:
            print(f"   Loaded {len(raw_names)} names, kept {len(names)}. Done in {time.time() - t0:.2f}s")

        t0 = time.time()
        if verbose:
            print("2. Sorting roster (numbers/symbols first, then letters and pinyin A-Z)...")
        ordered = self.classifier.sort(names)
        if verbose:
            print(f"   Done in {time.time() - t0:.2f}s")

        t0 = time.time()
        if verbose:
            print("3. Annotating names with classification, sort key and bucket...")
        rows = []
        failures = 0
        iterator: Iterable[str] = ordered
        if ordered and self._use_tqdm:
            iterator = tqdm(ordered, desc="   Annotating", unit="name")
        for name in iterator:
            if self.classifier.is_han(name[0]) and self.classifier.readings(name) is None:
                failures += 1
            rows.append(
                {
                    column: name,
                    "classification": self.classifier.classify(name).value,
                    "romanization_key": self.classifier.romanization_key(name),
                    "bucket": self.classifier.bucket(name),
                }
            )
        df = pd.DataFrame(rows, columns=[column, "classification", "romanization_key", "bucket"])
        if verbose:
            if failures:
                print(f"   {failures} names could not be romanized and keep their raw text as key.")
            print(f"   Done in {time.time() - t0:.2f}s")

        t0 = time.time()
        if verbose:
            print("4. Building letter index...")
        letters = self.classifier.first_letters(ordered)
        groups = self.classifier.group_by_letter(ordered)
        if verbose:
            print(f"   Index: {' '.join(letters) if letters else '(empty)'}")
            print(f"   Done in {time.time() - t0:.2f}s")

        if output_path is not None:
            output_str = str(output_path)
            self._save_dataframe(df, output_str)
            if verbose:
                print(f"\n   Processing complete. Results saved to '{output_str}'")

        counts = Counter(row["classification"] for row in rows)
        elapsed = time.time() - overall_start_time
        stats = RosterSortStats(
            total_names=len(names),
            dropped_empty=dropped_empty,
            duplicates_removed=duplicates_removed,
            by_classification={item.value: counts.get(item.value, 0) for item in Classification},
            transliteration_failures=failures,
            bucket_count=len(letters),
            runtime_seconds=elapsed,
        )

        if verbose:
            print("\n--- Results Summary ---")
            print(f"   - Total names sorted: {stats.total_names}")
            print(f"   - Empty entries dropped: {stats.dropped_empty}")
            if self.config.deduplicate:
                print(f"   - Duplicates removed: {stats.duplicates_removed}")
            for label, count in stats.by_classification.items():
                print(f"   - {label}: {count}")
            print(f"\n--- Roster Sorter Process Finished in {elapsed:.2f} seconds ---")

        return RosterSortResult(dataframe=df, letters=letters, groups=groups, stats=stats)

    @property
    def _use_tqdm(self) -> bool:
        if self.config.use_tqdm is not None:
            return self.config.use_tqdm and _TQDM_AVAILABLE
        return _TQDM_AVAILABLE

    @staticmethod
    def _save_dataframe(dataframe: pd.DataFrame, output_path: str | Path) -> None:
        path = Path(output_path)
        suffix = path.suffix.lower()
        if suffix == ".csv":
            dataframe.to_csv(path, index=False)
            return
        if suffix in {".xls", ".xlsx"}:
            dataframe.to_excel(path, index=False)
            return
        if suffix == ".txt":
            names = dataframe.iloc[:, 0].tolist()
            path.write_text("".join(f"{name}\n" for name in names), encoding="utf-8")
            return
        raise ValueError(f"Unsupported output file format: '{suffix}'")


__all__ = [
    "RosterSorter",
    "RosterSortResult",
    "RosterSortStats",
    "RosterSorterConfig",
]
