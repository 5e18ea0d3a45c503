"""Roster Sorter library initialization."""

from .classifier import (
    Classification,
    ClassifierConfig,
    NameClassifier,
    classify,
    compare,
    first_letters,
    group_by_letter,
    sort_names,
)
from .normalization import normalize, normalize_roster
from .pipeline import RosterSorter, RosterSorterConfig, RosterSortResult, RosterSortStats
from .romanization import (
    ChainedRomanizer,
    PinyinRomanizer,
    SurnameRomanizer,
    TransliterationUnavailable,
    default_romanizer,
)
from .runner import sort_file
from .search import search_students

__all__ = [
    "Classification",
    "ClassifierConfig",
    "NameClassifier",
    "classify",
    "compare",
    "first_letters",
    "group_by_letter",
    "sort_names",
    "normalize",
    "normalize_roster",
    "RosterSorter",
    "RosterSorterConfig",
    "RosterSortResult",
    "RosterSortStats",
    "ChainedRomanizer",
    "PinyinRomanizer",
    "SurnameRomanizer",
    "TransliterationUnavailable",
    "default_romanizer",
    "sort_file",
    "search_students",
]
