"""Roster search by name, folded text or pinyin."""

from __future__ import annotations

from typing import Iterable, List

from .classifier import NameClassifier, get_default_classifier
from .normalization import fold_for_search


def _pinyin_forms(name: str, classifier: NameClassifier) -> tuple[str, str]:
    tokens = classifier.readings(name)
    if tokens is None:
        return "", ""
    full = "".join(tokens).lower()
    initials = "".join(token[0] for token in tokens if token.strip()).lower()
    return full, initials


def matches(name: str, keyword: str, classifier: NameClassifier | None = None) -> bool:
    """Return True when `keyword` finds `name` by text, folded text or pinyin."""

    needle = keyword.strip().lower()
    if not needle:
        return True
    if needle in name.lower():
        return True

    folded_needle = fold_for_search(needle)
    if folded_needle and folded_needle in fold_for_search(name):
        return True

    classifier = classifier or get_default_classifier()
    full, initials = _pinyin_forms(name, classifier)
    compact_needle = folded_needle.replace(" ", "")
    if not compact_needle:
        return False
    return compact_needle in full or initials.startswith(compact_needle)


def search_students(
    names: Iterable[str],
    keyword: str,
    classifier: NameClassifier | None = None,
) -> List[str]:
    """Return the names matching `keyword`, keeping their input order."""

    classifier = classifier or get_default_classifier()
    return [name for name in names if matches(name, keyword, classifier)]
