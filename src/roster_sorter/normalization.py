"""Name normalization helpers."""

from __future__ import annotations

import re
from typing import Iterable, List

import ftfy
from unidecode import unidecode


_MULTI_SPACE_PATTERN = re.compile(r"\s+")


def normalize(name: object) -> str:
    """Return `name` as a trimmed string with broken encodings repaired."""

    raw = str(name or "").strip()
    if not raw:
        return ""
    # Repair encoding damage only; width, quotes and ligatures are part of the name.
    fixed = ftfy.fix_text(raw, fix_character_width=False, uncurl_quotes=False, fix_latin_ligatures=False)
    return fixed.strip()


def normalize_roster(names: Iterable[object], deduplicate: bool = False) -> List[str]:
    """Trim every name and drop the empty ones, optionally removing repeats."""

    cleaned = [normalize(name) for name in names]
    cleaned = [name for name in cleaned if name]
    if not deduplicate:
        return cleaned
    return list(dict.fromkeys(cleaned))


def fold_for_search(text: object) -> str:
    """Return an ASCII, lowercase, single-spaced form of `text` for matching."""

    folded = unidecode(normalize(text)).lower()
    return _MULTI_SPACE_PATTERN.sub(" ", folded).strip()


def leading_character(name: str) -> str:
    """Return the first character of `name` after trimming, or an empty string."""

    stripped = name.strip()
    return stripped[0] if stripped else ""
