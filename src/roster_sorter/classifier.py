"""Name classification, pinyin sort keys and letter buckets."""

from __future__ import annotations

import enum
import locale
import logging
from dataclasses import dataclass
from typing import Dict, Iterable, List, Sequence, Tuple

from .normalization import leading_character
from .romanization import Romanizer, default_romanizer

logger = logging.getLogger(__name__)


class Classification(str, enum.Enum):
    """Primary sort partition of a name, decided by its first character."""

    NUMBER_OR_SYMBOL = "number_or_symbol"
    LETTER_OR_HAN = "letter_or_han"


@dataclass
class ClassifierConfig:
    """Configuration parameters for :class:NameClassifier."""

    han_range: Tuple[int, int] = (0x4E00, 0x9FA5)
    raw_tiebreak: bool = False
    use_locale_collation: bool = False
    fallback_bucket: str = "#"

    def __post_init__(self) -> None:
        start, end = self.han_range
        if start > end:
            raise ValueError("han_range start must not exceed its end")
        if len(self.fallback_bucket) != 1:
            raise ValueError("fallback_bucket must be a single character")


def _is_ascii_letter(char: str) -> bool:
    return "a" <= char <= "z" or "A" <= char <= "Z"


def default_collation_key(text: str) -> Tuple[str, str]:
    # Case-insensitive first; case-only differences put lowercase ahead.
    return text.casefold(), text.swapcase()


class NameClassifier:
    """Order mixed digit/Latin/Chinese names and bucket them for navigation."""

    def __init__(self, romanizer: Romanizer | None = None, config: ClassifierConfig | None = None) -> None:
        self.config = config or ClassifierConfig()
        self.romanizer = romanizer if romanizer is not None else default_romanizer()

    def is_han(self, char: str) -> bool:
        if len(char) != 1:
            return False
        start, end = self.config.han_range
        return start <= ord(char) <= end

    def classify(self, name: str) -> Classification:
        lead = leading_character(name)
        if lead and (_is_ascii_letter(lead) or self.is_han(lead)):
            return Classification.LETTER_OR_HAN
        return Classification.NUMBER_OR_SYMBOL

    def readings(self, name: str) -> List[str] | None:
        """Return one token per character of `name`, Han characters romanized.

        Returns None when the leading Han character cannot be romanized. A later
        character that fails keeps its original text.
        """

        text = name.strip()
        tokens: List[str] = []
        for index, char in enumerate(text):
            if not self.is_han(char):
                tokens.append(char)
                continue
            reading = self._romanize(char)
            if reading is None:
                if index == 0:
                    return None
                tokens.append(char)
                continue
            tokens.append(reading)
        return tokens

    def romanization_key(self, name: str) -> str:
        lead = leading_character(name)
        if not self.is_han(lead):
            return name
        tokens = self.readings(name)
        if tokens is None:
            return name
        return "".join(tokens)

    def bucket(self, name: str) -> str:
        lead = leading_character(name)
        if _is_ascii_letter(lead):
            return lead.upper()
        if self.is_han(lead):
            reading = self._romanize(lead)
            if reading and _is_ascii_letter(reading[0]):
                return reading[0].upper()
        return self.config.fallback_bucket

    def sort_key(self, name: str) -> tuple:
        text = name.strip()
        if self.classify(text) is Classification.NUMBER_OR_SYMBOL:
            # Punctuation and symbols ahead of digits.
            lead = text[:1]
            key: tuple = (0, int(lead.isalnum()), self._collate(text))
        else:
            key = (1, self._collate(self.romanization_key(text)))
        if self.config.raw_tiebreak:
            key += (self._collate(text),)
        return key

    def compare(self, left: str, right: str) -> int:
        left_key = self.sort_key(left)
        right_key = self.sort_key(right)
        return (left_key > right_key) - (left_key < right_key)

    def sort(self, names: Iterable[str]) -> List[str]:
        return sorted(names, key=self.sort_key)

    def first_letters(self, names: Iterable[str]) -> List[str]:
        return sorted({self.bucket(name) for name in names})

    def group_by_letter(self, names: Iterable[str]) -> Dict[str, List[str]]:
        groups: Dict[str, List[str]] = {}
        for name in names:
            groups.setdefault(self.bucket(name), []).append(name)
        return groups

    def _romanize(self, char: str) -> str | None:
        try:
            reading = self.romanizer.romanize(char)
        except Exception as exc:
            logger.debug("Falling back to raw text for %r: %s", char, exc)
            return None
        if not reading:
            return None
        return reading

    def _collate(self, text: str):
        if self.config.use_locale_collation:
            return locale.strxfrm(text)
        return default_collation_key(text)


_default_classifier: NameClassifier | None = None


def get_default_classifier() -> NameClassifier:
    """Return a shared classifier backed by :func:default_romanizer."""

    global _default_classifier
    if _default_classifier is None:
        _default_classifier = NameClassifier()
    return _default_classifier


def classify(name: str) -> Classification:
    return get_default_classifier().classify(name)


def compare(left: str, right: str) -> int:
    return get_default_classifier().compare(left, right)


def sort_names(names: Sequence[str]) -> List[str]:
    return get_default_classifier().sort(names)


def first_letters(names: Iterable[str]) -> List[str]:
    return get_default_classifier().first_letters(names)


def group_by_letter(names: Iterable[str]) -> Dict[str, List[str]]:
    return get_default_classifier().group_by_letter(names)


__all__ = [
    "Classification",
    "ClassifierConfig",
    "NameClassifier",
    "classify",
    "compare",
    "default_collation_key",
    "first_letters",
    "get_default_classifier",
    "group_by_letter",
    "sort_names",
]
