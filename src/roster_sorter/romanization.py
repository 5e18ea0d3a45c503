"""Romanization (pinyin) helpers for Han characters."""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Dict, Protocol, Sequence

import pypinyin

logger = logging.getLogger(__name__)


# Common surnames, used when pypinyin cannot produce a reading.
SURNAME_READINGS: Dict[str, str] = {
    "张": "zhang", "李": "li", "王": "wang", "赵": "zhao", "钱": "qian",
    "孙": "sun", "周": "zhou", "吴": "wu", "郑": "zheng", "冯": "feng",
    "陈": "chen", "褚": "chu", "卫": "wei", "蒋": "jiang", "沈": "shen",
    "韩": "han", "杨": "yang", "朱": "zhu", "秦": "qin", "尤": "you",
    "许": "xu", "何": "he", "吕": "lv", "施": "shi", "白": "bai",
    "程": "cheng", "邓": "deng", "黄": "huang", "林": "lin", "刘": "liu",
    "徐": "xu", "马": "ma", "于": "yu", "董": "dong", "梁": "liang",
    "肖": "xiao", "田": "tian", "胡": "hu", "袁": "yuan", "潘": "pan",
    "陆": "lu", "高": "gao", "郭": "guo", "曹": "cao", "彭": "peng",
    "曾": "zeng", "谢": "xie", "苏": "su", "卢": "lu", "蔡": "cai",
    "贾": "jia", "丁": "ding", "魏": "wei", "薛": "xue", "叶": "ye",
    "阎": "yan", "余": "yu",
}


class TransliterationUnavailable(Exception):
    """Raised when a character has no known romanized reading."""

    def __init__(self, character: str, reason: str = "no reading") -> None:
        super().__init__(f"cannot romanize {character!r}: {reason}")
        self.character = character


class Romanizer(Protocol):
    def romanize(self, character: str) -> str:
        """Return the primary lowercase, toneless reading of `character`."""


@lru_cache(maxsize=8192)
def _pinyin_reading(character: str) -> str | None:
    # Heteronyms stay disabled: pypinyin then returns the primary reading only.
    result = pypinyin.pinyin(character, style=pypinyin.Style.NORMAL, heteronym=False, errors="default")
    if not result or not result[0]:
        return None
    reading = result[0][0]
    if not reading or reading == character:
        return None
    return reading.lower()


class PinyinRomanizer:
    """Romanize single Han characters with pypinyin (NORMAL style, no heteronyms)."""

    def romanize(self, character: str) -> str:
        if len(character) != 1:
            raise TransliterationUnavailable(character, "expected a single character")
        reading = _pinyin_reading(character)
        if reading is None:
            raise TransliterationUnavailable(character)
        return reading

    @staticmethod
    def cache_size() -> int:
        return _pinyin_reading.cache_info().currsize


class SurnameRomanizer:
    """Table-driven romanizer covering common surnames only."""

    def __init__(self, readings: Dict[str, str] | None = None) -> None:
        self.readings = dict(SURNAME_READINGS if readings is None else readings)

    def romanize(self, character: str) -> str:
        try:
            return self.readings[character]
        except KeyError:
            raise TransliterationUnavailable(character, "not in surname table") from None


class ChainedRomanizer:
    """Try each romanizer in order and return the first reading produced."""

    def __init__(self, romanizers: Sequence[Romanizer]) -> None:
        if not romanizers:
            raise ValueError("at least one romanizer is required")
        self.romanizers = list(romanizers)

    def romanize(self, character: str) -> str:
        for romanizer in self.romanizers:
            try:
                return romanizer.romanize(character)
            except Exception as exc:
                logger.debug("%s failed on %r: %s", type(romanizer).__name__, character, exc)
        raise TransliterationUnavailable(character, "all romanizers failed")


def default_romanizer() -> Romanizer:
    """Return pypinyin backed by the surname table."""

    return ChainedRomanizer([PinyinRomanizer(), SurnameRomanizer()])


__all__ = [
    "ChainedRomanizer",
    "PinyinRomanizer",
    "Romanizer",
    "SURNAME_READINGS",
    "SurnameRomanizer",
    "TransliterationUnavailable",
    "default_romanizer",
]
