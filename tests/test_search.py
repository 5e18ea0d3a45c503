from roster_sorter.classifier import NameClassifier
from roster_sorter.search import matches, search_students


class FailingRomanizer:
    def romanize(self, character):
        raise RuntimeError("transliteration unavailable")


ROSTER = ["张三", "李四", "aaa", "Zhao", "José", "114514"]


def test_search_by_plain_text_is_case_insensitive():
    assert search_students(ROSTER, "张") == ["张三"]
    assert search_students(ROSTER, "AA") == ["aaa"]
    assert search_students(ROSTER, "145") == ["114514"]


def test_search_by_pinyin():
    assert search_students(ROSTER, "lisi") == ["李四"]
    assert search_students(ROSTER, "zs") == ["张三"]


def test_search_folds_accents():
    assert search_students(ROSTER, "jose") == ["José"]


def test_empty_keyword_returns_everything():
    assert search_students(ROSTER, "  ") == ROSTER


def test_pinyin_search_degrades_without_transliteration():
    failing = NameClassifier(FailingRomanizer())
    assert not matches("张三", "zs", failing)
    assert matches("张三", "张", failing)
