import pandas as pd
import pytest

from roster_sorter.pipeline import RosterSorter, RosterSorterConfig


class FailingRomanizer:
    def romanize(self, character):
        raise RuntimeError("transliteration unavailable")


def _quiet_config(**kwargs):
    return RosterSorterConfig(verbose=False, use_tqdm=False, **kwargs)


def test_sort_names_orders_and_annotates_roster():
    sorter = RosterSorter(_quiet_config())
    result = sorter.sort_names(["王五", " ", "aaa", "114514", "", "张三"])

    assert result.names == ["114514", "aaa", "王五", "张三"]
    assert list(result.dataframe.columns) == ["name", "classification", "romanization_key", "bucket"]
    assert result.dataframe["romanization_key"].tolist() == ["114514", "aaa", "wangwu", "zhangsan"]
    assert result.dataframe["bucket"].tolist() == ["#", "A", "W", "Z"]
    assert result.letters == ["#", "A", "W", "Z"]
    assert result.groups["Z"] == ["张三"]
    assert result.stats.total_names == 4
    assert result.stats.dropped_empty == 2
    assert result.stats.by_classification == {"number_or_symbol": 1, "letter_or_han": 3}


def test_duplicates_are_kept_unless_deduplication_is_enabled():
    names = ["bbb", "aaa", "bbb"]
    kept = RosterSorter(_quiet_config()).sort_names(names)
    assert kept.names == ["aaa", "bbb", "bbb"]
    assert kept.stats.duplicates_removed == 0

    deduped = RosterSorter(_quiet_config(deduplicate=True)).sort_names(names)
    assert deduped.names == ["aaa", "bbb"]
    assert deduped.stats.duplicates_removed == 1


def test_transliteration_failures_are_counted():
    sorter = RosterSorter(_quiet_config(), romanizer=FailingRomanizer())
    result = sorter.sort_names(["张三", "Ava"])
    assert result.stats.transliteration_failures == 1
    assert result.groups == {"A": ["Ava"], "#": ["张三"]}


def test_missing_column_raises():
    sorter = RosterSorter(_quiet_config(name_column="student"))
    with pytest.raises(KeyError):
        sorter.sort(pd.DataFrame({"name": ["aaa"]}))


def test_results_are_written_to_csv(tmp_path):
    output = tmp_path / "sorted.csv"
    RosterSorter(_quiet_config()).sort(pd.DataFrame({"name": ["张三", "aaa"]}), output)
    written = pd.read_csv(output, dtype=str)
    assert written["name"].tolist() == ["aaa", "张三"]


def test_results_are_written_to_text(tmp_path):
    output = tmp_path / "sorted.txt"
    RosterSorter(_quiet_config()).sort(pd.DataFrame({"name": ["张三", "aaa", "1"]}), output)
    assert output.read_text(encoding="utf-8").splitlines() == ["1", "aaa", "张三"]


def test_unsupported_output_format_raises(tmp_path):
    with pytest.raises(ValueError):
        RosterSorter(_quiet_config()).sort(pd.DataFrame({"name": ["aaa"]}), tmp_path / "out.json")


def test_verbose_run_prints_progress(capsys):
    RosterSorter(RosterSorterConfig(use_tqdm=False)).sort_names(["aaa"])
    out = capsys.readouterr().out
    assert "Roster Sorter Process Started" in out
    assert "Index: A" in out


def test_names_are_only_trimmed_on_the_way_through():
    result = RosterSorter(_quiet_config()).sort_names([" Ｔｏｍ ", "“Ann”", "ﬁona"])
    assert result.names == ["“Ann”", "ﬁona", "Ｔｏｍ"]
    assert result.dataframe["classification"].tolist() == ["number_or_symbol"] * 3
