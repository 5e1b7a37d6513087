import os
from pathlib import Path

import pytest

from npquickopen.filefilter import FileFilter
from npquickopen.quickopen import QuickOpen, QuickOpenResult, main, remove_whitespaces


@pytest.fixture
def tree(tmp_path: Path) -> Path:
    (tmp_path / "src").mkdir()
    (tmp_path / "src" / "main.py").write_text("")
    (tmp_path / "src" / "util.py").write_text("")
    (tmp_path / "readme.txt").write_text("")
    (tmp_path / ".git").mkdir()
    (tmp_path / ".git" / "config").write_text("")
    return tmp_path


def test_remove_whitespaces_drops_blanks_and_controls():
    assert remove_whitespaces("a b\tc\nd\x01") == "abcd"


def test_remove_whitespaces_keeps_plain_text():
    assert remove_whitespaces("Main.cpp") == "Main.cpp"


def test_populate_without_path_is_empty():
    assert QuickOpen().populate("x") == []


def test_empty_pattern_lists_all_files_with_zero_score(tree):
    with QuickOpen() as quick:
        quick.set_current_path(tree)
        results = quick.populate("")
    names = sorted(result.name for result in results)
    assert names == ["main.py", "readme.txt", "util.py"]
    assert all(result.score == 0 for result in results)


def test_hidden_directories_are_skipped(tree):
    with QuickOpen() as quick:
        quick.set_current_path(tree)
        results = quick.populate("")
    assert "config" not in {result.name for result in results}


def test_filter_restricts_results(tree):
    with QuickOpen(FileFilter("*.py")) as quick:
        quick.set_current_path(tree)
        results = quick.populate("")
    assert sorted(result.name for result in results) == ["main.py", "util.py"]


def test_pattern_keeps_only_positive_scores_sorted(tree):
    with QuickOpen() as quick:
        quick.set_current_path(tree)
        results = quick.populate("py")
    assert results
    assert all(result.score > 0 for result in results)
    scores = [result.score for result in results]
    assert scores == sorted(scores, reverse=True)
    assert "readme.txt" not in {result.name for result in results}


def test_whitespace_in_pattern_is_ignored(tree):
    with QuickOpen() as quick:
        quick.set_current_path(tree)
        spaced = quick.populate("ma in")
        assert quick.pattern == "main"
        plain = quick.populate("main")
    assert spaced == plain
    assert [result.name for result in plain] == ["main.py"]


def test_results_property_matches_last_populate(tree):
    with QuickOpen() as quick:
        quick.set_current_path(tree)
        results = quick.populate("util")
        assert quick.results == results


def test_same_path_keeps_results(tree):
    with QuickOpen() as quick:
        quick.set_current_path(tree)
        first = quick.populate("main")
        quick.set_current_path(tree)
        assert quick.results == first


def test_new_path_resets_results(tree):
    with QuickOpen() as quick:
        quick.set_current_path(tree)
        quick.populate("main")
        quick.set_current_path(tree / "src")
        assert quick.results == []
        assert quick.current_dir == tree / "src"
        names = sorted(result.name for result in quick.populate(""))
    assert names == ["main.py", "util.py"]


def test_highlight_covers_whole_name(tree):
    with QuickOpen() as quick:
        quick.set_current_path(tree)
        result = quick.populate("main")[0]
        segments = quick.highlight(result)
    assert "".join(text for text, _ in segments) == "main.py"
    matched = "".join(text for text, flag in segments if flag)
    assert matched == "main"


def test_highlight_without_pattern_has_no_matches(tree):
    with QuickOpen() as quick:
        quick.set_current_path(tree)
        result = quick.populate("")[0]
        segments = quick.highlight(result)
    assert segments == [(result.name, False)]


def test_relative_path(tree):
    with QuickOpen() as quick:
        quick.set_current_path(tree)
        result = QuickOpenResult(0, tree / "src" / "main.py")
        assert quick.relative_path(result) == os.path.join("src", "main.py")


def test_main_prints_results(tree, capsys):
    assert main([str(tree), "util"]) == 0
    out = capsys.readouterr().out
    lines = out.strip().splitlines()
    assert len(lines) == 1
    assert lines[0].endswith(os.path.join("src", "util.py"))


def test_main_rejects_missing_directory(tmp_path, capsys):
    assert main([str(tmp_path / "missing")]) == 2
    assert "not a directory" in capsys.readouterr().err