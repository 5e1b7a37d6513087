"""Quick-open search: fuzzy-ranked file names below a directory."""

from __future__ import annotations

import argparse
import os
import sys
import unicodedata
from dataclasses import dataclass
from pathlib import Path

from npquickopen.dirindex import DirectoryIndex
from npquickopen.filefilter import FileFilter
from npquickopen.fuzzy import FuzzyMatcher


def remove_whitespaces(text: str) -> str:
    """Drop control characters and blanks from ``text``."""
    return "".join(
        ch
        for ch in text
        if unicodedata.category(ch) not in ("Cc", "Zs") and ch != "\t"
    )


@dataclass(frozen=True)
class QuickOpenResult:
    """One candidate file and its match score."""

    score: int
    path: Path

    @property
    def name(self) -> str:
        return self.path.name


class QuickOpen:
    """Indexes a directory and ranks its files against a fuzzy pattern."""

    def __init__(self, file_filter: FileFilter | None = None) -> None:
        self.file_filter = file_filter if file_filter is not None else FileFilter()
        self._index = DirectoryIndex()
        self._current: Path | None = None
        self._pattern: str | None = None
        self._results: list[QuickOpenResult] = []

    def __enter__(self) -> "QuickOpen":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    @property
    def current_dir(self) -> Path | None:
        return self._current

    @property
    def pattern(self) -> str | None:
        return self._pattern

    @property
    def results(self) -> list[QuickOpenResult]:
        return list(self._results)

    def set_current_path(self, path: str | os.PathLike[str]) -> None:
        """Switch to ``path`` and start indexing it, unless it is already current."""
        new_path = Path(path)
        if self._current is not None and self._current == new_path:
            return
        self._pattern = None
        self._results = []
        self._index.cancel()
        self._index.init(new_path)
        self._current = new_path
        self._index.build()

    def populate(self, pattern: str) -> list[QuickOpenResult]:
        """Rank indexed files against ``pattern``, waiting for a running build."""
        if self._current is None:
            return []
        files = self._index.file_index()
        pattern = remove_whitespaces(pattern)
        if pattern == self._pattern:
            return list(self._results)

        matcher = FuzzyMatcher(pattern)
        results: list[QuickOpenResult] = []
        for entry in files:
            if not self.file_filter.match(entry.name):
                continue
            if pattern:
                score = matcher.score(entry.name)
                if score > 0:
                    results.append(QuickOpenResult(score, entry))
            else:
                results.append(QuickOpenResult(0, entry))
        results.sort(key=lambda result: result.score, reverse=True)

        self._results = results
        self._pattern = pattern
        return list(results)

    def highlight(self, result: QuickOpenResult) -> list[tuple[str, bool]]:
        """Split the result's file name into runs, flagging the matched ones."""
        text = result.name
        if not text:
            return []
        match = FuzzyMatcher(self._pattern or "").match(text)
        matched = set(match.positions) if match.score else set()

        segments: list[tuple[str, bool]] = []
        for i, ch in enumerate(text):
            flag = i in matched
            if segments and segments[-1][1] == flag:
                segments[-1] = (segments[-1][0] + ch, flag)
            else:
                segments.append((ch, flag))
        return segments

    def relative_path(self, result: QuickOpenResult) -> str:
        """Path of ``result`` relative to the indexed directory."""
        base = self._current if self._current is not None else Path()
        return os.path.relpath(result.path, base)

    def close(self) -> None:
        """Stop any running index build."""
        self._index.cancel()


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="npquickopen",
        description="List files below a directory ranked by a fuzzy pattern.",
    )
    parser.add_argument("directory", help="directory to index")
    parser.add_argument("pattern", nargs="?", default="", help="fuzzy pattern")
    parser.add_argument(
        "-f", "--filter", default="", help="file filter such as '*.cpp;*.h[^*.bak]'"
    )
    parser.add_argument(
        "-n", "--limit", type=int, default=0, help="show at most this many results"
    )
    args = parser.parse_args(argv)

    directory = Path(args.directory)
    if not directory.is_dir():
        print(f"npquickopen: not a directory: {directory}", file=sys.stderr)
        return 2

    with QuickOpen(FileFilter(args.filter)) as quick:
        quick.set_current_path(directory)
        results = quick.populate(args.pattern)
        if args.limit > 0:
            results = results[: args.limit]
        for result in results:
            print(f"{result.score}\t{quick.relative_path(result)}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())