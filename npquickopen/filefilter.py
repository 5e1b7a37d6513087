"""Wildcard file-name filters with allow and deny lists."""

from __future__ import annotations

MATCH_ALL = "*.*"
SEPARATOR = ";"
_DENY_BEGIN_CHARS = "[^"
_DENY_END = "]"


def split_filter(text: str, delim: str) -> list[str]:
    """Split ``text`` on ``delim``, dropping empty items."""
    return [item for item in text.split(delim) if item]


def wildcmp(wild: str, string: str) -> bool:
    """Case-insensitive match of ``string`` against a ``*``/``?`` wildcard."""
    w = s = 0
    wild_len, str_len = len(wild), len(string)

    while s < str_len and (w >= wild_len or wild[w] != "*"):
        if w >= wild_len:
            return False
        if wild[w].lower() != string[s].lower() and wild[w] != "?":
            return False
        w += 1
        s += 1

    mp = cp = 0
    while s < str_len:
        if w < wild_len and wild[w] == "*":
            w += 1
            if w == wild_len:
                return True
            mp = w
            cp = s + 1
        elif w < wild_len and (wild[w].lower() == string[s].lower() or wild[w] == "?"):
            w += 1
            s += 1
        else:
            w = mp
            s = cp
            cp += 1

    while w < wild_len and wild[w] == "*":
        w += 1
    return w == wild_len


def _find_deny_begin(text: str) -> int:
    positions = [pos for pos in (text.find(ch) for ch in _DENY_BEGIN_CHARS) if pos >= 0]
    return min(positions) if positions else -1


class FileFilter:
    """Filter such as ``*.cpp;*.h[^*.bak]``: allowed patterns, then denied ones in ``[^...]``."""

    def __init__(self, filter_string: str = "") -> None:
        self._filter_string = MATCH_ALL
        self._allow: list[str] = []
        self._deny: list[str] = []
        self.set_filter(filter_string)

    @property
    def filter_string(self) -> str:
        return self._filter_string

    @property
    def allow_list(self) -> list[str]:
        return list(self._allow)

    @property
    def deny_list(self) -> list[str]:
        return list(self._deny)

    def set_filter(self, new_filter: str) -> None:
        """Parse ``new_filter``; an empty filter matches everything."""
        text = new_filter if new_filter else MATCH_ALL
        self._filter_string = text
        self._deny = []

        begin = _find_deny_begin(text)
        if begin < 0:
            self._allow = split_filter(text, SEPARATOR)
        else:
            self._allow = split_filter(text[:begin], SEPARATOR)
            start = begin + len(_DENY_BEGIN_CHARS)
            end = text.find(_DENY_END, begin)
            if end >= 0 and end >= start:
                deny_text = text[start:end]
            else:
                deny_text = text[start:]
            self._deny = split_filter(deny_text, SEPARATOR)

        if not self._allow:
            self._allow = [MATCH_ALL]

    def match(self, file_name: str) -> bool:
        """Return whether ``file_name`` passes the filter."""
        if not file_name:
            return False
        if self._filter_string == MATCH_ALL:
            return True
        if any(wildcmp(deny, file_name) for deny in self._deny):
            return False
        return any(wildcmp(allow, file_name) for allow in self._allow)