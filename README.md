# npquickopen

A quick-open file finder. It indexes a directory tree in a background
thread, filters file names with wildcard patterns, and ranks the names
with a fuzzy scorer that favours first letters, characters after `_`,
space or `.`, camel-case humps and consecutive runs. It also has helpers
for the commands of a file explorer's context menu.

## Command line

```
npquickopen DIRECTORY [PATTERN] [-f FILTER] [-n LIMIT]
```

This indexes `DIRECTORY` (directories whose names start with a dot are
skipped), keeps the files that pass the filter and fuzzy-match the
pattern, and prints them best match first as `score<TAB>relative path`.
With no pattern every file that passes the filter is listed with score 0.

- `-f`, `--filter`: a file filter such as `*.cpp;*.h[^*.bak]`.
- `-n`, `--limit`: show at most this many results (0, the default, shows all).

The exit status is 2 when `DIRECTORY` is not a directory.

## Library

```python
from npquickopen.fuzzy import FuzzyMatcher
from npquickopen.filefilter import FileFilter
from npquickopen.quickopen import QuickOpen

matcher = FuzzyMatcher("qod")
matcher.score("QuickOpenDialog.cpp")   # higher is better, 0 means no match
matcher.match("QuickOpenDialog.cpp")   # FuzzyMatch(score, positions)

flt = FileFilter("*.cpp;*.h[^pch.*]")
flt.match("main.cpp")                  # True
flt.match("pch.h")                     # False

with QuickOpen(flt) as finder:
    finder.set_current_path("src")
    for result in finder.populate("dlg"):
        print(result.score, finder.relative_path(result))
        print(finder.highlight(result))  # [(text, matched), ...] runs of the name
```

### Filters

Filter strings are `;`-separated wildcard patterns (`*` and `?`,
case-insensitive). A section in `[^ ... ]` lists patterns to exclude,
which are checked before the allowed ones. An empty filter, or `*.*`,
accepts every non-empty name. `wildcmp` and `split_filter` in
`npquickopen.filefilter` are the matching and splitting functions on
their own.

### Modules

- `npquickopen.fuzzy`: `FuzzyMatcher` with `score()` and `match()`.
- `npquickopen.filefilter`: `FileFilter`, `wildcmp`, `split_filter`.
- `npquickopen.dirindex`: `DirectoryIndex`, a background directory walker
  (`init`, `build`, `cancel`, `file_index`, `is_indexing`) that reports
  from its worker thread to a `DirectoryIndexListener`.
- `npquickopen.quickopen`: `QuickOpen`, `QuickOpenResult`,
  `remove_whitespaces` and the `main` command. `populate` waits for a
  running index build and drops blanks and control characters from the
  pattern.
- `npquickopen.pathops`: helpers for backslash-separated paths:
  `full_paths_text`, `file_names_text`, `relative_paths_text`,
  `prompt_directory`, `new_instance_args`, `split_rename_target`,
  `script_first_line` (raises `ValueError` for a script that does not start
  with `/`) and `supports_scripts`.
- `npquickopen.menu`: `CommandId`, `MenuItem`, `build_main_menu` (the
  editor entries of the context menu for a file or a folder),
  `is_shell_command`, `script_index`, `resolve_script_directory` and
  `list_scripts` (the sorted `*.exec` files of a folder).
- `npquickopen.winversion`: `WinVer` and `classify_windows_version`.

## What it does not do

There is no interactive window: results are returned as data or printed
by the command. Nothing opens files in an editor, writes to the clipboard,
shows a menu on screen or runs scripts; the `pathops` and `menu` modules
only compute the texts, layouts and command numbers for those actions.

## Tests

```
pip install -e .[test]
pytest
```