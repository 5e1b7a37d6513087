"""Layout and command routing of the file context menu."""

from __future__ import annotations

import enum
import os
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from pathlib import Path

from npquickopen.pathops import supports_scripts

CTX_MIN = 1
CTX_MAX = 10000
SCRIPT_EXTENSION = ".exec"
SEPARATOR_POSITION = 3


class CommandId(enum.IntEnum):
    """Command identifiers of the context menu."""

    DELETE = 18
    RENAME = 19
    CUT = 25
    COPY = 26
    PASTE = 27
    NEW_FILE = CTX_MAX
    NEW_FOLDER = CTX_MAX + 1
    FIND_IN_FILES = CTX_MAX + 2
    OPEN = CTX_MAX + 3
    OPEN_DIFF_VIEW = CTX_MAX + 4
    OPEN_NEW_INST = CTX_MAX + 5
    OPEN_CMD = CTX_MAX + 6
    ADD_TO_FAVES = CTX_MAX + 7
    RELATIVE_PATH = CTX_MAX + 8
    FULL_PATH = CTX_MAX + 9
    FULL_FILES = CTX_MAX + 10
    GOTO_SCRIPT_PATH = CTX_MAX + 11
    START_SCRIPT = CTX_MAX + 12


@dataclass(frozen=True)
class MenuItem:
    """A menu entry: a command, a separator or a submenu."""

    label: str = ""
    command: int = 0
    separator: bool = False
    enabled: bool = True
    submenu: tuple["MenuItem", ...] = field(default_factory=tuple)

    @classmethod
    def make_separator(cls) -> "MenuItem":
        return cls(separator=True)


def _script_submenu(scripts: Sequence[str]) -> MenuItem:
    items = [
        MenuItem(name, CommandId.START_SCRIPT + index)
        for index, name in enumerate(scripts)
    ]
    if items:
        items.append(MenuItem.make_separator())
    items.append(MenuItem("Go to script folder", CommandId.GOTO_SCRIPT_PATH))
    return MenuItem("NppExec Script(s)", submenu=tuple(items))


def build_main_menu(
    is_folder: bool,
    exec_version: int,
    scripts: Iterable[str],
    has_current_directory: bool,
) -> list[MenuItem]:
    """Build the editor part of the context menu for a file or a folder."""
    if is_folder:
        menu = [
            MenuItem("New File...", CommandId.NEW_FILE),
            MenuItem("New Folder...", CommandId.NEW_FOLDER),
            MenuItem("Find in Files...", CommandId.FIND_IN_FILES),
        ]
    else:
        menu = [
            MenuItem("Open", CommandId.OPEN),
            MenuItem("Open in Other View", CommandId.OPEN_DIFF_VIEW),
            MenuItem("Open in New Instance", CommandId.OPEN_NEW_INST),
        ]

    if supports_scripts(exec_version):
        menu.append(_script_submenu(list(scripts)))
    menu.append(MenuItem("Open Command Window Here", CommandId.OPEN_CMD))
    menu.insert(SEPARATOR_POSITION, MenuItem.make_separator())

    menu.append(MenuItem("Add to 'Favorites'...", CommandId.ADD_TO_FAVES))
    if has_current_directory:
        menu.append(
            MenuItem("Relative File Path(s) to Clipboard", CommandId.RELATIVE_PATH)
        )
    menu.append(MenuItem("Full File Path(s) to Clipboard", CommandId.FULL_PATH))
    menu.append(MenuItem("File Name(s) to Clipboard", CommandId.FULL_FILES))
    return menu


def is_shell_command(command_id: int) -> bool:
    """Whether ``command_id`` is handled by the shell rather than the editor."""
    return CTX_MIN <= command_id < CTX_MAX and command_id != CommandId.RENAME


def script_index(command_id: int, script_count: int) -> int | None:
    """Index of the script started by ``command_id``, or None."""
    index = command_id - CommandId.START_SCRIPT
    if 0 <= index < script_count:
        return index
    return None


def resolve_script_directory(
    script_path: str, module_directory: str | os.PathLike[str]
) -> str:
    """Script folder; a path starting with ``.`` is relative to the module directory."""
    if script_path.startswith("."):
        return os.path.normpath(os.path.join(os.fspath(module_directory), script_path))
    return script_path


def list_scripts(directory: str | os.PathLike[str]) -> list[str]:
    """Names of the script files in ``directory``, sorted; empty if it is unreadable."""
    try:
        entries = list(Path(directory).iterdir())
    except OSError:
        return []
    return sorted(
        entry.name
        for entry in entries
        if entry.name.lower().endswith(SCRIPT_EXTENSION)
    )