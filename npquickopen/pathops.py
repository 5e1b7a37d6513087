"""Path texts and helpers for the file context menu commands."""

from __future__ import annotations

from collections.abc import Iterable

SEPARATOR = "\\"
MIN_SCRIPT_VERSION = 0x02F5
_UTF16_BOM = b"\xff\xfe"


def full_paths_text(paths: Iterable[str]) -> str:
    """Full paths, one per line."""
    return "\n".join(paths)


def _file_name(path: str) -> str | None:
    pos = path.rfind(SEPARATOR)
    if pos < 0:
        return None
    if path.endswith(SEPARATOR):
        previous = path.rfind(SEPARATOR, 0, pos) if pos > 0 else path.rfind(SEPARATOR)
        if previous >= 0:
            # The leading separator of a folder name is kept.
            return path[previous:-1]
        return path
    return path[pos + 1:]


def file_names_text(paths: Iterable[str]) -> str:
    """File or folder names, one per line; paths without a separator are skipped."""
    names = (_file_name(path) for path in paths)
    return "\n".join(name for name in names if name is not None)


def _parts(path: str) -> list[str]:
    return [part for part in path.replace("/", SEPARATOR).split(SEPARATOR) if part]


def _relative_path_to(base_directory: str, target: str) -> str:
    base = _parts(base_directory)
    parts = _parts(target)
    if not base or not parts or base[0].lower() != parts[0].lower():
        return target
    common = 0
    for left, right in zip(base, parts):
        if left.lower() != right.lower():
            break
        common += 1
    ups = len(base) - common
    prefix = "." + SEPARATOR if ups == 0 else (".." + SEPARATOR) * ups
    return prefix + SEPARATOR.join(parts[common:])


def relative_paths_text(paths: Iterable[str], base_directory: str) -> str | None:
    """Paths relative to ``base_directory``, one per line; None without a base."""
    if not base_directory:
        return None
    return "\n".join(_relative_path_to(base_directory, path) for path in paths)


def prompt_directory(path: str) -> str:
    """Directory in which a command window opens for ``path``."""
    if not path:
        raise ValueError("empty path")
    if path.endswith(SEPARATOR):
        return path
    pos = path.rfind(SEPARATOR)
    return path[:pos] if pos >= 0 else path


def new_instance_args(paths: Iterable[str]) -> str:
    """Command-line arguments that open ``paths`` in a new editor instance."""
    quoted = [f'"{path}"' for path in paths]
    if not quoted:
        return ""
    return "-multiInst " + " ".join(quoted)


def split_rename_target(path: str) -> tuple[str, str]:
    """Split ``path`` into its parent directory (with separator) and its name."""
    trimmed = path[:-1] if path.endswith(SEPARATOR) else path
    pos = trimmed.rfind(SEPARATOR)
    if pos < 0:
        raise ValueError(f"path has no directory part: {path!r}")
    return trimmed[: pos + 1], trimmed[pos + 1:]


def _first_token(text: str) -> str | None:
    for token in text.split("\n"):
        if token:
            return token
    return None


def script_first_line(data: bytes) -> str | None:
    """First line of a script file, which must start with ``/`` (UTF-16 or ANSI).

    Raises ValueError for any other file format.
    """
    if data.startswith(_UTF16_BOM):
        body = data[2:]
        text = body[: len(body) // 2 * 2].decode("utf-16-le", errors="replace")
    elif data[:2] == b"/\x00":
        text = data[: len(data) // 2 * 2].decode("utf-16-le", errors="replace")
    elif data[:1] == b"/":
        text = data.split(b"\x00", 1)[0].decode("utf-8", errors="replace")
    else:
        raise ValueError("Wrong file format")
    return _first_token(text)


def supports_scripts(version: int) -> bool:
    """Whether the script runner of ``version`` accepts external messages."""
    return version >= MIN_SCRIPT_VERSION