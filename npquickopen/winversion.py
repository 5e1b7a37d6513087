"""Classification of Windows version numbers into known releases."""

from __future__ import annotations

import enum

VER_PLATFORM_WIN32S = 0
VER_PLATFORM_WIN32_WINDOWS = 1
VER_PLATFORM_WIN32_NT = 2
VER_NT_WORKSTATION = 1
PROCESSOR_ARCHITECTURE_AMD64 = 9


class WinVer(enum.IntEnum):
    """Known Windows releases."""

    UNKNOWN = 0
    WIN32S = 1
    W95 = 2
    W98 = 3
    ME = 4
    NT = 5
    W2K = 6
    XP = 7
    S2003 = 8
    XPX64 = 9
    VISTA = 10


def classify_windows_version(
    platform_id: int,
    major: int,
    minor: int,
    product_type: int = VER_NT_WORKSTATION,
    processor_architecture: int = 0,
) -> WinVer:
    """Map platform id, version numbers, product type and CPU to a release."""
    if platform_id == VER_PLATFORM_WIN32_NT:
        if (major, minor) == (6, 0):
            return WinVer.VISTA
        if (major, minor) == (5, 2):
            if (
                product_type == VER_NT_WORKSTATION
                and processor_architecture == PROCESSOR_ARCHITECTURE_AMD64
            ):
                return WinVer.XPX64
            return WinVer.S2003
        if (major, minor) == (5, 1):
            return WinVer.XP
        if (major, minor) == (5, 0):
            return WinVer.W2K
        if major <= 4:
            return WinVer.NT
        return WinVer.UNKNOWN
    if platform_id == VER_PLATFORM_WIN32_WINDOWS:
        if major == 4:
            return {0: WinVer.W95, 10: WinVer.W98, 90: WinVer.ME}.get(
                minor, WinVer.UNKNOWN
            )
        return WinVer.UNKNOWN
    if platform_id == VER_PLATFORM_WIN32S:
        return WinVer.WIN32S
    return WinVer.UNKNOWN