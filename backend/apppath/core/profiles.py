"""
Platform profiles for path manipulation.

A profile describes the separator and root rules of one path flavour:

- POSIX: ``/`` is the only separator, a path is absolute when it starts
  with ``/``.
- Windows: ``/`` and ``\\`` are both separators, roots may carry a device
  (a drive letter such as ``C:`` or a UNC share such as ``\\\\server\\share``)
  and device names compare case-insensitively.

Every algorithm in ``apppath.core`` takes a profile argument, so both flavours
can be exercised on any host. ``host_profile()`` picks the one matching the
running interpreter.
"""

import os
from dataclasses import dataclass
from typing import Callable, Optional


def is_posix_separator(ch: str) -> bool:
    return ch == "/"


def is_windows_separator(ch: str) -> bool:
    return ch == "/" or ch == "\\"


def is_drive_letter(ch: str) -> bool:
    return ("A" <= ch <= "Z") or ("a" <= ch <= "z")


@dataclass(frozen=True)
class PlatformProfile:
    """Separator and root rules for one path flavour."""
    name: str
    sep: str
    is_separator: Callable[[str], bool]
    has_devices: bool = False
    case_insensitive: bool = False

    def fold_case(self, text: str) -> str:
        """Lower-case ``text`` for comparison without changing its length."""
        if not self.case_insensitive:
            return text
        # str.lower() can expand some characters; keep indices aligned
        return "".join(
            lowered if len(lowered) == 1 else ch
            for ch, lowered in ((c, c.lower()) for c in text)
        )

    def same_device(self, left: str, right: str) -> bool:
        return self.fold_case(left) == self.fold_case(right)


POSIX = PlatformProfile(
    name="posix",
    sep="/",
    is_separator=is_posix_separator,
)

WINDOWS = PlatformProfile(
    name="windows",
    sep="\\",
    is_separator=is_windows_separator,
    has_devices=True,
    case_insensitive=True,
)

PROFILES = {
    POSIX.name: POSIX,
    WINDOWS.name: WINDOWS,
}


def host_profile() -> PlatformProfile:
    """Return the profile of the running host.

    - Windows: WINDOWS
    - Others (Linux/macOS/BSD): POSIX
    """
    if os.name == "nt":
        return WINDOWS
    return POSIX


def get_profile(name: Optional[str] = None) -> PlatformProfile:
    """Look up a profile by name, ``None`` meaning the host profile.

    Raises:
        ValueError: If ``name`` is not a known profile.
    """
    if name is None:
        return host_profile()
    try:
        return PROFILES[name.lower()]
    except KeyError:
        raise ValueError(
            f"Unknown platform profile: {name!r} "
            f"(expected one of {', '.join(sorted(PROFILES))})"
        )


@dataclass(frozen=True)
class Root:
    """Root portion of a path.

    ``end`` is the index of the first character after the root, ``device``
    is the drive (``C:``) or UNC share (``\\\\server\\share``) if any.
    """
    device: str = ""
    end: int = 0
    is_absolute: bool = False

    @property
    def is_unc(self) -> bool:
        return self.device.startswith("\\\\")


def parse_root(path: str, profile: PlatformProfile) -> Root:
    """Split off the root of ``path`` according to ``profile``."""
    length = len(path)
    if length == 0:
        return Root()

    is_sep = profile.is_separator
    first = path[0]

    if not profile.has_devices:
        if is_sep(first):
            return Root(end=1, is_absolute=True)
        return Root()

    if length == 1:
        if is_sep(first):
            return Root(end=1, is_absolute=True)
        return Root()

    if is_sep(first):
        # Absolute of some kind, possibly a UNC root
        if not is_sep(path[1]):
            return Root(end=1, is_absolute=True)

        j = 2
        last = j
        # server: one or more non-separators
        while j < length and not is_sep(path[j]):
            j += 1
        if j < length and j != last:
            server = path[last:j]
            last = j
            # one or more separators
            while j < length and is_sep(path[j]):
                j += 1
            if j < length and j != last:
                last = j
                # share: one or more non-separators
                while j < length and not is_sep(path[j]):
                    j += 1
                return Root(
                    device=f"\\\\{server}\\{path[last:j]}",
                    end=j,
                    is_absolute=True,
                )
        return Root(is_absolute=True)

    if is_drive_letter(first) and path[1] == ":":
        if length > 2 and is_sep(path[2]):
            return Root(device=path[:2], end=3, is_absolute=True)
        return Root(device=path[:2], end=2)

    return Root()
