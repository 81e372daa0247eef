"""
Relative path computation.

``relative(from_path, to_path)`` returns the shortest path that, resolved
against ``from_path``, yields ``to_path``.
"""

from typing import Optional

from .profiles import PlatformProfile, host_profile
from .resolver import resolve


def relative(
    from_path: str,
    to_path: str,
    profile: Optional[PlatformProfile] = None,
    cwd: Optional[str] = None
) -> str:
    """Compute the relative path from ``from_path`` to ``to_path``.

    Both arguments are resolved first, so relative inputs are taken against
    the working directory. On Windows the comparison is case-insensitive, but
    the output keeps the casing of ``to_path``. When the two paths share no
    root (different drives) the resolved ``to_path`` is returned as is.

    Examples:
        >>> relative("/a/b/c", "/a/d", POSIX)
        '../../d'
        >>> relative("C:\\\\orandea\\\\test\\\\aaa", "C:\\\\orandea\\\\impl\\\\bbb", WINDOWS)
        '..\\\\..\\\\impl\\\\bbb'
    """
    if profile is None:
        profile = host_profile()

    if from_path == to_path:
        return ""

    from_orig = resolve(from_path, profile=profile, cwd=cwd)
    to_orig = resolve(to_path, profile=profile, cwd=cwd)
    if from_orig == to_orig:
        return ""

    source = profile.fold_case(from_orig)
    target = profile.fold_case(to_orig)
    if source == target:
        return ""

    sep = profile.sep

    # Trim the leading separators of the root, and trailing ones left on
    # a bare root (UNC shares resolve to "\\server\share\")
    from_start = _skip_leading(source, sep)
    from_end = _trim_trailing(source, from_start, sep)
    from_len = from_end - from_start

    to_start = _skip_leading(target, sep)
    to_end = _trim_trailing(target, to_start, sep)
    to_len = to_end - to_start

    # Longest common path from the root
    length = min(from_len, to_len)
    last_common_sep = -1
    i = 0
    while i < length:
        from_code = source[from_start + i]
        if from_code != target[to_start + i]:
            break
        if from_code == sep:
            last_common_sep = i
        i += 1

    # The length of a drive root such as "c:"; POSIX roots are already trimmed
    device_root = 2 if profile.has_devices else 0

    if i != length:
        if last_common_sep == -1 and profile.has_devices:
            # Mismatch before any common separator, e.g. another drive
            return to_orig
    else:
        if to_len > length:
            if target[to_start + i] == sep:
                # from_path is an exact ancestor of to_path
                return to_orig[to_start + i + 1:]
            if i == device_root:
                # from_path is the root
                return to_orig[to_start + i:]
        if from_len > length:
            if source[from_start + i] == sep:
                # to_path is an exact ancestor of from_path
                last_common_sep = i
            elif i == device_root:
                # to_path is the root
                last_common_sep = device_root + 1 if profile.has_devices else 0
        if last_common_sep == -1 and profile.has_devices:
            last_common_sep = 0

    # One ".." for every segment of from_path after the common part
    parts = []
    for i in range(from_start + last_common_sep + 1, from_end + 1):
        if i == from_end or source[i] == sep:
            parts.append("..")

    # Remainder of to_path after the common separator; last_common_sep is -1
    # when the paths share nothing, which starts the remainder at to_start
    tail = to_orig[to_start + last_common_sep + 1:to_end]
    if tail:
        parts.append(tail)
    return sep.join(parts)


def _skip_leading(path: str, sep: str) -> int:
    start = 0
    while start < len(path) and path[start] == sep:
        start += 1
    return start


def _trim_trailing(path: str, start: int, sep: str) -> int:
    end = len(path)
    while end - 1 > start and path[end - 1] == sep:
        end -= 1
    return end
