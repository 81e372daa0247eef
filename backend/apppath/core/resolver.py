"""
Path resolution and normalization for POSIX and Windows profiles.

``resolve`` folds path fragments right to left into one absolute, normalized
path, the way a shell would ``cd`` through them. ``normalize`` canonicalizes a
single path without making it absolute.
"""

import os
from typing import Mapping, Optional

from .normalizer import normalize_string
from .profiles import POSIX, PlatformProfile, host_profile, parse_root


def current_directory(profile: PlatformProfile) -> str:
    """Return the process working directory as seen by ``profile``.

    A POSIX view of a Windows working directory drops the drive and uses
    forward slashes.
    """
    cwd = os.getcwd()
    if profile.has_devices or os.name != "nt":
        return cwd
    cwd = cwd.replace("\\", "/")
    index = cwd.find("/")
    return cwd[index:] if index != -1 else cwd


def _drive_directory(
    device: str,
    cwd: str,
    environ: Mapping[str, str],
    profile: PlatformProfile
) -> str:
    """Last known directory of ``device``, falling back to its root.

    Windows keeps a working directory per drive in ``=C:``-style environment
    entries.
    """
    path = environ.get("=" + device) or cwd
    if (
        not profile.same_device(path[:2], device)
        and path[2:3] == "\\"
    ):
        path = device + "\\"
    return path


def resolve(
    *paths: str,
    profile: Optional[PlatformProfile] = None,
    cwd: Optional[str] = None,
    environ: Optional[Mapping[str, str]] = None
) -> str:
    """Resolve a sequence of path fragments into an absolute path.

    Fragments are processed right to left; each one is prepended until an
    absolute path is formed. If none is absolute, the working directory is
    used. On Windows a fragment on a different device than the one already
    resolved is ignored, and a drive-relative path (``C:foo``) is completed
    with that drive's last known directory.

    Args:
        *paths: Path fragments, leftmost is the base.
        profile: Platform profile, defaults to the host profile.
        cwd: Working directory override, defaults to ``os.getcwd()``.
        environ: Environment used for per-drive directories (Windows only),
            defaults to ``os.environ``.

    Returns:
        The resolved path, or ``.`` if nothing could be resolved.

    Examples:
        >>> resolve("/a/b", "../../../x", profile=POSIX)
        '/x'
    """
    if profile is None:
        profile = host_profile()
    if cwd is None:
        cwd = current_directory(profile)
    if environ is None:
        environ = os.environ

    resolved_device = ""
    resolved_tail = ""
    resolved_absolute = False

    for i in range(len(paths) - 1, -2, -1):
        if i >= 0:
            path = paths[i]
        elif not resolved_device:
            path = cwd
        else:
            path = _drive_directory(resolved_device, cwd, environ, profile)
        if not path:
            continue

        root = parse_root(path, profile)

        if root.device:
            if resolved_device:
                if not profile.same_device(root.device, resolved_device):
                    # points to another device, not applicable
                    continue
            else:
                resolved_device = root.device

        if resolved_absolute:
            if resolved_device:
                break
        else:
            resolved_tail = path[root.end:] + profile.sep + resolved_tail
            resolved_absolute = root.is_absolute
            if resolved_absolute and (resolved_device or not profile.has_devices):
                break

    resolved_tail = normalize_string(
        resolved_tail, not resolved_absolute, profile.sep, profile.is_separator
    )

    if resolved_absolute:
        return resolved_device + profile.sep + resolved_tail
    return (resolved_device + resolved_tail) or "."


def posix_resolve(*paths: str, cwd: Optional[str] = None) -> str:
    """Resolve with POSIX rules regardless of the host."""
    return resolve(*paths, profile=POSIX, cwd=cwd)


def normalize(path: str, profile: Optional[PlatformProfile] = None) -> str:
    """Normalize ``path``, collapsing ``.``/``..`` and redundant separators.

    The root and device are kept, a trailing separator is preserved and a
    relative path never climbs into its root.

    Examples:
        >>> normalize("a/./b/../c", POSIX)
        'a/c'
        >>> normalize("/foo/bar//baz/asdf/quux/..", POSIX)
        '/foo/bar/baz/asdf'
    """
    if profile is None:
        profile = host_profile()

    length = len(path)
    if length == 0:
        return "."

    root = parse_root(path, profile)
    if root.is_unc and root.end == length:
        # a UNC root alone, nothing left to process
        return root.device + profile.sep

    if root.end < length:
        tail = normalize_string(
            path[root.end:], not root.is_absolute, profile.sep, profile.is_separator
        )
    else:
        tail = ""
    if not tail and not root.is_absolute:
        tail = "."
    if tail and profile.is_separator(path[-1]):
        tail += profile.sep

    if root.is_absolute:
        return root.device + profile.sep + tail
    return root.device + tail


def is_absolute(path: str, profile: Optional[PlatformProfile] = None) -> bool:
    """Check whether ``path`` is absolute under ``profile``."""
    if profile is None:
        profile = host_profile()
    return parse_root(path, profile).is_absolute
