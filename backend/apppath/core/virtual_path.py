"""
Scheme-qualified virtual paths.

A ``VirtualPath`` is either a plain filesystem path (``file:``) or a path
inside one of two application roots:

- ``app:``: the application installation directory
- ``app-storage:``: the application private storage directory

Virtual roots always use POSIX rules, whatever the host, and are turned into
native paths only at the I/O boundary (see ``apppath.io.file_ops``).

Usage:
    >>> f = VirtualPath("app://res/x.json")
    >>> f.url
    'app://res/x.json'
    >>> f.name, f.extension
    ('x.json', '.json')
"""

import re
from enum import Enum
from typing import Optional, Tuple

from .profiles import POSIX, PlatformProfile, host_profile, parse_root
from .relative import relative
from .resolver import posix_resolve, resolve
from ..utils import path_utils


class FileScheme(Enum):
    """Logical root a path is expressed against."""
    FILE = "file"
    APP = "app"
    APP_STORAGE = "app-storage"

    @property
    def prefix(self) -> str:
        return f"{self.value}:"

    @property
    def is_virtual(self) -> bool:
        return self is not FileScheme.FILE


# Longest prefix first so "app-storage:" is not read as "app:"
_SCHEMES_BY_PREFIX = sorted(FileScheme, key=lambda s: len(s.prefix), reverse=True)

_DRIVE_AFTER_SLASH = re.compile(r"^[\\/][A-Za-z]:")


def split_scheme(url_or_path: str) -> Tuple[FileScheme, str]:
    """Split a URL into its scheme and the remaining path.

    Strings without a recognized prefix are bare ``file:`` paths.
    """
    for scheme in _SCHEMES_BY_PREFIX:
        if url_or_path.startswith(scheme.prefix):
            return scheme, url_or_path[len(scheme.prefix):]
    return FileScheme.FILE, url_or_path


class VirtualPath:
    """Immutable, normalized path tagged with a scheme.

    Construction normalizes immediately; every navigation method returns a
    new instance. Two instances are equal when scheme and path are equal.

    Args:
        url_or_path: ``file:``, ``app:`` or ``app-storage:`` URL, or a bare
            path (treated as ``file:``). Bare relative paths are resolved
            against the working directory.
        profile: Platform profile for ``file:`` paths, defaults to the host.
    """

    __slots__ = ("_scheme", "_path", "_profile")

    def __init__(self, url_or_path: str = "", profile: Optional[PlatformProfile] = None):
        if profile is None:
            profile = host_profile()
        scheme, path = split_scheme(url_or_path)

        if profile.has_devices:
            if path.startswith("//"):
                path = path[2:]
            elif path.startswith("/"):
                path = path[1:]
            if scheme is FileScheme.FILE and _DRIVE_AFTER_SLASH.match(path):
                # file:///C:/x
                path = path[1:]
        elif path.startswith("//"):
            path = path[1:]

        if scheme is FileScheme.FILE:
            path = resolve(path, "", profile=profile)
        else:
            if not path.startswith("/"):
                path = "/" + path
            path = posix_resolve(path, "")

        self._scheme = scheme
        self._profile = profile
        # set last, see __setattr__
        self._path = path

    @classmethod
    def _from_parts(cls, scheme: FileScheme, path: str, profile: PlatformProfile) -> "VirtualPath":
        obj = cls.__new__(cls)
        obj._scheme = scheme
        obj._profile = profile
        obj._path = path
        return obj

    # ------------------------------------------------------------------
    # Well-known locations
    # ------------------------------------------------------------------

    @classmethod
    def application_directory(cls) -> "VirtualPath":
        """The application installation directory, ``app://``."""
        return cls("app://")

    @classmethod
    def application_storage_directory(cls) -> "VirtualPath":
        """The application private directory, ``app-storage://``."""
        return cls("app-storage://")

    @classmethod
    def working_directory(cls) -> Optional["VirtualPath"]:
        return cls._from_native(path_utils.working_dir())

    @classmethod
    def user_directory(cls) -> Optional["VirtualPath"]:
        return cls._from_native(path_utils.home_dir())

    @classmethod
    def documents_directory(cls) -> Optional["VirtualPath"]:
        return cls._from_native(path_utils.document_dir())

    @classmethod
    def downloads_directory(cls) -> Optional["VirtualPath"]:
        return cls._from_native(path_utils.download_dir())

    @classmethod
    def pictures_directory(cls) -> Optional["VirtualPath"]:
        return cls._from_native(path_utils.picture_dir())

    @classmethod
    def videos_directory(cls) -> Optional["VirtualPath"]:
        return cls._from_native(path_utils.video_dir())

    @classmethod
    def executable_directory(cls) -> Optional["VirtualPath"]:
        return cls._from_native(path_utils.executable_dir())

    @classmethod
    def _from_native(cls, native: Optional[str]) -> Optional["VirtualPath"]:
        if native is None:
            return None
        return cls._from_parts(
            FileScheme.FILE, resolve(native, ""), host_profile()
        )

    @staticmethod
    def separator() -> str:
        """The host path component separator."""
        return host_profile().sep

    # ------------------------------------------------------------------
    # Attributes
    # ------------------------------------------------------------------

    @property
    def scheme(self) -> FileScheme:
        return self._scheme

    @property
    def path(self) -> str:
        return self._path

    @property
    def profile(self) -> PlatformProfile:
        """Profile the path is expressed in (POSIX for virtual schemes)."""
        return POSIX if self._scheme.is_virtual else self._profile

    @property
    def native_path(self) -> str:
        """The path in its own representation.

        For ``app:`` and ``app-storage:`` this is the virtual path; use
        ``apppath.io.file_ops.to_native_path`` for the on-disk location.
        """
        return self._path

    @property
    def url(self) -> str:
        path = self._path.replace("\\", "/")
        if path.startswith("//"):
            slashes = ""
        elif path.startswith("/"):
            slashes = "/"
        else:
            slashes = "//"
        return self._scheme.prefix + slashes + path

    @property
    def name(self) -> str:
        """The last portion of this path."""
        return self._path[self._last_separator() + 1:]

    def name_without_suffix(self, suffix: str) -> str:
        """The last portion of this path, excluding ``suffix``."""
        name = self.name
        if suffix and name.endswith(suffix):
            return name[:-len(suffix)]
        return name

    @property
    def extension(self) -> str:
        """The extension including its dot, from the first dot of the name.

        ``archive.tar.gz`` has the extension ``.tar.gz``.
        """
        name = self.name
        index = name.find(".")
        return name[index:] if index != -1 else ""

    @property
    def parent(self) -> Optional["VirtualPath"]:
        """The containing directory, ``None`` for a root."""
        result = self.resolve_path("..")
        path = result._path
        if path in ("", ".", "/", "\\"):
            return None
        profile = result.profile
        root = parse_root(path, profile)
        if root.is_absolute and all(profile.is_separator(c) for c in path[root.end:]):
            return None
        return result

    def _last_separator(self) -> int:
        is_sep = self.profile.is_separator
        for index in range(len(self._path) - 1, -1, -1):
            if is_sep(self._path[index]):
                return index
        return -1

    # ------------------------------------------------------------------
    # Navigation
    # ------------------------------------------------------------------

    def resolve_path(self, fragment: str) -> "VirtualPath":
        """Resolve ``fragment`` against this path. Does not touch the disk."""
        if self._scheme.is_virtual:
            path = posix_resolve(self._path, fragment)
        else:
            path = resolve(self._path, fragment, profile=self._profile)
        return self._from_parts(self._scheme, path, self._profile)

    def relative_path(self, other: "VirtualPath") -> str:
        """Relative path from this path to ``other``.

        Meaningful only when both are in the same scheme; for mixed schemes
        the virtual path is compared as if it were a native one.
        """
        return relative(self._path, other._path, profile=self.profile)

    # ------------------------------------------------------------------
    # Value semantics
    # ------------------------------------------------------------------

    def __eq__(self, other):
        if not isinstance(other, VirtualPath):
            return NotImplemented
        return self._scheme is other._scheme and self._path == other._path

    def __hash__(self):
        return hash((self._scheme, self._path))

    def __setattr__(self, name, value):
        if hasattr(self, "_path"):
            raise AttributeError(f"{type(self).__name__} is immutable")
        object.__setattr__(self, name, value)

    def __str__(self):
        return self.url

    def __repr__(self):
        return f"VirtualPath({self.url!r})"
