"""
Path algebra and the VirtualPath entity.
"""

from .normalizer import normalize_string
from .profiles import POSIX, WINDOWS, PlatformProfile, get_profile, host_profile
from .relative import relative
from .resolver import is_absolute, normalize, posix_resolve, resolve
from .virtual_path import FileScheme, VirtualPath

__all__ = [
    "FileScheme",
    "POSIX",
    "PlatformProfile",
    "VirtualPath",
    "WINDOWS",
    "get_profile",
    "host_profile",
    "is_absolute",
    "normalize",
    "normalize_string",
    "posix_resolve",
    "relative",
    "resolve",
]
