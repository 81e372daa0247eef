"""
Filesystem operations on virtual paths.

Every function takes the ``DirectoriesConfig`` used to map ``app:`` and
``app-storage:`` paths onto disk. Errors raised by the operating system
(``FileNotFoundError``, ``PermissionError``, ``FileExistsError``, other
``OSError``) propagate unchanged.
"""

import os
import shutil
from datetime import datetime
from typing import List, Union

from ..config import DirectoriesConfig
from ..core.virtual_path import FileScheme, VirtualPath
from ..utils.logging_utils import get_logger


logger = get_logger("io")


def to_native_path(file: VirtualPath, directories: DirectoriesConfig) -> str:
    """Path of ``file`` in the host operating system representation.

    ``file:`` paths are returned as is. ``app:`` and ``app-storage:`` paths
    are resolved, without their leading separator, against the installation
    or storage directory.
    """
    if file.scheme is FileScheme.APP:
        base = directories.installation_dir
    elif file.scheme is FileScheme.APP_STORAGE:
        base = directories.storage_dir
    else:
        return file.native_path

    relative_part = file.native_path
    if relative_part[:1] in ("/", "\\"):
        relative_part = relative_part[1:]
    return VirtualPath(base).resolve_path(relative_part).native_path


# ============================================================================
# Queries
# ============================================================================

def exists(file: VirtualPath, directories: DirectoriesConfig) -> bool:
    """Determine whether the referenced path exists."""
    return os.path.exists(to_native_path(file, directories))


def is_directory(file: VirtualPath, directories: DirectoriesConfig) -> bool:
    return os.path.isdir(to_native_path(file, directories))


def is_file(file: VirtualPath, directories: DirectoriesConfig) -> bool:
    return os.path.isfile(to_native_path(file, directories))


def is_symbolic_link(file: VirtualPath, directories: DirectoriesConfig) -> bool:
    return os.path.islink(to_native_path(file, directories))


def canonicalize(file: VirtualPath, directories: DirectoriesConfig) -> VirtualPath:
    """Canonical ``file:`` path with symbolic links resolved.

    Returns ``file`` unchanged if the path cannot be canonicalized, e.g.
    because it does not exist.
    """
    native = to_native_path(file, directories)
    try:
        real = os.path.realpath(native, strict=True)
    except (OSError, RuntimeError) as e:
        logger.debug("Cannot canonicalize %s: %s", native, e)
        return file
    return VirtualPath(real)


# ============================================================================
# Contents
# ============================================================================

def read_bytes(file: VirtualPath, directories: DirectoriesConfig) -> bytes:
    native = to_native_path(file, directories)
    logger.debug("Reading bytes from %s", native)
    with open(native, 'rb') as f:
        return f.read()


def read_utf8(file: VirtualPath, directories: DirectoriesConfig) -> str:
    native = to_native_path(file, directories)
    logger.debug("Reading text from %s", native)
    with open(native, 'r', encoding='utf-8') as f:
        return f.read()


def write(
    file: VirtualPath,
    data: Union[bytes, str],
    directories: DirectoriesConfig
) -> None:
    """Write ``data`` to the file, replacing its contents.

    Strings are encoded as UTF-8.
    """
    native = to_native_path(file, directories)
    if isinstance(data, str):
        data = data.encode('utf-8')
    logger.debug("Writing %d bytes to %s", len(data), native)
    with open(native, 'wb') as f:
        f.write(data)


# ============================================================================
# Tree operations
# ============================================================================

def create_directory(file: VirtualPath, directories: DirectoriesConfig) -> None:
    """Create the directory and any missing parents.

    Does nothing if the directory already exists.
    """
    native = to_native_path(file, directories)
    logger.debug("Creating directory %s", native)
    os.makedirs(native, exist_ok=True)


def copy_to(
    file: VirtualPath,
    new_location: VirtualPath,
    directories: DirectoriesConfig
) -> None:
    """Copy the file to ``new_location``, overwriting it."""
    source = to_native_path(file, directories)
    target = to_native_path(new_location, directories)
    logger.debug("Copying %s to %s", source, target)
    shutil.copyfile(source, target)


def rename(
    file: VirtualPath,
    to: VirtualPath,
    directories: DirectoriesConfig
) -> None:
    """Rename a file or directory, replacing ``to`` if it exists."""
    source = to_native_path(file, directories)
    target = to_native_path(to, directories)
    logger.debug("Renaming %s to %s", source, target)
    os.replace(source, target)


def delete_file(file: VirtualPath, directories: DirectoriesConfig) -> None:
    native = to_native_path(file, directories)
    logger.debug("Deleting file %s", native)
    os.remove(native)


def delete_empty_directory(file: VirtualPath, directories: DirectoriesConfig) -> None:
    native = to_native_path(file, directories)
    logger.debug("Deleting empty directory %s", native)
    os.rmdir(native)


def delete_all_directory(file: VirtualPath, directories: DirectoriesConfig) -> None:
    """Delete a directory after deleting all its contents."""
    native = to_native_path(file, directories)
    logger.debug("Deleting directory tree %s", native)
    shutil.rmtree(native)


def directory_listing(
    file: VirtualPath,
    directories: DirectoriesConfig
) -> List[VirtualPath]:
    """Entries of the directory as ``file:`` paths, sorted by name."""
    native = to_native_path(file, directories)
    with os.scandir(native) as entries:
        paths = sorted(entry.path for entry in entries)
    return [VirtualPath(path) for path in paths]


# ============================================================================
# Metadata
# ============================================================================

def size(file: VirtualPath, directories: DirectoriesConfig) -> int:
    """Size of the file in bytes."""
    return os.stat(to_native_path(file, directories)).st_size


def modification_date(file: VirtualPath, directories: DirectoriesConfig) -> datetime:
    return datetime.fromtimestamp(os.stat(to_native_path(file, directories)).st_mtime)


def creation_date(file: VirtualPath, directories: DirectoriesConfig) -> datetime:
    """Creation date.

    Uses the birth time where the platform records one, the inode change
    time otherwise.
    """
    st = os.stat(to_native_path(file, directories))
    created = getattr(st, "st_birthtime", None)
    if created is None:
        created = st.st_ctime
    return datetime.fromtimestamp(created)
