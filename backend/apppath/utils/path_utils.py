"""
Path utilities: host directories and directory creation.
"""

import os
import sys
from pathlib import Path
from typing import Optional

import platformdirs


def ensure_dir(path: str) -> Path:
    """Ensure a directory exists, creating if necessary.

    Args:
        path: Directory path.

    Returns:
        Path object for the directory.
    """
    p = Path(path)
    p.mkdir(parents=True, exist_ok=True)
    return p


def working_dir() -> Optional[str]:
    """The process working directory, ``None`` if it was removed."""
    try:
        return os.getcwd()
    except OSError:
        return None


def home_dir() -> Optional[str]:
    """The user's home directory, ``None`` if it cannot be determined."""
    try:
        return str(Path.home())
    except RuntimeError:
        return None


# Media folders come from platformdirs: xdg-user-dirs on Linux, Known
# Folders on Windows, ~/<Folder> on macOS.

def document_dir() -> str:
    return platformdirs.user_documents_dir()


def download_dir() -> str:
    return platformdirs.user_downloads_dir()


def picture_dir() -> str:
    return platformdirs.user_pictures_dir()


def video_dir() -> str:
    return platformdirs.user_videos_dir()


def executable_dir() -> Optional[str]:
    """Per-user executables directory (``$XDG_BIN_HOME`` or ``~/.local/bin``).

    Only defined on Linux and other XDG hosts.
    """
    if os.name == "nt" or sys.platform == "darwin":
        return None
    configured = os.environ.get("XDG_BIN_HOME")
    if configured:
        return configured
    home = home_dir()
    if home is None:
        return None
    return str(Path(home) / ".local" / "bin")
