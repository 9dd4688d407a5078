from __future__ import annotations

"""
FileSystem Infrastructure Layer.

Provides the user data directory resolution, path normalization, and a
local mount target that materializes mount descriptors on disk.
"""

import json
import logging
import os
from typing import Any, Dict, Optional, Tuple

from sitecrafter.domain.errors import MountError
from sitecrafter.domain.mount import MountTarget

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# GLOBAL CONSTANTS
# -----------------------------------------------------------------------------

APP_DIR_NAME = "SiteCrafter"
UNIX_APP_DIR_NAME = ".sitecrafter"

# -----------------------------------------------------------------------------
# PATH RESOLUTION API
# -----------------------------------------------------------------------------

def get_user_data_dir() -> str:
    """
    Resolve the OS-specific directory for persistent application data.

    - Windows: %LOCALAPPDATA%/SiteCrafter
    - Linux/Mac: ~/.sitecrafter

    Returns:
        str: Absolute path to the application data directory.
    """
    path: str = ""

    if os.name == "nt":
        base = os.environ.get("LOCALAPPDATA") or os.environ.get("APPDATA")
        if base:
            path = os.path.join(base, APP_DIR_NAME)

    if not path:
        path = os.path.join(os.path.expanduser("~"), UNIX_APP_DIR_NAME)

    try:
        os.makedirs(path, exist_ok=True)
    except OSError as e:
        logger.debug(f"Cannot create user data dir '{path}': {e}")

    return os.path.abspath(path)


def normalize_path(path: Optional[str], fallback: str) -> str:
    """
    Normalize a path string into an absolute filesystem path.

    Expands environment variables and '~'. Empty input uses the fallback.
    """
    p = (path or "").strip() or fallback
    p = os.path.expandvars(os.path.expanduser(p))
    return os.path.abspath(p)


def safe_mkdir(path: str) -> Tuple[bool, Optional[str]]:
    """
    Recursively create a directory.

    Returns:
        Tuple[bool, Optional[str]]: (Success flag, error message if any).
    """
    try:
        os.makedirs(path, exist_ok=True)
        return True, None
    except OSError as e:
        return False, str(e)

# -----------------------------------------------------------------------------
# MOUNT MATERIALIZATION
# -----------------------------------------------------------------------------

class DirectoryMountTarget(MountTarget):
    """
    Mount target writing a descriptor into a local directory.

    Existing files are overwritten; nothing is deleted. Folder names '' and
    '.' resolve to the enclosing directory; files with such names are
    rejected.
    """

    def __init__(self, root: str) -> None:
        self.root = os.path.abspath(root)
        self.files_written = 0

    def mount(self, descriptor: Dict[str, Any]) -> None:
        """
        Write every file of the descriptor under the root directory.

        Raises:
            MountError: On unsafe entry names, unknown entry shapes or I/O
                        failures.
        """
        self.files_written = 0
        ok, err = safe_mkdir(self.root)
        if not ok:
            raise MountError(f"Cannot create mount root '{self.root}': {err}")
        try:
            self._write_level(self.root, descriptor)
        except OSError as e:
            raise MountError(f"Cannot materialize mount at '{self.root}': {e}") from e
        logger.info(f"Mounted {self.files_written} file(s) into {self.root}")

    def _write_level(self, base: str, level: Dict[str, Any]) -> None:
        for name, entry in level.items():
            safe_name = _safe_entry_name(name)
            target = os.path.join(base, safe_name)

            if isinstance(entry, dict) and "directory" in entry:
                os.makedirs(target, exist_ok=True)
                self._write_level(target, entry["directory"] or {})
            elif isinstance(entry, dict) and "file" in entry:
                if not safe_name:
                    raise MountError(f"Cannot write a file with an empty name under '{base}'.")
                contents = (entry["file"] or {}).get("contents", "")
                with open(target, "w", encoding="utf-8") as f:
                    f.write(contents)
                self.files_written += 1
            else:
                raise MountError(f"Unknown mount entry for '{name}'.")


def write_descriptor_json(path: str, descriptor: Dict[str, Any]) -> None:
    """Persist a mount descriptor as indented JSON."""
    parent = os.path.dirname(os.path.abspath(path))
    ok, err = safe_mkdir(parent)
    if not ok:
        raise OSError(f"Cannot create directory '{parent}': {err}")
    with open(path, "w", encoding="utf-8") as f:
        json.dump(descriptor, f, ensure_ascii=False, indent=2)
    logger.debug(f"Mount descriptor saved to {path}")


def _safe_entry_name(name: str) -> str:
    if name in ("", "."):
        return ""
    if name == ".." or "/" in name or "\\" in name or os.path.isabs(name):
        raise MountError(f"Unsafe entry name: {name!r}")
    return name
