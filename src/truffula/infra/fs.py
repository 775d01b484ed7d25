from __future__ import annotations

"""
FileSystem Infrastructure Layer.

Provides the filesystem queries consumed by the tree printer: existence,
directory and hidden-status checks, directory listing and base names.
Acts as an abstraction over the 'os' and 'stat' modules to ensure uniform
behavior across Windows and Unix-like systems.
"""

import logging
import os
import stat
from typing import List, Optional

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# GLOBAL CONSTANTS
# -----------------------------------------------------------------------------

HIDDEN_PREFIX = "."

# Windows attribute bit and macOS chflags bit (absent on other platforms)
_WIN_HIDDEN_ATTR = getattr(stat, "FILE_ATTRIBUTE_HIDDEN", 0x2)
_BSD_HIDDEN_FLAG = getattr(stat, "UF_HIDDEN", 0x8000)

# -----------------------------------------------------------------------------
# FILESYSTEM QUERY API
# -----------------------------------------------------------------------------

class FileSystem:
    """
    Point-in-time queries over the live filesystem.

    Nothing is cached: every call re-reads the filesystem state.
    """

    def exists(self, path: str) -> bool:
        return os.path.exists(path)

    def is_directory(self, path: str) -> bool:
        return os.path.isdir(path)

    def is_hidden(self, path: str) -> bool:
        """
        Determine whether an entry is hidden by platform convention.

        An entry is hidden when its name starts with a dot, when the Windows
        hidden attribute is set, or when the macOS hidden flag is set.

        Args:
            path: Entry to inspect.

        Returns:
            bool: True if the entry is hidden.
        """
        if self.base_name(path).startswith(HIDDEN_PREFIX):
            return True

        try:
            st = os.lstat(path)
        except OSError:
            return False

        attrs = getattr(st, "st_file_attributes", 0)
        if attrs & _WIN_HIDDEN_ATTR:
            return True

        flags = getattr(st, "st_flags", 0)
        return bool(flags & _BSD_HIDDEN_FLAG)

    def list_entries(self, path: str) -> Optional[List[str]]:
        """
        List the full paths of a directory's children.

        Args:
            path: Directory to list.

        Returns:
            Optional[List[str]]: Child paths (unordered), or None if the
            directory cannot be read.
        """
        try:
            with os.scandir(path) as it:
                return [entry.path for entry in it]
        except OSError as e:
            logger.debug(f"Unable to list directory '{path}': {e}")
            return None

    def base_name(self, path: str) -> str:
        """Return the last path component, ignoring trailing separators.

        A path made only of separators (the filesystem root) has an empty name.
        """
        trimmed = path.rstrip("/\\") if os.name == "nt" else path.rstrip("/")
        return os.path.basename(trimmed)


DEFAULT_FS = FileSystem()
