from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

This module sets up the testing environment, including:
1. Path manipulation to ensure the 'src' directory is importable.
2. Shared directory fixtures used by the renderer and CLI tests.
"""

import os
import sys
from pathlib import Path

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture
def my_folder(tmp_path: Path) -> Path:
    """
    Create the reference folder used across the renderer tests.

    Structure:
    myFolder/
      Apple.txt
      banana.txt
      Documents/
        images/
          Cat.png
          cat.png
          Dog.png
        notes.txt
        README.md
      zebra.txt
    """
    root = tmp_path / "myFolder"
    root.mkdir()
    for name in ("Apple.txt", "banana.txt", "zebra.txt"):
        (root / name).touch()

    documents = root / "Documents"
    documents.mkdir()
    (documents / "README.md").touch()
    (documents / "notes.txt").touch()

    images = documents / "images"
    images.mkdir()
    (images / "Cat.png").touch()
    if (images / "cat.png").exists():
        pytest.skip("Filesystem is case-insensitive.")
    (images / "cat.png").touch()
    (images / "Dog.png").touch()

    return root
