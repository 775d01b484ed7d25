from __future__ import annotations

"""
Tree Renderer.

Walks a live directory depth-first and prints one indented, colored line per
visible entry. Directories are suffixed with '/', children are visited in
sorted order, and the color cycles with nesting depth.
"""

import io
import logging
from typing import Iterable, Optional, TextIO

from truffula.core.analysis.color_printer import ColorPrinter
from truffula.core.analysis.sorter import sort_entries
from truffula.domain.colors import (
    DEFAULT_COLOR_SEQUENCE,
    ConsoleColor,
    color_for_depth,
    ensure_color_sequence,
)
from truffula.domain.tree_models import RenderConfig
from truffula.infra.fs import DEFAULT_FS, FileSystem

logger = logging.getLogger(__name__)

INDENT_UNIT = "   "
DIRECTORY_SUFFIX = "/"
INVALID_ROOT_MESSAGE = "invalid directory"

# -----------------------------------------------------------------------------
# TREE PRINTER
# -----------------------------------------------------------------------------

class TreePrinter:
    """
    Prints the directory tree described by a RenderConfig.

    Example output for a folder with a nested 'Documents' directory::

        myFolder/
           Apple.txt
           Documents/
              notes.txt
           zebra.txt
    """

    def __init__(
            self,
            config: RenderConfig,
            out: Optional[TextIO] = None,
            color_sequence: Optional[Iterable[ConsoleColor]] = None,
            fs: Optional[FileSystem] = None,
    ):
        """
        Args:
            config: Root path and visibility/color switches.
            out: Output sink; defaults to standard output.
            color_sequence: Colors cycled by depth; defaults to white, purple, yellow.
            fs: Filesystem query backend.

        Raises:
            ColorSequenceError: If the color sequence is empty.
        """
        self.config = config
        self.colors = ensure_color_sequence(
            DEFAULT_COLOR_SEQUENCE if color_sequence is None else color_sequence
        )
        self.fs = fs or DEFAULT_FS
        self.printer = ColorPrinter(out)

    def print_tree(self) -> None:
        """Render the whole tree, or 'invalid directory' for a bad root."""
        root = self.config.root_path

        if not self.fs.exists(root) or not self.fs.is_directory(root):
            logger.warning(f"Cannot render tree, not a directory: {root}")
            self.printer.println(INVALID_ROOT_MESSAGE)
            return

        logger.debug(
            f"Rendering tree for {root} "
            f"(show_hidden={self.config.show_hidden}, use_color={self.config.use_color})"
        )
        self._print_node(root, 0)

    def _print_node(self, path: str, depth: int) -> None:
        """Print one entry and, for directories, its sorted subtree."""
        line = INDENT_UNIT * depth + self.fs.base_name(path)
        color = color_for_depth(self.colors, depth, self.config.use_color)
        is_dir = self.fs.is_directory(path)

        # Hidden entries lose their own line only; their subtree is still walked
        if self.config.show_hidden or not self.fs.is_hidden(path):
            self.printer.println(line + DIRECTORY_SUFFIX if is_dir else line, color)

        if not is_dir:
            return

        children = self.fs.list_entries(path)
        if children is None:
            return

        for child in sort_entries(children):
            self._print_node(child, depth + 1)

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def render_tree(
        root_path: str,
        show_hidden: bool = False,
        use_color: bool = True,
        color_sequence: Optional[Iterable[ConsoleColor]] = None,
        out: Optional[TextIO] = None,
) -> None:
    """
    Print the directory tree rooted at ``root_path``.

    Args:
        root_path: Directory to render.
        show_hidden: Include hidden files and folders.
        use_color: Cycle colors by depth instead of using the first color only.
        color_sequence: Custom colors; defaults to white, purple, yellow.
        out: Output sink; defaults to standard output.
    """
    config = RenderConfig(root_path=root_path, show_hidden=show_hidden, use_color=use_color)
    TreePrinter(config, out=out, color_sequence=color_sequence).print_tree()


def capture_tree(
        root_path: str,
        show_hidden: bool = False,
        use_color: bool = True,
        color_sequence: Optional[Iterable[ConsoleColor]] = None,
) -> str:
    """Render the tree into memory and return the produced text."""
    buffer = io.StringIO()
    render_tree(
        root_path,
        show_hidden=show_hidden,
        use_color=use_color,
        color_sequence=color_sequence,
        out=buffer,
    )
    return buffer.getvalue()
