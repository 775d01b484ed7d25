"""Colorized directory tree printer."""

from truffula.core.analysis.tree_renderer import TreePrinter, capture_tree, render_tree
from truffula.domain.colors import DEFAULT_COLOR_SEQUENCE, ColorSequenceError, ConsoleColor
from truffula.domain.tree_models import RenderConfig

__version__ = "0.1.0"

__all__ = [
    "ColorSequenceError",
    "ConsoleColor",
    "DEFAULT_COLOR_SEQUENCE",
    "RenderConfig",
    "TreePrinter",
    "capture_tree",
    "render_tree",
]
