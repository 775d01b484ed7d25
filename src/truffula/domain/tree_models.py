from __future__ import annotations

"""
Directory Tree Rendering Models.

Provides the immutable render configuration consumed by the tree printer.
"""

from dataclasses import dataclass

# -----------------------------------------------------------------------------
# STRUCTURAL COMPONENTS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class RenderConfig:
    """
    Options that determine how a directory tree is printed.

    Attributes:
        root_path: Directory whose tree is rendered.
        show_hidden: If False, hidden entries are not printed.
        use_color: If False, every line uses the first color of the sequence.
    """
    root_path: str
    show_hidden: bool = False
    use_color: bool = True
