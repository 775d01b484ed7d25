from __future__ import annotations

"""
Console Color Domain Model.

Defines the ANSI color enumeration used by the tree printer, the default
depth color cycle, and the stateless depth-to-color mapping.
"""

from enum import Enum
from typing import Iterable, Sequence, Tuple


class ColorSequenceError(ValueError):
    """Raised when a color sequence is empty or names an unknown color."""


# -----------------------------------------------------------------------------
# COLOR ENUMERATION
# -----------------------------------------------------------------------------

class ConsoleColor(str, Enum):
    """
    ANSI escape prefixes for terminal foreground colors.

    The string form of each member is its raw escape sequence, so members can
    be concatenated directly with text. RESET restores default rendering.
    """
    RESET = "\033[0m"
    BLACK = "\033[0;30m"
    RED = "\033[0;31m"
    GREEN = "\033[0;32m"
    YELLOW = "\033[0;33m"
    BLUE = "\033[0;34m"
    PURPLE = "\033[0;35m"
    CYAN = "\033[0;36m"
    WHITE = "\033[0;37m"

    def __str__(self) -> str:
        return self.value


ColorSequence = Tuple[ConsoleColor, ...]

DEFAULT_COLOR_SEQUENCE: ColorSequence = (
    ConsoleColor.WHITE,
    ConsoleColor.PURPLE,
    ConsoleColor.YELLOW,
)

DEFAULT_COLOR_NAMES = [c.name.lower() for c in DEFAULT_COLOR_SEQUENCE]

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def ensure_color_sequence(colors: Iterable[ConsoleColor]) -> ColorSequence:
    """
    Freeze a color iterable into a tuple, rejecting empty input.

    Raises:
        ColorSequenceError: If no colors were supplied.
    """
    sequence = tuple(colors)
    if not sequence:
        raise ColorSequenceError("Color sequence must contain at least one color.")
    return sequence


def parse_color_sequence(names: Iterable[str]) -> ColorSequence:
    """
    Resolve human-readable color names (case-insensitive) into a sequence.

    Args:
        names: Color names such as "white" or "Purple".

    Returns:
        ColorSequence: The resolved, non-empty color tuple.

    Raises:
        ColorSequenceError: On unknown names, on RESET, or on empty input.
    """
    resolved = []
    for raw in names:
        key = str(raw).strip().upper()
        if not key:
            continue
        if key == ConsoleColor.RESET.name or key not in ConsoleColor.__members__:
            raise ColorSequenceError(f"Unknown color '{raw}'.")
        resolved.append(ConsoleColor[key])
    return ensure_color_sequence(resolved)


def color_for_depth(sequence: Sequence[ConsoleColor], depth: int, use_color: bool) -> ConsoleColor:
    """Pick the color for a nesting depth: cycled when enabled, else index 0."""
    if not use_color:
        return sequence[0]
    return sequence[depth % len(sequence)]
