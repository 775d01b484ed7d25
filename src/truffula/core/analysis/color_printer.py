from __future__ import annotations

"""
Color Printer.

Writes text to an output sink wrapped in ANSI color codes, ensuring every
line-terminated emission is closed by exactly one reset marker. Each call
performs a single write on the sink.
"""

import os
import sys
from typing import Optional, TextIO

from truffula.domain.colors import ConsoleColor

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

class ColorPrinter:
    """
    Colored text emitter bound to an output sink.

    The sink only needs a ``write(str)`` method. When no sink is given,
    ``sys.stdout`` is looked up at write time so redirected streams are
    honored.
    """

    def __init__(
            self,
            out: Optional[TextIO] = None,
            current_color: ConsoleColor = ConsoleColor.WHITE,
            line_terminator: str = os.linesep,
    ):
        self._out = out
        self.current_color = current_color
        self.line_terminator = line_terminator

    @property
    def out(self) -> TextIO:
        return self._out if self._out is not None else sys.stdout

    def set_color(self, color: ConsoleColor) -> None:
        self.current_color = color

    def println(self, text: str, color: Optional[ConsoleColor] = None) -> None:
        """
        Write ``color + text + line terminator + RESET``.

        Args:
            text: Message to print.
            color: Color for this line; defaults to the current color.
        """
        prefix = self._resolve(color)
        self.out.write(f"{prefix}{text}{self.line_terminator}{ConsoleColor.RESET.value}")

    def print(self, text: str, reset_after: bool = True, color: Optional[ConsoleColor] = None) -> None:
        """
        Write ``color + text`` without a line terminator.

        Args:
            text: Message to print.
            reset_after: If True, append the RESET marker.
            color: Color for this write; defaults to the current color.
        """
        suffix = ConsoleColor.RESET.value if reset_after else ""
        self.out.write(f"{self._resolve(color)}{text}{suffix}")

    def _resolve(self, color: Optional[ConsoleColor]) -> str:
        chosen = self.current_color if color is None else color
        return chosen.value
