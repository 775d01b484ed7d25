from __future__ import annotations

"""
Configuration Domain Management.

Provides the default runtime settings and the conversion of a validated
settings dictionary into the render configuration. Settings live only for
the duration of one run; nothing is persisted.
"""

import os
from typing import Any, Dict

from truffula.domain.colors import DEFAULT_COLOR_NAMES, ColorSequence, parse_color_sequence
from truffula.domain.tree_models import RenderConfig

# -----------------------------------------------------------------------------
# Configuration Models (Dict-based)
# -----------------------------------------------------------------------------

def get_default_config() -> Dict[str, Any]:
    """
    Generate the default runtime configuration.

    Returns:
        Dict[str, Any]: Default configuration values.
    """
    return {
        "input_path": os.getcwd(),
        "show_hidden": False,
        "use_color": True,
        "colors": list(DEFAULT_COLOR_NAMES),
        "output_file": "",
        "log_level": "INFO",
    }


def build_render_config(config: Dict[str, Any]) -> RenderConfig:
    """Create the immutable RenderConfig from a validated settings dict."""
    return RenderConfig(
        root_path=config["input_path"],
        show_hidden=bool(config["show_hidden"]),
        use_color=bool(config["use_color"]),
    )


def resolve_colors(config: Dict[str, Any]) -> ColorSequence:
    """
    Resolve the configured color names.

    Raises:
        ColorSequenceError: On unknown names or an empty list.
    """
    return parse_color_sequence(config["colors"])
