from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command-line schema and translates the parsed namespace into
configuration overrides.
"""

import argparse
from typing import Any, Dict, List, Optional

from truffula.domain.colors import DEFAULT_COLOR_NAMES

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the truffula CLI.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog="truffula",
        description="Print a directory tree with depth-cycling colors.",
    )

    p.add_argument(
        "input_path",
        nargs="?",
        default=None,
        help="Directory to print (default: current directory).",
    )

    # --- Rendering ---
    p.add_argument(
        "-a", "--all",
        dest="show_hidden",
        action="store_true",
        help="Show hidden files and folders.",
    )
    p.add_argument(
        "--no-color",
        action="store_true",
        help="Print every line in the first color of the sequence.",
    )
    p.add_argument(
        "--colors",
        default=None,
        help=f"Comma-separated color cycle (default: {','.join(DEFAULT_COLOR_NAMES)}).",
    )
    p.add_argument(
        "-o", "--output",
        dest="output_file",
        default=None,
        help="Write the tree to this file instead of standard output.",
    )

    # --- Diagnostics ---
    p.add_argument(
        "--debug",
        action="store_true",
        help="Elevate logging verbosity to DEBUG.",
    )
    p.add_argument(
        "--log-file",
        dest="log_file",
        default=None,
        help="Also write diagnostics to a rotating log file.",
    )
    p.add_argument(
        "--dump-config",
        action="store_true",
        help="Print the resolved configuration as JSON and exit.",
    )

    return p

# -----------------------------------------------------------------------------
# ARGUMENT MAPPING
# -----------------------------------------------------------------------------

def args_to_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """
    Translate the argparse Namespace into configuration overrides.

    Args:
        args: Parsed command-line arguments.

    Returns:
        Dict[str, Any]: Configuration overrides subset.
    """
    overrides: Dict[str, Any] = {}

    overrides["input_path"] = args.input_path
    overrides["output_file"] = args.output_file

    if args.show_hidden:
        overrides["show_hidden"] = True
    if args.no_color:
        overrides["use_color"] = False
    if args.colors is not None:
        overrides["colors"] = _split_csv(args.colors)
    if args.debug:
        overrides["log_level"] = "DEBUG"

    return overrides

# -----------------------------------------------------------------------------
# HELPERS
# -----------------------------------------------------------------------------

def _split_csv(value: Optional[str]) -> Optional[List[str]]:
    """Convert a comma-separated string into a list of trimmed items."""
    if value is None:
        return None
    parts = [x.strip() for x in value.split(",")]
    return [x for x in parts if x]
