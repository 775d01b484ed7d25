from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Orchestrates the CLI lifecycle: logging bootstrap, merging of defaults and
command-line overrides, validation, and rendering of the tree to standard
output or to a file.
"""

import json
import os
import sys
from typing import Any, Dict, List, Optional

from truffula.core.analysis.tree_renderer import TreePrinter
from truffula.core.validator import validate_config
from truffula.domain.colors import ColorSequence, ColorSequenceError
from truffula.domain.config import build_render_config, get_default_config, resolve_colors
from truffula.domain.tree_models import RenderConfig
from truffula.infra.logging import LoggingConfig, configure_logging, get_logger
from truffula.interface.cli import args as cli_args

logger = get_logger(__name__)

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    """
    Execute the CLI workflow.

    Args:
        argv: Command line arguments. Defaults to sys.argv.

    Returns:
        int: Process exit code (0 success, 1 failure, 2 bad configuration,
        130 interrupted).
    """
    # Undecodable file names arrive as lone surrogates; write their original bytes
    if hasattr(sys.stdout, "reconfigure"):
        sys.stdout.reconfigure(errors="surrogateescape")
    if sys.platform == "win32":
        # Line terminators are written verbatim; disable newline translation
        if hasattr(sys.stdout, "reconfigure"):
            sys.stdout.reconfigure(encoding="utf-8", newline="")
        if hasattr(sys.stderr, "reconfigure"):
            sys.stderr.reconfigure(encoding="utf-8")

    # 1. Argument parsing
    parser = cli_args.build_parser()
    args = parser.parse_args(argv)

    # 2. Merge and validate configuration
    overrides = cli_args.args_to_overrides(args)
    raw_conf = _merge_config(get_default_config(), overrides)
    clean_conf, warnings = validate_config(raw_conf, strict=False)

    # 3. Logging bootstrap (stderr only; stdout carries the tree)
    configure_logging(
        LoggingConfig(level=clean_conf["log_level"], console=True, log_file=args.log_file)
    )

    for w in warnings:
        logger.warning(f"Configuration Constraint: {w}")

    if args.dump_config:
        print(json.dumps(clean_conf, ensure_ascii=False, indent=2))
        return 0

    # 4. Color resolution
    try:
        colors = resolve_colors(clean_conf)
    except ColorSequenceError as e:
        logger.error(str(e))
        print(f"ERROR: {e}", file=sys.stderr)
        return 2

    render_conf = build_render_config(clean_conf)
    logger.debug(f"Targeting directory: {render_conf.root_path}")

    # 5. Rendering
    try:
        output_file = clean_conf.get("output_file", "")
        if output_file:
            _render_to_file(render_conf, colors, output_file)
        else:
            TreePrinter(render_conf, color_sequence=colors).print_tree()
    except KeyboardInterrupt:
        logger.warning("Interrupted by user.")
        print("Interrupted.", file=sys.stderr)
        return 130
    except OSError as e:
        logger.error(f"Failed to write tree: {e}")
        print(f"ERROR: {e}", file=sys.stderr)
        return 1

    return 0

# -----------------------------------------------------------------------------
# HELPERS
# -----------------------------------------------------------------------------

def _merge_config(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    """Shallow-merge non-None overrides of known keys into the base config."""
    out = dict(base)
    for k, v in overrides.items():
        if k in base and v is not None:
            out[k] = v
    return out


def _render_to_file(render_conf: RenderConfig, colors: ColorSequence, output_file: str) -> None:
    """Render into a UTF-8 file, creating its parent directory."""
    out_dir = os.path.dirname(os.path.abspath(output_file))
    os.makedirs(out_dir, exist_ok=True)
    with open(output_file, "w", encoding="utf-8", errors="surrogateescape", newline="") as f:
        TreePrinter(render_conf, out=f, color_sequence=colors).print_tree()
    logger.info(f"Tree saved to file: {output_file}")


if __name__ == "__main__":
    sys.exit(main())
