from __future__ import annotations

"""
Configuration Validation Service.

Ensures the settings dictionary conforms to the expected schema before a
render. Handles type coercion, path normalization and default injection.
"""

import logging
import os
from typing import Any, Dict, List, Tuple

from truffula.domain.config import get_default_config

logger = logging.getLogger(__name__)

_STRING_FIELDS = ["input_path", "output_file", "log_level"]
_BOOL_FIELDS = ["show_hidden", "use_color"]
_LIST_FIELDS = ["colors"]

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def validate_config(
        config: Any,
        *,
        strict: bool = False,
) -> Tuple[Dict[str, Any], List[str]]:
    """
    Validate and normalize a settings dictionary.

    Converts untrusted inputs (e.g. from the CLI) into typed values and fills
    missing keys with defaults. ``input_path`` is made absolute so the root
    line always shows a real directory name.

    Args:
        config: Raw settings (usually a dictionary).
        strict: Raise TypeError on type mismatch instead of coercing.

    Returns:
        Tuple[Dict[str, Any], List[str]]: Normalized settings and warnings.
    """
    warnings: List[str] = []
    defaults = get_default_config()

    if not isinstance(config, dict):
        msg = f"Invalid config type: expected dict, received {type(config).__name__}."
        if strict:
            raise TypeError(msg)
        warnings.append(f"{msg} Using defaults.")
        logger.warning(msg)
        config = {}

    merged: Dict[str, Any] = dict(defaults)
    merged.update({k: v for k, v in config.items() if k in defaults})

    unknown = sorted(k for k in config if k not in defaults)
    if unknown:
        warnings.append(f"Ignoring unknown keys: {', '.join(unknown)}.")

    for field in _STRING_FIELDS:
        merged[field] = _as_str(merged.get(field), defaults[field], field, warnings, strict)

    for field in _BOOL_FIELDS:
        merged[field] = _as_bool(merged.get(field), defaults[field], field, warnings, strict)

    for field in _LIST_FIELDS:
        merged[field] = _as_list_str(merged.get(field), defaults[field], field, warnings, strict)

    merged["input_path"] = os.path.abspath(os.path.expanduser(merged["input_path"]))
    return merged, warnings

# -----------------------------------------------------------------------------
# PRIVATE HELPERS: TYPE COERCION
# -----------------------------------------------------------------------------

def _as_str(value: Any, fallback: str, field: str, warnings: List[str], strict: bool) -> str:
    if value is None:
        return fallback
    if isinstance(value, str):
        v = value.strip()
        return v if v else fallback

    msg = f"Invalid field '{field}': expected str, received {type(value).__name__}."
    if strict:
        raise TypeError(msg)
    warnings.append(f"{msg} Using fallback.")
    return fallback


def _as_bool(value: Any, fallback: bool, field: str, warnings: List[str], strict: bool) -> bool:
    """Coerce numbers and human-friendly strings into booleans."""
    if isinstance(value, bool):
        return value
    if value is None:
        return fallback

    if not strict:
        if isinstance(value, (int, float)) and value in (0, 1):
            warnings.append(f"Field '{field}' converted from number {value} to bool.")
            return bool(value)
        if isinstance(value, str):
            s = value.strip().lower()
            if s in ("true", "1", "yes", "y", "on"):
                warnings.append(f"Field '{field}' converted from '{value}' to True.")
                return True
            if s in ("false", "0", "no", "n", "off"):
                warnings.append(f"Field '{field}' converted from '{value}' to False.")
                return False

    msg = f"Invalid field '{field}': expected bool, received {type(value).__name__}."
    if strict:
        raise TypeError(msg)
    warnings.append(f"{msg} Using fallback.")
    return fallback


def _as_list_str(
        value: Any,
        fallback: List[str],
        field: str,
        warnings: List[str],
        strict: bool,
) -> List[str]:
    """Accept a list of strings or a comma-separated string."""
    if value is None:
        return list(fallback)

    if isinstance(value, str):
        if strict:
            raise TypeError(f"Invalid field '{field}': expected list, received str.")
        parts = [p.strip() for p in value.split(",") if p.strip()]
        warnings.append(f"Field '{field}' converted from CSV string to list.")
        return parts

    if isinstance(value, (list, tuple)):
        out = []
        for item in value:
            if not isinstance(item, str):
                msg = f"Invalid item in '{field}': expected str, received {type(item).__name__}."
                if strict:
                    raise TypeError(msg)
                warnings.append(f"{msg} Item dropped.")
                continue
            if item.strip():
                out.append(item.strip())
        return out

    msg = f"Invalid field '{field}': expected list, received {type(value).__name__}."
    if strict:
        raise TypeError(msg)
    warnings.append(f"{msg} Using fallback.")
    return list(fallback)
