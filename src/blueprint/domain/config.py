from __future__ import annotations

"""
Run Configuration.

Provides the default session configuration and the validation step that
turns untrusted overrides (CLI flags) into a normalized, strictly typed
dictionary. Nothing is read from or written to disk.
"""

import logging
import os
from typing import Any, Dict, List, Optional, Tuple

from blueprint.domain.constants import BUNDLED_TEMPLATES_DIR, DEFAULT_LOG_LEVEL

logger = logging.getLogger(__name__)

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

# -----------------------------------------------------------------------------
# DEFAULTS
# -----------------------------------------------------------------------------

def get_default_config() -> Dict[str, Any]:
    """
    Generate the default runtime configuration.

    Returns:
        Dict[str, Any]: Default configuration values.
    """
    return {
        "templates_dir": BUNDLED_TEMPLATES_DIR,
        "output_dir": os.getcwd(),
        "log_level": DEFAULT_LOG_LEVEL,
        "log_file": None,
    }

# -----------------------------------------------------------------------------
# VALIDATION
# -----------------------------------------------------------------------------

def validate_config(
        config: Any,
        *,
        strict: bool = False,
) -> Tuple[Dict[str, Any], List[str]]:
    """
    Validate and normalize a configuration dictionary.

    Fills missing keys with defaults and coerces invalid values back to
    their defaults, collecting a warning for each correction.

    Args:
        config: Raw configuration data.
        strict: If True, raise on invalid values instead of coercing.

    Returns:
        Tuple[Dict[str, Any], List[str]]: Normalized configuration and warnings.
    """
    warnings: List[str] = []
    defaults = get_default_config()

    if not isinstance(config, dict):
        msg = f"Invalid config type: expected dict, received {type(config).__name__}."
        if strict:
            raise TypeError(msg)
        warnings.append(f"{msg} Using defaults.")
        logger.warning(msg)
        return defaults, warnings

    merged: Dict[str, Any] = dict(defaults)
    merged.update({k: v for k, v in config.items() if k in defaults})

    for field in ("templates_dir", "output_dir"):
        merged[field] = _as_str(merged.get(field), defaults[field], field, warnings, strict)

    merged["log_file"] = _as_optional_str(merged.get("log_file"), "log_file", warnings, strict)

    level = _as_str(merged.get("log_level"), DEFAULT_LOG_LEVEL, "log_level", warnings, strict).upper()
    if level not in _LOG_LEVELS:
        msg = f"Invalid field 'log_level': unknown level '{level}'."
        if strict:
            raise ValueError(msg)
        warnings.append(f"{msg} Using fallback.")
        level = DEFAULT_LOG_LEVEL
    merged["log_level"] = level

    return merged, warnings

# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _as_str(value: Any, fallback: str, field: str, warnings: List[str], strict: bool) -> str:
    """Validate and sanitize string inputs."""
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


def _as_optional_str(value: Any, field: str, warnings: List[str], strict: bool) -> Optional[str]:
    if value is None:
        return None
    v = _as_str(value, "", field, warnings, strict)
    return v or None
