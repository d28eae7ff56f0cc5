from __future__ import annotations

"""
Configuration Validation Service.

Acts as the gatekeeper for the build pipeline, ensuring that the
configuration dictionary conforms to the expected schema. Handles type
coercion and default value injection so that a malformed override never
aborts a build on its own.
"""

import logging
from typing import Any, Dict, List, Tuple

from elbuilder.domain.config import DIR_NAME_FIELDS, STRING_FIELDS, get_default_config

logger = logging.getLogger(__name__)


# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def validate_config(
        config: Any,
        *,
        strict: bool = False,
) -> Tuple[Dict[str, Any], List[str]]:
    """
    Validate and normalize the provided configuration dictionary.

    Args:
        config: Raw configuration data (usually a dictionary).
        strict: If True, raises exceptions on invalid values instead of
                falling back to defaults.

    Returns:
        Tuple[Dict[str, Any], List[str]]: The normalized configuration and
                                          a list of warnings.
    """
    warnings: List[str] = []
    defaults = get_default_config()

    # 1. Base Type Validation
    if not isinstance(config, dict):
        msg = f"Invalid config type: expected dict, received {type(config).__name__}."
        if strict:
            raise TypeError(msg)
        warnings.append(f"{msg} Using defaults.")
        logger.warning(msg)
        return defaults, warnings

    merged: Dict[str, Any] = dict(defaults)
    merged.update(config)

    # 2. Field Processing & Normalization
    for field in STRING_FIELDS:
        merged[field] = _as_str(merged.get(field), defaults[field], field, warnings, strict)

    for field in DIR_NAME_FIELDS:
        merged[field] = _as_dir_name(merged[field], defaults[field], field, warnings, strict)

    # 3. Domain-Specific Normalization
    merged["html_extension"] = _normalize_extension(merged["html_extension"], warnings, strict)

    if merged["components_dir_name"] == merged["layouts_dir_name"]:
        msg = "Components and layouts must live in different directories."
        if strict:
            raise ValueError(msg)
        warnings.append(f"{msg} Using defaults.")
        merged["components_dir_name"] = defaults["components_dir_name"]
        merged["layouts_dir_name"] = defaults["layouts_dir_name"]

    # The output root is wiped on every run
    if merged["src_dir_name"] == merged["build_dir_name"]:
        msg = "Source and build directories must differ."
        if strict:
            raise ValueError(msg)
        warnings.append(f"{msg} Using defaults.")
        merged["src_dir_name"] = defaults["src_dir_name"]
        merged["build_dir_name"] = defaults["build_dir_name"]

    return merged, warnings


# -----------------------------------------------------------------------------
# PRIVATE HELPERS: TYPE COERCION
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


# -----------------------------------------------------------------------------
# PRIVATE HELPERS: DOMAIN NORMALIZATION
# -----------------------------------------------------------------------------

def _as_dir_name(value: str, fallback: str, field: str, warnings: List[str], strict: bool) -> str:
    """Reject values that are not a single relative path segment."""
    if value in (".", "..") or "/" in value or "\\" in value:
        msg = f"Invalid field '{field}': '{value}' is not a plain directory name."
        if strict:
            raise ValueError(msg)
        warnings.append(f"{msg} Using fallback.")
        return fallback
    return value


def _normalize_extension(ext: str, warnings: List[str], strict: bool) -> str:
    """Ensure the page extension is prefixed with a dot."""
    if ext.startswith("."):
        return ext
    if strict:
        raise ValueError(f"Invalid extension '{ext}': must start with '.'.")
    warnings.append(f"Extension '{ext}' corrected to '.{ext}'.")
    return "." + ext
