from __future__ import annotations

"""
Configuration Domain Management.

Defines the runtime configuration (Session State) that drives a build.
The configuration is a plain dictionary so that CLI overrides and tests
can merge partial values on top of the defaults.
"""

import os
from typing import Any, Dict, List

from elbuilder.domain.constants import (
    COMPONENTS_DIR_NAME,
    DEFAULT_BUILD_DIR_NAME,
    DEFAULT_SRC_DIR_NAME,
    HTML_EXTENSION,
    LAYOUTS_DIR_NAME,
)

# -----------------------------------------------------------------------------
# Schema
# -----------------------------------------------------------------------------

# Keys holding a single path segment (a directory name, not a path)
DIR_NAME_FIELDS: List[str] = [
    "src_dir_name",
    "build_dir_name",
    "components_dir_name",
    "layouts_dir_name",
]

STRING_FIELDS: List[str] = ["base_dir", "html_extension"] + DIR_NAME_FIELDS


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
        # IO Paths
        "base_dir": os.getcwd(),
        "src_dir_name": DEFAULT_SRC_DIR_NAME,
        "build_dir_name": DEFAULT_BUILD_DIR_NAME,

        # Reserved pools
        "components_dir_name": COMPONENTS_DIR_NAME,
        "layouts_dir_name": LAYOUTS_DIR_NAME,

        # Page detection
        "html_extension": HTML_EXTENSION,
    }
