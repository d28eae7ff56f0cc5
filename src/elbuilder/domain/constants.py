from __future__ import annotations

"""
Site Layout and Reference Syntax Constants.

Centralizes the reserved directory names and the fixed tag vocabulary
recognized by the template resolution engine.
"""

from typing import Final

# -----------------------------------------------------------------------------
# DIRECTORY LAYOUT
# -----------------------------------------------------------------------------

DEFAULT_SRC_DIR_NAME: Final[str] = "src"
DEFAULT_BUILD_DIR_NAME: Final[str] = "build"
COMPONENTS_DIR_NAME: Final[str] = "el-components"
LAYOUTS_DIR_NAME: Final[str] = "el-layouts"

HTML_EXTENSION: Final[str] = ".html"

# -----------------------------------------------------------------------------
# TAG VOCABULARY
# -----------------------------------------------------------------------------

COMPONENT_TAG: Final[str] = "el-component"
LAYOUT_TAG: Final[str] = "el-layout"
PLACEHOLDER_TAG: Final[str] = "el-content"

# -----------------------------------------------------------------------------
# DIAGNOSTIC KINDS
# -----------------------------------------------------------------------------

DIAG_READ: Final[str] = "read"
DIAG_WRITE: Final[str] = "write"
DIAG_COPY: Final[str] = "copy"
DIAG_CYCLE: Final[str] = "cycle"
