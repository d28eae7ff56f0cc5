from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

This module sets up the testing environment, including:
1. Path manipulation to ensure the 'src' directory is importable.
2. Shared fixtures to lay out a site source tree on disk.
"""

import os
import sys
from pathlib import Path
from typing import Callable, Dict, Union

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
SiteFiles = Dict[str, Union[str, bytes]]


@pytest.fixture
def make_site(tmp_path: Path) -> Callable[[SiteFiles], Path]:
    """
    Return a factory that writes files under ``<tmp_path>/src``.

    Keys are '/'-separated paths relative to the source root; str values
    are written as UTF-8 text, bytes values verbatim.

    Returns:
        Callable[[SiteFiles], Path]: Factory returning the base directory.
    """
    def _make(files: SiteFiles) -> Path:
        src = tmp_path / "src"
        src.mkdir(exist_ok=True)
        for rel, content in files.items():
            target = src.joinpath(*rel.split("/"))
            target.parent.mkdir(parents=True, exist_ok=True)
            if isinstance(content, bytes):
                target.write_bytes(content)
            else:
                target.write_text(content, encoding="utf-8", newline="")
        return tmp_path

    return _make


@pytest.fixture
def mock_config_dict(tmp_path: Path) -> Dict[str, str]:
    """
    Return a complete configuration dictionary rooted at ``tmp_path``.
    """
    return {
        "base_dir": str(tmp_path),
        "src_dir_name": "src",
        "build_dir_name": "build",
        "components_dir_name": "el-components",
        "layouts_dir_name": "el-layouts",
        "html_extension": ".html",
    }
