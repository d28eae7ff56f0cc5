from __future__ import annotations

"""
Output Persistence Component.

Handles the physical persistence of resolved pages and the verbatim copy
of every other asset into the mirrored output tree.
"""

import os
import shutil

# -----------------------------------------------------------------------------
# FILE OUTPUT MANAGEMENT
# -----------------------------------------------------------------------------

def write_output_file(dest_path: str, content: str) -> None:
    """
    Write a resolved page, creating any missing parent directories.

    Args:
        dest_path: Absolute output path.
        content: Final page content.

    Raises:
        OSError: If the directory cannot be created or the write fails.
    """
    _ensure_parent_dir(dest_path)
    with open(dest_path, "w", encoding="utf-8", newline="") as out:
        out.write(content)


def copy_asset(src_path: str, dest_path: str) -> None:
    """
    Copy a non-page file byte-for-byte into the output tree.

    Args:
        src_path: Absolute source path.
        dest_path: Absolute output path.

    Raises:
        OSError: If the directory cannot be created or the copy fails.
    """
    _ensure_parent_dir(dest_path)
    shutil.copyfile(src_path, dest_path)


# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _ensure_parent_dir(path: str) -> None:
    parent = os.path.dirname(os.path.abspath(path))
    if parent:
        os.makedirs(parent, exist_ok=True)
