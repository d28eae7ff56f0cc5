from __future__ import annotations

"""
FileSystem Infrastructure Layer.

Provides path normalization and output directory lifecycle utilities.
Acts as an abstraction over the 'os' and 'shutil' modules so the pipeline
only deals with success flags and error messages.
"""

import os
import shutil
from typing import Optional, Tuple

# -----------------------------------------------------------------------------
# PATH RESOLUTION API
# -----------------------------------------------------------------------------

def normalize_path(path: Optional[str], fallback: str) -> str:
    """
    Normalize a directory path string into an absolute filesystem path.

    Handles environment variable expansion ($VAR/%VAR%) and user home
    shortcuts (~/). Reverts to fallback if the input is empty.

    Args:
        path: Raw input path string.
        fallback: Default path to use if the input is empty.

    Returns:
        str: Normalized absolute path.
    """
    p = (path or "").strip()
    if not p:
        p = fallback
    p = os.path.expandvars(os.path.expanduser(p))
    return os.path.abspath(p)


# -----------------------------------------------------------------------------
# OUTPUT DIRECTORY API
# -----------------------------------------------------------------------------

def reset_directory(path: str) -> Tuple[bool, Optional[str]]:
    """
    Remove a directory tree (if present) and recreate it empty.

    Args:
        path: Target directory path.

    Returns:
        Tuple[bool, Optional[str]]: (Success flag, Error message if applicable).
    """
    try:
        if os.path.lexists(path):
            if os.path.isdir(path) and not os.path.islink(path):
                shutil.rmtree(path)
            else:
                os.remove(path)
        os.makedirs(path)
        return True, None
    except OSError as e:
        return False, str(e)
