from __future__ import annotations

"""
Source Discovery Service.

Walks the source tree in a deterministic (sorted) order and yields every
file to build, pruning the reserved component and layout pools at the top
level of the source root. Symlinked directories are followed unless they
lead back into their own ancestry.
"""

import logging
import os
from typing import Collection, Dict, Iterable, List, Tuple

logger = logging.getLogger(__name__)


# ==============================================================================
# PUBLIC API (DISCOVERY SERVICES)
# ==============================================================================

def yield_source_files(
        src_dir: str,
        reserved_dirs: Collection[str],
) -> Iterable[Dict[str, str]]:
    """
    Traverse the source root and yield metadata for each file found.

    Args:
        src_dir: Absolute path to the source root.
        reserved_dirs: Top-level directory names never walked as pages.

    Yields:
        Dict[str, str]: Metadata for each file, including:
                        - file_path: Absolute path.
                        - rel_path: Path relative to the root, '/' separated.
                        - ext: File extension (including dot).
                        - file_name: Base filename.

    Raises:
        OSError: If the source root itself cannot be enumerated.
    """
    src_dir_abs = os.path.abspath(src_dir)

    def _on_walk_error(err: OSError) -> None:
        if os.path.abspath(err.filename or "") == src_dir_abs:
            raise err
        logger.error(f"Failed to list directory '{err.filename}': {err}")

    # Real paths of the directories on the way down to each walked root
    ancestry: Dict[str, Tuple[str, ...]] = {src_dir_abs: (os.path.realpath(src_dir_abs),)}

    for root, dirs, files in os.walk(src_dir_abs, onerror=_on_walk_error, followlinks=True):
        chain = ancestry.pop(root, ())

        # In-place pruning of the reserved pools (top level only)
        if root == src_dir_abs:
            dirs[:] = [d for d in dirs if d not in reserved_dirs]
        dirs[:] = _prune_link_cycles(root, sorted(dirs), chain, src_dir_abs, ancestry)
        files.sort()

        for file_name in files:
            file_path = os.path.join(root, file_name)
            rel_path = os.path.relpath(file_path, src_dir_abs).replace(os.sep, "/")
            _, ext = os.path.splitext(file_name)

            yield {
                "file_path": file_path,
                "rel_path": rel_path,
                "ext": ext,
                "file_name": file_name,
            }


# ==============================================================================
# PRIVATE HELPERS
# ==============================================================================

def _prune_link_cycles(
        root: str,
        dirs: List[str],
        chain: Tuple[str, ...],
        src_dir_abs: str,
        ancestry: Dict[str, Tuple[str, ...]],
) -> List[str]:
    """
    Drop subdirectories that lead back into their own ancestry.

    Symlinked directories are followed, so a link to an ancestor would
    otherwise be walked forever.
    """
    kept: List[str] = []
    for d in dirs:
        dir_path = os.path.join(root, d)
        real = os.path.realpath(dir_path)
        if real in chain:
            rel = os.path.relpath(dir_path, src_dir_abs).replace(os.sep, "/")
            logger.warning(f"Skipping directory link cycle: '{rel}' -> '{real}'")
            continue
        ancestry[dir_path] = chain + (real,)
        kept.append(d)
    return kept
