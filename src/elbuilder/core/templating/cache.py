from __future__ import annotations

"""
Resolution Cache.

In-memory store of fully resolved content, keyed by the destination path
that corresponds to a source path. Entries are written once and never
invalidated for the lifetime of the build that owns the cache.
"""

import logging
from typing import Dict, Iterator, Optional

logger = logging.getLogger(__name__)


class ResolutionCache:
    """
    Write-once map of destination path to resolved content.
    """

    def __init__(self) -> None:
        self._entries: Dict[str, str] = {}

    def get_entry(self, dest_key: str) -> Optional[str]:
        """
        Retrieve resolved content if available.

        Args:
            dest_key: Destination path identity of the source file.

        Returns:
            Optional[str]: The cached content, or None on miss.
        """
        return self._entries.get(dest_key)

    def set_entry(self, dest_key: str, content: str) -> None:
        """
        Store resolved content for a destination path.

        A second write for the same key is ignored; the first resolution
        stays authoritative for the rest of the build.
        """
        if dest_key in self._entries:
            logger.debug(f"ResolutionCache: Ignoring rewrite of {dest_key}")
            return
        self._entries[dest_key] = content

    def __contains__(self, dest_key: object) -> bool:
        return dest_key in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)
