from __future__ import annotations

"""
Component Resolver.

Recursively inlines component references. Each distinct path is read and
resolved at most once per build (memoized in the context cache); a
recursion guard holding the component paths on the active call chain
stops cycles. Diamond inclusion (the same component reached through two
unrelated branches) is legal and served from the cache.
"""

import logging
from typing import List, Optional, Set, Tuple

from elbuilder.core.pipeline.components.reader import read_source_text
from elbuilder.core.templating.context import ResolutionContext
from elbuilder.core.templating.matcher import find_component_refs
from elbuilder.domain.constants import DIAG_CYCLE, DIAG_READ

logger = logging.getLogger(__name__)


class ComponentResolver:
    """
    Expands component references against a resolution context.
    """

    def __init__(self, context: ResolutionContext) -> None:
        self.context = context

    def resolve(self, rel_path: str, guard: Optional[Set[str]] = None) -> str:
        """
        Return the fully resolved content of a source file.

        Args:
            rel_path: Source path relative to the source root.
            guard: Component paths currently being expanded on this call
                chain. A fresh set is used when omitted.

        Returns:
            str: Resolved content, or an empty string if the file could
                 not be read.
        """
        if guard is None:
            guard = set()

        ctx = self.context
        dest_key = ctx.dest_file(rel_path)

        cached = ctx.cache.get_entry(dest_key)
        if cached is not None:
            return cached

        try:
            text = read_source_text(ctx.source_file(rel_path))
        except (OSError, ValueError) as e:
            msg = f"Failed to read '{rel_path}': {e}"
            logger.error(msg)
            ctx.report(DIAG_READ, rel_path, msg)
            ctx.cache.set_entry(dest_key, "")
            return ""

        splices: List[Tuple[int, int, str]] = []

        for ref in find_component_refs(text):
            ref_path = ctx.component_path(ref.name)

            if ref_path in guard:
                msg = f"Component cycle detected: '{ref_path}' referenced from '{rel_path}'"
                logger.warning(msg)
                ctx.report(DIAG_CYCLE, rel_path, msg)
                continue

            guard.add(ref_path)
            try:
                content = self.resolve(ref_path, guard)
            finally:
                guard.discard(ref_path)

            splices.append((ref.start, ref.end, content))

        result = _splice(text, splices)
        ctx.cache.set_entry(dest_key, result)
        logger.debug(f"Resolved '{rel_path}' ({len(splices)} component(s) inlined)")
        return result


# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _splice(text: str, splices: List[Tuple[int, int, str]]) -> str:
    """Replace ``(start, end)`` spans of ``text``, last span first."""
    result = text
    for start, end, content in reversed(splices):
        result = result[:start] + content + result[end:]
    return result
