from __future__ import annotations

"""
Resolution Context.

Per-build state shared by the component resolver and the layout applier:
the source and destination roots, the reserved pool directories, the
resolution cache and the diagnostics collected so far. One context is
created by the page pipeline for each build and discarded afterwards.
"""

import os
from typing import List

from elbuilder.core.templating.cache import ResolutionCache
from elbuilder.domain.build_models import BuildDiagnostic
from elbuilder.domain.constants import COMPONENTS_DIR_NAME, LAYOUTS_DIR_NAME


class ResolutionContext:
    """
    Owns the cache and the diagnostic log of a single build invocation.

    Source files are identified by their path relative to ``src_dir``,
    using ``/`` as separator.
    """

    def __init__(
            self,
            src_dir: str,
            dest_dir: str,
            components_dir: str = COMPONENTS_DIR_NAME,
            layouts_dir: str = LAYOUTS_DIR_NAME,
    ) -> None:
        """
        Args:
            src_dir: Absolute source root.
            dest_dir: Absolute output root.
            components_dir: Components pool, relative to ``src_dir``.
            layouts_dir: Layouts pool, relative to ``src_dir``.
        """
        self.src_dir = src_dir
        self.dest_dir = dest_dir
        self.components_dir = components_dir
        self.layouts_dir = layouts_dir

        self.cache = ResolutionCache()
        self.diagnostics: List[BuildDiagnostic] = []

    # -------------------------------------------------------------------------
    # PATH MAPPING
    # -------------------------------------------------------------------------

    def component_path(self, name: str) -> str:
        """Relative path of a normalized component name."""
        return f"{self.components_dir}/{name}"

    def layout_path(self, name: str) -> str:
        """Relative path of a normalized layout name."""
        return f"{self.layouts_dir}/{name}"

    def source_file(self, rel_path: str) -> str:
        """Absolute source path of a relative path."""
        return os.path.join(self.src_dir, *rel_path.split("/"))

    def dest_file(self, rel_path: str) -> str:
        """Absolute output path of a relative path (also the cache key)."""
        return os.path.join(self.dest_dir, *rel_path.split("/"))

    # -------------------------------------------------------------------------
    # DIAGNOSTICS
    # -------------------------------------------------------------------------

    def report(self, kind: str, rel_path: str, message: str) -> None:
        """Record a non-fatal problem for the build summary."""
        self.diagnostics.append(BuildDiagnostic(kind=kind, rel_path=rel_path, message=message))
