from __future__ import annotations

"""
Build Domain Data Models.

Defines the data structures and factory functions used to communicate
build results and per-file diagnostics between the pipeline engine and
the interface layer.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from elbuilder.domain.constants import DIAG_CYCLE

# -----------------------------------------------------------------------------
# DIAGNOSTIC MODELS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class BuildDiagnostic:
    """
    A non-fatal problem recorded while building a single file.

    Attributes:
        kind: Category of the problem ("read", "write", "copy", "cycle").
        rel_path: Source path relative to the source root.
        message: Human readable description.
    """
    kind: str
    rel_path: str
    message: str


# -----------------------------------------------------------------------------
# RESULT MODELS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class BuildResult:
    """
    Unified result object of a complete build.

    Attributes:
        ok: False only when the build was aborted by a fatal error.
        error: Descriptive message in case of failure.
        base_path: Normalized base directory.
        src_dir: Absolute source root.
        dest_dir: Absolute output root.
        pages: Relative paths of the HTML pages written.
        assets: Relative paths of the files copied verbatim.
        diagnostics: Non-fatal problems collected during the run.
        summary: Execution statistics.
    """
    ok: bool
    error: str

    base_path: str
    src_dir: str
    dest_dir: str

    pages: List[str] = field(default_factory=list)
    assets: List[str] = field(default_factory=list)
    diagnostics: List[BuildDiagnostic] = field(default_factory=list)

    summary: Dict[str, Any] = field(default_factory=dict)


# -----------------------------------------------------------------------------
# FACTORY FUNCTIONS
# -----------------------------------------------------------------------------

def create_error_result(
        error: str,
        base_path: str,
        src_dir: str = "",
        dest_dir: str = "",
        diagnostics: Optional[List[BuildDiagnostic]] = None,
) -> BuildResult:
    """
    Create a failed build result instance.

    Args:
        error: Detailed error description.
        base_path: The target base directory.
        src_dir: Calculated source root.
        dest_dir: Calculated output root.
        diagnostics: Problems recorded before the abort.

    Returns:
        BuildResult: An immutable error result object.
    """
    return BuildResult(
        ok=False,
        error=error,
        base_path=base_path,
        src_dir=src_dir,
        dest_dir=dest_dir,
        diagnostics=list(diagnostics or []),
    )


def create_success_result(
        base_path: str,
        src_dir: str,
        dest_dir: str,
        pages: List[str],
        assets: List[str],
        diagnostics: List[BuildDiagnostic],
) -> BuildResult:
    """
    Create a successful build result instance with its summary counters.

    Args:
        base_path: Normalized base directory.
        src_dir: Absolute source root.
        dest_dir: Absolute output root.
        pages: Pages written.
        assets: Assets copied.
        diagnostics: Non-fatal problems collected during the run.

    Returns:
        BuildResult: An immutable success result object.
    """
    cycles = sum(1 for d in diagnostics if d.kind == DIAG_CYCLE)
    summary = {
        "dest_dir": dest_dir,
        "pages": len(pages),
        "assets": len(assets),
        "errors": len(diagnostics) - cycles,
        "cycles": cycles,
    }
    return BuildResult(
        ok=True,
        error="",
        base_path=base_path,
        src_dir=src_dir,
        dest_dir=dest_dir,
        pages=list(pages),
        assets=list(assets),
        diagnostics=list(diagnostics),
        summary=summary,
    )
