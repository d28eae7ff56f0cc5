from __future__ import annotations

"""
Core build pipeline.

This module coordinates a complete site build:
1. Validates configuration and paths.
2. Removes and recreates the output root.
3. Walks the source tree, skipping the component and layout pools.
4. Resolves every HTML page (components, then layout) and writes it.
5. Copies every other file byte-for-byte.

Per-file problems are recorded as diagnostics and never abort the run;
only an unusable source root or output root does.
"""

import logging
import os
from typing import Any, Dict, List, Optional

from elbuilder.core.pipeline.components.writer import copy_asset, write_output_file
from elbuilder.core.pipeline.validator import validate_config
from elbuilder.core.services.scanner import yield_source_files
from elbuilder.core.templating.context import ResolutionContext
from elbuilder.core.templating.layout import LayoutApplier
from elbuilder.core.templating.resolver import ComponentResolver
from elbuilder.domain.build_models import (
    BuildResult,
    create_error_result,
    create_success_result,
)
from elbuilder.domain.constants import DIAG_COPY, DIAG_WRITE
from elbuilder.infra.fs import normalize_path, reset_directory

logger = logging.getLogger(__name__)


def run_build(config: Optional[Dict[str, Any]]) -> BuildResult:
    """
    Execute the full build.

    Args:
        config: The configuration dictionary (raw or partial).

    Returns:
        BuildResult: Object containing status, counters and diagnostics.
    """
    logger.info("Build started.")

    # -------------------------------------------------------------------------
    # 1) Config & Path Normalization
    # -------------------------------------------------------------------------
    cfg, warnings = validate_config(config, strict=False)

    for warning in warnings:
        logger.warning(f"Configuration Warning: {warning}")

    base_path = normalize_path(cfg["base_dir"], os.getcwd())
    src_dir = os.path.join(base_path, cfg["src_dir_name"])
    dest_dir = os.path.join(base_path, cfg["build_dir_name"])

    if not os.path.isdir(src_dir):
        msg = f"Invalid source directory: {src_dir}"
        logger.critical(msg)
        return create_error_result(msg, base_path, src_dir, dest_dir)

    # -------------------------------------------------------------------------
    # 2) Output Root Preparation
    # -------------------------------------------------------------------------
    ok, err = reset_directory(dest_dir)
    if not ok:
        msg = f"Failed to reset output directory {dest_dir}: {err}"
        logger.critical(msg)
        return create_error_result(msg, base_path, src_dir, dest_dir)

    # -------------------------------------------------------------------------
    # 3) Page & Asset Processing
    # -------------------------------------------------------------------------
    context = ResolutionContext(
        src_dir=src_dir,
        dest_dir=dest_dir,
        components_dir=cfg["components_dir_name"],
        layouts_dir=cfg["layouts_dir_name"],
    )
    resolver = ComponentResolver(context)
    applier = LayoutApplier(resolver)

    pages: List[str] = []
    assets: List[str] = []
    reserved = (cfg["components_dir_name"], cfg["layouts_dir_name"])

    try:
        for entry in yield_source_files(src_dir, reserved):
            rel_path = entry["rel_path"]

            if entry["ext"] == cfg["html_extension"]:
                if _build_page(rel_path, resolver, applier):
                    pages.append(rel_path)
            elif _copy_file(rel_path, context):
                assets.append(rel_path)

    except OSError as e:
        msg = f"Failed to enumerate source directory {src_dir}: {e}"
        logger.critical(msg)
        return create_error_result(msg, base_path, src_dir, dest_dir, context.diagnostics)

    # -------------------------------------------------------------------------
    # 4) Finalize
    # -------------------------------------------------------------------------
    result = create_success_result(
        base_path, src_dir, dest_dir, pages, assets, context.diagnostics
    )
    logger.info(
        f"Build completed: {result.summary['pages']} page(s), "
        f"{result.summary['assets']} asset(s), {result.summary['errors']} error(s), "
        f"{result.summary['cycles']} cycle(s)."
    )
    return result


# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _build_page(rel_path: str, resolver: ComponentResolver, applier: LayoutApplier) -> bool:
    """Resolve a single page and persist it. Returns False if it was skipped."""
    context = resolver.context

    content = resolver.resolve(rel_path, set())
    content = applier.apply_layout(content)

    try:
        write_output_file(context.dest_file(rel_path), content)
    except OSError as e:
        msg = f"Failed to write '{rel_path}': {e}"
        logger.error(msg)
        context.report(DIAG_WRITE, rel_path, msg)
        return False

    logger.debug(f"Built page: {rel_path}")
    return True


def _copy_file(rel_path: str, context: ResolutionContext) -> bool:
    """Copy a single asset. Returns False if it was skipped."""
    try:
        copy_asset(context.source_file(rel_path), context.dest_file(rel_path))
    except OSError as e:
        msg = f"Failed to copy '{rel_path}': {e}"
        logger.error(msg)
        context.report(DIAG_COPY, rel_path, msg)
        return False

    logger.debug(f"Copied asset: {rel_path}")
    return True
