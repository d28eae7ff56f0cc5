from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Orchestrates the CLI lifecycle: logging bootstrap, configuration merge,
build execution and result rendering.
"""

import argparse
import json
import sys
from dataclasses import asdict
from typing import Any, Dict, List, Optional

from elbuilder.core.pipeline.engine import run_build
from elbuilder.domain.build_models import BuildResult
from elbuilder.domain.config import get_default_config
from elbuilder.infra.logging import LoggingConfig, configure_logging, get_logger, shutdown_logging
from elbuilder.interface.cli import args as cli_args

logger = get_logger(__name__)

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    """
    Execute the main CLI application workflow.

    Args:
        argv: Optional list of command line arguments. Defaults to sys.argv.

    Returns:
        int: Process exit code (0 for success, non-zero for failure).
    """
    # 1. Argument parsing phase
    parser = cli_args.build_parser()
    args = parser.parse_args(argv)

    # 2. Logging bootstrap (console stderr, optional file)
    log_level = "DEBUG" if args.debug else "INFO"
    configure_logging(LoggingConfig(level=log_level, console=True, log_file=args.log_file))

    try:
        return _run(args)
    finally:
        shutdown_logging()


def _run(args: argparse.Namespace) -> int:
    # 3. Merge command-line overrides over the defaults
    raw_conf = _merge_config(get_default_config(), cli_args.args_to_overrides(args))
    logger.debug(f"Targeting base directory: {raw_conf['base_dir']}")

    # 4. Build execution phase
    try:
        result = run_build(raw_conf)
    except KeyboardInterrupt:
        logger.warning("Build interrupted by user.")
        return 130
    except Exception as e:
        logger.critical(f"Build failed unexpectedly: {e}", exc_info=True)
        return 1

    # 5. Output rendering phase
    if args.json_output:
        print(json.dumps(asdict(result), ensure_ascii=False, indent=2))
    else:
        _print_human_summary(result)

    return 0 if result.ok else 1

# -----------------------------------------------------------------------------
# CONFIGURATION MERGING
# -----------------------------------------------------------------------------

def _merge_config(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    """
    Shallow merge of override values into the base configuration.

    Only keys already present in ``base`` are merged and ``None`` values
    are ignored.
    """
    out = dict(base)
    for k, v in overrides.items():
        if k in base and v is not None:
            out[k] = v
    return out

# -----------------------------------------------------------------------------
# VIEW RENDERING (HUMAN READABLE)
# -----------------------------------------------------------------------------

def _print_human_summary(result: BuildResult) -> None:
    """
    Print the build result to standard output.

    Args:
        result: The build result to render.
    """
    if not result.ok:
        print(f"ERROR: {result.error}", file=sys.stderr)
        return

    summary = result.summary
    print(f"Build completed: {result.dest_dir}")

    stats_keys = {
        "pages": "Pages built",
        "assets": "Assets copied",
        "errors": "File errors",
        "cycles": "Component cycles",
    }
    for key, label in stats_keys.items():
        print(f"{label}: {summary.get(key, 0)}")

    if result.diagnostics:
        print("\nDiagnostics:")
        for diag in result.diagnostics:
            print(f"  - [{diag.kind}] {diag.message}")

# -----------------------------------------------------------------------------
# CLI ENTRYPOINT
# -----------------------------------------------------------------------------

if __name__ == "__main__":
    sys.exit(main())
