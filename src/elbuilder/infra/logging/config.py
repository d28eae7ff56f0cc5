from __future__ import annotations

"""
Logging Configuration Models.

Defines what the CLI can choose (level, console output, log file) and the
fixed formats and rotation limits applied to every build log.
"""

import logging
from dataclasses import dataclass
from typing import Dict, Optional

_LEVEL_MAP: Dict[str, int] = {
    name: getattr(logging, name) for name in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
}
_LEVEL_MAP["WARN"] = logging.WARNING

# Console lines read like compiler diagnostics: "WARNING: Component cycle ..."
CONSOLE_FORMAT: str = "%(levelname)s: %(message)s"
FILE_FORMAT: str = "%(asctime)s %(levelname)-8s [%(name)s] %(message)s"
FILE_DATE_FORMAT: str = "%Y-%m-%dT%H:%M:%S"

# A build log holds one run; a few rotations are plenty
LOG_FILE_MAX_BYTES: int = 256 * 1024
LOG_FILE_BACKUPS: int = 2


@dataclass(frozen=True)
class LoggingConfig:
    """
    Logging options selected on the command line.

    Attributes:
        level: Minimum severity level to capture ("INFO", or "DEBUG" with --debug).
        console: Emit records on stderr.
        log_file: Optional path given with --log-file.
    """
    level: str = "INFO"
    console: bool = True
    log_file: Optional[str] = None
