from __future__ import annotations

"""
Logging Configuration.

The CLI chooses the level, whether to echo to the console and an optional
log file. Record formats and file rotation limits are fixed for the whole
package.
"""

import logging
from dataclasses import dataclass
from typing import Optional

CONSOLE_FORMAT = "%(levelname)s | %(message)s"
FILE_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Rotation limits for --log-file
LOG_MAX_BYTES = 512 * 1024
LOG_BACKUP_COUNT = 2

_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class LoggingConfig:
    """
    Logging options resolved from the command line.

    Attributes:
        level: Level name; unknown names fall back to INFO.
        console: Echo records to stderr.
        log_file: Optional path of a rotating log file.
    """
    level: str = "INFO"
    console: bool = True
    log_file: Optional[str] = None

    @property
    def level_no(self) -> int:
        name = (self.level or "").strip().upper()
        if name == "WARN":
            name = "WARNING"
        return getattr(logging, name) if name in _LEVELS else logging.INFO
