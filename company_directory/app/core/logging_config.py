"""
Logging setup shared by the directory API, ``run.py`` and the CLI.

Records go to stderr and, for the API process, optionally to
``LOG_FILE``.  Handlers are attached to the root logger once per
process; calling ``setup_logging`` again only adjusts levels, so the
CLI can lower the noise after the API package configured itself.

``requests`` logs every connection through ``urllib3`` at DEBUG and
uvicorn logs every request line; both are kept at ``WARNING`` unless
the caller asks otherwise via ``overrides``.
"""

import logging
import sys
from pathlib import Path
from typing import Dict, Optional

LOG_FORMAT = "%(asctime)s %(levelname)-7s %(name)s | %(message)s"
DATE_FORMAT = "%H:%M:%S"

QUIET_LOGGERS: Dict[str, str] = {
    "urllib3": "WARNING",
    "uvicorn.access": "WARNING",
}


def level_from_name(name: str) -> int:
    """``"debug"`` -> ``logging.DEBUG``; unknown names give ``INFO``."""
    value = logging.getLevelName(str(name).upper())
    return value if isinstance(value, int) else logging.INFO


def setup_logging(
    level: str = "INFO",
    logfile: Optional[str] = None,
    overrides: Optional[Dict[str, str]] = None,
) -> None:
    """Configure the root logger and the per-library levels.

    Parameters
    ----------
    level : str
        Root level name, case insensitive.
    logfile : Optional[str]
        Also write records to this file.  Only honoured the first time
        handlers are attached.
    overrides : Optional[Dict[str, str]]
        Logger name to level name, merged over ``QUIET_LOGGERS``.
    """
    root = logging.getLogger()
    root.setLevel(level_from_name(level))

    if not root.handlers:
        formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)
        console = logging.StreamHandler(sys.stderr)
        console.setFormatter(formatter)
        root.addHandler(console)
        if logfile:
            file_handler = logging.FileHandler(Path(logfile).resolve(), encoding="utf-8")
            file_handler.setFormatter(formatter)
            root.addHandler(file_handler)

    for name, name_level in {**QUIET_LOGGERS, **(overrides or {})}.items():
        logging.getLogger(name).setLevel(level_from_name(name_level))
