"""Logging setup for the Pomodoro timer."""

import logging
from pathlib import Path
from typing import Optional, Union

from textual.logging import TextualHandler

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def setup_logging(
    level: Union[int, str] = logging.WARNING, log_file: Optional[Path] = None
) -> None:
    """Route log records somewhere that will not corrupt the terminal UI.

    Args:
        level: Root level for the pmdr loggers.
        log_file: Write records here instead of the Textual devtools console.
    """
    if log_file is not None:
        handler: logging.Handler = logging.FileHandler(log_file, encoding="utf-8")
    else:
        handler = TextualHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))

    logger = logging.getLogger("pmdr")
    logger.setLevel(level)
    logger.addHandler(handler)
