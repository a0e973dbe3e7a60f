"""
Colored console logging shared by askbridge and uvicorn
"""

import logging


class ColoredFormatter(logging.Formatter):
    """
    Uvicorn-style formatter that colors the level name.

    Coloring is applied to a copy of the record, so handlers that format
    the same record afterwards (pytest's capture, a file handler) still
    see the plain level name.
    """

    COLORS = {
        "DEBUG": "\033[36m",      # cyan
        "INFO": "\033[32m",       # green
        "WARNING": "\033[33m",    # yellow
        "ERROR": "\033[31m",      # red
        "CRITICAL": "\033[35m",   # magenta
    }
    RESET = "\033[0m"

    def format(self, record):
        colored = logging.makeLogRecord(record.__dict__)
        if colored.levelname in self.COLORS:
            colored.levelname = f"{self.COLORS[colored.levelname]}{colored.levelname}{self.RESET}"
        return super().format(colored)


def setup_logging(level: str = "INFO") -> logging.Logger:
    """
    Install the colored handler on the root logger.

    Args:
        level: level name from ASKBRIDGE_LOG_LEVEL

    Calling it again replaces the root handlers (force=True) rather than
    stacking a second one.

    The Listener starts uvicorn with log_config=None, leaving its loggers
    to propagate here instead of installing uvicorn's own handlers.
    """
    handler = logging.StreamHandler()
    handler.setFormatter(ColoredFormatter("%(levelname)s:     %(message)s"))
    logging.basicConfig(level=level, handlers=[handler], force=True)
    return logging.getLogger("askbridge")
