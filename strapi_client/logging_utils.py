"""
Logging utilities: colored console output when running in a TTY.
"""

import logging
import os
import sys

CLIENT_LOGGER = "strapi_client"

# ANSI codes (reset is always appended)
_RESET = "\033[0m"
_LEVEL_COLORS = {
    logging.DEBUG: "\033[36m",    # cyan
    logging.INFO: "\033[32m",     # green
    logging.WARNING: "\033[33m",  # yellow
    logging.ERROR: "\033[31m",    # red
}


class ColoredFormatter(logging.Formatter):
    """
    Formatter that adds ANSI colors to the whole line when the output stream is a TTY.
    File handlers should use a plain Formatter (no color).
    """

    def __init__(self, fmt=None, datefmt=None, use_color=None):
        super().__init__(fmt, datefmt)
        if use_color is None:
            use_color = self._stderr_is_tty()
        self.use_color = use_color

    @staticmethod
    def _stderr_is_tty():
        isatty = getattr(sys.stderr, "isatty", None)
        return bool(isatty and isatty())

    def format(self, record):
        message = super().format(record)
        if self.use_color and record.levelno in _LEVEL_COLORS:
            return _LEVEL_COLORS[record.levelno] + message + _RESET
        return message


def setup_logging(
    level=logging.INFO,
    client_level=None,
    log_format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
    log_file=None,
):
    """
    Configure the root logger: colored console (when TTY) and optional file.
    If STRAPI_LOG_FILE env var is set, it overrides the log_file argument.

    client_level sets the level of the strapi_client loggers alone, e.g.
    logging.DEBUG to trace every request while keeping other libraries at
    level. It defaults to level.
    """
    root = logging.getLogger()
    root.setLevel(level)
    # Remove existing handlers so we control console + file
    for h in root.handlers[:]:
        root.removeHandler(h)

    console = logging.StreamHandler(sys.stderr)
    console.setFormatter(ColoredFormatter(log_format, datefmt=datefmt))
    root.addHandler(console)

    path = os.environ.get("STRAPI_LOG_FILE") or log_file
    if path:
        fh = logging.FileHandler(path, encoding="utf-8")
        fh.setFormatter(logging.Formatter(log_format, datefmt=datefmt))
        root.addHandler(fh)

    logging.getLogger(CLIENT_LOGGER).setLevel(level if client_level is None else client_level)

    return root
