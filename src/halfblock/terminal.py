import logging
import os
import sys
from typing import NamedTuple

DEFAULT_COLUMNS = 80
DEFAULT_ROWS = 24

logger = logging.getLogger(__name__)


class TerminalSize(NamedTuple):
    columns: int
    rows: int


def get_terminal_size() -> TerminalSize:
    """Return the terminal's (columns, rows), or (80, 24) if not a tty."""
    if not sys.stdout.isatty():
        logger.debug("stdout is not a tty, assuming %dx%d", DEFAULT_COLUMNS, DEFAULT_ROWS)
        return TerminalSize(DEFAULT_COLUMNS, DEFAULT_ROWS)
    try:
        size = os.get_terminal_size()
    except OSError:
        logger.debug("terminal size unavailable, assuming %dx%d", DEFAULT_COLUMNS, DEFAULT_ROWS)
        return TerminalSize(DEFAULT_COLUMNS, DEFAULT_ROWS)
    return TerminalSize(size.columns or DEFAULT_COLUMNS, size.lines or DEFAULT_ROWS)
