import os
import sys

DEFAULT_WIDTH = 80


def get_terminal_width() -> int:
    """Return the column count of the terminal, or 80 if not a tty."""
    if not sys.stdout.isatty():
        return DEFAULT_WIDTH
    try:
        columns = os.get_terminal_size(sys.stdout.fileno()).columns
    except OSError:
        return DEFAULT_WIDTH
    return columns if columns > 0 else DEFAULT_WIDTH
