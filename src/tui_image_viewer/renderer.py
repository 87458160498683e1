import sys
from collections.abc import Iterator
from typing import TextIO

from tui_image_viewer.colours import Rgb, foreground, gray_colour
from tui_image_viewer.converter import PixelMatrix

BLOCK = "█"
RESET = "\033[0m"


def render_row(row: list[tuple[int, int, int]], use_rgb: bool) -> str:
    """Render one row of pixels as styled block glyphs."""
    parts = []
    for r, g, b in row:
        colour = Rgb(r, g, b) if use_rgb else gray_colour(r, g, b)
        parts.append(f"{foreground(colour)}{BLOCK}{RESET}")
    return "".join(parts)


def render_lines(matrix: PixelMatrix, use_rgb: bool) -> Iterator[str]:
    for row in matrix:
        yield render_row(row, use_rgb)


def show(matrix: PixelMatrix, use_rgb: bool, stream: TextIO | None = None) -> None:
    """Write the matrix to a stream, one line per row.

    Write errors propagate; rows already written stay on the stream.
    """
    if stream is None:
        stream = sys.stdout
    for line in render_lines(matrix, use_rgb):
        stream.write(line)
        stream.write("\n")
    stream.flush()
