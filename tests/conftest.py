import io
import re

import pytest
from PIL import Image

SGR = re.compile(r"\033\[38;(5;\d+|2;\d+;\d+;\d+)m█\033\[0m")


def glyph_colours(line: str) -> list[str]:
    """Return the colour spec of every glyph in a rendered line."""
    return SGR.findall(line)


@pytest.fixture
def image_file(tmp_path):
    """Save a list of pixel rows as a PNG and return its path."""

    def _make(rows, mode="RGB", name="image.png"):
        height = len(rows)
        width = len(rows[0])
        img = Image.new(mode, (width, height))
        img.putdata([px for row in rows for px in row])
        path = tmp_path / name
        img.save(path)
        return path

    return _make


class FailingStream(io.StringIO):
    """Text stream that raises BrokenPipeError after `fail_after` writes."""

    def __init__(self, fail_after):
        super().__init__()
        self.fail_after = fail_after
        self.writes = 0

    def write(self, s):
        if self.writes >= self.fail_after:
            raise BrokenPipeError("Broken pipe")
        self.writes += 1
        return super().write(s)
