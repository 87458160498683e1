import logging
from pathlib import Path

from PIL import Image

from tui_image_viewer.errors import ImageLoadError

log = logging.getLogger(__name__)


def load_image(path: str | Path) -> Image.Image:
    """Open and fully decode an image file.

    Decoding is forced so a truncated file fails before any output.
    """
    path = Path(path)
    try:
        image = Image.open(path)
        image.load()
    except (OSError, SyntaxError, ValueError, Image.DecompressionBombError) as exc:
        raise ImageLoadError(f"cannot open {path}: {exc}") from exc
    log.debug("loaded %s: %dx%d %s", path, image.width, image.height, image.mode)
    return image
