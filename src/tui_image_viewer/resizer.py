import logging

from PIL import Image

from tui_image_viewer.terminal import get_terminal_width

log = logging.getLogger(__name__)


def target_size(image_size: tuple[int, int], width: int) -> tuple[int, int]:
    """Fit (width, height) inside `width` columns, keeping the aspect ratio.

    Images already narrower than `width` keep their size; they are never enlarged.
    """
    src_width, src_height = image_size
    if width >= src_width:
        return (src_width, src_height)
    return (width, max(1, src_height * width // src_width))


def resize(image: Image.Image, width: int | None = None, gaussian: bool = False) -> Image.Image:
    if width is None:
        width = get_terminal_width()
    size = target_size(image.size, width)
    # Pillow has no gaussian kernel; bicubic is the closest smooth one
    resample = Image.BICUBIC if gaussian else Image.NEAREST
    log.debug("resizing %dx%d -> %dx%d (%s)", *image.size, *size, "bicubic" if gaussian else "nearest")
    return image.resize(size, resample)
