from typing import TextIO

from tui_image_viewer.config import RenderConfig
from tui_image_viewer.converter import to_pixel_matrix
from tui_image_viewer.loader import load_image
from tui_image_viewer.renderer import show
from tui_image_viewer.resizer import resize


def view(config: RenderConfig, stream: TextIO | None = None) -> None:
    """Load, resize, convert and print the configured image."""
    image = load_image(config.source_path)
    image = resize(image, width=config.width, gaussian=config.use_gaussian)
    show(to_pixel_matrix(image), config.use_rgb, stream=stream)
