import numpy as np
from PIL import Image

PixelMatrix = list[list[tuple[int, int, int]]]


def to_pixel_matrix(image: Image.Image) -> PixelMatrix:
    """Flatten an image into rows of (r, g, b) tuples, top to bottom.

    Alpha is discarded and palette images are expanded to their RGB values.
    """
    arr = np.asarray(image.convert("RGB"), dtype=np.uint8)
    return [[(int(r), int(g), int(b)) for r, g, b in row] for row in arr]
