from dataclasses import dataclass

# 256-colour palette indices for the four grayscale buckets
BLACK = 0
DARK_GREY = 8
GREY = 7
WHITE = 15

LUMA_THRESHOLDS = [
    (64, BLACK),
    (128, DARK_GREY),
    (192, GREY),
]


@dataclass(frozen=True)
class Rgb:
    r: int
    g: int
    b: int


Colour = int | Rgb


def luma(r: int, g: int, b: int) -> int:
    """Unweighted mean of the three channels, truncated."""
    return (r + g + b) // 3


def gray_colour(r: int, g: int, b: int) -> int:
    """Map a pixel to black, dark grey, grey or white by its luma."""
    value = luma(r, g, b)
    for upper, colour in LUMA_THRESHOLDS:
        if value < upper:
            return colour
    return WHITE


def foreground(colour: Colour) -> str:
    """SGR escape that sets the foreground to the given colour."""
    if isinstance(colour, Rgb):
        return f"\033[38;2;{colour.r};{colour.g};{colour.b}m"
    return f"\033[38;5;{colour}m"
