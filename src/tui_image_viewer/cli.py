import argparse
import logging
import sys
from importlib.metadata import PackageNotFoundError, version

from tui_image_viewer.config import RenderConfig
from tui_image_viewer.errors import ViewerError
from tui_image_viewer.viewer import view

PROG = "tui-image-viewer"


def _positive_int(value: str) -> int:
    width = int(value)
    if width <= 0:
        raise argparse.ArgumentTypeError(f"width must be positive, got {value}")
    return width


def _version() -> str:
    try:
        return version(PROG)
    except PackageNotFoundError:
        return "unknown"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog=PROG, description="View images from your terminal.")
    parser.add_argument("file", metavar="FILE", help="File to show")
    parser.add_argument("--rgb", action="store_true", default=False, help="Use RGB colours (not all terminals support it)")
    parser.add_argument(
        "-w", "--width", type=_positive_int, default=None, help="Output width in columns (default: terminal width)"
    )
    parser.add_argument(
        "-g", "--gaussian", action="store_true", default=False, help="Use a smooth filter to resize instead of nearest"
    )
    parser.add_argument("-v", "--verbose", action="store_true", default=False, help="Log debug details to stderr")
    parser.add_argument("--version", action="version", version=f"%(prog)s {_version()}")
    return parser


def _setup_logging(verbose: bool) -> None:
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))
    logger = logging.getLogger("tui_image_viewer")
    logger.handlers[:] = [handler]
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    logger.propagate = False


def main(argv: list[str] | None = None) -> None:
    args = build_parser().parse_args(argv)
    _setup_logging(args.verbose)
    config = RenderConfig.from_args(args)

    try:
        view(config)
    except ViewerError as exc:
        print(f"{PROG}: {exc}", file=sys.stderr)
        sys.exit(1)
    except (OSError, UnicodeError) as exc:
        print(f"{PROG}: cannot write to stdout: {exc}", file=sys.stderr)
        sys.exit(1)
