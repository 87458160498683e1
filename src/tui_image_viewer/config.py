import argparse
from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class RenderConfig:
    source_path: Path
    use_rgb: bool = False
    width: int | None = None  # None means use the terminal width
    use_gaussian: bool = False

    @classmethod
    def from_args(cls, args: argparse.Namespace) -> "RenderConfig":
        return cls(
            source_path=Path(args.file),
            use_rgb=args.rgb,
            width=args.width,
            use_gaussian=args.gaussian,
        )
