"""Main entry point for the image viewer (thin wrapper)."""

from __future__ import annotations

import argparse
from dataclasses import dataclass
from pathlib import Path

from core.config import TITLE
from core.dispatch import WindowMode
from core.viewport import LogicalCanvas
from utils.protocols import ImageLoadError


@dataclass
class RunConfig:
    image_path: str
    fullscreen: bool
    canvas_size: tuple[int, int] | None
    smooth: bool
    vsync: bool
    quiet: bool

    @property
    def mode(self) -> WindowMode:
        return WindowMode.FULLSCREEN if self.fullscreen else WindowMode.WINDOWED


def _parse_size(text: str) -> tuple[int, int]:
    """Parse a WIDTHxHEIGHT string into a pair of positive ints."""
    parts = text.lower().split("x")
    if len(parts) != 2:
        raise ValueError(f"expected WIDTHxHEIGHT, got '{text}'")
    width, height = (int(p) for p in parts)
    if width <= 0 or height <= 0:
        raise ValueError(f"size must be positive, got '{text}'")
    return width, height


def _build_parser() -> argparse.ArgumentParser:
    epilog = "\n".join(
        [
            "Controls:",
            "  Left-drag  pan",
            "  Wheel      zoom (down = in, up = out)",
            "  F          toggle fullscreen",
            "  R          reset view (re-fit image, reset pan and zoom)",
            "  0          actual size",
            "  Q / Esc    quit",
        ]
    )
    parser = argparse.ArgumentParser(
        prog=TITLE,
        description="Minimal single-image viewer",
        formatter_class=argparse.RawTextHelpFormatter,
        epilog=epilog,
    )
    parser.add_argument("image_path", help="Path to the image file to display")
    parser.add_argument(
        "--fullscreen",
        action="store_true",
        help="Start in fullscreen (borderless) mode",
    )
    parser.add_argument(
        "--canvas",
        default=None,
        metavar="WxH",
        help="Logical canvas size (default: desktop resolution)",
    )
    parser.add_argument(
        "--no-smooth",
        action="store_true",
        help="Use nearest-neighbour scaling instead of smooth filtering",
    )
    parser.add_argument(
        "--no-vsync",
        action="store_true",
        help="Do not pace frames to the display refresh rate",
    )
    parser.add_argument(
        "--quiet",
        action="store_true",
        help="Do not print status messages",
    )
    return parser


def _parse_args(args: argparse.Namespace) -> RunConfig:
    canvas_size = None if args.canvas is None else _parse_size(args.canvas)
    return RunConfig(
        image_path=args.image_path,
        fullscreen=args.fullscreen,
        canvas_size=canvas_size,
        smooth=not args.no_smooth,
        vsync=not args.no_vsync,
        quiet=args.quiet,
    )


def _announce_config(config: RunConfig, canvas: LogicalCanvas) -> None:
    if config.quiet:
        return
    print(f"Opening {Path(config.image_path).name}")
    print(f"Logical canvas: {canvas.width}x{canvas.height}")
    if config.fullscreen:
        print("Starting in fullscreen mode")
    if not config.smooth:
        print("Smooth scaling: disabled")
    if not config.vsync:
        print("VSync: disabled")


def main(argv: list[str] | None = None) -> None:
    """Entry point."""
    parser = _build_parser()
    args = parser.parse_args(argv)
    try:
        config = _parse_args(args)
    except ValueError as exc:
        parser.error(f"argument --canvas: {exc}")

    # Deferred so that argument errors exit before pygame starts up
    from ui.backend import PygameBackend, desktop_size
    from viewer import ImageViewer

    display_size = desktop_size()
    canvas = LogicalCanvas(*(config.canvas_size or display_size))
    backend = PygameBackend(canvas, smooth=config.smooth)
    try:
        try:
            image = backend.load_image(config.image_path)
        except ImageLoadError as exc:
            raise SystemExit(f"{TITLE}: {exc}") from exc

        _announce_config(config, canvas)
        viewer = ImageViewer(
            backend,
            image,
            canvas,
            mode=config.mode,
            vsync=config.vsync,
            fullscreen_size=display_size,
        )
        viewer.run()
    finally:
        backend.shutdown()


if __name__ == "__main__":
    main()
