"""Aspect-preserving viewport fitting for a fixed logical canvas."""

from __future__ import annotations

from dataclasses import dataclass

from core.maths import Rect, Size2, Vector2

EMPTY_VIEWPORT = Rect(0.0, 0.0, 0.0, 0.0)
FULL_VIEWPORT = Rect(0.0, 0.0, 1.0, 1.0)


@dataclass(frozen=True)
class LogicalCanvas:
    """Fixed-size coordinate space the image is laid out in.

    Window resizes only move the viewport the canvas is projected into; they
    never change the canvas itself.
    """

    width: int
    height: int

    def __post_init__(self):
        if self.width <= 0 or self.height <= 0:
            raise ValueError(
                f"Logical canvas must be positive, got {self.width}x{self.height}"
            )

    @property
    def size(self) -> Size2:
        return Size2(float(self.width), float(self.height))

    @property
    def center(self) -> Vector2:
        return Vector2(self.width / 2.0, self.height / 2.0)


def fit_viewport(new_width: int, new_height: int, canvas: LogicalCanvas) -> Rect:
    """Compute the normalized viewport that keeps the canvas aspect ratio.

    Args:
        new_width: Physical window width in pixels
        new_height: Physical window height in pixels
        canvas: Logical canvas being projected into the window

    Returns:
        Rect(left, top, width, height) in [0, 1] window fractions. A window
        that is proportionally wider than the canvas gets a centered pillarbox,
        a taller one a centered letterbox. A zero-sized window (e.g. while
        minimized) yields the empty rectangle.
    """
    if new_width <= 0 or new_height <= 0:
        return EMPTY_VIEWPORT

    ratio_w = new_width / canvas.width
    ratio_h = new_height / canvas.height

    if ratio_w > ratio_h:
        width = ratio_h / ratio_w
        return Rect(0.5 * (1.0 - width), 0.0, width, 1.0)
    if ratio_w < ratio_h:
        height = ratio_w / ratio_h
        return Rect(0.0, 0.5 * (1.0 - height), 1.0, height)
    return FULL_VIEWPORT


def viewport_to_pixels(viewport: Rect, window_size: tuple[int, int]) -> Rect:
    """Map a normalized viewport onto window pixel coordinates."""
    win_w, win_h = window_size
    return Rect(
        viewport.x * win_w,
        viewport.y * win_h,
        viewport.w * win_w,
        viewport.h * win_h,
    )
