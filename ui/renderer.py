"""Rendering of the placed image through the camera view and viewport."""

from __future__ import annotations

import math
from dataclasses import dataclass

import pygame

from core.config import BACKGROUND_COLOR
from core.maths import Rect, Size2
from core.view import CameraView, ImagePlacement
from core.viewport import FULL_VIEWPORT, LogicalCanvas, viewport_to_pixels


@dataclass(frozen=True)
class BlitPlan:
    """Source region of the image and its destination in window pixels."""

    src: pygame.Rect
    dest: pygame.Rect


def plan_blit(
    canvas: LogicalCanvas,
    camera: CameraView,
    viewport: Rect,
    window_size: tuple[int, int],
    placement: ImagePlacement,
    image_size: tuple[int, int],
) -> BlitPlan | None:
    """Work out which part of the image is visible and where it goes.

    Only the visible part of the image is cropped and scaled, so a deep zoom
    never scales the whole source. Returns None when nothing is visible.
    """
    target = viewport_to_pixels(viewport, window_size)
    if target.is_empty:
        return None
    view = camera.visible_rect(canvas)
    img_w, img_h = image_size
    if view.is_empty or img_w <= 0 or img_h <= 0:
        return None
    if placement.scale.x <= 0 or placement.scale.y <= 0:
        return None

    placed = placement.dest_rect(Size2(img_w, img_h))
    visible = placed.intersection(view)
    if visible.is_empty:
        return None

    # Canvas units -> window pixels
    px_x = target.w / view.w
    px_y = target.h / view.h

    src_left = max(0, math.floor((visible.min_x - placed.x) / placement.scale.x))
    src_top = max(0, math.floor((visible.min_y - placed.y) / placement.scale.y))
    src_right = min(img_w, math.ceil((visible.max_x - placed.x) / placement.scale.x))
    src_bottom = min(img_h, math.ceil((visible.max_y - placed.y) / placement.scale.y))
    if src_right <= src_left or src_bottom <= src_top:
        return None

    # Whole source pixels may overhang the target; Renderer.draw clips them
    src_w = src_right - src_left
    src_h = src_bottom - src_top
    dest_left = target.x + (placed.x + src_left * placement.scale.x - view.x) * px_x
    dest_top = target.y + (placed.y + src_top * placement.scale.y - view.y) * px_y
    dest_w = max(1, round(src_w * placement.scale.x * px_x))
    dest_h = max(1, round(src_h * placement.scale.y * px_y))

    return BlitPlan(
        src=pygame.Rect(src_left, src_top, src_w, src_h),
        dest=pygame.Rect(round(dest_left), round(dest_top), dest_w, dest_h),
    )


class Renderer:
    """Draws one image onto a window surface using the current view."""

    def __init__(
        self,
        canvas: LogicalCanvas,
        smooth: bool = True,
        background: tuple[int, int, int] = BACKGROUND_COLOR,
    ):
        self.canvas = canvas
        self.smooth = smooth
        self.background = background
        self.viewport = FULL_VIEWPORT
        self.camera = CameraView.for_canvas(canvas)

    def set_view(self, viewport: Rect, camera: CameraView) -> None:
        self.viewport = viewport
        self.camera = camera

    def _scale(self, surface: pygame.Surface, size: tuple[int, int]) -> pygame.Surface:
        if surface.get_size() == size:
            return surface
        # smoothscale only handles 24 and 32 bit surfaces
        if self.smooth and surface.get_bitsize() in (24, 32):
            return pygame.transform.smoothscale(surface, size)
        return pygame.transform.scale(surface, size)

    def draw(
        self,
        screen: pygame.Surface,
        placement: ImagePlacement,
        image: pygame.Surface,
    ) -> None:
        """Clear the window and draw the visible part of the image."""
        screen.fill(self.background)
        plan = plan_blit(
            self.canvas,
            self.camera,
            self.viewport,
            screen.get_size(),
            placement,
            image.get_size(),
        )
        if plan is None:
            return

        target = viewport_to_pixels(self.viewport, screen.get_size()).to_pygame_rect()
        region = image.subsurface(plan.src)
        scaled = self._scale(region, plan.dest.size)
        previous_clip = screen.get_clip()
        screen.set_clip(target)
        screen.blit(scaled, plan.dest.topleft)
        screen.set_clip(previous_clip)
