"""Camera view and image placement for the logical canvas."""

from __future__ import annotations

from dataclasses import dataclass, field, replace

from core.config import MAX_ZOOM, MIN_ZOOM, ZOOM_STEP
from core.maths import Rect, Size2, Vector2
from core.viewport import LogicalCanvas


@dataclass
class ImagePlacement:
    """Scale + position applied to the source image on the canvas."""

    position: Vector2 = field(default_factory=lambda: Vector2(0.0, 0.0))
    scale: Vector2 = field(default_factory=lambda: Vector2(1.0, 1.0))

    def scaled_size(self, image_size: Size2) -> Size2:
        return Size2(image_size.w * self.scale.x, image_size.h * self.scale.y)

    def dest_rect(self, image_size: Size2) -> Rect:
        """Where the image lands, in canvas coordinates."""
        size = self.scaled_size(image_size)
        return Rect(self.position.x, self.position.y, size.w, size.h)


@dataclass(frozen=True)
class CameraView:
    """Visible region of the canvas: a center point and a zoom factor.

    ``zoom`` is the ratio of the visible extent to the canvas size, so 1.0
    shows the whole canvas and values below 1 magnify.
    """

    center: Vector2
    zoom: float = 1.0

    def __post_init__(self):
        if not self.zoom > 0.0:
            raise ValueError(f"Camera zoom must be positive, got {self.zoom}")

    @classmethod
    def for_canvas(cls, canvas: LogicalCanvas) -> "CameraView":
        return cls(center=canvas.center, zoom=1.0)

    def extent(self, canvas: LogicalCanvas) -> Size2:
        return canvas.size.scaled(self.zoom)

    def visible_rect(self, canvas: LogicalCanvas) -> Rect:
        return Rect.from_center(self.center, self.extent(canvas))


def center_and_maximize(
    target_size: tuple[int, int], image_size: tuple[int, int]
) -> ImagePlacement:
    """Fit the image into the target on its limiting axis and center it.

    Args:
        target_size: (width, height) of the area the image is fitted into
        image_size: (width, height) of the source image in pixels

    Returns:
        Placement with a uniform scale. The scaled extent on the free axis
        is truncated to whole pixels before centering, so the offset may be
        off by one pixel.
    """
    target_w, target_h = (int(v) for v in target_size)
    image_w, image_h = (int(v) for v in image_size)
    if target_w <= 0 or target_h <= 0 or image_w <= 0 or image_h <= 0:
        raise ValueError(
            f"Cannot fit a {image_w}x{image_h} image into {target_w}x{target_h}"
        )

    y_ratio = target_h / image_h
    x_ratio = target_w / image_w
    if y_ratio < x_ratio:
        scaled_w = int(y_ratio * image_w)
        offset_x = (target_w - scaled_w) // 2
        return ImagePlacement(Vector2(offset_x, 0.0), Vector2(y_ratio, y_ratio))

    scaled_h = int(x_ratio * image_h)
    offset_y = (target_h - scaled_h) // 2
    return ImagePlacement(Vector2(0.0, offset_y), Vector2(x_ratio, x_ratio))


def reset_zoom(placement: ImagePlacement) -> ImagePlacement:
    """Show the image at its actual size without re-centering it."""
    return ImagePlacement(Vector2(placement.position), Vector2(1.0, 1.0))


def apply_zoom(
    camera: CameraView,
    scroll_delta: float,
    *,
    min_zoom: float = MIN_ZOOM,
    max_zoom: float = MAX_ZOOM,
) -> CameraView:
    """Zoom the camera by one step per scroll event.

    Only the sign of the delta matters: negative scrolls shrink the visible
    extent by ``1 / ZOOM_STEP`` (zoom in), positive scrolls grow it by
    ``ZOOM_STEP`` (zoom out). Steps compose multiplicatively. A zero delta
    leaves the camera untouched.
    """
    if scroll_delta < 0:
        factor = 1.0 / ZOOM_STEP
    elif scroll_delta > 0:
        factor = ZOOM_STEP
    else:
        return camera
    zoom = max(min_zoom, min(max_zoom, camera.zoom * factor))
    return replace(camera, center=Vector2(camera.center), zoom=zoom)


def apply_pan(camera: CameraView, pointer_delta: tuple[float, float]) -> CameraView:
    """Move the camera opposite to the pointer drag.

    The delta is applied in canvas units without compensating for zoom, so
    the same drag covers more of the visible content when zoomed in.
    """
    dx, dy = pointer_delta
    return replace(camera, center=camera.center - Vector2(dx, dy))


class ViewController:
    """Owns the image placement and camera view for a single image."""

    def __init__(
        self,
        canvas: LogicalCanvas,
        image_size: tuple[int, int],
        min_zoom: float = MIN_ZOOM,
        max_zoom: float = MAX_ZOOM,
    ):
        self.canvas = canvas
        self.image_size = (int(image_size[0]), int(image_size[1]))
        self.min_zoom = min_zoom
        self.max_zoom = max_zoom

        self.placement = ImagePlacement()
        self.camera = CameraView.for_canvas(canvas)
        self.reset_view()

    @property
    def has_image(self) -> bool:
        return self.image_size[0] > 0 and self.image_size[1] > 0

    def reset_camera(self) -> bool:
        camera = CameraView.for_canvas(self.canvas)
        changed = camera != self.camera
        self.camera = camera
        return changed

    def reset_view(self) -> bool:
        """Center and maximize the image on the canvas.

        Returns False and keeps the current placement for a zero-sized image.
        """
        if not self.has_image:
            return False
        self.placement = center_and_maximize(
            (self.canvas.width, self.canvas.height), self.image_size
        )
        return True

    def actual_size(self) -> bool:
        self.placement = reset_zoom(self.placement)
        return True

    def zoom(self, scroll_delta: float) -> bool:
        camera = apply_zoom(
            self.camera,
            scroll_delta,
            min_zoom=self.min_zoom,
            max_zoom=self.max_zoom,
        )
        changed = camera.zoom != self.camera.zoom
        self.camera = camera
        return changed

    def pan(self, dx: float, dy: float) -> bool:
        if dx == 0 and dy == 0:
            return False
        self.camera = apply_pan(self.camera, (dx, dy))
        return True
