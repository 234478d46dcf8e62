"""Typing protocols for the windowing/rendering backend."""

from __future__ import annotations

from typing import Any, Protocol, TYPE_CHECKING

if TYPE_CHECKING:
    from core.dispatch import WindowMode
    from core.events import ViewerEvent
    from core.maths import Rect
    from core.view import CameraView, ImagePlacement


class ImageLoadError(RuntimeError):
    """Raised when the backend cannot open or decode an image file."""


class BackendProtocol(Protocol):
    def create_window(self, mode: WindowMode, size: tuple[int, int]) -> Any: ...

    def window_size(self) -> tuple[int, int]: ...

    def load_image(self, path: str) -> Any: ...

    def prepare_image(self, image: Any) -> Any: ...

    def image_size(self, image: Any) -> tuple[int, int]: ...

    def wait_event(self) -> ViewerEvent | None: ...

    def set_window_position(self, pos: tuple[int, int]) -> None: ...

    def set_vsync(self, enabled: bool) -> None: ...

    def set_view(self, viewport: Rect, camera: CameraView) -> None: ...

    def draw_frame(self, placement: ImagePlacement, image: Any) -> None: ...

    def present(self) -> None: ...

    def shutdown(self) -> None: ...
