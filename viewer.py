"""Viewer orchestration: ties backend, dispatcher and view state together."""

from __future__ import annotations

from typing import Any

from core.dispatch import AppState, WindowMode, apply_resize, dispatch
from core.viewport import LogicalCanvas
from utils.protocols import BackendProtocol

WINDOW_ORIGIN = (0, 0)


class ImageViewer:
    """Event-driven single-image viewer.

    Each loop iteration waits for one event, dispatches it, resolves a pending
    window swap if the event requested one, then redraws when dirty.
    """

    def __init__(
        self,
        backend: BackendProtocol,
        image: Any,
        canvas: LogicalCanvas,
        mode: WindowMode = WindowMode.WINDOWED,
        vsync: bool = True,
        fullscreen_size: tuple[int, int] | None = None,
    ):
        self.backend = backend
        self.canvas = canvas
        self.vsync = vsync
        self.fullscreen_size = fullscreen_size or (canvas.width, canvas.height)

        self.window = backend.create_window(mode, self.window_size_for(mode))
        self.image = backend.prepare_image(image)
        self.state = AppState.create(canvas, backend.image_size(self.image), mode=mode)
        self._configure_window()

    def window_size_for(self, mode: WindowMode) -> tuple[int, int]:
        """Fullscreen covers the display; windowed mode opens at canvas size."""
        if mode is WindowMode.FULLSCREEN:
            return self.fullscreen_size
        return (self.canvas.width, self.canvas.height)

    def _configure_window(self) -> None:
        """Reapply per-window settings after a window is (re)created."""
        self.backend.set_window_position(WINDOW_ORIGIN)
        self.backend.set_vsync(self.vsync)
        width, height = self.backend.window_size()
        apply_resize(self.state, width, height)

    def resolve_pending_swap(self) -> bool:
        swap = self.state.take_pending_swap()
        if swap is None:
            return False
        window = self.backend.create_window(swap.mode, self.window_size_for(swap.mode))
        self._configure_window()
        # The previous handle is only released once the new one is configured
        self.window = window
        self.state.dirty = True
        return True

    def redraw(self) -> None:
        controller = self.state.controller
        self.backend.set_view(self.state.viewport, controller.camera)
        self.backend.draw_frame(controller.placement, self.image)
        self.backend.present()
        self.state.dirty = False

    def step(self, event) -> bool:
        """Handle one event; return False once the viewer should exit."""
        if event is not None:
            dispatch(self.state, event)
        if not self.state.running:
            return False
        self.resolve_pending_swap()
        if self.state.dirty:
            self.redraw()
        return True

    def run(self) -> None:
        """Loop until quit; the caller owns backend shutdown."""
        if self.state.dirty:
            self.redraw()
        while self.step(self.backend.wait_event()):
            pass
