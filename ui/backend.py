"""pygame implementation of the windowing/rendering backend."""

from __future__ import annotations

import os

import pygame

from core.config import DEFAULT_CANVAS_HEIGHT, DEFAULT_CANVAS_WIDTH, TITLE, VSYNC_FPS
from core.dispatch import WindowMode
from core.events import ViewerEvent
from core.maths import Rect
from core.view import CameraView, ImagePlacement
from core.viewport import LogicalCanvas
from ui.renderer import Renderer
from utils.input import InputHandler
from utils.protocols import ImageLoadError


def window_flags(mode: WindowMode) -> int:
    """Display flags for a window mode.

    Fullscreen is a borderless window covering the desktop rather than an
    exclusive video mode switch.
    """
    if mode is WindowMode.FULLSCREEN:
        return pygame.NOFRAME
    return pygame.RESIZABLE


def desktop_size() -> tuple[int, int]:
    """Native resolution of the primary display."""
    pygame.display.init()
    sizes = pygame.display.get_desktop_sizes()
    if sizes and sizes[0][0] > 0 and sizes[0][1] > 0:
        return sizes[0]
    return DEFAULT_CANVAS_WIDTH, DEFAULT_CANVAS_HEIGHT


class PygameBackend:
    """Owns the pygame display, clock, and event source for the viewer."""

    def __init__(
        self,
        canvas: LogicalCanvas,
        smooth: bool = True,
        title: str = TITLE,
        input_handler: InputHandler | None = None,
    ):
        pygame.init()
        self.canvas = canvas
        self.title = title
        self.input_handler = input_handler or InputHandler()
        self.renderer = Renderer(canvas, smooth=smooth)
        self.clock = pygame.time.Clock()
        self.screen: pygame.Surface | None = None
        self.vsync = False

    def create_window(self, mode: WindowMode, size: tuple[int, int]) -> pygame.Surface:
        """(Re)create the display window; pygame keeps a single display surface."""
        self.screen = pygame.display.set_mode(size, window_flags(mode))
        pygame.display.set_caption(self.title)
        return self.screen

    def window_size(self) -> tuple[int, int]:
        if self.screen is None:
            return (0, 0)
        return self.screen.get_size()

    def load_image(self, path: str) -> pygame.Surface:
        try:
            return pygame.image.load(path)
        except (pygame.error, OSError) as exc:
            raise ImageLoadError(f"Cannot load image '{path}': {exc}") from exc

    def prepare_image(self, image: pygame.Surface) -> pygame.Surface:
        """Convert to the display pixel format once a window exists."""
        if image.get_flags() & pygame.SRCALPHA:
            return image.convert_alpha()
        return image.convert()

    def image_size(self, image: pygame.Surface) -> tuple[int, int]:
        return image.get_size()

    def wait_event(self) -> ViewerEvent | None:
        return self.input_handler.wait()

    def set_window_position(self, pos: tuple[int, int]) -> None:
        x, y = pos
        # Picked up by windows created later
        os.environ["SDL_VIDEO_WINDOW_POS"] = f"{x},{y}"
        if self.screen is None:
            return
        from pygame._sdl2.video import Window

        Window.from_display_module().position = (x, y)

    def set_vsync(self, enabled: bool) -> None:
        self.vsync = enabled

    def set_view(self, viewport: Rect, camera: CameraView) -> None:
        self.renderer.set_view(viewport, camera)

    def draw_frame(self, placement: ImagePlacement, image: pygame.Surface) -> None:
        if self.screen is None:
            return
        self.renderer.draw(self.screen, placement, image)

    def present(self) -> None:
        pygame.display.flip()
        if self.vsync:
            self.clock.tick(VSYNC_FPS)

    def shutdown(self) -> None:
        pygame.quit()
