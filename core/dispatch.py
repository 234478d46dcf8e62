"""Application state and per-event handlers.

Every handler mutates only the ``AppState`` it is given. Window replacement
is never performed here: toggling the window mode only records a pending
swap, which the viewer loop resolves once the event is fully handled.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from core.config import LEFT_BUTTON
from core.events import (
    Action,
    ButtonPressed,
    ButtonReleased,
    Closed,
    FocusLost,
    KeyAction,
    PointerMoved,
    Resized,
    Scrolled,
)
from core.maths import Rect
from core.view import ViewController
from core.viewport import FULL_VIEWPORT, LogicalCanvas, fit_viewport


class WindowMode(Enum):
    WINDOWED = "windowed"
    FULLSCREEN = "fullscreen"

    def toggled(self) -> "WindowMode":
        if self is WindowMode.WINDOWED:
            return WindowMode.FULLSCREEN
        return WindowMode.WINDOWED


@dataclass
class InteractionState:
    dragging: bool = False
    last_pointer: tuple[int, int] = (0, 0)


@dataclass(frozen=True)
class PendingWindowSwap:
    mode: WindowMode


@dataclass
class AppState:
    canvas: LogicalCanvas
    controller: ViewController
    mode: WindowMode = WindowMode.WINDOWED
    interaction: InteractionState = field(default_factory=InteractionState)
    viewport: Rect = FULL_VIEWPORT
    pending_swap: PendingWindowSwap | None = None
    dirty: bool = True
    running: bool = True

    @classmethod
    def create(
        cls,
        canvas: LogicalCanvas,
        image_size: tuple[int, int],
        mode: WindowMode = WindowMode.WINDOWED,
    ) -> "AppState":
        return cls(
            canvas=canvas,
            controller=ViewController(canvas, image_size),
            mode=mode,
        )

    def take_pending_swap(self) -> PendingWindowSwap | None:
        swap = self.pending_swap
        self.pending_swap = None
        return swap


def _handle_action(state: AppState, action: Action) -> None:
    controller = state.controller
    if action is Action.QUIT:
        state.running = False
    elif action is Action.TOGGLE_FULLSCREEN:
        state.mode = state.mode.toggled()
        state.pending_swap = PendingWindowSwap(state.mode)
    elif action is Action.RESET_VIEW:
        controller.reset_view()
        controller.reset_camera()
        state.dirty = True
    elif action is Action.ACTUAL_SIZE:
        controller.actual_size()
        state.dirty = True


def apply_resize(state: AppState, width: int, height: int) -> None:
    state.viewport = fit_viewport(width, height, state.canvas)
    state.dirty = True


def _handle_pointer(state: AppState, x: int, y: int) -> None:
    interaction = state.interaction
    if interaction.dragging:
        last_x, last_y = interaction.last_pointer
        if state.controller.pan(x - last_x, y - last_y):
            state.dirty = True
    interaction.last_pointer = (x, y)


def dispatch(state: AppState, event) -> AppState:
    """Apply one viewer event to the state in place and return it.

    Events of unknown types are ignored.
    """
    if isinstance(event, Closed):
        state.running = False
    elif isinstance(event, KeyAction):
        _handle_action(state, event.action)
    elif isinstance(event, Resized):
        apply_resize(state, event.width, event.height)
    elif isinstance(event, Scrolled):
        if state.controller.zoom(event.delta):
            state.dirty = True
    elif isinstance(event, ButtonPressed):
        if event.button == LEFT_BUTTON:
            state.interaction.dragging = True
            state.interaction.last_pointer = event.pos
    elif isinstance(event, ButtonReleased):
        if event.button == LEFT_BUTTON:
            state.interaction.dragging = False
    elif isinstance(event, PointerMoved):
        _handle_pointer(state, event.x, event.y)
    elif isinstance(event, FocusLost):
        # Releases outside the window are not delivered
        state.interaction.dragging = False
    return state
