"""Input collection: translate pygame events into viewer events only.

No view state is touched here; the dispatcher owns all interpretation.
"""

from __future__ import annotations

import pygame

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
    ViewerEvent,
)

DEFAULT_KEY_BINDINGS: dict[int, Action] = {
    pygame.K_q: Action.QUIT,
    pygame.K_ESCAPE: Action.QUIT,
    pygame.K_f: Action.TOGGLE_FULLSCREEN,
    pygame.K_r: Action.RESET_VIEW,
    pygame.K_0: Action.ACTUAL_SIZE,
    pygame.K_KP0: Action.ACTUAL_SIZE,
}

# Wheel notches also arrive as button 4/5 presses; MOUSEWHEEL is used instead
_WHEEL_BUTTONS = (4, 5)


class InputHandler:
    """Maps raw pygame events onto the viewer's event vocabulary."""

    def __init__(self, key_bindings: dict[int, Action] | None = None):
        self.key_bindings = dict(DEFAULT_KEY_BINDINGS if key_bindings is None else key_bindings)

    def translate(self, event: pygame.event.Event) -> ViewerEvent | None:
        """Return the viewer event for ``event``, or None when it is not used.

        pygame reports wheel-up as positive ``y``; it is passed through so a
        positive delta means scrolling up.
        """
        etype = event.type
        if etype == pygame.QUIT:
            return Closed()
        if etype == pygame.KEYDOWN:
            action = self.key_bindings.get(event.key)
            return KeyAction(action) if action is not None else None
        if etype == pygame.VIDEORESIZE:
            return Resized(int(event.w), int(event.h))
        if etype == pygame.MOUSEWHEEL:
            return Scrolled(float(event.y))
        if etype == pygame.MOUSEBUTTONDOWN:
            if event.button in _WHEEL_BUTTONS:
                return None
            x, y = event.pos
            return ButtonPressed(event.button, (int(x), int(y)))
        if etype == pygame.MOUSEBUTTONUP:
            if event.button in _WHEEL_BUTTONS:
                return None
            return ButtonReleased(event.button)
        if etype == pygame.MOUSEMOTION:
            x, y = event.pos
            return PointerMoved(int(x), int(y))
        if etype == pygame.WINDOWFOCUSLOST:
            return FocusLost()
        return None

    def wait(self) -> ViewerEvent | None:
        """Block until the next pygame event arrives and translate it."""
        return self.translate(pygame.event.wait())
