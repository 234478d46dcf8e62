"""Backend-independent input events consumed by the dispatcher."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union


class Action(Enum):
    QUIT = "quit"
    TOGGLE_FULLSCREEN = "toggle_fullscreen"
    RESET_VIEW = "reset_view"
    ACTUAL_SIZE = "actual_size"


@dataclass(frozen=True)
class Closed:
    pass


@dataclass(frozen=True)
class KeyAction:
    action: Action


@dataclass(frozen=True)
class Resized:
    width: int
    height: int


@dataclass(frozen=True)
class Scrolled:
    delta: float


@dataclass(frozen=True)
class ButtonPressed:
    button: int
    pos: tuple[int, int]


@dataclass(frozen=True)
class ButtonReleased:
    button: int


@dataclass(frozen=True)
class PointerMoved:
    x: int
    y: int


@dataclass(frozen=True)
class FocusLost:
    pass


ViewerEvent = Union[
    Closed,
    KeyAction,
    Resized,
    Scrolled,
    ButtonPressed,
    ButtonReleased,
    PointerMoved,
    FocusLost,
]
