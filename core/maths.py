"""Math utilities for 2D vectors, sizes, and rectangles."""

from __future__ import annotations

from dataclasses import dataclass
from pygame.math import Vector2 as _Vector2

# Export Vector2 alias
Vector2 = _Vector2


@dataclass(frozen=True)
class Size2:
    w: float
    h: float

    def scaled(self, factor: float) -> "Size2":
        return Size2(self.w * factor, self.h * factor)


@dataclass(frozen=True)
class Rect:
    x: float
    y: float
    w: float
    h: float

    @classmethod
    def from_center(cls, center: Vector2, size: Size2) -> "Rect":
        return cls(center.x - size.w / 2.0, center.y - size.h / 2.0, size.w, size.h)

    @property
    def min_x(self) -> float:
        return self.x

    @property
    def max_x(self) -> float:
        return self.x + self.w

    @property
    def min_y(self) -> float:
        return self.y

    @property
    def max_y(self) -> float:
        return self.y + self.h

    @property
    def is_empty(self) -> bool:
        return self.w <= 0 or self.h <= 0

    def intersection(self, other: "Rect") -> "Rect":
        """Overlap of two rectangles; empty Rect(0, 0, 0, 0) when disjoint."""
        left = max(self.min_x, other.min_x)
        top = max(self.min_y, other.min_y)
        right = min(self.max_x, other.max_x)
        bottom = min(self.max_y, other.max_y)
        if right <= left or bottom <= top:
            return Rect(0.0, 0.0, 0.0, 0.0)
        return Rect(left, top, right - left, bottom - top)

    def to_pygame_rect(self):
        import pygame

        return pygame.Rect(int(self.x), int(self.y), int(self.w), int(self.h))
