"""Axis-aligned rectangles."""

from __future__ import annotations

from dataclasses import dataclass

from mahikit.vec2 import Vec2

__all__ = ["Rect"]


@dataclass(slots=True)
class Rect:
    """An axis-aligned rectangle given by its top-left corner and size."""

    left: float = 0.0
    top: float = 0.0
    width: float = 0.0
    height: float = 0.0

    @classmethod
    def from_pos_size(cls, position: Vec2, size: Vec2) -> Rect:
        """Build a Rect from a position (left, top) and a size (width, height)."""
        return cls(position.x, position.y, size.x, size.y)

    def pos(self) -> Vec2:
        """Return the position (left, top)."""
        return Vec2(self.left, self.top)

    def size(self) -> Vec2:
        """Return the size (width, height)."""
        return Vec2(self.width, self.height)

    def tl(self) -> Vec2:
        """Return the top-left corner."""
        return Vec2(self.left, self.top)

    def tr(self) -> Vec2:
        """Return the top-right corner."""
        return Vec2(self.left + self.width, self.top)

    def bl(self) -> Vec2:
        """Return the bottom-left corner."""
        return Vec2(self.left, self.top + self.height)

    def br(self) -> Vec2:
        """Return the bottom-right corner."""
        return Vec2(self.left + self.width, self.top + self.height)

    def center(self) -> Vec2:
        """Return the centre point."""
        return Vec2(self.left + self.width * 0.5, self.top + self.height * 0.5)

    def contains(self, p: Vec2) -> bool:
        """Return True if ``p`` is inside; left/top edges included, right/bottom not."""
        return (
            self.left <= p.x < self.left + self.width
            and self.top <= p.y < self.top + self.height
        )