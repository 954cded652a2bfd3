"""Geometry data structures for points and rectangles.

The same types carry values in every coordinate space the editor uses:
- Scene (view) space: scene units of the QGraphicsScene
- Stored (normalized) space: relative to the glyph bounding box
- Artwork space: SVG user units of the glyph document
"""
from dataclasses import dataclass


@dataclass
class Vec2:
    """2D vector for coordinate pairs."""
    x: float
    y: float

    def __iter__(self):
        """Allow tuple unpacking: x, y = vec2"""
        return iter((self.x, self.y))

    def __add__(self, other):
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other):
        return Vec2(self.x - other.x, self.y - other.y)

    def distance_to(self, other) -> float:
        dx = self.x - other.x
        dy = self.y - other.y
        return (dx * dx + dy * dy) ** 0.5


@dataclass
class Rect:
    """Axis-aligned rectangle stored by its edges (Y-down).

    A well-formed rectangle has left < right and top < bottom.
    """
    left: float
    top: float
    right: float
    bottom: float

    @classmethod
    def from_corners(cls, top_left, bottom_right):
        return cls(top_left.x, top_left.y, bottom_right.x, bottom_right.y)

    @classmethod
    def from_size(cls, x, y, width, height):
        return cls(x, y, x + width, y + height)

    @property
    def width(self) -> float:
        return self.right - self.left

    @property
    def height(self) -> float:
        return self.bottom - self.top

    @property
    def top_left(self) -> Vec2:
        return Vec2(self.left, self.top)

    @property
    def bottom_right(self) -> Vec2:
        return Vec2(self.right, self.bottom)

    @property
    def center(self) -> Vec2:
        return Vec2((self.left + self.right) / 2.0, (self.top + self.bottom) / 2.0)

    def translated(self, dx, dy):
        return Rect(self.left + dx, self.top + dy, self.right + dx, self.bottom + dy)

    def contains(self, point) -> bool:
        return self.left <= point.x <= self.right and self.top <= point.y <= self.bottom

    def __iter__(self):
        """Allow tuple unpacking: left, top, right, bottom = rect"""
        return iter((self.left, self.top, self.right, self.bottom))
