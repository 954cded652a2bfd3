"""Symbol data model and editor state enums.

Symbol data is the annotation attached to one glyph image of a
handwritten font:
- in_point:  where the connecting stroke from the previous glyph attaches
- out_point: where the connecting stroke to the next glyph leaves
- limits:    the part of the glyph that must lie within the text line

Values are kept relative to the glyph bounding box (see
utils/coordinate_transforms.py) so they survive rescaling of the image.
"""

from dataclasses import dataclass
from enum import Enum, Flag, auto
from typing import Optional

from .geometry import Vec2, Rect


class ActiveItem(Enum):
    """Target of the current or pending drag operation."""
    NONE = auto()
    IN_POINT = auto()
    OUT_POINT = auto()
    LIMITS_RECT = auto()
    SYMBOL = auto()  # Glyph background, hover feedback only


class RectSide(Flag):
    """Edges of the limits rectangle affected by a drag.

    Single sides resize along one axis, two adjacent sides resize a
    corner. NO_SIDE and ALL_SIDES are sentinels: ALL_SIDES moves the
    whole rectangle without resizing it.
    """
    NO_SIDE = 0
    TOP = auto()
    BOTTOM = auto()
    LEFT = auto()
    RIGHT = auto()
    ALL_SIDES = auto()

    @property
    def is_corner(self) -> bool:
        return self in CORNERS

    @property
    def is_edge(self) -> bool:
        return self in (RectSide.TOP, RectSide.BOTTOM, RectSide.LEFT, RectSide.RIGHT)


CORNERS = (
    RectSide.TOP | RectSide.LEFT,
    RectSide.TOP | RectSide.RIGHT,
    RectSide.BOTTOM | RectSide.LEFT,
    RectSide.BOTTOM | RectSide.RIGHT,
)


def combine_sides(horizontal, vertical):
    """Combine a horizontal and a vertical side into an edge or corner.

    Opposite sides never combine: callers pass at most one of LEFT/RIGHT
    and at most one of TOP/BOTTOM.
    """
    if horizontal == RectSide.LEFT | RectSide.RIGHT or vertical == RectSide.TOP | RectSide.BOTTOM:
        raise ValueError("Opposite sides cannot be combined")
    return horizontal | vertical


class EditMode(Enum):
    """Which item pointer input is allowed to change."""
    DISABLED = auto()
    IN_POINT = auto()
    OUT_POINT = auto()
    LIMITS = auto()


class InteractionState(Enum):
    IDLE = auto()
    HOVERING = auto()
    DRAGGING = auto()


@dataclass
class SymbolData:
    """The three annotation values of a glyph in one coordinate space."""
    in_point: Optional[Vec2] = None
    out_point: Optional[Vec2] = None
    limits: Optional[Rect] = None

    def is_empty(self) -> bool:
        return self.in_point is None and self.out_point is None and self.limits is None
