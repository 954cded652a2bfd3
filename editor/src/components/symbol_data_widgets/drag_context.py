"""Drag context dataclass for the symbol data editor.

Unified drag state: what is dragged, which rectangle side, and the state
at drag start.
"""

from dataclasses import dataclass

from models.symbol_data import ActiveItem, RectSide


@dataclass
class DragContext:
    """Drag state for one press-move-release interaction."""
    item: ActiveItem
    side: RectSide = RectSide.NO_SIDE  # For ActiveItem.LIMITS_RECT
    start_pos: object = None  # Vec2 scene position of the press
    start_limits: object = None  # Rect of the limits at press, for whole-rectangle moves
