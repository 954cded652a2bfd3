"""Symbol data handle system - ABC-based handle architecture.

Each handle type is a class that knows:
- How to draw itself
- How to test if a scene position hits it
- How a drag changes the symbol data
- Which cursor to show over it
"""

from abc import ABC, abstractmethod

from PyQt5.QtCore import QPointF, QRectF, Qt
from PyQt5.QtGui import QBrush, QColor, QPen

from constants import INACTIVE_ALPHA, MARKER_PEN_WIDTH
from models.geometry import Rect
from models.symbol_data import ActiveItem, RectSide, combine_sides


def correct_limits(rect, side, min_size):
    """Keep the limits rectangle at least min_size wide and high.

    Only the dragged edges are clamped, the opposite edges stay fixed.
    Whole-rectangle moves (and untouched rectangles) grow to the right
    and bottom when too small.

    Args:
        rect: Rect in scene space
        side: RectSide that was dragged
        min_size: Minimum width and height in scene units

    Returns:
        Rect: Corrected rectangle
    """
    left, top, right, bottom = rect
    if side & RectSide.LEFT:
        left = min(left, right - min_size)
    elif right - left < min_size:
        right = left + min_size
    if side & RectSide.TOP:
        top = min(top, bottom - min_size)
    elif bottom - top < min_size:
        bottom = top + min_size
    return Rect(left, top, right, bottom)


def _color(name, active):
    color = QColor(name)
    if not active:
        color.setAlpha(INACTIVE_ALPHA)
    return color


class Handle(ABC):
    """Abstract base class for symbol data handles."""

    item = ActiveItem.NONE

    @abstractmethod
    def hit_test(self, pos, data, tolerance, glyph_box) -> bool:
        """Test if a scene position hits this handle.

        Args:
            pos: Vec2 pointer position in scene space
            data: SymbolData in scene space
            tolerance: Hit tolerance in scene units
            glyph_box: Rect of the glyph in scene space

        Returns:
            bool: True if the position hits this handle
        """
        pass

    def get_side(self, pos, data, tolerance) -> RectSide:
        """Side of the handle under the position (rectangles only)."""
        return RectSide.NO_SIDE

    @abstractmethod
    def drag(self, pos, context, data):
        """Apply a pointer move to the symbol data (in place).

        Args:
            pos: Vec2 current pointer position in scene space
            context: DragContext of the drag
            data: SymbolData in scene space
        """
        pass

    @abstractmethod
    def get_cursor(self, side, dragging):
        """Qt cursor shape shown over (or while dragging) this handle."""
        pass

    def draw(self, painter, data, pixel_size, active):
        """Draw this handle.

        Args:
            painter: QPainter in scene coordinates
            data: SymbolData in scene space
            pixel_size: Scene units per screen pixel
            active: Whether the current edit mode edits this handle
        """
        pass


class PointHandle(Handle):
    """Round marker of the in or out point."""

    def __init__(self, item, attr, color, point_width):
        """
        Args:
            item: ActiveItem.IN_POINT or ActiveItem.OUT_POINT
            attr: 'in_point' or 'out_point' on SymbolData
            color: Marker colour name
            point_width: Marker diameter in pixels
        """
        self.item = item
        self.attr = attr
        self.color = color
        self.point_width = point_width

    def hit_test(self, pos, data, tolerance, glyph_box):
        point = getattr(data, self.attr)
        if point is None:
            return False
        return point.distance_to(pos) <= tolerance

    def drag(self, pos, context, data):
        """Marker follows the pointer directly."""
        setattr(data, self.attr, pos)

    def get_cursor(self, side, dragging):
        return Qt.ClosedHandCursor if dragging else Qt.OpenHandCursor

    def draw(self, painter, data, pixel_size, active):
        point = getattr(data, self.attr)
        if point is None:
            return
        color = _color(self.color, active)
        pen = QPen(QColor(255, 255, 255), MARKER_PEN_WIDTH)
        pen.setCosmetic(True)
        painter.setPen(pen)
        painter.setBrush(QBrush(color))
        radius = self.point_width / 2.0 * pixel_size
        painter.drawEllipse(QPointF(point.x, point.y), radius, radius)


class LimitsHandle(Handle):
    """Limits rectangle with resizable edges and corners."""

    item = ActiveItem.LIMITS_RECT

    def __init__(self, color, pen_width):
        self.color = color
        self.pen_width = pen_width

    def hit_test(self, pos, data, tolerance, glyph_box):
        return data.limits is not None and self.get_side(pos, data, tolerance) != RectSide.NO_SIDE

    def get_side(self, pos, data, tolerance):
        """Find the edge, corner or interior under the position.

        An edge is hit within tolerance of its line, inside the span of
        the rectangle grown by tolerance. When both opposite edges are in
        range (narrow rectangle) the nearer one wins.
        """
        rect = data.limits
        if rect is None:
            return RectSide.NO_SIDE
        if not (rect.left - tolerance <= pos.x <= rect.right + tolerance and
                rect.top - tolerance <= pos.y <= rect.bottom + tolerance):
            return RectSide.NO_SIDE

        horizontal = RectSide.NO_SIDE
        d_left = abs(pos.x - rect.left)
        d_right = abs(pos.x - rect.right)
        if min(d_left, d_right) <= tolerance:
            horizontal = RectSide.LEFT if d_left < d_right else RectSide.RIGHT

        vertical = RectSide.NO_SIDE
        d_top = abs(pos.y - rect.top)
        d_bottom = abs(pos.y - rect.bottom)
        if min(d_top, d_bottom) <= tolerance:
            vertical = RectSide.TOP if d_top < d_bottom else RectSide.BOTTOM

        side = combine_sides(horizontal, vertical)
        if side == RectSide.NO_SIDE and rect.contains(pos):
            return RectSide.ALL_SIDES
        return side

    def drag(self, pos, context, data):
        """Move the dragged edges to the pointer, or translate the rectangle.

        The result is not clamped, the controller runs correct_limits()
        after every rectangle change.
        """
        side = context.side
        if side == RectSide.ALL_SIDES:
            start = context.start_limits
            data.limits = start.translated(pos.x - context.start_pos.x,
                                           pos.y - context.start_pos.y)
            return
        left, top, right, bottom = data.limits
        if side & RectSide.LEFT:
            left = pos.x
        elif side & RectSide.RIGHT:
            right = pos.x
        if side & RectSide.TOP:
            top = pos.y
        elif side & RectSide.BOTTOM:
            bottom = pos.y
        data.limits = Rect(left, top, right, bottom)

    def get_cursor(self, side, dragging):
        if side == RectSide.ALL_SIDES:
            return Qt.ClosedHandCursor if dragging else Qt.OpenHandCursor
        if side.is_edge:
            return Qt.SizeHorCursor if side & (RectSide.LEFT | RectSide.RIGHT) else Qt.SizeVerCursor
        if side.is_corner:
            # Top left and bottom right share the falling diagonal
            diagonal = side in (RectSide.TOP | RectSide.LEFT, RectSide.BOTTOM | RectSide.RIGHT)
            return Qt.SizeFDiagCursor if diagonal else Qt.SizeBDiagCursor
        return Qt.ArrowCursor

    def draw(self, painter, data, pixel_size, active):
        rect = data.limits
        if rect is None:
            return
        pen = QPen(_color(self.color, active), self.pen_width)
        pen.setCosmetic(True)
        if not active:
            pen.setStyle(Qt.DashLine)
        painter.setPen(pen)
        painter.setBrush(Qt.NoBrush)
        painter.drawRect(QRectF(rect.left, rect.top, rect.width, rect.height))


class SymbolHandle(Handle):
    """Glyph background. Hover feedback only, dragging it changes nothing."""

    item = ActiveItem.SYMBOL

    def hit_test(self, pos, data, tolerance, glyph_box):
        return glyph_box is not None and glyph_box.contains(pos)

    def drag(self, pos, context, data):
        pass

    def get_cursor(self, side, dragging):
        return Qt.CrossCursor
