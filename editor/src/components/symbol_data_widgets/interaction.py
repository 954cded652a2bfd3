"""Interaction controller - direct manipulation state machine.

States: IDLE -> HOVERING <-> DRAGGING, driven by press/move/release/leave.
Works on scene coordinates only, so it runs without a rendering surface.
The owning view maps pointer events to scene positions, forwards them
here, and applies the resulting cursor.
"""

import logging

from PyQt5.QtCore import Qt

from constants import (
    POINT_WIDTH, LIMITS_MIN_SIZE, IN_POINT_COLOR, OUT_POINT_COLOR,
    LIMITS_COLOR, LIMITS_PEN_WIDTH
)
from models.symbol_data import (
    ActiveItem, RectSide, EditMode, InteractionState, SymbolData
)
from .drag_context import DragContext
from .handles import PointHandle, LimitsHandle, SymbolHandle, correct_limits
from .modes import create_mode


class InteractionController:
    """Hit-testing, drag handling and cursor policy for symbol data.

    data holds the live scene-space values; on_commit is called whenever a
    drag ends so the owner can store them.
    """

    def __init__(self, point_width=POINT_WIDTH, min_size=LIMITS_MIN_SIZE, on_commit=None):
        self._logger = logging.getLogger('InteractionController')
        self.point_width = point_width
        self.min_size = min_size
        self.tolerance = point_width  # Scene units, updated by the view on zoom
        self.on_commit = on_commit

        self.data = SymbolData()
        self.glyph_box = None

        self.handles = {
            ActiveItem.IN_POINT: PointHandle(ActiveItem.IN_POINT, 'in_point', IN_POINT_COLOR, point_width),
            ActiveItem.OUT_POINT: PointHandle(ActiveItem.OUT_POINT, 'out_point', OUT_POINT_COLOR, point_width),
            ActiveItem.LIMITS_RECT: LimitsHandle(LIMITS_COLOR, LIMITS_PEN_WIDTH),
            ActiveItem.SYMBOL: SymbolHandle(),
        }
        self.mode = create_mode(EditMode.DISABLED, self.handles)

        self.state = InteractionState.IDLE
        self.active_item = ActiveItem.NONE
        self.side = RectSide.NO_SIDE
        self.hover_item = ActiveItem.NONE
        self.hover_side = RectSide.NO_SIDE
        self.drag = None
        self.cursor = Qt.ArrowCursor

    @property
    def edit_mode(self):
        return self.mode.edit_mode

    @property
    def is_dragging(self):
        return self.state == InteractionState.DRAGGING

    def set_point_width(self, point_width):
        """Change the marker size; tolerance follows on the next set_scale()."""
        self.point_width = point_width
        for item in (ActiveItem.IN_POINT, ActiveItem.OUT_POINT):
            self.handles[item].point_width = point_width

    def set_scale(self, scale_factor):
        """Recompute the scene-unit hit tolerance for a view scale."""
        self.tolerance = self.point_width / scale_factor

    def set_edit_mode(self, edit_mode):
        """Switch the editable item. An active drag ends as if released."""
        if self.is_dragging:
            self._finish_drag()
        self.mode = create_mode(edit_mode, self.handles)
        self._set_idle()
        self._logger.debug(f"Edit mode: {edit_mode.name}")

    def lock(self):
        """Force IDLE and make nothing editable."""
        self.set_edit_mode(EditMode.DISABLED)

    def reset(self, data=None, glyph_box=None):
        """Replace the data and abort any drag without committing."""
        if self.is_dragging:
            self._logger.debug("Drag aborted by reset")
        self.data = data if data is not None else SymbolData()
        self.glyph_box = glyph_box
        self.drag = None
        self._set_idle()

    # ========================================
    # Pointer events
    # ========================================

    def press(self, pos):
        """Pointer button down at a scene position.

        Returns:
            bool: True if a drag started
        """
        if self.is_dragging:
            return False
        handle, side = self.mode.get_handle_at_pos(pos, self.data, self.tolerance, self.glyph_box)
        if handle is None:
            self._set_idle()
            return False

        if handle.item == ActiveItem.SYMBOL:
            # Pressing on the glyph places the marker of a point mode there
            if self.mode.point_item is None:
                self._set_idle()
                return False
            handle = self.handles[self.mode.point_item]

        self.drag = DragContext(handle.item, side, start_pos=pos,
                                start_limits=self.data.limits)
        self.state = InteractionState.DRAGGING
        self.active_item = handle.item
        self.side = side
        self.hover_item = ActiveItem.NONE
        self.hover_side = RectSide.NO_SIDE
        if handle.item != ActiveItem.LIMITS_RECT:
            handle.drag(pos, self.drag, self.data)
        self.cursor = handle.get_cursor(side, True)
        self._logger.debug(f"Drag started: {handle.item.name} {side}")
        return True

    def move(self, pos):
        """Pointer moved to a scene position.

        Returns:
            bool: True if the data changed
        """
        if not self.is_dragging:
            self._update_hover(pos)
            return False
        handle = self.handles[self.active_item]
        handle.drag(pos, self.drag, self.data)
        if self.active_item == ActiveItem.LIMITS_RECT:
            self.correct_limits()
        return True

    def release(self, pos=None):
        """Pointer button up. Commits the drag.

        Returns:
            bool: True if a drag was committed
        """
        if not self.is_dragging:
            return False
        self._finish_drag()
        if pos is None:
            self._set_idle()
        else:
            self._update_hover(pos)
        return True

    def enter(self, pos):
        """Pointer entered the view."""
        if not self.is_dragging:
            self._update_hover(pos)

    def leave(self):
        """Pointer left the view. An active drag ends as if released."""
        if self.is_dragging:
            self._finish_drag()
        self._set_idle()

    # ========================================
    # Helpers
    # ========================================

    def correct_limits(self):
        """Clamp the limits rectangle to the minimum size."""
        if self.data.limits is not None:
            self.data.limits = correct_limits(self.data.limits, self.side, self.min_size)

    def _finish_drag(self):
        item = self.active_item
        self.drag = None
        self.active_item = ActiveItem.NONE
        self.side = RectSide.NO_SIDE
        self.state = InteractionState.IDLE
        self._logger.debug(f"Drag finished: {item.name}")
        if self.on_commit:
            self.on_commit()

    def _update_hover(self, pos):
        handle, side = self.mode.get_handle_at_pos(pos, self.data, self.tolerance, self.glyph_box)
        if handle is None:
            self._set_idle()
            return
        self.state = InteractionState.HOVERING
        self.hover_item = handle.item
        self.hover_side = side
        self.cursor = handle.get_cursor(side, False)

    def _set_idle(self):
        self.state = InteractionState.IDLE
        self.active_item = ActiveItem.NONE
        self.side = RectSide.NO_SIDE
        self.hover_item = ActiveItem.NONE
        self.hover_side = RectSide.NO_SIDE
        self.cursor = Qt.ArrowCursor
