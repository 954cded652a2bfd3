"""
Symbol Data Editor - Interactive editor of glyph symbol data

The handwritten font is a folder of SVG glyph images plus a project file
associating characters with images. Each glyph carries symbol data:
- in point / out point: where connecting strokes enter and leave the glyph
- limits: the rectangle of the glyph that must stay within the text line

Data is not stored in scene coordinates, it is stored relative to the
glyph bounding box so it stays valid when the image is rescaled.

This view shows the glyph, lets the user drag the point markers and
resize or move the limits rectangle, changes the cursor to make editing
easier, and converts the data between scene and stored coordinates.
"""

import logging
import math
from dataclasses import replace
from pathlib import Path

from PyQt5.QtCore import Qt, QByteArray, QPointF, pyqtSignal
from PyQt5.QtGui import QCursor, QPainter, QTransform
from PyQt5.QtSvg import QGraphicsSvgItem, QSvgRenderer
from PyQt5.QtWidgets import QGraphicsScene, QGraphicsView

from constants import SCENE_SCALE
from models.errors import LoadError
from models.geometry import Vec2, Rect
from models.glyph_document import GlyphDocument
from models.symbol_data import ActiveItem, EditMode, SymbolData
from services.path_analyzer import PathAnalyzer
from utils.coordinate_transforms import CoordinateTransform
from utils.logger import loggerRaise
from utils.settings import load_settings
from components.canvas_widgets.zoom_controller import ZoomController
from components.symbol_data_widgets.interaction import InteractionController


def _as_vec2(value):
    if value is None or isinstance(value, Vec2):
        return value
    x, y = value
    return Vec2(float(x), float(y))


def _as_rect(value):
    if value is None or isinstance(value, Rect):
        return value
    left, top, right, bottom = value
    return Rect(float(left), float(top), float(right), float(bottom))


class SymbolDataEditor(QGraphicsView):
    """Editor of the in point, out point and limits of one glyph."""

    # Emitted after every committed change of the stored data
    symbolDataChanged = pyqtSignal()

    # Margin around the glyph in the scene, as a fraction of its size
    SCENE_MARGIN = 0.5

    def __init__(self, parent=None, config_file=None):
        super().__init__(parent)
        self._logger = logging.getLogger('SymbolDataEditor')

        self._scene = QGraphicsScene(self)
        self.setScene(self._scene)
        self.setMouseTracking(True)
        self.viewport().setMouseTracking(True)
        self.setTransformationAnchor(QGraphicsView.AnchorUnderMouse)
        self.setRenderHint(QPainter.Antialiasing)

        self.zoom = ZoomController()
        self.controller = InteractionController(on_commit=self.remember_changes)

        # Loaded glyph
        self.document = None
        self.renderer = None
        self.symbol_item = None
        self.coordinates = None  # CoordinateTransform of the loaded glyph

        # Last committed data in stored coordinates
        self.stored = SymbolData()
        # Data seeded by set_symbol_data() before a glyph was loaded
        self._pending = None

        self.load_settings(config_file)

    # ========================================
    # Settings
    # ========================================

    def load_settings(self, config_file=None):
        """Apply marker, limits and zoom settings from the config file."""
        settings = load_settings(config_file)
        handles = self.controller.handles
        self.controller.set_point_width(settings['point_width'])
        self.controller.min_size = settings['limits_min_size']
        handles[ActiveItem.IN_POINT].color = settings['in_point_color']
        handles[ActiveItem.OUT_POINT].color = settings['out_point_color']
        handles[ActiveItem.LIMITS_RECT].color = settings['limits_color']
        self.zoom.set_bounds(settings['min_scale_factor'], settings['max_scale_factor'])
        self._apply_zoom()

    # ========================================
    # Commands
    # ========================================

    def load(self, document):
        """Load a glyph for editing.

        Args:
            document: GlyphDocument, SVG file path, or raw SVG bytes

        Raises:
            LoadError: If the document is missing or cannot be parsed, or
                in/out points cannot be inferred. The editor is cleared.
            DegenerateGeometryError: If the glyph has zero width or height
        """
        if self.controller.is_dragging:
            self._logger.warning("Glyph loaded during a drag, drag aborted")
        pending = self._pending
        self.clear()

        try:
            document = self._read_document(document)
            renderer = QSvgRenderer(QByteArray(document.data))
            if not renderer.isValid():
                raise LoadError(f"Glyph document cannot be rendered: {document.source or '<bytes>'}")

            item = QGraphicsSvgItem()
            item.setSharedRenderer(renderer)
            item.setScale(SCENE_SCALE)
            bounds = item.mapRectToScene(item.boundingRect())
            glyph_box = Rect.from_size(bounds.x(), bounds.y(), bounds.width(), bounds.height())
            coordinates = CoordinateTransform(glyph_box)

            if pending is not None:
                stored = pending
            else:
                stored = self._setup_points(document, renderer, coordinates)
        except LoadError as e:
            self.clear()
            loggerRaise(e, f"Cannot load glyph: {e}", "Load Error")

        self.document = document
        self.renderer = renderer
        self.symbol_item = item
        self.coordinates = coordinates
        self.stored = stored
        self._scene.addItem(item)
        margin_x = glyph_box.width * self.SCENE_MARGIN
        margin_y = glyph_box.height * self.SCENE_MARGIN
        self._scene.setSceneRect(bounds.adjusted(-margin_x, -margin_y, margin_x, margin_y))

        self._apply_stored()
        self.centerOn(item)
        self._logger.info(f"Loaded glyph {document.source or '<bytes>'}")

    def set_symbol_data(self, in_point, out_point, limits):
        """Seed stored (normalized) data, skipping automatic setup.

        Values are trusted as already normalized. Points accept Vec2 or
        (x, y); limits accept Rect or (left, top, right, bottom). Called
        before load() the data is used for the next loaded glyph.
        """
        self.stored = SymbolData(_as_vec2(in_point), _as_vec2(out_point), _as_rect(limits))
        if self.coordinates is None:
            self._pending = self.stored
            return
        self._apply_stored()

    def clear(self):
        """Discard the glyph and all data."""
        self.controller.reset()
        self._scene.clear()
        self._scene.setSceneRect(0, 0, 0, 0)
        self.document = None
        self.renderer = None
        self.symbol_item = None
        self.coordinates = None
        self.stored = SymbolData()
        self._pending = None
        self.zoom.reset()
        self._apply_zoom()
        self.viewport().setCursor(self.controller.cursor)
        self.viewport().update()

    def disable_changes(self):
        """Make the view read-only."""
        self.controller.lock()
        self.viewport().setCursor(self.controller.cursor)
        self.viewport().update()

    def enable_in_point_changes(self):
        self._set_edit_mode(EditMode.IN_POINT)

    def enable_out_point_changes(self):
        self._set_edit_mode(EditMode.OUT_POINT)

    def enable_limits_changes(self):
        self._set_edit_mode(EditMode.LIMITS)

    def _set_edit_mode(self, edit_mode):
        self.controller.set_edit_mode(edit_mode)
        self._update_cursor_from_pointer()
        self.viewport().update()

    # ========================================
    # Queries (stored coordinates)
    # ========================================

    def get_in_point(self):
        return replace(self.stored.in_point) if self.stored.in_point is not None else None

    def get_out_point(self):
        return replace(self.stored.out_point) if self.stored.out_point is not None else None

    def get_limits(self):
        return replace(self.stored.limits) if self.stored.limits is not None else None

    def get_edit_mode(self):
        return self.controller.edit_mode

    # ========================================
    # Data conversion
    # ========================================

    def remember_changes(self):
        """Store the scene data of the controller in stored coordinates."""
        if self.coordinates is None:
            return
        data = self.controller.data
        to_stored = self.coordinates.to_stored
        self.stored = SymbolData(
            to_stored(data.in_point) if data.in_point is not None else None,
            to_stored(data.out_point) if data.out_point is not None else None,
            self.coordinates.rect_to_stored(data.limits) if data.limits is not None else None,
        )
        self._logger.debug(f"Stored symbol data: {self.stored}")
        self.symbolDataChanged.emit()

    def _apply_stored(self):
        """Convert the stored data to scene data for the controller."""
        from_stored = self.coordinates.from_stored
        stored = self.stored
        data = SymbolData(
            from_stored(stored.in_point) if stored.in_point is not None else None,
            from_stored(stored.out_point) if stored.out_point is not None else None,
            self.coordinates.rect_from_stored(stored.limits) if stored.limits is not None else None,
        )
        self.controller.reset(data, self.coordinates.box)
        self.viewport().update()

    def _read_document(self, document):
        if isinstance(document, GlyphDocument):
            return document
        if isinstance(document, (bytes, bytearray)):
            return GlyphDocument(bytes(document))
        if isinstance(document, (str, Path)):
            return GlyphDocument.from_file(document)
        raise LoadError(f"Unsupported glyph document: {document!r}")

    def _setup_points(self, document, renderer, coordinates):
        """Infer stored in/out points from the glyph paths.

        Limits default to the whole glyph.
        """
        view_box = document.view_box
        if view_box is None:
            box = renderer.viewBoxF()
            view_box = Rect.from_size(box.x(), box.y(), box.width(), box.height())
        try:
            analyzer = PathAnalyzer(document.paths)
            begin = coordinates.from_view_box(analyzer.get_begin_point(), view_box)
            end = coordinates.from_view_box(analyzer.get_end_point(), view_box)
        except ValueError as e:
            if isinstance(e, LoadError):
                raise
            raise LoadError(f"Cannot infer in/out points: {e}") from e
        in_point = coordinates.to_stored(begin)
        out_point = coordinates.to_stored(end)
        if not all(math.isfinite(v) for v in (*in_point, *out_point)):
            raise LoadError(f"Inferred in/out points are not finite: {begin} / {end}")
        self._logger.debug(f"Inferred in/out points {begin} / {end}")
        return SymbolData(in_point, out_point, Rect(0.0, 0.0, 1.0, 1.0))

    # ========================================
    # Zoom
    # ========================================

    def limit_scale(self, factor):
        """Zoom by factor within the configured scale bounds."""
        ratio = self.zoom.limit_scale(factor)
        if ratio != 1.0:
            self.scale(ratio, ratio)
        self.controller.set_scale(self.zoom.scale_factor)

    def _apply_zoom(self):
        scale = self.zoom.scale_factor
        self.setTransform(QTransform.fromScale(scale, scale))
        self.controller.set_scale(scale)

    # ========================================
    # Painting
    # ========================================

    def drawForeground(self, painter, rect):
        """Draw the limits rectangle and point markers over the glyph."""
        if self.coordinates is None:
            return
        self._draw_data_items(painter)

    def _draw_data_items(self, painter):
        pixel_size = 1.0 / self.zoom.scale_factor
        data = self.controller.data
        painter.save()
        for item in (ActiveItem.LIMITS_RECT, ActiveItem.IN_POINT, ActiveItem.OUT_POINT):
            active = self.controller.mode.is_editable(item)
            self.controller.handles[item].draw(painter, data, pixel_size, active)
        painter.restore()

    # ========================================
    # Mouse Event Handlers
    # ========================================

    def _scene_pos(self, pos):
        point = self.mapToScene(pos)
        return Vec2(point.x(), point.y())

    def _update_cursor(self):
        self.viewport().setCursor(self.controller.cursor)

    def _update_cursor_from_pointer(self):
        if self.coordinates is None:
            return
        pos = self.viewport().mapFromGlobal(QCursor.pos())
        if self.viewport().rect().contains(pos):
            self.controller.enter(self._scene_pos(pos))
        self._update_cursor()

    def mousePressEvent(self, event):
        """Start dragging the item under the pointer"""
        if event.button() == Qt.LeftButton and self.coordinates is not None:
            started = self.controller.press(self._scene_pos(event.pos()))
            self._update_cursor()
            if started:
                self.viewport().update()
                event.accept()
                return
        elif self.controller.is_dragging:
            # Other buttons are ignored until the drag ends
            event.accept()
            return
        super().mousePressEvent(event)

    def mouseMoveEvent(self, event):
        """Drag the active item, or update hover feedback"""
        if self.coordinates is not None:
            changed = self.controller.move(self._scene_pos(event.pos()))
            self._update_cursor()
            if changed:
                self.viewport().update()
                event.accept()
                return
        super().mouseMoveEvent(event)

    def mouseReleaseEvent(self, event):
        """Commit the drag"""
        if event.button() == Qt.LeftButton and self.controller.is_dragging:
            self.controller.release(self._scene_pos(event.pos()))
            self._update_cursor()
            self.viewport().update()
            event.accept()
            return
        super().mouseReleaseEvent(event)

    def enterEvent(self, event):
        """Pick the cursor for the item under the pointer"""
        self._update_cursor_from_pointer()
        super().enterEvent(event)

    def leaveEvent(self, event):
        """End any drag and reset the cursor"""
        self.controller.leave()
        self._update_cursor()
        self.viewport().update()
        super().leaveEvent(event)

    def wheelEvent(self, event):
        """Handle mouse wheel for zoom."""
        delta = event.angleDelta().y()
        if delta == 0:
            event.ignore()
            return
        self.limit_scale(self.zoom.factor_for_wheel(delta))
        event.accept()
