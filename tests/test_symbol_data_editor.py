"""
Widget tests for the SymbolDataEditor view.

Pointer events are built in scene coordinates and mapped to the
viewport, then delivered straight to the view's event handlers.

Covers:
- Loading glyphs, automatic in/out point setup, load errors
- Seeding stored data before and after loading
- Dragging through the view and committing on release or leave
- Edit mode gating, zoom and settings
"""
import json
import pytest
from PyQt5.QtCore import Qt, QEvent, QPoint, QPointF
from PyQt5.QtGui import QMouseEvent, QWheelEvent

from models.errors import LoadError
from models.geometry import Vec2, Rect
from models.symbol_data import ActiveItem, EditMode, InteractionState


# Stored values are compared after a trip through integer viewport pixels
PIXEL_TOLERANCE = 0.01


def _mouse(editor, kind, x, y, button=Qt.LeftButton, buttons=None):
    pos = QPointF(editor.mapFromScene(QPointF(x, y)))
    if buttons is None:
        buttons = Qt.NoButton if kind == QEvent.MouseButtonRelease else button
    return QMouseEvent(kind, pos, button, buttons, Qt.NoModifier)


def press(editor, x, y, button=Qt.LeftButton):
    editor.mousePressEvent(_mouse(editor, QEvent.MouseButtonPress, x, y, button))


def move(editor, x, y):
    editor.mouseMoveEvent(_mouse(editor, QEvent.MouseMove, x, y, Qt.NoButton, Qt.LeftButton))


def release(editor, x, y, button=Qt.LeftButton):
    editor.mouseReleaseEvent(_mouse(editor, QEvent.MouseButtonRelease, x, y, button))


def drag(editor, start, end):
    press(editor, *start)
    move(editor, *end)
    release(editor, *end)


# ============================================================================
# Loading
# ============================================================================

class TestLoad:

    def test_empty_editor(self, editor):
        assert editor.get_in_point() is None
        assert editor.get_out_point() is None
        assert editor.get_limits() is None
        assert editor.get_edit_mode() == EditMode.DISABLED

    def test_automatic_points(self, loaded_editor):
        assert loaded_editor.get_in_point().x == pytest.approx(0.1)
        assert loaded_editor.get_in_point().y == pytest.approx(0.4)
        assert loaded_editor.get_out_point().x == pytest.approx(0.9)
        assert loaded_editor.get_out_point().y == pytest.approx(0.8)
        assert loaded_editor.get_limits() == Rect(0.0, 0.0, 1.0, 1.0)

    def test_scene_data_matches_glyph(self, loaded_editor):
        data = loaded_editor.controller.data
        assert loaded_editor.coordinates.box == Rect(0.0, 0.0, 500.0, 250.0)
        assert data.in_point.x == pytest.approx(50.0)
        assert data.in_point.y == pytest.approx(100.0)
        assert data.limits == Rect(0.0, 0.0, 500.0, 250.0)

    def test_translated_paths(self, editor, translated_glyph_svg):
        editor.load(translated_glyph_svg.encode('utf-8'))
        assert editor.get_in_point().x == pytest.approx(0.15)
        assert editor.get_in_point().y == pytest.approx(0.15)
        assert editor.get_out_point().x == pytest.approx(0.7)
        assert editor.get_out_point().y == pytest.approx(0.65)

    def test_load_from_file(self, editor, glyph_file):
        editor.load(str(glyph_file))
        assert editor.document.source == str(glyph_file)
        assert editor.get_in_point() is not None

    def test_missing_file(self, editor, tmp_path):
        with pytest.raises(LoadError):
            editor.load(str(tmp_path / "missing.svg"))
        assert editor.coordinates is None

    def test_not_svg(self, editor):
        with pytest.raises(LoadError):
            editor.load(b"<glyph/>")

    def test_no_paths(self, editor, no_paths_svg):
        with pytest.raises(LoadError):
            editor.load(no_paths_svg.encode('utf-8'))
        assert editor.get_in_point() is None

    def test_degenerate_glyph(self, editor, degenerate_svg):
        with pytest.raises(LoadError):
            editor.load(degenerate_svg.encode('utf-8'))

    def test_overflowing_coordinates(self, editor):
        svg = ('<svg xmlns="http://www.w3.org/2000/svg" width="100" height="50" '
               'viewBox="0 0 100 50"><path d="M1e999,20 L30,40" stroke="black"/></svg>')
        with pytest.raises(LoadError):
            editor.load(svg.encode('utf-8'))
        assert editor.get_in_point() is None
        assert editor.coordinates is None

    def test_failed_load_clears_previous_glyph(self, loaded_editor):
        with pytest.raises(LoadError):
            loaded_editor.load(b"")
        assert loaded_editor.symbol_item is None
        assert loaded_editor.get_limits() is None
        assert loaded_editor.controller.data.is_empty()

    def test_clear(self, loaded_editor):
        loaded_editor.clear()
        assert loaded_editor.document is None
        assert loaded_editor.get_out_point() is None

    def test_paints_markers(self, loaded_editor):
        loaded_editor.enable_limits_changes()
        assert not loaded_editor.grab().isNull()


# ============================================================================
# Seeded data
# ============================================================================

class TestSetSymbolData:

    def test_before_load_skips_automatic_setup(self, editor, glyph_document):
        editor.set_symbol_data((0.5, 0.5), (0.6, 0.7), (0.1, 0.2, 0.9, 0.8))
        editor.load(glyph_document)
        assert editor.get_in_point() == Vec2(0.5, 0.5)
        assert editor.get_out_point() == Vec2(0.6, 0.7)
        assert editor.get_limits() == Rect(0.1, 0.2, 0.9, 0.8)
        assert editor.controller.data.in_point.x == pytest.approx(250.0)

    def test_pending_data_used_once(self, editor, glyph_document):
        editor.set_symbol_data(Vec2(0.5, 0.5), Vec2(0.6, 0.7), Rect(0.1, 0.2, 0.9, 0.8))
        editor.load(glyph_document)
        editor.load(glyph_document)
        assert editor.get_in_point().x == pytest.approx(0.1)

    def test_after_load_replaces_data(self, loaded_editor):
        loaded_editor.set_symbol_data((0.25, 0.5), (1.5, -0.5), (0.0, 0.0, 0.5, 0.5))
        data = loaded_editor.controller.data
        assert data.in_point.x == pytest.approx(125.0)
        assert data.out_point.x == pytest.approx(750.0)
        assert data.out_point.y == pytest.approx(-125.0)
        assert data.limits.right == pytest.approx(250.0)

    def test_unchanged_values_survive_exactly(self, loaded_editor):
        loaded_editor.set_symbol_data((0.123456789, 0.987654321), (0.3, 0.7), (0.05, 0.1, 0.95, 0.9))
        loaded_editor.enable_out_point_changes()
        drag(loaded_editor, (150, 175), (160, 180))
        assert loaded_editor.get_in_point().x == pytest.approx(0.123456789, abs=1e-9)
        assert loaded_editor.get_in_point().y == pytest.approx(0.987654321, abs=1e-9)
        assert loaded_editor.get_limits().left == pytest.approx(0.05, abs=1e-9)

    def test_queries_return_copies(self, loaded_editor):
        point = loaded_editor.get_in_point()
        point.x = 42.0
        assert loaded_editor.get_in_point().x == pytest.approx(0.1)


# ============================================================================
# Editing through the view
# ============================================================================

class TestEditing:

    def test_drag_in_point(self, loaded_editor, qtbot):
        loaded_editor.enable_in_point_changes()
        press(loaded_editor, 50, 100)
        move(loaded_editor, 100, 150)
        # Nothing is stored before the drag ends
        assert loaded_editor.get_in_point().x == pytest.approx(0.1)
        with qtbot.waitSignal(loaded_editor.symbolDataChanged, timeout=1000):
            release(loaded_editor, 100, 150)
        assert loaded_editor.get_in_point().x == pytest.approx(0.2, abs=PIXEL_TOLERANCE)
        assert loaded_editor.get_in_point().y == pytest.approx(0.6, abs=PIXEL_TOLERANCE)
        assert loaded_editor.get_out_point().x == pytest.approx(0.9)

    def test_drag_out_point(self, loaded_editor):
        loaded_editor.enable_out_point_changes()
        drag(loaded_editor, (450, 200), (400, 50))
        assert loaded_editor.get_out_point().x == pytest.approx(0.8, abs=PIXEL_TOLERANCE)
        assert loaded_editor.get_out_point().y == pytest.approx(0.2, abs=PIXEL_TOLERANCE)
        assert loaded_editor.get_in_point().x == pytest.approx(0.1)

    def test_resize_limits(self, loaded_editor):
        loaded_editor.enable_limits_changes()
        drag(loaded_editor, (500, 125), (400, 125))
        limits = loaded_editor.get_limits()
        assert limits.left == pytest.approx(0.0)
        assert limits.right == pytest.approx(0.8, abs=PIXEL_TOLERANCE)
        assert limits.bottom == pytest.approx(1.0)
        assert loaded_editor.get_in_point().x == pytest.approx(0.1)
        assert loaded_editor.get_out_point().x == pytest.approx(0.9)

    def test_move_limits(self, loaded_editor):
        loaded_editor.set_symbol_data((0.1, 0.4), (0.9, 0.8), (0.2, 0.2, 0.6, 0.6))
        loaded_editor.enable_limits_changes()
        drag(loaded_editor, (200, 100), (250, 100))
        limits = loaded_editor.get_limits()
        assert limits.width == pytest.approx(0.4, abs=PIXEL_TOLERANCE)
        assert limits.left == pytest.approx(0.3, abs=PIXEL_TOLERANCE)

    def test_limits_drag_leaves_points(self, loaded_editor):
        in_point = loaded_editor.get_in_point()
        out_point = loaded_editor.get_out_point()
        loaded_editor.enable_limits_changes()
        # Interior move across the in point marker
        drag(loaded_editor, (250, 125), (50, 100))
        assert loaded_editor.get_limits() != Rect(0.0, 0.0, 1.0, 1.0)
        assert list(loaded_editor.get_in_point()) == pytest.approx(list(in_point), abs=1e-9)
        assert list(loaded_editor.get_out_point()) == pytest.approx(list(out_point), abs=1e-9)

    def test_disabled_changes(self, loaded_editor, qtbot):
        loaded_editor.enable_in_point_changes()
        loaded_editor.disable_changes()
        assert loaded_editor.get_edit_mode() == EditMode.DISABLED
        with qtbot.assertNotEmitted(loaded_editor.symbolDataChanged):
            drag(loaded_editor, (50, 100), (200, 200))
        assert loaded_editor.get_in_point().x == pytest.approx(0.1)

    def test_mode_switch(self, loaded_editor):
        loaded_editor.enable_out_point_changes()
        assert loaded_editor.get_edit_mode() == EditMode.OUT_POINT
        loaded_editor.enable_limits_changes()
        assert loaded_editor.get_edit_mode() == EditMode.LIMITS

    def test_leave_commits(self, loaded_editor, qtbot):
        loaded_editor.enable_in_point_changes()
        press(loaded_editor, 50, 100)
        move(loaded_editor, 75, 100)
        with qtbot.waitSignal(loaded_editor.symbolDataChanged, timeout=1000):
            loaded_editor.leaveEvent(QEvent(QEvent.Leave))
        assert loaded_editor.controller.state == InteractionState.IDLE
        assert loaded_editor.get_in_point().x == pytest.approx(0.15, abs=PIXEL_TOLERANCE)

    def test_other_button_ignored_during_drag(self, loaded_editor):
        loaded_editor.enable_in_point_changes()
        press(loaded_editor, 50, 100)
        press(loaded_editor, 300, 100, Qt.RightButton)
        release(loaded_editor, 300, 100, Qt.RightButton)
        assert loaded_editor.controller.is_dragging
        release(loaded_editor, 50, 100)
        assert not loaded_editor.controller.is_dragging

    def test_load_during_drag_aborts(self, loaded_editor, glyph_document, qtbot):
        loaded_editor.enable_in_point_changes()
        press(loaded_editor, 50, 100)
        move(loaded_editor, 200, 200)
        with qtbot.assertNotEmitted(loaded_editor.symbolDataChanged):
            loaded_editor.load(glyph_document)
        assert not loaded_editor.controller.is_dragging
        assert loaded_editor.get_in_point().x == pytest.approx(0.1)

    def test_viewport_cursor(self, loaded_editor):
        loaded_editor.enable_in_point_changes()
        move(loaded_editor, 250, 20)
        assert loaded_editor.viewport().cursor().shape() == Qt.CrossCursor
        press(loaded_editor, 50, 100)
        assert loaded_editor.viewport().cursor().shape() == Qt.ClosedHandCursor


# ============================================================================
# Zoom and settings
# ============================================================================

class TestZoom:

    def test_limit_scale(self, loaded_editor):
        loaded_editor.limit_scale(1000.0)
        assert loaded_editor.zoom.scale_factor == pytest.approx(40.0)
        assert loaded_editor.transform().m11() == pytest.approx(40.0)
        loaded_editor.limit_scale(2.0)
        assert loaded_editor.transform().m11() == pytest.approx(40.0)

    def test_tolerance_in_pixels(self, loaded_editor):
        loaded_editor.limit_scale(4.0)
        assert loaded_editor.controller.tolerance == pytest.approx(2.0)

    def test_wheel(self, loaded_editor):
        event = QWheelEvent(QPointF(100, 100), QPointF(100, 100), QPoint(0, 0), QPoint(0, 240),
                            Qt.NoButton, Qt.NoModifier, Qt.NoScrollPhase, False)
        loaded_editor.wheelEvent(event)
        assert loaded_editor.zoom.scale_factor == pytest.approx(1.2)


class TestSettings:

    def test_config_file(self, qtbot, tmp_path):
        from components.symbol_data_editor import SymbolDataEditor
        config = tmp_path / "config.json"
        config.write_text(json.dumps({'point_width': 20, 'max_scale_factor': 2,
                                      'limits_color': '#FF00FF'}), encoding='utf-8')
        widget = SymbolDataEditor(config_file=str(config))
        qtbot.addWidget(widget)
        assert widget.controller.point_width == 20.0
        assert widget.controller.tolerance == 20.0
        assert widget.zoom.max_scale == 2.0
        assert widget.controller.handles[ActiveItem.LIMITS_RECT].color == "#FF00FF"

    def test_invalid_config(self, qtbot, tmp_path):
        from components.symbol_data_editor import SymbolDataEditor
        config = tmp_path / "config.json"
        config.write_text("{", encoding='utf-8')
        with pytest.raises(ValueError):
            SymbolDataEditor(config_file=str(config))
