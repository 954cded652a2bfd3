"""
Glyph Symbol Data Editor - Constants and Configuration

This module contains all constant values used throughout the editor:
- Zoom limits and wheel zoom steps
- Scene scaling of the glyph artwork
- Marker and limits rectangle appearance
- Hit-testing tolerances and rectangle constraints

User overrides for a subset of these live in the JSON config file
(see utils/settings.py).
"""

# ======================================================================
# VIEW ZOOM
# ======================================================================

# Scale factor limits of the view (1.0 = scene units map 1:1 to pixels)
MAX_SCALE_FACTOR = 40.0
MIN_SCALE_FACTOR = 0.1
DEFAULT_SCALE_FACTOR = 1.0

# Wheel zoom: WHEEL_ZOOM_BASE ** (angle_delta / WHEEL_ZOOM_STEP)
# One standard wheel notch is 120 eighths of a degree
WHEEL_ZOOM_BASE = 1.2
WHEEL_ZOOM_STEP = 240.0

# ======================================================================
# SCENE
# ======================================================================

# The glyph SVG item is drawn at this scale inside the scene, so one
# SVG user unit covers SCENE_SCALE scene units
SCENE_SCALE = 5.0

# Normalized (stored) space is relative to the glyph bounding box:
# X-axis: 0.0 = left edge, 1.0 = right edge
# Y-axis: 0.0 = TOP edge, 1.0 = BOTTOM edge (Y-down, like Qt)
# Values outside [0, 1] are legal, connecting strokes may attach
# outside the visible ink.

# ======================================================================
# MARKERS AND HIT TESTING
# ======================================================================

# Marker diameter and hit tolerance in screen pixels
POINT_WIDTH = 8.0

# Minimum width/height of the limits rectangle in scene units
LIMITS_MIN_SIZE = 10.0

# Marker colours (hex, parsed with QColor)
IN_POINT_COLOR = '#2A9D3C'
OUT_POINT_COLOR = '#C0392B'
LIMITS_COLOR = '#2A5D8C'
INACTIVE_ALPHA = 110  # Alpha for items the current mode does not edit

# Pen widths in pixels (cosmetic pens, unaffected by zoom)
LIMITS_PEN_WIDTH = 2
MARKER_PEN_WIDTH = 1

# ======================================================================
# CONFIG FILE
# ======================================================================

CONFIG_DIR_NAME = '.glyph_symbol_data_editor'
CONFIG_FILE_NAME = 'config.json'
