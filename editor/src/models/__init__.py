"""
Glyph Symbol Data Editor - Data Models

This module contains the data model classes of the editor.
This is the MODEL in MVC architecture.

Public API: geometry types, symbol data and state enums, the glyph
document, and the load errors.
"""

from .geometry import Vec2, Rect
from .symbol_data import (
    ActiveItem, RectSide, EditMode, InteractionState, SymbolData, combine_sides
)
from .glyph_document import GlyphDocument, PathData
from .errors import LoadError, DegenerateGeometryError

__all__ = [
    'Vec2', 'Rect',
    'ActiveItem', 'RectSide', 'EditMode', 'InteractionState', 'SymbolData', 'combine_sides',
    'GlyphDocument', 'PathData',
    'LoadError', 'DegenerateGeometryError',
]
