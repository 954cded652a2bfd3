"""UI components for the Glyph Symbol Data Editor

This package contains the UI components organized into subpackages:
- canvas_widgets: zoom handling of the editor view
- symbol_data_widgets: handles, editing modes and the interaction controller

Direct imports:
"""

from .symbol_data_editor import SymbolDataEditor

__all__ = [
    'SymbolDataEditor',
]
