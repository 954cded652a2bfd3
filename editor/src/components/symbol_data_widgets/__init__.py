"""
Glyph Symbol Data Editor - Interaction Components

This package contains the direct manipulation architecture:
- handles.py: ABC-based handle classes (PointHandle, LimitsHandle, SymbolHandle)
- modes.py: Editing mode classes defining which handles are editable
- drag_context.py: Unified drag state management
- interaction.py: InteractionController state machine
"""

from .handles import Handle, PointHandle, LimitsHandle, SymbolHandle, correct_limits
from .modes import EditingMode, DisabledMode, InPointMode, OutPointMode, LimitsMode, create_mode
from .drag_context import DragContext
from .interaction import InteractionController

__all__ = [
    'Handle', 'PointHandle', 'LimitsHandle', 'SymbolHandle', 'correct_limits',
    'EditingMode', 'DisabledMode', 'InPointMode', 'OutPointMode', 'LimitsMode', 'create_mode',
    'DragContext',
    'InteractionController',
]
