"""Editing modes - defines which handles pointer input may change."""

from models.symbol_data import ActiveItem, EditMode, RectSide


# Hit-test priority of all handles: markers, then limits rectangle, then glyph background
CHECK_ORDER = [
	ActiveItem.IN_POINT,
	ActiveItem.OUT_POINT,
	ActiveItem.LIMITS_RECT,
	ActiveItem.SYMBOL,
]


class EditingMode:
	"""Base class for editing modes. Nothing is editable."""
	
	edit_mode = EditMode.DISABLED
	eligible = frozenset()
	point_item = None  # Marker placed by pressing on the glyph
	
	def __init__(self, handles):
		"""
		Args:
			handles: dict ActiveItem -> Handle of all handles
		"""
		self.handles = {item: handle for item, handle in handles.items() if item in self.eligible}
	
	def is_editable(self, item):
		return item in self.eligible
	
	def get_handle_at_pos(self, pos, data, tolerance, glyph_box):
		"""Find which eligible handle (if any) is at the position.
		
		Returns:
			(Handle, RectSide) or (None, RectSide.NO_SIDE)
		"""
		for item in CHECK_ORDER:
			handle = self.handles.get(item)
			if handle is not None and handle.hit_test(pos, data, tolerance, glyph_box):
				return handle, handle.get_side(pos, data, tolerance)
		return None, RectSide.NO_SIDE


class DisabledMode(EditingMode):
	"""Read-only display."""
	pass


class InPointMode(EditingMode):
	"""In point marker; pressing on the glyph places the marker."""
	
	edit_mode = EditMode.IN_POINT
	eligible = frozenset({ActiveItem.IN_POINT, ActiveItem.SYMBOL})
	point_item = ActiveItem.IN_POINT


class OutPointMode(EditingMode):
	"""Out point marker; pressing on the glyph places the marker."""
	
	edit_mode = EditMode.OUT_POINT
	eligible = frozenset({ActiveItem.OUT_POINT, ActiveItem.SYMBOL})
	point_item = ActiveItem.OUT_POINT


class LimitsMode(EditingMode):
	"""Limits rectangle edges, corners and interior."""
	
	edit_mode = EditMode.LIMITS
	eligible = frozenset({ActiveItem.LIMITS_RECT})


# Mode registry
MODES = {
	EditMode.DISABLED: DisabledMode,
	EditMode.IN_POINT: InPointMode,
	EditMode.OUT_POINT: OutPointMode,
	EditMode.LIMITS: LimitsMode,
}


def create_mode(edit_mode, handles):
	"""Factory function to create mode instances.
	
	Args:
		edit_mode: EditMode value
		handles: dict ActiveItem -> Handle
		
	Returns:
		EditingMode instance
	"""
	mode_class = MODES.get(edit_mode, DisabledMode)
	return mode_class(handles)
