"""Coordinate transformation between scene space and stored space.

Provides conversion between the coordinate systems of the symbol data editor:
- Scene space (scene units of the QGraphicsScene, Y-down)
- Stored space (relative to the glyph bounding box, Y-down)
- Artwork space (SVG user units inside the document viewBox)

Stored values are what the font project persists. They are independent of
the glyph image resolution, its origin, and the view zoom.
"""

import math

from models.geometry import Vec2, Rect
from models.errors import DegenerateGeometryError


class CoordinateTransform:
	"""Converts points and rectangles relative to one glyph bounding box.
	
	Round trip invariant: from_stored(to_stored(p)) == p within floating
	point tolerance, as long as the same box is used on both sides.
	"""
	
	def __init__(self, box):
		"""
		Args:
			box: Rect of the glyph bounding box in scene space
			
		Raises:
			DegenerateGeometryError: If the box has zero (or negative,
				or non-finite) width or height
		"""
		width = box.width
		height = box.height
		if not (math.isfinite(width) and math.isfinite(height)) or width <= 0 or height <= 0:
			raise DegenerateGeometryError(
				f"Glyph bounding box {width}x{height} cannot be used for normalization")
		self.box = box
	
	def to_stored(self, point):
		"""Convert a scene point to stored coordinates (no clamping).
		
		Args:
			point: Vec2 in scene space
			
		Returns:
			Vec2: (point - box origin) / box size, per axis
		"""
		return Vec2((point.x - self.box.left) / self.box.width,
		            (point.y - self.box.top) / self.box.height)
	
	def from_stored(self, point):
		"""Convert stored coordinates back to a scene point.
		
		Args:
			point: Vec2 in stored space
			
		Returns:
			Vec2: point * box size + box origin, per axis
		"""
		return Vec2(point.x * self.box.width + self.box.left,
		            point.y * self.box.height + self.box.top)
	
	def rect_to_stored(self, rect):
		"""Convert a scene rectangle by its top left and bottom right corners."""
		return Rect.from_corners(self.to_stored(rect.top_left),
		                         self.to_stored(rect.bottom_right))
	
	def rect_from_stored(self, rect):
		"""Convert a stored rectangle by its top left and bottom right corners."""
		return Rect.from_corners(self.from_stored(rect.top_left),
		                         self.from_stored(rect.bottom_right))
	
	def from_view_box(self, point, view_box):
		"""Convert an artwork point (SVG user units) to scene space.
		
		The viewBox of the document is stretched over the glyph box, the
		same mapping QSvgRenderer applies when drawing the item.
		
		Args:
			point: Vec2 in artwork space
			view_box: Rect of the document viewBox
			
		Returns:
			Vec2: Point in scene space
		"""
		if view_box.width <= 0 or view_box.height <= 0:
			raise DegenerateGeometryError(
				f"Document viewBox {view_box.width}x{view_box.height} cannot be mapped")
		relative = Vec2((point.x - view_box.left) / view_box.width,
		                (point.y - view_box.top) / view_box.height)
		return self.from_stored(relative)
