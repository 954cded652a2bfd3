"""Glyph document - the SVG artwork of one glyph.

Keeps the raw SVG bytes for rendering (QSvgRenderer) and extracts what
the symbol data editor needs from the XML:
- The viewBox (artwork bounding box in SVG user units)
- The <path> elements in document order, each with the cumulative
  translate() offset of its ancestors
"""

import logging
import re
import xml.etree.ElementTree as ET
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from .geometry import Vec2, Rect
from .errors import LoadError

_logger = logging.getLogger('GlyphDocument')

SVG_NS = '{http://www.w3.org/2000/svg}'

_TRANSFORM_RE = re.compile(r'(\w+)\s*\(([^)]*)\)')
_NUMBER_RE = re.compile(r'[-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?')


@dataclass
class PathData:
    """Path data string of one <path> element and its translation."""
    d: str
    translate: Vec2 = field(default_factory=lambda: Vec2(0.0, 0.0))


def parse_translate(transform: Optional[str]) -> Vec2:
    """Sum the translate() functions of an SVG transform attribute.

    Other transform functions are ignored, glyph artwork produced by the
    font tools only uses translations.
    """
    offset = Vec2(0.0, 0.0)
    if not transform:
        return offset
    for name, args in _TRANSFORM_RE.findall(transform):
        if name != 'translate':
            _logger.debug(f"Ignoring transform function {name}()")
            continue
        values = [float(v) for v in _NUMBER_RE.findall(args)]
        if not values:
            continue
        tx = values[0]
        ty = values[1] if len(values) > 1 else 0.0
        offset = offset + Vec2(tx, ty)
    return offset


def _parse_length(value: Optional[str]) -> Optional[float]:
    """Parse a width/height attribute, dropping any unit suffix."""
    if not value:
        return None
    match = _NUMBER_RE.match(value.strip())
    if not match or value.strip().endswith('%'):
        return None
    return float(match.group())


def _local_name(tag) -> str:
    if not isinstance(tag, str):
        return ''
    return tag[len(SVG_NS):] if tag.startswith(SVG_NS) else tag


class GlyphDocument:
    """Parsed SVG glyph artwork."""

    def __init__(self, data: bytes, source: Optional[str] = None):
        """
        Args:
            data: Raw SVG document bytes
            source: File path or description, used in messages only

        Raises:
            LoadError: If the data is empty or not well-formed SVG
        """
        if not data:
            raise LoadError(f"Empty glyph document: {source or '<bytes>'}")
        self.data = bytes(data)
        self.source = source
        try:
            root = ET.fromstring(self.data)
        except ET.ParseError as e:
            raise LoadError(f"Failed to parse glyph document {source or '<bytes>'}: {e}") from e

        if _local_name(root.tag) != 'svg':
            raise LoadError(f"Not an SVG document: {source or '<bytes>'}")

        self.view_box = self._read_view_box(root)
        self.paths = []
        self._collect_paths(root, Vec2(0.0, 0.0))

    @classmethod
    def from_file(cls, filepath):
        try:
            data = Path(filepath).read_bytes()
        except OSError as e:
            raise LoadError(f"Cannot read glyph document {filepath}: {e}") from e
        return cls(data, str(filepath))

    @classmethod
    def from_string(cls, text: str, source: Optional[str] = None):
        return cls(text.encode('utf-8'), source)

    def _read_view_box(self, root) -> Optional[Rect]:
        view_box = root.get('viewBox')
        if view_box:
            values = [float(v) for v in _NUMBER_RE.findall(view_box)]
            if len(values) == 4:
                return Rect.from_size(*values)
            _logger.warning(f"Malformed viewBox '{view_box}' in {self.source}")
        width = _parse_length(root.get('width'))
        height = _parse_length(root.get('height'))
        if width is not None and height is not None:
            return Rect.from_size(0.0, 0.0, width, height)
        return None

    def _collect_paths(self, element, offset):
        for child in element:
            name = _local_name(child.tag)
            if name in ('defs', 'clipPath', 'mask', 'symbol'):
                continue
            child_offset = offset + parse_translate(child.get('transform'))
            if name == 'path':
                d = child.get('d')
                if d and d.strip():
                    self.paths.append(PathData(d, child_offset))
            else:
                self._collect_paths(child, child_offset)

    def path_list(self) -> List[str]:
        """Path data strings in document order."""
        return [path.d for path in self.paths]

    def __repr__(self):
        return f"GlyphDocument(source={self.source!r}, paths={len(self.paths)}, view_box={self.view_box})"
