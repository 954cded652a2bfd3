"""SVG path analysis for automatic symbol data setup.

Parses glyph path data into typed segments and infers default in/out
points: the pen starts writing at the first move-to of the glyph and
leaves the glyph at the end of its last stroke.

Path data is parsed with svgpathtools, one subpath (move-to) at a time so
that move-to and close path commands stay visible in the segment list.
"""

import logging
import re
from dataclasses import dataclass
from typing import List, Sequence, Tuple

from svgpathtools import parse_path, Line, CubicBezier, QuadraticBezier, Arc

from models.geometry import Vec2
from models.glyph_document import PathData

_logger = logging.getLogger('PathAnalyzer')

# Split before every move-to command
_SUBPATH_RE = re.compile(r'(?=[Mm])')
# Trailing close path commands of a subpath
_CLOSE_RE = re.compile(r'(?:[Zz][\s,]*)+$')
_NUMBER_RE = re.compile(r'[-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?')


@dataclass
class PathSegment:
    """One path command with absolute end point."""
    end: Vec2


@dataclass
class MoveTo(PathSegment):
    pass


@dataclass
class LineTo(PathSegment):
    pass


@dataclass
class CurveTo(PathSegment):
    """Cubic (C/S) or quadratic (Q/T) Bezier curve."""
    controls: Tuple[Vec2, ...] = ()


@dataclass
class ArcTo(PathSegment):
    pass


@dataclass
class ClosePath(PathSegment):
    pass


def _vec(z) -> Vec2:
    return Vec2(z.real, z.imag)


def _typed_segment(segment) -> PathSegment:
    """Typed view of one svgpathtools segment."""
    if isinstance(segment, Line):
        return LineTo(_vec(segment.end))
    if isinstance(segment, CubicBezier):
        return CurveTo(_vec(segment.end), (_vec(segment.control1), _vec(segment.control2)))
    if isinstance(segment, QuadraticBezier):
        return CurveTo(_vec(segment.end), (_vec(segment.control),))
    if isinstance(segment, Arc):
        return ArcTo(_vec(segment.end))
    raise ValueError(f"Unsupported path segment {segment!r}")


def _move_target(body: str, pen: complex) -> complex:
    """Position of a move-to that draws nothing (svgpathtools yields no segment)."""
    values = [float(v) for v in _NUMBER_RE.findall(body)]
    if len(values) != 2:
        raise ValueError(f"Move-to expects 2 arguments: '{body.strip()}'")
    target = complex(values[0], values[1])
    return pen + target if body.lstrip().startswith('m') else target


def parse_path_data(d: str) -> List[PathSegment]:
    """Parse an SVG path data string into absolute typed segments.

    Relative coordinates are resolved onto the current pen position,
    including a relative move-to after an earlier subpath.

    Raises:
        ValueError: On missing arguments or data before the first command
    """
    segments = []
    pen = 0j
    for chunk in _SUBPATH_RE.split(d):
        if not chunk.strip():
            continue
        closed = _CLOSE_RE.search(chunk) is not None
        body = _CLOSE_RE.sub('', chunk)
        try:
            path = parse_path(body, current_pos=pen)
        except (ValueError, IndexError, ZeroDivisionError) as e:
            raise ValueError(f"Invalid path data '{chunk.strip()}': {e}") from e

        if body.lstrip()[:1] in ('M', 'm'):
            start = path[0].start if len(path) else _move_target(body, pen)
            segments.append(MoveTo(_vec(start)))
        else:
            start = pen
        segments.extend(_typed_segment(segment) for segment in path)

        if closed:
            segments.append(ClosePath(_vec(start)))
            pen = start
        elif len(path):
            pen = path[-1].end
        else:
            pen = start
    return segments


def split_subpaths(segments: Sequence[PathSegment]) -> List[List[PathSegment]]:
    """Split a segment list at each move-to."""
    subpaths = []
    for segment in segments:
        if isinstance(segment, MoveTo) or not subpaths:
            subpaths.append([])
        subpaths[-1].append(segment)
    return subpaths


class PathAnalyzer:
    """Infers begin and end points of a glyph from its path data.

    Points are returned in artwork space (SVG user units) with the
    translation of the owning <path> element applied.
    """

    def __init__(self, paths: Sequence):
        """
        Args:
            paths: PathData objects or plain path data strings, in
                document order

        Raises:
            ValueError: If any path data cannot be parsed
        """
        self.paths = [p if isinstance(p, PathData) else PathData(p) for p in paths]
        # (segments, translate) for every subpath of every path
        self.subpaths = []
        for path in self.paths:
            for subpath in split_subpaths(parse_path_data(path.d)):
                self.subpaths.append((subpath, path.translate))

    def _first_subpath(self):
        if not self.subpaths:
            raise ValueError("No path data to analyze")
        return self.subpaths[0]

    def _last_subpath(self):
        if not self.subpaths:
            raise ValueError("No path data to analyze")
        return self.subpaths[-1]

    def get_translate_point(self, index: int = 0) -> Vec2:
        """Translation offset of the path at index, (0, 0) if none declared."""
        if not self.paths:
            return Vec2(0.0, 0.0)
        return self.paths[index].translate

    def get_begin_point(self) -> Vec2:
        """Leading move-to of the first subpath plus translation."""
        segments, translate = self._first_subpath()
        return self._start_point(segments) + translate

    def get_end_point(self) -> Vec2:
        """End of the last stroke of the last subpath plus translation.

        The terminal command is the last one that is not a close path.
        Curves and lines give their end point; any other terminal
        command falls back to the subpath start point.
        """
        segments, translate = self._last_subpath()
        terminal = next((s for s in reversed(segments) if not isinstance(s, ClosePath)), None)
        if isinstance(terminal, (CurveTo, LineTo)):
            return terminal.end + translate
        _logger.warning("Last subpath has no terminal curve or line, using its start point")
        return self._start_point(segments) + translate

    @staticmethod
    def _start_point(segments) -> Vec2:
        first = segments[0]
        if isinstance(first, MoveTo):
            return first.end
        # Path data without a leading move-to starts at the origin
        return Vec2(0.0, 0.0)
