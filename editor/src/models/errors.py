"""Exceptions raised while loading glyphs into the symbol data editor."""


class LoadError(ValueError):
    """Glyph document is missing, unparseable, or has nothing to edit.

    The editor is left empty when this is raised; call clear() and load
    again with new input.
    """


class DegenerateGeometryError(LoadError):
    """Glyph bounding box has zero width or height.

    Normalized coordinates are undefined for such a glyph.
    """
