"""Services of the Glyph Symbol Data Editor."""
