"""Utilities of the Glyph Symbol Data Editor."""
