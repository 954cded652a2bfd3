"""Canvas helpers for the symbol data editor view."""

from .zoom_controller import ZoomController

__all__ = ['ZoomController']
