"""Zoom controller for the symbol data editor view.

Keeps the current scale factor of the view inside the configured bounds.
The view applies the relative factor returned by limit_scale().
"""

import logging

from constants import (
    MIN_SCALE_FACTOR, MAX_SCALE_FACTOR, DEFAULT_SCALE_FACTOR,
    WHEEL_ZOOM_BASE, WHEEL_ZOOM_STEP
)

_logger = logging.getLogger('ZoomController')


class ZoomController:
    """Clamped scale factor state of a zoomable view."""

    def __init__(self, min_scale=MIN_SCALE_FACTOR, max_scale=MAX_SCALE_FACTOR,
                 scale=DEFAULT_SCALE_FACTOR):
        if not 0 < min_scale <= max_scale:
            raise ValueError(f"Invalid zoom bounds [{min_scale}, {max_scale}]")
        self.min_scale = min_scale
        self.max_scale = max_scale
        self.scale_factor = max(min_scale, min(max_scale, scale))

    def limit_scale(self, factor) -> float:
        """Multiply the scale by factor, clamped to the zoom bounds.

        Returns:
            float: Relative factor to apply to the view. 1.0 when the
                scale is already at the bound in that direction.
        """
        if factor <= 0:
            return 1.0
        old_scale = self.scale_factor
        self.scale_factor = max(self.min_scale, min(self.max_scale, old_scale * factor))
        if self.scale_factor != old_scale:
            _logger.debug(f"Scale {old_scale:.3f} -> {self.scale_factor:.3f}")
        return self.scale_factor / old_scale

    def factor_for_wheel(self, angle_delta) -> float:
        """Zoom factor for a wheel delta in eighths of a degree."""
        return WHEEL_ZOOM_BASE ** (angle_delta / WHEEL_ZOOM_STEP)

    def set_bounds(self, min_scale, max_scale):
        """Replace the zoom bounds, re-clamping the current scale."""
        if not 0 < min_scale <= max_scale:
            raise ValueError(f"Invalid zoom bounds [{min_scale}, {max_scale}]")
        self.min_scale = min_scale
        self.max_scale = max_scale
        self.scale_factor = max(min_scale, min(max_scale, self.scale_factor))

    def reset(self):
        """Reset to the default scale."""
        self.scale_factor = max(self.min_scale, min(self.max_scale, DEFAULT_SCALE_FACTOR))
