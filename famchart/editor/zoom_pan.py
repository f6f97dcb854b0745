"""Viewport state: zoom factor and pan offset.

Screen coordinates relate to layout coordinates as
``screen = layout * zoom + pan``.
"""

import logging
import math
from typing import Optional, Tuple

from famchart.config.settings import get_setting
from famchart.exceptions import InvalidArgumentError

logger = logging.getLogger(__name__)


def _clamp(value: float, lo: float, hi: float) -> float:
    return max(lo, min(hi, value))


class ZoomPanState:
    """Zoom clamped to [min_zoom, max_zoom] plus an unconstrained pan.

    Non-finite zoom levels and pan deltas are ignored rather than
    rejected, since they typically come from degenerate input events.
    """

    def __init__(
        self,
        min_zoom: Optional[float] = None,
        max_zoom: Optional[float] = None,
        zoom_step: Optional[float] = None,
    ):
        self._zoom = 1.0
        self._pan_x = 0.0
        self._pan_y = 0.0
        self._min_zoom = 0.1
        self._max_zoom = 8.0
        self._zoom_step = 1.1
        self.set_zoom_bounds(
            min_zoom if min_zoom is not None else get_setting('min_zoom'),
            max_zoom if max_zoom is not None else get_setting('max_zoom'),
        )
        self.set_zoom_step(zoom_step if zoom_step is not None else get_setting('zoom_step'))

    @property
    def zoom(self) -> float:
        return self._zoom

    @property
    def min_zoom(self) -> float:
        return self._min_zoom

    @property
    def max_zoom(self) -> float:
        return self._max_zoom

    @property
    def zoom_step(self) -> float:
        return self._zoom_step

    @property
    def pan_x(self) -> float:
        return self._pan_x

    @property
    def pan_y(self) -> float:
        return self._pan_y

    @property
    def pan(self) -> Tuple[float, float]:
        return (self._pan_x, self._pan_y)

    def set_zoom(self, level: float) -> None:
        """Set the zoom level, clamped to the bounds. NaN/inf is ignored."""
        if level is None or not math.isfinite(level):
            return
        self._zoom = _clamp(level, self._min_zoom, self._max_zoom)

    def set_zoom_bounds(self, min_zoom: float, max_zoom: float) -> None:
        """Change the zoom limits and re-clamp the current level.

        Raises:
            InvalidArgumentError: If either bound is <= 0, non-finite or min > max
        """
        if min_zoom is None or max_zoom is None:
            raise InvalidArgumentError("Zoom bounds must not be None")
        if not (math.isfinite(min_zoom) and math.isfinite(max_zoom)):
            raise InvalidArgumentError(
                f"Zoom bounds must be finite: min={min_zoom}, max={max_zoom}"
            )
        if min_zoom <= 0 or max_zoom <= 0 or min_zoom > max_zoom:
            raise InvalidArgumentError(
                f"Invalid zoom bounds: min={min_zoom}, max={max_zoom}"
            )
        self._min_zoom = float(min_zoom)
        self._max_zoom = float(max_zoom)
        self.set_zoom(self._zoom)

    def set_zoom_step(self, step_factor: float) -> None:
        """Set the multiplicative step used by zoom_in/zoom_out.

        Raises:
            InvalidArgumentError: If step_factor is not greater than 1.0
        """
        if step_factor is None or not step_factor > 1.0:
            raise InvalidArgumentError(f"Zoom step must be > 1.0, got {step_factor}")
        self._zoom_step = float(step_factor)

    def zoom_in(self) -> None:
        self.set_zoom(self._zoom * self._zoom_step)

    def zoom_out(self) -> None:
        self.set_zoom(self._zoom / self._zoom_step)

    def zoom_at(self, screen_x: float, screen_y: float, zoom_in: bool) -> bool:
        """Zoom one step keeping the given screen point fixed.

        Returns:
            False if the zoom is already at the limit in that direction
        """
        old_zoom = self._zoom
        target = old_zoom * self._zoom_step if zoom_in else old_zoom / self._zoom_step
        new_zoom = _clamp(target, self._min_zoom, self._max_zoom)
        if new_zoom == old_zoom:
            return False

        k = new_zoom / old_zoom
        self._pan_x = screen_x - (screen_x - self._pan_x) * k
        self._pan_y = screen_y - (screen_y - self._pan_y) * k
        self._zoom = new_zoom
        return True

    def pan_by(self, dx: float, dy: float) -> None:
        """Shift the view; ignored unless both deltas are finite."""
        if dx is None or dy is None or not (math.isfinite(dx) and math.isfinite(dy)):
            return
        self._pan_x += dx
        self._pan_y += dy

    def reset_view(self) -> None:
        """Return to zoom 1.0 and no pan, even if 1.0 is outside the bounds."""
        self._zoom = 1.0
        self._pan_x = 0.0
        self._pan_y = 0.0

    def to_layout(self, screen_x: float, screen_y: float) -> Tuple[float, float]:
        """Convert a screen point to layout coordinates."""
        return (
            (screen_x - self._pan_x) / self._zoom,
            (screen_y - self._pan_y) / self._zoom,
        )

    def to_screen(self, layout_x: float, layout_y: float) -> Tuple[float, float]:
        """Convert a layout point to screen coordinates."""
        return (
            layout_x * self._zoom + self._pan_x,
            layout_y * self._zoom + self._pan_y,
        )


__all__ = ["ZoomPanState"]
