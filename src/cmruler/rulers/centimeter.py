import logging
import math
from dataclasses import dataclass
from typing import Optional

from PySide6.QtGui import QScreen

from cmruler.config import CM_PER_INCH, LOGICAL_DPI, RulerConfig
from .base import BaseRuler

logger = logging.getLogger(__name__)


def points_per_cm(logical_dpi: float = LOGICAL_DPI) -> float:
    """Logical points per centimeter (96 / 2.54 ~= 37.795 at the default dpi)."""
    return logical_dpi / CM_PER_INCH


@dataclass(frozen=True)
class DisplayMetrics:
    """Host display size in logical points."""
    width: float
    height: float
    logical_dpi: float = LOGICAL_DPI
    device_pixel_ratio: float = 1.0

    @property
    def long_side(self) -> float:
        return max(self.width, self.height)

    @classmethod
    def from_screen(cls, screen: QScreen, logical_dpi: float = LOGICAL_DPI) -> "DisplayMetrics":
        """Read the available size of a QScreen. The scale stays on the fixed logical dpi."""
        size = screen.availableSize()
        return cls(
            width=float(size.width()),
            height=float(size.height()),
            logical_dpi=logical_dpi,
            device_pixel_ratio=screen.devicePixelRatio(),
        )


@dataclass(frozen=True)
class RulerMetrics:
    points_per_cm: float
    ruler_length: int  # Whole centimeters

    @property
    def width(self) -> float:
        """Drawn ruler length in points."""
        return self.ruler_length * self.points_per_cm


def compute_metrics(display: DisplayMetrics, config: Optional[RulerConfig] = None) -> RulerMetrics:
    """Derive scale and whole-centimeter length from the display's long side minus margins."""
    config = config or RulerConfig()
    scale = points_per_cm(display.logical_dpi)
    extent = display.long_side - 2 * config.margin
    length = max(0, math.floor(extent / scale))
    logger.debug("Display %.0fx%.0f -> %d cm at %.3f pt/cm", display.width, display.height, length, scale)
    return RulerMetrics(points_per_cm=scale, ruler_length=length)


class CentimeterRuler(BaseRuler):
    """Ruler for the range [0, ruler_length] cm drawn at a fixed points-per-cm scale."""

    def __init__(self, metrics: RulerMetrics) -> None:
        """Create ruler from precomputed metrics."""
        self.metrics = metrics
        super().__init__(0.0, float(metrics.ruler_length), length=metrics.width)

    @property
    def points_per_cm(self) -> float:
        return self.metrics.points_per_cm

    @property
    def ruler_length(self) -> int:
        return self.metrics.ruler_length
