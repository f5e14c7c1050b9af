"""cmruler public API."""

from .ruler_view import RulerView
from .colors.modes import ColorMap
from .config import RulerConfig, RulerStyle
from .rulers import CentimeterRuler, DisplayMetrics, RulerMetrics, compute_metrics
from .interaction import Cursor, CursorController
from .renderers import RulerRenderer
from .widgets import RulerWidget

__all__ = [
    "RulerView",
    "ColorMap",
    "RulerConfig",
    "RulerStyle",
    "CentimeterRuler",
    "DisplayMetrics",
    "RulerMetrics",
    "compute_metrics",
    "Cursor",
    "CursorController",
    "RulerRenderer",
    "RulerWidget",
]
