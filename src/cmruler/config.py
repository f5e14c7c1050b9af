"""
Configuration
=============
Constants and tunables for the ruler, grouped in two dataclasses:

* ``RulerConfig``: geometry and behaviour (scale, margins, initial cursors).
* ``RulerStyle``: the look of the drawing (tick heights, stroke widths,
  gradient alphas, panel geometry, fonts).

Both have defaults that reproduce the stock ruler; pass modified copies
(``dataclasses.replace``) to the widgets to change them.
"""
from dataclasses import dataclass, field
from typing import Dict, Tuple

from cmruler.tiers import TickTier

CM_PER_INCH: float = 2.54
LOGICAL_DPI: float = 96.0  # Logical points per inch used by the host


@dataclass(frozen=True)
class TickStyle:
    """Stroke for one tick tier: height in points, pen width, gradient alpha (top, bottom)."""
    height: float
    width: float
    alpha: Tuple[float, float]


def _default_ticks() -> Dict[TickTier, TickStyle]:
    return {
        TickTier.MAJOR: TickStyle(height=35.0, width=1.5, alpha=(0.8, 0.4)),
        TickTier.HALF: TickStyle(height=25.0, width=1.0, alpha=(0.6, 0.3)),
        TickTier.EVEN: TickStyle(height=20.0, width=0.9, alpha=(0.5, 0.2)),
        TickTier.ODD: TickStyle(height=15.0, width=0.8, alpha=(0.4, 0.1)),
    }


@dataclass(frozen=True)
class RulerStyle:
    ticks: Dict[TickTier, TickStyle] = field(default_factory=_default_ticks)
    minor_tick_count: int = 10  # Subdivisions per centimeter

    # Background panel
    panel_height: float = 60.0
    overhang: float = 10.0  # Panel and baseline reach past both ruler ends
    guide_y: float = 5.0
    guide_width: float = 0.5
    border_width: float = 1.0
    baseline_width: float = 2.0
    baseline_alpha: Tuple[float, float] = (0.8, 0.6)

    # Labels
    label_y: float = 45.0
    label_dx: float = -5.0
    label_font_size: int = 14
    label_alpha: float = 0.8

    # Cursors
    cursor_width: float = 4.0
    cursor_height: float = 140.0
    knob_diameter: float = 12.0
    cursor_font_size: int = 12


@dataclass(frozen=True)
class RulerConfig:
    logical_dpi: float = LOGICAL_DPI
    margin: float = 16.0  # Padding on each side of the ruler, in points
    initial_left: float = 3.0
    initial_right: float = 5.0
    hit_tolerance: float = 12.0  # Cursor grab distance in points
    frame_height: float = 200.0
    darkmode: bool = False
