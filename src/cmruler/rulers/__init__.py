from .base import BaseRuler
from .centimeter import CentimeterRuler, DisplayMetrics, RulerMetrics, compute_metrics, points_per_cm

__all__ = ["BaseRuler", "CentimeterRuler", "DisplayMetrics", "RulerMetrics", "compute_metrics", "points_per_cm"]
