from typing import Literal, Optional
from PySide6.QtGui import QColor


ObjectColorName = Literal["surface-base", "panel-top", "panel-bottom", "border", "text-base", "shadow"]
AccentName = Literal["accent", "accent-strong"]


class ColorMap:

    # Neutral color level map for light & dark mode
    _neutral_levels: dict[str, list[QColor]] = {
        "neutral-0": [QColor(255, 255, 255), QColor(0, 0, 0)],
        "neutral-50": [QColor(246, 247, 249), QColor(20, 24, 31)],
        "neutral-95": [QColor(242, 242, 242), QColor(31, 38, 51)],
        "neutral-98": [QColor(250, 250, 250), QColor(39, 49, 63)],
        "neutral-500": [QColor(128, 128, 128), QColor(98, 112, 132)],
        "neutral-900": [QColor(24, 29, 37), QColor(237, 239, 243)],
        "neutral-1000": [QColor(0, 0, 0), QColor(0, 0, 0)],
    }

    _accent_levels: dict[str, list[QColor]] = {
        "accent": [QColor(0, 122, 255), QColor(10, 132, 255)],
        "accent-strong": [QColor(0, 88, 208), QColor(64, 156, 255)],
    }

    def __init__(self, darkmode: bool = False) -> None:
        """Create color map. darkmode=True for dark theme, False for light theme."""
        self.darkmode: bool = darkmode

    def get_object_color(self, name: ObjectColorName, darkmode: Optional[bool] = None) -> QColor:
        """Get UI color (surface, panel, border, text). Uses instance darkmode if not specified."""
        layout_and_text_colors = {
            "surface-base": ["neutral-0", "neutral-50"],
            "panel-top": ["neutral-95", "neutral-95"],
            "panel-bottom": ["neutral-98", "neutral-98"],
            "border": ["neutral-500", "neutral-500"],
            "text-base": ["neutral-900", "neutral-900"],
            "shadow": ["neutral-1000", "neutral-1000"],
        }
        return self._get_neutral_color(layout_and_text_colors[name][self._mode_loc(darkmode)], darkmode)

    def get_accent_color(self, name: AccentName = "accent", alpha: float = 1.0, darkmode: Optional[bool] = None) -> QColor:
        """Get the tick/cursor accent color with the given opacity (0..1)."""
        color = QColor(ColorMap._accent_levels[name][self._mode_loc(darkmode)])
        color.setAlphaF(alpha)
        return color

    def with_alpha(self, color: QColor, alpha: float) -> QColor:
        color = QColor(color)
        color.setAlphaF(alpha)
        return color

    def _get_neutral_color(self, level: str, darkmode: Optional[bool] = None) -> QColor:
        return ColorMap._neutral_levels[level][self._mode_loc(darkmode)]

    def _mode_loc(self, darkmode: Optional[bool]) -> int:
        if darkmode is None:
            darkmode = self.darkmode
        return 1 if darkmode else 0
