from typing import Optional

from PySide6.QtCore import QRect, Qt
from PySide6.QtGui import QFont, QPainter, QScreen
from PySide6.QtWidgets import QLabel, QVBoxLayout, QWidget

from cmruler.colors.modes import ColorMap
from cmruler.config import RulerConfig, RulerStyle
from cmruler.rulers.centimeter import DisplayMetrics, RulerMetrics, compute_metrics
from cmruler.widgets import RulerWidget


class RulerView(QWidget):
    """
    Main composite ruler view.

    Uses a QVBoxLayout to arrange:
    - The ruler widget (ticks, labels and the two cursors)
    - The distance label underneath ("2.0 cm")

    The ruler widget owns the cursor state; this view only listens to its
    distanceChanged signal and follows screen geometry changes.
    """

    def __init__(self, display: DisplayMetrics, color_map: ColorMap, config: Optional[RulerConfig] = None, style: Optional[RulerStyle] = None, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self.color_map = color_map
        self.config = config or RulerConfig()
        self.display = display
        self._screen: Optional[QScreen] = None

        self.ruler_widget = RulerWidget(compute_metrics(display, self.config), color_map, self.config, style, self)

        self.distance_label = QLabel(self)
        font = QFont(self.distance_label.font())
        font.setPointSize(22)
        font.setBold(True)
        self.distance_label.setFont(font)
        self.distance_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.distance_label.setStyleSheet(f"color: {color_map.get_object_color('text-base').name()};")

        # Layout
        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(20)
        layout.addWidget(self.ruler_widget, 0, Qt.AlignmentFlag.AlignHCenter)
        layout.addWidget(self.distance_label)
        layout.addStretch(1)

        self.ruler_widget.distanceChanged.connect(self._update_distance)
        self._update_distance(self.ruler_widget.distance)

    @property
    def metrics(self) -> RulerMetrics:
        return self.ruler_widget.ruler.metrics

    def paintEvent(self, event):
        painter = QPainter(self)
        painter.fillRect(self.rect(), self.color_map.get_object_color("surface-base"))
        painter.end()

    def follow_screen(self, screen: Optional[QScreen]) -> None:
        """Recompute the ruler whenever `screen`'s available geometry changes. None stops following."""
        if self._screen is not None:
            self._screen.availableGeometryChanged.disconnect(self._screen_geometry_changed)
        self._screen = screen
        if screen is not None:
            screen.availableGeometryChanged.connect(self._screen_geometry_changed)

    def _screen_geometry_changed(self, _geometry: QRect) -> None:
        self.set_display(DisplayMetrics.from_screen(self._screen, self.config.logical_dpi))

    def set_display(self, display: DisplayMetrics) -> None:
        self.display = display
        self.ruler_widget.set_metrics(compute_metrics(display, self.config))
        self._update_distance(self.ruler_widget.distance)

    def distance_text(self) -> str:
        return format_distance(self.ruler_widget.distance)

    def _update_distance(self, distance: float) -> None:
        self.distance_label.setText(format_distance(distance))


def format_distance(distance: float) -> str:
    return f"{distance:.1f} cm"
