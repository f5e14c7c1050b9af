import logging
from typing import Optional

from PySide6.QtCore import QPointF, Qt, Signal
from PySide6.QtGui import QBrush, QPainter
from PySide6.QtWidgets import QGraphicsDropShadowEffect, QWidget

from cmruler.colors.modes import ColorMap
from cmruler.config import RulerConfig, RulerStyle
from cmruler.interaction.cursors import Cursor, CursorController
from cmruler.renderers.ruler import RulerRenderer
from cmruler.rulers.centimeter import CentimeterRuler, RulerMetrics

logger = logging.getLogger(__name__)


class RulerWidget(QWidget):
    """
    Ruler drawing with two draggable cursors.

    Key behaviors:
    - Fixed size: the ruler is drawn at its true points-per-cm scale
    - Mouse press near a cursor grabs it; moves are forwarded to the CursorController
    - Rejected drag positions leave the cursor where it was
    - Emits cursorsChanged(left, right) and distanceChanged(distance) after each accepted move
    """

    cursorsChanged = Signal(float, float)
    distanceChanged = Signal(float)

    def __init__(self, metrics: RulerMetrics, color_map: ColorMap, config: Optional[RulerConfig] = None, style: Optional[RulerStyle] = None, parent: Optional[QWidget] = None) -> None:
        """Create ruler widget for the given metrics. Rulers shorter than 1 cm are drawn 1 cm long."""
        super().__init__(parent)
        self.color_map: ColorMap = color_map
        self.config: RulerConfig = config or RulerConfig()
        self.ruler_style: RulerStyle = style or RulerStyle()

        metrics = self._usable_metrics(metrics)
        self.ruler: CentimeterRuler = CentimeterRuler(metrics)
        self.renderer: RulerRenderer = RulerRenderer(self.ruler, color_map, self.ruler_style)
        left, right = self._initial_positions(metrics.ruler_length)
        self.cursors: CursorController = CursorController(metrics.ruler_length, left, right, on_change=self._cursors_changed)

        self.dragging: Optional[Cursor] = None
        self.setMouseTracking(True)
        self._apply_size()

        shadow = QGraphicsDropShadowEffect(self)
        shadow.setBlurRadius(4)
        shadow.setOffset(0, 2)
        shadow.setColor(color_map.with_alpha(color_map.get_object_color("shadow"), 0.1))
        self.setGraphicsEffect(shadow)

    @property
    def origin_x(self) -> float:
        """Widget x coordinate of the 0 cm mark."""
        return self.config.margin

    @property
    def distance(self) -> float:
        return self.cursors.distance

    def set_metrics(self, metrics: RulerMetrics) -> None:
        """Switch to new display metrics, keeping the cursors inside the new ruler."""
        metrics = self._usable_metrics(metrics)
        self.ruler = CentimeterRuler(metrics)
        self.renderer = RulerRenderer(self.ruler, self.color_map, self.ruler_style)
        self.cursors.set_ruler_length(metrics.ruler_length)
        self._apply_size()
        self.update()

    def paintEvent(self, event):
        painter = QPainter(self)
        painter.setRenderHint(QPainter.RenderHint.Antialiasing)
        painter.setBrush(QBrush(self.color_map.get_object_color("surface-base")))
        painter.setPen(Qt.PenStyle.NoPen)
        painter.drawRect(self.rect())

        painter.translate(self.origin_x, 0)
        self.renderer.draw_ruler(painter)
        self.renderer.draw_cursor(painter, self.cursors.left)
        self.renderer.draw_cursor(painter, self.cursors.right)
        painter.end()

    def mousePressEvent(self, event):
        if event.button() != Qt.MouseButton.LeftButton:
            return
        self.dragging = self.cursor_at(event.position())
        if self.dragging is not None:
            logger.debug("Grabbed %s cursor", self.dragging.value)
            self.setCursor(Qt.CursorShape.SizeHorCursor)
            event.accept()

    def mouseMoveEvent(self, event):
        pos = event.position()
        if self.dragging is not None:
            if self.cursors.drag(self.dragging, pos.x() - self.origin_x, self.ruler.points_per_cm):
                self.update()
            event.accept()
            return

        # Hover feedback
        if self.cursor_at(pos):
            self.setCursor(Qt.CursorShape.SizeHorCursor)
        else:
            self.setCursor(Qt.CursorShape.ArrowCursor)

    def mouseReleaseEvent(self, event):
        if event.button() == Qt.MouseButton.LeftButton and self.dragging is not None:
            logger.debug("Released %s cursor at %.2f cm", self.dragging.value, self.cursors.position(self.dragging))
            self.dragging = None
            self.setCursor(Qt.CursorShape.ArrowCursor)
            event.accept()

    def cursor_at(self, pos: QPointF) -> Optional[Cursor]:
        """Cursor under a widget position, if any."""
        if pos.y() < 0 or pos.y() > self.cursor_bottom():
            return None
        value = self.ruler.get_value_at(pos.x() - self.origin_x)
        tolerance = self.ruler.get_delta_width(self.config.hit_tolerance)
        return self.cursors.cursor_at(value, tolerance)

    def cursor_bottom(self) -> float:
        """Lowest y of the cursor overlay including its caption."""
        return self.ruler_style.cursor_height + self.ruler_style.knob_diameter + self.ruler_style.cursor_font_size + 10

    def _cursors_changed(self, left: float, right: float) -> None:
        self.cursorsChanged.emit(left, right)
        self.distanceChanged.emit(abs(right - left))

    def _apply_size(self) -> None:
        width = self.ruler.length + 2 * self.config.margin
        height = max(self.config.frame_height, self.cursor_bottom())
        self.setFixedSize(int(round(width)), int(round(height)))

    def _initial_positions(self, ruler_length: int) -> tuple:
        left, right = self.config.initial_left, self.config.initial_right
        if 0 <= left < right <= ruler_length:
            return left, right
        logger.warning("Initial cursors %.1f-%.1f do not fit a %d cm ruler, using 0-%d", left, right, ruler_length, ruler_length)
        return 0.0, float(ruler_length)

    def _usable_metrics(self, metrics: RulerMetrics) -> RulerMetrics:
        if metrics.ruler_length >= 1:
            return metrics
        logger.warning("Display too small for a %d cm ruler, drawing 1 cm", metrics.ruler_length)
        return RulerMetrics(points_per_cm=metrics.points_per_cm, ruler_length=1)
