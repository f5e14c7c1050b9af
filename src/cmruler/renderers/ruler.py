from dataclasses import dataclass
from typing import List, Optional, Union

import numpy as np
from PySide6.QtCore import QLineF, QPointF, QRectF, Qt
from PySide6.QtGui import QBrush, QFont, QLinearGradient, QPainter, QPen

from cmruler.colors.modes import ColorMap
from cmruler.config import RulerStyle
from cmruler.rulers.centimeter import CentimeterRuler
from cmruler.tiers import TickTier


@dataclass(frozen=True)
class Panel:
    x: float
    y: float
    width: float
    height: float
    guide_y: float


@dataclass(frozen=True)
class Tick:
    x: float
    value: float  # Position in cm
    tier: TickTier


@dataclass(frozen=True)
class Label:
    x: float
    y: float
    text: str


@dataclass(frozen=True)
class Baseline:
    x1: float
    x2: float
    y: float = 0.0


DrawInstruction = Union[Panel, Tick, Label, Baseline]


class RulerRenderer:
    """
    Turns a CentimeterRuler into draw instructions and paints them.

    Coordinates are in points relative to the ruler origin (0 cm at x=0, the
    ruler's top edge at y=0). The caller translates the painter.

    Output order: panel, then per centimeter its major tick, label and minor
    ticks, then the baseline on top.
    """

    def __init__(self, ruler: CentimeterRuler, color_map: ColorMap, style: Optional[RulerStyle] = None) -> None:
        self.ruler = ruler
        self.color_map = color_map
        self.style = style or RulerStyle()

    def get_major_tickers(self) -> np.ndarray:
        """Whole centimeters 0..ruler_length inclusive."""
        return np.arange(self.ruler.ruler_length + 1)

    def get_minor_offsets(self) -> np.ndarray:
        """Minor tick offsets within one centimeter, in cm (0.1 .. 0.9 by default)."""
        count = self.style.minor_tick_count
        return np.arange(1, count) / count

    def instructions(self) -> List[DrawInstruction]:
        style = self.style
        width = self.ruler.length
        result: List[DrawInstruction] = [
            Panel(-style.overhang, 0.0, width + 2 * style.overhang, style.panel_height, style.guide_y)
        ]

        minor_offsets = self.get_minor_offsets()
        for cm in self.get_major_tickers():
            cm = int(cm)
            x = self.ruler.transform(cm)
            result.append(Tick(x, float(cm), TickTier.MAJOR))
            result.append(Label(x + style.label_dx, style.label_y, str(cm)))

            if cm < self.ruler.ruler_length:
                for index, offset in enumerate(minor_offsets, start=1):
                    value = cm + float(offset)
                    result.append(Tick(self.ruler.transform(value), value, TickTier.for_minor(index)))

        result.append(Baseline(-style.overhang, width + style.overhang))
        return result

    def draw_ruler(self, painter: QPainter) -> None:
        painter.save()
        painter.setRenderHint(QPainter.RenderHint.Antialiasing)
        for instruction in self.instructions():
            if isinstance(instruction, Tick):
                self._draw_tick(painter, instruction)
            elif isinstance(instruction, Label):
                self._draw_label(painter, instruction)
            elif isinstance(instruction, Panel):
                self._draw_panel(painter, instruction)
            elif isinstance(instruction, Baseline):
                self._draw_baseline(painter, instruction)
        painter.restore()

    def draw_cursor(self, painter: QPainter, position: float) -> None:
        """Cursor overlay: vertical bar, round knob at its foot and the position caption."""
        style = self.style
        x = self.ruler.transform(position)
        painter.save()
        painter.setRenderHint(QPainter.RenderHint.Antialiasing)

        bar = QRectF(x - style.cursor_width / 2, 0, style.cursor_width, style.cursor_height)
        gradient = QLinearGradient(bar.topLeft(), bar.bottomLeft())
        gradient.setColorAt(0, self.color_map.get_accent_color(alpha=0.8))
        gradient.setColorAt(1, self.color_map.get_accent_color(alpha=0.6))
        painter.setPen(Qt.PenStyle.NoPen)
        painter.setBrush(QBrush(gradient))
        painter.drawRect(bar)

        radius = style.knob_diameter / 2
        knob = QRectF(x - radius, style.cursor_height - radius, style.knob_diameter, style.knob_diameter)
        knob_gradient = QLinearGradient(knob.topLeft(), knob.bottomLeft())
        knob_gradient.setColorAt(0, self.color_map.get_accent_color(alpha=1.0))
        knob_gradient.setColorAt(1, self.color_map.get_accent_color(alpha=0.8))
        painter.setBrush(QBrush(knob_gradient))
        painter.drawEllipse(knob)

        font = QFont(painter.font())
        font.setPixelSize(style.cursor_font_size)
        font.setWeight(QFont.Weight.Medium)
        painter.setFont(font)
        painter.setPen(QPen(self.color_map.get_accent_color(), 1))
        caption_top = style.cursor_height + radius + 4
        painter.drawText(QRectF(x - 30, caption_top, 60, style.cursor_font_size + 6), Qt.AlignmentFlag.AlignCenter, f"{position:.1f}")
        painter.restore()

    def _draw_panel(self, painter: QPainter, panel: Panel) -> None:
        rect = QRectF(panel.x, panel.y, panel.width, panel.height)
        gradient = QLinearGradient(QPointF(0, panel.y), QPointF(0, panel.y + panel.height))
        gradient.setColorAt(0, self.color_map.get_object_color("panel-top"))
        gradient.setColorAt(1, self.color_map.get_object_color("panel-bottom"))
        painter.fillRect(rect, QBrush(gradient))

        border = self.color_map.with_alpha(self.color_map.get_object_color("border"), 0.3)
        painter.setPen(QPen(border, self.style.border_width))
        painter.setBrush(Qt.BrushStyle.NoBrush)
        painter.drawRect(rect)

        painter.setPen(QPen(self.color_map.get_accent_color(alpha=0.2), self.style.guide_width))
        painter.drawLine(QLineF(panel.x, panel.guide_y, panel.x + panel.width, panel.guide_y))

    def _draw_tick(self, painter: QPainter, tick: Tick) -> None:
        tick_style = self.style.ticks[tick.tier]
        top, bottom = tick_style.alpha
        gradient = QLinearGradient(QPointF(tick.x, 0), QPointF(tick.x, tick_style.height))
        gradient.setColorAt(0, self.color_map.get_accent_color(alpha=top))
        gradient.setColorAt(1, self.color_map.get_accent_color(alpha=bottom))
        painter.setPen(QPen(QBrush(gradient), tick_style.width))
        painter.drawLine(QLineF(tick.x, 0, tick.x, tick_style.height))

    def _draw_label(self, painter: QPainter, label: Label) -> None:
        font = QFont(painter.font())
        font.setPixelSize(self.style.label_font_size)
        font.setWeight(QFont.Weight.Medium)
        painter.setFont(font)
        painter.setPen(QPen(self.color_map.get_accent_color(alpha=self.style.label_alpha), 1))
        half = self.style.label_font_size * 1.5
        painter.drawText(QRectF(label.x - half, label.y - half / 2, 2 * half, half), Qt.AlignmentFlag.AlignCenter, label.text)

    def _draw_baseline(self, painter: QPainter, baseline: Baseline) -> None:
        left, right = self.style.baseline_alpha
        gradient = QLinearGradient(QPointF(baseline.x1, baseline.y), QPointF(baseline.x2, baseline.y))
        gradient.setColorAt(0, self.color_map.get_accent_color(alpha=left))
        gradient.setColorAt(1, self.color_map.get_accent_color(alpha=right))
        painter.setPen(QPen(QBrush(gradient), self.style.baseline_width))
        painter.drawLine(QLineF(baseline.x1, baseline.y, baseline.x2, baseline.y))
