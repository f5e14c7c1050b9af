import os
import unittest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from PySide6.QtCore import QCoreApplication, QEvent, QPointF, Qt
from PySide6.QtGui import QMouseEvent
from PySide6.QtWidgets import QApplication

from cmruler.colors.modes import ColorMap
from cmruler.config import RulerConfig
from cmruler.interaction.cursors import Cursor
from cmruler.ruler_view import RulerView, format_distance
from cmruler.rulers.centimeter import DisplayMetrics, RulerMetrics, compute_metrics, points_per_cm
from cmruler.widgets import RulerWidget

app = QApplication.instance() or QApplication([])

PPCM = points_per_cm()


def send_mouse(widget, event_type, x, y=50.0, button=Qt.MouseButton.LeftButton):
    held = Qt.MouseButton.NoButton if event_type == QEvent.Type.MouseButtonRelease else button
    if event_type == QEvent.Type.MouseMove:
        button = Qt.MouseButton.NoButton
    pos = QPointF(x, y)
    event = QMouseEvent(event_type, pos, pos, button, held, Qt.KeyboardModifier.NoModifier)
    QCoreApplication.sendEvent(widget, event)


class TestRulerWidget(unittest.TestCase):
    def setUp(self):
        self.widget = RulerWidget(RulerMetrics(points_per_cm=PPCM, ruler_length=10), ColorMap())
        self.distances = []
        self.widget.distanceChanged.connect(lambda distance: self.distances.append(distance))

    def tearDown(self):
        self.widget.deleteLater()

    def x_of(self, cm):
        return self.widget.origin_x + cm * PPCM

    def drag(self, start_cm, *targets_cm):
        send_mouse(self.widget, QEvent.Type.MouseButtonPress, self.x_of(start_cm))
        for cm in targets_cm:
            send_mouse(self.widget, QEvent.Type.MouseMove, self.x_of(cm))
        send_mouse(self.widget, QEvent.Type.MouseButtonRelease, self.x_of(targets_cm[-1] if targets_cm else start_cm))

    def test_initial_state(self):
        self.assertEqual(self.widget.cursors.left, 3.0)
        self.assertEqual(self.widget.cursors.right, 5.0)
        self.assertEqual(self.widget.distance, 2.0)

    def test_fixed_size_follows_scale(self):
        self.assertEqual(self.widget.width(), round(10 * PPCM + 2 * 16))
        self.assertEqual(self.widget.height(), 200)

    def test_drag_left_cursor(self):
        self.drag(3.0, 4.0)
        self.assertAlmostEqual(self.widget.cursors.left, 4.0)
        self.assertAlmostEqual(self.distances[-1], 1.0)
        self.assertIsNone(self.widget.dragging)

    def test_drag_left_past_right_is_ignored(self):
        self.drag(3.0, 4.0, 6.0)
        self.assertAlmostEqual(self.widget.cursors.left, 4.0)
        self.assertEqual(len(self.distances), 1)

    def test_drag_right_below_left_is_ignored(self):
        self.drag(5.0, 2.0)
        self.assertEqual(self.widget.cursors.right, 5.0)
        self.assertEqual(self.distances, [])

    def test_drag_right_to_end(self):
        self.drag(5.0, 9.0, 9.9, 10.5)
        self.assertAlmostEqual(self.widget.cursors.right, 9.9)
        self.assertAlmostEqual(self.widget.distance, 6.9)

    def test_press_away_from_cursors(self):
        self.drag(8.0, 1.0)
        self.assertEqual((self.widget.cursors.left, self.widget.cursors.right), (3.0, 5.0))

    def test_press_below_cursor_overlay(self):
        send_mouse(self.widget, QEvent.Type.MouseButtonPress, self.x_of(3.0), y=190.0)
        self.assertIsNone(self.widget.dragging)

    def test_cursor_at(self):
        self.assertEqual(self.widget.cursor_at(QPointF(self.x_of(3.0) + 5, 10)), Cursor.LEFT)
        self.assertEqual(self.widget.cursor_at(QPointF(self.x_of(5.0) - 5, 10)), Cursor.RIGHT)
        self.assertIsNone(self.widget.cursor_at(QPointF(self.x_of(4.0), 10)))

    def test_hover_cursor_shape(self):
        send_mouse(self.widget, QEvent.Type.MouseMove, self.x_of(3.0), button=Qt.MouseButton.NoButton)
        self.assertEqual(self.widget.cursor().shape(), Qt.CursorShape.SizeHorCursor)
        send_mouse(self.widget, QEvent.Type.MouseMove, self.x_of(8.0), button=Qt.MouseButton.NoButton)
        self.assertEqual(self.widget.cursor().shape(), Qt.CursorShape.ArrowCursor)
        self.assertIsNone(self.widget.dragging)

    def test_right_button_does_not_grab(self):
        send_mouse(self.widget, QEvent.Type.MouseButtonPress, self.x_of(3.0), button=Qt.MouseButton.RightButton)
        self.assertIsNone(self.widget.dragging)
        send_mouse(self.widget, QEvent.Type.MouseMove, self.x_of(4.0), button=Qt.MouseButton.RightButton)
        send_mouse(self.widget, QEvent.Type.MouseButtonRelease, self.x_of(4.0), button=Qt.MouseButton.RightButton)
        self.assertEqual(self.widget.cursors.left, 3.0)
        self.assertEqual(self.distances, [])

    def test_set_metrics_shrinks_cursors(self):
        cursors = []
        self.widget.cursorsChanged.connect(lambda left, right: cursors.append((left, right)))
        self.widget.set_metrics(RulerMetrics(points_per_cm=PPCM, ruler_length=4))
        self.assertEqual((self.widget.cursors.left, self.widget.cursors.right), (3.0, 4.0))
        self.assertEqual(cursors, [(3.0, 4.0)])
        self.assertEqual(self.widget.width(), round(4 * PPCM + 2 * 16))

    def test_small_display(self):
        widget = RulerWidget(RulerMetrics(points_per_cm=PPCM, ruler_length=0), ColorMap())
        self.assertEqual(widget.ruler.ruler_length, 1)
        self.assertEqual((widget.cursors.left, widget.cursors.right), (0.0, 1.0))

    def test_grab_renders(self):
        pixmap = self.widget.grab()
        self.assertFalse(pixmap.isNull())


class TestRulerView(unittest.TestCase):
    def setUp(self):
        self.view = RulerView(DisplayMetrics(width=1024, height=768), ColorMap(), RulerConfig())

    def tearDown(self):
        self.view.deleteLater()

    def test_metrics(self):
        self.assertEqual(self.view.metrics.ruler_length, 26)

    def test_initial_distance_text(self):
        self.assertEqual(self.view.distance_label.text(), "2.0 cm")
        self.assertEqual(self.view.distance_text(), "2.0 cm")

    def test_label_follows_drag(self):
        widget = self.view.ruler_widget
        send_mouse(widget, QEvent.Type.MouseButtonPress, widget.origin_x + 5.0 * PPCM)
        send_mouse(widget, QEvent.Type.MouseMove, widget.origin_x + 12.5 * PPCM)
        send_mouse(widget, QEvent.Type.MouseButtonRelease, widget.origin_x + 12.5 * PPCM)
        self.assertEqual(self.view.distance_label.text(), "9.5 cm")

    def test_set_display(self):
        self.view.set_display(DisplayMetrics(width=300, height=200))
        # floor((300 - 32) / 37.795...) = 7
        self.assertEqual(self.view.metrics.ruler_length, 7)
        self.assertEqual(self.view.distance_label.text(), "2.0 cm")

    def test_follow_screen_geometry_change(self):
        screen = app.primaryScreen()
        widget = self.view.ruler_widget
        send_mouse(widget, QEvent.Type.MouseButtonPress, widget.origin_x + 5.0 * PPCM)
        send_mouse(widget, QEvent.Type.MouseMove, widget.origin_x + 24.0 * PPCM)
        send_mouse(widget, QEvent.Type.MouseButtonRelease, widget.origin_x + 24.0 * PPCM)

        displays = []
        set_display = self.view.set_display
        self.view.set_display = lambda display: (displays.append(display), set_display(display))

        # Following the same screen twice must not double the connection
        self.view.follow_screen(screen)
        self.view.follow_screen(screen)
        self.addCleanup(self.view.follow_screen, None)
        screen.availableGeometryChanged.emit(screen.availableGeometry())

        expected = compute_metrics(DisplayMetrics.from_screen(screen, self.view.config.logical_dpi), self.view.config)
        self.assertEqual(len(displays), 1)
        # The offscreen platform reports an 800x800 screen: floor((800 - 32) / 37.795...) = 20
        self.assertEqual(expected.ruler_length, 20)
        self.assertEqual(self.view.metrics.ruler_length, expected.ruler_length)
        self.assertEqual(self.view.distance_label.text(), format_distance(min(24.0, expected.ruler_length) - 3.0))

    def test_stop_following_screen(self):
        screen = app.primaryScreen()
        displays = []
        self.view.set_display = lambda display: displays.append(display)
        self.view.follow_screen(screen)
        self.view.follow_screen(None)
        screen.availableGeometryChanged.emit(screen.availableGeometry())
        self.assertEqual(displays, [])

    def test_background_painted(self):
        color_map = ColorMap(darkmode=True)
        view = RulerView(DisplayMetrics(width=1024, height=768), color_map)
        view.resize(view.sizeHint())
        image = view.grab().toImage()
        self.assertEqual(image.pixelColor(1, image.height() - 1).name(), color_map.get_object_color("surface-base").name())
        view.deleteLater()

    def test_format_distance(self):
        self.assertEqual(format_distance(2.0), "2.0 cm")
        self.assertEqual(format_distance(2.04), "2.0 cm")
        self.assertEqual(format_distance(12.96), "13.0 cm")


if __name__ == '__main__':
    unittest.main()
