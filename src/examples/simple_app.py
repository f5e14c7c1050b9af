from cmruler import ColorMap, DisplayMetrics, RulerView
from PySide6.QtWidgets import QMainWindow, QApplication


class MyWindow(QMainWindow):
    def __init__(self):
        super().__init__()
        self.color_map = ColorMap(darkmode=True)

        # A display a little over 20 cm wide instead of the real screen
        display = DisplayMetrics(width=20 * 96 / 2.54 + 40, height=400)
        self.view = RulerView(display, self.color_map)
        self.setCentralWidget(self.view)

        self.view.ruler_widget.cursorsChanged.connect(
            lambda left, right: self.setWindowTitle(f"{left:.1f} - {right:.1f} cm")
        )


if __name__ == "__main__":
    app = QApplication([])
    window = MyWindow()
    window.show()
    app.exec()
