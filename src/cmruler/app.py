import argparse
import logging
import sys
from typing import List, Optional

from PySide6.QtWidgets import QApplication, QMainWindow

from cmruler.colors.modes import ColorMap
from cmruler.config import RulerConfig
from cmruler.logging_config import setup_logging
from cmruler.ruler_view import RulerView
from cmruler.rulers.centimeter import DisplayMetrics

logger = logging.getLogger(__name__)


class RulerWindow(QMainWindow):
    def __init__(self, display: DisplayMetrics, config: Optional[RulerConfig] = None):
        super().__init__()
        self.config = config or RulerConfig()
        self.color_map = ColorMap(darkmode=self.config.darkmode)
        self.setWindowTitle("Ruler")

        self.view = RulerView(display, self.color_map, self.config, parent=self)
        self.setCentralWidget(self.view)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="cmruler", description="On-screen centimeter ruler with two measuring cursors.")
    parser.add_argument("--dark", action="store_true", help="use the dark theme")
    parser.add_argument("--log-level", default="INFO", choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    parser.add_argument("--log-file", default=None, help="also write the log to this file")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(sys.argv[1:] if argv is None else argv)
    setup_logging(args.log_level, args.log_file)

    app = QApplication.instance() or QApplication(sys.argv[:1])
    config = RulerConfig(darkmode=args.dark)
    screen = app.primaryScreen()
    display = DisplayMetrics.from_screen(screen, config.logical_dpi)
    logger.info("Screen %.0fx%.0f (dpr %.2f)", display.width, display.height, display.device_pixel_ratio)

    window = RulerWindow(display, config)
    window.view.follow_screen(screen)
    window.show()
    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
