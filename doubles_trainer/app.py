"""Application entry point and setup for the darts doubles trainer."""

import logging
import sys

from PySide6.QtGui import QGuiApplication
from PySide6.QtWidgets import QApplication

from doubles_trainer.core.config import load_config
from doubles_trainer.ui.main_window import MainWindow
from doubles_trainer.ui.pdf_report import PdfReportSink


def configure_logging() -> None:
    """Configure application-wide logging with a standard format."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


def run() -> None:
    """Load settings, open the trainer window, and start the event loop."""
    configure_logging()
    config = load_config()

    app = QApplication(sys.argv)
    app.setApplicationName(config.window_title)
    app.setApplicationDisplayName(config.window_title)

    window = MainWindow(config=config, sink=PdfReportSink())
    screen = QGuiApplication.primaryScreen()
    if screen is not None:
        geometry = screen.availableGeometry()
        window.resize(min(1200, geometry.width()), min(820, geometry.height()))
    window.show()

    sys.exit(app.exec())


if __name__ == "__main__":
    run()
