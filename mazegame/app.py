"""Application entry point and setup for the maze game."""

import logging
import sys

from PySide6.QtWidgets import QApplication

from mazegame.core.game import GameController
from mazegame.core.levels import LevelRepository
from mazegame.ui.main_window import MainWindow


def configure_logging() -> None:
    """Configure application-wide logging with a standard format."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


def run() -> None:
    """Load the levels, build the window and start the Qt event loop."""
    configure_logging()
    app = QApplication(sys.argv)
    app.setApplicationName("Maze Game")
    app.setApplicationDisplayName("Maze Game")

    levels = LevelRepository()
    controller = GameController(levels)

    window = MainWindow(controller=controller)
    app.aboutToQuit.connect(window.close)
    window.show()

    sys.exit(app.exec())
