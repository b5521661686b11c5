from __future__ import annotations

import logging
from contextlib import ExitStack
from typing import Optional

from PySide6.QtCore import Qt
from PySide6.QtGui import QCloseEvent
from PySide6.QtWidgets import (
    QApplication,
    QFrame,
    QLabel,
    QMainWindow,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from mazegame.core.game import AdvanceResult, Direction, GameController
from mazegame.ui.board import MazeBoardWidget
from mazegame.ui.colors import MazeColors
from mazegame.ui.input import KeyboardSubscription
from mazegame.ui.models import BoardSnapshot
from mazegame.ui.overlays import GameCompletedOverlay, primary_button_style

logger = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    """Single-screen maze window.

    Holds a reference to the controller and re-reads a :class:`BoardSnapshot`
    after every operation. Arrow keys are delivered through a
    :class:`KeyboardSubscription` that lives until the window is closed.
    """

    def __init__(self, controller: GameController) -> None:
        super().__init__()
        self._controller = controller
        self._resources = ExitStack()

        self._level_label: Optional[QLabel] = None
        self._board: Optional[MazeBoardWidget] = None
        self._won_panel: Optional[QWidget] = None
        self._advance_button: Optional[QPushButton] = None
        self._completed_overlay: Optional[GameCompletedOverlay] = None

        self._build_ui()

        keyboard = KeyboardSubscription(QApplication.instance(), self)
        keyboard.direction_pressed.connect(self._on_direction)
        self._resources.enter_context(keyboard)

        self._refresh()

    def _build_ui(self) -> None:
        self.setWindowTitle("Maze Game")
        central = QWidget()
        central.setObjectName("mazeRoot")
        central.setStyleSheet(f"QWidget#mazeRoot {{ background: {MazeColors.BG}; }}")

        layout = QVBoxLayout(central)
        layout.setContentsMargins(32, 32, 32, 32)
        layout.setSpacing(16)
        layout.addStretch(1)

        title = QLabel("Maze Game")
        title.setAlignment(Qt.AlignCenter)
        title.setStyleSheet(f"color: {MazeColors.TEXT_PRIMARY}; font-size: 32px; font-weight: 800;")
        layout.addWidget(title)

        self._level_label = QLabel("")
        self._level_label.setAlignment(Qt.AlignCenter)
        self._level_label.setStyleSheet(f"color: {MazeColors.TEXT_PRIMARY}; font-size: 18px; font-weight: 600;")
        layout.addWidget(self._level_label)

        frame = QFrame()
        frame.setObjectName("boardFrame")
        frame.setStyleSheet(f"QFrame#boardFrame {{ border: 2px solid {MazeColors.BOARD_BORDER}; }}")
        frame_layout = QVBoxLayout(frame)
        frame_layout.setContentsMargins(2, 2, 2, 2)
        self._board = MazeBoardWidget()
        frame_layout.addWidget(self._board)
        layout.addWidget(frame, 0, Qt.AlignHCenter)

        self._won_panel = QWidget()
        won_layout = QVBoxLayout(self._won_panel)
        won_layout.setContentsMargins(0, 0, 0, 0)
        won_layout.setSpacing(8)
        won_label = QLabel("Level Complete!")
        won_label.setAlignment(Qt.AlignCenter)
        won_label.setStyleSheet(f"color: {MazeColors.TEXT_PRIMARY}; font-size: 18px; font-weight: 600;")
        won_layout.addWidget(won_label)
        self._advance_button = QPushButton("")
        self._advance_button.setStyleSheet(primary_button_style())
        self._advance_button.setCursor(Qt.CursorShape.PointingHandCursor)
        # keep arrow keys out of the button's focus navigation
        self._advance_button.setFocusPolicy(Qt.FocusPolicy.NoFocus)
        self._advance_button.clicked.connect(self._advance_level)
        won_layout.addWidget(self._advance_button, 0, Qt.AlignHCenter)
        self._won_panel.setVisible(False)
        layout.addWidget(self._won_panel)

        help_label = QLabel("Use the arrow keys to move the player (blue circle) to the goal (red square).")
        help_label.setAlignment(Qt.AlignCenter)
        help_label.setWordWrap(True)
        help_label.setStyleSheet(f"color: {MazeColors.TEXT_SECONDARY}; font-size: 13px;")
        layout.addWidget(help_label)
        layout.addStretch(1)

        self.setCentralWidget(central)

        self._completed_overlay = GameCompletedOverlay(central)
        self._completed_overlay.closed.connect(self._restart_game)

    def _refresh(self) -> None:
        snapshot = BoardSnapshot.from_controller(self._controller)
        self._level_label.setText(f"Level: {snapshot.level_name}")
        self._board.set_snapshot(snapshot)
        self._won_panel.setVisible(snapshot.won)
        self._advance_button.setText("Restart Game" if snapshot.is_last_level else "Next Level")

    def _on_direction(self, direction: Direction) -> None:
        if self._completed_overlay.isVisible():
            return
        if self._controller.step(direction):
            self._refresh()

    def _advance_level(self) -> None:
        result = self._controller.advance_level()
        if result is AdvanceResult.ALL_COMPLETE:
            self._completed_overlay.show()
            return
        self._refresh()

    def _restart_game(self) -> None:
        self._controller.restart()
        self._refresh()

    def closeEvent(self, event: QCloseEvent) -> None:
        """Release the keyboard subscription when the window goes away."""
        self._resources.close()
        super().closeEvent(event)
