"""In-window overlays (all levels complete)."""

from __future__ import annotations

from typing import Callable, Optional

from PySide6.QtCore import Qt, QEvent, Signal
from PySide6.QtGui import QColor
from PySide6.QtWidgets import (
    QFrame,
    QGraphicsDropShadowEffect,
    QGridLayout,
    QHBoxLayout,
    QLabel,
    QPushButton,
    QSizePolicy,
    QVBoxLayout,
    QWidget,
)

from mazegame.ui.colors import MazeColors


def _card_container(radius: int = 16, object_name: str = "overlayContainer") -> QFrame:
    container = QFrame()
    container.setObjectName(object_name)
    container.setMinimumWidth(360)
    container.setMaximumWidth(440)
    container.setStyleSheet(
        f"""
        QFrame#{object_name} {{
            background: #ffffff;
            border: 1px solid rgba(17, 24, 39, 0.12);
            border-radius: {radius}px;
        }}
        """
    )
    shadow = QGraphicsDropShadowEffect(container)
    shadow.setBlurRadius(20)
    shadow.setOffset(0, 6)
    shadow.setColor(QColor(0, 0, 0, 40))
    container.setGraphicsEffect(shadow)
    return container


def _overlay_background(parent: QWidget, on_click: Callable[[], None]) -> QWidget:
    overlay_bg = QWidget(parent)
    overlay_bg.setStyleSheet("background: rgba(0, 0, 0, 0.2);")
    overlay_bg.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Expanding)
    overlay_bg.setMinimumSize(1, 1)
    overlay_bg.mousePressEvent = lambda e: on_click()
    return overlay_bg


def primary_button_style() -> str:
    return f"""
        QPushButton {{
            background: {MazeColors.BUTTON};
            color: white;
            padding: 8px 18px;
            border: none;
            border-radius: 8px;
            font-weight: 600;
            font-size: 13px;
        }}
        QPushButton:hover {{ background: {MazeColors.BUTTON_HOVER}; }}
    """


class GameCompletedOverlay(QWidget):
    """Non-blocking notice shown after the final level is finished.

    Emits ``closed`` once dismissed; the window decides what happens next.
    """

    closed = Signal()

    def __init__(self, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        main_layout = QGridLayout(self)
        main_layout.setContentsMargins(0, 0, 0, 0)
        main_layout.setSpacing(0)
        main_layout.setRowStretch(0, 1)
        main_layout.setColumnStretch(0, 1)

        overlay_bg = _overlay_background(self, self._dismiss)
        main_layout.addWidget(overlay_bg, 0, 0)

        container = _card_container(object_name="gameCompletedContainer")
        content = QVBoxLayout(container)
        content.setContentsMargins(28, 24, 28, 24)
        content.setSpacing(18)

        header = QHBoxLayout()
        header.setSpacing(12)
        icon_label = QLabel("✓")
        icon_label.setFixedSize(40, 40)
        icon_label.setAlignment(Qt.AlignCenter)
        icon_label.setStyleSheet(
            f"background: {MazeColors.START}; color: white; border-radius: 20px;"
            " font-size: 22px; font-weight: 900;"
        )
        header.addWidget(icon_label, 0)

        title = QLabel("Congratulations!")
        title.setStyleSheet(f"color: {MazeColors.TEXT_PRIMARY}; font-size: 18px; font-weight: 800;")
        header.addWidget(title, 0)
        header.addStretch(1)
        content.addLayout(header)

        msg = QLabel("You've completed all levels!")
        msg.setStyleSheet(f"color: {MazeColors.TEXT_SECONDARY}; font-size: 14px;")
        msg.setWordWrap(True)
        content.addWidget(msg, 0)

        ok_btn = QPushButton("Play Again")
        ok_btn.setStyleSheet(primary_button_style())
        ok_btn.setCursor(Qt.CursorShape.PointingHandCursor)
        ok_btn.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Fixed)
        ok_btn.clicked.connect(self._dismiss)
        content.addWidget(ok_btn, 0)

        main_layout.addWidget(container, 0, 0, 1, 1, Qt.AlignCenter)
        self.hide()

    def _dismiss(self) -> None:
        self.hide()
        self.closed.emit()

    def _update_geometry(self) -> None:
        parent = self.parentWidget()
        if parent is not None:
            self.setGeometry(parent.rect())

    def eventFilter(self, obj: QWidget, event: QEvent) -> bool:
        if obj is self.parentWidget() and event.type() == QEvent.Type.Resize:
            self._update_geometry()
        return super().eventFilter(obj, event)

    def showEvent(self, event) -> None:
        super().showEvent(event)
        self._update_geometry()
        self.raise_()
        parent = self.parentWidget()
        if parent is not None:
            parent.installEventFilter(self)

    def hideEvent(self, event) -> None:
        parent = self.parentWidget()
        if parent is not None:
            parent.removeEventFilter(self)
        super().hideEvent(event)
