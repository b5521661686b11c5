"""Maze board widget: tiles and the player token."""

from __future__ import annotations

from typing import Optional

from PySide6.QtCore import QEasingCurve, QPointF, QRectF, QSize, QVariantAnimation
from PySide6.QtGui import QColor, QPainter, QPen
from PySide6.QtWidgets import QSizePolicy, QWidget

from mazegame.core.levels import Position
from mazegame.ui.colors import MazeColors, cell_color
from mazegame.ui.models import BoardSnapshot

CELL_SIZE = 32
PLAYER_SIZE = 24
SLIDE_MS = 200


class MazeBoardWidget(QWidget):
    """Paints the current grid and slides the player token between cells."""

    def __init__(self, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self._snapshot: Optional[BoardSnapshot] = None
        self._token_pos = QPointF(0, 0)
        self._anim = QVariantAnimation(self)
        self._anim.setDuration(SLIDE_MS)
        self._anim.setEasingCurve(QEasingCurve.Type.OutCubic)
        self._anim.valueChanged.connect(self._on_token_moved)
        self.setSizePolicy(QSizePolicy.Policy.Fixed, QSizePolicy.Policy.Fixed)

    def set_snapshot(self, snapshot: BoardSnapshot) -> None:
        """Show *snapshot*. The token slides if only the position changed."""
        previous = self._snapshot
        self._snapshot = snapshot
        target = self._cell_origin(snapshot.position)
        same_level = (
            previous is not None
            and previous.level_number == snapshot.level_number
            and previous.grid is snapshot.grid
        )
        # a restart of the same level jumps instead of sliding back
        slide = same_level and not (previous.won and not snapshot.won)
        if slide and previous.position != snapshot.position:
            self._anim.stop()
            self._anim.setStartValue(QPointF(self._token_pos))
            self._anim.setEndValue(target)
            self._anim.start()
        else:
            self._anim.stop()
            self._token_pos = target
        if not same_level:
            self.setFixedSize(self.sizeHint())
            self.updateGeometry()
        self.update()

    def sizeHint(self) -> QSize:
        if self._snapshot is None:
            return QSize(CELL_SIZE * 5, CELL_SIZE * 5)
        return QSize(self._snapshot.columns * CELL_SIZE, self._snapshot.rows * CELL_SIZE)

    def _cell_origin(self, position: Position) -> QPointF:
        return QPointF(position.x * CELL_SIZE, position.y * CELL_SIZE)

    def _on_token_moved(self, value) -> None:
        self._token_pos = QPointF(value)
        self.update()

    def paintEvent(self, event) -> None:
        super().paintEvent(event)
        if self._snapshot is None:
            return
        painter = QPainter(self)
        painter.setRenderHint(QPainter.Antialiasing, True)

        grid_line = QColor(MazeColors.GRID_LINE)
        for y, row in enumerate(self._snapshot.grid):
            for x, kind in enumerate(row):
                rect = QRectF(x * CELL_SIZE, y * CELL_SIZE, CELL_SIZE, CELL_SIZE)
                painter.fillRect(rect, QColor(cell_color(kind)))
                painter.setPen(QPen(grid_line, 0.5))
                painter.drawRect(rect)

        inset = (CELL_SIZE - PLAYER_SIZE) / 2
        token = QRectF(
            self._token_pos.x() + inset,
            self._token_pos.y() + inset,
            PLAYER_SIZE,
            PLAYER_SIZE,
        )
        painter.setBrush(QColor(MazeColors.PLAYER))
        painter.setPen(QPen(QColor(MazeColors.PLAYER_OUTLINE), 2))
        painter.drawEllipse(token)
        painter.end()
