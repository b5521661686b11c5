"""Keyboard input: arrow keys mapped to unit steps."""

from __future__ import annotations

import logging
from typing import Optional

from PySide6.QtCore import QEvent, QObject, Qt, Signal

from mazegame.core.game import Direction

logger = logging.getLogger(__name__)

KEY_DIRECTIONS = {
    Qt.Key.Key_Up: Direction.UP,
    Qt.Key.Key_Down: Direction.DOWN,
    Qt.Key.Key_Left: Direction.LEFT,
    Qt.Key.Key_Right: Direction.RIGHT,
}
_DIRECTIONS_BY_CODE = {key.value: direction for key, direction in KEY_DIRECTIONS.items()}


def direction_for_key(key) -> Optional[Direction]:
    """Return the direction bound to a Qt key (enum member or int code), or None."""
    return _DIRECTIONS_BY_CODE.get(getattr(key, "value", key))


class KeyboardSubscription(QObject):
    """Arrow-key listener on *source*, active between ``__enter__`` and ``__exit__``.

    Arrow key presses are consumed and re-emitted as ``direction_pressed``.
    Other events pass through untouched.
    """

    direction_pressed = Signal(object)

    def __init__(self, source: QObject, parent: Optional[QObject] = None) -> None:
        super().__init__(parent)
        self._source = source
        self._active = False

    @property
    def active(self) -> bool:
        return self._active

    def __enter__(self) -> KeyboardSubscription:
        if not self._active:
            self._source.installEventFilter(self)
            self._active = True
            logger.debug("Keyboard subscription installed on %s", type(self._source).__name__)
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.release()

    def release(self) -> None:
        if self._active:
            self._source.removeEventFilter(self)
            self._active = False
            logger.debug("Keyboard subscription released")

    def eventFilter(self, obj, event) -> bool:
        if event.type() == QEvent.Type.KeyPress:
            direction = direction_for_key(event.key())
            if direction is not None:
                self.direction_pressed.emit(direction)
                return True
        return super().eventFilter(obj, event)
