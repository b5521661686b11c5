"""Tests for mazegame.ui.input – arrow key mapping and keyboard subscription."""

from __future__ import annotations

from contextlib import ExitStack

import pytest
from PySide6.QtCore import QCoreApplication, QEvent, QObject, Qt
from PySide6.QtGui import QKeyEvent

from mazegame.core.game import Direction
from mazegame.ui.input import KEY_DIRECTIONS, KeyboardSubscription, direction_for_key


class TestDirectionForKey:
    @pytest.mark.parametrize(
        "key, direction",
        [
            (Qt.Key.Key_Up, Direction.UP),
            (Qt.Key.Key_Down, Direction.DOWN),
            (Qt.Key.Key_Left, Direction.LEFT),
            (Qt.Key.Key_Right, Direction.RIGHT),
        ],
    )
    def test_arrow_keys(self, key, direction):
        assert direction_for_key(key) is direction

    def test_accepts_int_key_codes(self):
        assert direction_for_key(int(Qt.Key.Key_Up.value)) is Direction.UP

    def test_other_keys_ignored(self):
        assert direction_for_key(Qt.Key.Key_W) is None
        assert direction_for_key(Qt.Key.Key_Space) is None

    def test_unknown_code(self):
        assert direction_for_key(-12345) is None

    def test_one_key_per_direction(self):
        assert sorted(KEY_DIRECTIONS.values(), key=lambda d: d.name) == sorted(Direction, key=lambda d: d.name)


# ---------------------------------------------------------------------------
# KeyboardSubscription
# ---------------------------------------------------------------------------

@pytest.fixture(scope="module")
def app() -> QCoreApplication:
    return QCoreApplication.instance() or QCoreApplication([])


@pytest.fixture()
def target(app: QCoreApplication) -> QObject:
    return QObject()


def _key_press(key: Qt.Key) -> QKeyEvent:
    return QKeyEvent(QEvent.Type.KeyPress, key, Qt.KeyboardModifier.NoModifier)


def _record(subscription: KeyboardSubscription) -> list:
    pressed: list = []
    subscription.direction_pressed.connect(pressed.append)
    return pressed


class TestKeyboardSubscription:
    def test_inactive_until_entered(self, app: QCoreApplication, target: QObject):
        sub = KeyboardSubscription(app)
        pressed = _record(sub)
        assert sub.active is False
        assert QCoreApplication.sendEvent(target, _key_press(Qt.Key.Key_Up)) is False
        assert pressed == []

    def test_arrow_key_emits_and_is_consumed(self, app: QCoreApplication, target: QObject):
        sub = KeyboardSubscription(app)
        pressed = _record(sub)
        with sub:
            assert sub.active is True
            assert QCoreApplication.sendEvent(target, _key_press(Qt.Key.Key_Up)) is True
            assert QCoreApplication.sendEvent(target, _key_press(Qt.Key.Key_Right)) is True
        assert pressed == [Direction.UP, Direction.RIGHT]

    def test_filter_returns_true_for_arrows(self, app: QCoreApplication):
        sub = KeyboardSubscription(app)
        pressed = _record(sub)
        with sub:
            assert sub.eventFilter(app, _key_press(Qt.Key.Key_Down)) is True
        assert pressed == [Direction.DOWN]

    def test_other_keys_pass_through(self, app: QCoreApplication, target: QObject):
        sub = KeyboardSubscription(app)
        pressed = _record(sub)
        with sub:
            assert sub.eventFilter(app, _key_press(Qt.Key.Key_A)) is False
            assert QCoreApplication.sendEvent(target, _key_press(Qt.Key.Key_Space)) is False
        assert pressed == []

    def test_released_on_exit(self, app: QCoreApplication, target: QObject):
        sub = KeyboardSubscription(app)
        pressed = _record(sub)
        with sub:
            pass
        assert sub.active is False
        QCoreApplication.sendEvent(target, _key_press(Qt.Key.Key_Left))
        assert pressed == []

    def test_released_when_body_raises(self, app: QCoreApplication, target: QObject):
        sub = KeyboardSubscription(app)
        pressed = _record(sub)
        with pytest.raises(RuntimeError):
            with sub:
                raise RuntimeError("view torn down")
        assert sub.active is False
        QCoreApplication.sendEvent(target, _key_press(Qt.Key.Key_Up))
        assert pressed == []

    def test_release_is_idempotent(self, app: QCoreApplication):
        sub = KeyboardSubscription(app)
        with sub:
            sub.release()
            assert sub.active is False
        sub.release()
        assert sub.active is False

    def test_exit_stack_close_releases(self, app: QCoreApplication, target: QObject):
        # the main window holds its subscription this way and closes it on teardown
        resources = ExitStack()
        sub = resources.enter_context(KeyboardSubscription(app))
        pressed = _record(sub)
        QCoreApplication.sendEvent(target, _key_press(Qt.Key.Key_Down))
        resources.close()
        QCoreApplication.sendEvent(target, _key_press(Qt.Key.Key_Down))
        assert pressed == [Direction.DOWN]
        assert sub.active is False
