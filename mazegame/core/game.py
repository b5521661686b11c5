from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum

from mazegame.core.errors import MalformedLevelError
from mazegame.core.levels import CellKind, Level, LevelRepository, Position

logger = logging.getLogger(__name__)


class Direction(Enum):
    """The four unit steps, as (dx, dy)."""

    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def dx(self) -> int:
        return self.value[0]

    @property
    def dy(self) -> int:
        return self.value[1]


_UNIT_STEPS = {d.value for d in Direction}


def _is_int(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


class AdvanceResult(Enum):
    ADVANCED = "advanced"
    ALL_COMPLETE = "all_complete"


@dataclass
class GameState:
    """Current level, player position and win flag."""

    level_index: int
    position: Position
    won: bool = False


class GameController:
    """Owns the game state and applies movement and level changes to it.

    Illegal moves (into a wall or off the board) are silent no-ops. Once the
    goal is reached, further movement is ignored until the level changes
    through :meth:`advance_level` or :meth:`restart`.
    """

    def __init__(self, levels: LevelRepository, start_index: int = 0) -> None:
        """Create a controller and place the player on *start_index*'s start cell."""
        self._levels = levels
        self._state = GameState(level_index=start_index, position=Position(0, 0))
        self.initialize(start_index)

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def level(self) -> Level:
        """The level currently being played."""
        return self._levels.get(self._state.level_index)

    @property
    def level_index(self) -> int:
        return self._state.level_index

    @property
    def position(self) -> Position:
        return self._state.position

    @property
    def won(self) -> bool:
        return self._state.won

    @property
    def level_count(self) -> int:
        return self._levels.count()

    @property
    def is_last_level(self) -> bool:
        return self._state.level_index >= self._levels.count() - 1

    def initialize(self, level_index: int) -> None:
        """Switch to *level_index* with the player on its start cell."""
        level = self._levels.get(level_index)
        start = level.find(CellKind.START)
        if start is None:
            raise MalformedLevelError(f"Level {level.key!r} ({level.name}) has no start cell")
        self._state.level_index = level_index
        self._state.position = start
        self._state.won = False
        logger.info("Starting level %d (%s) at (%d, %d)", level_index, level.name, start.x, start.y)

    def move(self, dx: int, dy: int) -> bool:
        """Try to move the player one cell. Returns True if the move was accepted."""
        if not (_is_int(dx) and _is_int(dy)) or (dx, dy) not in _UNIT_STEPS:
            raise ValueError(f"Not a unit step: ({dx}, {dy})")
        if self._state.won:
            return False
        level = self.level
        target = self._state.position.offset(dx, dy)
        if not level.in_bounds(target.x, target.y) or not level.cell(target.x, target.y).walkable:
            logger.debug("Move to (%d, %d) rejected", target.x, target.y)
            return False
        self._state.position = target
        if level.cell(target.x, target.y) is CellKind.GOAL:
            self._state.won = True
            logger.info("Level %d (%s) complete", self._state.level_index, level.name)
        else:
            logger.debug("Moved to (%d, %d)", target.x, target.y)
        return True

    def step(self, direction: Direction) -> bool:
        return self.move(direction.dx, direction.dy)

    def advance_level(self) -> AdvanceResult:
        """Go to the next level, or report that the last one is done."""
        if self.is_last_level:
            logger.info("All %d levels complete", self._levels.count())
            return AdvanceResult.ALL_COMPLETE
        self.initialize(self._state.level_index + 1)
        return AdvanceResult.ADVANCED

    def restart(self) -> None:
        """Start over from the first level."""
        self.initialize(0)
