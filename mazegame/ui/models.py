"""Data models used by the UI."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from mazegame.core.game import GameController
from mazegame.core.levels import CellKind, Position


@dataclass(frozen=True)
class BoardSnapshot:
    """Everything the window needs to draw one frame of the game."""

    grid: Tuple[Tuple[CellKind, ...], ...]
    position: Position
    won: bool
    level_name: str
    level_number: int
    level_count: int
    is_last_level: bool

    @property
    def rows(self) -> int:
        return len(self.grid)

    @property
    def columns(self) -> int:
        return len(self.grid[0]) if self.grid else 0

    @classmethod
    def from_controller(cls, controller: GameController) -> BoardSnapshot:
        level = controller.level
        return cls(
            grid=level.grid,
            position=controller.position,
            won=controller.won,
            level_name=level.name,
            level_number=controller.level_index + 1,
            level_count=controller.level_count,
            is_last_level=controller.is_last_level,
        )
