from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import List, Optional, Tuple

import yaml

from mazegame.core.errors import OutOfRangeError

logger = logging.getLogger(__name__)


class CellKind(Enum):
    """Kind of a grid tile. The value is the symbol used in level files."""

    PATH = "."
    WALL = "#"
    START = "S"
    GOAL = "G"

    @property
    def walkable(self) -> bool:
        return self is not CellKind.WALL


@dataclass(frozen=True)
class Position:
    x: int
    y: int

    def offset(self, dx: int, dy: int) -> Position:
        return Position(self.x + dx, self.y + dy)


@dataclass(frozen=True)
class Level:
    key: str
    name: str
    grid: Tuple[Tuple[CellKind, ...], ...]

    @property
    def rows(self) -> int:
        return len(self.grid)

    @property
    def columns(self) -> int:
        return len(self.grid[0]) if self.grid else 0

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.columns and 0 <= y < self.rows

    def cell(self, x: int, y: int) -> CellKind:
        return self.grid[y][x]

    def find(self, kind: CellKind) -> Optional[Position]:
        """Return the first cell of *kind* in row-major order, or None."""
        for y, row in enumerate(self.grid):
            for x, cell in enumerate(row):
                if cell is kind:
                    return Position(x, y)
        return None

    def count(self, kind: CellKind) -> int:
        return sum(1 for row in self.grid for cell in row if cell is kind)


_SYMBOLS = {kind.value for kind in CellKind}


def parse_layout(rows: List[str], source: str = "<layout>") -> Tuple[Tuple[CellKind, ...], ...]:
    """Turn a list of symbol rows (``"S.###"``) into a rectangular grid."""
    if not rows:
        raise ValueError(f"{source}: 'layout' has no rows")
    width = len(rows[0])
    grid = []
    for y, line in enumerate(rows):
        if len(line) != width:
            raise ValueError(
                f"{source}: row {y} has {len(line)} cells, expected {width} (layout must be rectangular)"
            )
        try:
            grid.append(tuple(CellKind(ch) for ch in line))
        except ValueError:
            bad = next(ch for ch in line if ch not in _SYMBOLS)
            raise ValueError(f"{source}: unknown cell symbol {bad!r} in row {y}") from None
    if width == 0:
        raise ValueError(f"{source}: 'layout' rows are empty")
    return tuple(grid)


class LevelRepository:
    """Ordered, read-only catalog of maze levels loaded from YAML files."""

    def __init__(self, levels_dir: Optional[Path] = None) -> None:
        self._levels_dir = levels_dir or Path(__file__).resolve().parent.parent / "data" / "levels"
        self._levels = self._load_levels()

    def all(self) -> List[Level]:
        return list(self._levels)

    def get(self, index: int) -> Level:
        if not 0 <= index < len(self._levels):
            raise OutOfRangeError(index, len(self._levels))
        return self._levels[index]

    def count(self) -> int:
        return len(self._levels)

    def __len__(self) -> int:
        return len(self._levels)

    def _load_levels(self) -> List[Level]:
        base_dir = self._levels_dir
        if not base_dir.exists():
            raise FileNotFoundError(f"Levels directory not found: {base_dir}")

        levels: List[Level] = []

        def _sort_key(p: Path) -> tuple[int, str]:
            m = re.match(r"^level(\d+)$", p.stem)
            if m:
                return (int(m.group(1)), p.stem)
            return (10**9, p.stem)

        for level_path in sorted(base_dir.glob("level*.yaml"), key=_sort_key):
            raw = yaml.safe_load(level_path.read_text(encoding="utf-8"))
            if not raw or not isinstance(raw, dict):
                raise ValueError(f"{level_path.name}: expected YAML with 'title' and 'layout'")
            title = raw.get("title")
            if isinstance(title, str):
                title = title.strip()
            layout = raw.get("layout")
            if not title or not isinstance(title, str):
                raise ValueError(f"{level_path.name}: missing or invalid 'title'")
            if layout is None:
                raise ValueError(f"{level_path.name}: missing 'layout'")
            if isinstance(layout, str):
                # allow layout as a block scalar
                layout = [line.strip() for line in layout.splitlines() if line.strip()]
            elif isinstance(layout, list):
                layout = [str(row).strip() for row in layout]
            else:
                raise ValueError(f"{level_path.name}: 'layout' must be a list of rows")
            grid = parse_layout(layout, source=level_path.name)
            levels.append(Level(key=level_path.stem, name=title, grid=grid))

        if not levels:
            raise ValueError(f"No level files (level*.yaml) found in {base_dir}")
        logger.info("Loaded %d levels from %s", len(levels), base_dir)
        return levels
