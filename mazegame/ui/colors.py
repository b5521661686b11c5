"""Theme colors for the UI."""

from mazegame.core.levels import CellKind


class MazeColors:
    """Light theme palette."""

    BG = "#f3f4f6"
    BOARD_BORDER = "#9ca3af"

    PATH = "#e5e7eb"
    WALL = "#1f2937"
    GRID_LINE = "#d1d5db"
    START = "#22c55e"
    GOAL = "#ef4444"

    PLAYER = "#3b82f6"
    PLAYER_OUTLINE = "#1d4ed8"

    TEXT_PRIMARY = "#111827"
    TEXT_SECONDARY = "#4b5563"

    BUTTON = "#111827"
    BUTTON_HOVER = "#374151"


CELL_COLORS = {
    CellKind.PATH: MazeColors.PATH,
    CellKind.WALL: MazeColors.WALL,
    CellKind.START: MazeColors.START,
    CellKind.GOAL: MazeColors.GOAL,
}


def cell_color(kind: CellKind) -> str:
    return CELL_COLORS[kind]

