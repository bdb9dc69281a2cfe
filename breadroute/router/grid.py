"""Multi-board hole grid — valid cells, obstacles and cross-board seams.

A topology is a snapshot of the boards and components at the moment a
routing request is made.  Each board is an independent grid of
``cols`` columns and ``row_min..row_max-1`` rows (rails included).
Boards whose anchors put them edge to edge are joined by seam edges:
a hole on the touching edge of one board steps directly onto the hole
in the same row (or column) on the facing edge of the other.
"""

from __future__ import annotations

from collections.abc import Iterable

from breadroute.layout.models import Board, PlacedComponent

from .models import GridPoint, RouterConfig, DEFAULT_CONFIG
from .obstacles import ObstacleMap


# Unit steps in enumeration order: up, right, down, left.
DIRS = ((0, -1), (1, 0), (0, 1), (-1, 0))

# Seam sides, relative to the board a step leaves from.
RIGHT = "right"
LEFT = "left"
BELOW = "below"
ABOVE = "above"


def board_side(a: Board, b: Board, config: RouterConfig = DEFAULT_CONFIG) -> str | None:
    """Which side of board *a* board *b* touches, or None.

    Edges must lie within one grid unit of each other and the boards
    must overlap along the other axis.  Diagonal contact (both axes at
    once) is not a seam.
    """
    unit = config.grid_size
    w = config.board_width
    h = config.board_height

    touches_right = abs((a.x + w) - b.x) < unit
    touches_left = abs(a.x - (b.x + w)) < unit
    touches_below = abs((a.y + h) - b.y) < unit
    touches_above = abs(a.y - (b.y + h)) < unit

    horizontal = (touches_right or touches_left) and abs(a.y - b.y) < h
    vertical = (touches_below or touches_above) and abs(a.x - b.x) < w
    if horizontal == vertical:
        return None
    if horizontal:
        return RIGHT if touches_right else LEFT
    return BELOW if touches_below else ABOVE


class GridTopology:
    """4-connected hole graph over every board in a layout snapshot."""

    def __init__(
        self,
        boards: Iterable[Board],
        components: Iterable[PlacedComponent] = (),
        config: RouterConfig | None = None,
    ) -> None:
        self.config = config or DEFAULT_CONFIG
        self._boards: dict[int, Board] = {b.id: b for b in boards}
        self._obstacles = ObstacleMap(components)
        # board id -> [(neighbour board id, side)], filled on first use
        self._seams: dict[int, list[tuple[int, str]]] = {}

    # ── Cell queries ───────────────────────────────────────────────

    def has_board(self, board_id: int) -> bool:
        return board_id in self._boards

    def in_bounds(self, col: int, row: int) -> bool:
        cfg = self.config
        return 0 <= col < cfg.cols and cfg.row_min <= row < cfg.row_max

    def is_blocked(self, col: int, row: int, board_id: int) -> bool:
        return self._obstacles.is_blocked(row, col, board_id)

    def is_valid(self, col: int, row: int, board_id: int) -> bool:
        """True if the hole exists and no component blocks it."""
        if board_id not in self._boards or not self.in_bounds(col, row):
            return False
        return not self._obstacles.is_blocked(row, col, board_id)

    def is_valid_point(self, point: GridPoint) -> bool:
        return self.is_valid(point.col, point.row, point.board_id)

    # ── Board seams ────────────────────────────────────────────────

    def seams(self, board_id: int) -> list[tuple[int, str]]:
        """Boards touching *board_id* and the side they touch on."""
        found = self._seams.get(board_id)
        if found is None:
            found = []
            board = self._boards.get(board_id)
            if board is not None:
                for other in self._boards.values():
                    if other.id == board_id:
                        continue
                    side = board_side(board, other, self.config)
                    if side is not None:
                        found.append((other.id, side))
            self._seams[board_id] = found
        return found

    def _seam_target(self, point: GridPoint, side: str, other_id: int) -> GridPoint | None:
        cfg = self.config
        if side == RIGHT and point.col == cfg.cols - 1:
            return GridPoint(0, point.row, other_id)
        if side == LEFT and point.col == 0:
            return GridPoint(cfg.cols - 1, point.row, other_id)
        if side == BELOW and point.row == cfg.row_max - 1:
            return GridPoint(point.col, cfg.row_min, other_id)
        if side == ABOVE and point.row == cfg.row_min:
            return GridPoint(point.col, cfg.row_max - 1, other_id)
        return None

    # ── Neighbour enumeration ──────────────────────────────────────

    def neighbors(self, point: GridPoint) -> list[GridPoint]:
        """Valid unit-step neighbours on the same board, then seam hops."""
        col, row, bid = point.col, point.row, point.board_id
        result: list[GridPoint] = []
        for dx, dy in DIRS:
            nx, ny = col + dx, row + dy
            if self.is_valid(nx, ny, bid):
                result.append(GridPoint(nx, ny, bid))

        for other_id, side in self.seams(bid):
            target = self._seam_target(point, side, other_id)
            if target is not None and self.is_valid_point(target):
                result.append(target)
        return result

    def is_step(self, a: GridPoint, b: GridPoint) -> bool:
        """True if *b* is reachable from *a* in exactly one edge."""
        if not (self.is_valid_point(a) and self.is_valid_point(b)):
            return False
        if a.board_id == b.board_id:
            return abs(a.col - b.col) + abs(a.row - b.row) == 1
        for other_id, side in self.seams(a.board_id):
            if other_id == b.board_id and self._seam_target(a, side, other_id) == b:
                return True
        return False

    def is_valid_path(self, path: list[GridPoint]) -> bool:
        """Non-empty, every point free, every consecutive pair one edge."""
        if not path:
            return False
        if len(path) == 1:
            return self.is_valid_point(path[0])
        return all(self.is_step(a, b) for a, b in zip(path, path[1:]))
