"""Router value types and configuration."""

from __future__ import annotations

from dataclasses import dataclass

from breadroute.config import BOARD_GEOMETRY
from breadroute.layout.models import Address


# ── Path vertices ──────────────────────────────────────────────────


@dataclass(frozen=True)
class GridPoint:
    """A router vertex: the same hole as an Address, in (col, row, board) order."""

    col: int
    row: int
    board_id: int

    @classmethod
    def from_address(cls, address: Address) -> GridPoint:
        return cls(address.col, address.row, address.board_id)

    def to_address(self) -> Address:
        return Address(self.board_id, self.row, self.col)

    def as_tuple(self) -> tuple[int, int, int]:
        return (self.col, self.row, self.board_id)


Path = list[GridPoint]


# ── Router configuration ──────────────────────────────────────────
#
# Grid bounds come from the shared board geometry
# (breadroute.config.BOARD_GEOMETRY).  Tests shrink them to keep
# brute-force cross-checks fast.


@dataclass
class RouterConfig:
    """Grid bounds and board size used by one routing request."""

    rows: int = BOARD_GEOMETRY.rows
    cols: int = BOARD_GEOMETRY.cols
    rail_rows: int = BOARD_GEOMETRY.rail_rows
    grid_size: int = BOARD_GEOMETRY.grid_size

    @property
    def row_min(self) -> int:
        return -self.rail_rows

    @property
    def row_max(self) -> int:
        return self.rows + self.rail_rows

    @property
    def board_width(self) -> float:
        return (self.cols + 2) * self.grid_size

    @property
    def board_height(self) -> float:
        return (self.rows + 6) * self.grid_size + 2 * self.grid_size


DEFAULT_CONFIG = RouterConfig()
