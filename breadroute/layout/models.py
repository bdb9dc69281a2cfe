"""Layout dataclasses — boards, holes, placed components and wires."""

from __future__ import annotations

from dataclasses import dataclass, field

from breadroute.config import BOARD_GEOMETRY, BoardGeometry


# ── Value types ────────────────────────────────────────────────────


@dataclass
class Board:
    """A breadboard anchored at (x, y) in the shared pixel space."""

    id: int
    x: float
    y: float


@dataclass(frozen=True)
class Address:
    """A hole on a board.  Rows may be negative (top rail)."""

    board_id: int
    row: int
    col: int

    def __str__(self) -> str:
        return f"{self.board_id}:{self.row}:{self.col}"


@dataclass
class PlacedComponent:
    """A component (usually a DIP) occupying a cell rectangle on one board."""

    id: int
    board_id: int
    start_row: int
    start_col: int
    body_rows: int
    body_cols: int
    pin_count: int

    @property
    def end_row(self) -> int:
        """Exclusive last body row."""
        return self.start_row + self.body_rows

    @property
    def end_col(self) -> int:
        """Exclusive last body column."""
        return self.start_col + self.body_cols


@dataclass
class Wire:
    """A committed wire with its routed path."""

    id: int
    start: Address
    end: Address
    color: str
    path: list = field(default_factory=list)    # list[GridPoint]
    shifted: bool = False                       # offset-sign convention at creation


class LayoutError(Exception):
    """Raised when a layout edit would leave the layout inconsistent."""

    def __init__(self, subject: str, reason: str) -> None:
        self.subject = subject
        self.reason = reason
        super().__init__(f"Cannot edit {subject}: {reason}")


# ── Constructors ───────────────────────────────────────────────────


def dip_component(
    component_id: int,
    board_id: int,
    start_col: int,
    pin_count: int,
    *,
    start_row: int | None = None,
    overhang: int = 0,
    geometry: BoardGeometry = BOARD_GEOMETRY,
) -> PlacedComponent:
    """Build a DIP package straddling the centre divide of *geometry*.

    The body is ``pin_count // 2`` columns wide plus *overhang* empty
    columns on each side.  Pin count must be even and positive.
    """
    if pin_count <= 0 or pin_count % 2:
        raise LayoutError(
            f"component {component_id}",
            f"a DIP needs an even, positive pin count (got {pin_count})",
        )
    if overhang < 0:
        raise LayoutError(f"component {component_id}", "overhang cannot be negative")
    if start_row is None:
        start_row = geometry.dip_start_row
    return PlacedComponent(
        id=component_id,
        board_id=board_id,
        start_row=start_row,
        start_col=start_col,
        body_rows=geometry.ic_body_rows,
        body_cols=pin_count // 2 + 2 * overhang,
        pin_count=pin_count,
    )
