"""Shared breadboard geometry constants.

These values describe the hole grid of a single breadboard and the
pixel pitch used to anchor boards in a shared coordinate space.  Both
the **layout** editor (which validates board and component placement)
and the **router** (which walks the hole grid) derive their bounds from
this single source of truth.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class BoardGeometry:
    """Hole grid of one breadboard.

    Rows ``0..rows-1`` are the terminal strips.  The power rails add
    ``rail_rows`` auxiliary rows above (negative indices) and below
    (``rows..rows+rail_rows-1``).
    """

    grid_size: int = 20
    """Pixel pitch of one grid unit.  Board anchors live in this space."""

    rows: int = 10
    cols: int = 63
    rail_rows: int = 3

    ic_body_rows: int = 2
    """Rows covered by a DIP body bridging the centre divide."""

    offset_unit: int = 4
    """Pixels per unit of overlap magnitude (used by renderers only)."""

    # ── Derived helpers ────────────────────────────────────────────

    @property
    def row_min(self) -> int:
        return -self.rail_rows

    @property
    def row_max(self) -> int:
        """Exclusive upper row bound (bottom rail included)."""
        return self.rows + self.rail_rows

    @property
    def board_width(self) -> int:
        """Board width in pixels, including the side margins."""
        return (self.cols + 2) * self.grid_size

    @property
    def board_height(self) -> int:
        """Board height in pixels: rails, strips, divide and margins."""
        return (self.rows + 6) * self.grid_size + 2 * self.grid_size

    @property
    def dip_start_row(self) -> int:
        """First body row of a DIP straddling the centre divide."""
        return self.rows // 2 - 1


# Module-level singleton — importable everywhere.
BOARD_GEOMETRY = BoardGeometry()


WIRE_COLORS: tuple[tuple[str, str], ...] = (
    ("Red", "#ff0000"),
    ("Black", "#000000"),
    ("Yellow", "#ffd700"),
    ("Green", "#008000"),
    ("Blue", "#0000ff"),
    ("Brown", "#8b4513"),
    ("Orange", "#ffa500"),
    ("Purple", "#800080"),
)
