"""Obstacle model — which holes a placed component makes impassable.

A component blocks its body rectangle plus two single-row pin bands,
one directly above and one directly below the body.  A band spans
``pin_count // 2`` columns centred under the body; any leftover body
columns (the overhang) stay free in the band rows.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from breadroute.layout.models import PlacedComponent


def pin_band_cols(component: PlacedComponent) -> tuple[int, int]:
    """Column range ``[start, end)`` covered by each pin band."""
    band_width = min(component.pin_count // 2, component.body_cols)
    band_start = component.start_col + (component.body_cols - band_width) // 2
    return band_start, band_start + band_width


def component_blocks(component: PlacedComponent, row: int, col: int) -> bool:
    """True if (row, col) lies in the body or either pin band."""
    if component.start_row <= row < component.end_row:
        return component.start_col <= col < component.end_col
    if row == component.start_row - 1 or row == component.end_row:
        band_start, band_end = pin_band_cols(component)
        return band_start <= col < band_end
    return False


def footprint_cells(component: PlacedComponent) -> Iterator[tuple[int, int]]:
    """Yield every blocked (row, col) of *component*, body first."""
    for row in range(component.start_row, component.end_row):
        for col in range(component.start_col, component.end_col):
            yield (row, col)
    band_start, band_end = pin_band_cols(component)
    for row in (component.start_row - 1, component.end_row):
        for col in range(band_start, band_end):
            yield (row, col)


class ObstacleMap:
    """Components grouped by board for per-hole blocking queries."""

    def __init__(self, components: Iterable[PlacedComponent]) -> None:
        self._by_board: dict[int, list[PlacedComponent]] = {}
        for comp in components:
            self._by_board.setdefault(comp.board_id, []).append(comp)

    def is_blocked(self, row: int, col: int, board_id: int) -> bool:
        for comp in self._by_board.get(board_id, ()):
            if component_blocks(comp, row, col):
                return True
        return False

    def components_on(self, board_id: int) -> list[PlacedComponent]:
        return list(self._by_board.get(board_id, ()))
