"""Low-level geometry helpers for the layout editor."""

from __future__ import annotations

from collections.abc import Iterable

from shapely.geometry import Polygon, box as shapely_box
from shapely.ops import unary_union

from breadroute.config import BOARD_GEOMETRY, BoardGeometry

from .models import Board, PlacedComponent


def board_outline(board: Board, geometry: BoardGeometry = BOARD_GEOMETRY) -> Polygon:
    """Pixel-space rectangle covered by *board*."""
    return shapely_box(
        board.x, board.y,
        board.x + geometry.board_width, board.y + geometry.board_height,
    )


def boards_overlap(a: Board, b: Board, geometry: BoardGeometry = BOARD_GEOMETRY) -> bool:
    """True if the two boards share a region of positive area."""
    return board_outline(a, geometry).intersection(board_outline(b, geometry)).area > 0


def layout_bounds(
    boards: Iterable[Board],
    geometry: BoardGeometry = BOARD_GEOMETRY,
) -> tuple[float, float, float, float]:
    """(xmin, ymin, xmax, ymax) of all boards together."""
    outlines = [board_outline(b, geometry) for b in boards]
    if not outlines:
        return (0.0, 0.0, 0.0, 0.0)
    return unary_union(outlines).bounds


def body_outline(component: PlacedComponent) -> Polygon:
    """Cell-space rectangle of a component body (cols along x, rows along y)."""
    return shapely_box(
        component.start_col, component.start_row,
        component.end_col, component.end_row,
    )


def bodies_overlap(a: PlacedComponent, b: PlacedComponent) -> bool:
    """True if two components on the same board share a body cell."""
    if a.board_id != b.board_id:
        return False
    return body_outline(a).intersection(body_outline(b)).area > 0


def body_inside_board(
    component: PlacedComponent,
    geometry: BoardGeometry = BOARD_GEOMETRY,
) -> bool:
    """True if the body fits in the board's row/col range, rails included."""
    grid = shapely_box(0, geometry.row_min, geometry.cols, geometry.row_max)
    return (
        component.body_rows > 0
        and component.body_cols > 0
        and grid.contains(body_outline(component))
    )
