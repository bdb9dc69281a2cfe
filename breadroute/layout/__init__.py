"""Layout — boards, holes, components and wires on the shared canvas.

Submodules:
  models        Dataclasses (Board, Address, PlacedComponent, Wire) and LayoutError.
  geometry      Board outlines and component bodies as shapely rectangles.
"""

from .models import Board, Address, PlacedComponent, Wire, LayoutError, dip_component
from .geometry import (
    board_outline, boards_overlap, layout_bounds,
    body_outline, bodies_overlap, body_inside_board,
)

__all__ = [
    # Models
    "Board", "Address", "PlacedComponent", "Wire", "LayoutError", "dip_component",
    # Geometry
    "board_outline", "boards_overlap", "layout_bounds",
    "body_outline", "bodies_overlap", "body_inside_board",
]
