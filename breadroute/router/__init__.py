"""Router — Manhattan wire routing across interconnected breadboards.

Submodules:
  models        GridPoint / Path value types and RouterConfig.
  obstacles     Cells blocked by component bodies and pin bands.
  grid          Multi-board hole graph (bounds, obstacles, board seams).
  pathfinder    A* hole-to-hole search.
  engine        Route entry points and pinned-segment chaining.
  session       Interactive routing (hover, pin, finish).
  overlap       Per-hole offset magnitudes for wires sharing a track.
"""

from .models import GridPoint, Path, RouterConfig
from .obstacles import ObstacleMap, component_blocks, footprint_cells
from .grid import GridTopology, board_side
from .pathfinder import find_path
from .engine import route, route_via, chain_segments
from .session import RoutingSession
from .overlap import (
    classify_path, overlap_tallies,
    disambiguate, disambiguate_all, offset_vectors,
)

__all__ = [
    # Models
    "GridPoint", "Path", "RouterConfig",
    # Obstacles / topology
    "ObstacleMap", "component_blocks", "footprint_cells",
    "GridTopology", "board_side",
    # Search
    "find_path", "route", "route_via", "chain_segments",
    # Session
    "RoutingSession",
    # Overlap
    "classify_path", "overlap_tallies",
    "disambiguate", "disambiguate_all", "offset_vectors",
]
