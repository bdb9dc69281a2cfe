"""Routing entry points — hole-to-hole routes and pinned-segment chains.

A route request takes the boards and components as they are *now*,
builds a fresh GridTopology and runs A* on it.  Nothing is cached
between requests: boards can move and components can be placed
between two hover updates.

Multi-segment routes:
  When the user pins a waypoint, the next segment starts exactly where
  the previous one ended.  ``chain_segments`` joins them, keeping the
  shared hole once.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence

from breadroute.layout.models import Address, Board, PlacedComponent

from .grid import GridTopology
from .models import GridPoint, Path, RouterConfig
from .pathfinder import find_path


log = logging.getLogger(__name__)


# ── Main entry point ───────────────────────────────────────────────


def route(
    start: Address,
    end: Address,
    boards: Iterable[Board],
    components: Iterable[PlacedComponent] = (),
    *,
    config: RouterConfig | None = None,
) -> Path:
    """Route a single wire segment from *start* to *end*.

    Parameters
    ----------
    start, end : Address
        Holes to connect.  Unknown boards, out-of-range holes and holes
        under a component make the request unroutable.
    boards : Iterable[Board]
        Current boards; seams are derived from their anchors.
    components : Iterable[PlacedComponent]
        Current components; their bodies and pin bands are obstacles.
    config : RouterConfig | None
        Grid bounds.  Uses the shared board geometry when *None*.

    Returns
    -------
    Path
        Holes from *start* to *end* inclusive, or ``[]`` if unroutable.
    """
    topology = GridTopology(boards, components, config)
    path = find_path(topology, GridPoint.from_address(start), GridPoint.from_address(end))
    if not path:
        log.debug("route: no path from %s to %s", start, end)
    return path


def route_via(
    waypoints: Sequence[Address],
    boards: Iterable[Board],
    components: Iterable[PlacedComponent] = (),
    *,
    config: RouterConfig | None = None,
) -> Path:
    """Route through every waypoint in order; ``[]`` if any leg fails."""
    if not waypoints:
        return []
    topology = GridTopology(boards, components, config)
    legs: list[Path] = []
    for a, b in zip(waypoints, waypoints[1:]):
        leg = find_path(topology, GridPoint.from_address(a), GridPoint.from_address(b))
        if not leg:
            log.debug("route_via: leg %s -> %s unroutable", a, b)
            return []
        legs.append(leg)
    if not legs:
        only = GridPoint.from_address(waypoints[0])
        return find_path(topology, only, only)
    return chain_segments(legs)


def chain_segments(segments: Iterable[Path]) -> Path:
    """Concatenate consecutive segments, keeping each shared hole once.

    Returns ``[]`` if any segment is empty.
    """
    chained: Path = []
    for segment in segments:
        if not segment:
            return []
        if chained and chained[-1] == segment[0]:
            chained.extend(segment[1:])
        else:
            chained.extend(segment)
    return chained
