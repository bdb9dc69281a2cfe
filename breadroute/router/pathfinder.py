"""A* pathfinder for hole-to-hole wires on the multi-board grid.

Every edge costs 1 (including seam hops between boards) and the
heuristic is the Manhattan distance in (col, row), ignoring which board
a hole is on.

Search nodes live in an arena of parallel lists indexed by node id;
parents are stored as ids.  Node ids are handed out in first-discovery
order and double as the tie-break rank, so among equal-``f`` entries
the node discovered first is expanded first, even after its ``g`` has
been lowered.
"""

from __future__ import annotations

import heapq
import logging

from .grid import GridTopology
from .models import GridPoint, Path


log = logging.getLogger(__name__)


def heuristic(a: GridPoint, b: GridPoint) -> int:
    return abs(a.col - b.col) + abs(a.row - b.row)


def find_path(
    topology: GridTopology,
    start: GridPoint,
    end: GridPoint,
) -> Path:
    """A* point-to-point routing.

    Returns the holes from *start* to *end* inclusive, ``[start]`` when
    they coincide, or ``[]`` if either hole is invalid or no path
    exists.
    """
    if not topology.is_valid_point(start):
        log.debug("find_path: start %s is not a free hole", start)
        return []
    if not topology.is_valid_point(end):
        log.debug("find_path: end %s is not a free hole", end)
        return []
    if start == end:
        return [start]

    # Arena: node id -> point / g / f / parent id / closed flag
    points: list[GridPoint] = [start]
    g_scores: list[int] = [0]
    f_scores: list[int] = [heuristic(start, end)]
    parents: list[int] = [-1]
    closed: list[bool] = [False]
    ids: dict[GridPoint, int] = {start: 0}

    heap: list[tuple[int, int]] = [(f_scores[0], 0)]

    while heap:
        f, nid = heapq.heappop(heap)
        if closed[nid] or f != f_scores[nid]:
            continue    # stale entry

        current = points[nid]
        if current == end:
            log.debug("find_path: %s -> %s in %d steps, %d nodes discovered",
                      start, end, g_scores[nid], len(points))
            return _reconstruct(points, parents, nid)

        closed[nid] = True
        tentative_g = g_scores[nid] + 1

        for neighbor in topology.neighbors(current):
            nbid = ids.get(neighbor)
            if nbid is None:
                nbid = len(points)
                ids[neighbor] = nbid
                points.append(neighbor)
                g_scores.append(tentative_g)
                f_scores.append(tentative_g + heuristic(neighbor, end))
                parents.append(nid)
                closed.append(False)
                heapq.heappush(heap, (f_scores[nbid], nbid))
            elif not closed[nbid] and tentative_g < g_scores[nbid]:
                f_scores[nbid] -= g_scores[nbid] - tentative_g
                g_scores[nbid] = tentative_g
                parents[nbid] = nid
                heapq.heappush(heap, (f_scores[nbid], nbid))

    log.debug("find_path: %s -> %s unroutable after %d nodes", start, end, len(points))
    return []


def _reconstruct(points: list[GridPoint], parents: list[int], nid: int) -> Path:
    path: Path = []
    while nid >= 0:
        path.append(points[nid])
        nid = parents[nid]
    path.reverse()
    return path
