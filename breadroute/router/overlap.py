"""Overlap disambiguation — per-hole offsets for wires sharing a track.

Several wires may run through the same hole.  To keep them apart when
drawn, each point of a wire's path gets an offset magnitude: the number
of *other* wires that pass the same hole in the same orientation.

Orientation of a path point:
  - endpoints and corners count as both horizontal and vertical
  - a straight interior point counts only along its run

The renderer nudges a point perpendicular to its run by
``magnitude * offset_unit`` pixels.  The side is picked by the wire's
``shifted`` flag (captured when the wire was drawn); two wires with
opposite flags on one track end up side by side.

Everything here is a pure function of the wire set.  Callers recompute
after any structural change (wire added/removed, board moved,
component placed/removed); there is no registry to keep in sync.
"""

from __future__ import annotations

import logging
from collections import Counter
from collections.abc import Iterable, Sequence

from breadroute.layout.models import Wire

from .models import GridPoint, Path


log = logging.getLogger(__name__)


# Point orientations
HORIZONTAL = "horizontal"
VERTICAL = "vertical"
BOTH = "both"

_STILL = (0, 0)


def _sign(v: int) -> int:
    return (v > 0) - (v < 0)


def step_direction(a: GridPoint, b: GridPoint) -> tuple[int, int]:
    """Unit (dcol, drow) of travel from *a* to *b*.

    A seam hop keeps its row (horizontal seam) or column (vertical
    seam); leaving the last column for column 0 of the next board is
    travel to the right, and so on.
    """
    if a.board_id == b.board_id:
        return (_sign(b.col - a.col), _sign(b.row - a.row))
    if a.row == b.row and a.col != b.col:
        return (1 if a.col > b.col else -1, 0)
    if a.col == b.col and a.row != b.row:
        return (0, 1 if a.row > b.row else -1)
    return _STILL


def _is_horizontal(direction: tuple[int, int]) -> bool:
    return direction[0] != 0 and direction[1] == 0


def classify_path(path: Sequence[GridPoint]) -> list[str]:
    """Orientation of every point of *path* (see module docstring)."""
    n = len(path)
    kinds: list[str] = []
    for i in range(n):
        if i == 0 or i == n - 1:
            kinds.append(BOTH)
            continue
        d_in = step_direction(path[i - 1], path[i])
        d_out = step_direction(path[i], path[i + 1])
        if d_in != d_out or d_in == _STILL:
            kinds.append(BOTH)      # corner (or reversal)
        elif _is_horizontal(d_in):
            kinds.append(HORIZONTAL)
        else:
            kinds.append(VERTICAL)
    return kinds


def _track_keys(path: Sequence[GridPoint]) -> tuple[set[GridPoint], set[GridPoint]]:
    """Holes a path occupies horizontally and vertically (each once)."""
    h_keys: set[GridPoint] = set()
    v_keys: set[GridPoint] = set()
    for point, kind in zip(path, classify_path(path)):
        if kind != VERTICAL:
            h_keys.add(point)
        if kind != HORIZONTAL:
            v_keys.add(point)
    return h_keys, v_keys


def overlap_tallies(paths: Iterable[Sequence[GridPoint]]) -> tuple[Counter, Counter]:
    """Per-hole counts of paths running horizontally / vertically through it.

    A path adds at most one to each tally at a given hole, even if it
    visits that hole more than once.
    """
    h_counts: Counter = Counter()
    v_counts: Counter = Counter()
    for path in paths:
        h_keys, v_keys = _track_keys(path)
        h_counts.update(h_keys)
        v_counts.update(v_keys)
    return h_counts, v_counts


def _magnitudes(
    path: Sequence[GridPoint],
    h_counts: Counter,
    v_counts: Counter,
    own_h: set[GridPoint] = frozenset(),
    own_v: set[GridPoint] = frozenset(),
) -> dict[GridPoint, int]:
    result: dict[GridPoint, int] = {}
    for point, kind in zip(path, classify_path(path)):
        h = h_counts[point] - (point in own_h)
        v = v_counts[point] - (point in own_v)
        if kind == BOTH:
            n = max(h, v)
        elif kind == HORIZONTAL:
            n = h
        else:
            n = v
        if n > result.get(point, 0):
            result[point] = n
    return result


def disambiguate(target_wire_id: int, wires: Iterable[Wire]) -> dict[GridPoint, int]:
    """Offset magnitudes for the target wire's path.

    Only holes with a non-zero magnitude appear in the result.  An
    unknown target id yields an empty mapping.
    """
    wires = list(wires)
    target = next((w for w in wires if w.id == target_wire_id), None)
    if target is None:
        log.warning("disambiguate: no wire with id %s among %d wires",
                    target_wire_id, len(wires))
        return {}
    h_counts, v_counts = overlap_tallies(w.path for w in wires if w.id != target_wire_id)
    return _magnitudes(target.path, h_counts, v_counts)


def disambiguate_all(wires: Iterable[Wire]) -> dict[int, dict[GridPoint, int]]:
    """Offset magnitudes for every wire, keyed by wire id.

    Tallies are built once over all wires; each wire's own contribution
    is subtracted when looking up its points.
    """
    wires = list(wires)
    own = {w.id: _track_keys(w.path) for w in wires}
    h_counts: Counter = Counter()
    v_counts: Counter = Counter()
    for h_keys, v_keys in own.values():
        h_counts.update(h_keys)
        v_counts.update(v_keys)
    return {
        w.id: _magnitudes(w.path, h_counts, v_counts, *own[w.id])
        for w in wires
    }


def offset_vectors(
    path: Path,
    magnitudes: dict[GridPoint, int],
    shifted: bool = False,
) -> list[tuple[int, int]]:
    """Per-point (dx, dy) offsets in offset units.

    A point on a horizontal edge moves along y, a point on a vertical
    edge along x.  A corner touches one edge of each kind and moves
    along both, which extends the incoming and outgoing edges along
    their own axes and keeps the bend square.
    """
    sign = -1 if shifted else 1
    n_points = len(path)
    vectors: list[tuple[int, int]] = []
    for i, point in enumerate(path):
        n = magnitudes.get(point, 0)
        if n == 0:
            vectors.append((0, 0))
            continue
        dx = dy = 0
        edges = []
        if i > 0:
            edges.append(step_direction(path[i - 1], point))
        if i < n_points - 1:
            edges.append(step_direction(point, path[i + 1]))
        for direction in edges:
            if direction == _STILL:
                continue
            if _is_horizontal(direction):
                dy = sign * n
            else:
                dx = sign * n
        vectors.append((dx, dy))
    return vectors
