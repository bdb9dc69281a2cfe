"""Tests for overlap disambiguation (per-hole offset magnitudes)."""

from __future__ import annotations

import unittest

from breadroute.layout.models import Address, Wire
from breadroute.router import (
    GridPoint,
    classify_path, disambiguate, disambiguate_all, offset_vectors, overlap_tallies,
)
from breadroute.router.overlap import BOTH, HORIZONTAL, VERTICAL, step_direction


def hline(row: int, c0: int, c1: int, board: int = 0) -> list[GridPoint]:
    return [GridPoint(c, row, board) for c in range(c0, c1 + 1)]


def vline(col: int, r0: int, r1: int, board: int = 0) -> list[GridPoint]:
    return [GridPoint(col, r, board) for r in range(r0, r1 + 1)]


def make_wire(wire_id: int, path: list[GridPoint], shifted: bool = False) -> Wire:
    return Wire(
        id=wire_id,
        start=path[0].to_address(),
        end=path[-1].to_address(),
        color="#000000",
        path=path,
        shifted=shifted,
    )


class TestClassification(unittest.TestCase):

    def test_straight_run(self):
        kinds = classify_path(hline(2, 0, 3))
        self.assertEqual(kinds, [BOTH, HORIZONTAL, HORIZONTAL, BOTH])

    def test_vertical_run(self):
        self.assertEqual(classify_path(vline(4, 0, 2)), [BOTH, VERTICAL, BOTH])

    def test_corner(self):
        path = hline(0, 0, 2) + vline(2, 1, 2)
        self.assertEqual(classify_path(path), [BOTH, HORIZONTAL, BOTH, VERTICAL, BOTH])

    def test_single_point(self):
        self.assertEqual(classify_path([GridPoint(0, 0, 0)]), [BOTH])
        self.assertEqual(classify_path([]), [])

    def test_reversal_counts_as_corner(self):
        path = [GridPoint(0, 0, 0), GridPoint(1, 0, 0), GridPoint(0, 0, 0)]
        self.assertEqual(classify_path(path)[1], BOTH)

    def test_seam_hop_keeps_run_straight(self):
        path = [GridPoint(61, 2, 0), GridPoint(62, 2, 0), GridPoint(0, 2, 1), GridPoint(1, 2, 1)]
        self.assertEqual(step_direction(path[1], path[2]), (1, 0))
        self.assertEqual(classify_path(path), [BOTH, HORIZONTAL, HORIZONTAL, BOTH])

    def test_vertical_seam_direction(self):
        self.assertEqual(step_direction(GridPoint(5, 12, 0), GridPoint(5, -3, 1)), (0, 1))
        self.assertEqual(step_direction(GridPoint(5, -3, 1), GridPoint(5, 12, 0)), (0, -1))


class TestTallies(unittest.TestCase):

    def test_endpoint_counts_both(self):
        h, v = overlap_tallies([hline(0, 0, 2)])
        self.assertEqual(h[GridPoint(0, 0, 0)], 1)
        self.assertEqual(v[GridPoint(0, 0, 0)], 1)
        self.assertEqual(h[GridPoint(1, 0, 0)], 1)
        self.assertEqual(v[GridPoint(1, 0, 0)], 0)

    def test_revisit_counts_once(self):
        path = hline(0, 0, 2) + hline(0, 0, 1)[::-1]
        h, _v = overlap_tallies([path])
        self.assertEqual(h[GridPoint(1, 0, 0)], 1)


class TestDisambiguate(unittest.TestCase):

    def setUp(self):
        self.a = make_wire(0, hline(2, 0, 5))
        self.b = make_wire(1, hline(2, 3, 8), shifted=True)
        self.c = make_wire(2, vline(4, 0, 4))
        self.wires = [self.a, self.b, self.c]

    def test_shared_track_symmetric(self):
        """Both wires on a shared run see each other."""
        mags_a = disambiguate(0, [self.a, self.b])
        mags_b = disambiguate(1, [self.a, self.b])
        shared = [GridPoint(c, 2, 0) for c in (3, 4, 5)]
        for p in shared:
            self.assertGreaterEqual(mags_a[p], 1)
            self.assertGreaterEqual(mags_b[p], 1)
        self.assertEqual(set(mags_a), set(shared))
        self.assertEqual(set(mags_b), set(shared))

    def test_perpendicular_crossing_not_offset(self):
        """A vertical wire crossing a horizontal run does not push it aside."""
        mags_c = disambiguate(2, self.wires)
        self.assertNotIn(GridPoint(4, 2, 0), mags_c)
        mags_a = disambiguate(0, self.wires)
        self.assertEqual(mags_a[GridPoint(4, 2, 0)], 1)

    def test_magnitude_counts_each_other_wire(self):
        d = make_wire(3, hline(2, 4, 6))
        mags = disambiguate(0, self.wires + [d])
        self.assertEqual(mags[GridPoint(4, 2, 0)], 2)
        self.assertEqual(mags[GridPoint(5, 2, 0)], 2)
        self.assertEqual(mags[GridPoint(3, 2, 0)], 1)

    def test_endpoint_takes_max_tally(self):
        e = make_wire(3, vline(0, 2, 5))
        mags = disambiguate(3, [self.a, e])
        # e's endpoint (0, 2) is a's endpoint as well
        self.assertEqual(mags, {GridPoint(0, 2, 0): 1})

    def test_target_excluded(self):
        self.assertEqual(disambiguate(0, [self.a]), {})

    def test_unknown_target(self):
        with self.assertLogs("breadroute.router.overlap", level="WARNING"):
            self.assertEqual(disambiguate(99, self.wires), {})

    def test_idempotent(self):
        self.assertEqual(disambiguate(0, self.wires), disambiguate(0, self.wires))
        self.assertEqual(disambiguate_all(self.wires), disambiguate_all(self.wires))

    def test_all_matches_single(self):
        everything = disambiguate_all(self.wires)
        self.assertEqual(set(everything), {0, 1, 2})
        for w in self.wires:
            self.assertEqual(everything[w.id], disambiguate(w.id, self.wires))

    def test_removal_clears_offsets(self):
        self.assertTrue(disambiguate(0, self.wires))
        self.assertEqual(disambiguate(0, [self.a, self.c]), {})


class TestOffsetVectors(unittest.TestCase):

    def setUp(self):
        self.path = hline(0, 0, 2) + vline(2, 1, 2)
        self.mags = {GridPoint(1, 0, 0): 1, GridPoint(2, 0, 0): 2, GridPoint(2, 1, 0): 1}

    def test_perpendicular_offsets(self):
        self.assertEqual(
            offset_vectors(self.path, self.mags),
            [(0, 0), (0, 1), (2, 2), (1, 0), (0, 0)],
        )

    def test_shifted_flips_side(self):
        self.assertEqual(
            offset_vectors(self.path, self.mags, shifted=True),
            [(0, 0), (0, -1), (-2, -2), (-1, 0), (0, 0)],
        )

    def test_endpoint_moves_off_its_edge(self):
        path = hline(0, 0, 2)
        self.assertEqual(offset_vectors(path, {GridPoint(0, 0, 0): 3}), [(0, 3), (0, 0), (0, 0)])

    def test_single_point_not_moved(self):
        p = GridPoint(0, 0, 0)
        self.assertEqual(offset_vectors([p], {p: 2}), [(0, 0)])

    def test_opposite_flags_separate(self):
        """Two wires on one track with opposite flags land on opposite sides."""
        a = make_wire(0, hline(2, 0, 5))
        b = make_wire(1, hline(2, 0, 5), shifted=True)
        mags = disambiguate_all([a, b])
        va = offset_vectors(a.path, mags[0], a.shifted)
        vb = offset_vectors(b.path, mags[1], b.shifted)
        self.assertEqual(va[2], (0, 1))
        self.assertEqual(vb[2], (0, -1))

    def test_addresses_round_trip(self):
        p = GridPoint(5, -2, 1)
        self.assertEqual(p.to_address(), Address(1, -2, 5))
        self.assertEqual(GridPoint.from_address(p.to_address()), p)


if __name__ == "__main__":
    unittest.main()
