"""Workspace editor — boards, components and wires plus the active routing session.

The workspace is the only long-lived mutable state.  Routing never writes
to it: the router returns paths and the editor decides whether they
become wires.  Offset magnitudes are recomputed from the wire set on
every request rather than stored.

Structural rules:
  - boards never overlap, and an added or moved board must touch another
  - components stay inside their board and never overlap another body
  - a wire needs a non-empty path and distinct start/end holes
  - at most one routing session is active; starting another discards it
"""

from __future__ import annotations

import logging
import random
from collections.abc import Iterable
from dataclasses import replace

from breadroute.config import BOARD_GEOMETRY, BoardGeometry, WIRE_COLORS
from breadroute.layout.geometry import bodies_overlap, body_inside_board, boards_overlap
from breadroute.layout.models import (
    Address, Board, LayoutError, PlacedComponent, Wire, dip_component,
)
from breadroute.router import (
    GridPoint, Path, RouterConfig, RoutingSession,
    board_side, disambiguate_all, route,
)


log = logging.getLogger(__name__)


def _next_id(items: Iterable) -> int:
    return max((item.id for item in items), default=-1) + 1


class Workspace:
    """Boards, components and wires of one editing session."""

    def __init__(
        self,
        boards: list[Board] | None = None,
        components: list[PlacedComponent] | None = None,
        wires: list[Wire] | None = None,
        *,
        geometry: BoardGeometry = BOARD_GEOMETRY,
    ) -> None:
        self.geometry = geometry
        self.router_config = RouterConfig(
            rows=geometry.rows,
            cols=geometry.cols,
            rail_rows=geometry.rail_rows,
            grid_size=geometry.grid_size,
        )
        self.boards: list[Board] = boards if boards is not None else [Board(0, 0, 0)]
        self.components: list[PlacedComponent] = components if components is not None else []
        self.wires: list[Wire] = wires if wires is not None else []
        self.session: RoutingSession | None = None
        self.color_index = 0

    # ── Lookups ────────────────────────────────────────────────────

    def board(self, board_id: int) -> Board:
        for b in self.boards:
            if b.id == board_id:
                return b
        raise LayoutError(f"board {board_id}", "no such board")

    def wire(self, wire_id: int) -> Wire:
        for w in self.wires:
            if w.id == wire_id:
                return w
        raise LayoutError(f"wire {wire_id}", "no such wire")

    @property
    def current_color(self) -> str:
        return WIRE_COLORS[self.color_index][1]

    # ── Boards ─────────────────────────────────────────────────────

    def add_board(self, x: float, y: float) -> Board:
        """Add a board at (x, y); it must touch an existing board."""
        new = Board(_next_id(self.boards), x, y)
        for b in self.boards:
            if boards_overlap(b, new, self.geometry):
                raise LayoutError(f"board {new.id}", f"overlaps board {b.id}")
        if self.boards and not any(
            board_side(b, new, self.router_config) for b in self.boards
        ):
            raise LayoutError(f"board {new.id}", "not adjacent to any existing board")
        self.boards.append(new)
        log.info("Workspace: added board %d at (%.0f, %.0f)", new.id, x, y)
        self._structure_changed()
        return new

    def move_board(self, board_id: int, x: float, y: float) -> Board:
        board = self.board(board_id)
        moved = Board(board_id, x, y)
        others = [b for b in self.boards if b.id != board_id]
        for b in others:
            if boards_overlap(b, moved, self.geometry):
                raise LayoutError(f"board {board_id}", f"would overlap board {b.id}")
        if others and not any(board_side(b, moved, self.router_config) for b in others):
            raise LayoutError(f"board {board_id}", "would not touch any other board")
        board.x, board.y = x, y
        log.info("Workspace: moved board %d to (%.0f, %.0f)", board_id, x, y)
        self._structure_changed()
        return board

    def remove_board(self, board_id: int) -> None:
        """Remove a board with its components and every wire touching it."""
        self.board(board_id)
        if len(self.boards) == 1:
            raise LayoutError(f"board {board_id}", "cannot remove the last board")
        self.boards = [b for b in self.boards if b.id != board_id]
        self.components = [c for c in self.components if c.board_id != board_id]
        kept = [w for w in self.wires if not _wire_touches_board(w, board_id)]
        log.info("Workspace: removed board %d (%d wires dropped)",
                 board_id, len(self.wires) - len(kept))
        self.wires = kept
        self._structure_changed()

    # ── Components ─────────────────────────────────────────────────

    def place_component(self, component: PlacedComponent) -> PlacedComponent:
        """Add a component.  ``pin_count`` 0 places a body without pin bands."""
        if any(c.id == component.id for c in self.components):
            raise LayoutError(f"component {component.id}", "duplicate component id")
        self._check_footprint(component)
        self.components.append(component)
        log.info("Workspace: placed %d-pin component %d on board %d at row %d col %d",
                 component.pin_count, component.id, component.board_id,
                 component.start_row, component.start_col)
        self._structure_changed()
        return component

    def add_dip(
        self,
        board_id: int,
        start_col: int,
        pin_count: int,
        *,
        start_row: int | None = None,
        overhang: int = 0,
    ) -> PlacedComponent:
        comp = dip_component(
            _next_id(self.components), board_id, start_col, pin_count,
            start_row=start_row, overhang=overhang, geometry=self.geometry,
        )
        return self.place_component(comp)

    def move_component(
        self,
        component_id: int,
        board_id: int,
        start_row: int,
        start_col: int,
    ) -> PlacedComponent:
        """Move a component, possibly onto another board."""
        comp = self._component(component_id)
        moved = replace(comp, board_id=board_id, start_row=start_row, start_col=start_col)
        self._check_footprint(moved)
        self.components = [moved if c.id == component_id else c for c in self.components]
        log.info("Workspace: moved component %d to board %d row %d col %d",
                 component_id, board_id, start_row, start_col)
        self._structure_changed()
        return moved

    def remove_components(self, component_ids: Iterable[int]) -> None:
        ids = set(component_ids)
        known = {c.id for c in self.components}
        missing = ids - known
        if missing:
            raise LayoutError(f"component {min(missing)}", "no such component")
        self.components = [c for c in self.components if c.id not in ids]
        self._structure_changed()

    # ── Wires ──────────────────────────────────────────────────────

    def add_wire(
        self,
        start: Address,
        end: Address,
        path: Path,
        color: str | None = None,
        shifted: bool = False,
    ) -> Wire | None:
        """Commit a routed wire; None if the path cannot form a wire."""
        if not path:
            log.info("Workspace: no wire %s -> %s (unroutable)", start, end)
            return None
        if start == end:
            log.info("Workspace: no wire at %s (start equals end)", start)
            return None
        wire = Wire(
            id=_next_id(self.wires),
            start=start,
            end=end,
            color=color or self.current_color,
            path=list(path),
            shifted=shifted,
        )
        self.wires.append(wire)
        log.info("Workspace: added wire %d %s -> %s (%d holes)",
                 wire.id, start, end, len(wire.path))
        return wire

    def remove_wires(self, wire_ids: Iterable[int]) -> None:
        ids = set(wire_ids)
        for wid in ids:
            self.wire(wid)
        self.wires = [w for w in self.wires if w.id not in ids]
        log.info("Workspace: removed %d wires", len(ids))

    def cycle_color(self) -> str:
        """Advance the colour used for the next wire."""
        self.color_index = (self.color_index + 1) % len(WIRE_COLORS)
        return self.current_color

    def recolor_wires(
        self,
        wire_ids: Iterable[int],
        rng: random.Random | None = None,
    ) -> str | None:
        """Recolour wires: next palette colour if they match, else a random one."""
        selected = [self.wire(wid) for wid in wire_ids]
        if not selected:
            return None
        colors = [value for _name, value in WIRE_COLORS]
        if all(w.color == selected[0].color for w in selected):
            self.color_index = (self.color_index + 1) % len(colors)
        else:
            self.color_index = (rng or random).randrange(len(colors))
        for w in selected:
            w.color = self.current_color
        return self.current_color

    # ── Routing ────────────────────────────────────────────────────

    def route(self, start: Address, end: Address) -> Path:
        return route(start, end, self.boards, self.components, config=self.router_config)

    def begin_routing(self, start: Address) -> RoutingSession:
        if self.session is not None:
            log.info("Workspace: discarding routing session from %s", self.session.start)
        self.session = RoutingSession(
            start, self.boards, self.components, config=self.router_config,
        )
        return self.session

    def commit_routing(
        self,
        end: Address,
        color: str | None = None,
        shifted: bool = False,
    ) -> Wire | None:
        """End the active session, turning it into a wire when possible."""
        session = self.session
        if session is None:
            return None
        self.session = None
        return self.add_wire(session.start, end, session.finish(end), color, shifted)

    def cancel_routing(self) -> None:
        self.session = None

    def wire_offsets(self) -> dict[int, dict[GridPoint, int]]:
        """Offset magnitudes of every wire, recomputed from scratch."""
        return disambiguate_all(self.wires)

    # ── Internal ───────────────────────────────────────────────────

    def _component(self, component_id: int) -> PlacedComponent:
        for c in self.components:
            if c.id == component_id:
                return c
        raise LayoutError(f"component {component_id}", "no such component")

    def _check_footprint(self, component: PlacedComponent) -> None:
        """Board, pin count, bounds and overlap with every other body."""
        self.board(component.board_id)
        subject = f"component {component.id}"
        if component.pin_count < 0 or component.pin_count % 2:
            raise LayoutError(subject, f"pin count must be even (got {component.pin_count})")
        if not body_inside_board(component, self.geometry):
            raise LayoutError(subject, "body does not fit on the board")
        for other in self.components:
            if other.id != component.id and bodies_overlap(other, component):
                raise LayoutError(subject, f"overlaps component {other.id}")

    def _structure_changed(self) -> None:
        if self.session is not None:
            self.session.refresh(self.boards, self.components)


def _wire_touches_board(wire: Wire, board_id: int) -> bool:
    if wire.start.board_id == board_id or wire.end.board_id == board_id:
        return True
    return any(p.board_id == board_id for p in wire.path)
