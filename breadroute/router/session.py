"""Interactive routing session — live hover segment plus pinned segments.

A session starts at a fixed hole.  Each hover update re-routes the live
segment from the last pinned hole (or the start) to the hovered hole.
Pinning commits the current leg; finishing joins every pinned leg with
a final leg to the end hole.  Empty legs are never committed.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from breadroute.layout.models import Address, Board, PlacedComponent

from .engine import chain_segments, route
from .models import Path, RouterConfig


log = logging.getLogger(__name__)


class RoutingSession:
    """State of one in-progress wire."""

    def __init__(
        self,
        start: Address,
        boards: Iterable[Board],
        components: Iterable[PlacedComponent] = (),
        *,
        config: RouterConfig | None = None,
    ) -> None:
        self.start = start
        self.pinned_path: Path = []
        self.pinned_end: Address | None = None
        self.live: Path = []
        self.hovered: Address | None = None
        self.config = config
        self._boards = list(boards)
        self._components = list(components)

    @property
    def anchor(self) -> Address:
        """Hole the next leg starts from."""
        return self.pinned_end if self.pinned_end is not None else self.start

    def _route(self, end: Address) -> Path:
        return route(self.anchor, end, self._boards, self._components, config=self.config)

    def refresh(
        self,
        boards: Iterable[Board],
        components: Iterable[PlacedComponent],
    ) -> None:
        """Take a new layout snapshot and re-route the live leg."""
        self._boards = list(boards)
        self._components = list(components)
        if self.hovered is not None:
            self.live = self._route(self.hovered)

    def hover(self, address: Address) -> Path:
        """Re-route the live leg to *address* and return it."""
        self.hovered = address
        self.live = self._route(address)
        return self.live

    def pin(self, address: Address) -> bool:
        """Commit the leg to *address*; False (state untouched) if unroutable."""
        segment = self._route(address)
        if not segment:
            log.info("Routing session: cannot pin %s, no path from %s", address, self.anchor)
            return False
        self.pinned_path = chain_segments([self.pinned_path, segment]) if self.pinned_path else segment
        self.pinned_end = address
        self.hovered = address
        self.live = [segment[-1]]
        return True

    def preview(self) -> Path:
        """Pinned legs followed by the live leg, for drawing."""
        if not self.pinned_path:
            return list(self.live)
        if not self.live:
            return list(self.pinned_path)
        return chain_segments([self.pinned_path, self.live])

    def finish(self, end: Address) -> Path:
        """Full path from the start to *end*, or ``[]`` if it cannot be a wire."""
        if end == self.start:
            log.info("Routing session: end %s equals start, no wire", end)
            return []
        segment = self._route(end)
        if not segment:
            log.info("Routing session: final leg %s -> %s unroutable", self.anchor, end)
            return []
        if not self.pinned_path:
            return segment
        return chain_segments([self.pinned_path, segment])
