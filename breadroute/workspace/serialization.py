"""Workspace serialization — JSON conversion.

Routing sessions are transient and never written out.
"""

from __future__ import annotations

from breadroute.layout.models import Address, Board, PlacedComponent, Wire
from breadroute.router.models import GridPoint

from .editor import Workspace


def _address_to_dict(a: Address) -> dict:
    return {"board_id": a.board_id, "row": a.row, "col": a.col}


def _parse_address_dict(data: dict) -> Address:
    return Address(int(data["board_id"]), int(data["row"]), int(data["col"]))


def parse_address(text: str) -> Address:
    """Parse ``board:row:col`` (e.g. ``0:-2:17``) into an Address."""
    parts = text.split(":")
    if len(parts) != 3:
        raise ValueError(f"expected board:row:col, got {text!r}")
    board_id, row, col = (int(p) for p in parts)
    return Address(board_id, row, col)


def workspace_to_dict(ws: Workspace) -> dict:
    """Serialize a Workspace to a JSON-safe dict."""
    return {
        "boards": [
            {"id": b.id, "x": b.x, "y": b.y}
            for b in ws.boards
        ],
        "components": [
            {
                "id": c.id,
                "board_id": c.board_id,
                "start_row": c.start_row,
                "start_col": c.start_col,
                "body_rows": c.body_rows,
                "body_cols": c.body_cols,
                "pin_count": c.pin_count,
            }
            for c in ws.components
        ],
        "wires": [
            {
                "id": w.id,
                "start": _address_to_dict(w.start),
                "end": _address_to_dict(w.end),
                "color": w.color,
                "path": [list(p.as_tuple()) for p in w.path],
                "shifted": w.shifted,
            }
            for w in ws.wires
        ],
    }


def parse_workspace(data: dict) -> Workspace:
    """Parse a workspace dict back into a Workspace."""
    boards = [
        Board(id=b["id"], x=b["x"], y=b["y"])
        for b in data["boards"]
    ]

    components = [
        PlacedComponent(
            id=c["id"],
            board_id=c["board_id"],
            start_row=c["start_row"],
            start_col=c["start_col"],
            body_rows=c["body_rows"],
            body_cols=c["body_cols"],
            pin_count=c["pin_count"],
        )
        for c in data.get("components", [])
    ]

    wires = [
        Wire(
            id=w["id"],
            start=_parse_address_dict(w["start"]),
            end=_parse_address_dict(w["end"]),
            color=w["color"],
            path=[GridPoint(*p) for p in w["path"]],
            shifted=bool(w.get("shifted", False)),
        )
        for w in data.get("wires", [])
    ]

    return Workspace(boards=boards, components=components, wires=wires)
