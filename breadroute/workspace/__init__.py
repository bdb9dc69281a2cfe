"""Workspace — the editable layout and its routing session.

Submodules:
  editor        Workspace (board/component/wire edits, routing session, offsets).
  serialization JSON conversion (workspace_to_dict, parse_workspace).
"""

from .editor import Workspace
from .serialization import workspace_to_dict, parse_workspace, parse_address

__all__ = [
    "Workspace",
    "workspace_to_dict", "parse_workspace", "parse_address",
]
