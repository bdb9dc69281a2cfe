"""
breadroute — entry point.

Usage:
    python -m breadroute route LAYOUT.json FROM TO     # holes as board:row:col
    python -m breadroute offsets LAYOUT.json
    add --verbose to either command for routing logs on stderr
"""

import json
import logging
import sys
from pathlib import Path

USAGE = (
    "Usage: python -m breadroute route LAYOUT.json FROM TO [--verbose]\n"
    "       python -m breadroute offsets LAYOUT.json [--verbose]"
)


def _load(path: str):
    from breadroute.workspace import parse_workspace

    return parse_workspace(json.loads(Path(path).read_text(encoding="utf-8")))


def main(argv=None) -> int:
    args = list(sys.argv[1:] if argv is None else argv)
    verbose = "--verbose" in args
    args = [a for a in args if a != "--verbose"]
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    cmd = args[0] if args else ""

    if cmd == "route" and len(args) == 4:
        from breadroute.workspace import parse_address

        try:
            start, end = parse_address(args[2]), parse_address(args[3])
        except ValueError as e:
            print(f"Bad hole address: {e}")
            print(USAGE)
            return 2
        ws = _load(args[1])
        path = ws.route(start, end)
        print(json.dumps([list(p.as_tuple()) for p in path]))
        return 0 if path else 1

    if cmd == "offsets" and len(args) == 2:
        ws = _load(args[1])
        offsets = {
            str(wire_id): [[*p.as_tuple(), n] for p, n in mags.items()]
            for wire_id, mags in ws.wire_offsets().items()
        }
        print(json.dumps(offsets, indent=2))
        return 0

    print(f"Unknown command: {' '.join(args) or '(none)'}")
    print(USAGE)
    return 2


if __name__ == "__main__":
    sys.exit(main())
