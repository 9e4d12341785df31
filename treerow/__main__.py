#!/usr/bin/env python3
'''
Copyright 2025 Aaron Vose (avose@aaronvose.net)
Licensed under the LGPL v2.1; see the file 'LICENSE' for details.
'''

import sys
import json
import argparse
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence, Tuple

from treerow.core.log import Log
from treerow.core.scaffold import Direction
from treerow.core.text_render import render_lines
from treerow.ui.compositor import compose_rows
from treerow.ui.constants import UNIT_W
from treerow.ui.model import SAMPLE_TREE, flatten_tree, preview_move, swap_span
from treerow.ui.types import PlacedRow

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="treerow",
        description="Preview tree row scaffolds and drag-reorder highlight rails",
    )
    parser.add_argument(
        "--tree",
        type=Path, default=None,
        help="JSON file holding a list of {title, children, collapsed} nodes (default: built-in sample)"
    )
    parser.add_argument(
        "--move",
        type=int, nargs=2, metavar=("SRC", "DST"), default=None,
        help="Preview dragging flattened row SRC over row DST"
    )
    parser.add_argument(
        "--swap-depth",
        type=int, default=None,
        help="Scaffold level of the highlight rail (default: level of the dragged row)"
    )
    parser.add_argument("--rtl", action="store_true", help="Lay rows out right to left.")
    parser.add_argument(
        "--unit",
        type=int, default=UNIT_W,
        help=f"Pixel width of one scaffold block (default: {UNIT_W})"
    )
    parser.add_argument(
        "--gui",
        action="store_true",
        help="Open the wxPython preview window instead of printing text."
    )
    parser.add_argument(
        "--verbosity",
        type=int, default=0,
        help="Set verbosity level (0=quiet, 1=normal, 2=verbose, 3+=debug)"
    )
    parser.add_argument(
        "--log-file",
        type=Path, default=None,
        help="Write the debug log to this file before exiting."
    )
    parser.add_argument(
        "--stdexp",
        action="store_true",
        help="Use standard exception handling to stdout / stderr."
    )
    return parser

def load_tree(path: Optional[Path]) -> List[Dict[str, Any]]:
    """Read a nested tree from JSON; a top-level object is treated as a single root."""
    if path is None:
        return SAMPLE_TREE
    data = json.loads(path.read_text(encoding="utf-8"))
    if isinstance(data, dict):
        data = [data]
    if not isinstance(data, list):
        raise ValueError(f"{path}: expected a list of nodes, got {type(data).__name__}")
    return data

def render_text(
        tree: Sequence[Dict[str, Any]],
        *,
        unit_width: int = UNIT_W,
        direction: Direction = Direction.LTR,
        move: Optional[Tuple[int, int]] = None,
        swap_depth: Optional[int] = None,
) -> List[str]:
    """Text preview of the whole tree, optionally mid-drag."""
    rows = flatten_tree(tree)
    swap = None
    if move is None:
        placed = [PlacedRow(row=r, list_index=r.tree_index) for r in rows]
    else:
        src, dst = move
        placed = preview_move(rows, src, dst)
        depth = rows[src].level if swap_depth is None else swap_depth
        swap = swap_span(src, dst, depth)
        Log.debug(f"Previewing move {src} -> {dst} at depth {depth}", 1)

    visuals = compose_rows(placed, unit_width=unit_width, direction=direction, swap=swap)
    return render_lines(
        (v.scaffold, v.content.title) for v in visuals
    )

def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    Log.set_verbosity(args.verbosity)

    try:
        tree = load_tree(args.tree)
    except (OSError, ValueError) as e:
        parser.error(f"cannot load tree: {e}")

    direction = Direction.RTL if args.rtl else Direction.LTR
    if args.unit <= 0:
        parser.error("--unit must be a positive number of pixels")
    if args.swap_depth is not None and args.move is None:
        parser.error("--swap-depth only applies together with --move")

    try:
        if args.gui:
            from treerow.app import main as gui_main
            status = gui_main(
                tree,
                verbosity=args.verbosity,
                stdexp=args.stdexp,
                unit_width=args.unit,
                direction=direction,
            )
        else:
            move = tuple(args.move) if args.move else None
            try:
                lines = render_text(
                    tree,
                    unit_width=args.unit,
                    direction=direction,
                    move=move,
                    swap_depth=args.swap_depth,
                )
            except (IndexError, TypeError) as e:
                parser.error(str(e))
            print("\n".join(lines))
            status = 0
    finally:
        if args.log_file is not None:
            Log.write_to_file(str(args.log_file))

    return status

if __name__ == "__main__":
    sys.exit(main())
