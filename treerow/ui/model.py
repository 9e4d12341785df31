'''
Copyright 2025 Aaron Vose (avose@aaronvose.net)
Licensed under the LGPL v2.1; see the file 'LICENSE' for details.
'''
from __future__ import annotations

from typing import Any, Dict, List, Sequence, Tuple

from treerow.core.log import Log
from treerow.core.scaffold import SwapState
from treerow.ui.types import PlacedRow, Row

__all__ = ["SAMPLE_TREE", "flatten_tree", "swap_span", "preview_move"]

# Shown when no --tree file is given.
SAMPLE_TREE: List[Dict[str, Any]] = [
    {"title": "Chicken", "children": [
        {"title": "Egg"},
        {"title": "Feathers", "children": [
            {"title": "Down"},
            {"title": "Quill"},
        ]},
    ]},
    {"title": "Fish", "children": [
        {"title": "Fingerling"},
    ]},
    {"title": "Frog", "collapsed": True, "children": [
        {"title": "Tadpole"},
    ]},
]


def _is_collapsed(node: Dict[str, Any]) -> bool:
    return bool(node.get("collapsed", False))


def _gather_children(
        nodes: Sequence[Dict[str, Any]],
        level: int,
        parent_counts: Tuple[int, ...],
        out: List[Row],
        id_prefix: str,
) -> None:
    """Recursively append *nodes* and their visible descendants to *out*."""
    total = len(nodes)
    for i, node in enumerate(nodes):
        if not isinstance(node, dict):
            raise TypeError(f"tree node must be a dict, got {type(node).__name__}")

        counts = parent_counts + (total - i - 1,)
        entry_id = str(node.get("id") or f"{id_prefix}{i}")
        out.append(Row(
            entry_id=entry_id,
            title=str(node.get("title", "")),
            level=level,
            tree_index=len(out),
            lower_sibling_counts=counts,
        ))

        # Collapsed nodes hide their children from the flat list
        if _is_collapsed(node):
            continue
        children = node.get("children") or []
        if children:
            _gather_children(children, level + 1, counts, out, f"{entry_id}.")


def flatten_tree(nodes: Sequence[Dict[str, Any]]) -> List[Row]:
    """
    Flatten nested ``{"title", "children", "collapsed", "id"}`` dicts into rows.

    Each row carries one lower-sibling count per level from the roots down to
    itself, so a root row has one scaffold block.
    """
    rows: List[Row] = []
    _gather_children(list(nodes), 0, (), rows, "")
    Log.debug(f"Flattened tree into {len(rows)} rows", 1)
    return rows


def swap_span(source_index: int, target_index: int, depth: int) -> SwapState:
    """Displaced span between a dragged row's original and current list positions."""
    start = min(source_index, target_index)
    return SwapState(
        from_index=start,
        depth=depth,
        length=abs(target_index - source_index) + 1,
    )


def preview_move(rows: Sequence[Row], source_index: int, target_index: int) -> List[PlacedRow]:
    """
    Displayed order while row *source_index* hovers at *target_index*.

    Rows keep their tree_index; list_index is where they currently show.
    """
    n = len(rows)
    for name, idx in (("source_index", source_index), ("target_index", target_index)):
        if not 0 <= idx < n:
            raise IndexError(f"{name} {idx} out of range for {n} rows")

    order: List[Row] = list(rows)
    moved = order.pop(source_index)
    order.insert(target_index, moved)
    return [PlacedRow(row=row, list_index=i) for i, row in enumerate(order)]
