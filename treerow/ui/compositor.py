'''
Copyright 2025 Aaron Vose (avose@aaronvose.net)
Licensed under the LGPL v2.1; see the file 'LICENSE' for details.
'''
from __future__ import annotations

from types import MappingProxyType
from typing import Any, Callable, List, Mapping, Optional, Sequence, Union

from treerow.core.scaffold import Direction, Scaffold, SwapState, build_scaffold
from treerow.ui.types import DropContext, PlacedRow, RowContent, RowVisual

__all__ = ["compose_row", "compose_rows"]


def compose_row(
        scaffold: Scaffold,
        content: Any,
        drop: Optional[DropContext] = None,
        attrs: Optional[Mapping[str, Any]] = None,
) -> RowVisual:
    """
    Put a row together: scaffold first, then *content* shifted past it.

    The drop-target flags are merged into *content* through its
    ``with_drag_context`` hook; *attrs* is host-specific and forwarded as-is.
    """
    inject = getattr(content, "with_drag_context", None)
    if not callable(inject):
        raise TypeError(
            f"row content {type(content).__name__} has no with_drag_context() hook"
        )

    return RowVisual(
        scaffold=scaffold,
        content=inject(drop if drop is not None else DropContext()),
        attrs=MappingProxyType(dict(attrs or {})),
    )


def compose_rows(
        placed: Sequence[PlacedRow],
        *,
        unit_width: float,
        direction: Union[Direction, str] = Direction.LTR,
        swap: Optional[SwapState] = None,
        drop_for: Optional[Callable[[PlacedRow], DropContext]] = None,
) -> List[RowVisual]:
    """Build and compose every displayed row; *drop_for* stands in for the drop-target provider."""
    visuals: List[RowVisual] = []
    for p in placed:
        scaffold = build_scaffold(
            p.row.lower_sibling_counts,
            p.list_index,
            p.tree_index,
            swap,
            unit_width=unit_width,
            direction=direction,
        )
        content = RowContent(title=p.row.title, entry_id=p.row.entry_id)
        drop = drop_for(p) if drop_for is not None else None
        visuals.append(compose_row(scaffold, content, drop, {"entry_id": p.row.entry_id}))
    return visuals
