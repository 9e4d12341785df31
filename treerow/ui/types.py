# ui/types.py
'''
Copyright 2025 Aaron Vose (avose@aaronvose.net)
Licensed under the LGPL v2.1; see the file 'LICENSE' for details.
'''
from __future__ import annotations

from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import Any, Mapping, Optional, Tuple

from treerow.core.scaffold import Direction, LineSegment, Scaffold


@dataclass(slots=True, frozen=True)
class Row:
    """
    A single flattened row of the tree.

    • entry_id             – id of the node this row represents
    • title                – label drawn as row content
    • level                – tree-indent level (root = 0)
    • tree_index           – position in the flattened (undragged) list
    • lower_sibling_counts – siblings still below, one per level 0..level
    """
    entry_id: str
    title: str
    level: int
    tree_index: int
    lower_sibling_counts: Tuple[int, ...]


@dataclass(slots=True, frozen=True)
class PlacedRow:
    """A row as currently displayed; list_index differs from tree_index while it is displaced."""
    row: Row
    list_index: int

    @property
    def tree_index(self) -> int:
        return self.row.tree_index

    @property
    def displaced(self) -> bool:
        return self.row.tree_index != self.list_index


@dataclass(slots=True, frozen=True)
class DropContext:
    """Drag-over state handed down by the drop-target provider, never interpreted here."""
    is_over: bool = False
    can_drop: bool = False
    dragged_node: Optional[Any] = None


@dataclass(frozen=True)
class RowContent:
    """Label/controls of a row; `drag` is the injection point for DropContext."""
    title: str
    entry_id: Optional[str] = None
    drag: DropContext = field(default_factory=DropContext)

    def with_drag_context(self, drag: DropContext) -> "RowContent":
        return replace(self, drag=drag)


@dataclass(frozen=True)
class RowVisual:
    """One composed row: scaffold segments, then content shifted past them."""
    scaffold: Scaffold
    content: Any
    attrs: Mapping[str, Any] = field(default_factory=lambda: MappingProxyType({}))

    @property
    def connectors(self) -> Tuple[LineSegment, ...]:
        return self.scaffold.connectors

    @property
    def highlight(self) -> Optional[LineSegment]:
        return self.scaffold.highlight

    @property
    def segments(self) -> Tuple[LineSegment, ...]:
        return self.scaffold.segments

    @property
    def direction(self) -> Direction:
        return self.scaffold.direction

    @property
    def content_offset(self) -> float:
        return self.scaffold.content_offset

    @property
    def content_axis(self) -> str:
        return self.scaffold.direction.axis
