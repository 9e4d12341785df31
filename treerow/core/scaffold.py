# core/scaffold.py
'''
Copyright 2025 Aaron Vose (avose@aaronvose.net)
Licensed under the LGPL v2.1; see the file 'LICENSE' for details.
'''
from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import FrozenSet, Optional, Sequence, Tuple, Union

from treerow.core.log import Log

__all__ = [
    "Direction",
    "LinePrimitive",
    "ConnectorKind",
    "HighlightKind",
    "SwapState",
    "LineSegment",
    "Scaffold",
    "classify_connector",
    "classify_highlight",
    "build_scaffold",
]


class Direction(Enum):
    LTR = "ltr"
    RTL = "rtl"

    @property
    def axis(self) -> str:
        """Side of the row that offsets are measured from."""
        return "right" if self is Direction.RTL else "left"

    @classmethod
    def coerce(cls, value: Union["Direction", str]) -> "Direction":
        if isinstance(value, Direction):
            return value
        if isinstance(value, str):
            try:
                return cls(value.lower())
            except ValueError:
                pass
        raise ValueError(f"Unknown row direction {value!r}; expected 'ltr' or 'rtl'")


class LinePrimitive(Enum):
    """The four strokes every connector block is built from."""
    HALF_RIGHT = "half_right"        # centre → content side
    HALF_DOWN = "half_down"          # centre → bottom edge
    HALF_UP = "half_up"              # top edge → centre
    FULL_VERTICAL = "full_vertical"  # top edge → bottom edge


class ConnectorKind(Enum):
    HALF_RIGHT_HALF_DOWN = "half_right_half_down"
    HALF_RIGHT_FULL_VERTICAL = "half_right_full_vertical"
    FULL_VERTICAL = "full_vertical"
    HALF_RIGHT = "half_right"
    HALF_UP_HALF_RIGHT = "half_up_half_right"
    NONE = "none"

    @property
    def primitives(self) -> FrozenSet[LinePrimitive]:
        return _CONNECTOR_PRIMITIVES[self]


_CONNECTOR_PRIMITIVES = {
    ConnectorKind.HALF_RIGHT_HALF_DOWN: frozenset(
        {LinePrimitive.HALF_RIGHT, LinePrimitive.HALF_DOWN}),
    ConnectorKind.HALF_RIGHT_FULL_VERTICAL: frozenset(
        {LinePrimitive.HALF_RIGHT, LinePrimitive.FULL_VERTICAL}),
    ConnectorKind.FULL_VERTICAL: frozenset({LinePrimitive.FULL_VERTICAL}),
    ConnectorKind.HALF_RIGHT: frozenset({LinePrimitive.HALF_RIGHT}),
    ConnectorKind.HALF_UP_HALF_RIGHT: frozenset(
        {LinePrimitive.HALF_UP, LinePrimitive.HALF_RIGHT}),
    ConnectorKind.NONE: frozenset(),
}


class HighlightKind(Enum):
    HIGHLIGHT_TOP_LEFT_CORNER = "highlight_top_left_corner"
    HIGHLIGHT_BOTTOM_LEFT_CORNER = "highlight_bottom_left_corner"
    HIGHLIGHT_VERTICAL = "highlight_vertical"

    @property
    def primitives(self) -> FrozenSet[LinePrimitive]:
        return _HIGHLIGHT_PRIMITIVES[self]


_HIGHLIGHT_PRIMITIVES = {
    # Rail leaves the source row at its centre and runs down
    HighlightKind.HIGHLIGHT_TOP_LEFT_CORNER: frozenset(
        {LinePrimitive.HALF_RIGHT, LinePrimitive.HALF_DOWN}),
    # and comes back out pointing at the target row.
    HighlightKind.HIGHLIGHT_BOTTOM_LEFT_CORNER: frozenset(
        {LinePrimitive.HALF_UP, LinePrimitive.HALF_RIGHT}),
    HighlightKind.HIGHLIGHT_VERTICAL: frozenset({LinePrimitive.FULL_VERTICAL}),
}


@dataclass(frozen=True)
class SwapState:
    """
    Live drag-reorder span.

    • from_index – first list index of the displaced span
    • depth      – scaffold level the rail is drawn at
    • length     – number of rows in the span (source and target included)
    """
    from_index: int
    depth: int
    length: int

    def __post_init__(self) -> None:
        for name in ("from_index", "depth", "length"):
            _require_int(name, getattr(self, name))
        if self.length < 1:
            raise ValueError(f"swap length must be >= 1, got {self.length}")

    @property
    def target_index(self) -> int:
        """List index of the last row in the span (the drop target)."""
        return self.from_index + self.length - 1


@dataclass(frozen=True)
class LineSegment:
    kind: Union[ConnectorKind, HighlightKind]
    offset: float
    width: float
    axis: str = "left"
    absolute: bool = False
    width_units: int = 1


@dataclass(frozen=True)
class Scaffold:
    """Everything a painter needs to draw one row's scaffold."""
    connectors: Tuple[LineSegment, ...]
    highlight: Optional[LineSegment]
    direction: Direction
    unit_width: float

    @property
    def block_count(self) -> int:
        return len(self.connectors)

    @property
    def content_offset(self) -> float:
        """Where row content starts, measured along the direction's axis."""
        return self.block_count * self.unit_width

    @property
    def segments(self) -> Tuple[LineSegment, ...]:
        if self.highlight is None:
            return self.connectors
        return self.connectors + (self.highlight,)

# ---------------------------------------------------------------------------

def _require_int(name: str, value) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")


def classify_connector(sibling_count: int, level: int, block_count: int, list_index: int) -> ConnectorKind:
    """
    Pick the connector drawn at scaffold *level* of a row.

    +-----+   +--+--+   +--+--+   +-----+   +--+--+
    |     |   |  |  |   |  |  |   |     |   |  |  |
    |  +--+   |  +--+   |  |  |   |  +--+   |  +--+
    |  |  |   |  |  |   |  |  |   |     |   |     |
    +--+--+   +--+--+   +--+--+   +-----+   +-----+
     corner   last+sib   pass     corner    last
    """
    if sibling_count > 0:
        if list_index == 0:
            return ConnectorKind.HALF_RIGHT_HALF_DOWN
        if level == block_count - 1:
            return ConnectorKind.HALF_RIGHT_FULL_VERTICAL
        return ConnectorKind.FULL_VERTICAL

    if list_index == 0:
        return ConnectorKind.HALF_RIGHT
    if level == block_count - 1:
        return ConnectorKind.HALF_UP_HALF_RIGHT
    return ConnectorKind.NONE


def classify_highlight(list_index: int, tree_index: int, swap: SwapState) -> HighlightKind:
    """Pick the rail piece for a displaced row; the target corner wins over the source corner."""
    if list_index == swap.target_index:
        return HighlightKind.HIGHLIGHT_BOTTOM_LEFT_CORNER
    if tree_index == swap.from_index:
        return HighlightKind.HIGHLIGHT_TOP_LEFT_CORNER
    return HighlightKind.HIGHLIGHT_VERTICAL


def build_scaffold(
        lower_sibling_counts: Sequence[int],
        list_index: int,
        tree_index: int,
        swap: Optional[SwapState] = None,
        *,
        unit_width: float,
        direction: Union[Direction, str] = Direction.LTR,
) -> Scaffold:
    """
    Compute the connector blocks and optional highlight rail for one row.

    Pure function of its arguments. Invalid input raises ValueError/TypeError
    instead of producing a wrong offset.
    """
    direction = Direction.coerce(direction)

    if isinstance(unit_width, bool) or not isinstance(unit_width, (int, float)):
        raise TypeError(f"unit_width must be a number, got {type(unit_width).__name__}")
    if not unit_width > 0 or not math.isfinite(unit_width):
        raise ValueError(f"unit_width must be a finite number > 0, got {unit_width}")

    _require_int("list_index", list_index)
    _require_int("tree_index", tree_index)
    if list_index < 0:
        raise ValueError(f"list_index must be >= 0, got {list_index}")
    if tree_index < 0:
        raise ValueError(f"tree_index must be >= 0, got {tree_index}")

    counts = tuple(lower_sibling_counts)
    for level, count in enumerate(counts):
        _require_int(f"lower_sibling_counts[{level}]", count)
        if count < 0:
            raise ValueError(f"lower_sibling_counts[{level}] is negative ({count})")

    axis = direction.axis
    block_count = len(counts)
    connectors = tuple(
        LineSegment(
            kind=classify_connector(count, level, block_count, list_index),
            offset=level * unit_width,
            width=unit_width,
            axis=axis,
        )
        for level, count in enumerate(counts)
    )

    highlight = None
    # Only rows shifted by the live reorder get a rail.
    if swap is not None and tree_index != list_index and 0 <= swap.depth < block_count:
        highlight = LineSegment(
            kind=classify_highlight(list_index, tree_index, swap),
            offset=swap.depth * unit_width,
            width=unit_width,
            axis=axis,
            absolute=True,
        )
        Log.debug(f"row {list_index}: {highlight.kind.value} at depth {swap.depth}", 2)

    Log.debug(f"scaffold row={list_index} tree={tree_index} blocks={block_count}", 3)

    return Scaffold(
        connectors=connectors,
        highlight=highlight,
        direction=direction,
        unit_width=unit_width,
    )
