# ui/geometry.py
'''
Copyright 2025 Aaron Vose (avose@aaronvose.net)
Licensed under the LGPL v2.1; see the file 'LICENSE' for details.
'''
from __future__ import annotations

from typing import List, Tuple

from treerow.core.scaffold import LinePrimitive, LineSegment

__all__ = ["block_x", "segment_lines", "content_span"]

Line = Tuple[float, float, float, float]


def block_x(seg: LineSegment, x: float, width: float) -> float:
    """Left edge of *seg*'s block inside a row spanning [x, x + width)."""
    if seg.axis == "right":
        return x + width - seg.offset - seg.width
    return x + seg.offset


def content_span(content_offset: float, axis: str, x: float, width: float) -> Tuple[float, float]:
    """(left, width) of the content area once the scaffold blocks are taken out."""
    remaining = max(0.0, width - content_offset)
    if axis == "right":
        return x, remaining
    return x + content_offset, remaining


def segment_lines(seg: LineSegment, x: float, y: float, width: float, height: float) -> List[Line]:
    """
    Pixel strokes for one scaffold segment in a row rectangle.

    HALF_RIGHT always points at the row content, which means leftwards for
    right-to-left rows.
    """
    bx = block_x(seg, x, width)
    cx = bx + seg.width / 2.0
    cy = y + height / 2.0
    bottom = y + height
    toward_content = bx if seg.axis == "right" else bx + seg.width

    lines: List[Line] = []
    prims = seg.kind.primitives
    if LinePrimitive.FULL_VERTICAL in prims:
        lines.append((cx, y, cx, bottom))
    if LinePrimitive.HALF_UP in prims:
        lines.append((cx, y, cx, cy))
    if LinePrimitive.HALF_DOWN in prims:
        lines.append((cx, cy, cx, bottom))
    if LinePrimitive.HALF_RIGHT in prims:
        lines.append((cx, cy, toward_content, cy))
    return lines
