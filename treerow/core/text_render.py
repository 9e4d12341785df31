# core/text_render.py
'''
Copyright 2025 Aaron Vose (avose@aaronvose.net)
Licensed under the LGPL v2.1; see the file 'LICENSE' for details.
'''
from __future__ import annotations

from typing import Dict, Iterable, List, Tuple, Union

from treerow.core.scaffold import ConnectorKind, Direction, HighlightKind, Scaffold

__all__ = ["block_glyph", "render_scaffold_text", "render_lines"]

# Two characters per scaffold block, drawn for left-to-right rows.
LTR_GLYPHS: Dict[Union[ConnectorKind, HighlightKind], str] = {
    ConnectorKind.HALF_RIGHT_HALF_DOWN: "┌─",
    ConnectorKind.HALF_RIGHT_FULL_VERTICAL: "├─",
    ConnectorKind.FULL_VERTICAL: "│ ",
    ConnectorKind.HALF_RIGHT: "╶─",
    ConnectorKind.HALF_UP_HALF_RIGHT: "└─",
    ConnectorKind.NONE: "  ",
    HighlightKind.HIGHLIGHT_TOP_LEFT_CORNER: "┏━",
    HighlightKind.HIGHLIGHT_BOTTOM_LEFT_CORNER: "┗━",
    HighlightKind.HIGHLIGHT_VERTICAL: "┃ ",
}

_MIRROR = str.maketrans({
    "┌": "┐", "├": "┤", "╶": "╴", "└": "┘", "┏": "┓", "┗": "┛",
})

RTL_GLYPHS = {kind: glyph.translate(_MIRROR)[::-1] for kind, glyph in LTR_GLYPHS.items()}


def block_glyph(kind: Union[ConnectorKind, HighlightKind], direction: Direction = Direction.LTR) -> str:
    table = RTL_GLYPHS if direction is Direction.RTL else LTR_GLYPHS
    return table[kind]


def render_scaffold_text(scaffold: Scaffold) -> str:
    """
    Draw a scaffold as box-drawing text.

    The highlight rail replaces the connector at its level, the same way the
    absolutely positioned rail covers that block on screen. RTL output is the
    mirror image: blocks run right to left and corner glyphs flip.
    """
    direction = scaffold.direction
    blocks = [block_glyph(seg.kind, direction) for seg in scaffold.connectors]

    hl = scaffold.highlight
    if hl is not None:
        level = int(round(hl.offset / scaffold.unit_width))
        blocks[level] = block_glyph(hl.kind, direction)

    if direction is Direction.RTL:
        blocks.reverse()
    return "".join(blocks)


def render_lines(rows: Iterable[Tuple[Scaffold, str]]) -> List[str]:
    """Render (scaffold, label) pairs as text lines; RTL lines are right-aligned."""
    lines: List[str] = []
    rtl = False
    for scaffold, label in rows:
        prefix = render_scaffold_text(scaffold)
        if scaffold.direction is Direction.RTL:
            rtl = True
            lines.append(f"{label} {prefix}")
        else:
            lines.append(f"{prefix} {label}")

    if rtl and lines:
        width = max(len(line) for line in lines)
        lines = [line.rjust(width) for line in lines]
    return lines
