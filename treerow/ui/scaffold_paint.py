'''
Copyright 2025 Aaron Vose (avose@aaronvose.net)
Licensed under the LGPL v2.1; see the file 'LICENSE' for details.
'''
from __future__ import annotations

from typing import Iterable

import wx

from treerow.core.scaffold import LineSegment
from treerow.ui.geometry import segment_lines
from treerow.ui.theme import DEFAULT_THEME, ScaffoldTheme

__all__ = ["ScaffoldPainter"]

class ScaffoldPainter:
    """Stroke scaffold segments into a row rectangle using wx.GraphicsContext."""

    def __init__(self, theme: ScaffoldTheme = DEFAULT_THEME) -> None:
        self.theme = theme

    def draw(self, gc: wx.GraphicsContext, rect: wx.Rect, segments: Iterable[LineSegment]) -> None:
        if rect.width <= 0 or rect.height <= 0:
            return

        for seg in segments:
            style = self.theme.style_for(seg.kind)
            lines = segment_lines(seg, rect.x, rect.y, rect.width, rect.height)
            if not lines:
                continue  # NONE blocks only take up space

            gc.SetPen(wx.Pen(wx.Colour(*style.colour), style.width))
            for x1, y1, x2, y2 in lines:
                gc.StrokeLine(x1, y1, x2, y2)
