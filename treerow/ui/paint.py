'''
Copyright 2025 Aaron Vose (avose@aaronvose.net)
Licensed under the LGPL v2.1; see the file 'LICENSE' for details.
'''
from __future__ import annotations

import wx

from treerow.ui.constants import DEFAULT_BG_COLOR

def paint_background(view, gc: wx.GraphicsContext, client_h: int) -> None:
    """Fill the full client area with the background colour."""
    w = view.GetClientSize().width

    bg = view.GetBackgroundColour()
    if not bg.IsOk():
        bg = wx.Colour(*DEFAULT_BG_COLOR)

    gc.SetBrush(wx.Brush(bg))
    gc.SetPen(wx.Pen(bg))
    gc.DrawRectangle(0, 0, w, client_h)

def paint_rows(view, gc: wx.GraphicsContext, first_idx: int, y0: int, max_h: int) -> int:
    """
    Draw rows starting at first_idx, placing that row's top at window Y y0,
    and continue until we reach max_h. Returns the Y coordinate just past
    the last painted row.
    """
    visuals = view.visuals
    if first_idx < 0 or first_idx >= len(visuals):
        return max(0, y0)

    w = view.GetClientSize().width
    h = view.ROW_H
    selected = view.selection_index()
    y = y0
    i = first_idx

    while i < len(visuals) and y < max_h:
        rect = wx.Rect(0, y, w, h)
        view.row_painter.draw(gc, rect, visuals[i], selected=(i == selected))
        y += h
        i += 1

    return y
