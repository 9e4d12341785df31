# ui/row.py – scaffold + content row painter

from __future__ import annotations

import wx

from treerow.ui.constants import OVER_BAD_COLOR, OVER_OK_COLOR, RowMetrics
from treerow.ui.geometry import content_span
from treerow.ui.scaffold_paint import ScaffoldPainter
from treerow.ui.theme import DEFAULT_THEME, ScaffoldTheme
from treerow.ui.types import RowVisual

# Drawing constants
SELECTION_PEN_WIDTH = 2
DROP_PEN_WIDTH = 2

__all__ = ["RowPainter"]

class RowPainter:
    """
    Draw a single composed row (scaffold lines + label) using wx.GraphicsContext.

    All geometry comes from the RowVisual; the painter only decides colours.
    """

    def __init__(self, view: wx.Window, metrics: RowMetrics, theme: ScaffoldTheme = DEFAULT_THEME) -> None:
        self.view = view
        self.m = metrics
        self.theme = theme
        self.scaffold_painter = ScaffoldPainter(theme)

    # ------------------------------------------------------------------ #

    def draw(
            self,
            gc: wx.GraphicsContext,
            rect: wx.Rect,
            visual: RowVisual,
            *,
            selected: bool = False,
    ) -> None:
        """
        Paint a row.  `rect` is in window coordinates.
        """
        if rect.width <= 0 or rect.height <= 0:
            return

        gc.PushState()
        gc.Clip(rect.x, rect.y, rect.width, rect.height)

        base_bg = self.view.GetBackgroundColour() or wx.SystemSettings.GetColour(
            wx.SYS_COLOUR_WINDOW
        )
        gc.SetBrush(wx.Brush(base_bg))
        gc.SetPen(wx.Pen(base_bg))
        gc.DrawRectangle(rect.x, rect.y, rect.width, rect.height)

        self.scaffold_painter.draw(gc, rect, visual.segments)

        left, width = content_span(visual.content_offset, visual.content_axis, rect.x, rect.width)
        content_rect = wx.Rect(int(left), rect.y, int(width), rect.height)
        self._draw_drop_feedback(gc, content_rect, visual)

        if selected:
            sel_color = wx.SystemSettings.GetColour(wx.SYS_COLOUR_HIGHLIGHT)
            gc.SetPen(wx.Pen(sel_color, SELECTION_PEN_WIDTH))
            gc.SetBrush(wx.Brush(wx.Colour(0, 0, 0, 0)))  # Transparent brush
            gc.DrawRectangle(content_rect.x, content_rect.y, content_rect.width, content_rect.height)

        self._draw_label(gc, content_rect, visual)

        gc.PopState()

    # ------------------------------------------------------------------ #

    def _draw_drop_feedback(self, gc: wx.GraphicsContext, rect: wx.Rect, visual: RowVisual):
        """Outline the row while something is dragged over it: green if droppable, red if not."""
        drag = getattr(visual.content, "drag", None)
        if drag is None or not drag.is_over:
            return

        colour = OVER_OK_COLOR if drag.can_drop else OVER_BAD_COLOR
        gc.SetPen(wx.Pen(wx.Colour(*colour), DROP_PEN_WIDTH))
        gc.SetBrush(wx.Brush(wx.Colour(0, 0, 0, 0)))
        gc.DrawRectangle(rect.x, rect.y, rect.width, rect.height)

    def _draw_label(self, gc: wx.GraphicsContext, rect: wx.Rect, visual: RowVisual):
        title = getattr(visual.content, "title", "")
        if not title:
            return

        gc.SetFont(self.view.GetFont(), wx.SystemSettings.GetColour(wx.SYS_COLOUR_WINDOWTEXT))
        tw, th = gc.GetTextExtent(title)
        y = rect.y + max(0, (rect.height - th) / 2)
        if visual.content_axis == "right":
            x = rect.x + rect.width - self.m.PADDING - tw
        else:
            x = rect.x + self.m.PADDING
        gc.DrawText(title, x, y)
