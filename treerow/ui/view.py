# ui/view.py

from __future__ import annotations

import wx
from typing import Any, Dict, List, Optional, Sequence, Tuple

from treerow.core.log import Log
from treerow.core.scaffold import Direction
from treerow.ui.compositor import compose_rows
from treerow.ui.constants import DEFAULT_BG_COLOR, PADDING, ROW_H, UNIT_W, RowMetrics
from treerow.ui.model import flatten_tree, preview_move, swap_span
from treerow.ui.paint import paint_background, paint_rows
from treerow.ui.row import RowPainter
from treerow.ui.theme import DEFAULT_THEME, ScaffoldTheme
from treerow.ui.types import DropContext, PlacedRow, Row, RowVisual

# =============================================================================
class ScaffoldView(wx.ScrolledWindow):
    """
    Fixed-row-height view of a flattened tree with a live drag preview.

    Keys: Up/Down select, Space picks the selected row up, Up/Down then move
    the hover target, Escape or Enter put it back.
    """

    def __init__(
            self,
            parent: wx.Window,
            tree: Sequence[Dict[str, Any]],
            *,
            unit_width: int = UNIT_W,
            direction: Direction = Direction.LTR,
            theme: ScaffoldTheme = DEFAULT_THEME,
    ):
        super().__init__(parent, style=wx.BORDER_SIMPLE | wx.WANTS_CHARS)

        self.UNIT_W = unit_width
        self.ROW_H = ROW_H
        self.direction = direction
        self.row_painter = RowPainter(self, RowMetrics(ROW_H, PADDING), theme)

        self._rows: List[Row] = flatten_tree(tree)
        self.visuals: List[RowVisual] = []
        self.selected: int = 0 if self._rows else -1
        self._drag: Optional[Tuple[int, int]] = None  # (source, hover target)

        self.SetBackgroundStyle(wx.BG_STYLE_PAINT)
        self.SetBackgroundColour(wx.Colour(*DEFAULT_BG_COLOR))
        self.SetScrollRate(0, self.ROW_H)

        self.Bind(wx.EVT_PAINT, self._on_paint)
        self.Bind(wx.EVT_LEFT_DOWN, self._on_left_down)
        self.Bind(wx.EVT_CHAR_HOOK, self._on_key)

        self.rebuild()

    # ------------------------------------------------------------------ #
    # model
    # ------------------------------------------------------------------ #

    def rebuild(self) -> None:
        """Recompute every row's scaffold from the current drag preview."""
        swap = None
        if self._drag is None:
            placed = [PlacedRow(row=r, list_index=r.tree_index) for r in self._rows]
        else:
            src, dst = self._drag
            placed = preview_move(self._rows, src, dst)
            swap = swap_span(src, dst, self._rows[src].level)

        self.visuals = compose_rows(
            placed,
            unit_width=self.UNIT_W,
            direction=self.direction,
            swap=swap,
            drop_for=self._drop_context,
        )
        self.SetVirtualSize((-1, len(self.visuals) * self.ROW_H))
        self.Refresh()

    def _drop_context(self, placed: PlacedRow) -> DropContext:
        if self._drag is None:
            return DropContext()
        src, dst = self._drag
        dragged = self._rows[src]
        return DropContext(
            is_over=(placed.list_index == dst),
            can_drop=True,
            dragged_node=dragged.entry_id,
        )

    def set_direction(self, direction: Direction) -> None:
        self.direction = direction
        Log.debug(f"Row direction set to {direction.value}", 1)
        self.rebuild()

    def pick_up(self) -> None:
        if self.selected < 0:
            return
        self._drag = (self.selected, self.selected)
        Log.debug(f"Picked up row {self.selected}", 1)
        self.rebuild()

    def move_hover(self, delta: int) -> None:
        if self._drag is None:
            self.selected = max(0, min(len(self._rows) - 1, self.selected + delta))
            self.Refresh()
            return
        src, dst = self._drag
        dst = max(0, min(len(self._rows) - 1, dst + delta))
        self._drag = (src, dst)
        self.rebuild()

    def selection_index(self) -> int:
        """List index the selection outline belongs to; follows the dragged row while it moves."""
        if self._drag is not None:
            return self._drag[1]
        return self.selected

    def put_back(self) -> None:
        if self._drag is not None:
            Log.debug(f"Released row {self._drag[0]} over {self._drag[1]}", 1)
        self._drag = None
        self.rebuild()

    # ------------------------------------------------------------------ #
    # painting
    # ------------------------------------------------------------------ #

    def _on_paint(self, _evt: wx.PaintEvent):
        dc = wx.AutoBufferedPaintDC(self)
        gc = wx.GraphicsContext.Create(dc)
        ch = self.GetClientSize().height

        paint_background(self, gc, ch)

        _sx, sy = self.GetViewStart()
        sy_px = sy * self.GetScrollPixelsPerUnit()[1]
        paint_rows(self, gc, sy_px // self.ROW_H, -(sy_px % self.ROW_H), ch)

    # ------------------------------------------------------------------ #
    # event dispatch
    # ------------------------------------------------------------------ #

    def _on_left_down(self, evt: wx.MouseEvent):
        _, y = self.CalcUnscrolledPosition(evt.GetPosition())
        idx = y // self.ROW_H
        if 0 <= idx < len(self._rows) and self._drag is None:
            self.selected = idx
            self.Refresh()
        self.SetFocus()

    def _on_key(self, evt: wx.KeyEvent):
        key = evt.GetKeyCode()
        if key == wx.WXK_UP:
            self.move_hover(-1)
        elif key == wx.WXK_DOWN:
            self.move_hover(1)
        elif key == wx.WXK_SPACE:
            self.pick_up()
        elif key in (wx.WXK_ESCAPE, wx.WXK_RETURN):
            self.put_back()
        else:
            evt.Skip()
