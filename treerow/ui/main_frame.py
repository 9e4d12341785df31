'''
Copyright 2025 Aaron Vose (avose@aaronvose.net)
Licensed under the LGPL v2.1; see the file 'LICENSE' for details.
'''
from typing import Any, Dict, Sequence

import wx

from treerow.core.log import Log
from treerow.core.scaffold import Direction
from treerow.ui.constants import UNIT_W
from treerow.ui.statusbar import StatusBar
from treerow.ui.view import ScaffoldView


class MainFrame(wx.Frame):
    """Preview window: one ScaffoldView plus a menu and status bar."""
    def __init__(
            self,
            tree: Sequence[Dict[str, Any]],
            verbosity: int = 0,
            unit_width: int = UNIT_W,
            direction: Direction = Direction.LTR,
    ):
        super().__init__(None, title="TreeRow", size=(640, 560))
        self.SetMinSize((320, 240))

        Log.set_verbosity(verbosity)
        self.SetStatusBar(StatusBar(self))
        self.SetStatusText("Space: pick up row, Up/Down: move, Esc: put back, Ctrl+R: flip direction")

        self.view = ScaffoldView(self, tree, unit_width=unit_width, direction=direction)
        self._build_menu()

        sizer = wx.BoxSizer(wx.VERTICAL)
        sizer.Add(self.view, 1, wx.EXPAND)
        self.SetSizer(sizer)
        self.view.SetFocus()

    def _build_menu(self):
        menubar = wx.MenuBar()

        m_file = wx.Menu()
        m_file.Append(wx.ID_EXIT, "&Quit\tCtrl+Q")
        menubar.Append(m_file, "&File")

        m_view = wx.Menu()
        self._rtl_item = m_view.AppendCheckItem(wx.ID_ANY, "&Right to Left\tCtrl+R")
        self._rtl_item.Check(self.view.direction is Direction.RTL)
        menubar.Append(m_view, "&View")

        self.SetMenuBar(menubar)
        self.Bind(wx.EVT_MENU, lambda evt: self.Close(), id=wx.ID_EXIT)
        self.Bind(wx.EVT_MENU, self.on_action_toggle_rtl, self._rtl_item)

    def on_action_toggle_rtl(self, evt=None):
        direction = Direction.RTL if self._rtl_item.IsChecked() else Direction.LTR
        self.view.set_direction(direction)
        self.SetStatusText(f"Direction: {direction.value}")
        self.view.SetFocus()
