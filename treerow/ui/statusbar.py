################################################################################################
'''
Copyright 2025 Aaron Vose (avose@aaronvose.net)
Licensed under the LGPL v2.1; see the file 'LICENSE' for details.

This file holds the code for the preview window's status bar.
'''
################################################################################################

import wx

from treerow.core.log import Log

################################################################################################
class StatusBar(wx.StatusBar):
    def __init__(self, parent):
        super(StatusBar, self).__init__(parent)
        self.Bind(wx.EVT_RIGHT_DOWN, self.OnRightDown)
        Log.add("Create StatusBar")
        return

    def OnRightDown(self, event):
        """Right-click menu with log options."""
        menu = wx.Menu()
        item_save = menu.Append(wx.ID_SAVE, "Save Log to File...")
        item_copy = menu.Append(wx.ID_COPY, "Copy Log to Clipboard")
        menu.AppendSeparator()
        item_clear = menu.Append(wx.ID_CLEAR, "Clear Log")

        self.Bind(wx.EVT_MENU, self.OnSaveLogToFile, item_save)
        self.Bind(wx.EVT_MENU, self.OnCopyLogToClipboard, item_copy)
        self.Bind(wx.EVT_MENU, self.OnClearLog, item_clear)

        self.PopupMenu(menu)
        menu.Destroy()

    def _log_text(self) -> str:
        return "\n".join(f"[{ts}] {text}" for ts, text in Log.get())

    def OnSaveLogToFile(self, event):
        with wx.FileDialog(
            self, "Save Log", wildcard="Log files (*.log)|*.log|All files (*.*)|*.*",
            style=wx.FD_SAVE | wx.FD_OVERWRITE_PROMPT,
        ) as dlg:
            if dlg.ShowModal() != wx.ID_OK:
                return
            path = dlg.GetPath()
        if Log.write_to_file(path):
            self.SetStatusText(f"Log saved to {path}")
        else:
            self.SetStatusText(f"Could not save log to {path}")

    def OnCopyLogToClipboard(self, event):
        if wx.TheClipboard.Open():
            wx.TheClipboard.SetData(wx.TextDataObject(self._log_text()))
            wx.TheClipboard.Close()
            self.SetStatusText(f"Copied {Log.count()} log entries")

    def OnClearLog(self, event):
        Log.clear()
        self.SetStatusText("Log cleared")

################################################################################################
