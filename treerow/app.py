# app.py
'''
Copyright 2025 Aaron Vose (avose@aaronvose.net)
Licensed under the LGPL v2.1; see the file 'LICENSE' for details.
'''
import sys
import traceback
from typing import Any, Dict, Sequence

import wx

from treerow.core.log import Log
from treerow.core.scaffold import Direction
from treerow.ui.constants import UNIT_W

def on_exception(exc_type, exc_value, exc_traceback):
    """Show unhandled exceptions in the status bar and log instead of silent failure."""
    if issubclass(exc_type, KeyboardInterrupt):
        # Allow Ctrl+C to work normally
        sys.__excepthook__(exc_type, exc_value, exc_traceback)
        return

    tb_text = ''.join(traceback.format_exception(exc_type, exc_value, exc_traceback))
    error_message = f"!ERROR! Unhandled Exception:\n{tb_text}"
    Log.debug(error_message, 0)

    app = wx.GetApp()
    main_frame = app.GetTopWindow() if app else None
    if main_frame is not None and hasattr(main_frame, 'SetStatusText'):
        main_frame.SetStatusText(error_message.splitlines()[-1])
    else:
        print(error_message, file=sys.stderr)

if tuple(getattr(wx, 'VERSION', (0,0,0))[:3]) < (4, 2, 0):
    raise RuntimeError(f"TreeRow preview requires wxPython ≥ 4.2.0; found {wx.__version__}")

from treerow.ui.main_frame import MainFrame

def main(
        tree: Sequence[Dict[str, Any]],
        verbosity: int = 0,
        stdexp: bool = False,
        unit_width: int = UNIT_W,
        direction: Direction = Direction.LTR,
):
    # Install the exception handler
    if not stdexp:
        sys.excepthook = on_exception

    app = wx.App(False)

    frame = MainFrame(tree, verbosity=verbosity, unit_width=unit_width, direction=direction)
    frame.Show()

    app.MainLoop()
    return 0
