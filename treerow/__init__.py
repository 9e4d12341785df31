'''
Copyright 2025 Aaron Vose (avose@aaronvose.net)
Licensed under the LGPL v2.1; see the file 'LICENSE' for details.
'''
from treerow.core.scaffold import (
    ConnectorKind,
    Direction,
    HighlightKind,
    LineSegment,
    Scaffold,
    SwapState,
    build_scaffold,
)

__version__ = "0.1.0"

__all__ = [
    "ConnectorKind",
    "Direction",
    "HighlightKind",
    "LineSegment",
    "Scaffold",
    "SwapState",
    "build_scaffold",
]
