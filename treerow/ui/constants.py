'''
Copyright 2025 Aaron Vose (avose@aaronvose.net)
Licensed under the LGPL v2.1; see the file 'LICENSE' for details.
'''
from dataclasses import dataclass

# Shared UI constants
UNIT_W = 44
ROW_H = 32
PADDING = 6
LINE_W = 1
RAIL_W = 3
DEFAULT_BG_COLOR = (240, 240, 255)
LINE_COLOR = (0, 0, 0)
RAIL_COLOR = (54, 195, 240)
OVER_OK_COLOR = (20, 180, 20)
OVER_BAD_COLOR = (220, 20, 20)


@dataclass(frozen=True)
class RowMetrics:
    ROW_H: int = ROW_H
    PADDING: int = PADDING
