'''
Copyright 2025 Aaron Vose (avose@aaronvose.net)
Licensed under the LGPL v2.1; see the file 'LICENSE' for details.
'''
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Mapping, Tuple, Union

from treerow.core.scaffold import ConnectorKind, HighlightKind
from treerow.ui.constants import LINE_COLOR, LINE_W, RAIL_COLOR, RAIL_W

__all__ = ["LineStyle", "ScaffoldTheme", "DEFAULT_THEME"]

SegmentKind = Union[ConnectorKind, HighlightKind]
RGB = Tuple[int, int, int]


@dataclass(frozen=True)
class LineStyle:
    colour: RGB
    width: int = 1


def _default_styles() -> Dict[SegmentKind, LineStyle]:
    styles: Dict[SegmentKind, LineStyle] = {
        kind: LineStyle(LINE_COLOR, LINE_W) for kind in ConnectorKind
    }
    styles.update({kind: LineStyle(RAIL_COLOR, RAIL_W) for kind in HighlightKind})
    return styles


@dataclass(frozen=True)
class ScaffoldTheme:
    """
    Maps each segment kind to the stroke it is painted with.

    The scaffold core only names kinds; how they look is decided here.
    """
    styles: Mapping[SegmentKind, LineStyle] = field(default_factory=_default_styles)

    def style_for(self, kind: SegmentKind) -> LineStyle:
        try:
            return self.styles[kind]
        except KeyError:
            raise KeyError(f"Theme has no style for {kind!r}") from None

    def with_overrides(self, **by_name: LineStyle) -> "ScaffoldTheme":
        """Copy of this theme with styles replaced by kind name, e.g. ``FULL_VERTICAL=...``."""
        styles = dict(self.styles)
        for name, style in by_name.items():
            if name in ConnectorKind.__members__:
                styles[ConnectorKind[name]] = style
            elif name in HighlightKind.__members__:
                styles[HighlightKind[name]] = style
            else:
                raise KeyError(f"Unknown segment kind '{name}'")
        return ScaffoldTheme(styles=styles)


DEFAULT_THEME = ScaffoldTheme()
