"""Tests for composing scaffolds with row content."""

import pytest

from treerow.core.scaffold import Direction, HighlightKind, SwapState, build_scaffold
from treerow.ui.compositor import compose_row, compose_rows
from treerow.ui.model import preview_move, swap_span
from treerow.ui.types import DropContext, PlacedRow, RowContent


U = 10


class TestComposeRow:

    def test_drag_context_is_injected(self):
        scaffold = build_scaffold([1, 0], 3, 3, unit_width=U)
        content = RowContent(title="Egg")
        drop = DropContext(is_over=True, can_drop=False, dragged_node={"id": "x"})

        visual = compose_row(scaffold, content, drop)

        assert visual.content.title == "Egg"
        assert visual.content.drag is drop
        # original content untouched
        assert content.drag == DropContext()

    def test_defaults_when_no_drop_target(self):
        visual = compose_row(build_scaffold([0], 1, 1, unit_width=U), RowContent("x"))
        assert visual.content.drag == DropContext(is_over=False, can_drop=False, dragged_node=None)

    def test_content_offset_follows_block_count(self):
        visual = compose_row(build_scaffold([1, 1, 0], 2, 2, unit_width=U), RowContent("x"))
        assert visual.content_offset == 3 * U
        assert visual.content_axis == "left"

    def test_rtl_offset_axis(self):
        scaffold = build_scaffold([1, 1, 0], 2, 2, unit_width=U, direction=Direction.RTL)
        visual = compose_row(scaffold, RowContent("x"))
        assert visual.content_offset == 3 * U
        assert visual.content_axis == "right"

    def test_attrs_forwarded_verbatim(self):
        attrs = {"style": {"height": 62}, "data-row": 7}
        visual = compose_row(build_scaffold([0], 1, 1, unit_width=U), RowContent("x"), attrs=attrs)
        assert dict(visual.attrs) == attrs
        with pytest.raises(TypeError):
            visual.attrs["new"] = 1

    def test_segments_keep_rail_last(self):
        scaffold = build_scaffold([1, 1], 4, 3, SwapState(3, 0, 5), unit_width=U)
        visual = compose_row(scaffold, RowContent("x"))
        assert visual.connectors == scaffold.connectors
        assert visual.highlight.kind is HighlightKind.HIGHLIGHT_TOP_LEFT_CORNER
        assert visual.segments[-1] is visual.highlight

    def test_content_needs_injection_point(self):
        with pytest.raises(TypeError, match="with_drag_context"):
            compose_row(build_scaffold([0], 1, 1, unit_width=U), "plain string")

    def test_custom_content_type(self):
        class Widget:
            def __init__(self, drag=None):
                self.drag = drag

            def with_drag_context(self, drag):
                return Widget(drag)

        visual = compose_row(
            build_scaffold([0], 1, 1, unit_width=U), Widget(), DropContext(is_over=True),
        )
        assert isinstance(visual.content, Widget)
        assert visual.content.drag.is_over


class TestComposeRows:

    def test_whole_list(self, small_rows):
        placed = [PlacedRow(row=r, list_index=r.tree_index) for r in small_rows]
        visuals = compose_rows(placed, unit_width=U)

        assert len(visuals) == len(small_rows)
        assert [v.content.title for v in visuals] == ["A", "B", "C", "D", "E", "F"]
        assert [v.attrs["entry_id"] for v in visuals] == ["a", "b", "c", "d", "e", "f"]
        assert all(v.highlight is None for v in visuals)

    def test_drop_provider_is_consulted_per_row(self, small_rows):
        placed = preview_move(small_rows, 1, 3)
        visuals = compose_rows(
            placed,
            unit_width=U,
            swap=swap_span(1, 3, 1),
            drop_for=lambda p: DropContext(is_over=(p.list_index == 3), can_drop=True),
        )
        over = [v.content.title for v in visuals if v.content.drag.is_over]
        assert over == ["B"]
        assert sum(v.highlight is not None for v in visuals) == 3
