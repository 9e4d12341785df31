"""
Tests for the row scaffold builder.

Tests cover:
- connector classification table (corner, last-in-row, pass-through, spacer)
- connector count and offsets
- highlight rail presence and kind
- direction handling
- rejection of malformed input
"""

import pytest

from treerow.core.log import Log
from treerow.core.scaffold import (
    ConnectorKind, Direction, HighlightKind, LinePrimitive, SwapState,
    build_scaffold, classify_connector, classify_highlight,
)

U = 10


def kinds(scaffold):
    return [seg.kind for seg in scaffold.connectors]


def offsets(scaffold):
    return [seg.offset for seg in scaffold.connectors]


class TestClassifyConnector:
    """Decision table for a single scaffold block."""

    @pytest.mark.parametrize("count, level, blocks, list_index, expected", [
        (2, 0, 3, 0, ConnectorKind.HALF_RIGHT_HALF_DOWN),
        (2, 2, 3, 0, ConnectorKind.HALF_RIGHT_HALF_DOWN),
        (1, 2, 3, 7, ConnectorKind.HALF_RIGHT_FULL_VERTICAL),
        (1, 0, 3, 7, ConnectorKind.FULL_VERTICAL),
        (0, 0, 3, 0, ConnectorKind.HALF_RIGHT),
        (0, 2, 3, 0, ConnectorKind.HALF_RIGHT),
        (0, 2, 3, 7, ConnectorKind.HALF_UP_HALF_RIGHT),
        (0, 1, 3, 7, ConnectorKind.NONE),
    ])
    def test_table(self, count, level, blocks, list_index, expected):
        assert classify_connector(count, level, blocks, list_index) is expected

    def test_corner_beats_last_in_row(self):
        """At list index 0 with one block both rules apply; the corner wins."""
        assert classify_connector(3, 0, 1, 0) is ConnectorKind.HALF_RIGHT_HALF_DOWN
        assert classify_connector(0, 0, 1, 0) is ConnectorKind.HALF_RIGHT

    def test_primitives(self):
        assert ConnectorKind.HALF_RIGHT_FULL_VERTICAL.primitives == {
            LinePrimitive.HALF_RIGHT, LinePrimitive.FULL_VERTICAL,
        }
        assert ConnectorKind.HALF_UP_HALF_RIGHT.primitives == {
            LinePrimitive.HALF_UP, LinePrimitive.HALF_RIGHT,
        }
        assert ConnectorKind.NONE.primitives == frozenset()


class TestConnectors:

    @pytest.mark.parametrize("flags", [[], [0], [3], [1, 0], [0, 0, 0, 0], [4, 1, 0, 2, 0]])
    @pytest.mark.parametrize("list_index", [0, 1, 9])
    def test_one_connector_per_level(self, flags, list_index):
        scaffold = build_scaffold(flags, list_index, list_index, unit_width=U)

        assert scaffold.block_count == len(flags)
        assert offsets(scaffold) == [i * U for i in range(len(flags))]
        assert all(seg.width == U and seg.width_units == 1 for seg in scaffold.connectors)
        assert all(not seg.absolute for seg in scaffold.connectors)
        assert scaffold.content_offset == len(flags) * U

    @pytest.mark.parametrize("flags", [[0], [5], [0, 2, 0], [3, 0, 1]])
    def test_first_row_starts_with_corner(self, flags):
        scaffold = build_scaffold(flags, 0, 0, unit_width=U)
        assert kinds(scaffold)[0] in (
            ConnectorKind.HALF_RIGHT, ConnectorKind.HALF_RIGHT_HALF_DOWN,
        )

    def test_first_row_with_siblings(self):
        scaffold = build_scaffold([2, 0], 0, 0, unit_width=U)
        assert kinds(scaffold) == [ConnectorKind.HALF_RIGHT_HALF_DOWN, ConnectorKind.HALF_RIGHT]
        assert offsets(scaffold) == [0, U]

    def test_last_only_child(self):
        scaffold = build_scaffold([0], 5, 5, unit_width=U)
        assert kinds(scaffold) == [ConnectorKind.HALF_UP_HALF_RIGHT]
        assert offsets(scaffold) == [0]
        assert scaffold.highlight is None

    def test_deep_row(self):
        scaffold = build_scaffold([1, 0, 2, 0], 4, 4, unit_width=U)
        assert kinds(scaffold) == [
            ConnectorKind.FULL_VERTICAL,
            ConnectorKind.NONE,
            ConnectorKind.FULL_VERTICAL,
            ConnectorKind.HALF_UP_HALF_RIGHT,
        ]

    def test_accepts_any_sequence(self):
        assert kinds(build_scaffold((1, 1), 2, 2, unit_width=U)) == kinds(
            build_scaffold([1, 1], 2, 2, unit_width=U)
        )


class TestHighlight:

    def test_no_swap_no_highlight(self):
        scaffold = build_scaffold([1, 1], 4, 3, unit_width=U)
        assert scaffold.highlight is None
        assert scaffold.segments == scaffold.connectors

    def test_undisplaced_row_gets_no_rail(self):
        swap = SwapState(from_index=2, depth=1, length=4)
        scaffold = build_scaffold([1, 1], 3, 3, swap, unit_width=U)
        assert scaffold.highlight is None

    def test_source_row_at_swap_start(self):
        scaffold = build_scaffold([1, 1], 4, 3, SwapState(3, 1, 2), unit_width=U)

        assert kinds(scaffold) == [
            ConnectorKind.FULL_VERTICAL, ConnectorKind.HALF_RIGHT_FULL_VERTICAL,
        ]
        hl = scaffold.highlight
        assert hl is not None
        # list index 4 is also the last row of the span, so the target corner wins
        assert hl.kind is HighlightKind.HIGHLIGHT_BOTTOM_LEFT_CORNER
        assert hl.offset == U
        assert hl.absolute
        assert scaffold.segments[-1] is hl
        assert len(scaffold.segments) == 3

    def test_top_corner(self):
        scaffold = build_scaffold([0, 1], 5, 4, SwapState(4, 0, 3), unit_width=U)
        assert scaffold.highlight.kind is HighlightKind.HIGHLIGHT_TOP_LEFT_CORNER
        assert scaffold.highlight.offset == 0

    def test_vertical_between_ends(self):
        scaffold = build_scaffold([0, 1, 1], 5, 6, SwapState(4, 2, 4), unit_width=U)
        assert scaffold.highlight.kind is HighlightKind.HIGHLIGHT_VERTICAL
        assert scaffold.highlight.offset == 2 * U

    @pytest.mark.parametrize("depth", [2, 5, -1])
    def test_depth_outside_scaffold(self, depth):
        scaffold = build_scaffold([1, 1], 4, 3, SwapState(3, depth, 2), unit_width=U)
        assert scaffold.highlight is None

    def test_classify_precedence(self):
        swap = SwapState(from_index=3, depth=0, length=1)
        # list index is the span end and tree index the span start
        assert classify_highlight(3, 3, swap) is HighlightKind.HIGHLIGHT_BOTTOM_LEFT_CORNER
        assert classify_highlight(2, 3, swap) is HighlightKind.HIGHLIGHT_TOP_LEFT_CORNER
        assert classify_highlight(2, 4, swap) is HighlightKind.HIGHLIGHT_VERTICAL

    def test_highlight_is_logged_when_verbose(self):
        Log.set_verbosity(2)
        build_scaffold([1, 1], 4, 3, SwapState(3, 1, 2), unit_width=U)
        assert any("highlight_bottom_left_corner" in text for _, text in Log.get())


class TestDirection:

    def test_rtl_flips_only_the_axis(self):
        swap = SwapState(3, 1, 3)
        ltr = build_scaffold([2, 1, 0], 4, 5, swap, unit_width=U)
        rtl = build_scaffold([2, 1, 0], 4, 5, swap, unit_width=U, direction=Direction.RTL)

        assert kinds(ltr) == kinds(rtl)
        assert offsets(ltr) == offsets(rtl)
        assert ltr.highlight.kind is rtl.highlight.kind
        assert ltr.highlight.offset == rtl.highlight.offset
        assert {seg.axis for seg in ltr.segments} == {"left"}
        assert {seg.axis for seg in rtl.segments} == {"right"}

    @pytest.mark.parametrize("value, expected", [
        ("ltr", Direction.LTR), ("RTL", Direction.RTL), (Direction.RTL, Direction.RTL),
    ])
    def test_coerce(self, value, expected):
        assert Direction.coerce(value) is expected
        assert build_scaffold([0], 1, 1, unit_width=U, direction=value).direction is expected

    def test_unknown_direction(self):
        with pytest.raises(ValueError):
            build_scaffold([0], 1, 1, unit_width=U, direction="up")


class TestInvalidInput:

    def test_negative_sibling_count(self):
        with pytest.raises(ValueError, match="negative"):
            build_scaffold([1, -1], 1, 1, unit_width=U)

    @pytest.mark.parametrize("width", [0, -4, 0.0, float("nan"), float("inf")])
    def test_non_positive_unit(self, width):
        with pytest.raises(ValueError):
            build_scaffold([0], 1, 1, unit_width=width)

    def test_bool_unit(self):
        with pytest.raises(TypeError):
            build_scaffold([0], 1, 1, unit_width=True)

    def test_negative_list_index(self):
        with pytest.raises(ValueError):
            build_scaffold([0], -1, 0, unit_width=U)

    def test_negative_tree_index(self):
        with pytest.raises(ValueError):
            build_scaffold([0], 0, -2, unit_width=U)

    def test_non_integer_index(self):
        with pytest.raises(TypeError):
            build_scaffold([0], 1.5, 1, unit_width=U)

    def test_non_integer_count(self):
        with pytest.raises(TypeError):
            build_scaffold([1.0], 1, 1, unit_width=U)

    def test_swap_length_must_be_positive(self):
        with pytest.raises(ValueError):
            SwapState(from_index=1, depth=0, length=0)

    def test_float_unit_allowed(self):
        scaffold = build_scaffold([1, 0], 3, 3, unit_width=12.5)
        assert offsets(scaffold) == [0, 12.5]
