"""Tests for node geometry."""
import math

from tick_sweep import SweepConfig
from tick_sweep.shapes import arc_points, block_rect, layout, line_segment

W, H = 600.0, 400.0


def test_layout_spaces_nodes_evenly():
    config = SweepConfig(node_count=5)
    xs = [layout(W, H, i, config).cx for i in range(5)]
    assert xs == [100.0, 200.0, 300.0, 400.0, 500.0]


def test_layout_size_and_stroke():
    config = SweepConfig(node_count=5, size_factor=2.0, stroke_factor=100.0)
    node = layout(W, H, 0, config)
    assert node.cy == 200.0
    assert node.size == 50.0
    assert node.stroke == 4.0


def test_block_rests_on_midline():
    node = layout(W, H, 0, SweepConfig(size_factor=2.0))
    rect = block_rect(node, H, 0.0)
    assert rect.x == 50.0
    assert rect.y == 150.0
    assert rect.w == rect.h == 100.0


def test_block_reaches_top_at_half_scale():
    node = layout(W, H, 0, SweepConfig(size_factor=2.0))
    rect = block_rect(node, H, 0.5)
    assert math.isclose(rect.y, 0.0, abs_tol=1e-9)


def test_block_returns_at_full_scale():
    node = layout(W, H, 2, SweepConfig())
    assert math.isclose(block_rect(node, H, 1.0).y, block_rect(node, H, 0.0).y)


def test_line_spans_node_width():
    node = layout(W, H, 1, SweepConfig(size_factor=2.0))
    start, end = line_segment(node)
    assert start == (150.0, 200.0)
    assert end == (250.0, 200.0)


def test_arc_at_rest_is_degenerate():
    node = layout(W, H, 0, SweepConfig())
    points = arc_points(node, 0.0)
    assert points[0] == (node.cx, node.cy)
    assert len(points) == 2


def test_arc_sweeps_half_circle_at_peak():
    node = layout(W, H, 0, SweepConfig())
    points = arc_points(node, 0.5, max_deg=180)
    # center plus one rim point per degree 0..180
    assert len(points) == 182
    last_x, last_y = points[-1]
    assert math.isclose(last_x, node.cx - node.size)
    assert math.isclose(last_y, node.cy, abs_tol=1e-9)


def test_arc_rim_points_on_radius():
    node = layout(W, H, 3, SweepConfig())
    for x, y in arc_points(node, 0.3)[1:]:
        assert math.isclose(math.hypot(x - node.cx, y - node.cy), node.size)
