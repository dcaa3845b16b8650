from __future__ import annotations

from tileassist.tiling.free_space import free_screen_rects, screen_rects
from tileassist.tiling.rect import Rect, overlap

WORK_AREA = Rect(0, 0, 1000, 800)


def test_empty_group_leaves_whole_work_area():
    assert free_screen_rects([], 10, WORK_AREA) == [WORK_AREA]


def test_exact_partition_leaves_nothing():
    halves = [Rect(0, 0, 500, 800), Rect(500, 0, 500, 800)]
    assert free_screen_rects(halves, 0, WORK_AREA) == []


def test_exact_quarters_leave_nothing():
    quarters = [
        Rect(0, 0, 500, 400),
        Rect(500, 0, 500, 400),
        Rect(0, 400, 500, 400),
        Rect(500, 400, 500, 400),
    ]
    assert free_screen_rects(quarters, 0, WORK_AREA) == []


def test_single_left_half_frees_right_half():
    assert free_screen_rects([Rect(0, 0, 500, 800)], 0, WORK_AREA) == [Rect(500, 0, 500, 800)]


def test_left_half_and_top_right_quarter_free_bottom_right():
    group = [Rect(0, 0, 500, 800), Rect(500, 0, 500, 400)]
    assert free_screen_rects(group, 0, WORK_AREA) == [Rect(500, 400, 500, 400)]


def test_free_rects_never_touch_tiled_rects():
    group = [Rect(0, 0, 300, 800), Rect(300, 0, 400, 300)]
    free = free_screen_rects(group, 0, WORK_AREA)
    assert free
    for rect in free:
        assert all(not overlap(rect, tiled) for tiled in group)
        assert rect.intersect(WORK_AREA) == rect


def test_slivers_thinner_than_gap_are_dropped():
    # Leaves a 40px wide column on the right
    group = [Rect(0, 0, 960, 800)]
    assert free_screen_rects(group, 0, WORK_AREA, ignore_margin=0) == [Rect(960, 0, 40, 800)]
    assert free_screen_rects(group, 50, WORK_AREA, ignore_margin=0) == []


def test_screen_rects_is_group_plus_free_space():
    left = Rect(0, 0, 500, 800)
    assert screen_rects([left], 0, WORK_AREA) == [left, Rect(500, 0, 500, 800)]
