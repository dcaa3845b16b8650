from __future__ import annotations

from tileassist.tiling.rect import Rect
from tileassist.tiling.resize import (
    GrabDirection,
    GrabSession,
    begin_grab,
    resize_complementing,
)

GAP = 10


def test_west_drag_shrinks_opposing_neighbor(desktop):
    resized = desktop.add_window(Rect(500, 0, 500, 800))
    neighbor = desktop.add_window(Rect(0, 0, 500, 800))
    session = GrabSession(
        resized.window_id,
        GrabDirection.W,
        opposing=[neighbor.window_id],
        pre_grab_rects={neighbor.window_id: Rect(0, 0, 500, 800)},
    )

    resized.move_resize_frame(Rect(450, 0, 550, 800))
    moved = resize_complementing(session, resized.frame_rect, GAP, desktop.manager.get)

    assert moved == [neighbor]
    assert neighbor.frame_rect == Rect(0, 0, 430, 800)


def test_begin_grab_classifies_neighbors(desktop):
    # Gapped frames of a left column split in two and a full right column
    top_left = desktop.add_window(Rect(10, 10, 480, 380))
    bottom_left = desktop.add_window(Rect(10, 410, 480, 380))
    right = desktop.add_window(Rect(510, 10, 480, 780))

    session = begin_grab(top_left, GrabDirection.E, [bottom_left, right], GAP)

    assert session.same_side == [bottom_left.window_id]
    assert session.opposing == [right.window_id]
    assert session.pre_grab_rects[right.window_id] == Rect(510, 10, 480, 780)


def test_east_drag_moves_column_boundary(desktop):
    top_left = desktop.add_window(Rect(10, 10, 480, 380))
    bottom_left = desktop.add_window(Rect(10, 410, 480, 380))
    right = desktop.add_window(Rect(510, 10, 480, 780))
    session = begin_grab(top_left, GrabDirection.E, [bottom_left, right], GAP)

    top_left.move_resize_frame(Rect(10, 10, 580, 380))
    resize_complementing(session, top_left.frame_rect, GAP, desktop.manager.get)

    assert bottom_left.frame_rect == Rect(10, 410, 580, 380)
    assert right.frame_rect == Rect(610, 10, 380, 780)
    # Outer edge of the opposing window is kept
    assert right.frame_rect.right == 990


def test_north_drag(desktop):
    bottom = desktop.add_window(Rect(10, 410, 980, 380))
    bottom_twin = desktop.add_window(Rect(510, 410, 480, 380))
    top = desktop.add_window(Rect(10, 10, 980, 380))
    session = begin_grab(bottom, GrabDirection.N, [bottom_twin, top], GAP)
    assert session.same_side == [bottom_twin.window_id]
    assert session.opposing == [top.window_id]

    bottom.move_resize_frame(Rect(10, 300, 980, 490))
    resize_complementing(session, bottom.frame_rect, GAP, desktop.manager.get)

    assert bottom_twin.frame_rect == Rect(510, 300, 480, 490)
    assert top.frame_rect == Rect(10, 10, 980, 270)


def test_south_drag(desktop):
    top = desktop.add_window(Rect(10, 10, 980, 380))
    bottom = desktop.add_window(Rect(10, 410, 980, 380))
    session = begin_grab(top, GrabDirection.S, [bottom], GAP)

    top.move_resize_frame(Rect(10, 10, 980, 480))
    resize_complementing(session, top.frame_rect, GAP, desktop.manager.get)

    assert bottom.frame_rect == Rect(10, 510, 980, 280)
    assert bottom.frame_rect.bottom == 790


def test_closed_neighbor_is_skipped(desktop):
    resized = desktop.add_window(Rect(510, 10, 480, 780))
    gone = desktop.add_window(Rect(10, 10, 480, 780))
    session = begin_grab(resized, GrabDirection.W, [gone], GAP)
    assert session.opposing == [gone.window_id]

    desktop.close(gone)
    resized.move_resize_frame(Rect(410, 10, 580, 780))

    assert resize_complementing(session, resized.frame_rect, GAP, desktop.manager.get) == []


def test_unrelated_windows_are_not_neighbors(desktop):
    resized = desktop.add_window(Rect(10, 10, 480, 780))
    far = desktop.add_window(Rect(700, 100, 200, 200))
    session = begin_grab(resized, GrabDirection.E, [far], GAP)
    assert session.neighbors == []
