from __future__ import annotations

from tileassist.core.manager import WMEvent
from tileassist.tiling.groups import TileGroupManager, TileStatus
from tileassist.tiling.rect import Rect

LEFT = Rect(0, 0, 500, 800)
TOP_RIGHT = Rect(500, 0, 500, 400)
BOTTOM_RIGHT = Rect(500, 400, 500, 400)


def _tiled_trio(desktop):
    groups = TileGroupManager(desktop.manager)
    windows = []
    for rect in (LEFT, TOP_RIGHT, BOTTOM_RIGHT):
        window = desktop.add_window(Rect(50, 50, 300, 300))
        groups.mark_tiled(window, rect)
        windows.append(window)
    groups.update_tile_group(windows)
    return groups, windows


def test_update_sets_symmetric_self_exclusive_groups(desktop):
    groups, (a, b, c) = _tiled_trio(desktop)
    assert groups.group_of(a) == {b.window_id, c.window_id}
    assert groups.group_of(b) == {a.window_id, c.window_id}
    assert groups.group_of(c) == {a.window_id, b.window_id}
    assert groups.status(a) is TileStatus.TILED_GROUPED


def test_remove_one_of_three(desktop):
    groups, (a, b, c) = _tiled_trio(desktop)

    groups.remove_tile_group(c)

    assert groups.group_of(a) == {b.window_id}
    assert groups.group_of(b) == {a.window_id}
    assert groups.group_of(c) == set()
    assert groups.status(c) is TileStatus.TILED_STANDALONE


def test_remove_twice_is_a_noop(desktop):
    groups, (a, b, c) = _tiled_trio(desktop)
    groups.remove_tile_group(c)
    groups.remove_tile_group(c)
    assert groups.group_of(a) == {b.window_id}
    assert groups.group_of(b) == {a.window_id}


def test_last_groupmate_removed_leaves_standalone(desktop):
    groups, (a, b, c) = _tiled_trio(desktop)
    groups.remove_tile_group(c)
    groups.remove_tile_group(b)
    assert groups.status(a) is TileStatus.TILED_STANDALONE


def test_pre_tile_rect_saved_only_once(desktop):
    groups = TileGroupManager(desktop.manager)
    window = desktop.add_window(Rect(10, 20, 300, 200))
    groups.mark_tiled(window, LEFT)
    window.move_resize_frame(LEFT)
    groups.mark_tiled(window, TOP_RIGHT)

    assert groups.pre_tile_rect(window) == Rect(10, 20, 300, 200)
    assert groups.tiled_rect(window) == TOP_RIGHT


def test_clear_tiling_untiles(desktop):
    groups, (a, b, c) = _tiled_trio(desktop)
    groups.clear_tiling(a)
    assert groups.status(a) is TileStatus.UNTILED
    assert groups.pre_tile_rect(a) is None
    assert groups.group_of(b) == {c.window_id}


def test_focus_raises_groupmates(desktop):
    groups, (a, b, c) = _tiled_trio(desktop)
    floating = desktop.add_window(Rect(100, 100, 200, 200))
    desktop.raise_window(floating)

    desktop.focus(a)

    stack = desktop.stack()
    assert stack.index(floating) > max(stack.index(b), stack.index(c))
    assert ("raise", None) in b.requests
    assert ("raise", None) in c.requests


def test_focus_repairs_peer_groups(desktop):
    groups, (a, b, c) = _tiled_trio(desktop)
    # b lost track of c (e.g. c replaced another member)
    groups.state(b).group.discard(c.window_id)

    desktop.focus(c)

    assert groups.group_of(b) == {a.window_id, c.window_id}


def test_focus_on_maximized_window_does_nothing(desktop):
    groups, (a, b, c) = _tiled_trio(desktop)
    a.maximize()
    desktop.focus(a)
    assert ("raise", None) not in b.requests


def test_focus_skips_peers_tiled_to_work_area(desktop):
    groups, (a, b, c) = _tiled_trio(desktop)
    groups.mark_tiled(c, Rect(0, 0, 1000, 800))
    desktop.focus(a)
    assert ("raise", None) in b.requests
    assert ("raise", None) not in c.requests


def test_update_replaces_focus_subscription(desktop):
    groups, (a, b, c) = _tiled_trio(desktop)
    groups.update_tile_group([a, b, c])
    assert desktop.manager.subscriber_count(WMEvent.FOCUS, a) == 1
    assert desktop.manager.subscriber_count(WMEvent.UNMANAGING, a) == 1


def test_mark_tiled_installs_removal_observer(desktop):
    groups = TileGroupManager(desktop.manager)
    window = desktop.add_window(Rect(50, 50, 300, 300))

    groups.mark_tiled(window, LEFT)
    groups.mark_tiled(window, TOP_RIGHT)
    assert desktop.manager.subscriber_count(WMEvent.UNMANAGING, window) == 1
    assert desktop.manager.subscriber_count(WMEvent.FOCUS, window) == 0

    desktop.close(window)
    assert groups.state(window) is None
    assert groups.tiled_rects() == {}


def test_remove_detaches_focus_observer(desktop):
    groups, (a, b, c) = _tiled_trio(desktop)
    groups.remove_tile_group(a)
    assert desktop.manager.subscriber_count(WMEvent.FOCUS, a) == 0


def test_closing_a_window_prunes_it_from_groups(desktop):
    groups, (a, b, c) = _tiled_trio(desktop)

    desktop.close(b)

    assert groups.state(b) is None
    assert groups.group_of(a) == {c.window_id}
    assert groups.group_of(c) == {a.window_id}

    # Stale reference is tolerated
    groups.remove_tile_group(b)
    desktop.focus(a)
    assert ("raise", None) in c.requests


def test_untiled_windows_are_not_grouped(desktop):
    groups = TileGroupManager(desktop.manager)
    tiled = desktop.add_window(LEFT)
    floating = desktop.add_window(TOP_RIGHT)
    groups.mark_tiled(tiled, LEFT)

    groups.update_tile_group([tiled, floating])

    assert groups.status(floating) is TileStatus.UNTILED
    assert groups.group_of(tiled) == set()
