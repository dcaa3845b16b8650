"""
tileassist.core.filter - Window filtering rules.

Decides which windows take part in tiling decisions.  Two predicates:

    - is_tileable()   : the window may be considered for tile groups
                        (normal, on the taskbar, movable and resizable,
                        or already maximized).
    - is_app_window() : the window is a real app window and not a
                        loading/splash surface; used when waiting for a
                        freshly launched app to show up.

The rules here are the single source of truth.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from tileassist.core.window import Window, WindowType

log = logging.getLogger(__name__)


# ============================================================================
# Core filter functions
# ============================================================================
def is_app_window(window: Window) -> bool:
    """
    Return True if *window* looks like a regular app window.

    Loading screens differ between apps: some are skip-taskbar windows,
    others are normal windows which simply don't allow resizing.

    The rules, in order:
        1. Must still exist.
        2. Must be a NORMAL window.
        3. Must be shown on the taskbar.
        4. Must be movable and resizable.
    """
    if window is None or not window.is_valid:
        return False

    if window.window_type != WindowType.NORMAL:
        log.debug("Filtered %d: window type %s", window.window_id, window.window_type.value)
        return False

    if window.skip_taskbar:
        log.debug("Filtered %d: skip taskbar", window.window_id)
        return False

    if not (window.allows_move and window.allows_resize):
        log.debug("Filtered %d: not movable/resizable", window.window_id)
        return False

    return True


def is_tileable(window: Window) -> bool:
    """
    Return True if *window* takes part in tile group detection.

    Same as is_app_window(), except that a maximized window is always
    kept: it may hide every tiled window below it.
    """
    if window is None or not window.is_valid:
        return False
    if window.window_type != WindowType.NORMAL or window.skip_taskbar:
        return False
    return (window.allows_move and window.allows_resize) or window.is_maximized


# ============================================================================
# Enumeration helpers
# ============================================================================
def open_windows(windows: Iterable[Window]) -> list[Window]:
    """
    Snapshot: return the tileable windows sorted top to bottom
    by stacking order.
    """
    results = [w for w in windows if is_tileable(w)]
    return sorted(results, key=lambda w: w.stacking_order, reverse=True)
