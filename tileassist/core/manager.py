"""
tileassist.core.manager - WindowManager: window registry and event hub.

WindowManager is the single point where the windowing system talks to
the tiling engine:

  1. It keeps a live registry of the known top-level windows, indexed by
     window id, so stale ids can be resolved (or found missing) safely.
  2. It holds the monitor list, the current monitor and the pointer
     position, as reported by the windowing system.
  3. It exposes an event/callback system.  Every subscription returns a
     Subscription token; cancelling the token detaches the callback.
     Per-window subscriptions are dropped automatically once the window
     has been unmanaged.

All dispatch is synchronous on the caller's thread.
"""

from __future__ import annotations

import enum
import logging
from collections.abc import Callable
from typing import Optional

from tileassist.core.window import Window
from tileassist.tiling.monitor import Monitor
from tileassist.tiling.rect import Rect

log = logging.getLogger(__name__)


# ============================================================================
# Event types emitted by WindowManager
# ============================================================================
class WMEvent(enum.Enum):
    """Events that the WindowManager can emit to subscribers."""

    # A new top-level window was created (global).
    WINDOW_CREATED = "window_created"

    # A window gained keyboard focus (per window).
    FOCUS = "focus"

    # A window is being destroyed (per window).
    UNMANAGING = "unmanaging"

    # A window painted its first frame (per window).
    FIRST_FRAME = "first_frame"


# Type alias for event callbacks.
# All callbacks receive (event, window, manager).
EventCallback = Callable[["WMEvent", Optional[Window], "WindowManager"], None]


# ============================================================================
# Subscription
# ============================================================================
class Subscription:
    """Unsubscribe token returned by WindowManager.on() / connect()."""

    __slots__ = ("_manager", "_key", "_callback", "_active")

    def __init__(
        self,
        manager: WindowManager,
        key: tuple[WMEvent, Optional[int]],
        callback: EventCallback,
    ) -> None:
        self._manager = manager
        self._key = key
        self._callback = callback
        self._active = True

    @property
    def active(self) -> bool:
        return self._active

    @property
    def event(self) -> WMEvent:
        return self._key[0]

    @property
    def window_id(self) -> Optional[int]:
        return self._key[1]

    def cancel(self) -> None:
        """Detach the callback.  Safe to call more than once."""
        if not self._active:
            return
        self._active = False
        self._manager._detach(self._key, self)

    def __repr__(self) -> str:
        state = "active" if self._active else "cancelled"
        return f"<Subscription {self._key[0].value} window={self._key[1]} {state}>"


# ============================================================================
# WindowManager
# ============================================================================
class WindowManager:
    """
    Registry of windows plus an event hub.

    Usage:
        wm = WindowManager(monitors)
        wm.manage(window)
        token = wm.connect(window, WMEvent.FOCUS, my_callback)
        wm.emit(WMEvent.FOCUS, window)
        token.cancel()
    """

    def __init__(self, monitors: Optional[list[Monitor]] = None) -> None:
        # Known windows indexed by id for O(1) lookup
        self._windows: dict[int, Window] = {}

        self._monitors: list[Monitor] = list(monitors or [])
        self._current_monitor: int = 0
        self._pointer: tuple[int, int] = (0, 0)

        # Subscribers: (event, window_id or None for global) -> tokens
        self._subscribers: dict[tuple[WMEvent, Optional[int]], list[Subscription]] = {}

    # ------------------------------------------------------------------
    # Public: window access
    # ------------------------------------------------------------------
    @property
    def windows(self) -> list[Window]:
        """All known windows, in registration order."""
        return list(self._windows.values())

    def get(self, window_id: int) -> Optional[Window]:
        """Get a live window by its id, or None if it is gone."""
        window = self._windows.get(window_id)
        if window is None or not window.is_valid:
            return None
        return window

    @property
    def count(self) -> int:
        return len(self._windows)

    def manage(self, window: Window) -> None:
        """Start tracking *window*."""
        self._windows[window.window_id] = window
        log.debug("Managing %r", window)

    def unmanage(self, window: Window) -> None:
        """
        Announce that *window* is being destroyed.

        UNMANAGING subscribers run first, then the window and every
        subscription bound to it are dropped.
        """
        if window.window_id not in self._windows:
            return
        self.emit(WMEvent.UNMANAGING, window)
        self._windows.pop(window.window_id, None)
        for key in [k for k in self._subscribers if k[1] == window.window_id]:
            for token in self._subscribers.pop(key):
                token._active = False
        log.debug("Unmanaged %r", window)

    # ------------------------------------------------------------------
    # Public: monitors and pointer
    # ------------------------------------------------------------------
    @property
    def monitors(self) -> list[Monitor]:
        return list(self._monitors)

    @property
    def current_monitor(self) -> int:
        """Index of the monitor with the pointer/focus."""
        return self._current_monitor

    def set_current_monitor(self, index: int) -> None:
        self._current_monitor = index

    def get_monitor(self, index: int) -> Optional[Monitor]:
        for monitor in self._monitors:
            if monitor.index == index:
                return monitor
        return None

    def work_area_for_monitor(self, index: int) -> Optional[Rect]:
        monitor = self.get_monitor(index)
        return monitor.work_rect if monitor is not None else None

    @property
    def pointer(self) -> tuple[int, int]:
        return self._pointer

    def set_pointer(self, x: int, y: int) -> None:
        self._pointer = (x, y)

    # ------------------------------------------------------------------
    # Public: event subscription
    # ------------------------------------------------------------------
    def on(self, event: WMEvent, callback: EventCallback) -> Subscription:
        """Register a global callback for *event*."""
        return self._attach((event, None), callback)

    def connect(
        self,
        window: Window,
        event: WMEvent,
        callback: EventCallback,
    ) -> Subscription:
        """Register a callback for *event* on one specific window."""
        return self._attach((event, window.window_id), callback)

    def subscriber_count(self, event: WMEvent, window: Optional[Window] = None) -> int:
        key = (event, window.window_id if window is not None else None)
        return len(self._subscribers.get(key, []))

    # ------------------------------------------------------------------
    # Public: emit events
    # ------------------------------------------------------------------
    def emit(self, event: WMEvent, window: Optional[Window] = None) -> None:
        """
        Dispatch *event* to the window's subscribers, then to global ones.

        The subscriber lists are copied first so callbacks may cancel
        their own (or other) subscriptions while being dispatched.
        """
        tokens: list[Subscription] = []
        if window is not None:
            tokens.extend(self._subscribers.get((event, window.window_id), []))
        tokens.extend(self._subscribers.get((event, None), []))

        for token in tokens:
            if not token.active:
                continue
            try:
                token._callback(event, window, self)
            except Exception:
                log.exception(
                    "Error in event callback for %s on %r", event.value, window
                )

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------
    def _attach(
        self,
        key: tuple[WMEvent, Optional[int]],
        callback: EventCallback,
    ) -> Subscription:
        token = Subscription(self, key, callback)
        self._subscribers.setdefault(key, []).append(token)
        return token

    def _detach(self, key: tuple[WMEvent, Optional[int]], token: Subscription) -> None:
        tokens = self._subscribers.get(key)
        if not tokens:
            return
        try:
            tokens.remove(token)
        except ValueError:
            return
        if not tokens:
            del self._subscribers[key]

    def dump_state(self) -> str:
        """Return a summary of the manager state."""
        lines = [
            "=== WindowManager ===",
            f"    Monitors: {len(self._monitors)} (current {self._current_monitor})",
            f"    Windows: {len(self._windows)}",
        ]
        for window in self._windows.values():
            lines.append(f"    {window!r}")
        return "\n".join(lines)

    def __repr__(self) -> str:
        return f"WindowManager(windows={len(self._windows)}, monitors={len(self._monitors)})"
