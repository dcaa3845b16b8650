"""
tileassist.core.virtual - In-memory windowing system.

VirtualDesktop implements the windowing collaborator without a display
server: windows are plain records, move/resize requests apply
immediately, and events are fired by calling the simulation helpers
(focus(), close(), create_window(), ...).  Used by the CLI to replay
scenes and by the test-suite.
"""

from __future__ import annotations

import itertools
import logging
from typing import Optional

from tileassist.core.app import App
from tileassist.core.manager import WindowManager, WMEvent
from tileassist.core.window import MaximizeFlags, Window, WindowType
from tileassist.tiling.monitor import Monitor
from tileassist.tiling.rect import Rect

log = logging.getLogger(__name__)


# ============================================================================
# VirtualWindow
# ============================================================================
class VirtualWindow(Window):
    """A window whose state is held in memory."""

    __slots__ = (
        "_desktop",
        "_title",
        "_app_id",
        "_type",
        "_skip_taskbar",
        "_allows_move",
        "_allows_resize",
        "_rect",
        "_maximized",
        "_monitor_index",
        "_stacking_order",
        "_valid",
        "requests",
    )

    def __init__(
        self,
        desktop: VirtualDesktop,
        window_id: int,
        rect: Rect,
        title: str = "",
        app_id: Optional[str] = None,
        window_type: WindowType = WindowType.NORMAL,
        skip_taskbar: bool = False,
        allows_move: bool = True,
        allows_resize: bool = True,
        monitor_index: int = 0,
    ) -> None:
        super().__init__(window_id)
        self._desktop = desktop
        self._title = title
        self._app_id = app_id
        self._type = window_type
        self._skip_taskbar = skip_taskbar
        self._allows_move = allows_move
        self._allows_resize = allows_resize
        self._rect = rect
        self._maximized = MaximizeFlags.NONE
        self._monitor_index = monitor_index
        self._stacking_order = 0
        self._valid = True

        # Log of (action, payload) requests, handy for assertions
        self.requests: list[tuple[str, object]] = []

    # ------------------------------------------------------------------
    # Window interface
    # ------------------------------------------------------------------
    @property
    def is_valid(self) -> bool:
        return self._valid

    @property
    def title(self) -> str:
        return self._title

    @property
    def app_id(self) -> Optional[str]:
        return self._app_id

    @property
    def window_type(self) -> WindowType:
        return self._type

    @property
    def skip_taskbar(self) -> bool:
        return self._skip_taskbar

    @property
    def allows_move(self) -> bool:
        return self._allows_move

    @property
    def allows_resize(self) -> bool:
        return self._allows_resize

    @property
    def frame_rect(self) -> Rect:
        if self._maximized == MaximizeFlags.BOTH:
            return self.work_area
        return self._rect

    @property
    def maximized(self) -> MaximizeFlags:
        return self._maximized

    @property
    def monitor_index(self) -> int:
        return self._monitor_index

    @property
    def stacking_order(self) -> int:
        return self._stacking_order

    @property
    def work_area(self) -> Rect:
        area = self._desktop.manager.work_area_for_monitor(self._monitor_index)
        if area is None:
            return self._rect
        return area

    def move_resize_frame(self, rect: Rect, animate: bool = False) -> None:
        self.requests.append(("move_resize", rect))
        self._rect = rect

    def maximize(self, flags: MaximizeFlags = MaximizeFlags.BOTH) -> None:
        self.requests.append(("maximize", flags))
        self._maximized |= flags

    def unmaximize(self) -> None:
        self.requests.append(("unmaximize", self._maximized))
        self._maximized = MaximizeFlags.NONE

    def raise_window(self) -> None:
        self.requests.append(("raise", None))
        self._desktop.raise_window(self)


# ============================================================================
# VirtualApp
# ============================================================================
class VirtualApp(App):
    """An app whose new windows are created on a VirtualDesktop."""

    def __init__(
        self,
        desktop: VirtualDesktop,
        app_id: str,
        can_open: bool = True,
        splash: bool = False,
    ) -> None:
        self._desktop = desktop
        self._app_id = app_id
        self._can_open = can_open
        self._splash = splash
        self.opened: list[VirtualWindow] = []

    @property
    def app_id(self) -> str:
        return self._app_id

    def can_open_new_window(self) -> bool:
        return self._can_open

    def open_new_window(self) -> None:
        # Some apps show a skip-taskbar loading screen before the real window
        if self._splash:
            self.opened.append(self._desktop.create_window(
                Rect(0, 0, 300, 200),
                title=f"{self._app_id} (loading)",
                app_id=self._app_id,
                window_type=WindowType.SPLASHSCREEN,
                skip_taskbar=True,
            ))
        self.opened.append(self._desktop.create_window(
            Rect(100, 100, 640, 480),
            title=self._app_id,
            app_id=self._app_id,
        ))


# ============================================================================
# VirtualDesktop
# ============================================================================
class VirtualDesktop:
    """
    A simulated desktop: monitors, a stacking order and a WindowManager.

    Windows created later are stacked on top.
    """

    def __init__(self, monitors: list[Monitor]) -> None:
        self.manager = WindowManager(monitors)
        self._ids = itertools.count(1)
        self._stack = itertools.count(1)

    def add_window(
        self,
        rect: Rect,
        window_id: Optional[int] = None,
        **kwargs,
    ) -> VirtualWindow:
        """Register a window without emitting WINDOW_CREATED."""
        wid = window_id
        while wid is None or self.manager.get(wid) is not None:
            wid = next(self._ids)
        window = VirtualWindow(self, wid, rect, **kwargs)
        window._stacking_order = next(self._stack)
        self.manager.manage(window)
        return window

    def create_window(self, rect: Rect, **kwargs) -> VirtualWindow:
        """Register a window and emit WINDOW_CREATED."""
        window = self.add_window(rect, **kwargs)
        self.manager.emit(WMEvent.WINDOW_CREATED, window)
        return window

    def raise_window(self, window: VirtualWindow) -> None:
        window._stacking_order = next(self._stack)

    def focus(self, window: VirtualWindow) -> None:
        """Raise *window*, then deliver FOCUS."""
        self.raise_window(window)
        self.manager.set_current_monitor(window.monitor_index)
        self.manager.emit(WMEvent.FOCUS, window)

    def first_frame(self, window: VirtualWindow) -> None:
        self.manager.emit(WMEvent.FIRST_FRAME, window)

    def close(self, window: VirtualWindow) -> None:
        """Destroy *window*: UNMANAGING fires while it is still valid."""
        self.manager.unmanage(window)
        window._valid = False

    def stack(self) -> list[Window]:
        """All live windows, top to bottom."""
        windows = [w for w in self.manager.windows if w.is_valid]
        return sorted(windows, key=lambda w: w.stacking_order, reverse=True)
