"""
tileassist.core.window - The Window interface.

A Window is a lightweight handle to a top-level window owned by the
windowing system.  The tiling engine never stores geometry on it: every
property is a live read against the windowing system, and all tiling
state lives in the TileGroupManager side-table keyed by ``window_id``.

Concrete windowing backends subclass Window; ``tileassist.core.virtual``
provides an in-memory implementation.
"""

from __future__ import annotations

import abc
import enum
import logging
from typing import Optional

from tileassist.tiling.rect import Rect

log = logging.getLogger(__name__)


# ============================================================================
# Enums
# ============================================================================
class WindowType(enum.Enum):
    """Kind of surface, as reported by the windowing system."""
    NORMAL = "normal"
    DIALOG = "dialog"
    SPLASHSCREEN = "splashscreen"
    UTILITY = "utility"
    OTHER = "other"


class MaximizeFlags(enum.Flag):
    """Maximization state of a window."""
    NONE = 0
    HORIZONTAL = enum.auto()
    VERTICAL = enum.auto()
    BOTH = HORIZONTAL | VERTICAL


# ============================================================================
# Window
# ============================================================================
class Window(abc.ABC):
    """
    Represents a single top-level window on the desktop.

    Equality and hashing are based solely on ``window_id``, so a Window
    can be safely used in sets and as dict keys.
    """

    __slots__ = ("_window_id",)

    def __init__(self, window_id: int) -> None:
        self._window_id = window_id

    # ------------------------------------------------------------------
    # Identity
    # ------------------------------------------------------------------
    @property
    def window_id(self) -> int:
        return self._window_id

    @property
    @abc.abstractmethod
    def is_valid(self) -> bool:
        """False once the window has been destroyed."""

    # ------------------------------------------------------------------
    # Properties (live reads)
    # ------------------------------------------------------------------
    @property
    @abc.abstractmethod
    def title(self) -> str: ...

    @property
    @abc.abstractmethod
    def app_id(self) -> Optional[str]:
        """Id of the application owning this window, if known."""

    @property
    @abc.abstractmethod
    def window_type(self) -> WindowType: ...

    @property
    @abc.abstractmethod
    def skip_taskbar(self) -> bool: ...

    @property
    @abc.abstractmethod
    def allows_move(self) -> bool: ...

    @property
    @abc.abstractmethod
    def allows_resize(self) -> bool: ...

    @property
    @abc.abstractmethod
    def frame_rect(self) -> Rect:
        """Current outer frame rectangle."""

    @property
    @abc.abstractmethod
    def maximized(self) -> MaximizeFlags: ...

    @property
    @abc.abstractmethod
    def monitor_index(self) -> int: ...

    @property
    @abc.abstractmethod
    def stacking_order(self) -> int:
        """Higher values are closer to the top of the stack."""

    @property
    @abc.abstractmethod
    def work_area(self) -> Rect:
        """Work area of the monitor this window is on."""

    @property
    def is_maximized(self) -> bool:
        return bool(self.maximized)

    @property
    def is_fully_maximized(self) -> bool:
        return self.maximized == MaximizeFlags.BOTH

    # ------------------------------------------------------------------
    # Actions
    # ------------------------------------------------------------------
    @abc.abstractmethod
    def move_resize_frame(self, rect: Rect, animate: bool = False) -> None:
        """Request a new frame rectangle."""

    @abc.abstractmethod
    def maximize(self, flags: MaximizeFlags = MaximizeFlags.BOTH) -> None: ...

    @abc.abstractmethod
    def unmaximize(self) -> None: ...

    @abc.abstractmethod
    def raise_window(self) -> None:
        """Raise above its siblings without changing focus."""

    # ------------------------------------------------------------------
    # Dunder
    # ------------------------------------------------------------------
    def __eq__(self, other: object) -> bool:
        if isinstance(other, Window):
            return self._window_id == other._window_id
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._window_id)

    def __repr__(self) -> str:
        if not self.is_valid:
            return f"<Window {self._window_id} (destroyed)>"
        return f"<Window {self._window_id} app={self.app_id!r} title={self.title!r}>"
