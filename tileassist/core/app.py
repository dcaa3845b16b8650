"""
tileassist.core.app - The App interface.

Launching applications belongs to the desktop shell; the tiling engine
only needs to know whether an app can open another window, how to ask
for one, and which windows belong to it.
"""

from __future__ import annotations

import abc


class App(abc.ABC):
    """An installed application that can open new windows."""

    @property
    @abc.abstractmethod
    def app_id(self) -> str: ...

    @abc.abstractmethod
    def can_open_new_window(self) -> bool: ...

    @abc.abstractmethod
    def open_new_window(self) -> None:
        """Ask the app for a new window; it arrives via WINDOW_CREATED."""

    def owns(self, window) -> bool:
        """True if *window* was opened by this app."""
        return window is not None and window.app_id == self.app_id

    def __repr__(self) -> str:
        return f"<App {self.app_id!r}>"
