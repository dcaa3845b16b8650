"""
tileassist.core - Windowing collaborator interfaces.

This package contains:
    - window  : The Window interface (live handle to a top-level window)
    - app     : The App interface (application that opens windows)
    - manager : WindowManager - window registry and event hub
    - filter  : Logic to decide which windows take part in tiling
    - virtual : In-memory windowing system (CLI and tests)
"""

from tileassist.core.window import MaximizeFlags, Window, WindowType
from tileassist.core.app import App
from tileassist.core.manager import Subscription, WindowManager, WMEvent

__all__ = [
    "Window", "WindowType", "MaximizeFlags", "App",
    "WindowManager", "WMEvent", "Subscription",
]
