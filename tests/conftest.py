from __future__ import annotations

import pytest

from tileassist.config.settings import TilingSettings
from tileassist.core.virtual import VirtualDesktop
from tileassist.tiling.coordinator import TileCoordinator
from tileassist.tiling.monitor import Monitor
from tileassist.tiling.rect import Rect

WORK_AREA = Rect(0, 0, 1000, 800)


@pytest.fixture
def desktop():
    monitor = Monitor(index=0, full_rect=WORK_AREA, work_rect=WORK_AREA, is_primary=True)
    return VirtualDesktop([monitor])


@pytest.fixture
def coordinator(desktop):
    return TileCoordinator(desktop.manager, TilingSettings(gap=0, use_animation=False))
