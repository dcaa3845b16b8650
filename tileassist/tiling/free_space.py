"""
tileassist.tiling.free_space - Calculo del espacio libre de un area de trabajo.

El espacio libre es la parte del area de trabajo que no cubre ninguna
ventana del grupo de tiling.  Pasos:

    1. Para cada ventana tileada se calcula por separado el complemento
       de su rectangulo dentro del area (rect_diff).
    2. El resultado final es la interseccion de todos esos complementos.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Optional

from tileassist.tiling.monitor import Monitor
from tileassist.tiling.rect import DEFAULT_IGNORE_MARGIN, Rect, intersect, rect_diff

log = logging.getLogger(__name__)


def free_screen_rects(
    tiled_rects: Sequence[Rect],
    gap: int,
    work_area: Rect,
    ignore_margin: int = DEFAULT_IGNORE_MARGIN,
    prefer_vertical: Optional[bool] = None,
    monitor: Optional[Monitor] = None,
) -> list[Rect]:
    """
    Retorna los rectangulos libres de *work_area* que no tocan ningun tiled rect.

    Args:
        tiled_rects:     Rectangulos (sin gaps) de las ventanas del grupo.
        gap:             Las intersecciones con ancho o alto <= gap se descartan.
        work_area:       Area de trabajo del monitor.
        ignore_margin:   Ver rect_diff().
        prefer_vertical: Ver rect_diff().
        monitor:         Monitor de referencia para la orientacion.

    Returns:
        [work_area] si no hay ventanas; [] si las ventanas cubren el area.
    """
    free_rects: list[Rect] = [work_area]

    # Espacio libre de cada ventana por separado
    per_window = [
        rect_diff(work_area, rect, ignore_margin, prefer_vertical, monitor)
        for rect in tiled_rects
        if rect is not None
    ]

    for window_free in per_window:
        intersections: list[Rect] = []
        for candidate in window_free:
            for current in free_rects:
                common = intersect(current, candidate)
                if common is not None and common.w > gap and common.h > gap:
                    intersections.append(common)
        free_rects = intersections

    log.debug(
        "free_screen_rects: %d ventanas -> %s",
        len(per_window),
        ", ".join(str(r) for r in free_rects) or "sin espacio libre",
    )
    return free_rects


def screen_rects(
    tiled_rects: Sequence[Rect],
    gap: int,
    work_area: Rect,
    ignore_margin: int = DEFAULT_IGNORE_MARGIN,
    prefer_vertical: Optional[bool] = None,
    monitor: Optional[Monitor] = None,
) -> list[Rect]:
    """
    Particion del area de trabajo: rectangulos tileados + rectangulos libres.

    Es el espacio de busqueda de tile_rect_for_side().
    """
    rects = [r for r in tiled_rects if r is not None]
    rects.extend(
        free_screen_rects(rects, gap, work_area, ignore_margin, prefer_vertical, monitor)
    )
    return rects
