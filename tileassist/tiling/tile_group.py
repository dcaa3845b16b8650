"""
tileassist.tiling.tile_group - Deteccion del grupo de tiling superior.

Recorre las ventanas de arriba hacia abajo (orden de apilamiento) y decide
cuales ventanas tileadas forman el grupo visible superior: el conjunto de
ventanas que se levantan juntas y que se consideran en conjunto al
calcular el espacio libre.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from typing import TYPE_CHECKING, Optional

from tileassist.tiling.rect import Rect

if TYPE_CHECKING:
    from tileassist.core.window import Window

log = logging.getLogger(__name__)


def top_tile_group(
    windows: Sequence[Window],
    tiled_rects: Mapping[int, Rect],
    ignore_top: bool = True,
    monitor_index: Optional[int] = None,
) -> list[Window]:
    """
    Retorna las ventanas tileadas que forman el grupo superior.

    Args:
        windows:       Ventanas ordenadas de arriba hacia abajo.
        tiled_rects:   window_id -> tiled rect de cada ventana tileada.
        ignore_top:    Ignorar la ventana superior (la que se esta
                       arrastrando, abriendo o tileando por teclado).
        monitor_index: Monitor de referencia.  Por defecto el de la
                       ventana superior.

    Returns:
        Lista de ventanas agrupadas, de arriba hacia abajo.
    """
    if not windows:
        return []

    if monitor_index is None:
        monitor_index = windows[0].monitor_index

    grouped: list[Window] = []
    # Ventanas (normales o tileadas) que quedan entre medio en el stack
    not_grouped: list[Window] = []
    grouped_area = 0

    for window in windows[1 if ignore_top else 0:]:
        if window.monitor_index != monitor_index:
            continue

        rect = tiled_rects.get(window.window_id)
        if rect is None:
            not_grouped.append(window)
            continue

        work_area = window.work_area

        # Maximizada: nada debajo puede pertenecer a este grupo
        if window.is_fully_maximized or rect == work_area:
            break

        # El grupo ya llena la pantalla
        if grouped_area >= work_area.area:
            break

        # Una ventana mas arriba que no esta en el grupo la tapa
        if any(_stacked_rect(w, tiled_rects).overlaps(rect) for w in not_grouped):
            continue

        # Lo mismo si la tapa una ventana tileada del grupo
        if any(tiled_rects[w.window_id].overlaps(rect) for w in grouped):
            not_grouped.append(window)
            continue

        grouped.append(window)
        grouped_area += rect.area

    log.debug(
        "top_tile_group: monitor=%d grupo=%s",
        monitor_index,
        [w.window_id for w in grouped],
    )
    return grouped


def _stacked_rect(window: Window, tiled_rects: Mapping[int, Rect]) -> Rect:
    rect = tiled_rects.get(window.window_id)
    return rect if rect is not None else window.frame_rect
