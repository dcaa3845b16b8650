"""
tileassist.tiling.tile_rect - Rectangulo destino para tilear hacia un lado.

Dado un lado (4 bordes y 4 esquinas) y la particion actual de la pantalla
(rectangulos del grupo de tiling + rectangulos libres), calcula donde
deberia ir la ventana.  Se intenta reproducir la division ya existente
(columna o fila) antes de caer en una division a la mitad.
"""

from __future__ import annotations

import enum
import logging
import operator
from collections.abc import Sequence

from tileassist.tiling.rect import Rect, equal_approx

log = logging.getLogger(__name__)


class Side(enum.Enum):
    """Bordes y esquinas del area de trabajo."""
    LEFT = "left"
    RIGHT = "right"
    TOP = "top"
    BOTTOM = "bottom"
    TOP_LEFT = "top_left"
    TOP_RIGHT = "top_right"
    BOTTOM_LEFT = "bottom_left"
    BOTTOM_RIGHT = "bottom_right"

    @property
    def is_corner(self) -> bool:
        return self in _CORNERS


_CORNERS = frozenset({Side.TOP_LEFT, Side.TOP_RIGHT, Side.BOTTOM_LEFT, Side.BOTTOM_RIGHT})

# Borde lejano (el opuesto a side) de cada rectangulo
_FAR_EDGE = {
    Side.LEFT: "right",
    Side.RIGHT: "left",
    Side.TOP: "bottom",
    Side.BOTTOM: "top",
}


def tile_rect_for_side(
    side: Side,
    work_area: Rect,
    screen_rects: Sequence[Rect],
    gap: int,
) -> Rect:
    """
    Calcula el rectangulo para tilear una ventana hacia *side*.

    Args:
        side:         Borde o esquina destino.
        work_area:    Area de trabajo del monitor.
        screen_rects: Particion actual del area (tileados + libres).
        gap:          Tolerancia en pixeles para considerar bordes alineados.

    Returns:
        Rect alineado a work_area y contenido en ella.
    """
    # Ordenar izquierda -> derecha, luego arriba -> abajo
    rects = sorted(screen_rects, key=lambda r: (r.x, r.y))

    if side.is_corner:
        rect = _corner_rect(side, work_area, rects, gap)
    else:
        rect = _edge_rect(side, work_area, rects, gap)

    rect = rect.clip_to(work_area)
    log.debug("tile_rect_for_side(%s) -> %s", side.value, rect)
    return rect


# ============================================================================
# Bordes
# ============================================================================

def _edge_rect(side: Side, area: Rect, rects: list[Rect], gap: int) -> Rect:
    if side in (Side.RIGHT, Side.BOTTOM):
        rects = rects[::-1]

    horizontal = side in (Side.LEFT, Side.RIGHT)

    far_edge = operator.attrgetter(_FAR_EDGE[side])

    full = area.w if horizontal else area.h
    perpendicular_full = area.h if horizontal else area.w

    size = 0
    for i, rect in enumerate(rects):
        edge = far_edge(rect)
        lined_up = [rect] + [r for r in rects[i + 1:] if equal_approx(far_edge(r), edge, gap)]

        extent = sum((r.h if horizontal else r.w) for r in lined_up)
        if equal_approx(extent, perpendicular_full, gap):
            # Los rectangulos se alinean y llenan todo el alto (o ancho)
            if side == Side.LEFT:
                size = edge - area.left
            elif side == Side.RIGHT:
                size = area.right - edge
            elif side == Side.TOP:
                size = edge - area.top
            else:
                size = area.bottom - edge
            break

    if size <= 0 or equal_approx(size, full, gap):
        size = full // 2

    if side == Side.LEFT:
        return Rect(area.x, area.y, size, area.h)
    if side == Side.RIGHT:
        return Rect(area.right - size, area.y, size, area.h)
    if side == Side.TOP:
        return Rect(area.x, area.y, area.w, size)
    return Rect(area.x, area.bottom - size, area.w, size)


# ============================================================================
# Esquinas
# ============================================================================

def _corner_rect(side: Side, area: Rect, rects: list[Rect], gap: int) -> Rect:
    at_left = side in (Side.TOP_LEFT, Side.BOTTOM_LEFT)
    at_top = side in (Side.TOP_LEFT, Side.TOP_RIGHT)

    width = 0
    height = 0
    for rect in rects:
        x_ok = (
            equal_approx(rect.left, area.left, gap)
            if at_left
            else equal_approx(rect.right, area.right, gap)
        )
        y_ok = (
            equal_approx(rect.top, area.top, gap)
            if at_top
            else equal_approx(rect.bottom, area.bottom, gap)
        )
        if x_ok and y_ok:
            width, height = rect.w, rect.h
            break

    # Un rectangulo que ocupa toda el area (sin ventanas tileadas) no sirve
    if equal_approx(width, area.w, gap) and equal_approx(height, area.h, gap):
        width = height = 0

    if width <= 0:
        width = area.w // 2
    if height <= 0:
        height = area.h // 2

    x = area.x if at_left else area.right - width
    y = area.y if at_top else area.bottom - height
    return Rect(x, y, width, height)
