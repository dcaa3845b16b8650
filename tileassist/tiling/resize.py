"""
tileassist.tiling.resize - Resize complementario de ventanas tileadas.

Cuando el usuario redimensiona con el raton una ventana tileada, sus
vecinas se ajustan para que la division siga siendo limpia:

    - same_side : ventanas del mismo lado de la division, con el borde
                  arrastrado alineado (p.ej. al arrastrar el borde E de la
                  ventana superior-izquierda, la inferior-izquierda).
                  Su borde se mueve junto con el de la ventana arrastrada.
    - opposing  : ventanas al otro lado del borde arrastrado.  Conservan
                  su borde exterior y mueven el interior para quedar a
                  2*gap del borde arrastrado.

Los conjuntos de vecinas y sus rectangulos previos se fijan al empezar el
arrastre (begin_grab) y se reutilizan en cada tick (resize_complementing).
"""

from __future__ import annotations

import enum
import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Optional

from tileassist.tiling.rect import DEFAULT_EQUAL_MARGIN, Rect, equal_approx

if TYPE_CHECKING:
    from tileassist.core.window import Window

log = logging.getLogger(__name__)

WindowLookup = Callable[[int], Optional["Window"]]


class GrabDirection(enum.Enum):
    """Borde que se esta arrastrando."""
    N = "n"
    S = "s"
    E = "e"
    W = "w"


@dataclass
class GrabSession:
    """Estado de un arrastre de resize, capturado al empezar."""

    window_id: int
    direction: GrabDirection
    same_side: list[int] = field(default_factory=list)
    opposing: list[int] = field(default_factory=list)
    pre_grab_rects: dict[int, Rect] = field(default_factory=dict)

    @property
    def neighbors(self) -> list[int]:
        return self.same_side + self.opposing


def _moving_edge(rect: Rect, direction: GrabDirection) -> int:
    if direction == GrabDirection.N:
        return rect.top
    if direction == GrabDirection.S:
        return rect.bottom
    if direction == GrabDirection.E:
        return rect.right
    return rect.left


def _facing_edge(rect: Rect, direction: GrabDirection) -> int:
    """Borde de una vecina opuesta que mira hacia el borde arrastrado."""
    if direction == GrabDirection.N:
        return rect.bottom
    if direction == GrabDirection.S:
        return rect.top
    if direction == GrabDirection.E:
        return rect.left
    return rect.right


def begin_grab(
    resized: Window,
    direction: GrabDirection,
    candidates: Iterable[Window],
    gap: int,
    margin: int = DEFAULT_EQUAL_MARGIN,
) -> GrabSession:
    """
    Clasifica las vecinas de *resized* al empezar un arrastre.

    Args:
        resized:    Ventana que se redimensiona.
        direction:  Borde arrastrado.
        candidates: Ventanas a considerar (normalmente su grupo de tiling).
        gap:        Gap configurado; las opuestas estan a 2*gap.
        margin:     Tolerancia para considerar bordes alineados.
    """
    session = GrabSession(resized.window_id, direction)
    rect = resized.frame_rect
    edge = _moving_edge(rect, direction)

    # Posicion esperada del borde de una vecina opuesta
    sign = -1 if direction in (GrabDirection.N, GrabDirection.W) else 1
    opposing_edge = edge + sign * 2 * gap

    for window in candidates:
        if window is None or not window.is_valid or window == resized:
            continue
        other = window.frame_rect
        if equal_approx(_moving_edge(other, direction), edge, margin):
            session.same_side.append(window.window_id)
        elif equal_approx(_facing_edge(other, direction), opposing_edge, margin):
            session.opposing.append(window.window_id)
        else:
            continue
        session.pre_grab_rects[window.window_id] = other

    log.debug(
        "begin_grab %s on %d: same_side=%s opposing=%s",
        direction.value,
        resized.window_id,
        session.same_side,
        session.opposing,
    )
    return session


def resize_complementing(
    session: GrabSession,
    resized_rect: Rect,
    gap: int,
    lookup: WindowLookup,
) -> list[Window]:
    """
    Ajusta las vecinas al rectangulo actual de la ventana arrastrada.

    Las vecinas que ya no existen (lookup devuelve None o la ventana ya no
    es valida) se ignoran: el arrastre pudo terminar con una ventana
    cerrada a medias.

    Returns:
        Ventanas que recibieron un move/resize.
    """
    moved: list[Window] = []
    direction = session.direction

    for window_id in session.same_side:
        window = lookup(window_id)
        pre = session.pre_grab_rects.get(window_id)
        if window is None or not window.is_valid or pre is None:
            continue
        rect = window.frame_rect

        if direction == GrabDirection.N:
            new = Rect(rect.x, resized_rect.y, rect.w, pre.bottom - resized_rect.y)
        elif direction == GrabDirection.S:
            new = Rect(rect.x, rect.y, rect.w, resized_rect.bottom - rect.y)
        elif direction == GrabDirection.E:
            new = Rect(rect.x, rect.y, resized_rect.right - rect.x, rect.h)
        else:
            new = Rect(resized_rect.x, rect.y, pre.right - resized_rect.x, rect.h)

        window.move_resize_frame(new)
        moved.append(window)

    for window_id in session.opposing:
        window = lookup(window_id)
        pre = session.pre_grab_rects.get(window_id)
        if window is None or not window.is_valid or pre is None:
            continue
        rect = window.frame_rect

        if direction == GrabDirection.N:
            new = Rect(rect.x, rect.y, rect.w, resized_rect.y - rect.y - 2 * gap)
        elif direction == GrabDirection.S:
            y = resized_rect.bottom + 2 * gap
            new = Rect(rect.x, y, rect.w, pre.bottom - y)
        elif direction == GrabDirection.E:
            x = resized_rect.right + 2 * gap
            new = Rect(x, rect.y, pre.right - x, rect.h)
        else:
            new = Rect(rect.x, rect.y, resized_rect.x - rect.x - 2 * gap, rect.h)

        window.move_resize_frame(new)
        moved.append(window)

    return moved
