"""
tileassist.tiling.monitor - Descripcion de un monitor y su area de trabajo.

El sistema de ventanas externo publica la lista de monitores; el motor
solo necesita la geometria completa (para decidir la orientacion de las
divisiones) y el area de trabajo (descontando paneles y docks).
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from tileassist.tiling.rect import Rect

log = logging.getLogger(__name__)

# Un monitor cuyo ancho supera el 90% de su alto se considera "horizontal"
VERTICAL_SPLIT_RATIO = 0.9


# ============================================================================
# Monitor
# ============================================================================
@dataclass(frozen=True, slots=True)
class Monitor:
    """
    Representa un monitor fisico.

    Atributos:
        index:     Indice del monitor segun el sistema de ventanas.
        full_rect: Area total del monitor (resolucion completa).
        work_rect: Area de trabajo (descontando paneles y barras).
        is_primary: True si es el monitor principal.
    """

    index: int
    full_rect: Rect
    work_rect: Rect
    is_primary: bool = False


def prefers_vertical_split(width: int, height: int) -> bool:
    """
    Politica de orientacion: True si conviene priorizar franjas laterales.

    En monitores apaisados las columnas completas son mas utiles que las
    filas completas, asi que se da mas peso al ancho.
    """
    return width > height * VERTICAL_SPLIT_RATIO
