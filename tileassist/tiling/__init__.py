"""
tileassist.tiling - Motor de tiling (geometria y estado).

Este paquete contiene:
    - rect        : Rect y algebra de rectangulos (overlap, intersect, rect_diff)
    - monitor     : Monitor y politica de orientacion
    - free_space  : Espacio libre de un area de trabajo
    - tile_group  : Deteccion del grupo de tiling superior
    - tile_rect   : Rectangulo destino para tilear hacia un lado
    - resize      : Resize complementario de ventanas vecinas
    - groups      : TileGroupManager - estado de tiling por ventana
    - coordinator : TileCoordinator - operaciones de tiling

groups y coordinator dependen de tileassist.core y se importan por su
ruta completa.
"""

from tileassist.tiling.rect import (
    Rect,
    equal_approx,
    intersect,
    overlap,
    rect_diff,
    rects_about_equal,
)
from tileassist.tiling.monitor import Monitor
from tileassist.tiling.free_space import free_screen_rects, screen_rects
from tileassist.tiling.tile_group import top_tile_group
from tileassist.tiling.tile_rect import Side, tile_rect_for_side
from tileassist.tiling.resize import GrabDirection, GrabSession, begin_grab, resize_complementing

__all__ = [
    "Rect",
    "equal_approx",
    "rects_about_equal",
    "overlap",
    "intersect",
    "rect_diff",
    "Monitor",
    "free_screen_rects",
    "screen_rects",
    "top_tile_group",
    "Side",
    "tile_rect_for_side",
    "GrabDirection",
    "GrabSession",
    "begin_grab",
    "resize_complementing",
]
