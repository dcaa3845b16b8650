"""
tileassist.tiling.rect - Estructura geometrica Rect y algebra de rectangulos.

Define un rectangulo inmutable que representa un area de pantalla y las
operaciones sobre conjuntos de rectangulos que usa el motor de tiling:

    - equal_approx / rects_about_equal : comparaciones con margen
    - overlap / intersect              : pruebas alineadas a los ejes
    - rect_diff                        : area de A que no cubre B

Todas las funciones toleran operandos ausentes (None): devuelven un
resultado vacio en vez de fallar.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from tileassist.tiling.monitor import Monitor, prefers_vertical_split

log = logging.getLogger(__name__)

# Umbrales por defecto (configurables via TilingSettings)
DEFAULT_EQUAL_MARGIN = 15
DEFAULT_IGNORE_MARGIN = 35


@dataclass(frozen=True, slots=True)
class Rect:
    """
    Rectangulo inmutable definido por posicion (x, y) y dimensiones (w, h).

    Todas las coordenadas estan en pixeles. El origen (0, 0) es la esquina
    superior-izquierda del monitor primario.

    Atributos:
        x: Coordenada horizontal de la esquina superior-izquierda.
        y: Coordenada vertical de la esquina superior-izquierda.
        w: Ancho en pixeles.
        h: Alto en pixeles.
    """

    x: int
    y: int
    w: int
    h: int

    # ------------------------------------------------------------------
    # Propiedades derivadas
    # ------------------------------------------------------------------
    @property
    def left(self) -> int:
        return self.x

    @property
    def top(self) -> int:
        return self.y

    @property
    def right(self) -> int:
        return self.x + self.w

    @property
    def bottom(self) -> int:
        return self.y + self.h

    @property
    def area(self) -> int:
        return self.w * self.h

    # ------------------------------------------------------------------
    # Operaciones geometricas
    # ------------------------------------------------------------------
    def overlaps(self, other: Optional[Rect]) -> bool:
        """True si ambos rectangulos comparten area (los bordes no cuentan)."""
        return overlap(self, other)

    def intersect(self, other: Optional[Rect]) -> Optional[Rect]:
        """Interseccion con *other*, o None si no se solapan."""
        return intersect(self, other)

    def contains_point(self, px: int, py: int) -> bool:
        """True si el punto (px, py) cae dentro del rectangulo (bordes incluidos)."""
        return self.left <= px <= self.right and self.top <= py <= self.bottom

    def pad(self, gap: int) -> Rect:
        """
        Reduce el rectangulo aplicando un margen interior (gap) uniforme.

        Args:
            gap: Pixeles de margen en cada lado.

        Returns:
            Nuevo Rect reducido. Si el gap es mayor que las dimensiones,
            retorna un Rect de tamano 0 centrado.
        """
        new_w = max(0, self.w - 2 * gap)
        new_h = max(0, self.h - 2 * gap)
        return Rect(self.x + gap, self.y + gap, new_w, new_h)

    def grow(self, gap: int) -> Rect:
        """Inverso de pad(): expande el rectangulo *gap* pixeles por lado."""
        return Rect(self.x - gap, self.y - gap, self.w + 2 * gap, self.h + 2 * gap)

    def clip_to(self, area: Rect) -> Rect:
        """Recorta el rectangulo para que quede dentro de *area*."""
        left = min(max(self.left, area.left), area.right)
        top = min(max(self.top, area.top), area.bottom)
        right = max(min(self.right, area.right), left)
        bottom = max(min(self.bottom, area.bottom), top)
        return Rect.from_ltrb(left, top, right, bottom)

    @classmethod
    def from_ltrb(cls, left: int, top: int, right: int, bottom: int) -> Rect:
        """Crea un Rect desde coordenadas (left, top, right, bottom)."""
        return cls(left, top, right - left, bottom - top)

    # ------------------------------------------------------------------
    # Representacion
    # ------------------------------------------------------------------
    def __str__(self) -> str:
        return f"Rect({self.w}x{self.h}+{self.x}+{self.y})"


# ============================================================================
# Comparaciones con margen
# ============================================================================

def equal_approx(value: int, other: int, margin: int) -> bool:
    """True si |value - other| <= margin."""
    return other - margin <= value <= other + margin


def rects_about_equal(
    r1: Optional[Rect],
    r2: Optional[Rect],
    margin: int = DEFAULT_EQUAL_MARGIN,
) -> bool:
    """
    True si posicion y tamano de ambos rectangulos coinciden dentro de *margin*.

    Un rectangulo ausente nunca es igual a nada.
    """
    if r1 is None or r2 is None:
        return False

    same_pos = equal_approx(r1.x, r2.x, margin) and equal_approx(r1.y, r2.y, margin)
    same_size = equal_approx(r1.w, r2.w, margin) and equal_approx(r1.h, r2.h, margin)
    return same_pos and same_size


# ============================================================================
# Solapamiento e interseccion
# ============================================================================

def overlap(r1: Optional[Rect], r2: Optional[Rect]) -> bool:
    """True si r1 y r2 comparten un area no vacia."""
    if r1 is None or r2 is None:
        return False
    return (
        r1.left < r2.right
        and r2.left < r1.right
        and r1.top < r2.bottom
        and r2.top < r1.bottom
    )


def intersect(r1: Optional[Rect], r2: Optional[Rect]) -> Optional[Rect]:
    """Rectangulo comun a r1 y r2, o None si no se solapan."""
    if not overlap(r1, r2):
        return None
    return Rect.from_ltrb(
        max(r1.left, r2.left),
        max(r1.top, r2.top),
        min(r1.right, r2.right),
        min(r1.bottom, r2.bottom),
    )


# ============================================================================
# Diferencia de rectangulos
# ============================================================================

def rect_diff(
    rect_a: Optional[Rect],
    rect_b: Optional[Rect],
    ignore_margin: int = DEFAULT_IGNORE_MARGIN,
    prefer_vertical: Optional[bool] = None,
    monitor: Optional[Monitor] = None,
) -> list[Rect]:
    """
    Calcula la region de *rect_a* que no cubre *rect_b* (0 a 4 rectangulos).

    A se divide en hasta 4 franjas alrededor de la proyeccion de B:

        prefer_vertical=True  -> las franjas izquierda/derecha ocupan todo
                                 el alto de A; arriba/abajo solo el ancho
                                 comun entre A y B.
        prefer_vertical=False -> arriba/abajo ocupan todo el ancho de A;
                                 izquierda/derecha solo el alto comun.

    Una franja se descarta si alguna de sus dimensiones es <= ignore_margin.
    Asi se absorben ventanas que no pueden redimensionarse al pixel exacto
    (por ejemplo terminales que crecen en celdas completas).

    Args:
        rect_a:          Rectangulo base.
        rect_b:          Rectangulo a restar.
        ignore_margin:   Tamano minimo (exclusivo) de una franja valida.
        prefer_vertical: Orientacion preferida. Si es None se deriva de la
                         proporcion de *monitor* (o de rect_a si no hay monitor).
        monitor:         Monitor de referencia para la orientacion.

    Returns:
        Lista de franjas: izquierda, derecha, arriba, abajo (vertical) o
        arriba, abajo, izquierda, derecha (horizontal).
    """
    if rect_a is None or rect_b is None:
        return []

    if prefer_vertical is None:
        reference = monitor.full_rect if monitor is not None else rect_a
        prefer_vertical = prefers_vertical_split(reference.w, reference.h)

    # B no toca A: A queda completo
    if not overlap(rect_a, rect_b):
        if rect_a.w > ignore_margin and rect_a.h > ignore_margin:
            return [rect_a]
        return []

    result: list[Rect] = []

    if prefer_vertical:
        left_w = rect_b.left - rect_a.left
        if left_w > ignore_margin and rect_a.h > ignore_margin:
            result.append(Rect(rect_a.x, rect_a.y, left_w, rect_a.h))

        right_w = rect_a.right - rect_b.right
        if right_w > ignore_margin and rect_a.h > ignore_margin:
            result.append(Rect(rect_b.right, rect_a.y, right_w, rect_a.h))

        side_x = max(rect_a.left, rect_b.left)
        side_w = min(rect_a.right, rect_b.right) - side_x

        top_h = rect_b.top - rect_a.top
        if top_h > ignore_margin and side_w > ignore_margin:
            result.append(Rect(side_x, rect_a.y, side_w, top_h))

        bottom_h = rect_a.bottom - rect_b.bottom
        if bottom_h > ignore_margin and side_w > ignore_margin:
            result.append(Rect(side_x, rect_b.bottom, side_w, bottom_h))

    else:
        top_h = rect_b.top - rect_a.top
        if top_h > ignore_margin and rect_a.w > ignore_margin:
            result.append(Rect(rect_a.x, rect_a.y, rect_a.w, top_h))

        bottom_h = rect_a.bottom - rect_b.bottom
        if bottom_h > ignore_margin and rect_a.w > ignore_margin:
            result.append(Rect(rect_a.x, rect_b.bottom, rect_a.w, bottom_h))

        side_y = max(rect_a.top, rect_b.top)
        side_h = min(rect_a.bottom, rect_b.bottom) - side_y

        left_w = rect_b.left - rect_a.left
        if left_w > ignore_margin and side_h > ignore_margin:
            result.append(Rect(rect_a.x, side_y, left_w, side_h))

        right_w = rect_a.right - rect_b.right
        if right_w > ignore_margin and side_h > ignore_margin:
            result.append(Rect(rect_b.right, side_y, right_w, side_h))

    return result
