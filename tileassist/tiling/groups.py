"""
tileassist.tiling.groups - TileGroupManager: estado de tiling por ventana.

El manager es duenio de una tabla ``window_id -> TilingState``.  No se
guarda nada en los objetos Window.  Un TilingState contiene:

    - tiled_rect    : rectangulo logico (sin gaps) de la ventana tileada
    - pre_tile_rect : frame guardado al tilear por primera vez (restore)
    - group         : ids de las ventanas que se elevan junto con esta

Los grupos son conjuntos de ids (sin incluirse a si mismos) que se
resuelven contra el WindowManager al usarlos; un companero destruido
simplemente se salta.

Suscripciones de cada ventana:

    - UNMANAGING : se instala al crear el estado; saca la ventana de todos
                   los grupos y borra su estado
    - FOCUS      : solo para ventanas agrupadas; eleva al resto del grupo

Ambas se reemplazan (cancelando la anterior) cada vez que el grupo se
actualiza.
"""

from __future__ import annotations

import enum
import logging
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Optional

from tileassist.config.settings import TilingSettings
from tileassist.core.manager import Subscription, WindowManager, WMEvent
from tileassist.core.window import Window
from tileassist.tiling.rect import Rect, rects_about_equal

log = logging.getLogger(__name__)


class TileStatus(enum.Enum):
    """Estado de tiling de una ventana."""
    UNTILED = "untiled"
    TILED_STANDALONE = "tiled_standalone"
    TILED_GROUPED = "tiled_grouped"


@dataclass(slots=True)
class TilingState:
    """Datos de tiling asociados a un window id."""

    window_id: int
    tiled_rect: Optional[Rect] = None
    pre_tile_rect: Optional[Rect] = None
    group: set[int] = field(default_factory=set)
    focus_token: Optional[Subscription] = None
    removal_token: Optional[Subscription] = None

    @property
    def is_tiled(self) -> bool:
        return self.tiled_rect is not None


class TileGroupManager:
    """
    Duenio del TilingState de cada ventana y de la relacion de grupo.

    Toda modificacion del estado de tiling pasa por esta clase.
    """

    def __init__(
        self,
        manager: WindowManager,
        settings: Optional[TilingSettings] = None,
    ) -> None:
        self._wm = manager
        self._settings = settings or TilingSettings()
        self._states: dict[int, TilingState] = {}

    # ------------------------------------------------------------------
    # Consultas
    # ------------------------------------------------------------------
    def state(self, window: Window) -> Optional[TilingState]:
        if window is None:
            return None
        return self._states.get(window.window_id)

    def is_tiled(self, window: Window) -> bool:
        state = self.state(window)
        return state is not None and state.is_tiled

    def tiled_rect(self, window: Window) -> Optional[Rect]:
        state = self.state(window)
        return state.tiled_rect if state is not None else None

    def pre_tile_rect(self, window: Window) -> Optional[Rect]:
        state = self.state(window)
        return state.pre_tile_rect if state is not None else None

    def group_of(self, window: Window) -> set[int]:
        """Ids de las ventanas que se elevan con *window* (copia)."""
        state = self.state(window)
        return set(state.group) if state is not None else set()

    def status(self, window: Window) -> TileStatus:
        state = self.state(window)
        if state is None or not state.is_tiled:
            return TileStatus.UNTILED
        if state.group:
            return TileStatus.TILED_GROUPED
        return TileStatus.TILED_STANDALONE

    def tiled_rects(self) -> dict[int, Rect]:
        """window_id -> tiled rect de cada ventana tileada."""
        return {
            wid: state.tiled_rect
            for wid, state in self._states.items()
            if state.tiled_rect is not None
        }

    # ------------------------------------------------------------------
    # Estado de tiling
    # ------------------------------------------------------------------
    def mark_tiled(self, window: Window, rect: Rect) -> TilingState:
        """
        Registra *rect* como tiled rect de la ventana.

        El frame actual se guarda como pre_tile_rect solo la primera vez,
        asi un re-tile conserva el tamano previo para el restore.  Al
        crear el estado se instala el observador de UNMANAGING.
        """
        state = self._states.get(window.window_id)
        if state is None:
            state = TilingState(window.window_id)
            state.removal_token = self._wm.connect(
                window, WMEvent.UNMANAGING, self._on_unmanaging
            )
            self._states[window.window_id] = state
        if state.pre_tile_rect is None:
            state.pre_tile_rect = window.frame_rect
        state.tiled_rect = rect
        log.info("TILED %r -> %s (pre-tile %s)", window, rect, state.pre_tile_rect)
        return state

    def clear_tiling(self, window: Window) -> None:
        """Borra tiled_rect/pre_tile_rect; la ventana queda sin tilear."""
        self.remove_tile_group(window)
        self.forget(window)

    def forget(self, window: Window) -> None:
        """Borra el estado de la ventana y cancela sus suscripciones."""
        state = self._states.pop(window.window_id, None)
        if state is None:
            return
        for token in (state.focus_token, state.removal_token):
            if token is not None:
                token.cancel()
        log.debug("Estado de tiling de %r borrado", window)

    # ------------------------------------------------------------------
    # Grupos
    # ------------------------------------------------------------------
    def update_tile_group(self, group: Iterable[Window]) -> None:
        """
        Hace que las ventanas de *group* se eleven juntas.

        El grupo de cada miembro pasa a ser los ids de los demas miembros
        y sus suscripciones de foco/eliminacion se reinstalan.
        """
        # Solo se agrupan ventanas tileadas
        members = [w for w in group if self.is_tiled(w)]
        ids = {w.window_id for w in members}

        for window in members:
            state = self._states[window.window_id]
            state.group = ids - {window.window_id}

            if state.focus_token is not None:
                state.focus_token.cancel()
            state.focus_token = self._wm.connect(window, WMEvent.FOCUS, self._on_focus)

            if state.removal_token is not None:
                state.removal_token.cancel()
            state.removal_token = self._wm.connect(
                window, WMEvent.UNMANAGING, self._on_unmanaging
            )

        if members:
            log.info("Grupo actualizado: %s", sorted(ids))

    def remove_tile_group(self, window: Window) -> None:
        """
        Saca *window* de su grupo.

        Borra la ventana del grupo de cada companero y vacia el suyo.
        Idempotente; los companeros que ya no existen se saltan.
        """
        state = self.state(window)
        if state is None or not state.group:
            return

        if state.focus_token is not None:
            state.focus_token.cancel()
            state.focus_token = None

        for peer_id in state.group:
            peer = self._states.get(peer_id)
            if peer is None:
                continue
            peer.group.discard(window.window_id)

        log.info("%r sale del grupo %s", window, sorted(state.group))
        state.group = set()

    # ------------------------------------------------------------------
    # Observadores
    # ------------------------------------------------------------------
    def _on_focus(self, event: WMEvent, window: Optional[Window], wm: WindowManager) -> None:
        state = self.state(window)
        if state is None or not state.group:
            return

        work_area = window.work_area
        margin = self._settings.equal_margin
        if window.is_fully_maximized or (
            state.is_tiled and rects_about_equal(state.tiled_rect, work_area, margin)
        ):
            return

        group_ids = state.group | {window.window_id}
        for peer_id in sorted(state.group):
            peer = wm.get(peer_id)
            peer_state = self._states.get(peer_id)
            if peer is None or peer_state is None or not peer_state.is_tiled:
                continue
            if peer.is_fully_maximized:
                continue
            if rects_about_equal(peer_state.tiled_rect, work_area, margin):
                continue

            # Una ventana ajena pudo reemplazar a un miembro: reparar el grupo
            peer_state.group = group_ids - {peer_id}
            peer.raise_window()
            log.debug("Raise en grupo: %r con %r", peer, window)

    def _on_unmanaging(self, event: WMEvent, window: Optional[Window], wm: WindowManager) -> None:
        if window is None:
            return
        self.remove_tile_group(window)
        self.forget(window)

    def dump_state(self) -> str:
        lines = ["=== TileGroupManager ==="]
        for wid, state in sorted(self._states.items()):
            lines.append(
                f"    [{wid}] tiled={state.tiled_rect} pre={state.pre_tile_rect} "
                f"group={sorted(state.group)}"
            )
        return "\n".join(lines)
