"""
tileassist.tiling.coordinator - Operaciones de tiling visibles al exterior.

TileCoordinator es la capa fina que conecta el sistema de ventanas
(WindowManager), el estado de tiling (TileGroupManager) y los ajustes.
Expone las operaciones que dispara el shell:

    - tile_window / tile_to_side   : tilear una ventana a un rectangulo o lado
    - maximize_both / toggle_maximize
    - restore_window_size          : volver al tamano previo al tiling
    - open_app_tiled               : abrir una app directamente tileada
    - begin_resize / resize_tick / end_resize : resize complementario

Ninguna operacion lanza excepciones por una ventana ausente o sin
permisos de move/resize: simplemente no hace nada.
"""

from __future__ import annotations

import logging
from typing import Optional

from tileassist.config.settings import TilingSettings
from tileassist.core.app import App
from tileassist.core.filter import is_app_window, open_windows
from tileassist.core.manager import Subscription, WindowManager, WMEvent
from tileassist.core.window import Window
from tileassist.tiling.free_space import free_screen_rects, screen_rects
from tileassist.tiling.groups import TileGroupManager
from tileassist.tiling.monitor import Monitor
from tileassist.tiling.rect import Rect, rects_about_equal
from tileassist.tiling.resize import GrabDirection, GrabSession, begin_grab, resize_complementing
from tileassist.tiling.tile_group import top_tile_group
from tileassist.tiling.tile_rect import Side, tile_rect_for_side

log = logging.getLogger(__name__)


class TileCoordinator:
    """
    Orquesta las operaciones de tiling sobre un WindowManager.

    Uso tipico:
        coordinator = TileCoordinator(wm, settings)
        coordinator.tile_to_side(window, Side.LEFT)
        coordinator.restore_window_size(window, full_restore=True)
    """

    def __init__(
        self,
        manager: WindowManager,
        settings: Optional[TilingSettings] = None,
        groups: Optional[TileGroupManager] = None,
    ) -> None:
        self._wm = manager
        self._settings = settings or TilingSettings()
        self._groups = groups or TileGroupManager(manager, self._settings)
        self._grab: Optional[GrabSession] = None

        log.info(
            "TileCoordinator iniciado | gap=%d | animacion=%s | monitores=%d",
            self._settings.gap,
            self._settings.use_animation,
            len(manager.monitors),
        )

    # ------------------------------------------------------------------
    # Propiedades
    # ------------------------------------------------------------------
    @property
    def manager(self) -> WindowManager:
        return self._wm

    @property
    def groups(self) -> TileGroupManager:
        return self._groups

    @property
    def settings(self) -> TilingSettings:
        return self._settings

    # ------------------------------------------------------------------
    # Consultas
    # ------------------------------------------------------------------
    def open_windows(self) -> list[Window]:
        """Ventanas tileables, de arriba hacia abajo."""
        return open_windows(self._wm.windows)

    def top_tile_group(
        self,
        ignore_top: bool = True,
        windows: Optional[list[Window]] = None,
    ) -> list[Window]:
        """Grupo de tiling superior en el orden de apilamiento actual."""
        if windows is None:
            windows = self.open_windows()
        return top_tile_group(windows, self._groups.tiled_rects(), ignore_top)

    def work_area_for(self, tile_group: list[Window]) -> Rect:
        """Area de trabajo del grupo, o la del monitor actual si esta vacio."""
        if tile_group:
            return tile_group[0].work_area
        area = self._wm.work_area_for_monitor(self._wm.current_monitor)
        if area is None:
            log.warning("Monitor actual %d desconocido", self._wm.current_monitor)
            return Rect(0, 0, 0, 0)
        return area

    def free_screen_rects(self, tile_group: list[Window]) -> list[Rect]:
        """Espacio libre del area de trabajo alrededor de *tile_group*."""
        work_area = self.work_area_for(tile_group)
        monitor = self._monitor_for(tile_group)
        return free_screen_rects(
            self._group_rects(tile_group),
            self._settings.gap,
            work_area,
            self._settings.ignore_margin,
            self._settings.prefer_vertical,
            monitor,
        )

    def tile_rect_for_side(self, side: Side, window: Optional[Window] = None) -> Rect:
        """
        Rectangulo al que iria *window* si se tilea hacia *side*.

        Se calcula sobre el grupo superior ignorando la ventana de arriba
        (la que se va a tilear), igual que al tilear por teclado.
        """
        windows = [w for w in self.open_windows() if w != window]
        if window is not None:
            monitor_index = window.monitor_index
            work_area = window.work_area
        else:
            monitor_index = self._wm.current_monitor
            work_area = self.work_area_for([])

        group = top_tile_group(
            windows, self._groups.tiled_rects(), ignore_top=False, monitor_index=monitor_index
        )
        partition = screen_rects(
            self._group_rects(group),
            self._settings.gap,
            work_area,
            self._settings.ignore_margin,
            self._settings.prefer_vertical,
            self._monitor_for(group),
        )
        return tile_rect_for_side(side, work_area, partition, self._settings.gap)

    # ------------------------------------------------------------------
    # Operaciones
    # ------------------------------------------------------------------
    def tile_window(self, window: Optional[Window], rect: Rect) -> None:
        """
        Tilea *window* a *rect* (rectangulo logico, sin gaps).

        La ventana recibe *rect* reducido en gap por cada lado; el
        rectangulo sin gaps se guarda para los calculos posteriores.
        """
        if window is None or not window.is_valid:
            return

        if window.is_maximized:
            window.unmaximize()

        if not (window.allows_move and window.allows_resize):
            log.warning("tile_window: %r no permite move/resize", window)
            return

        # Por el raise en grupo la ventana enfocada puede quedar debajo
        window.raise_window()

        old_rect = window.frame_rect
        self._groups.mark_tiled(window, rect)

        target = rect.pad(self._settings.gap)
        window.move_resize_frame(target, animate=self._settings.use_animation)
        log.debug("tile_window %r: %s -> %s", window, old_rect, target)

        self._groups.update_tile_group(self.top_tile_group(ignore_top=False))

    def tile_to_side(self, window: Optional[Window], side: Side) -> None:
        """Atajo de teclado: tilear *window* hacia *side*."""
        if window is None or not window.is_valid:
            return
        self.tile_window(window, self.tile_rect_for_side(side, window))

    def maximize_both(self, window: Optional[Window]) -> None:
        """Maximiza *window* y la saca de su grupo."""
        if window is None or not window.is_valid:
            return
        if not (window.allows_move and window.allows_resize):
            return

        self._groups.remove_tile_group(window)
        window.raise_window()

        self._groups.mark_tiled(window, window.work_area)
        window.maximize()
        log.info("MAXIMIZED %r", window)

    def toggle_maximize(self, window: Optional[Window]) -> None:
        """Maximiza, o restaura si ya estaba maximizada por tiling."""
        if window is None or not window.is_valid:
            return
        tiled = self._groups.tiled_rect(window)
        if window.is_fully_maximized or rects_about_equal(
            tiled, window.work_area, self._settings.equal_margin
        ):
            self.restore_window_size(window, full_restore=True)
        else:
            self.maximize_both(window)

    def restore_window_size(self, window: Optional[Window], full_restore: bool = False) -> None:
        """
        Devuelve *window* a su tamano previo al tiling.

        Args:
            window:       Ventana a restaurar.
            full_restore: True -> posicion y tamano guardados.
                          False -> solo el tamano, manteniendo la posicion
                          relativa del puntero sobre la ventana (al
                          arrastrar una ventana tileada).
        """
        if window is None or not window.is_valid:
            return

        if window.is_maximized:
            window.unmaximize()

        old_rect = self._groups.pre_tile_rect(window)
        if old_rect is None or not (window.allows_move and window.allows_resize):
            return

        if full_restore:
            window.move_resize_frame(old_rect, animate=self._settings.use_animation)
        else:
            current = window.frame_rect
            pointer_x, _ = self._wm.pointer
            relative_x = (pointer_x - current.x) / current.w if current.w else 0.5
            new_x = round(pointer_x - old_rect.w * relative_x)
            window.move_resize_frame(Rect(new_x, current.y, old_rect.w, old_rect.h))

        self._groups.clear_tiling(window)
        log.info("RESTORED %r (completo=%s)", window, full_restore)

    def open_app_tiled(self, app: Optional[App], rect: Rect) -> Optional[Subscription]:
        """
        Abre una ventana nueva de *app* y la tilea a *rect*.

        Se espera a la primera ventana normal, visible en la barra de
        tareas, movible y redimensionable (las pantallas de carga se
        ignoran).  Si esa ventana no es de *app* se descarta.  La ventana
        se tilea cuando pinta su primer frame.

        Returns:
            La suscripcion pendiente a WINDOW_CREATED, o None si la app no
            puede abrir ventanas.
        """
        if app is None or not app.can_open_new_window():
            return None

        def _on_created(event: WMEvent, window: Optional[Window], wm: WindowManager) -> None:
            if not is_app_window(window):
                return

            created_token.cancel()

            # Si la deteccion fallo, no tilear una ventana ajena
            if not app.owns(window):
                log.info("open_app_tiled: %r no pertenece a %r, ignorada", window, app)
                return

            def _on_first_frame(event: WMEvent, window: Optional[Window], wm: WindowManager) -> None:
                frame_token.cancel()
                self.tile_window(window, rect)

            frame_token = wm.connect(window, WMEvent.FIRST_FRAME, _on_first_frame)

        created_token = self._wm.on(WMEvent.WINDOW_CREATED, _on_created)
        log.info("open_app_tiled: abriendo %r en %s", app, rect)
        app.open_new_window()
        return created_token

    # ------------------------------------------------------------------
    # Resize complementario
    # ------------------------------------------------------------------
    def begin_resize(self, window: Optional[Window], direction: GrabDirection) -> Optional[GrabSession]:
        """Empieza un arrastre de resize sobre una ventana de un grupo."""
        self._grab = None
        if window is None or not window.is_valid or not self._groups.is_tiled(window):
            return None

        peers = [self._wm.get(wid) for wid in sorted(self._groups.group_of(window))]
        self._grab = begin_grab(
            window,
            direction,
            [w for w in peers if w is not None],
            self._settings.gap,
            self._settings.equal_margin,
        )
        return self._grab

    def resize_tick(self, window: Optional[Window]) -> list[Window]:
        """Propaga el tamano actual de *window* a sus vecinas."""
        grab = self._grab
        if grab is None or window is None or not window.is_valid:
            return []
        if window.window_id != grab.window_id:
            return []
        return resize_complementing(grab, window.frame_rect, self._settings.gap, self._wm.get)

    def end_resize(self, window: Optional[Window]) -> None:
        """
        Termina el arrastre: los tiled rects se actualizan con los frames
        finales para que las decisiones posteriores vean la nueva division.
        """
        grab, self._grab = self._grab, None
        if grab is None:
            return

        gap = self._settings.gap
        for window_id in [grab.window_id] + grab.neighbors:
            w = self._wm.get(window_id)
            if w is None or not self._groups.is_tiled(w):
                continue
            self._groups.mark_tiled(w, w.frame_rect.grow(gap))

    # ------------------------------------------------------------------
    # Internos
    # ------------------------------------------------------------------
    def _group_rects(self, tile_group: list[Window]) -> list[Rect]:
        rects = []
        for window in tile_group:
            rect = self._groups.tiled_rect(window)
            if rect is not None:
                rects.append(rect)
        return rects

    def _monitor_for(self, tile_group: list[Window]) -> Optional[Monitor]:
        index = tile_group[0].monitor_index if tile_group else self._wm.current_monitor
        return self._wm.get_monitor(index)
