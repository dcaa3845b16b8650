"""
tileassist.config.scene - Carga de escenas para el escritorio virtual.

Una escena es un JSON con los monitores y las ventanas abiertas, de abajo
hacia arriba en el orden de apilamiento:

    {
        "monitors": [
            {"index": 0, "rect": [0, 0, 1920, 1080], "work": [0, 32, 1920, 1048]}
        ],
        "current_monitor": 0,
        "windows": [
            {"id": 1, "title": "Editor", "app": "editor",
             "rect": [0, 32, 960, 1048], "tiled": true},
            {"id": 2, "title": "Terminal", "rect": [960, 32, 960, 1048],
             "tiled": true}
        ]
    }

Los rectangulos son [x, y, w, h].  Las ventanas con "tiled": true se
registran como tileadas en su rect actual.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from tileassist.config.settings import ConfigError
from tileassist.core.virtual import VirtualDesktop, VirtualWindow
from tileassist.core.window import WindowType
from tileassist.tiling.monitor import Monitor
from tileassist.tiling.rect import Rect

log = logging.getLogger(__name__)


@dataclass
class Scene:
    """Escritorio virtual cargado + ventanas marcadas como tileadas."""

    desktop: VirtualDesktop
    tiled: list[VirtualWindow] = field(default_factory=list)


def _parse_rect(value: Any, what: str) -> Rect:
    if (
        not isinstance(value, (list, tuple))
        or len(value) != 4
        or not all(isinstance(v, int) and not isinstance(v, bool) for v in value)
    ):
        raise ConfigError(f"{what}: se esperaba [x, y, w, h] con enteros, no {value!r}")
    return Rect(*value)


def parse_scene(data: Mapping[str, Any]) -> Scene:
    """
    Construye un VirtualDesktop desde el dict de una escena.

    Raises:
        ConfigError: Si falta algun campo o tiene formato invalido.
    """
    if not isinstance(data, Mapping):
        raise ConfigError("La escena debe ser un objeto JSON")

    raw_monitors = data.get("monitors")
    if not isinstance(raw_monitors, list) or not raw_monitors:
        raise ConfigError("La escena necesita al menos un monitor")

    monitors: list[Monitor] = []
    for i, raw in enumerate(raw_monitors):
        if not isinstance(raw, Mapping):
            raise ConfigError(f"monitors[{i}] debe ser un objeto")
        full = _parse_rect(raw.get("rect"), f"monitors[{i}].rect")
        work = _parse_rect(raw.get("work", raw.get("rect")), f"monitors[{i}].work")
        monitors.append(Monitor(
            index=raw.get("index", i),
            full_rect=full,
            work_rect=work,
            is_primary=bool(raw.get("primary", i == 0)),
        ))

    desktop = VirtualDesktop(monitors)
    desktop.manager.set_current_monitor(data.get("current_monitor", monitors[0].index))

    scene = Scene(desktop)
    for i, raw in enumerate(data.get("windows", [])):
        if not isinstance(raw, Mapping):
            raise ConfigError(f"windows[{i}] debe ser un objeto")
        try:
            window_type = WindowType(raw.get("type", "normal"))
        except ValueError as exc:
            raise ConfigError(f"windows[{i}].type invalido: {raw.get('type')!r}") from exc

        window = desktop.add_window(
            _parse_rect(raw.get("rect"), f"windows[{i}].rect"),
            window_id=raw.get("id"),
            title=str(raw.get("title", "")),
            app_id=raw.get("app"),
            window_type=window_type,
            skip_taskbar=bool(raw.get("skip_taskbar", False)),
            allows_move=bool(raw.get("movable", True)),
            allows_resize=bool(raw.get("resizable", True)),
            monitor_index=raw.get("monitor", monitors[0].index),
        )
        if raw.get("maximized"):
            window.maximize()
        if raw.get("tiled"):
            scene.tiled.append(window)

    log.info(
        "Escena cargada: %d monitores, %d ventanas (%d tileadas)",
        len(monitors),
        desktop.manager.count,
        len(scene.tiled),
    )
    return scene


def load_scene(path: str | Path) -> Scene:
    """Lee una escena desde un archivo JSON."""
    path = Path(path)
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError as exc:
        raise ConfigError(f"No existe la escena: {path}") from exc
    except json.JSONDecodeError as exc:
        raise ConfigError(f"JSON invalido en {path}: {exc}") from exc
    return parse_scene(data)
