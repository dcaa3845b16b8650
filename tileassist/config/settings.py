"""
tileassist.config.settings - Ajustes del motor de tiling.

Los ajustes los persiste un colaborador externo (el shell de escritorio);
aqui solo se leen.  Valores:

    gap             -> Pixeles de separacion entre ventanas tileadas
                       y el borde del area de trabajo.
    use_animation   -> Pedir transiciones animadas al sistema de ventanas.
                       No afecta a la geometria.
    ignore_margin   -> Franjas de rect_diff() con ancho o alto <= a este
                       valor se descartan.
    equal_margin    -> Margen de rects_about_equal().
    prefer_vertical -> Orientacion de rect_diff(); None = segun el monitor.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Optional

log = logging.getLogger(__name__)


class ConfigError(ValueError):
    """Archivo de configuracion o escena invalido."""


@dataclass(frozen=True, slots=True)
class TilingSettings:
    """Ajustes de solo lectura del motor de tiling."""

    gap: int = 0
    use_animation: bool = True
    ignore_margin: int = 35
    equal_margin: int = 15
    prefer_vertical: Optional[bool] = None

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> TilingSettings:
        """
        Construye los ajustes desde un dict, validando tipos.

        Las claves desconocidas se ignoran (con un warning); admite
        tanto "window-gaps" (nombre del shell) como "gap".

        Raises:
            ConfigError: Si algun valor tiene un tipo invalido.
        """
        if not isinstance(data, Mapping):
            raise ConfigError(f"Se esperaba un objeto, no {type(data).__name__}")

        aliases = {"window-gaps": "gap", "use-anim": "use_animation"}
        known = {f.name for f in fields(cls)}
        values: dict[str, Any] = {}

        for raw_key, value in data.items():
            key = aliases.get(raw_key, raw_key)
            if key not in known:
                log.warning("Ajuste desconocido ignorado: %s", raw_key)
                continue
            values[key] = value

        for key in ("gap", "ignore_margin", "equal_margin"):
            if key in values:
                value = values[key]
                if isinstance(value, bool) or not isinstance(value, int) or value < 0:
                    raise ConfigError(f"{key} debe ser un entero >= 0, no {value!r}")

        if "use_animation" in values and not isinstance(values["use_animation"], bool):
            raise ConfigError(f"use_animation debe ser booleano, no {values['use_animation']!r}")

        pv = values.get("prefer_vertical")
        if pv is not None and not isinstance(pv, bool):
            raise ConfigError(f"prefer_vertical debe ser booleano o null, no {pv!r}")

        return cls(**values)


def load_settings(path: str | Path) -> TilingSettings:
    """
    Lee los ajustes desde un archivo JSON.

    Raises:
        ConfigError: Si el archivo no existe, no es JSON o es invalido.
    """
    path = Path(path)
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError as exc:
        raise ConfigError(f"No existe el archivo de ajustes: {path}") from exc
    except json.JSONDecodeError as exc:
        raise ConfigError(f"JSON invalido en {path}: {exc}") from exc

    settings = TilingSettings.from_mapping(data)
    log.info("Ajustes cargados de %s: %s", path, settings)
    return settings
