"""
tileassist.config - Ajustes y escenas.

    - settings : TilingSettings (gap, animacion, umbrales)
    - scene    : Carga de escenas JSON para el escritorio virtual
"""

from tileassist.config.settings import ConfigError, TilingSettings, load_settings

__all__ = ["ConfigError", "TilingSettings", "load_settings"]
