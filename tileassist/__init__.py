"""
TileAssist - automatic window tiling engine.

Run with:  python -m tileassist SCENE.json
"""

__version__ = "0.1.0"
