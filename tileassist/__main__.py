"""
TileAssist - Entry point.

Run with:  python -m tileassist SCENE.json [--side left] [--window ID]

Loads a scene into the virtual desktop, then prints the topmost tile
group, the free screen space and, with --side, the rectangle a window
would be tiled to.  With --window the window is actually tiled and the
resulting state is printed.
"""

import argparse
import logging
import sys

from tileassist.config.scene import load_scene
from tileassist.config.settings import ConfigError, TilingSettings, load_settings
from tileassist.tiling.coordinator import TileCoordinator
from tileassist.tiling.tile_rect import Side


class SafeStreamHandler(logging.StreamHandler):
    """Handler that replaces unencodable characters instead of crashing."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            msg = self.format(record)
            enc = getattr(self.stream, "encoding", "utf-8") or "utf-8"
            safe = msg.encode(enc, errors="replace").decode(enc, errors="replace")
            self.stream.write(safe + self.terminator)
            self.flush()
        except Exception:
            self.handleError(record)


def setup_logging(verbose: bool = False) -> None:
    """Configure logging for the CLI."""
    fmt = "%(asctime)s.%(msecs)03d [%(levelname)s] %(name)s: %(message)s"
    handler = SafeStreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(fmt, datefmt="%H:%M:%S"))

    root = logging.getLogger()
    root.setLevel(logging.DEBUG if verbose else logging.WARNING)
    root.addHandler(handler)

    # Quiet down noisy loggers
    logging.getLogger("tileassist.core.filter").setLevel(logging.INFO)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tileassist",
        description="Compute tiling layouts for a desktop scene.",
    )
    parser.add_argument("scene", help="JSON scene with monitors and windows")
    parser.add_argument("--settings", help="JSON settings file (gap, thresholds)")
    parser.add_argument(
        "--side",
        choices=[side.value for side in Side],
        help="resolve the tile rect for this side",
    )
    parser.add_argument("--window", type=int, help="id of the window to tile to --side")
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.verbose)

    try:
        settings = load_settings(args.settings) if args.settings else TilingSettings()
        scene = load_scene(args.scene)
    except ConfigError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    wm = scene.desktop.manager
    coordinator = TileCoordinator(wm, settings)

    # Tiled windows are re-tiled bottom to top so groups form as in the scene
    for window in scene.tiled:
        coordinator.tile_window(window, window.frame_rect)

    group = coordinator.top_tile_group(ignore_top=False)
    print("Top tile group:")
    for window in group:
        print(f"    {window!r} {coordinator.groups.tiled_rect(window)}")
    print("Free screen rects:")
    for rect in coordinator.free_screen_rects(group):
        print(f"    {rect}")

    if args.side:
        side = Side(args.side)
        window = None
        if args.window is not None:
            window = wm.get(args.window)
            if window is None:
                print(f"error: unknown window {args.window}", file=sys.stderr)
                return 2

        rect = coordinator.tile_rect_for_side(side, window)
        print(f"Tile rect for {side.value}: {rect}")

        if window is not None:
            coordinator.tile_window(window, rect)
            print("")
            print(coordinator.groups.dump_state())

    return 0


if __name__ == "__main__":
    sys.exit(main())
