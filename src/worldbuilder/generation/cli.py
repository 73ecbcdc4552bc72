"""Command-line preview of rendered maps."""

import argparse
import logging
import sys
import time

import structlog

from ..state import MapInstance
from ..terrain_types import FeatureType, TerrainType, feature_from_code, terrain_from_code
from .config import RenderConfig
from .declaration import MapDeclaration


def format_grid(instance: MapInstance) -> str:
    """Render a grid as text, one glyph per tile, features over terrain."""
    lines = []
    for y in range(instance.num_vertical):
        row = []
        for x in range(instance.num_horizontal):
            feature = feature_from_code(instance.feature_array[y, x])
            terrain = terrain_from_code(instance.terrain_array[y, x])
            row.append(feature.glyph or terrain.glyph)
        lines.append("".join(row))
    return "\n".join(lines)


def main() -> None:
    """CLI entry point for map previews."""
    parser = argparse.ArgumentParser(
        description="Render a map declaration and print it as text"
    )
    parser.add_argument(
        "--config",
        type=str,
        default="default",
        help="Declaration name or path to TOML file (default: default)",
    )
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    parser.add_argument("--width", type=int, default=None, help="Grid width in tiles")
    parser.add_argument("--height", type=int, default=None, help="Grid height in tiles")
    parser.add_argument("--tile-width", type=int, default=None, help="Tile width in pixels")
    parser.add_argument(
        "--tile-height", type=int, default=None, help="Tile height in pixels"
    )
    parser.add_argument(
        "--frames",
        type=int,
        default=0,
        help="Run the render worker for this many frames, one seed per frame",
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Verbose logging"
    )

    args = parser.parse_args()

    level = logging.DEBUG if args.verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )

    # Import here to avoid slow startup for --help
    from ..config import find_declaration, load_declaration
    from .generator import grid_stats, render_config

    declaration, render = load_declaration(find_declaration(args.config))

    overrides = {
        "seed": args.seed,
        "num_horizontal": args.width,
        "num_vertical": args.height,
        "tile_width": args.tile_width,
        "tile_height": args.tile_height,
    }
    render = RenderConfig.model_validate(
        {**render.model_dump(), **{k: v for k, v in overrides.items() if v is not None}}
    )

    start_time = time.time()
    if args.frames > 0:
        instance = _run_worker(declaration, render, args.frames, level)
    else:
        instance = render_config(declaration, render)
    gen_time = time.time() - start_time

    print(format_grid(instance))
    print()
    counts = grid_stats(instance)
    for terrain_type in TerrainType:
        print(f"{terrain_type.glyph} {terrain_type.value}: {counts[terrain_type.value]}")
    for feature_type in FeatureType:
        if feature_type is not FeatureType.NONE:
            print(f"{feature_type.glyph} {feature_type.value}: {counts[feature_type.value]}")
    print(f"Rendered in {gen_time:.2f}s")


def _run_worker(
    declaration: MapDeclaration, render: RenderConfig, frames: int, level: int
) -> MapInstance:
    """Drive the render worker through ``frames`` consecutive seeds."""
    from ..worker import RenderWorker

    structlog.configure(
        processors=[
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.PrintLoggerFactory(sys.stderr),
    )

    worker = RenderWorker(declaration, render)
    worker.start()
    try:
        for frame in range(frames):
            worker.set_new_status(render.model_copy(update={"seed": render.seed + frame}))
            target = worker.frames_rendered + 2
            while worker.is_running and worker.frames_rendered < target:
                time.sleep(0.005)
    finally:
        worker.stop()
        worker.join()

    snapshot = worker.get_current_snapshot()
    if snapshot is None:
        raise RuntimeError("Render worker stopped before publishing a frame")
    return snapshot


if __name__ == "__main__":
    main()
