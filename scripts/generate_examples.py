"""
Generate PNG previews of the grid layout examples.

Builds eight rectangles of increasing size and lays them out with each
grid variant, plus a checkerboard generated with grid_with().
"""

import argparse
import logging
import sys
from pathlib import Path

# Add src to path so we can import diagram_grid
project_root = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(project_root / "src"))

from diagram_grid import GridConfig, arrange, grid_with
from diagram_grid.core.models import Scene
from diagram_grid.output import save_preview

# Setup logging
logging.basicConfig(level=logging.INFO, format='%(message)s')
logger = logging.getLogger("generate_examples")

PALETTE = [
    "#e57373", "#f06292", "#ba68c8", "#7986cb",
    "#4fc3f7", "#4db6ac", "#aed581", "#ffb74d",
]


def example_shapes():
    """Eight rectangles, sizes 3..10, each labelled with its size."""
    return [
        Scene.rect(n * 4, n * 3, fill=PALETTE[i % len(PALETTE)], label=str(n))
        for i, n in enumerate(range(3, 11))
    ]


def checker(x: int, y: int) -> Scene:
    fill = "black" if (x + y) % 2 else "white"
    return Scene.rect(10, 10, fill=fill, label=f"{x},{y}")


def main() -> int:
    parser = argparse.ArgumentParser(description="Render grid layout examples to PNG")
    parser.add_argument(
        "--output-dir",
        type=Path,
        default=project_root / "workspace" / "examples",
        help="Directory for the generated PNG files",
    )
    parser.add_argument("--scale", type=float, default=4.0, help="Pixels per scene unit")
    args = parser.parse_args()

    shapes = example_shapes()
    examples = {
        "grid_cat": arrange(shapes),
        "grid_cat_4": arrange(shapes, GridConfig(columns=4)),
        "grid_snake": arrange(shapes, GridConfig(snake=True)),
        "grid_snake_4": arrange(shapes, GridConfig(columns=4, snake=True)),
        "grid_with_checker": grid_with(checker, (8, 8)),
    }

    for name, scene in examples.items():
        save_preview(scene, args.output_dir / f"{name}.png", scale=args.scale)

    logger.info(f"Generated {len(examples)} examples in {args.output_dir}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
