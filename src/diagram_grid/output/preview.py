"""
Module: output.preview

Purpose:
    Rasterize a Scene to a PIL image for inspection. Only visible
    primitives are drawn; phantom placeholders occupy space in the
    image but leave the background untouched.

Key Functions:
    - render_preview(): Scene -> PIL Image
    - save_preview(): Render and write to disk

Dependencies:
    - PIL: Image drawing
    - core.models: Scene

Used By:
    - scripts/generate_examples.py
"""

from __future__ import annotations

import logging
import math
from pathlib import Path
from typing import Optional

from PIL import Image, ImageDraw

from diagram_grid.core.models import Scene

logger = logging.getLogger(__name__)

# Default settings
DEFAULT_BACKGROUND = "white"
DEFAULT_FILL = "lightgray"
DEFAULT_OUTLINE = "black"


def render_preview(
    scene: Scene,
    *,
    scale: float = 1.0,
    background: str = DEFAULT_BACKGROUND,
    default_fill: str = DEFAULT_FILL,
    outline: Optional[str] = DEFAULT_OUTLINE,
) -> Image.Image:
    """
    Render the visible primitives of a scene.

    The image covers the scene's envelope; one scene unit maps to
    ``scale`` pixels.

    Args:
        scene: Scene to render (not modified)
        scale: Pixels per scene unit
        background: Background colour
        default_fill: Fill for primitives without their own colour
        outline: Outline colour, or None for no outline

    Returns:
        RGB image; 1x1 background pixel for an empty or zero-size scene

    Raises:
        ValueError: If scale is not positive

    Example:
        >>> img = render_preview(Scene.rect(20, 10), scale=2.0)
        >>> img.size
        (40, 20)
    """
    if scale <= 0:
        raise ValueError(f"scale must be positive: {scale}")

    envelope = scene.envelope
    if envelope is None or envelope.width == 0 or envelope.height == 0:
        return Image.new("RGB", (1, 1), background)

    size = (
        max(1, math.ceil(envelope.width * scale)),
        max(1, math.ceil(envelope.height * scale)),
    )
    image = Image.new("RGB", size, background)
    draw = ImageDraw.Draw(image)

    for primitive in scene.visible_primitives:
        box = primitive.box
        x0 = round((box.left - envelope.left) * scale)
        y0 = round((box.top - envelope.top) * scale)
        # PIL rectangle corners are inclusive
        x1 = max(x0, round((box.right - envelope.left) * scale) - 1)
        y1 = max(y0, round((box.bottom - envelope.top) * scale) - 1)
        draw.rectangle(
            [x0, y0, x1, y1],
            fill=primitive.fill or default_fill,
            outline=outline,
        )

    return image


def save_preview(scene: Scene, output_path: Path, **kwargs) -> Path:
    """
    Render ``scene`` and write it to ``output_path``.

    Args:
        scene: Scene to render
        output_path: Destination file (format from the suffix)
        **kwargs: Passed to render_preview()

    Returns:
        The path written

    Raises:
        IOError: If the image cannot be written
    """
    output_path.parent.mkdir(parents=True, exist_ok=True)
    image = render_preview(scene, **kwargs)
    image.save(output_path)
    logger.info(f"Saved {image.width}x{image.height} preview to {output_path}")
    return output_path
