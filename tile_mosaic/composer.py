"""Assemble the output raster from matched grid cells."""

from __future__ import annotations

from collections.abc import Sequence

from PIL import Image

from tile_mosaic.errors import InvalidRegionError
from tile_mosaic.image_io import composite
from tile_mosaic.models import GridCell


def compose(canvas: Image.Image, cells: Sequence[GridCell]) -> Image.Image:
    """Paste each cell's replacement at its origin, in row-major order.

    *canvas* is modified in place and returned.
    """
    for cell in cells:
        if cell.replacement is None:
            raise InvalidRegionError(f"Cell at {cell.origin} has no replacement tile")
        composite(canvas, cell.replacement, cell.x, cell.y)
    return canvas
