"""Grid partitioning of the adjusted source image."""

from __future__ import annotations

import math

from PIL import Image

from tile_mosaic.averaging import average_color
from tile_mosaic.errors import InvalidRegionError
from tile_mosaic.models import GridCell


def _nearest_multiple(value: int, step: int) -> int:
    # halves round up
    return math.floor(value / step + 0.5) * step


def adjusted_size(
    width: int,
    height: int,
    cell_width: int,
    cell_height: int,
) -> tuple[int, int]:
    """Round (width, height) to the nearest multiples of the cell size.

    The result may grow or shrink by up to half a cell, and is 0 for
    inputs smaller than half a cell.
    """
    if cell_width <= 0 or cell_height <= 0:
        raise ValueError(f"Cell size must be positive, got {cell_width}x{cell_height}")
    return _nearest_multiple(width, cell_width), _nearest_multiple(height, cell_height)


def partition(
    width: int,
    height: int,
    cell_width: int,
    cell_height: int,
) -> list[tuple[int, int]]:
    """Cell origins (x, y), rows top to bottom, columns left to right.

    Raises:
        ValueError: a cell dimension is not positive.
        InvalidRegionError: the image size is not an exact multiple of
            the cell size.
    """
    if cell_width <= 0 or cell_height <= 0:
        raise ValueError(f"Cell size must be positive, got {cell_width}x{cell_height}")
    if width % cell_width or height % cell_height:
        msg = (
            f"Image {width}x{height} is not a multiple of the "
            f"{cell_width}x{cell_height} cell size"
        )
        raise InvalidRegionError(msg)
    return [
        (x, y)
        for y in range(0, height, cell_height)
        for x in range(0, width, cell_width)
    ]


def split_into_cells(
    image: Image.Image,
    cell_width: int,
    cell_height: int,
) -> list[GridCell]:
    """Partition *image* and compute each cell's average colour."""
    return [
        GridCell(x=x, y=y, average=average_color(image, x, y, cell_width, cell_height))
        for x, y in partition(image.width, image.height, cell_width, cell_height)
    ]


def grid_shape(cells: list[GridCell]) -> tuple[int, int]:
    """(columns, rows) of a row-major cell list."""
    if not cells:
        return 0, 0
    columns = sum(1 for c in cells if c.y == cells[0].y)
    return columns, len(cells) // columns
