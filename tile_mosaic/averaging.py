"""Mean colour of an image region."""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

import numpy as np
from PIL import Image

from tile_mosaic.errors import InvalidRegionError
from tile_mosaic.image_io import crop, dimensions, to_array
from tile_mosaic.models import RgbColor, Tile


def average_color(
    image: Image.Image,
    x: int,
    y: int,
    width: int,
    height: int,
) -> RgbColor:
    """Arithmetic mean RGB over [x, x+width) x [y, y+height).

    Channel sums are accumulated in float64 and divided by the pixel
    count; the result is not rounded back to integers.

    Raises:
        InvalidRegionError: the rectangle is empty or exceeds the image.
    """
    if width <= 0 or height <= 0:
        raise InvalidRegionError(f"Cannot average an empty {width}x{height} region")
    pixels = to_array(crop(image, x, y, width, height)).reshape(-1, 3)
    sums = pixels.astype(np.float64).sum(axis=0)
    r, g, b = sums / len(pixels)
    return RgbColor(float(r), float(g), float(b))


def image_average(image: Image.Image) -> RgbColor:
    """Mean RGB of the whole image."""
    width, height = dimensions(image)
    return average_color(image, 0, 0, width, height)


def build_tiles(
    images: Iterable[Image.Image],
    sources: Iterable[Path | None] | None = None,
) -> list[Tile]:
    """Pair each candidate image with its whole-image average colour."""
    images = list(images)
    paths = list(sources) if sources is not None else [None] * len(images)
    return [
        Tile(image=img, average=image_average(img), source=src)
        for img, src in zip(images, paths, strict=True)
    ]
