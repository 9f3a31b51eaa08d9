"""Pillow-backed raster and file-system operations used by the engine."""

from __future__ import annotations

import contextlib
import logging
import os
from pathlib import Path

import numpy as np
from PIL import Image, UnidentifiedImageError

from tile_mosaic.errors import ImageDecodeError, InvalidRegionError, OutputWriteError
from tile_mosaic.models import RgbColor

logger = logging.getLogger(__name__)

_RESAMPLE = {
    "nearest": Image.NEAREST,
    "bilinear": Image.BILINEAR,
    "bicubic": Image.BICUBIC,
    "lanczos": Image.LANCZOS,
}


def _check_region(image: Image.Image, x: int, y: int, width: int, height: int) -> None:
    if (
        x < 0
        or y < 0
        or width < 0
        or height < 0
        or x + width > image.width
        or y + height > image.height
    ):
        msg = (
            f"Region {width}x{height}+{x}+{y} lies outside "
            f"{image.width}x{image.height} image"
        )
        raise InvalidRegionError(msg)


# -- Files -------------------------------------------------------------

def list_files(folder: str | Path, extensions: frozenset[str]) -> list[Path]:
    """Image files in *folder*, sorted by name. Missing folder -> ``[]``."""
    folder = Path(folder)
    if not folder.is_dir():
        return []
    return sorted(
        f for f in folder.iterdir()
        if f.is_file() and f.suffix.lower() in extensions
    )


def load_image(path: str | Path) -> Image.Image:
    """Open *path* and return a fully decoded RGB image.

    Raises:
        ImageDecodeError: the file is missing, is not a readable image, or
            exceeds Pillow's decompression-bomb pixel limit.
    """
    try:
        with Image.open(path) as img:
            return img.convert("RGB")
    except UnidentifiedImageError as exc:
        raise ImageDecodeError(f"Not an image file: {path}") from exc
    except Image.DecompressionBombError as exc:
        raise ImageDecodeError(f"Image too large to decode {path}: {exc}") from exc
    except OSError as exc:
        raise ImageDecodeError(f"Cannot read image {path}: {exc}") from exc


def save_image(image: Image.Image, path: str | Path) -> None:
    """Encode *image* to *path*; format follows the file extension.

    The image is encoded to a sibling ``.part`` file and moved over *path*
    only once encoding succeeded, so a failed save never touches a file
    already at *path*.

    Raises:
        OutputWriteError: the image is empty, the extension is unknown, or
            the file cannot be written.
    """
    path = Path(path)
    if image.width == 0 or image.height == 0:
        msg = f"Cannot encode an empty {image.width}x{image.height} image to {path}"
        raise OutputWriteError(msg)
    fmt = Image.registered_extensions().get(path.suffix.lower())
    if fmt is None:
        raise OutputWriteError(f"Unknown image format for {path}")

    part = path.with_name(f".{path.name}.part")
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        image.save(part, format=fmt)
        os.replace(part, path)
    except (OSError, ValueError, KeyError) as exc:
        with contextlib.suppress(OSError):
            part.unlink(missing_ok=True)
        raise OutputWriteError(f"Cannot write {path}: {exc}") from exc
    logger.debug("Wrote %s (%dx%d)", path, image.width, image.height)


# -- Raster ------------------------------------------------------------

def dimensions(image: Image.Image) -> tuple[int, int]:
    """(width, height) of *image*."""
    return image.width, image.height


def sample(image: Image.Image, x: int, y: int) -> RgbColor:
    """RGB value of the pixel at (x, y)."""
    _check_region(image, x, y, 1, 1)
    r, g, b = image.getpixel((x, y))[:3]
    return RgbColor(r, g, b)


def crop(image: Image.Image, x: int, y: int, width: int, height: int) -> Image.Image:
    """New image holding the rectangle [x, x+width) x [y, y+height)."""
    _check_region(image, x, y, width, height)
    return image.crop((x, y, x + width, y + height))


def resize(
    image: Image.Image,
    width: int,
    height: int,
    resample: str = "lanczos",
) -> Image.Image:
    """New image scaled to (width, height).

    A zero target dimension gives an empty image rather than an error.
    """
    if width == 0 or height == 0:
        return Image.new(image.mode, (width, height))
    if image.size == (width, height):
        return image.copy()
    return image.resize((width, height), _RESAMPLE[resample])


def composite(target: Image.Image, source: Image.Image, x: int, y: int) -> None:
    """Paste *source* into *target* at (x, y), overwriting in place."""
    _check_region(target, x, y, source.width, source.height)
    target.paste(source, (x, y))


def to_array(image: Image.Image) -> np.ndarray:
    """(H, W, 3) uint8 view of an RGB image."""
    return np.asarray(image.convert("RGB"), dtype=np.uint8)
