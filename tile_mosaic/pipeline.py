"""End-to-end mosaic build: load, partition, match, compose, save."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from pathlib import Path

from PIL import Image

from tile_mosaic.averaging import build_tiles
from tile_mosaic.composer import compose
from tile_mosaic.config import MosaicConfig
from tile_mosaic.errors import NoCandidateTilesError
from tile_mosaic.grid import adjusted_size, grid_shape, split_into_cells
from tile_mosaic.image_io import dimensions, list_files, load_image, resize, save_image
from tile_mosaic.matcher import match_cells
from tile_mosaic.models import GridCell, Tile

logger = logging.getLogger(__name__)


@dataclass
class MosaicResult:
    """Everything produced by one build."""

    cells: list[GridCell]
    image: Image.Image
    output_path: Path | None
    columns: int
    rows: int

    @property
    def selections(self) -> list[str]:
        """Name of the tile chosen for each cell, row-major."""
        return [c.tile.name if c.tile is not None else "" for c in self.cells]


def load_tiles(tile_dir: str | Path, cfg: MosaicConfig) -> list[Tile]:
    """Load every candidate image in *tile_dir* and compute its average.

    Raises:
        NoCandidateTilesError: the folder holds no image files.
        ImageDecodeError: one of the files cannot be decoded.
    """
    paths = list_files(tile_dir, cfg.SUPPORTED_EXTENSIONS)
    if not paths:
        raise NoCandidateTilesError(f"No candidate tile images found in {tile_dir}")

    t0 = time.perf_counter()
    tiles = build_tiles((load_image(p) for p in paths), paths)
    logger.info(
        "Loaded %d tiles from %s  (%.1f s)",
        len(tiles), tile_dir, time.perf_counter() - t0,
    )
    return tiles


def build_mosaic_from_images(
    source: Image.Image,
    tiles: list[Tile],
    cfg: MosaicConfig,
) -> tuple[list[GridCell], Image.Image]:
    """Run the matching engine on already-loaded images.

    Returns:
        The matched grid cells and the composed mosaic.
    """
    cw, ch = cfg.cell_width, cfg.cell_height
    src_w, src_h = dimensions(source)
    w, h = adjusted_size(src_w, src_h, cw, ch)
    logger.info("Source %dx%d adjusted to %dx%d", src_w, src_h, w, h)

    canvas = resize(source, w, h, cfg.resample)
    cells = split_into_cells(canvas, cw, ch)
    cells = match_cells(cells, tiles, cw, ch, cfg.resample)
    return cells, compose(canvas, cells)


def build_mosaic(
    source_path: str | Path,
    tile_dir: str | Path,
    output_path: str | Path | None = None,
    cfg: MosaicConfig | None = None,
) -> MosaicResult:
    """Build a photo-mosaic of *source_path* out of the images in *tile_dir*.

    Args:
        source_path: Image to reproduce.
        tile_dir:    Folder of candidate tile images.
        output_path: Where to write the mosaic; ``None`` skips saving.
        cfg:         Run parameters (defaults to ``MosaicConfig()``).

    Returns:
        A :class:`MosaicResult`.  Nothing is written unless every step
        succeeded.
    """
    cfg = cfg or MosaicConfig()

    tiles = load_tiles(tile_dir, cfg)
    source = load_image(source_path)

    cells, mosaic = build_mosaic_from_images(source, tiles, cfg)
    columns, rows = grid_shape(cells)
    logger.info("Grid: %d x %d cells of %dx%d", columns, rows, cfg.cell_width, cfg.cell_height)

    out = Path(output_path) if output_path is not None else None
    if out is not None:
        save_image(mosaic, out)
        logger.info("Mosaic saved: %s", out)

    return MosaicResult(cells=cells, image=mosaic, output_path=out, columns=columns, rows=rows)
