"""Nearest-colour tile selection per grid cell."""

from __future__ import annotations

import logging
import time
from collections.abc import Sequence

import numpy as np
from PIL import Image

from tile_mosaic.color_utils import delta_e_array, rgb_to_lab, rgb_to_lab_array
from tile_mosaic.errors import NoCandidateTilesError
from tile_mosaic.image_io import resize
from tile_mosaic.models import GridCell, RgbColor, Tile

logger = logging.getLogger(__name__)


class TileMatcher:
    """Brute-force CIEDE2000 search over a fixed candidate pool.

    Candidate averages are converted to CIELAB once, on construction.
    Every query scans all candidates; among equal minimum distances the
    candidate that comes first in the pool wins.
    """

    def __init__(self, tiles: Sequence[Tile]) -> None:
        if not tiles:
            raise NoCandidateTilesError("No candidate tiles to match against")
        self.tiles = tuple(tiles)
        self._labs = rgb_to_lab_array(np.array([t.average for t in self.tiles]))

    def __len__(self) -> int:
        return len(self.tiles)

    def distances(self, color: RgbColor | Sequence[float]) -> np.ndarray:
        """(N,) distances from *color* to every candidate, in pool order."""
        return delta_e_array(rgb_to_lab(color), self._labs)

    def select_index(self, color: RgbColor | Sequence[float]) -> int:
        # argmin returns the first of several equal minima
        return int(np.argmin(self.distances(color)))

    def select(self, color: RgbColor | Sequence[float]) -> Tile:
        return self.tiles[self.select_index(color)]


def select_replacement(
    cell_average: RgbColor | Sequence[float],
    candidates: Sequence[Tile],
) -> Tile:
    """Candidate whose average colour is perceptually closest to *cell_average*.

    Raises:
        NoCandidateTilesError: *candidates* is empty.
    """
    return TileMatcher(candidates).select(cell_average)


def match_cells(
    cells: Sequence[GridCell],
    tiles: Sequence[Tile],
    cell_width: int,
    cell_height: int,
    resample: str = "lanczos",
) -> list[GridCell]:
    """Assign every cell its closest tile and a resized copy of that tile.

    Args:
        cells:       row-major grid cells with averages computed.
        tiles:       the candidate pool.
        cell_width:  width each replacement is resized to.
        cell_height: height each replacement is resized to.
        resample:    Pillow filter name for the resize.

    Returns:
        The same cells, now carrying ``tile`` and ``replacement``.
    """
    matcher = TileMatcher(tiles)

    logger.info("Matching %d cells against %d tiles …", len(cells), len(matcher))
    t0 = time.perf_counter()

    resized: dict[int, Image.Image] = {}
    for cell in cells:
        idx = matcher.select_index(cell.average)
        if idx not in resized:
            resized[idx] = resize(matcher.tiles[idx].image, cell_width, cell_height, resample)
        cell.tile = matcher.tiles[idx]
        cell.replacement = resized[idx]

    logger.info(
        "Matching done  (%d distinct tiles, %.1f s)",
        len(resized), time.perf_counter() - t0,
    )
    return list(cells)
