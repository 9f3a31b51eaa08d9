"""
Tile Mosaic
===========

Rebuild an image as a grid of photo tiles. Each grid cell is replaced by
the candidate tile whose average colour is closest under CIEDE2000.
"""

__version__ = "1.0.0"

from tile_mosaic.averaging import average_color, image_average
from tile_mosaic.color_utils import color_distance, delta_e, rgb_to_lab
from tile_mosaic.config import MosaicConfig
from tile_mosaic.errors import (
    ImageDecodeError,
    InvalidRegionError,
    MosaicError,
    NoCandidateTilesError,
    OutputWriteError,
)
from tile_mosaic.grid import adjusted_size, partition
from tile_mosaic.matcher import TileMatcher, select_replacement
from tile_mosaic.models import GridCell, LabColor, RgbColor, Tile
from tile_mosaic.pipeline import MosaicResult, build_mosaic

__all__ = [
    "GridCell",
    "ImageDecodeError",
    "InvalidRegionError",
    "LabColor",
    "MosaicConfig",
    "MosaicError",
    "MosaicResult",
    "NoCandidateTilesError",
    "OutputWriteError",
    "RgbColor",
    "Tile",
    "TileMatcher",
    "adjusted_size",
    "average_color",
    "build_mosaic",
    "color_distance",
    "delta_e",
    "image_average",
    "partition",
    "rgb_to_lab",
    "select_replacement",
]
