"""Value types shared by the matching engine."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import NamedTuple

from PIL import Image


class RgbColor(NamedTuple):
    """RGB triple, each channel a real number in [0, 255]."""

    r: float
    g: float
    b: float


class LabColor(NamedTuple):
    """CIE L*a*b* triple. Only produced by ``color_utils.rgb_to_lab``."""

    l: float  # noqa: E741
    a: float
    b: float


@dataclass(frozen=True, eq=False)
class Tile:
    """A candidate replacement image with its precomputed average colour."""

    image: Image.Image
    average: RgbColor
    source: Path | None = None

    @property
    def name(self) -> str:
        return self.source.name if self.source is not None else "<memory>"


@dataclass(eq=False)
class GridCell:
    """One fixed-size cell of the adjusted source image.

    ``tile`` and ``replacement`` are filled in once by the matcher.
    """

    x: int
    y: int
    average: RgbColor
    tile: Tile | None = None
    replacement: Image.Image | None = None

    @property
    def origin(self) -> tuple[int, int]:
        return self.x, self.y
