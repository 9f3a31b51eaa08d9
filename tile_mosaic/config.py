"""Centralised configuration via a frozen dataclass."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

RESAMPLE_FILTERS = ("nearest", "bilinear", "bicubic", "lanczos")


@dataclass(frozen=True)
class MosaicConfig:
    """All tuneable parameters for a mosaic run.

    Attributes:
        cell_width:   Width of one grid cell (and of each placed tile).
        cell_height:  Height of one grid cell (and of each placed tile).
        resample:     Filter used when resizing the source and the tiles.
        output_dir:   Default folder for results.
        output_name:  Default file name of the composed mosaic.
    """

    # Grid
    cell_width: int = 20
    cell_height: int = 20

    # Resizing
    resample: str = "lanczos"  # see RESAMPLE_FILTERS

    # Output
    output_dir: Path = field(default_factory=lambda: Path("output"))
    output_name: str = "image_collage.jpg"

    SUPPORTED_EXTENSIONS: frozenset[str] = frozenset(
        {".jpg", ".jpeg", ".png", ".bmp", ".tiff", ".tif", ".webp", ".jfif", ".gif"}
    )

    def __post_init__(self) -> None:
        if self.cell_width <= 0 or self.cell_height <= 0:
            msg = (
                f"Cell size must be positive, got "
                f"{self.cell_width}x{self.cell_height}"
            )
            raise ValueError(msg)
        if self.resample not in RESAMPLE_FILTERS:
            available = ", ".join(RESAMPLE_FILTERS)
            msg = f"Unknown resample filter '{self.resample}'. Available: {available}"
            raise ValueError(msg)

    @property
    def output_path(self) -> Path:
        return self.output_dir / self.output_name
