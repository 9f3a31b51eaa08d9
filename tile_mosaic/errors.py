"""Exception hierarchy raised by the mosaic engine."""

from __future__ import annotations


class MosaicError(Exception):
    """Base class for every failure that aborts a mosaic build."""


class NoCandidateTilesError(MosaicError):
    """The candidate pool is empty, so no cell can be matched."""


class ImageDecodeError(MosaicError):
    """A file could not be opened or parsed as an image."""


class InvalidRegionError(MosaicError):
    """A sample, crop or grid rectangle does not fit the image bounds."""


class OutputWriteError(MosaicError):
    """The composed mosaic could not be encoded or written."""
