"""Colour-space conversion and CIEDE2000 distance."""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np
from skimage.color import deltaE_ciede2000

from tile_mosaic.models import LabColor, RgbColor

# sRGB -> XYZ (D65), rows give X, Y, Z
_RGB_TO_XYZ = np.array(
    [
        [0.4124, 0.3576, 0.1805],
        [0.2126, 0.7152, 0.0722],
        [0.0193, 0.1192, 0.9505],
    ],
    dtype=np.float64,
)

# D65 reference white
_WHITE = np.array([95.047, 100.0, 108.883], dtype=np.float64)


def rgb_to_lab_array(rgb: np.ndarray) -> np.ndarray:
    """Convert (N, 3) RGB in [0, 255] to (N, 3) float64 CIELAB.

    Inputs may be integer or real valued; averaged colours are not
    re-quantised before conversion.
    """
    c = np.asarray(rgb, dtype=np.float64).reshape(-1, 3) / 255.0

    # inverse sRGB companding
    c = np.where(c > 0.04045, ((c + 0.055) / 1.055) ** 2.4, c / 12.92)
    c = c * 100.0

    t = (c @ _RGB_TO_XYZ.T) / _WHITE
    f = np.where(t > 0.008856, np.cbrt(t), 7.787 * t + 16.0 / 116.0)

    lab = np.empty_like(f)
    lab[:, 0] = 116.0 * f[:, 1] - 16.0
    lab[:, 1] = 500.0 * (f[:, 0] - f[:, 1])
    lab[:, 2] = 200.0 * (f[:, 1] - f[:, 2])
    return lab


def rgb_to_lab(color: RgbColor | Sequence[float]) -> LabColor:
    """Convert a single RGB colour to CIELAB."""
    l, a, b = rgb_to_lab_array(np.asarray(color, dtype=np.float64))[0]  # noqa: E741
    return LabColor(float(l), float(a), float(b))


def delta_e_array(query: LabColor | Sequence[float], candidates: np.ndarray) -> np.ndarray:
    """CIEDE2000 distance from one Lab colour to each row of *candidates*.

    Args:
        query:      a single Lab colour.
        candidates: (N, 3) float64 Lab colours.

    Returns:
        (N,) float64 distances, in candidate order.
    """
    cand = np.asarray(candidates, dtype=np.float64).reshape(-1, 3)
    if len(cand) == 0:
        return np.empty(0, dtype=np.float64)
    ref = np.tile(np.asarray(query, dtype=np.float64).reshape(1, 3), (len(cand), 1))
    return np.asarray(deltaE_ciede2000(ref, cand), dtype=np.float64)


def delta_e(lab1: LabColor | Sequence[float], lab2: LabColor | Sequence[float]) -> float:
    """CIEDE2000 distance between two Lab colours (0 for identical input)."""
    return float(delta_e_array(lab1, np.asarray(lab2, dtype=np.float64))[0])


def color_distance(
    rgb1: RgbColor | Sequence[float],
    rgb2: RgbColor | Sequence[float],
) -> float:
    """Perceptual distance between two RGB colours, via CIELAB."""
    return delta_e(rgb_to_lab(rgb1), rgb_to_lab(rgb2))
