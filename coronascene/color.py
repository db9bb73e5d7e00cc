"""Conversion between RGB and YCbCr colour spaces."""

from __future__ import annotations

from typing import Sequence

import numpy as np

RGB_TO_YCBCR = np.array(
    [
        [0.299, -0.168736, 0.5, 0.0],
        [0.587, -0.331264, -0.418688, 0.0],
        [0.114, 0.5, -0.081312, 0.0],
        [0.0, 128.0, 128.0, 0.0],
    ]
)

YCBCR_TO_RGB = np.array(
    [
        [1.0, 1.0, 1.0, 0.0],
        [0.0, -0.344136, 1.772, 0.0],
        [1.402, -0.714136, 0.0, 0.0],
        [-179.456, 135.458816, -226.816, 0.0],
    ]
)


def _convert(values: Sequence[float], matrix: np.ndarray) -> tuple[float, float, float]:
    if len(values) != 3:
        raise ValueError(f"expected three colour components, got {len(values)}")
    result = np.array([*values, 1.0], dtype=float) @ matrix
    clamped = np.clip(result[:3] + 0.5, 0.0, 255.0)
    return tuple(float(c) for c in clamped)


def rgb_to_ycbcr(rgb: Sequence[float]) -> tuple[float, float, float]:
    """Convert an (r, g, b) triple in 0..255 to (y, cb, cr), clamped to 0..255."""
    return _convert(rgb, RGB_TO_YCBCR)


def ycbcr_to_rgb(ycbcr: Sequence[float]) -> tuple[float, float, float]:
    """Convert a (y, cb, cr) triple to (r, g, b), clamped to 0..255."""
    return _convert(ycbcr, YCBCR_TO_RGB)