"""Ordered (Bayer 4x4) dithering of values onto 256 palette levels."""

from __future__ import annotations

BAYER4X4: tuple[tuple[int, ...], ...] = (
    (0, 8, 2, 10),
    (12, 4, 14, 6),
    (3, 11, 1, 9),
    (15, 7, 13, 5),
)


def bayer_threshold(x: int, y: int) -> float:
    """Threshold in (0, 1) for the screen position (x, y)."""
    return (BAYER4X4[y % 4][x % 4] + 0.5) * (1.0 / 16.0)


def dither_level(value: float, x: int, y: int) -> int:
    """Quantise a value in [0, 1] to a level 0..255, rounding up by the Bayer threshold."""
    level = int(value * 255)
    frac = value * 255 - level
    if frac > bayer_threshold(x, y) and level < 255:
        level += 1
    return level