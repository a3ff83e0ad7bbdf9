"""Basic rasterisation helpers."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Point:
    """A point in screen coordinates."""

    x: int
    y: int


def interpolate(i0: float, d0: float, i1: float, d1: float) -> list[float]:
    """Dependent values d for each unit step of the independent value from i0 to i1."""
    if i0 == i1:
        return [d0]
    slope = (d1 - d0) / (i1 - i0)
    values = []
    d = d0
    i = i0
    while i <= i1:
        values.append(d)
        d += slope
        i += 1
    return values