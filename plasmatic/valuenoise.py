"""Hashed value noise with cosine smoothing and a table-driven sine."""

from __future__ import annotations

import math

TAU = 2 * math.pi


class SinTable:
    """Sine and cosine looked up from a table of evenly spaced samples."""

    def __init__(self, size: int = 512) -> None:
        if size < 1:
            raise ValueError("table size must be positive")
        self.size = size
        step = TAU / size
        self._sin = [math.sin(step * i) for i in range(size)]
        self._cos = [math.cos(step * i) for i in range(size)]

    def _index(self, phase: float) -> int:
        phase = math.fmod(phase, TAU)
        if phase < 0:
            phase += TAU
        return int(phase / TAU * self.size) % self.size

    def sin(self, phase: float) -> float:
        """Approximate sine of a phase in radians."""
        return self._sin[self._index(phase)]

    def cos(self, phase: float) -> float:
        """Approximate cosine of a phase in radians."""
        return self._cos[self._index(phase)]


_DEFAULT_TABLE = SinTable()


def raw_noise(n: int) -> float:
    """Hash an integer to a pseudo-random value in (-1, 1]."""
    n = (n << 13) ^ n
    hashed = (n * (n * n * 15731 + 789221) + 1376312589) & 0x7FFFFFFF
    return 1.0 - hashed / 1073741824.0


def noise3d(x: int, y: int, z: int, octave: int, seed: int) -> float:
    """Noise value at an integer lattice point for an octave and seed."""
    return raw_noise(x * 1919 + y * 31337 + z * 7669 + octave * 3463 + seed * 13397)


def interpolate(a: float, b: float, x: float, table: SinTable | None = None) -> float:
    """Cosine interpolation from a to b at fraction x."""
    table = table or _DEFAULT_TABLE
    f = (1.0 - table.cos(x * math.pi)) * 0.5
    return a * (1.0 - f) + b * f


def smooth3d(
    x: float, y: float, z: float, octave: int, seed: int, table: SinTable | None = None
) -> float:
    """Smoothly interpolated noise between the eight surrounding lattice points."""
    table = table or _DEFAULT_TABLE
    ix, iy, iz = int(x), int(y), int(z)
    fx, fy, fz = x - ix, y - iy, z - iz

    def corner(dx: int, dy: int, dz: int) -> float:
        return noise3d(ix + dx, iy + dy, iz + dz, octave, seed)

    i1 = interpolate(corner(0, 0, 0), corner(1, 0, 0), fx, table)
    i2 = interpolate(corner(0, 1, 0), corner(1, 1, 0), fx, table)
    i3 = interpolate(corner(0, 0, 1), corner(1, 0, 1), fx, table)
    i4 = interpolate(corner(0, 1, 1), corner(1, 1, 1), fx, table)

    j1 = interpolate(i1, i2, fy, table)
    j2 = interpolate(i3, i4, fy, table)
    return interpolate(j1, j2, fz, table)


def pnoise3d(
    x: float,
    y: float,
    z: float,
    persistence: float,
    octaves: int,
    seed: int,
    table: SinTable | None = None,
) -> float:
    """Sum of octaves of smooth noise, each at half the frequency of the last."""
    total = 0.0
    frequency = 1.0
    amplitude = 1.0
    for octave in range(octaves):
        total += smooth3d(x * frequency, y * frequency, z * frequency, octave, seed, table) * amplitude
        frequency /= 2
        amplitude *= persistence
    return total