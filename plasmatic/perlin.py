"""Fixed-point improved Perlin noise, where 1.0 is represented by 2**16."""

from __future__ import annotations

ONE = 1 << 16
"""Fixed-point representation of 1.0."""

_PERM_HEX = (
    "97 a0 89 5b 5a 0f 83 0d c9 5f 60 35 c2 e9 07 e1"
    "8c 24 67 1e 45 8e 08 63 25 f0 15 0a 17 be 06 94"
    "f7 78 ea 4b 00 1a c5 3e 5e fc db cb 75 23 0b 20"
    "39 b1 21 58 ed 95 38 57 ae 14 7d 88 ab a8 44 af"
    "4a a5 47 86 8b 30 1b a6 4d 92 9e e7 53 6f e5 7a"
    "3c d3 85 e6 dc 69 5c 29 37 2e f5 28 f4 66 8f 36"
    "41 19 3f a1 01 d8 50 49 d1 4c 84 bb d0 59 12 a9"
    "c8 c4 87 82 74 bc 9f 56 a4 64 6d c6 ad ba 03 40"
    "34 d9 e2 fa 7c 7b 05 ca 26 93 76 7e ff 52 55 d4"
    "cf ce 3b e3 2f 10 3a 11 b6 bd 1c 2a df b7 aa d5"
    "77 f8 98 02 2c 9a a3 46 dd 99 65 9b a7 2b ac 09"
    "81 16 27 fd 13 62 6c 6e 4f 71 e0 e8 b2 b9 70 68"
    "da f6 61 e4 fb 22 f2 c1 ee d2 90 0c bf b3 a2 f1"
    "51 33 91 eb f9 0e ef 6b 31 c0 d6 1f b5 c7 6a 9d"
    "b8 54 cc b0 73 79 32 2d 7f 04 96 fe 8a ec cd 5d"
    "de 72 43 1d 18 48 f3 8d 80 c3 4e 42 d7 3d 9c b4"
)

_PERM = tuple(bytes.fromhex(_PERM_HEX))

PERMUTATION: tuple[int, ...] = _PERM + _PERM
"""The permutation table, repeated so that lookups up to index 511 need no wrapping."""


def _fade_sample(i: int) -> int:
    """Sample 6t^5 - 15t^4 + 10t^3 at t = i/256, scaled to 12 bits and floored."""
    return (6 * i**5 - 3840 * i**4 + 655360 * i**3) >> 28


FADE_TABLE: tuple[int, ...] = tuple(_fade_sample(i) for i in range(256))
"""Fade curve samples in the range 0..4095 (12-bit fixed point)."""


def lerp(t: int, a: int, b: int) -> int:
    """Interpolate from a to b by t, a 12-bit fixed-point fraction."""
    return a + ((t * (b - a)) >> 12)


def grad(hash_value: int, x: int, y: int, z: int) -> int:
    """Dot the offset (x, y, z) with one of 12 gradients chosen by the hash."""
    h = hash_value & 15
    u = x if h < 8 else y
    if h < 4:
        v = y
    elif h in (12, 14):
        v = x
    else:
        v = z
    return (u if h & 1 == 0 else -u) + (v if h & 2 == 0 else -v)


def fade(t: int) -> int:
    """Return the fade curve for a 16-bit fraction, as a value in 0..4095."""
    index = t >> 8
    t0 = FADE_TABLE[index]
    t1 = FADE_TABLE[min(255, index + 1)]
    return t0 + (((t & 255) * (t1 - t0)) >> 8)


def noise3d(x: int, y: int, z: int) -> int:
    """Improved Perlin noise at a fixed-point coordinate, as a fixed-point value."""
    p = PERMUTATION
    cell_x = (x >> 16) & 255
    cell_y = (y >> 16) & 255
    cell_z = (z >> 16) & 255
    n = ONE
    fx, fy, fz = x & (n - 1), y & (n - 1), z & (n - 1)

    u, v, w = fade(fx), fade(fy), fade(fz)

    row = p[cell_x] + cell_y
    row_next = p[cell_x + 1] + cell_y
    c000 = p[row] + cell_z
    c010 = p[row + 1] + cell_z
    c100 = p[row_next] + cell_z
    c110 = p[row_next + 1] + cell_z

    near = lerp(
        v,
        lerp(u, grad(p[c000], fx, fy, fz), grad(p[c100], fx - n, fy, fz)),
        lerp(u, grad(p[c010], fx, fy - n, fz), grad(p[c110], fx - n, fy - n, fz)),
    )
    far = lerp(
        v,
        lerp(u, grad(p[c000 + 1], fx, fy, fz - n), grad(p[c100 + 1], fx - n, fy, fz - n)),
        lerp(
            u,
            grad(p[c010 + 1], fx, fy - n, fz - n),
            grad(p[c110 + 1], fx - n, fy - n, fz - n),
        ),
    )
    return lerp(w, near, far)


def noise3df(x: float, y: float, z: float) -> float:
    """Perlin noise at a real coordinate, as a real value."""
    return noise3d(int(x * ONE), int(y * ONE), int(z * ONE)) / ONE


def sum_octaves(
    num_iters: int,
    x: float,
    y: float,
    time: float,
    persistence: float,
    scale: float,
    low: int,
    high: int,
) -> float:
    """Sum octaves of noise over (x, y) at a time slice and map them onto [low, high]."""
    if num_iters < 1:
        raise ValueError("num_iters must be at least 1")
    max_amp = 0.0
    amp = 1.0
    freq = scale
    noise = 0.0
    for _ in range(num_iters):
        noise += noise3df(x * freq, y * freq, time) * amp
        max_amp += amp
        amp *= persistence
        freq *= 2
    noise /= max_amp
    return noise * (high - low) / 2 + int((high + low) / 2)