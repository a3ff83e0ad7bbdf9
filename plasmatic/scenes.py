"""The demo scenes, each rendering whole frames of 8-bit palette indices."""

from __future__ import annotations

import math
import random
from collections.abc import Iterator

from plasmatic import perlin
from plasmatic.dither import dither_level
from plasmatic.greetz import GREETZ_WIDTH, greetz_bitmap
from plasmatic.valuenoise import SinTable, pnoise3d

X_RES = 320
Y_RES = 200
MARGIN = 32
"""Width of the blank border around the drawn area."""

GREETZ_GAP = 128
"""Blank columns added after the greetings text before it repeats."""
GREETZ_SCROLL = 5
"""Columns the greetings text scrolls by each frame."""
GREETZ_WIGGLE = 15.0
"""Largest vertical displacement of the greetings text, in pixels."""

NOISE_STEP = 0.005
NOISE_PERSISTENCE = 0.7
NOISE_OCTAVES = 1

TEXT_ON = 10
TEXT_OFF = 1

FRAME_SIZE = X_RES * Y_RES


def _display_rows() -> Iterator[int]:
    return iter(range(MARGIN, Y_RES - MARGIN))


def _display_columns() -> range:
    return range(MARGIN, X_RES - MARGIN)


class PlasmaScene:
    """Dithered value-noise plasma, optionally cut out by scrolling greetings text."""

    def __init__(self, seed: int | None = None) -> None:
        self.seed = random.randrange(32768) if seed is None else seed
        self.table = SinTable(512)
        self.bitmap = greetz_bitmap()
        self.framebuffer = bytearray(FRAME_SIZE)
        self.mask = bytearray(FRAME_SIZE)
        self.show_greetz = False
        self.greetz_offset = 0
        self.demotime = 0

    def toggle_greetz(self) -> bool:
        """Switch the greetings text on or off; return whether it is now shown."""
        self.show_greetz = not self.show_greetz
        return self.show_greetz

    def update_mask(self) -> None:
        """Recompute the draw mask: 0 where the plasma is hidden, 255 where it shows."""
        if not self.show_greetz:
            self.mask[:] = b"\xff" * FRAME_SIZE
            return

        greetz_y = int(self.table.sin(self.demotime / 10.0) * GREETZ_WIGGLE)
        period = GREETZ_WIDTH + GREETZ_GAP
        columns = _display_columns()
        for y in _display_rows():
            ty = y - MARGIN - greetz_y
            start = y * X_RES + MARGIN
            self.mask[start : start + len(columns)] = bytes(
                255 if self.bitmap.get_pixel((x - MARGIN + self.greetz_offset) % period, ty) else 0
                for x in columns
            )

        self.greetz_offset += GREETZ_SCROLL
        if self.greetz_offset > GREETZ_WIDTH:
            self.greetz_offset = 0

    def render(self) -> bytes:
        """Advance one frame and return it as palette indices, row-major."""
        self.update_mask()
        fb = self.framebuffer
        mask = self.mask
        z = self.demotime * NOISE_STEP
        for y in _display_rows():
            row = y * X_RES
            fy = y * NOISE_STEP
            for x in _display_columns():
                index = row + x
                if not mask[index]:
                    fb[index] = 0
                    continue
                value = pnoise3d(
                    x * NOISE_STEP, fy, z, NOISE_PERSISTENCE, NOISE_OCTAVES, self.seed, self.table
                )
                fb[index] = dither_level(value, x, y) & 0xFF
        self.demotime += 1
        return bytes(fb)


class NoiseScene:
    """Raw fixed-point Perlin noise over the whole screen, drifting through time."""

    def __init__(self) -> None:
        self.time = 0

    def render(self) -> bytes:
        """Advance one frame and return it as palette indices, row-major."""
        frame = bytearray(FRAME_SIZE)
        t = self.time
        for y in range(Y_RES):
            row = y * X_RES
            for x in range(X_RES):
                noise = perlin.noise3d(x, y, t)
                frame[row + x] = int(math.fmod(noise, 255)) & 0xFF
        self.time += 1
        return bytes(frame)


class TextScene:
    """The greetings bitmap drawn in two colours in the middle of the screen."""

    def __init__(self) -> None:
        self.bitmap = greetz_bitmap()

    def render(self) -> bytes:
        """Return the frame as palette indices, row-major."""
        frame = bytearray(FRAME_SIZE)
        for y, row in enumerate(self.bitmap.pixels(), start=MARGIN):
            if y >= Y_RES - MARGIN:
                break
            start = y * X_RES + MARGIN
            width = min(len(row), X_RES - 2 * MARGIN)
            frame[start : start + width] = bytes(
                TEXT_ON if pixel else TEXT_OFF for pixel in row[:width]
            )
        return bytes(frame)