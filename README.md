# plasmatic

Small demoscene effects drawn into a 320x200 frame of 8-bit palette indices
and shown, scaled up three times, in a pygame window with the default
256-colour VGA palette:

- a value-noise plasma with 4x4 Bayer dithering, which a scrolling,
  wobbling greetz bitmap can cut out;
- a fixed-point Perlin noise field drifting through time;
- the greetz bitmap drawn on its own.

## Installing

```
pip install .
```

## Running

```
plasmatic [DEMO] [--seed SEED]
```

`DEMO` is one of:

- `plasma` (the default): the dithered plasma. Press `h` to show or hide the
  greetz text and `Esc` (or close the window) to quit. `--seed` fixes the
  noise seed; without it a random one is chosen.
- `noise`: the raw Perlin noise field.
- `text`: the greetz bitmap in two colours in the middle of the screen.
- `keys`: opens a small window, waits for one key press and prints the
  character and its code.
- `hello` and `whatev`: print a short line and exit.

Run `plasmatic --help` for the list.

## Using the pieces

```python
from plasmatic.perlin import noise3d, noise3df, sum_octaves
from plasmatic.valuenoise import SinTable, pnoise3d
from plasmatic.dither import dither_level
from plasmatic.greetz import greetz_bitmap

table = SinTable(512)
value = pnoise3d(0.5, 0.25, 0.0, 0.7, 1, 1234, table)
level = dither_level(value, 10, 20)  # a value in [0, 1] becomes a level 0..255

bitmap = greetz_bitmap()
print(bitmap.get_pixel(40, 60))  # 0 or 1; outside the image it is 0

print(noise3d(1 << 15, 1 << 15, 0))  # fixed point, 1.0 == 65536
print(noise3df(0.5, 0.5, 0.0))
```

- `plasmatic.perlin`: `lerp`, `grad`, `fade`, `noise3d` (fixed point),
  `noise3df` (floats) and `sum_octaves`, which maps summed octaves onto a
  `[low, high]` range.
- `plasmatic.valuenoise`: `SinTable` (table-driven `sin`/`cos`), `raw_noise`,
  `noise3d`, `interpolate`, `smooth3d` and `pnoise3d`.
- `plasmatic.dither`: `bayer_threshold` and `dither_level`.
- `plasmatic.greetz`: `Bitmap`, a one-bit image packed into 64-bit words
  (`get_pixel`, `pixels`), and `greetz_bitmap()`, the 256x136 greetings text.
- `plasmatic.raster`: `Point` and `interpolate`, which lists the dependent
  values for each unit step between two points.
- `plasmatic.scenes`: `PlasmaScene`, `NoiseScene` and `TextScene`, each
  returning one frame of `bytes` per call to `render()`.
- `plasmatic.app`: `vga_palette()`, `run_scene(scene, title)` and `main`.

## What it does not do

There is no line drawing or 3D rendering; `plasmatic.raster` only offers the
interpolation step. Frames are shown through pygame, not written to VGA
memory, and there is no way to save them to files.

## Tests

```
pip install .[test]
pytest
```