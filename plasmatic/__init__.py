"""Noise plasma, fixed-point Perlin noise, Bayer dithering and a greetz bitmap for a 320x200 screen."""

__version__ = "0.1.0"
__all__ = ["__version__"]