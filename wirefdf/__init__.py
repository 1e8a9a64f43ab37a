"""Height-map reading, 32-bit pixel images, XPM loading and C-style helpers."""

__version__ = "0.1.0"