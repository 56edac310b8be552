"""png2cfr — encode raster images as compact palette-machine command strings."""

__version__ = '0.1.0'
