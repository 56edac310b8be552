"""png2cfr.core — Foundation layer.

Contains the palette, the colour machine, the traversal scanner, the loop
folding compressor, the variant table, configuration and report formatting.
This module has NO dependencies on png2cfr.selector or png2cfr.registry.
Only stdlib, numpy, and PIL are allowed here.
"""
