"""The eight traversal variants.

The machine starts facing up and 'R' turns it by an eighth, so 'RR' is a
right angle to the right and '[RRR]' a right angle to the left. Each variant
pairs a start corner and first walking direction with the prefix that faces
the machine along it and with the turn parity that keeps it on the grid at
the end of every line.

Ordered by prefix length so that ties go to the least initial turning.
Index 2 is the original left-to-right, top-to-bottom serpentine scan.
"""

from png2cfr.core.types import Variant

VARIANTS: tuple[Variant, ...] = (
    Variant(0, 'cols-up', 'cols', descending=False, flip_row=1, flip_col=0, prefix=''),
    Variant(1, 'cols-up-rev', 'cols', descending=True, flip_row=0, flip_col=0, prefix=''),
    Variant(2, 'rows-ltr', 'rows', descending=False, flip_row=1, flip_col=1, prefix='RR'),
    Variant(3, 'rows-ltr-rev', 'rows', descending=True, flip_row=0, flip_col=1, prefix='RR'),
    Variant(4, 'cols-down', 'cols', descending=False, flip_row=0, flip_col=1, prefix='[RR]'),
    Variant(5, 'cols-down-rev', 'cols', descending=True, flip_row=1, flip_col=1, prefix='[RR]'),
    Variant(6, 'rows-rtl', 'rows', descending=False, flip_row=0, flip_col=0, prefix='[RRR]'),
    Variant(7, 'rows-rtl-rev', 'rows', descending=True, flip_row=1, flip_col=0, prefix='[RRR]'),
)
