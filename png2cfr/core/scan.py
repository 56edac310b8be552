"""Serpentine traversal of a pixel grid into a raw command string."""

from collections.abc import Iterator

import numpy as np

from png2cfr.core.machine import ColorMachine
from png2cfr.core.types import PixelGrid, Variant

TURN_RIGHT = 'RR'
TURN_LEFT = '[RRR]'


def iter_lines(indices: np.ndarray, variant: Variant) -> Iterator[np.ndarray]:
    """Yield the palette indices of each line in visiting order, already oriented.

    Reversal parity is taken on the ordinal of the line in visiting order, not on
    its row or column number, so a descending scan starts in the same direction
    as its ascending twin whatever the grid size.
    """
    lines = indices if variant.axis == 'rows' else indices.T
    order = range(len(lines) - 1, -1, -1) if variant.descending else range(len(lines))
    for ordinal, outer in enumerate(order):
        line = lines[outer]
        if ordinal & 1 == variant.flip_col:
            line = line[::-1]
        yield line


def turn_after(ordinal: int, variant: Variant) -> str:
    """Turn token after the line visited at ordinal (visiting order, as in iter_lines)."""
    return TURN_LEFT if ordinal & 1 == variant.flip_row else TURN_RIGHT


def scan(grid: PixelGrid, variant: Variant) -> str:
    """Encode grid under one variant, without compression.

    Each pixel becomes its colour transition followed by 'F'. Between two
    lines the turn token is emitted once before and once after the first
    pixel of the new line, so the machine steps onto that line and then
    faces along it.
    """
    machine = ColorMachine()
    tokens = [variant.prefix]
    pending = ''
    lines = list(iter_lines(grid.indices, variant))
    for ordinal, line in enumerate(lines):
        for index in line:
            tokens.append(machine.step(int(index)))
            tokens.append('F')
            if pending:
                tokens.append(pending)
                pending = ''
        if ordinal < len(lines) - 1:
            pending = turn_after(ordinal, variant)
            tokens.append(pending)
    return ''.join(tokens)
