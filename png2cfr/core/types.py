"""Shared types for png2cfr: PixelGrid, Variant, Candidate, Report."""

from __future__ import annotations

from dataclasses import dataclass, field
from functools import cached_property

import numpy as np
from PIL import Image

from png2cfr.core.palette import RGB, quantize


@dataclass(frozen=True, eq=False)
class PixelGrid:
    """Read-only RGB pixel grid backed by a (height, width, 3) uint8 array."""

    pixels: np.ndarray

    @classmethod
    def from_image(cls, image: Image.Image) -> PixelGrid:
        """Build a grid from any Pillow image. Alpha and palettes are flattened to RGB."""
        return cls(np.array(image.convert('RGB')))

    @classmethod
    def from_rows(cls, rows: list[list[RGB]]) -> PixelGrid:
        """Build a grid from nested lists of RGB triples, one list per row."""
        return cls(np.array(rows, dtype=np.uint8).reshape(len(rows), -1, 3))

    @property
    def width(self) -> int:
        return int(self.pixels.shape[1])

    @property
    def height(self) -> int:
        return int(self.pixels.shape[0])

    def at(self, x: int, y: int) -> RGB:
        px = self.pixels[y, x]
        return (int(px[0]), int(px[1]), int(px[2]))

    @cached_property
    def indices(self) -> np.ndarray:
        """Palette index of every pixel, shape (height, width)."""
        return quantize(self.pixels)


@dataclass(frozen=True)
class Variant:
    """One traversal order of the grid.

    axis: 'rows' walks lines of constant y, 'cols' lines of constant x.
    descending: visit lines starting from the far edge.
    flip_row: line ordinal parity that selects the '[RRR]' turn instead of 'RR'.
    flip_col: line ordinal parity that reverses the walking direction.
    prefix: literal orientation tokens emitted before the first pixel.
    """

    index: int
    name: str
    axis: str
    descending: bool
    flip_row: int
    flip_col: int
    prefix: str


@dataclass(frozen=True)
class Candidate:
    """Raw and compressed encodings of a grid under one variant."""

    variant: Variant
    raw: str
    compressed: str

    @property
    def length(self) -> int:
        return len(self.compressed)


@dataclass
class Report:
    """Collects the candidates of one image for text/JSON output."""

    image_path: str = ''
    image_width: int = 0
    image_height: int = 0
    candidates: list[Candidate] = field(default_factory=list)
    best: Candidate | None = None

    def add(self, candidate: Candidate) -> None:
        self.candidates.append(candidate)
