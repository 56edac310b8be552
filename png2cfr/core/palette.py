"""The fixed 8-colour palette and nearest-colour lookup.

Indices follow the machine's colour ring: stepping the state forward by one
moves to the next entry, wrapping from white back to black.
"""

import numpy as np

RGB = tuple[int, int, int]

PALETTE: tuple[RGB, ...] = (
    (0, 0, 0),
    (0, 0, 255),
    (0, 255, 0),
    (0, 255, 255),
    (255, 0, 0),
    (255, 0, 255),
    (255, 255, 0),
    (255, 255, 255),
)

PALETTE_SIZE = len(PALETTE)


def rgb_distance(a: RGB, b: RGB) -> int:
    """Squared Euclidean distance between two RGB triples."""
    # int() guards against numpy uint8 wrap-around on subtraction
    dr = int(a[0]) - int(b[0])
    dg = int(a[1]) - int(b[1])
    db = int(a[2]) - int(b[2])
    return dr * dr + dg * dg + db * db


def nearest_index(rgb: RGB) -> int:
    """Palette index closest to rgb. The first minimum in palette order wins."""
    best, best_dist = 0, -1
    for i, colour in enumerate(PALETTE):
        dist = rgb_distance(rgb, colour)
        if best_dist == -1 or dist < best_dist:
            best, best_dist = i, dist
    return best


def quantize(pixels: np.ndarray) -> np.ndarray:
    """Vectorised nearest_index over an (..., 3) array. Returns int indices of shape (...)."""
    arr = pixels[..., :3].astype(np.int64)
    ref = np.array(PALETTE, dtype=np.int64)
    dists = ((arr[..., np.newaxis, :] - ref) ** 2).sum(axis=-1)
    # argmin returns the first occurrence, matching nearest_index tie-breaking
    return dists.argmin(axis=-1)
