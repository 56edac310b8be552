"""Encode a grid under every traversal variant and keep the shortest result.

Variants are independent of each other: each gets its own colour machine and
only reads the grid. With jobs > 1 they are spread over a process pool; the
choice is the same as the serial run because candidates are re-ordered by
variant index before comparing.
"""

from collections.abc import Iterable
from concurrent.futures import ProcessPoolExecutor, as_completed

from png2cfr.core.compress import compress
from png2cfr.core.scan import scan
from png2cfr.core.types import Candidate, PixelGrid, Variant
from png2cfr.core.variants import VARIANTS


def encode_variant(grid: PixelGrid, variant: Variant) -> Candidate:
    raw = scan(grid, variant)
    return Candidate(variant=variant, raw=raw, compressed=compress(raw))


def encode_all(grid: PixelGrid, variants: Iterable[Variant] = VARIANTS, jobs: int = 1) -> list[Candidate]:
    """Encode every variant. Returned in variant index order."""
    variants = list(variants)
    if jobs <= 1 or len(variants) <= 1:
        results = [encode_variant(grid, v) for v in variants]
    else:
        # Build the quantised index grid once so workers receive it pickled
        grid.indices  # noqa: B018
        results = []
        with ProcessPoolExecutor(max_workers=min(jobs, len(variants))) as pool:
            futs = [pool.submit(encode_variant, grid, v) for v in variants]
            for fut in as_completed(futs):
                results.append(fut.result())
    return sorted(results, key=lambda c: c.variant.index)


def pick_best(candidates: Iterable[Candidate]) -> Candidate:
    """Fewest tokens wins; ties go to the lowest variant index."""
    return min(candidates, key=lambda c: (c.length, c.variant.index))


def select_best(grid: PixelGrid, variants: Iterable[Variant] = VARIANTS, jobs: int = 1) -> Candidate:
    return pick_best(encode_all(grid, variants, jobs))
