"""Variant lookup by name or index.

Collects png2cfr.core.variants.VARIANTS into a dict keyed by name so the
CLI can restrict encoding to a single traversal (`--variant rows-ltr` or
`--variant 2`).
"""

from png2cfr.core.types import Variant
from png2cfr.core.variants import VARIANTS

_registry: dict[str, Variant] = {}


def discover() -> dict[str, Variant]:
    """Return the registry, building it on first use."""
    if not _registry:
        for variant in VARIANTS:
            _registry[variant.name] = variant
    return _registry


def get(name: str) -> Variant:
    """Get a variant by name or by index."""
    reg = discover()
    if name in reg:
        return reg[name]
    if name.isdigit():
        for variant in reg.values():
            if variant.index == int(name):
                return variant
    raise KeyError(f'Unknown variant: {name}. Available: {", ".join(reg)}')


def all_variants() -> dict[str, Variant]:
    """Return all registered variants, in index order."""
    return discover()
