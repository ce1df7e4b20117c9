"""
Calculator registry — maps calculator kind strings to calculator classes.

The polygon calculator is not registered: it returns an area, not Totals.
"""

from .footing import FootingCalculator
from .beam import BeamCalculator
from .column import ColumnCalculator
from .slab import SlabCalculator
from .masonry import MasonryCalculator
from .plaster import PlasterCalculator
from .base import BaseCalculator

CALCULATOR_REGISTRY: dict[str, type] = {
    "footing": FootingCalculator,
    "beam": BeamCalculator,
    "column": ColumnCalculator,
    "slab": SlabCalculator,
    "masonry": MasonryCalculator,
    "plaster": PlasterCalculator,
}


def get_calculator(kind: str) -> BaseCalculator:
    """Returns an instance of the calculator for a kind, or raises ValueError."""
    if kind not in CALCULATOR_REGISTRY:
        raise ValueError(
            f"No calculator registered for kind: {kind}. "
            f"Available: {list(CALCULATOR_REGISTRY.keys())}"
        )
    return CALCULATOR_REGISTRY[kind]()


def has_calculator(kind: str) -> bool:
    """Check if a calculator exists for a kind."""
    return kind in CALCULATOR_REGISTRY


def list_calculators() -> list[str]:
    """List all registered calculator kinds, in report order."""
    return list(CALCULATOR_REGISTRY.keys())
