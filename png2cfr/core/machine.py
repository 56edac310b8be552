"""Colour machine: tracks the current palette state and emits 'C' runs.

The machine can only step its colour forward around the 8-colour ring, so
moving to a lower index wraps past white.
"""

from png2cfr.core.palette import PALETTE_SIZE, RGB, nearest_index

INITIAL_STATE = 7


class ColorMachine:
    """Per-traversal colour state. Never share one instance between variants."""

    def __init__(self, state: int = INITIAL_STATE):
        self.state = state

    @staticmethod
    def classify(rgb: RGB) -> int:
        return nearest_index(rgb)

    def step(self, index: int) -> str:
        """Move to palette index and return the 'C' tokens that get there."""
        if index > self.state:
            run = index - self.state
        elif index < self.state:
            run = PALETTE_SIZE - self.state + index
        else:
            run = 0
        self.state = index
        return 'C' * run

    def emit(self, rgb: RGB) -> str:
        return self.step(self.classify(rgb))
