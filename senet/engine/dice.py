"""
Senet - Throwing Sticks

Turns a uniform [0, 1) random source into a stick throw of 1-4. The four
outcomes are equally likely; the historical stick-count weighting is not
modelled.
"""

import math
import random
from typing import Callable, ClassVar

RandomSource = Callable[[], float]


class StickThrow:
    """Maps an injected random source onto throw values."""

    FACES: ClassVar[int] = 4

    def __init__(self, source: RandomSource | None = None) -> None:
        self.source: RandomSource = source if source is not None else random.random

    def throw(self) -> int:
        """
        Draw one value from the source and convert it.

        Returns:
            Throw value between 1 and 4

        Raises:
            ValueError: If the source returns a value outside [0, 1)
        """
        r = self.source()
        if not (0.0 <= r < 1.0):
            raise ValueError(f"Random source must return a value in [0, 1), got {r}")
        return math.floor(r * self.FACES) + 1

    @classmethod
    def seeded(cls, seed: int) -> "StickThrow":
        """Build a reproducible thrower from an integer seed."""
        return cls(random.Random(seed).random)
