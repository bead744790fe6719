"""
Random sources for spawn allocation.

Every component that needs randomness takes a ``RandomSource`` argument
instead of touching a global generator, so tests can hand in a fixed
sequence and production can seed per request.
"""

import uuid
from typing import Iterable, Iterator, Optional, Protocol

from .alea_prng import AleaPRNG


class RandomSource(Protocol):
    """Anything exposing ``random() -> float`` in [0, 1)."""

    def random(self) -> float:
        ...


def create_random_source(seed: Optional[str] = None) -> AleaPRNG:
    """
    Build a fresh generator for one allocation.

    Args:
        seed: Seed string for a reproducible run. A random one is drawn
            when omitted.

    Returns:
        AleaPRNG instance
    """
    return AleaPRNG(seed if seed is not None else uuid.uuid4().hex)


class SequenceRandom:
    """Replays a fixed sequence of draws, cycling when exhausted."""

    def __init__(self, values: Iterable[float]):
        self._values = [float(v) for v in values]
        if not self._values:
            raise ValueError("SequenceRandom needs at least one value")
        for v in self._values:
            if not 0.0 <= v < 1.0:
                raise ValueError(f"Random draws must lie in [0, 1), got {v}")
        self._iter = self._cycle()
        self.calls = 0

    def _cycle(self) -> Iterator[float]:
        while True:
            yield from self._values

    def random(self) -> float:
        self.calls += 1
        return next(self._iter)
