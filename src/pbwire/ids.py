"""Sequence number generators for outgoing packets.

Each outgoing message carries two 32-bit sequence numbers. The generator is
injectable: RandomSequence matches the usual uncoordinated behaviour (values
may collide across concurrent sends), CounterSequence gives reproducible
values for tests or a monotonic scheme for production.
"""

from __future__ import annotations

import itertools
import random
from abc import ABC, abstractmethod
from typing import Optional

from .codec.wire import VARINT_MASK


class SequenceGenerator(ABC):
    """Source of 32-bit packet sequence numbers."""

    @abstractmethod
    def next(self) -> int:
        """Return the next sequence number in ``[0, 2**32 - 1]``."""


class RandomSequence(SequenceGenerator):
    """Pseudo-random sequence numbers with no collision tracking."""

    def __init__(self, rng: Optional[random.Random] = None) -> None:
        self._rng = rng if rng is not None else random.Random()

    def next(self) -> int:
        return self._rng.randrange(VARINT_MASK + 1)


class CounterSequence(SequenceGenerator):
    """Monotonic sequence numbers wrapping at 2**32.

    Example:
        >>> seq = CounterSequence(start=7)
        >>> seq.next(), seq.next()
        (7, 8)
    """

    def __init__(self, start: int = 0) -> None:
        self._counter = itertools.count(start)

    def next(self) -> int:
        return next(self._counter) & VARINT_MASK
