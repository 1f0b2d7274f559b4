"""
PcgRandom - Deterministic Random Number Generator

TigerStyle: All randomness is seeded and reproducible.
Implements PCG-XSH-RR with 64-bit state and 32-bit output
(http://www.pcg-random.org/). Python ints are unbounded, so every
state update is masked back to 64 bits to get the wraparound the
algorithm depends on.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from ..core.constants import (
    PCG_MULTIPLIER,
    PCG_OUTPUT_MASK,
    PCG_OUTPUT_RANGE,
    PCG_SEED_MAX,
    PCG_SEQUENCE_DEFAULT,
    PCG_STATE_MASK,
)


@dataclass
class PcgRandom:
    """Permuted congruential generator.

    TigerStyle:
    - Same (seed, sequence) always yields the same stream
    - Every draw mutates state; one owner only, no locking
    - Never use global random state
    """

    _seed: int = 0
    _sequence: int = PCG_SEQUENCE_DEFAULT
    _state: int = field(default=0, init=False, repr=False)
    _increment: int = field(default=1, init=False, repr=False)
    _draws_count: int = field(default=0, init=False)

    def __post_init__(self) -> None:
        """Seed the generator with the standard two-step PCG procedure."""
        if not 0 <= self._seed <= PCG_SEED_MAX:
            raise ValueError(f"seed ({self._seed}) must be an unsigned 32-bit value")
        if not 0 <= self._sequence <= PCG_SEED_MAX:
            raise ValueError(f"sequence ({self._sequence}) must be an unsigned 32-bit value")

        self._state = 0
        self._increment = ((self._sequence << 1) | 1) & PCG_STATE_MASK
        self._step()
        self._state = (self._state + self._seed) & PCG_STATE_MASK
        self._step()

        # Warm-up draws are not counted
        self._draws_count = 0

        # Postcondition
        assert self._increment & 1 == 1, "increment must be odd"

    @property
    def seed(self) -> int:
        """Get the original seed."""
        return self._seed

    @property
    def sequence(self) -> int:
        """Get the stream selector."""
        return self._sequence

    def _step(self) -> int:
        old = self._state
        self._state = (old * PCG_MULTIPLIER + self._increment) & PCG_STATE_MASK

        xorshifted = (((old >> 18) ^ old) >> 27) & PCG_OUTPUT_MASK
        rot = old >> 59
        return ((xorshifted >> rot) | (xorshifted << ((-rot) & 31))) & PCG_OUTPUT_MASK

    def next_uint32(self) -> int:
        """Generate a uniformly distributed integer in [0, 2**32)."""
        self._draws_count += 1
        return self._step()

    def uint_less_than(self, n: int) -> int:
        """Generate an unsigned integer in [0, n).

        Plain modulo reduction, so large n carry a slight bias.

        Raises:
            ValueError: If n is not in [1, 2**32].
        """
        if not 0 < n <= PCG_OUTPUT_RANGE:
            raise ValueError(f"n ({n}) must be in [1, {PCG_OUTPUT_RANGE}]")
        return self.next_uint32() % n

    def int_less_than(self, n: int) -> int:
        """Generate an integer in [0, n). Same draw as uint_less_than."""
        return self.uint_less_than(n)

    def double_in_unit_interval(self) -> float:
        """Generate a float in [0.0, 1.0)."""
        return self.next_uint32() / PCG_OUTPUT_RANGE

    def double_less_than(self, limit: float) -> float:
        """Generate a float in [0.0, limit)."""
        return self.double_in_unit_interval() * limit

    def draws_count(self) -> int:
        """Get the number of values drawn since seeding."""
        return self._draws_count
