"""Mersenne Twister (MT19937) generator for repeatable 32-bit draws."""

from __future__ import annotations

import enum
import logging
import time
from typing import List, Union

from .bits import UINT32_MAX, next_power_of_two, temper, to_uint32, twist

logger = logging.getLogger(__name__)


class TimeSeed(enum.Enum):
    """Tag requesting a wall-clock seed instead of an explicit value."""

    TIME = "time"


TIME = TimeSeed.TIME

# Knuth TAOCP Vol 2, 3rd Ed, p.106 multiplier
_INIT_MULTIPLIER = 1812433253


class MTRand:
    """Mersenne twister random number generator.

    ``MTRand(seed)`` gives a sequence fully determined by ``seed``;
    ``MTRand(TIME)`` seeds from the current time at second resolution, which
    is neither reproducible across runs nor suitable for anything
    security related.

    Every draw mutates the generator in place. Instances are not thread
    safe: callers sharing one across threads must serialize access
    themselves, or give each thread its own generator.
    """

    N = 624  # length of state vector
    M = 397

    def __init__(self, seed: Union[int, TimeSeed] = 0) -> None:
        self._state: List[int] = [0] * self.N
        self._cursor = 0
        self._remaining = 0
        self._last_seed = 0
        if seed is TIME:
            seed = int(time.time())
            logger.debug("Seeding from wall clock: %d", seed)
        self.seed(seed)

    def seed(self, value: int) -> None:
        """Provide a new seed and refresh so the next draw is ready."""
        self._initialize(value)
        self._reload()

    @property
    def last_seed(self) -> int:
        """Seed most recently applied, reduced to 32 bits."""
        return self._last_seed

    def reseed(self, value: int) -> None:
        """Re-arm the generator with the sequence for ``value``."""
        logger.debug("Reseeding with %d", to_uint32(value))
        self.seed(value)

    def next(self) -> int:
        """Next raw value on the [0, 0xFFFFFFFF] interval."""
        if self._remaining == 0:
            self._reload()
        self._remaining -= 1
        y = self._state[self._cursor]
        self._cursor += 1
        return temper(y)

    def next_in_range(self, max_value: int) -> int:
        """Uniform value on the inclusive [0, max_value] interval."""
        if max_value < 0 or max_value > UINT32_MAX:
            raise ValueError(
                f"max_value must be within [0, {UINT32_MAX:#x}], got {max_value}"
            )
        if max_value == 0:
            return 0
        if max_value == UINT32_MAX:
            return self.next()
        mask = next_power_of_two(max_value + 1) - 1
        while True:
            n = self.next() & mask
            if n <= max_value:
                return n

    def __iter__(self) -> "MTRand":
        return self

    def __next__(self) -> int:
        return self.next()

    def _initialize(self, seed: int) -> None:
        state = self._state
        self._last_seed = to_uint32(seed)
        state[0] = self._last_seed
        for i in range(1, self.N):
            prev = state[i - 1]
            state[i] = to_uint32(_INIT_MULTIPLIER * (prev ^ (prev >> 30)) + i)

    def _reload(self) -> None:
        # Three ranges so no index wraps: i+M stays in range for the first,
        # i+M-N for the second, and the last word pairs with state[0].
        state = self._state
        n, m = self.N, self.M
        for i in range(n - m):
            state[i] = twist(state[i + m], state[i], state[i + 1])
        for i in range(n - m, n - 1):
            state[i] = twist(state[i + m - n], state[i], state[i + 1])
        state[n - 1] = twist(state[m - 1], state[n - 1], state[0])
        self._cursor = 0
        self._remaining = n
