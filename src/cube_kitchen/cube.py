import logging
from typing import Any, Optional

from .clock import AsyncioClock
from .state import DELAY_MS, SEED_VALUE, MULTIPLIER

log = logging.getLogger(__name__)


class Cube:
    """
    A cube of a given edge length.

    The length is stored as given and never changes, so every derived
    quantity is recomputed from it on demand. No validation is done: a
    negative length keeps its sign in the volume, while the surface area
    is squared and stays positive.
    """

    def __init__(self, length: Any, clock: Optional[Any] = None):
        self._length = length
        self._clock = clock if clock is not None else AsyncioClock()

    @property
    def length(self) -> Any:
        return self._length

    def __repr__(self) -> str:
        return f"Cube(length={self._length!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Cube):
            return NotImplemented
        return self._length == other._length

    def __hash__(self) -> int:
        return hash((Cube, self._length))

    def add(self, num1, num2):
        return num1 + num2

    def call_another_method(self, num1, num2):
        """Delegates to `add` through the instance so the call can be observed."""
        return self.add(num1, num2)

    def get_side_length(self):
        return self._length

    def get_surface_area(self):
        return (self._length * self._length) * 6

    def get_volume(self):
        return self._length ** 3

    async def delayed_value(self) -> int:
        """
        Waits DELAY_MS on the cube's clock, then doubles the produced value.

        Resolves with 6 once the delay has elapsed; there is no failure path.
        """
        log.debug(f"{self!r}: waiting {DELAY_MS} ms for the deferred value")
        await self._clock.sleep(DELAY_MS)
        result = SEED_VALUE
        return result * MULTIPLIER
