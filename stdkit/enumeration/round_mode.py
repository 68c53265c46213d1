from decimal import ROUND_HALF_DOWN, ROUND_HALF_EVEN, ROUND_HALF_UP
from enum import Enum


class RoundMode(str, Enum):
    """Tie-breaking rules for ``MathHelper.round``."""
    HALF_UP = "half_up"
    HALF_DOWN = "half_down"
    HALF_EVEN = "half_even"
    HALF_ODD = "half_odd"

    @property
    def decimal_rounding(self) -> str | None:
        # decimal has no half-odd rule
        return {
            RoundMode.HALF_UP: ROUND_HALF_UP,
            RoundMode.HALF_DOWN: ROUND_HALF_DOWN,
            RoundMode.HALF_EVEN: ROUND_HALF_EVEN,
        }.get(self)
