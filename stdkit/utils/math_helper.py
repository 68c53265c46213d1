"""Rounding helpers returning plain ``int``/``float`` values."""

import math
from decimal import Decimal, ROUND_FLOOR, localcontext

from ..enumeration import RoundMode


def floor(val: int | float) -> int:
    return math.floor(float(val))


def ceil(val: int | float) -> int:
    return math.ceil(float(val))


def abs_int(val: int | float) -> int:
    return int(abs(val))


def _round_half_odd(d: Decimal, exp: Decimal) -> Decimal:
    lower = d.quantize(exp, rounding=ROUND_FLOOR)
    diff = d - lower
    half = exp / 2
    if diff < half:
        return lower
    if diff > half:
        return lower + exp
    # a tie: pick the neighbour whose last digit is odd
    return lower if (lower / exp) % 2 else lower + exp


def round(val: int | float, precision: int = 0, mode: RoundMode | str = RoundMode.HALF_UP) -> float:
    """Round to ``precision`` decimal places with an explicit tie-breaking rule.

    The value goes through its shortest ``repr`` so ``round(1.955, 2)`` is
    ``1.96`` rather than the binary-float ``1.95``. A negative ``precision``
    rounds to tens, hundreds and so on.
    """
    mode = RoundMode(mode)
    d = Decimal(repr(float(val)))
    exp = Decimal(1).scaleb(-precision)

    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, len(d.as_tuple().digits) + abs(precision) + 1)
        if mode is RoundMode.HALF_ODD:
            result = _round_half_odd(d, exp)
        else:
            result = d.quantize(exp, rounding=mode.decimal_rounding)

    return float(result)


def round_int(val: int | float) -> int:
    return int(round(val))


class MathHelper:
    """Namespace grouping the rounding helpers."""

    floor = staticmethod(floor)
    ceil = staticmethod(ceil)
    abs = staticmethod(abs_int)
    round = staticmethod(round)
    round_int = staticmethod(round_int)
