from __future__ import annotations

import math
from typing import Union

from .errors import InvalidArgumentError

Number = Union[int, float]


def true_mod(a: Number, b: Number) -> Number:
    """
    Floor modulo: result lies in [0, b) for b > 0, whatever the sign of a.

    Unlike C-style truncating remainder, true_mod(-1, 7) == 6.
    """
    if b <= 0:
        raise InvalidArgumentError(f"modulus must be positive, got {b!r}")
    if isinstance(a, int) and isinstance(b, int):
        return a % b
    return a - b * math.floor(a / b)
