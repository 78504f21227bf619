"""Floating-point constants and checks for non-finite values."""

from __future__ import annotations

import math
import sys
from collections.abc import Iterable
from typing import Any

pi = math.pi
two_pi = 2 * pi
four_pi = 4 * pi
inv_pi = 1 / pi
inv_two_pi = 1 / (2 * pi)
inv_four_pi = 1 / (4 * pi)
epsilon = sys.float_info.epsilon
infinity = math.inf
max_float = sys.float_info.max


def is_nullish(v: Any) -> bool:
    """Return True if ``v`` is, or contains, a NaN or infinite value.

    Integers are never nullish. Objects that provide an ``is_nullish``
    method are asked directly; other iterables are checked element-wise.
    """
    if isinstance(v, bool) or isinstance(v, int):
        return False
    if isinstance(v, float):
        return math.isnan(v) or math.isinf(v)
    check = getattr(v, "is_nullish", None)
    if callable(check):
        return bool(check())
    if isinstance(v, Iterable) and not isinstance(v, (str, bytes)):
        return any(is_nullish(x) for x in v)
    try:
        f = float(v)
    except (TypeError, ValueError) as exc:
        raise TypeError(f"cannot check {type(v).__name__} for non-finite values") from exc
    return math.isnan(f) or math.isinf(f)