"""Native float32 rounding, when the interpreter provides a trustworthy one.

The candidate is the C (float) cast reached through ctypes. It is checked once,
against vectors with known IEEE 754 answers, before being offered to the
dispatcher. `fround` is None when no usable primitive exists.
"""

from __future__ import annotations

import logging
import math
from typing import Callable

logger = logging.getLogger(__name__)

# (input, expected) pairs, compared bit for bit.
PROBES: tuple[tuple[float, float], ...] = (
    (1.0, 1.0),
    (0.1, 0.10000000149011612),
    (-0.1, -0.10000000149011612),
    (1.0 + 2.0**-24, 1.0),
    (1.0 + 3.0 * 2.0**-24, 1.0 + 2.0**-22),
    (3.4028235677973366e38, math.inf),
    (1.0e40, math.inf),
    (-1.0e40, -math.inf),
    (math.inf, math.inf),
    (-math.inf, -math.inf),
    (2.0**-149, 2.0**-149),
    (2.0**-150, 0.0),
    (3.0 * 2.0**-151, 2.0**-149),
    (1.0e-46, 0.0),
)


def probe(fn: Callable[[float], float]) -> bool:
    """Check that fn rounds to nearest float32, ties to even, without raising."""
    try:
        for x, expected in PROBES:
            got = fn(x)
            if got != expected or math.copysign(1.0, got) != math.copysign(
                1.0, expected
            ):
                logger.debug(
                    "native probe failed: %r -> %r, expected %r", x, got, expected
                )
                return False
        if math.copysign(1.0, fn(-0.0)) != -1.0:
            logger.debug("native probe failed: -0.0 lost its sign")
            return False
        if not math.isnan(fn(math.nan)):
            logger.debug("native probe failed: NaN not preserved")
            return False
    except Exception as e:
        logger.debug("native probe raised %s: %s", type(e).__name__, e)
        return False
    return True


def _detect() -> Callable[[float], float] | None:
    try:
        from ctypes import c_float
    except ImportError as e:
        logger.debug("ctypes unavailable: %s", e)
        return None

    def fround(x: float) -> float:
        """Round x to float32 with the host's C cast."""
        return c_float(x).value

    if not probe(fround):
        return None
    return fround


fround: Callable[[float], float] | None = _detect()
