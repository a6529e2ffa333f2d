"""Round double-precision floats to the nearest single-precision value.

`float64_to_float32` is bound once, at import: to the interpreter's native
float32 cast when it passes the probe in `f32round.native`, otherwise to the
integer polyfill in `f32round.polyfill`. Set F32ROUND_FORCE_POLYFILL=1 to
always use the polyfill.
"""

from __future__ import annotations

import logging
from typing import Callable

from . import native, polyfill
from .bits import (
    FLOAT32_MAX,
    FLOAT32_SMALLEST_SUBNORMAL,
    float32_bits_to_float64,
    from_words,
    to_words,
)
from .config import settings

logger = logging.getLogger(__name__)


def resolve(
    fround: Callable[[float], float] | None,
) -> Callable[[float], float]:
    """Pick the conversion function: fround itself if given, else the polyfill."""
    if fround is not None:
        return fround
    return polyfill.float64_to_float32


float64_to_float32: Callable[[float], float] = resolve(
    None if settings.force_polyfill else native.fround
)
BACKEND: str = (
    "polyfill" if float64_to_float32 is polyfill.float64_to_float32 else "native"
)
logger.debug("float64_to_float32 backend: %s", BACKEND)

__all__ = [
    "BACKEND",
    "FLOAT32_MAX",
    "FLOAT32_SMALLEST_SUBNORMAL",
    "float32_bits_to_float64",
    "float64_to_float32",
    "from_words",
    "resolve",
    "to_words",
]
