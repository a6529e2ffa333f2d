"""Round a float64 to the nearest float32 using only integer operations.

Import this module directly to get the same results on every interpreter,
whatever backend the package selected at import time.
"""

from .bits import (
    FLOAT32_EXPONENT_BIAS,
    FLOAT32_MAX_BIASED_EXPONENT,
    FLOAT32_NUM_SIGNIFICAND_BITS,
    FLOAT32_PINF_BITS,
    FLOAT32_QUIET_BIT,
    FLOAT64_EXPONENT_BIAS,
    FLOAT64_IMPLICIT_BIT,
    FLOAT64_MAX_BIASED_EXPONENT,
    HIGH_EXPONENT_MASK,
    HIGH_NUM_SIGNIFICAND_BITS,
    HIGH_SIGN_MASK,
    HIGH_SIGNIFICAND_MASK,
    SURPLUS_BITS,
    float32_bits_to_float64,
    to_words,
)

EXPONENT_SHIFT: int = FLOAT64_EXPONENT_BIAS - FLOAT32_EXPONENT_BIAS

# Past this many discarded bits the value is below a quarter of the smallest
# subnormal and always rounds to zero.
MAX_SUBNORMAL_SHIFT: int = 54


def round_shift_even(sig: int, dist: int) -> tuple[int, bool]:
    """Shift right by dist bits. Returns (retained, round_up) for ties-to-even."""
    retained: int = sig >> dist
    rest: int = sig & ((1 << dist) - 1)
    half: int = 1 << (dist - 1)
    if rest > half:
        return (retained, True)
    if rest == half:
        return (retained, (retained & 1) == 1)
    return (retained, False)


def float64_to_float32(x: float) -> float:
    """Return the float32 nearest to x, widened back to a float64.

    Rounds to nearest, ties to even. Values beyond the float32 range become
    signed infinity, values too small for the smallest subnormal become
    signed zero, and NaN stays NaN with its sign and leading payload bits.
    """
    high, low = to_words(x)
    sign: int = high & HIGH_SIGN_MASK
    exp: int = (high & HIGH_EXPONENT_MASK) >> HIGH_NUM_SIGNIFICAND_BITS
    sig: int = ((high & HIGH_SIGNIFICAND_MASK) << 32) | low

    if exp == FLOAT64_MAX_BIASED_EXPONENT:
        if sig == 0:
            return float32_bits_to_float64(sign | FLOAT32_PINF_BITS)
        return float32_bits_to_float64(
            sign | FLOAT32_PINF_BITS | FLOAT32_QUIET_BIT | (sig >> SURPLUS_BITS)
        )
    if exp == 0:
        # Zero, or a float64 subnormal: far below any float32.
        return float32_bits_to_float64(sign)

    exp32: int = exp - EXPONENT_SHIFT
    if exp32 >= FLOAT32_MAX_BIASED_EXPONENT:
        return float32_bits_to_float64(sign | FLOAT32_PINF_BITS)
    if exp32 >= 1:
        retained, round_up = round_shift_even(sig, SURPLUS_BITS)
    else:
        dist: int = SURPLUS_BITS + 1 - exp32
        if dist > MAX_SUBNORMAL_SHIFT:
            return float32_bits_to_float64(sign)
        retained, round_up = round_shift_even(sig | FLOAT64_IMPLICIT_BIT, dist)
        exp32 = 0

    # Packing by addition lets a mantissa carry bump the exponent.
    bits: int = (exp32 << FLOAT32_NUM_SIGNIFICAND_BITS) + retained
    if round_up:
        bits += 1
    if bits >= FLOAT32_PINF_BITS:
        bits = FLOAT32_PINF_BITS
    return float32_bits_to_float64(sign | bits)
